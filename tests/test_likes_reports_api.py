from tests.factories import make_comment


class TestLikePosts:

    def test_like_status_and_unlike(self, client, user, post):
        url = f"/api/like-posts/{post['id']}/{user['id']}"

        resp = client.post(url)
        assert resp.status_code == 200
        assert resp.json()["postId"] == post["id"]

        status = client.get(url).json()
        assert status == {"postId": post["id"], "userId": user["id"], "liked": True, "count": 1}

        assert client.delete(url).status_code == 204
        assert client.get(url).json()["liked"] is False
        assert client.delete(url).status_code == 404

    def test_repeated_likes_are_kept(self, client, user, post):
        url = f"/api/like-posts/{post['id']}/{user['id']}"
        client.post(url)
        client.post(url)

        body = client.get(f"/api/like-posts/post/{post['id']}").json()
        assert body["count"] == 2
        assert body["data"][0]["user"]["id"] == user["id"]

        # 取消点赞会删掉该用户的全部点赞
        assert client.delete(url).status_code == 204
        assert client.get(f"/api/like-posts/post/{post['id']}").json()["count"] == 0

    def test_like_unknown_post_or_user(self, client, user, post):
        assert client.post(f"/api/like-posts/999/{user['id']}").status_code == 404
        assert client.post(f"/api/like-posts/{post['id']}/999").status_code == 404
        assert client.get("/api/like-posts/post/999").status_code == 404


class TestReports:

    def test_post_report_lifecycle(self, client, user, other_user, post):
        resp = client.post(f"/api/report-posts/{post['id']}/{other_user['id']}", json={"reason": "spam"})
        assert resp.status_code == 200
        report = resp.json()
        assert report["target"] == "post"
        assert report["targetId"] == post["id"]
        assert report["userId"] == other_user["id"]
        assert report["reason"] == "spam"

        body = client.get("/api/report-posts").json()
        assert body["count"] == 1
        assert body["data"][0]["user"]["id"] == other_user["id"]

        assert client.get(f"/api/report-posts/{report['id']}").json()["reason"] == "spam"
        assert client.delete(f"/api/report-posts/{report['id']}").status_code == 204
        assert client.get(f"/api/report-posts/{report['id']}").status_code == 404
        assert client.delete(f"/api/report-posts/{report['id']}").status_code == 404

    def test_report_unknown_target(self, client, user):
        resp = client.post(f"/api/report-posts/999/{user['id']}", json={"reason": "spam"})
        assert resp.status_code == 404
        assert resp.json()["message"] == "post 999 not found"

        resp = client.post(f"/api/report-comments/999/{user['id']}", json={"reason": "spam"})
        assert resp.status_code == 404
        assert resp.json()["message"] == "comment 999 not found"

    def test_comment_and_child_comment_reports(self, client, user, other_user, post):
        comment = make_comment(client, post["id"], user["id"])
        child = client.post(f"/api/child-comments/{comment['id']}/{user['id']}", json={"content": "r"}).json()

        report = client.post(
            f"/api/report-comments/{comment['id']}/{other_user['id']}", json={"reason": "rude"}
        ).json()
        assert report["target"] == "comment"
        assert report["targetId"] == comment["id"]

        report = client.post(
            f"/api/report-child-comments/{child['id']}/{other_user['id']}", json={"reason": "rude"}
        ).json()
        assert report["target"] == "child-comment"
        assert report["targetId"] == child["id"]

        # 三种举报互不影响
        assert client.get("/api/report-posts").json()["count"] == 0
        assert client.get("/api/report-comments").json()["count"] == 1
        assert client.get("/api/report-child-comments").json()["count"] == 1

    def test_reports_removed_with_target(self, client, user, other_user, post):
        client.post(f"/api/report-posts/{post['id']}/{other_user['id']}", json={"reason": "spam"})
        client.delete(f"/api/admin/post/{post['id']}")
        assert client.get("/api/report-posts").json()["count"] == 0
