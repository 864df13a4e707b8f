from tests.factories import make_comment


def make_child(client, comment_id, user_id, content="reply"):
    resp = client.post(f"/api/child-comments/{comment_id}/{user_id}", json={"content": content})
    assert resp.status_code == 200, resp.text
    return resp.json()


class TestComments:

    def test_create_and_read_thread(self, client, user, other_user, post):
        comment = make_comment(client, post["id"], user["id"])
        assert comment["postId"] == post["id"]
        assert comment["userId"] == user["id"]

        make_child(client, comment["id"], other_user["id"])

        body = client.get(f"/api/comments/{comment['id']}").json()
        assert body["content"] == "nice post"
        assert body["user"]["id"] == user["id"]
        assert [child["userId"] for child in body["childComments"]] == [other_user["id"]]

    def test_create_unknown_post(self, client, user):
        resp = client.post(f"/api/comments/999/{user['id']}", json={"content": "x"})
        assert resp.status_code == 404

    def test_empty_content_rejected(self, client, user, post):
        resp = client.post(f"/api/comments/{post['id']}/{user['id']}", json={"content": ""})
        assert resp.status_code == 422

    def test_list_by_post(self, client, user, post):
        first = make_comment(client, post["id"], user["id"], "first")
        second = make_comment(client, post["id"], user["id"], "second")

        body = client.get(f"/api/comments/post/{post['id']}").json()
        assert body["count"] == 2
        assert [c["id"] for c in body["data"]] == [second["id"], first["id"]]
        assert body["data"][0]["childComments"] == []

        assert client.get("/api/comments/post/999").status_code == 404

    def test_only_owner_updates(self, client, user, other_user, post):
        comment = make_comment(client, post["id"], user["id"])

        resp = client.put(f"/api/comments/{comment['id']}/{other_user['id']}", json={"content": "hacked"})
        assert resp.status_code == 400

        resp = client.put(f"/api/comments/{comment['id']}/{user['id']}", json={"content": "edited"})
        assert resp.status_code == 200
        assert resp.json()["content"] == "edited"

    def test_owner_delete_removes_children(self, client, user, other_user, post):
        comment = make_comment(client, post["id"], user["id"])
        child = make_child(client, comment["id"], other_user["id"])

        assert client.delete(f"/api/comments/{comment['id']}/{other_user['id']}").status_code == 400
        assert client.delete(f"/api/comments/{comment['id']}/{user['id']}").status_code == 204
        assert client.get(f"/api/comments/{comment['id']}").status_code == 404
        assert client.get(f"/api/child-comments/{child['id']}").status_code == 404

    def test_admin_delete(self, client, user, post):
        comment = make_comment(client, post["id"], user["id"])
        assert client.delete(f"/api/comments/admin/{comment['id']}").status_code == 204
        assert client.get(f"/api/comments/{comment['id']}").status_code == 404


class TestChildComments:

    def test_list_by_comment(self, client, user, other_user, post):
        comment = make_comment(client, post["id"], user["id"])
        make_child(client, comment["id"], user["id"], "one")
        make_child(client, comment["id"], other_user["id"], "two")

        body = client.get(f"/api/child-comments/comment/{comment['id']}").json()
        assert body["count"] == 2
        assert [c["content"] for c in body["data"]] == ["two", "one"]
        assert body["data"][0]["user"]["id"] == other_user["id"]

    def test_create_under_unknown_comment(self, client, user):
        resp = client.post(f"/api/child-comments/999/{user['id']}", json={"content": "x"})
        assert resp.status_code == 404

    def test_update_and_delete(self, client, user, other_user, post):
        comment = make_comment(client, post["id"], user["id"])
        child = make_child(client, comment["id"], other_user["id"])

        url_owner = f"/api/child-comments/{child['id']}/{other_user['id']}"
        url_other = f"/api/child-comments/{child['id']}/{user['id']}"

        assert client.put(url_other, json={"content": "no"}).status_code == 400
        assert client.put(url_owner, json={"content": "yes"}).json()["content"] == "yes"
        assert client.delete(url_other).status_code == 400
        assert client.delete(url_owner).status_code == 204
        assert client.get(f"/api/child-comments/{child['id']}").status_code == 404

    def test_admin_delete(self, client, user, post):
        comment = make_comment(client, post["id"], user["id"])
        child = make_child(client, comment["id"], user["id"])
        assert client.delete(f"/api/child-comments/admin/{child['id']}").status_code == 204
        assert client.delete(f"/api/child-comments/admin/{child['id']}").status_code == 204
