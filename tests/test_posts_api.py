from tests.factories import make_user, make_category, make_post, make_comment


def full_update(**overrides):
    body = {
        "title": "Updated Title",
        "description": None,
        "content": "new body",
        "image": None,
        "promoted": False,
        "vip": False,
        "readTime": 7,
        "postsCategoryId": None,
    }
    body.update(overrides)
    return body


class TestCreatePost:

    def test_create_generates_slug_and_owner(self, client, user, category):
        body = make_post(client, user["id"], "Hello World!", postsCategoryId=category["id"])
        assert body["slug"] == "hello-world"
        assert body["userId"] == user["id"]
        assert body["postsCategoryId"] == category["id"]
        assert body["promoted"] is False
        assert body["vip"] is False

    def test_create_unknown_user(self, client):
        resp = client.post("/api/post/999", json={"title": "t", "content": "c"})
        assert resp.status_code == 404
        assert resp.json()["kind"] == "not_found"

    def test_create_unknown_category(self, client, user):
        resp = client.post(f"/api/post/{user['id']}", json={"title": "t", "content": "c", "postsCategoryId": 42})
        assert resp.status_code == 404

    def test_slug_is_not_unique(self, client, user, other_user):
        first = make_post(client, user["id"], "Same Title")
        second = make_post(client, other_user["id"], "Same Title")
        assert first["id"] != second["id"]
        assert first["slug"] == second["slug"] == "same-title"

        # 两篇是独立的记录，各自只出现在自己作者名下
        mine = client.get(f"/api/posts/user/{user['id']}").json()
        theirs = client.get(f"/api/posts/user/{other_user['id']}").json()
        assert [item["id"] for item in mine["data"]] == [first["id"]]
        assert [item["id"] for item in theirs["data"]] == [second["id"]]

        resp = client.get("/api/post/same-title")
        assert resp.status_code == 200
        assert resp.json()["id"] == first["id"]


class TestReadPost:

    def test_read_with_relations(self, client, user, post):
        make_comment(client, post["id"], user["id"])
        client.post(f"/api/like-posts/{post['id']}/{user['id']}")

        resp = client.get(f"/api/post/{post['slug']}")
        assert resp.status_code == 200
        body = resp.json()
        assert body["id"] == post["id"]
        assert body["category"]["name"] == "python"
        assert len(body["comments"]) == 1
        assert len(body["likes"]) == 1
        assert body["user"]["username"] == "alice"
        assert "password" not in body["user"]

    def test_read_not_found(self, client):
        resp = client.get("/api/post/no-such-post")
        assert resp.status_code == 404
        body = resp.json()
        assert body["ok"] is False
        assert body["kind"] == "not_found"
        assert "no-such-post" in body["message"]


class TestListPosts:

    def test_pagination_envelope(self, client, user):
        ids = [make_post(client, user["id"], f"Post {i}")["id"] for i in range(3)]

        resp = client.get("/api/posts", params={"limit": 2})
        assert resp.status_code == 200
        body = resp.json()
        assert body["count"] == 3
        assert body["totalPages"] == 2
        assert body["currentPage"] == 1
        assert [item["id"] for item in body["data"]] == [ids[2], ids[1]]

        body = client.get("/api/posts", params={"limit": 2, "page": 2}).json()
        assert body["currentPage"] == 2
        assert [item["id"] for item in body["data"]] == [ids[0]]

    def test_list_items_use_brief_user(self, client, post):
        item = client.get("/api/posts").json()["data"][0]
        assert item["user"]["id"] == post["userId"]
        assert "username" not in item["user"]
        assert "password" not in item["user"]
        assert item["category"]["name"] == "python"
        assert item["comments"] == []
        assert item["likes"] == []

    def test_sort_by_camel_and_snake(self, client, user):
        for read_time in (5, 1, 3):
            make_post(client, user["id"], f"Read {read_time}", readTime=read_time)

        for sort_by in ("readTime", "read_time"):
            body = client.get("/api/posts", params={"sortBy": sort_by}).json()
            assert [item["readTime"] for item in body["data"]] == [5, 3, 1]

    def test_sort_by_unknown_field(self, client, post):
        resp = client.get("/api/posts", params={"sortBy": "password"})
        assert resp.status_code == 400
        assert resp.json()["kind"] == "bad_request"

    def test_page_must_be_positive(self, client):
        resp = client.get("/api/posts", params={"page": 0})
        assert resp.status_code == 422
        assert resp.json()["kind"] == "validation"

    def test_page_and_limit_upper_bounds(self, client):
        resp = client.get("/api/posts", params={"page": 10**19})
        assert resp.status_code == 422
        assert resp.json()["kind"] == "validation"

        assert client.get("/api/posts", params={"limit": 101}).status_code == 422
        assert client.get("/api/posts", params={"limit": 100}).status_code == 200


class TestUpdatePost:

    def test_full_replace(self, client, user, other_user, post):
        resp = client.put(f"/api/post/{post['id']}/{other_user['id']}", json=full_update(promoted=True))
        assert resp.status_code == 200
        body = resp.json()
        assert body["title"] == "Updated Title"
        assert body["slug"] == "updated-title"
        assert body["promoted"] is True
        assert body["readTime"] == 7
        assert body["postsCategoryId"] is None
        # 作者改写为路径里的 userId
        assert body["userId"] == other_user["id"]

    def test_missing_field_rejected(self, client, user, post):
        body = full_update()
        del body["vip"]
        resp = client.put(f"/api/post/{post['id']}/{user['id']}", json=body)
        assert resp.status_code == 422
        assert resp.json()["ok"] is False

        unchanged = client.get(f"/api/post/{post['slug']}").json()
        assert unchanged["title"] == "Hello World"

    def test_unknown_post_creates_nothing(self, client, user, post):
        resp = client.put(f"/api/post/999/{user['id']}", json=full_update())
        assert resp.status_code == 404
        assert client.get("/api/posts").json()["count"] == 1


class TestDeletePost:

    def test_non_owner_cannot_delete(self, client, other_user, post):
        resp = client.delete(f"/api/post/{post['id']}/{other_user['id']}")
        assert resp.status_code == 400
        assert resp.json()["message"] == "You are not the owner"
        assert client.get(f"/api/post/{post['slug']}").status_code == 200

    def test_owner_delete(self, client, user, post):
        comment = make_comment(client, post["id"], user["id"])

        resp = client.delete(f"/api/post/{post['id']}/{user['id']}")
        assert resp.status_code == 204
        assert resp.content == b""
        assert client.get(f"/api/post/{post['slug']}").status_code == 404
        # 评论随帖子一起删除
        assert client.get(f"/api/comments/{comment['id']}").status_code == 404

    def test_delete_unknown_post(self, client, user):
        assert client.delete(f"/api/post/999/{user['id']}").status_code == 404

    def test_admin_delete(self, client, post):
        assert client.delete(f"/api/admin/post/{post['id']}").status_code == 204
        assert client.get(f"/api/post/{post['slug']}").status_code == 404
        # 已经不存在也返回 204
        assert client.delete(f"/api/admin/post/{post['id']}").status_code == 204


class TestPostFeeds:

    def test_posts_by_category(self, client, user, category):
        other = make_category(client, "rust")
        ids = [make_post(client, user["id"], f"Py {i}", postsCategoryId=category["id"])["id"] for i in range(5)]
        make_post(client, user["id"], "Rusty", postsCategoryId=other["id"])

        resp = client.get(f"/api/posts/category/{category['id']}")
        assert resp.status_code == 200
        items = resp.json()
        assert [item["id"] for item in items] == ids[::-1][:4]
        for item in items:
            assert "postsCategoryId" not in item
            assert item["category"] == {"id": category["id"], "name": "python"}
            assert "username" not in item["user"]

    def test_trend_only_promoted(self, client, user):
        promoted = make_post(client, user["id"], "Hot", promoted=True)
        make_post(client, user["id"], "Cold")

        body = client.get("/api/posts/trend").json()
        assert [item["id"] for item in body["data"]] == [promoted["id"]]
        assert body["totalPages"] == 1
        assert body["currentPage"] == 1
        assert "count" not in body
        assert "likes" not in body["data"][0]

    def test_related_includes_itself(self, client, user, category):
        other = make_category(client, "rust")
        first = make_post(client, user["id"], "A", postsCategoryId=category["id"])
        second = make_post(client, user["id"], "B", postsCategoryId=category["id"])
        make_post(client, user["id"], "C", postsCategoryId=other["id"])

        body = client.get(f"/api/posts/related/{first['id']}").json()
        assert [item["id"] for item in body["data"]] == [second["id"], first["id"]]

    def test_related_unknown_post(self, client):
        assert client.get("/api/posts/related/999").status_code == 404

    def test_vip_limit_three(self, client, user, category):
        ids = [make_post(client, user["id"], f"Vip {i}", vip=True, postsCategoryId=category["id"])["id"] for i in range(4)]
        make_post(client, user["id"], "Plain")

        items = client.get("/api/posts/vip").json()
        assert [item["id"] for item in items] == ids[::-1][:3]
        assert all(item["vip"] for item in items)
        assert "createdAt" not in items[0]["category"]

    def test_search_case_insensitive_substring(self, client, user):
        foobar = make_post(client, user["id"], "Foobar")
        bar = make_post(client, user["id"], "bar baz")
        make_post(client, user["id"], "qux")

        body = client.get("/api/posts/search", params={"title": "BAR"}).json()
        assert {item["id"] for item in body["data"]} == {foobar["id"], bar["id"]}

        body = client.get("/api/posts/search", params={"title": "foo"}).json()
        assert [item["id"] for item in body["data"]] == [foobar["id"]]

    def test_search_treats_wildcards_literally(self, client, user):
        make_post(client, user["id"], "plain title")
        body = client.get("/api/posts/search", params={"title": "%"}).json()
        assert body["data"] == []

    def test_posts_by_user(self, client, user, other_user):
        mine = make_post(client, user["id"], "Mine")
        make_post(client, other_user["id"], "Theirs")

        body = client.get(f"/api/posts/user/{user['id']}").json()
        assert [item["id"] for item in body["data"]] == [mine["id"]]

        body = client.get("/api/posts/user/999").json()
        assert body["data"] == []
        assert body["totalPages"] == 0
