from tests.factories import make_category, make_post


class TestPostCategories:

    def test_list_ordered_by_name(self, client):
        make_category(client, "rust")
        make_category(client, "go")

        body = client.get("/api/post-categories").json()
        assert body["count"] == 2
        assert [c["name"] for c in body["data"]] == ["go", "rust"]

    def test_duplicate_name(self, client, category):
        resp = client.post("/api/post-categories", json={"name": "python"})
        assert resp.status_code == 409

    def test_get_update_delete(self, client, category):
        url = f"/api/post-categories/{category['id']}"
        assert client.get(url).json()["name"] == "python"

        resp = client.put(url, json={"name": "py"})
        assert resp.status_code == 200
        assert resp.json()["name"] == "py"

        assert client.delete(url).status_code == 204
        assert client.get(url).status_code == 404
        assert client.put(url, json={"name": "x"}).status_code == 404

    def test_delete_keeps_posts(self, client, user, category):
        post = make_post(client, user["id"], "Orphan", postsCategoryId=category["id"])

        assert client.delete(f"/api/post-categories/{category['id']}").status_code == 204

        body = client.get(f"/api/post/{post['slug']}").json()
        assert body["postsCategoryId"] is None
        assert body["category"] is None


class TestStaticPages:

    def test_increment_creates_then_counts(self, client):
        assert client.put("/api/static-pages/home").json()["views"] == 1
        assert client.put("/api/static-pages/home").json()["views"] == 2
        assert client.get("/api/static-pages/home").json()["views"] == 2

    def test_unknown_page(self, client):
        resp = client.get("/api/static-pages/about")
        assert resp.status_code == 404
        assert resp.json()["kind"] == "not_found"

    def test_list_pages(self, client):
        client.put("/api/static-pages/home")
        client.put("/api/static-pages/about")

        body = client.get("/api/static-pages").json()
        assert body["count"] == 2
        assert [p["name"] for p in body["data"]] == ["about", "home"]


def test_root(client):
    assert client.get("/").status_code == 200
