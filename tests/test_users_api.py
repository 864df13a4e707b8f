from tests.factories import make_user, make_post


class TestUsers:

    def test_create_hides_password(self, client):
        body = make_user(client, "carol", "carol@example.com")
        assert body["username"] == "carol"
        assert body["email"] == "carol@example.com"
        assert body["role"] == 0
        assert "password" not in body

    def test_role_cannot_be_chosen_at_registration(self, client):
        resp = client.post("/api/users", json={"username": "mallory", "password": "p", "role": 1})
        assert resp.status_code == 422

    def test_duplicate_email(self, client, user):
        resp = client.post("/api/users", json={"username": "x", "email": user["email"], "password": "p"})
        assert resp.status_code == 409
        assert resp.json()["kind"] == "conflict"

    def test_invalid_email(self, client):
        resp = client.post("/api/users", json={"username": "x", "email": "not-an-email", "password": "p"})
        assert resp.status_code == 422
        assert resp.json()["kind"] == "validation"

    def test_get_and_not_found(self, client, user):
        assert client.get(f"/api/users/{user['id']}").json()["username"] == "alice"
        resp = client.get("/api/users/999")
        assert resp.status_code == 404
        assert resp.json()["message"] == "user 999 not found"

    def test_list_paginated(self, client):
        for name in ("u1", "u2", "u3"):
            make_user(client, name)

        body = client.get("/api/users", params={"limit": 2, "sortBy": "username"}).json()
        assert body["count"] == 3
        assert body["totalPages"] == 2
        assert [u["username"] for u in body["data"]] == ["u3", "u2"]
        assert all("password" not in u for u in body["data"])

    def test_update_profile(self, client, user):
        resp = client.put(
            f"/api/users/{user['id']}",
            json={"username": "alice2", "email": None, "image": "a.png", "bio": "hi"},
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["username"] == "alice2"
        assert body["email"] is None
        assert body["bio"] == "hi"

    def test_update_rejects_password_field(self, client, user):
        resp = client.put(
            f"/api/users/{user['id']}",
            json={"username": "a", "email": None, "image": None, "bio": None, "password": "x"},
        )
        assert resp.status_code == 422

    def test_change_password(self, client, user):
        url = f"/api/users/{user['id']}/password"

        resp = client.put(url, json={"oldPassword": "wrong", "newPassword": "n3w"})
        assert resp.status_code == 400

        assert client.put(url, json={"oldPassword": "secret", "newPassword": "n3w"}).status_code == 204
        # 旧密码已经失效
        assert client.put(url, json={"oldPassword": "secret", "newPassword": "again"}).status_code == 400
        assert client.put(url, json={"oldPassword": "n3w", "newPassword": "again"}).status_code == 204

    def test_delete_cascades_posts(self, client, user):
        post = make_post(client, user["id"], "Bye")

        assert client.delete(f"/api/users/{user['id']}").status_code == 204
        assert client.get(f"/api/users/{user['id']}").status_code == 404
        assert client.get(f"/api/post/{post['slug']}").status_code == 404
        assert client.delete(f"/api/users/{user['id']}").status_code == 404
