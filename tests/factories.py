"""测试造数据的小工具，全部走 HTTP 接口"""


def make_user(client, username="alice", email=None, password="secret"):
    payload = {"username": username, "password": password}
    if email:
        payload["email"] = email
    resp = client.post("/api/users", json=payload)
    assert resp.status_code == 200, resp.text
    return resp.json()


def make_category(client, name="python"):
    resp = client.post("/api/post-categories", json={"name": name})
    assert resp.status_code == 200, resp.text
    return resp.json()


def make_post(client, user_id, title="Hello World", **fields):
    payload = {"title": title, "content": fields.pop("content", "body")}
    payload.update(fields)
    resp = client.post(f"/api/post/{user_id}", json=payload)
    assert resp.status_code == 200, resp.text
    return resp.json()


def make_comment(client, post_id, user_id, content="nice post"):
    resp = client.post(f"/api/comments/{post_id}/{user_id}", json={"content": content})
    assert resp.status_code == 200, resp.text
    return resp.json()
