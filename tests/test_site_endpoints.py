from __future__ import annotations

from datetime import date


def test_fresh_store_serves_seed_posts(client):
    r = client.get("/api/posts")
    assert r.status_code == 200
    posts = r.json()["posts"]
    assert [p["id"] for p in posts] == [1, 2, 3]
    assert posts[1]["price"] == 0


def test_add_post_then_filter_by_category(client):
    r = client.post("/api/admin/posts", json={"title": "X", "category": "design"})
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["message"] == "Пост добавлен"
    assert body["post"]["id"] == 4
    assert body["post"]["date"] == date.today().isoformat()

    r = client.get("/api/posts", params={"category": "design"})
    titles = [p["title"] for p in r.json()["posts"]]
    assert titles == ["Дизайн Discord сервера", "X"]

    r = client.get("/api/posts", params={"category": "nothing"})
    assert r.json() == {"posts": []}


def test_orders_get_sequential_ids(client):
    a = client.post("/api/orders", json={"item": "A"}).json()
    b = client.post("/api/orders", json={"item": "B"}).json()
    assert a["success"] is True
    assert a["message"] == "Заказ создан"
    assert (a["order"]["id"], b["order"]["id"]) == (1, 2)
    assert a["order"]["status"] == b["order"]["status"] == "new"
    assert a["order"]["item"] == "A"

    r = client.get("/api/admin/orders")
    assert [o["item"] for o in r.json()["orders"]] == ["A", "B"]


def test_delete_post(client):
    r = client.delete("/api/admin/posts/2")
    assert r.status_code == 200
    assert r.json() == {"success": True, "message": "Пост удален"}

    r = client.delete("/api/admin/posts/2")
    assert r.status_code == 404
    assert r.json() == {"error": "Пост не найден"}

    assert [p["id"] for p in client.get("/api/posts").json()["posts"]] == [1, 3]


def test_settings_roundtrip(client):
    r = client.get("/api/admin/settings")
    assert r.json()["siteName"] == "DVX Studio"
    assert "discordLink" in r.json()

    new = {"siteName": "Other", "siteDescription": "d"}
    r = client.post("/api/admin/settings", json=new)
    assert r.json() == {"success": True, "message": "Настройки сохранены"}
    assert client.get("/api/admin/settings").json() == new


def test_post_fields_are_stored_as_sent(client):
    payload = {"title": 5, "price": "500", "category": ["a", "b"], "extra": {"nested": True}}
    r = client.post("/api/admin/posts", json=payload)
    assert r.status_code == 200
    post = r.json()["post"]
    for key, value in payload.items():
        assert post[key] == value
    assert post["price"] == "500"

    stored = client.get("/api/posts").json()["posts"][-1]
    assert stored["title"] == 5
    assert stored["price"] == "500"
    assert stored["category"] == ["a", "b"]


def test_order_fields_are_stored_as_sent(client):
    r = client.post("/api/orders", json={"qty": "3", "contact": None})
    order = r.json()["order"]
    assert order["qty"] == "3"
    assert order["contact"] is None
    assert order["status"] == "new"


def test_settings_body_must_be_an_object(client):
    before = client.get("/api/admin/settings").json()
    r = client.post("/api/admin/settings", json=["not", "an", "object"])
    assert r.status_code == 422
    assert client.get("/api/admin/settings").json() == before


def test_stats(client):
    client.post("/api/orders", json={"item": "A"})
    r = client.get("/api/admin/stats")
    assert r.status_code == 200
    body = r.json()
    assert body["postsCount"] == 3
    assert body["ordersCount"] == 1
    assert body["processUptime"] >= 0
    assert body["processMemory"]["maxrss"] > 0

    # Short aliases mirror the same values.
    assert body["posts"] == body["postsCount"]
    assert body["orders"] == body["ordersCount"]
    assert body["memory"] == body["processMemory"]
    assert "uptime" in body


def test_stats_count_missing_document_as_zero(client, data_path):
    (data_path / "posts.json").unlink()
    body = client.get("/api/admin/stats").json()
    assert body["postsCount"] == 0
    assert body["ordersCount"] == 0
    assert not (data_path / "posts.json").exists()


def test_corrupt_document_is_500(client, data_path):
    (data_path / "orders.json").write_text("{broken", encoding="utf-8")
    r = client.get("/api/admin/orders")
    assert r.status_code == 500
    assert "error" in r.json()
