from tests.conftest import notifications_for, order_payload


def test_mark_read_is_idempotent(client):
    client.post("/api/orders", json=order_payload())
    note = notifications_for(client, "R1", "retailer")[0]

    first = client.put(f"/api/notifications/{note['id']}/read")
    second = client.put(f"/api/notifications/{note['id']}/read")

    assert first.status_code == second.status_code == 200
    assert first.json()["isRead"] is True
    assert second.json()["isRead"] is True


def test_unread_count_and_read_all(client):
    client.post("/api/orders", json=order_payload())
    client.post("/api/orders", json=order_payload())
    params = {"userId": "R1", "userType": "retailer"}

    assert client.get("/api/notifications/unread-count", params=params).json() == {"unread": 2}
    assert client.put("/api/notifications/read-all", params=params).json() == {"updated": 2}
    assert client.get("/api/notifications/unread-count", params=params).json() == {"unread": 0}


def test_notifications_are_scoped_by_user_type(client):
    client.post("/api/orders", json=order_payload())
    assert notifications_for(client, "R1", "customer") == []


def test_recipient_params_required(client):
    assert client.get("/api/notifications").status_code == 400
    response = client.get("/api/notifications", params={"userId": "R1", "userType": "admin"})
    assert response.status_code == 400


def test_unknown_notification_is_404(client):
    assert client.put("/api/notifications/missing/read").status_code == 404
