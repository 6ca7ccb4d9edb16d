from tests.conftest import order_payload


def _auth(ws, user_id, user_type):
    ws.send_json({"type": "auth", "userId": user_id, "userType": user_type})
    return ws.receive_json()


def test_auth_and_ping(client):
    with client.websocket_connect("/ws") as ws:
        assert _auth(ws, "R1", "retailer") == {"type": "auth_success"}
        ws.send_json({"type": "ping"})
        assert ws.receive_json() == {"type": "pong"}


def test_bad_messages_get_error_and_socket_stays_open(client):
    with client.websocket_connect("/ws") as ws:
        ws.send_text("not json")
        assert ws.receive_json()["type"] == "error"

        assert _auth(ws, "R1", "admin")["type"] == "error"

        ws.send_json({"type": "dance"})
        assert ws.receive_json()["type"] == "error"

        ws.send_bytes(b"\xff\xfe")
        assert ws.receive_json()["type"] == "error"

        # binary frames carrying UTF-8 JSON are accepted
        ws.send_bytes(b'{"type": "ping"}')
        assert ws.receive_json() == {"type": "pong"}

        ws.send_json({"type": "ping"})
        assert ws.receive_json() == {"type": "pong"}


def test_new_order_pushed_only_to_its_retailer(client):
    with client.websocket_connect("/ws") as r1, client.websocket_connect("/ws") as r2:
        _auth(r1, "R1", "retailer")
        _auth(r2, "R2", "retailer")

        order = client.post("/api/orders", json=order_payload()).json()

        push = r1.receive_json()
        assert push["type"] == "new_order"
        assert push["order"]["id"] == order["id"]
        assert push["order"]["items"][0]["subtotal"] == "200.00"

        # nothing was queued for R2 ahead of the pong
        r2.send_json({"type": "ping"})
        assert r2.receive_json() == {"type": "pong"}


def test_order_update_pushed_to_customer(client):
    order = client.post("/api/orders", json=order_payload()).json()

    with client.websocket_connect("/ws") as ws:
        _auth(ws, "C1", "customer")
        client.put(f"/api/orders/{order['id']}", json={"orderStatus": "confirmed"})

        push = ws.receive_json()
        assert push["type"] == "order_update"
        assert push["order"]["orderStatus"] == "confirmed"


def test_disconnect_unregisters(client):
    with client.websocket_connect("/ws") as ws:
        _auth(ws, "R1", "retailer")
        assert len(client.app.state.connections) == 1

    # the server side finishes its cleanup before the next request completes
    client.get("/health/check")
    assert len(client.app.state.connections) == 0
