from tests.conftest import bearer, notifications_for


def _open(client, customer, retailer):
    response = client.post(
        "/api/negotiations",
        json={"customerId": customer.id, "retailerId": retailer.id, "productId": "P1"},
    )
    assert response.status_code == 201
    return response.json()


def test_opening_notifies_retailer(client, customer, retailer):
    negotiation = _open(client, customer, retailer)

    assert negotiation["status"] == "active"
    notes = notifications_for(client, retailer.id, "retailer")
    assert [n["type"] for n in notes] == ["negotiation"]


def test_sender_comes_from_token(client, customer, retailer):
    negotiation = _open(client, customer, retailer)

    response = client.post(
        f"/api/negotiations/{negotiation['id']}/messages",
        json={"message": "Would you take 9000?", "offerPrice": "9000.00",
              "senderId": retailer.id, "senderType": "retailer"},
        headers=bearer(customer),
    )

    assert response.status_code == 201
    message = response.json()
    assert message["senderId"] == customer.id
    assert message["senderType"] == "customer"
    assert message["offerPrice"] == "9000.00"

    current = client.get("/api/negotiations", params={"customerId": customer.id}).json()
    assert current[0]["status"] == "pending"


def test_non_party_cannot_post(client, customer, retailer, other_customer, other_retailer):
    negotiation = _open(client, customer, retailer)
    url = f"/api/negotiations/{negotiation['id']}/messages"

    assert client.post(url, json={"message": "hi"}, headers=bearer(other_customer)).status_code == 403
    assert client.post(url, json={"message": "hi"}, headers=bearer(other_retailer)).status_code == 403
    assert client.post(url, json={"message": "hi"}).status_code == 401
    assert client.get(url).json() == []


def test_message_pushed_to_counterparty(client, customer, retailer):
    negotiation = _open(client, customer, retailer)

    with client.websocket_connect("/ws") as ws:
        ws.send_json({"type": "auth", "userId": customer.id, "userType": "customer"})
        ws.receive_json()

        client.post(
            f"/api/negotiations/{negotiation['id']}/messages",
            json={"message": "Best I can do is 9500"},
            headers=bearer(retailer),
        )

        push = ws.receive_json()
        assert push["type"] == "new_message"
        assert push["negotiationId"] == negotiation["id"]
        assert push["message"]["senderType"] == "retailer"

    messages = client.get(f"/api/negotiations/{negotiation['id']}/messages").json()
    assert [m["message"] for m in messages] == ["Best I can do is 9500"]


def test_decision_notifies_customer(client, customer, retailer):
    negotiation = _open(client, customer, retailer)

    with client.websocket_connect("/ws") as ws:
        ws.send_json({"type": "auth", "userId": customer.id, "userType": "customer"})
        ws.receive_json()

        response = client.put(f"/api/negotiations/{negotiation['id']}", json={"status": "accepted"})
        assert response.json()["status"] == "accepted"

        push = ws.receive_json()
        assert push["type"] == "notification"
        assert push["notification"]["type"] == "negotiation"

    assert len(notifications_for(client, customer.id, "customer")) == 1


def test_missing_negotiation_is_404(client, customer):
    response = client.post(
        "/api/negotiations/missing/messages", json={"message": "hi"}, headers=bearer(customer)
    )
    assert response.status_code == 404


def test_repeated_decision_notifies_once(client, customer, retailer):
    negotiation = _open(client, customer, retailer)
    url = f"/api/negotiations/{negotiation['id']}"

    client.put(url, json={"status": "rejected"})
    again = client.put(url, json={"status": "rejected"})

    assert again.status_code == 200
    assert again.json()["status"] == "rejected"
    assert len(notifications_for(client, customer.id, "customer")) == 1
