from tests.conftest import bearer, notifications_for


def _review(client, retailer_id, rating=5):
    response = client.post("/api/reviews", json={
        "customerId": "C1",
        "customerName": "Asha Rao",
        "retailerId": retailer_id,
        "productId": "P1",
        "productName": "Walnut Chair",
        "rating": rating,
        "comment": "Beautiful finish",
    })
    return response


def test_review_notifies_retailer(client, retailer):
    response = _review(client, retailer.id)

    assert response.status_code == 201
    assert response.json()["status"] == "pending"
    notes = notifications_for(client, retailer.id, "retailer")
    assert [n["type"] for n in notes] == ["review"]


def test_rating_out_of_range(client, retailer):
    assert _review(client, retailer.id, rating=6).status_code == 400


def test_owner_can_respond(client, retailer, other_retailer):
    review = _review(client, retailer.id).json()
    url = f"/api/reviews/{review['id']}"

    assert client.put(url, json={"response": "Thanks!"}, headers=bearer(other_retailer)).status_code == 403
    assert client.put(url, json={}, headers=bearer(retailer)).status_code == 400

    response = client.put(url, json={"response": "Thanks!", "status": "approved"}, headers=bearer(retailer))
    assert response.status_code == 200
    assert response.json()["response"] == "Thanks!"
    assert response.json()["status"] == "approved"


def test_list_reviews(client, retailer):
    _review(client, retailer.id)

    assert len(client.get("/api/reviews", params={"productId": "P1"}).json()) == 1
    assert len(client.get("/api/reviews", params={"retailerId": retailer.id}).json()) == 1
    assert client.get("/api/reviews").json() == []


CAMPAIGN = {
    "retailerId": "R1",
    "name": "Diwali Sale",
    "startDate": "2026-10-20T00:00:00",
    "endDate": "2026-11-05T00:00:00",
    "discountPercentage": "15.00",
}


def test_campaign_lifecycle(client):
    created = client.post("/api/campaigns", json=CAMPAIGN)
    assert created.status_code == 201
    campaign = created.json()
    assert campaign["status"] == "draft"

    assert client.get("/api/campaigns", params={"active": "true"}).json() == []

    updated = client.put(f"/api/campaigns/{campaign['id']}", json={"status": "active"}).json()
    assert updated["status"] == "active"

    assert len(client.get("/api/campaigns", params={"active": "true"}).json()) == 1
    assert len(client.get("/api/campaigns", params={"retailerId": "R1"}).json()) == 1


def test_campaign_validation(client):
    inverted = dict(CAMPAIGN, endDate="2026-10-01T00:00:00")
    assert client.post("/api/campaigns", json=inverted).status_code == 400
    assert client.put("/api/campaigns/missing", json={"name": "x"}).status_code == 404


def test_campaign_update_ignores_null_for_required_fields(client):
    campaign = client.post("/api/campaigns", json=CAMPAIGN).json()

    response = client.put(
        f"/api/campaigns/{campaign['id']}",
        json={"name": None, "bannerImageUrl": "https://cdn.example.com/diwali.png"},
    )

    assert response.status_code == 200
    assert response.json()["name"] == "Diwali Sale"
    assert response.json()["bannerImageUrl"] == "https://cdn.example.com/diwali.png"


def test_campaign_update_keeps_date_window(client):
    campaign = client.post("/api/campaigns", json=CAMPAIGN).json()
    url = f"/api/campaigns/{campaign['id']}"

    assert client.put(url, json={"endDate": "2026-10-10T00:00:00"}).status_code == 400
    assert client.put(url, json={"startDate": "2026-12-01T00:00:00"}).status_code == 400

    moved = client.put(url, json={"endDate": "2026-11-10T00:00:00"})
    assert moved.status_code == 200
    assert moved.json()["endDate"] == "2026-11-10T00:00:00"
