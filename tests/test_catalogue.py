from tests.conftest import bearer, notifications_for, order_payload


def _product(client, retailer_id, **overrides):
    data = {
        "retailerId": retailer_id,
        "name": "Walnut Dining Table",
        "description": "Six seater, hand finished",
        "category": "Dining",
        "price": "45000.00",
        "stockQuantity": 20,
    }
    data.update(overrides)
    response = client.post("/api/products", json=data)
    assert response.status_code == 201
    return response.json()


def test_create_and_filter_products(client):
    table = _product(client, "R1")
    _product(client, "R2", name="Teak Bed", category="Bedroom", description="King size")

    assert table["price"] == "45000.00"
    assert table["placementType"] == "floor"
    assert [p["id"] for p in client.get("/api/products", params={"retailerId": "R1"}).json()] == [table["id"]]
    assert len(client.get("/api/products", params={"category": "Bedroom"}).json()) == 1
    assert len(client.get("/api/products", params={"search": "HAND"}).json()) == 1
    assert len(client.get("/api/products").json()) == 2


def test_update_and_delete_product(client):
    product = _product(client, "R1")

    updated = client.put(f"/api/products/{product['id']}", json={"price": "39999.50"}).json()
    assert updated["price"] == "39999.50"
    assert updated["name"] == product["name"]

    assert client.delete(f"/api/products/{product['id']}").json() == {"success": True}
    assert client.get(f"/api/products/{product['id']}").status_code == 404


def test_stock_falling_below_threshold_notifies_retailer_once(client):
    product = _product(client, "R1", stockQuantity=20)

    client.put(f"/api/products/{product['id']}", json={"stockQuantity": 5})
    client.put(f"/api/products/{product['id']}", json={"stockQuantity": 4})

    notes = notifications_for(client, "R1", "retailer")
    assert len(notes) == 1
    assert notes[0]["type"] == "low_stock"
    assert notes[0]["relatedId"] == product["id"]


def test_retailer_analytics(client, retailer):
    chair = _product(client, retailer.id, name="Chair", stockQuantity=3)
    _product(client, retailer.id, name="Sofa", stockQuantity=50)

    items = [{
        "productId": chair["id"], "retailerId": retailer.id, "productName": "Chair",
        "quantity": 2, "price": "100.00",
    }]
    order = client.post("/api/orders", json=order_payload(items=items)).json()
    client.put(f"/api/orders/{order['id']}", json={"orderStatus": "confirmed"})

    response = client.get(f"/api/analytics/retailer/{retailer.id}", headers=bearer(retailer))

    assert response.status_code == 200
    stats = response.json()
    assert stats["totalSales"] == 200
    assert stats["monthlyRevenue"] == 200
    assert stats["activeOrders"] == 1
    assert stats["pendingShipment"] == 1
    assert stats["lowStockCount"] == 1
    assert stats["lowStockProducts"][0]["name"] == "Chair"
    assert len(stats["revenueTrend"]) == 6
    assert stats["revenueTrend"][-1]["revenue"] == 200
    assert stats["topProducts"] == [{"name": "Chair", "sales": 2}]


def test_analytics_only_for_own_account(client, retailer, other_retailer, customer):
    url = f"/api/analytics/retailer/{retailer.id}"
    assert client.get(url, headers=bearer(other_retailer)).status_code == 403
    assert client.get(url, headers=bearer(customer)).status_code == 403
    assert client.get(url).status_code == 401
