def test_adding_same_product_merges_quantity(client):
    client.post("/api/cart", json={"customerId": "C1", "productId": "P1", "quantity": 1})
    client.post("/api/cart", json={"customerId": "C1", "productId": "P1", "quantity": 2})

    cart = client.get("/api/cart", params={"customerId": "C1"}).json()

    assert len(cart) == 1
    assert cart[0]["quantity"] == 3


def test_zero_quantity_removes_item(client):
    item = client.post("/api/cart", json={"customerId": "C1", "productId": "P1"}).json()

    response = client.put(f"/api/cart/{item['id']}", json={"quantity": 0})

    assert response.json() == {"success": True, "removed": True}
    assert client.get("/api/cart", params={"customerId": "C1"}).json() == []


def test_update_and_remove_item(client):
    item = client.post("/api/cart", json={"customerId": "C1", "productId": "P1"}).json()

    updated = client.put(f"/api/cart/{item['id']}", json={"quantity": 4}).json()
    assert updated["quantity"] == 4

    assert client.delete(f"/api/cart/{item['id']}").json() == {"success": True}
    assert client.delete(f"/api/cart/{item['id']}").status_code == 404


def test_clear_cart_only_touches_one_customer(client):
    client.post("/api/cart", json={"customerId": "C1", "productId": "P1"})
    client.post("/api/cart", json={"customerId": "C1", "productId": "P2"})
    client.post("/api/cart", json={"customerId": "C2", "productId": "P1"})

    response = client.delete("/api/cart", params={"customerId": "C1"})

    assert response.json() == {"success": True, "removed": 2}
    assert len(client.get("/api/cart", params={"customerId": "C2"}).json()) == 1


def test_customer_id_required(client):
    assert client.get("/api/cart").status_code == 400
