from tests.conftest import bearer


def test_customer_profile_own_only(client, customer, other_customer):
    url = f"/api/customers/{customer.id}"

    response = client.get(url, headers=bearer(customer))
    assert response.status_code == 200
    assert response.json()["email"] == "asha@example.com"
    assert "password" not in response.json()

    assert client.get(url, headers=bearer(other_customer)).status_code == 403


def test_customer_profile_update(client, customer):
    url = f"/api/customers/{customer.id}"

    assert client.put(url, json={}, headers=bearer(customer)).status_code == 400

    response = client.put(url, json={"address": "5 Park Street, Kolkata"}, headers=bearer(customer))
    assert response.json()["address"] == "5 Park Street, Kolkata"
    assert response.json()["name"] == "Asha Rao"


def test_retailer_profile(client, retailer, customer):
    url = f"/api/retailers/{retailer.id}"

    assert client.get(url, headers=bearer(customer)).status_code == 403

    response = client.put(url, json={"about": "Handmade teak since 1987"}, headers=bearer(retailer))
    assert response.status_code == 200
    assert response.json()["about"] == "Handmade teak since 1987"
    assert "password" not in response.json()
