def test_health_check(client):
    body = client.get("/health/check").json()
    assert body["status"] == "ok"
    assert body["database"] == "ok"
