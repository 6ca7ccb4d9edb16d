import pytest

from sujaluxe.config import settings
from sujaluxe.routes import room_designs
from sujaluxe.services import room_designer
from sujaluxe.services.room_designer import ImageGenerationError


class FakeResponse:
    def __init__(self, status_code, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload or {}
        self.text = text

    def json(self):
        return self._payload


@pytest.fixture
def products(client):
    ids = []
    for name, placement in (("Velvet Sofa", "floor"), ("Brass Mirror", "wall")):
        response = client.post("/api/products", json={
            "retailerId": "R1", "name": name, "category": "Living",
            "price": "1000.00", "placementType": placement,
        })
        ids.append(response.json()["id"])
    return ids


def test_design_stores_one_row_per_product(client, products, monkeypatch):
    prompts = []

    def fake_generate(prompt):
        prompts.append(prompt)
        return "https://images.example.com/room.png"

    monkeypatch.setattr(room_designs, "generate_room_image", fake_generate)

    response = client.post("/api/room-designs", json={
        "customerId": "C1", "productIds": products, "style": "minimal",
    })

    assert response.status_code == 201
    assert response.json()["imageUrl"] == "https://images.example.com/room.png"
    assert "Velvet Sofa, Brass Mirror" in prompts[0]
    assert "minimal style" in prompts[0]

    designs = client.get("/api/room-designs", params={"customerId": "C1"}).json()
    assert sorted(d["placementType"] for d in designs) == ["floor", "wall"]

    saved = client.put(f"/api/room-designs/{designs[0]['id']}/save").json()
    assert saved["saved"] is True


def test_design_requires_products(client):
    assert client.post("/api/room-designs", json={"customerId": "C1"}).status_code == 400
    assert client.get("/api/room-designs").status_code == 400


def test_provider_failure_is_bad_gateway(client, products, monkeypatch):
    def failing(prompt):
        raise ImageGenerationError("Invalid API key", configuration=True)

    monkeypatch.setattr(room_designs, "generate_room_image", failing)

    response = client.post("/api/room-designs", json={"customerId": "C1", "productIds": products})

    assert response.status_code == 502
    assert "configuration" in response.json()["detail"]
    assert client.get("/api/room-designs", params={"customerId": "C1"}).json() == []


def test_generate_returns_data_uri_for_base64(monkeypatch):
    calls = []

    def fake_post(url, json, headers, timeout):
        calls.append((url, json))
        return FakeResponse(200, {"data": [{"b64_json": "aGVsbG8="}]})

    monkeypatch.setattr(settings, "openai_api_key", "test-key")
    monkeypatch.setattr(room_designer.requests, "post", fake_post)

    assert room_designer.generate_room_image("a room") == "data:image/png;base64,aGVsbG8="
    assert calls[0][0].endswith("/images/generations")
    assert calls[0][1]["quality"] == "hd"


def test_generate_maps_401_to_configuration_error(monkeypatch):
    monkeypatch.setattr(settings, "openai_api_key", "bad-key")
    monkeypatch.setattr(
        room_designer.requests, "post", lambda *args, **kwargs: FakeResponse(401, text="unauthorized")
    )

    with pytest.raises(ImageGenerationError) as exc:
        room_designer.generate_room_image("a room")
    assert exc.value.configuration is True


def test_generate_without_key(monkeypatch):
    monkeypatch.setattr(settings, "openai_api_key", None)

    with pytest.raises(ImageGenerationError):
        room_designer.generate_room_image("a room")
