import pytest
from fastapi.testclient import TestClient

from app.storage.repository import InMemoryRepository
from main import create_app

NEW_HOTEL = {
    "name": "Cave Suites",
    "location": "Cappadocia",
    "description": "Rooms carved into the rock.",
    "price": 220,
    "amenities": ["Balloon Tours", "Breakfast"],
    "rating": 4.8,
    "available_rooms": 7,
}


def test_health_reports_hotel_count(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "hotels": 2}


def test_list_hotels_newest_first(client):
    created = client.post("/hotel-api/hotels", json=NEW_HOTEL).json()

    response = client.get("/hotel-api/hotels")

    assert response.status_code == 200
    body = response.json()
    assert len(body) == 3
    assert body[0]["id"] == created["id"]


def test_get_hotel_by_id(client):
    response = client.get("/hotel-api/hotels/2")

    assert response.status_code == 200
    assert response.json()["name"] == "Seaside Resort"


@pytest.mark.parametrize("hotel_id", ["42", "-1", "abc"])
def test_unknown_id_is_404_for_get_put_delete(client, hotel_id):
    url = f"/hotel-api/hotels/{hotel_id}"
    for response in (
        client.get(url),
        client.put(url, json={"name": "x"}),
        client.delete(url),
    ):
        assert response.status_code == 404
        assert response.json() == {"error": "Hotel not found"}


def test_create_returns_201(client):
    response = client.post("/hotel-api/hotels", json=NEW_HOTEL)

    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 3
    assert body["name"] == "Cave Suites"
    assert "created_at" in body


@pytest.mark.parametrize("field", ["name", "location", "price", "amenities"])
def test_create_missing_field_is_400(client, field):
    payload = {k: v for k, v in NEW_HOTEL.items() if k != field}

    response = client.post("/hotel-api/hotels", json=payload)

    assert response.status_code == 400
    assert response.json() == {
        "error": "Missing required fields: name, location, price, amenities"
    }


def test_create_without_body_is_400(client):
    response = client.post("/hotel-api/hotels")

    assert response.status_code == 400
    assert response.json()["error"].startswith("Missing required fields")


def test_create_with_wrong_type_is_400(client):
    response = client.post(
        "/hotel-api/hotels", json={**NEW_HOTEL, "price": "not a number"}
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request body"


def test_update_price_zero_is_ignored(client):
    response = client.put("/hotel-api/hotels/1", json={"price": 0})

    assert response.status_code == 200
    assert response.json()["price"] == 100


def test_search_route_is_not_shadowed_by_id_route(client):
    response = client.get("/hotel-api/hotels/search")

    assert response.status_code == 200
    assert len(response.json()) == 2


def test_search_filters(client):
    by_location = client.get("/hotel-api/hotels/search", params={"location": "istanbul"})
    by_price = client.get(
        "/hotel-api/hotels/search", params={"min_price": "120", "max_price": "160"}
    )

    assert [h["name"] for h in by_location.json()] == ["Hotel Sunshine"]
    assert [h["name"] for h in by_price.json()] == ["Seaside Resort"]


def test_unknown_route_uses_error_body(client):
    response = client.get("/hotel-api/rooms")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_cors_allows_any_origin(client):
    response = client.get(
        "/hotel-api/hotels", headers={"Origin": "http://example.com"}
    )

    assert response.headers["access-control-allow-origin"] == "*"


def test_unexpected_error_is_500():
    app = create_app(repository=InMemoryRepository())

    @app.get("/boom")
    def boom():
        raise RuntimeError("boom")

    with TestClient(app, raise_server_exceptions=False) as test_client:
        response = test_client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_hotel_lifecycle(client):
    created = client.post("/hotel-api/hotels", json=NEW_HOTEL)
    assert created.status_code == 201
    hotel_id = created.json()["id"]

    fetched = client.get(f"/hotel-api/hotels/{hotel_id}").json()
    for key, value in NEW_HOTEL.items():
        assert fetched[key] == value

    updated = client.put(f"/hotel-api/hotels/{hotel_id}", json={"rating": 3.9})
    assert updated.status_code == 200

    refetched = client.get(f"/hotel-api/hotels/{hotel_id}").json()
    assert refetched["rating"] == 3.9
    assert {k: v for k, v in refetched.items() if k != "rating"} == {
        k: v for k, v in fetched.items() if k != "rating"
    }

    deleted = client.delete(f"/hotel-api/hotels/{hotel_id}")
    assert deleted.status_code == 200
    assert deleted.json()["id"] == hotel_id

    gone = client.get(f"/hotel-api/hotels/{hotel_id}")
    assert gone.status_code == 404
    assert gone.json() == {"error": "Hotel not found"}


@pytest.mark.parametrize(
    "body", [{"available_rooms": 2.5}, {"price": "abc"}, ["x"], "text"]
)
def test_update_unknown_id_is_404_whatever_the_body(client, body):
    response = client.put("/hotel-api/hotels/999", json=body)

    assert response.status_code == 404
    assert response.json() == {"error": "Hotel not found"}


def test_update_stores_values_without_type_checks(client):
    response = client.put("/hotel-api/hotels/1", json={"available_rooms": 2.5})

    assert response.status_code == 200
    assert response.json()["available_rooms"] == 2.5
    assert client.get("/hotel-api/hotels/1").json()["available_rooms"] == 2.5


def test_update_with_non_object_body_changes_nothing(client):
    before = client.get("/hotel-api/hotels/2").json()

    response = client.put("/hotel-api/hotels/2", json=["x"])

    assert response.status_code == 200
    assert response.json() == before


def test_search_skips_non_numeric_stored_price(client):
    client.put("/hotel-api/hotels/1", json={"price": "expensive"})

    response = client.get("/hotel-api/hotels/search", params={"min_price": "0"})

    assert response.status_code == 200
    assert [h["name"] for h in response.json()] == ["Seaside Resort"]


def test_create_falsy_optionals_become_defaults(client):
    response = client.post(
        "/hotel-api/hotels",
        json={**NEW_HOTEL, "rating": 0, "available_rooms": 0, "description": ""},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["rating"] is None
    assert body["available_rooms"] is None
    assert body["description"] == ""


def test_integer_prices_stay_integers(client):
    seeded = client.get("/hotel-api/hotels/1").json()
    created = client.post("/hotel-api/hotels", json=NEW_HOTEL).json()
    fractional = client.post(
        "/hotel-api/hotels", json={**NEW_HOTEL, "price": 99.5}
    ).json()

    assert seeded["price"] == 100 and isinstance(seeded["price"], int)
    assert created["price"] == 220 and isinstance(created["price"], int)
    assert fractional["price"] == 99.5


def test_hex_id_reads_like_parse_int(client):
    response = client.get("/hotel-api/hotels/0x2")

    assert response.status_code == 200
    assert response.json()["name"] == "Seaside Resort"


def test_search_infinite_max_price_keeps_everything(client):
    response = client.get(
        "/hotel-api/hotels/search", params={"min_price": "-Infinity", "max_price": "Infinity"}
    )

    assert len(response.json()) == 2
