"""Lofty View Routes: list, fetch and create through the HTTP surface.

Invariants:
    - Every body is the envelope {success, message, responseObject, statusCode}
    - HTTP status equals the envelope statusCode
    - Invalid ids answer 400 before storage is touched
    - GET after POST returns the record POST returned
"""

from httpx import ASGITransport, AsyncClient

from lofty_api.config import Settings
from lofty_api.main import create_app


async def test_list_returns_seeded_views(client):
    res = await client.get("/lofty-views")
    body = res.json()

    assert res.status_code == 200
    assert body["success"] is True
    assert body["message"] == "Lofty views found"
    assert body["statusCode"] == 200
    assert [v["name"] for v in body["responseObject"]] == [
        "Golden Gate Bridge", "Grand Canyon Sunrise", "Mount Fuji",
    ]


async def test_list_uses_camel_case_fields(client):
    res = await client.get("/lofty-views")
    view = res.json()["responseObject"][0]

    assert set(view) == {
        "id", "name", "description", "location", "hearts", "createdAt", "updatedAt",
    }
    assert view["createdAt"].startswith("2024-01-15T10:30:00")


async def test_empty_list_is_success():
    app = create_app(Settings(seed_demo_data=False))
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.get("/lofty-views")

    assert res.status_code == 200
    assert res.json()["success"] is True
    assert res.json()["responseObject"] == []


async def test_get_existing_view(client):
    res = await client.get("/lofty-views/1")
    body = res.json()

    assert res.status_code == 200
    assert body["message"] == "Lofty view found"
    assert body["responseObject"]["name"] == "Golden Gate Bridge"
    assert body["responseObject"]["hearts"] == 42


async def test_get_unknown_view_returns_404(client):
    res = await client.get("/lofty-views/999")
    body = res.json()

    assert res.status_code == 404
    assert body == {
        "success": False,
        "message": "Lofty view not found",
        "responseObject": None,
        "statusCode": 404,
    }


async def test_get_non_numeric_id_returns_400(client):
    res = await client.get("/lofty-views/abc")
    body = res.json()

    assert res.status_code == 400
    assert body["success"] is False
    assert body["statusCode"] == 400
    assert body["responseObject"] is None
    assert body["message"].startswith("Invalid input")
    assert "ID must be a numeric value" in body["message"]


async def test_get_zero_and_negative_ids_return_400(client):
    for bad_id in ("0", "-1"):
        res = await client.get(f"/lofty-views/{bad_id}")
        assert res.status_code == 400
        assert "ID must be a positive number" in res.json()["message"]


async def test_create_view_assigns_server_fields(client, view_repository):
    res = await client.post("/lofty-views", json={"name": "Test View"})
    body = res.json()
    view = body["responseObject"]

    assert res.status_code == 201
    assert body["message"] == "Lofty view created successfully"
    assert view["id"] == 4
    assert view["name"] == "Test View"
    assert view["description"] is None
    assert view["location"] is None
    assert view["hearts"] == 0
    assert view["createdAt"] == view["updatedAt"]
    assert len(view_repository) == 4


async def test_create_ignores_client_supplied_server_fields(client):
    res = await client.post(
        "/lofty-views", json={"name": "Sneaky", "id": 50, "hearts": 1000},
    )
    view = res.json()["responseObject"]

    assert view["id"] == 4
    assert view["hearts"] == 0


async def test_create_with_all_fields(client):
    payload = {
        "name": "Northern Lights",
        "description": "Aurora over the fjords",
        "location": "Tromsø, Norway",
    }
    res = await client.post("/lofty-views", json=payload)
    view = res.json()["responseObject"]

    assert res.status_code == 201
    assert {k: view[k] for k in payload} == payload


async def test_get_after_create_round_trips(client):
    created = (await client.post("/lofty-views", json={"name": "Round Trip"})).json()
    view_id = created["responseObject"]["id"]

    fetched = (await client.get(f"/lofty-views/{view_id}")).json()

    assert fetched["responseObject"] == created["responseObject"]


async def test_create_without_name_returns_400(client, view_repository):
    res = await client.post("/lofty-views", json={"description": "no name"})
    body = res.json()

    assert res.status_code == 400
    assert body["responseObject"] is None
    assert "body.name" in body["message"]
    assert len(view_repository) == 3


async def test_create_with_empty_name_returns_400(client):
    res = await client.post("/lofty-views", json={"name": ""})

    assert res.status_code == 400
    assert res.json()["message"] == "Invalid input: body.name: Name is required"


async def test_create_with_wrong_types_returns_400(client):
    res = await client.post("/lofty-views", json={"name": 123, "location": ["x"]})
    message = res.json()["message"]

    assert res.status_code == 400
    assert "body.name" in message
    assert "body.location" in message


async def test_lofty_views_have_no_delete_route(client):
    res = await client.delete("/lofty-views/1")
    assert res.status_code == 405
