"""
HTTP API Tests
==============
Routers, response shapes and error mapping, against an in-memory nurse.
"""

import pytest
from fastapi.testclient import TestClient

from plantnurse.api.main import create_app
from plantnurse.core.types import DEFAULT_ROOM_ID


@pytest.fixture()
def client(nurse):
    with TestClient(create_app(nurse)) as client:
        yield client


@pytest.fixture()
def plant(client):
    resp = client.post("/api/plants", json={
        "species_id": "pothos", "custom_name": "Fred", "room_id": DEFAULT_ROOM_ID,
    })
    assert resp.status_code == 201
    return resp.json()


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"

    def test_error_shape_documented(self, client):
        schema = client.get("/openapi.json").json()
        responses = schema["paths"]["/api/plants/{plant_id}"]["get"]["responses"]
        for code in ("404", "409", "507"):
            ref = responses[code]["content"]["application/json"]["schema"]["$ref"]
            assert ref == "#/components/schemas/ErrorResponse"
        assert "ErrorResponse" in schema["components"]["schemas"]


class TestPlantsApi:
    def test_create_includes_care_signals(self, plant):
        assert plant["custom_name"] == "Fred"
        assert plant["status"] == "recently-checked"
        assert plant["check_frequency"] == 7
        assert plant["days_since_last_check_in"] == 0

    def test_list(self, client, plant):
        resp = client.get("/api/plants")
        assert [p["id"] for p in resp.json()] == [plant["id"]]

    def test_blank_name_is_422(self, client):
        resp = client.post("/api/plants", json={"custom_name": " ", "room_id": DEFAULT_ROOM_ID, "species_id": "pothos"})
        assert resp.status_code == 422
        assert resp.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_unknown_room_is_404(self, client):
        resp = client.post("/api/plants", json={"custom_name": "Fred", "room_id": "attic", "species_id": "pothos"})
        assert resp.status_code == 404

    def test_unknown_plant_is_404(self, client):
        resp = client.get("/api/plants/nope")
        assert resp.status_code == 404
        assert resp.json()["error"]["details"] == {"kind": "plant", "id": "nope"}

    def test_patch_changes_only_sent_fields(self, client, nurse, plant):
        resp = client.patch(f"/api/plants/{plant['id']}", json={"size": "large"})
        assert resp.status_code == 200
        assert resp.json()["size"] == "large"
        assert resp.json()["custom_name"] == "Fred"
        (record,) = nurse.edit_history.for_plant(plant["id"])
        assert [c.field for c in record.changes] == ["size"]

    def test_delete(self, client, plant):
        assert client.delete(f"/api/plants/{plant['id']}").status_code == 200
        assert client.get(f"/api/plants/{plant['id']}").status_code == 404

    def test_reorder(self, client, plant):
        other = client.post("/api/plants", json={
            "is_custom": True, "custom_name": "Boston", "room_id": DEFAULT_ROOM_ID,
        }).json()
        resp = client.put("/api/plants/order", json={"plant_ids": [other["id"], plant["id"]]})
        assert resp.status_code == 200
        assert [p["id"] for p in resp.json()] == [other["id"], plant["id"]]

    def test_status_and_schedule(self, client, plant, clock):
        clock.advance(days=8)
        status = client.get(f"/api/plants/{plant['id']}/status").json()
        assert status == {"plant_id": plant["id"], "status": "check-soon", "check_frequency": 7}

        strict = client.get(f"/api/plants/{plant['id']}/status", params={"frequency": 3}).json()
        assert strict["status"] == "needs-attention"

        schedule = client.get(f"/api/plants/{plant['id']}/schedule").json()
        assert schedule["days_since_last_check_in"] == 8
        assert schedule["is_due"] is True


class TestCheckInsApi:
    def test_check_in_and_history(self, client, plant, clock):
        clock.advance(days=1)
        resp = client.post(f"/api/plants/{plant['id']}/check-ins", json={
            "soil_moisture": "dry",
            "leaf_condition": ["yellowing"],
            "actions_taken": ["watered"],
            "condition": "needs-attention",
        })
        assert resp.status_code == 201
        assert resp.json()["plant_id"] == plant["id"]

        check_ins = client.get(f"/api/plants/{plant['id']}/check-ins").json()
        assert len(check_ins) == 1

        history = client.get(f"/api/plants/{plant['id']}/history").json()
        assert [e["type"] for e in history] == ["check-in", "edit", "created"]

        assert client.get(f"/api/plants/{plant['id']}").json()["condition"] == "needs-attention"

    def test_empty_check_in_is_422(self, client, plant):
        resp = client.post(f"/api/plants/{plant['id']}/check-ins", json={})
        assert resp.status_code == 422

    def test_issues(self, client, plant):
        client.post(f"/api/plants/{plant['id']}/check-ins", json={"leaf_condition": ["yellowing"]})
        issues = client.get(f"/api/plants/{plant['id']}/issues").json()
        assert [i["symptom"] for i in issues] == ["Yellow leaves"]


class TestRoomsApi:
    def test_list_with_counts(self, client, plant):
        rooms = client.get("/api/rooms").json()
        assert [(r["id"], r["plant_count"]) for r in rooms] == [(DEFAULT_ROOM_ID, 1)]

    def test_create_update_delete(self, client):
        room = client.post("/api/rooms", json={"name": "Kitchen", "light_level": "direct"})
        assert room.status_code == 201
        room_id = room.json()["id"]

        resp = client.patch(f"/api/rooms/{room_id}", json={"temperature": "warm"})
        assert resp.json()["temperature"] == "warm"
        assert resp.json()["name"] == "Kitchen"

        assert client.delete(f"/api/rooms/{room_id}").status_code == 200
        assert client.get(f"/api/rooms/{room_id}").status_code == 404

    def test_default_room_delete_is_409(self, client):
        resp = client.delete(f"/api/rooms/{DEFAULT_ROOM_ID}")
        assert resp.status_code == 409
        assert resp.json()["error"]["code"] == "INVARIANT_VIOLATION"

    def test_occupied_room_delete_is_409(self, client):
        room_id = client.post("/api/rooms", json={"name": "Kitchen"}).json()["id"]
        client.post("/api/plants", json={"species_id": "aloe-vera", "custom_name": "Al", "room_id": room_id})
        assert client.delete(f"/api/rooms/{room_id}").status_code == 409


class TestStorageFailureApi:
    def test_failed_write_is_507(self, client, storage, plant):
        storage.fail = True
        resp = client.patch(f"/api/plants/{plant['id']}", json={"custom_name": "Freddy"})
        assert resp.status_code == 507
        storage.fail = False
        assert client.get(f"/api/plants/{plant['id']}").json()["custom_name"] == "Fred"


class TestSpeciesApi:
    def test_search(self, client):
        results = client.get("/api/species", params={"q": "devil"}).json()
        assert [s["species_id"] for s in results] == ["pothos"]
        assert results[0]["check_frequency"] == 7

    def test_get(self, client):
        assert client.get("/api/species/snake-plant").json()["common_name"] == "Snake Plant"

    def test_unknown_species_is_404(self, client):
        assert client.get("/api/species/triffid").status_code == 404
