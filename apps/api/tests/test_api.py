"""
tests/test_api.py - HTTP surface, error envelope and the Colosseum scenario.

Uses FastAPI's TestClient, no server process needed.
"""

import pytest


def _arena(client, **overrides):
    body = {"name": "Римский Колизей", "city": "Рим", "capacity": 50000}
    body.update(overrides)
    return client.post("/arenas", json=body)


def _event(client, arena_id, **overrides):
    body = {"arena_id": arena_id, "event_date": "0080-06-21", "event_type": "бой с варварами"}
    body.update(overrides)
    return client.post("/events", json=body)


@pytest.fixture
def scenario(client):
    arena = _arena(client).json()
    event = _event(client, arena["id"]).json()
    for ptype, count in (("gladiator", 4), ("retiarius", 2), ("barbarian", 8)):
        resp = client.post("/participants", json={"event_id": event["id"], "type": ptype, "count": count})
        assert resp.status_code == 201
    return {"arena_id": arena["id"], "event_id": event["id"]}


# ======================================================================
# Envelope / health
# ======================================================================


class TestEnvelope:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert data["db"]["status"] == "ok"
        assert data["db"]["kind"] == "sqlite"
        assert "version" in data

    def test_request_id_echoed(self, client):
        resp = client.get("/health", headers={"X-Request-Id": "RID-123"})
        assert resp.headers["X-Request-Id"] == "RID-123"

    def test_request_id_generated(self, client):
        resp = client.get("/health")
        assert resp.headers.get("X-Request-Id")

    def test_constraint_violation_envelope(self, client):
        resp = client.post(
            "/arenas", json={"name": "x", "city": "y", "capacity": 0}, headers={"X-Request-Id": "RID-9"}
        )
        assert resp.status_code == 409
        data = resp.json()
        assert data["error"] == "constraint_violation"
        assert "CHECK constraint failed" in data["message"]
        assert data["request_id"] == "RID-9"
        assert resp.headers["X-Request-Id"] == "RID-9"

    def test_not_found_envelope(self, client):
        resp = client.get("/arenas/42")
        assert resp.status_code == 404
        assert resp.json()["error"] == "http_error"

    def test_validation_envelope(self, client):
        resp = client.post("/arenas", json={"name": "x", "city": "y", "capacity": "lots"})
        assert resp.status_code == 422
        assert resp.json()["error"] == "validation_error"


# ======================================================================
# CRUD
# ======================================================================


class TestArenas:
    def test_create_get_patch(self, client):
        a = _arena(client).json()
        assert client.get(f"/arenas/{a['id']}").json()["name"] == "Римский Колизей"
        resp = client.patch(f"/arenas/{a['id']}", json={"capacity": 55000})
        assert resp.status_code == 200
        assert resp.json()["capacity"] == 55000
        assert resp.json()["city"] == "Рим"

    def test_list_pagination(self, client):
        for i in range(3):
            _arena(client, name=f"arena-{i}")
        resp = client.get("/arenas", params={"limit": 2, "offset": 0})
        data = resp.json()
        assert [a["name"] for a in data["items"]] == ["arena-0", "arena-1"]
        assert data["page"] == {"limit": 2, "offset": 0, "total": 3, "has_more": True}

        data = client.get("/arenas", params={"limit": 2, "offset": 2}).json()
        assert len(data["items"]) == 1
        assert data["page"]["has_more"] is False

    def test_limit_clamped(self, client):
        data = client.get("/arenas", params={"limit": 1000}).json()
        assert data["page"]["limit"] == 200

    def test_delete_cascades(self, client, scenario):
        eid = scenario["event_id"]
        client.post("/beasts", json={"event_id": eid, "species": "lion", "count": 2})
        client.post("/battle_results", json={"event_id": eid, "participant_type": "gladiator", "survived": 1})

        resp = client.delete(f"/arenas/{scenario['arena_id']}")
        assert resp.status_code == 204

        assert client.get(f"/events/{eid}").status_code == 404
        assert client.get("/participants").json()["page"]["total"] == 0
        assert client.get("/beasts").json()["page"]["total"] == 0
        assert client.get("/battle_results").json()["page"]["total"] == 0

    def test_delete_unknown_arena_404(self, client):
        assert client.delete("/arenas/77").status_code == 404


class TestEvents:
    def test_unknown_arena_rejected(self, client):
        resp = _event(client, 999)
        assert resp.status_code == 409
        assert "FOREIGN KEY" in resp.json()["message"]

    def test_list_filtered_by_arena(self, client, scenario):
        other = _arena(client, name="Verona").json()
        _event(client, other["id"], event_type="скачки")
        data = client.get("/events", params={"arena_id": other["id"]}).json()
        assert [e["event_type"] for e in data["items"]] == ["скачки"]

    def test_delete_event_procedure(self, client, scenario):
        eid = scenario["event_id"]
        resp = client.delete(f"/events/{eid}")
        assert resp.status_code == 200
        assert resp.json() == {"event_id": eid, "deleted": True, "status": "ok"}
        assert client.get("/participants", params={"event_id": eid}).json()["items"] == []

    def test_delete_unknown_event_is_noop(self, client, scenario):
        resp = client.delete("/events/31337")
        assert resp.status_code == 200
        assert resp.json()["deleted"] is False
        assert client.get("/events").json()["page"]["total"] == 1


class TestParticipants:
    def test_negative_count_rejected(self, client, scenario):
        resp = client.post("/participants", json={"event_id": scenario["event_id"], "type": "archer", "count": -1})
        assert resp.status_code == 409
        assert "negative" in resp.json()["message"]

    def test_enumeration_mismatch_rejected(self, client, scenario):
        resp = client.post("/participants", json={"event_id": scenario["event_id"], "type": "ninja", "count": 1})
        assert resp.status_code == 409
        assert resp.json()["error"] == "constraint_violation"

    def test_upsert_twice(self, client, scenario):
        url = f"/events/{scenario['event_id']}/participants/archer"
        r1 = client.put(url, json={"count": 10, "strength_level": "novice", "cost": 20, "age": 18, "battles_count": 0})
        assert r1.status_code == 200
        assert r1.json()["created"] is True

        r2 = client.put(url, json={"count": 12, "strength_level": "veteran", "cost": 80, "age": 30, "battles_count": 9})
        assert r2.json()["created"] is False
        p = r2.json()["participant"]
        assert p["id"] == r1.json()["participant"]["id"]
        assert (p["count"], p["strength_level"], p["age"], p["battles_count"]) == (12, "veteran", 30, 9)

        listed = client.get("/participants", params={"event_id": scenario["event_id"], "type": "archer"}).json()
        assert listed["page"]["total"] == 1

    def test_upsert_unknown_event(self, client):
        resp = client.put("/events/5/participants/archer", json={"count": 1})
        assert resp.status_code == 409

    def test_patch_and_delete(self, client, scenario):
        pid = client.get("/participants", params={"type": "barbarian"}).json()["items"][0]["id"]
        resp = client.patch(f"/participants/{pid}", json={"age": 41})
        assert resp.json()["age"] == 41
        assert resp.json()["count"] == 8
        assert client.delete(f"/participants/{pid}").status_code == 204
        assert client.get(f"/participants/{pid}").status_code == 404

    def test_patch_type_outside_enumeration_rejected(self, client, scenario):
        pid = client.get("/participants", params={"type": "barbarian"}).json()["items"][0]["id"]
        resp = client.patch(f"/participants/{pid}", json={"type": "samurai"})
        assert resp.status_code == 409
        assert resp.json()["error"] == "constraint_violation"
        assert client.get(f"/participants/{pid}").json()["type"] == "barbarian"

    def test_patch_type_and_event(self, client, scenario):
        other = _event(client, scenario["arena_id"], event_type="скачки").json()
        pid = client.get("/participants", params={"type": "barbarian"}).json()["items"][0]["id"]
        resp = client.patch(f"/participants/{pid}", json={"type": "archer", "event_id": other["id"]})
        assert resp.status_code == 200
        assert (resp.json()["type"], resp.json()["event_id"]) == ("archer", other["id"])

    def test_patch_to_unknown_event_rejected(self, client, scenario):
        pid = client.get("/participants", params={"type": "barbarian"}).json()["items"][0]["id"]
        resp = client.patch(f"/participants/{pid}", json={"event_id": 999})
        assert resp.status_code == 409
        assert "FOREIGN KEY" in resp.json()["message"]

    def test_cost_is_decimal(self, client, scenario):
        url = f"/events/{scenario['event_id']}/participants/slinger"
        resp = client.put(url, json={"count": 3, "cost": "80.5"})
        assert resp.json()["participant"]["cost"] == "80.50"

        resp = client.put(url, json={"count": 3, "cost": "0.125"})
        assert resp.status_code == 422


class TestBeasts:
    def test_patch_species_outside_enumeration_rejected(self, client, scenario):
        bid = client.post("/beasts", json={"event_id": scenario["event_id"], "species": "lion", "count": 2}).json()["id"]
        resp = client.patch(f"/beasts/{bid}", json={"species": "elephant"})
        assert resp.status_code == 409
        assert client.get(f"/beasts/{bid}").json()["species"] == "lion"

    def test_patch_species(self, client, scenario):
        bid = client.post("/beasts", json={"event_id": scenario["event_id"], "species": "lion", "count": 2}).json()["id"]
        resp = client.patch(f"/beasts/{bid}", json={"species": "jackal", "entertainment_value": 6.25})
        assert resp.status_code == 200
        assert resp.json()["species"] == "jackal"
        assert resp.json()["entertainment_value"] == "6.25"


class TestBattleResults:
    def test_colosseum_scenario(self, client, scenario):
        eid = scenario["event_id"]
        for label, survived in (("gladiator", 2), ("retiarius", 1), ("barbarian", 0)):
            resp = client.post("/battle_results", json={"event_id": eid, "participant_type": label, "survived": survived})
            assert resp.status_code == 201, resp.json()

        resp = client.post("/battle_results", json={"event_id": eid, "participant_type": "gladiator", "survived": 5})
        assert resp.status_code == 409
        assert resp.json()["message"] == "survivor count cannot exceed participant count"
        assert client.get("/battle_results", params={"event_id": eid}).json()["page"]["total"] == 3

    def test_patch_over_count_rejected(self, client, scenario):
        eid = scenario["event_id"]
        rid = client.post(
            "/battle_results", json={"event_id": eid, "participant_type": "retiarius", "survived": 2}
        ).json()["id"]
        resp = client.patch(f"/battle_results/{rid}", json={"survived": 3})
        assert resp.status_code == 409
        assert client.get(f"/battle_results/{rid}").json()["survived"] == 2

    def test_patch_event_rechecks_survivors(self, client, scenario):
        other = _event(client, scenario["arena_id"], event_type="скачки").json()
        client.post("/participants", json={"event_id": other["id"], "type": "gladiator", "count": 1})
        rid = client.post(
            "/battle_results", json={"event_id": scenario["event_id"], "participant_type": "gladiator", "survived": 3}
        ).json()["id"]

        resp = client.patch(f"/battle_results/{rid}", json={"event_id": other["id"]})
        assert resp.status_code == 409
        assert resp.json()["message"] == "survivor count cannot exceed participant count"
        assert client.get(f"/battle_results/{rid}").json()["event_id"] == scenario["event_id"]


# ======================================================================
# Views / seed
# ======================================================================


class TestViews:
    def test_summaries(self, client, scenario):
        eid = scenario["event_id"]
        client.post("/participants", json={"event_id": eid, "type": "gladiator", "count": 1})
        client.post("/beasts", json={"event_id": eid, "species": "leopard", "count": 2})

        rows = client.get("/views/participants_summary", params={"event_id": eid}).json()["items"]
        assert {r["type"]: r["total_count"] for r in rows} == {"barbarian": 8, "gladiator": 5, "retiarius": 2}

        rows = client.get("/views/beast_summary", params={"event_id": eid}).json()["items"]
        assert rows == [{"event_id": eid, "species": "leopard", "total_count": 2}]

        rows = client.get("/views/event_details").json()["items"]
        assert rows == [
            {
                "event_id": eid,
                "event_date": "0080-06-21",
                "event_type": "бой с варварами",
                "arena_name": "Римский Колизей",
                "city": "Рим",
            }
        ]


class TestSeed:
    def test_seed_demo(self, client):
        resp = client.post("/seed/demo")
        assert resp.status_code == 200
        data = resp.json()
        assert len(data["event_ids"]) == 2

        first, second = data["event_ids"]
        summary = client.get("/views/participants_summary", params={"event_id": first}).json()["items"]
        assert {r["type"]: r["total_count"] for r in summary} == {"gladiator": 4, "retiarius": 2, "barbarian": 8}

        beasts = client.get("/views/beast_summary", params={"event_id": second}).json()["items"]
        assert {r["species"]: r["total_count"] for r in beasts} == {"lion": 3, "leopard": 2}

        results = client.get("/battle_results", params={"event_id": second}).json()["items"]
        assert {r["participant_type"] for r in results} == {"victim", "lion", "leopard"}
