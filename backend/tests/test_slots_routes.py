"""Route integration tests for the slot catalog endpoints."""

import pytest

from lighthouse.models import GameVersion, HeartedLevel, Location, RatedLevel, User, VisitedLevel


@pytest.fixture
async def seeded(db, slot_factory):
    """A creator, a location and three slots, one of them team picked."""
    db.add_all([
        User(id=1, username="sackboy"),
        User(id=2, username="viewer"),
        Location(id=1, x=5, y=6),
        slot_factory(1, name="Picked", team_pick=True, creator_id=1, location_id=1,
                     resource_collection="r1,r2", plays_lbp2=7),
        slot_factory(2, name="Plain", creator_id=1, game_version=GameVersion.LITTLE_BIG_PLANET_3),
        slot_factory(3, name="Orphan", creator_id=99, location_id=99, sub_level=True),
        HeartedLevel(slot_id=1, user_id=2),
        RatedLevel(slot_id=1, user_id=2, rating=1, rating_lbp1=5),
        VisitedLevel(slot_id=1, user_id=2, plays_lbp1=0, plays_lbp2=3, plays_lbp3=0),
    ])
    await db.commit()


async def test_list_all_slots(client, seeded):
    resp = await client.get("/api/slots/")
    assert resp.status_code == 200

    data = resp.json()
    assert [s["slot_id"] for s in data] == [1, 2, 3]
    assert data[0]["resources"] == ["r1", "r2"]
    assert data[0]["plays"] == 7


async def test_list_team_picks(client, seeded):
    resp = await client.get("/api/slots/", params={"team_pick": "true"})
    assert resp.status_code == 200
    assert [s["slot_id"] for s in resp.json()] == [1]


async def test_list_combined_filters(client, seeded):
    resp = await client.get(
        "/api/slots/", params={"exclude_sub_levels": "true", "game_version": "1"}
    )
    assert [s["slot_id"] for s in resp.json()] == [1]


async def test_list_paging(client, seeded):
    resp = await client.get("/api/slots/", params={"limit": 1, "offset": 1})
    assert [s["slot_id"] for s in resp.json()] == [2]


async def test_unknown_filter_is_rejected(client, seeded):
    resp = await client.get("/api/slots/", params={"color": "blue"})
    assert resp.status_code == 400
    assert "unknown filter" in resp.json()["detail"].lower()


async def test_bad_filter_value_is_rejected(client, seeded):
    resp = await client.get("/api/slots/", params={"players": "lots"})
    assert resp.status_code == 400


async def test_get_slot_document(client, seeded):
    resp = await client.get("/api/slots/1")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/xml")

    body = resp.text
    assert body.startswith('<slot type="user"><name>Picked</name><id>1</id>')
    assert "<npHandle>sackboy</npHandle>" in body
    assert "<location><x>5</x><y>6</y></location>" in body
    assert "<heartCount>1</heartCount>" in body
    assert "<thumbsup>1</thumbsup>" in body
    assert "<averageRating>5.0</averageRating>" in body
    assert "<yourDPadRating></yourDPadRating>" in body


async def test_get_slot_with_viewer(client, seeded):
    resp = await client.get("/api/slots/1", params={"viewer_id": 2})
    body = resp.text
    assert "<yourRating>5.0</yourRating>" in body
    assert "<yourDPadRating>1</yourDPadRating>" in body
    assert "<yourLBP2PlayCount>3</yourLBP2PlayCount>" in body


async def test_get_slot_with_missing_references(client, seeded):
    resp = await client.get("/api/slots/3")
    assert resp.status_code == 200
    assert "<npHandle>" not in resp.text
    assert "<location>" not in resp.text
    assert "<averageRating>3.0</averageRating>" in resp.text


async def test_get_slot_not_found(client, seeded):
    resp = await client.get("/api/slots/999")
    assert resp.status_code == 404
    assert "not found" in resp.json()["detail"].lower()


async def test_slot_stats(client, seeded):
    resp = await client.get("/api/slots/1/stats")
    assert resp.status_code == 200
    assert resp.json() == {
        "slot_id": 1,
        "heart_count": 1,
        "thumbs_up": 1,
        "thumbs_down": 0,
        "average_rating": 5.0,
    }


async def test_stats_for_unknown_slot_are_empty(client, seeded):
    resp = await client.get("/api/slots/999/stats")
    assert resp.status_code == 200
    assert resp.json()["heart_count"] == 0
    assert resp.json()["average_rating"] == 3.0


async def test_health(client):
    resp = await client.get("/health")
    assert resp.json() == {"status": "ok"}
