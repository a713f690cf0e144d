"""Tests for the Slot model - derived play totals and persisted defaults."""

from sqlalchemy import select

from lighthouse.models import GameVersion, Slot


def test_plays_sum_per_game_counters(slot_factory):
    slot = slot_factory(1, plays_lbp1=10, plays_lbp2=5, plays_lbp3=0)
    assert slot.plays == 15


def test_unique_and_complete_totals(slot_factory):
    slot = slot_factory(
        1,
        plays_lbp1_unique=3, plays_lbp2_unique=4, plays_lbp3_unique=5,
        plays_lbp1_complete=1, plays_lbp2_complete=2, plays_lbp3_complete=7,
    )
    assert slot.plays_unique == 12
    assert slot.plays_complete == 10


def test_totals_follow_counter_updates(slot_factory):
    slot = slot_factory(1, plays_lbp2=2)
    assert slot.plays == 2
    slot.plays_lbp3 = 8
    assert slot.plays == 10


def test_transient_slot_without_counters():
    assert Slot(slot_id=1).plays == 0


async def test_defaults_after_insert(db):
    slot = Slot(slot_id=7, name="Defaults")
    db.add(slot)
    await db.flush()
    await db.refresh(slot)

    assert slot.background_hash == ""
    assert slot.team_pick is False
    assert slot.game_version == GameVersion.LITTLE_BIG_PLANET_1
    assert slot.plays == 0
    assert slot.resources == []


async def test_game_version_round_trips_as_enum(db, slot_factory):
    db.add(slot_factory(3, game_version=GameVersion.LITTLE_BIG_PLANET_3))
    await db.flush()
    db.expunge_all()

    slot = (await db.execute(select(Slot).where(Slot.slot_id == 3))).scalar_one()
    assert slot.game_version is GameVersion.LITTLE_BIG_PLANET_3


async def test_plays_usable_in_queries(db, slot_factory):
    db.add_all([
        slot_factory(1, plays_lbp1=10, plays_lbp2=5),
        slot_factory(2, plays_lbp3=3),
    ])
    await db.flush()

    result = await db.execute(select(Slot.slot_id).where(Slot.plays > 10))
    assert result.scalars().all() == [1]
