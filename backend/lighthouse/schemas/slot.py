"""Slot-related Pydantic schemas."""

from pydantic import BaseModel

from lighthouse.models.game_version import GameVersion


class SlotSummary(BaseModel):
    """Listing entry; play totals are derived from the per-game counters."""
    slot_id: int
    name: str
    description: str
    icon_hash: str
    creator_id: int | None
    game_version: GameVersion
    team_pick: bool
    resources: list[str]
    minimum_players: int
    maximum_players: int
    first_uploaded: int
    last_updated: int
    plays: int
    plays_unique: int
    plays_complete: int

    model_config = {"from_attributes": True}


class SlotStatsResponse(BaseModel):
    slot_id: int
    heart_count: int
    thumbs_up: int
    thumbs_down: int
    average_rating: float
