"""Database models package."""

from lighthouse.models.game_version import GameVersion
from lighthouse.models.user import User
from lighthouse.models.location import Location
from lighthouse.models.slot import Slot
from lighthouse.models.heart import HeartedLevel
from lighthouse.models.rating import RatedLevel
from lighthouse.models.visit import VisitedLevel

__all__ = ["GameVersion", "User", "Location", "Slot", "HeartedLevel", "RatedLevel", "VisitedLevel"]
