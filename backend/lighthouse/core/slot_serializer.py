"""Renders a slot as the ``<slot type="user">`` document the game client reads.

Element order is part of the client contract and must not change. Everything
needing storage (stats, creator, location, viewer records) is passed in, so
rendering itself does no I/O.
"""

from lighthouse.core.serializer import string_element, tagged_string_element
from lighthouse.core.slot_stats import SlotStats
from lighthouse.models.location import Location
from lighthouse.models.rating import RatedLevel
from lighthouse.models.slot import Slot
from lighthouse.models.user import User
from lighthouse.models.visit import VisitedLevel


def serialize_resources(slot: Slot) -> str:
    return "".join(string_element("resource", resource) for resource in slot.resources)


def serialize_viewer_stats(your_rating: RatedLevel | None, your_visit: VisitedLevel | None) -> str:
    """The viewer's own rating and plays; empty elements when there's no viewer."""
    return (
        string_element("yourRating", your_rating.rating_lbp1 if your_rating else None)
        + string_element("yourDPadRating", your_rating.rating if your_rating else None)
        + string_element("yourLBP1PlayCount", your_visit.plays_lbp1 if your_visit else None)
        + string_element("yourLBP2PlayCount", your_visit.plays_lbp2 if your_visit else None)
        + string_element("yourLBP3PlayCount", your_visit.plays_lbp3 if your_visit else None)
    )


def serialize_slot(
    slot: Slot,
    stats: SlotStats,
    creator: User | None = None,
    location: Location | None = None,
    your_rating: RatedLevel | None = None,
    your_visit: VisitedLevel | None = None,
) -> str:
    slot_data = (
        string_element("name", slot.name)
        + string_element("id", slot.slot_id)
        + string_element("game", slot.game_version)
        + (string_element("npHandle", creator.username) if creator is not None else "")
        + string_element("description", slot.description)
        + string_element("icon", slot.icon_hash)
        + string_element("rootLevel", slot.root_level)
        + serialize_resources(slot)
        + (string_element("location", location.serialize(), raw=True) if location is not None else "")
        + string_element("initiallyLocked", slot.initially_locked)
        + string_element("isSubLevel", slot.sub_level)
        + string_element("isLBP1Only", slot.lbp1_only)
        + string_element("shareable", slot.shareable)
        + string_element("background", slot.background_hash)
        + string_element("minPlayers", slot.minimum_players)
        + string_element("maxPlayers", slot.maximum_players)
        + string_element("moveRequired", slot.move_required)
        + string_element("firstPublished", slot.first_uploaded)
        + string_element("lastUpdated", slot.last_updated)
        + string_element("mmpick", slot.team_pick)
        + string_element("heartCount", stats.heart_count)
        + string_element("playCount", slot.plays)
        + string_element("uniquePlayCount", slot.plays_unique)
        + string_element("completionCount", slot.plays_complete)
        + string_element("lbp1PlayCount", slot.plays_lbp1)
        + string_element("lbp1CompletionCount", slot.plays_lbp1_complete)
        + string_element("lbp1UniquePlayCount", slot.plays_lbp1_unique)
        + string_element("lbp2PlayCount", slot.plays_lbp2)
        + string_element("lbp2CompletionCount", slot.plays_lbp2_complete)
        + string_element("lbp2UniquePlayCount", slot.plays_lbp2_unique)
        + string_element("lbp3PlayCount", slot.plays_lbp3)
        + string_element("lbp3CompletionCount", slot.plays_lbp3_complete)
        + string_element("lbp3UniquePlayCount", slot.plays_lbp3_unique)
        + string_element("thumbsup", stats.thumbs_up)
        + string_element("thumbsdown", stats.thumbs_down)
        + string_element("averageRating", float(stats.average_rating))
        + string_element("leveltype", slot.level_type)
        + serialize_viewer_stats(your_rating, your_visit)
    )
    return tagged_string_element("slot", slot_data, "type", "user")
