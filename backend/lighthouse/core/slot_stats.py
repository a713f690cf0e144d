"""Derived statistics carried alongside a slot when it is rendered."""

from dataclasses import dataclass

# Unrated slots sit at the middle of the star scale instead of at the bottom
DEFAULT_AVERAGE_RATING = 3.0


@dataclass(frozen=True)
class SlotStats:
    heart_count: int = 0
    thumbs_up: int = 0
    thumbs_down: int = 0
    average_rating: float = DEFAULT_AVERAGE_RATING
