"""Game versions a slot can be published for."""

from enum import IntEnum

from sqlalchemy import Integer
from sqlalchemy.types import TypeDecorator


class GameVersion(IntEnum):
    LITTLE_BIG_PLANET_1 = 0
    LITTLE_BIG_PLANET_2 = 1
    LITTLE_BIG_PLANET_3 = 2
    LITTLE_BIG_PLANET_VITA = 3
    LITTLE_BIG_PLANET_PSP = 4
    UNKNOWN = -1


class GameVersionType(TypeDecorator):
    """Stores a GameVersion as its integer value so it can be range-compared in SQL."""

    impl = Integer
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return int(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        try:
            return GameVersion(value)
        except ValueError:
            return GameVersion.UNKNOWN
