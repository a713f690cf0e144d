"""Slot filters - composable predicates for catalog listing and search.

Every filter answers the same question twice: ``test`` evaluates a loaded
slot in memory, ``get_predicate`` returns the equivalent SQL expression so
the rule can be pushed down into the query. Both must agree for every slot.
"""

import string
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

from sqlalchemy import ColumnElement, Select, String, and_, func, literal, not_, or_, select, true

from lighthouse.models.game_version import GameVersion
from lighthouse.models.slot import Slot


class UnknownFilterError(ValueError):
    """Raised when a filter is requested by a name or value we can't build."""


class SlotFilter(ABC):
    @abstractmethod
    def test(self, slot: Slot) -> bool:
        """Pure check against the slot's own fields."""

    @abstractmethod
    def get_predicate(self) -> ColumnElement[bool]:
        """The same rule as a SQL boolean expression over ``Slot``."""


class TeamPickFilter(SlotFilter):
    """Only slots picked by the team (the "featured" list)."""

    def test(self, slot: Slot) -> bool:
        return bool(slot.team_pick)

    def get_predicate(self) -> ColumnElement[bool]:
        return Slot.team_pick.is_(True)


class GameVersionFilter(SlotFilter):
    """Slots playable on ``version``; older games' levels carry forward unless ``exact``."""

    def __init__(self, version: GameVersion, exact: bool = False):
        self.version = version
        self.exact = exact

    def test(self, slot: Slot) -> bool:
        if slot.game_version is None:
            return False
        if self.exact:
            return slot.game_version == self.version
        return slot.game_version <= self.version

    def get_predicate(self) -> ColumnElement[bool]:
        if self.exact:
            return Slot.game_version == self.version
        return Slot.game_version <= self.version


class ExcludeLbp1OnlyFilter(SlotFilter):
    def test(self, slot: Slot) -> bool:
        return not slot.lbp1_only

    def get_predicate(self) -> ColumnElement[bool]:
        return Slot.lbp1_only.is_(False)


class SubLevelFilter(SlotFilter):
    """Hides sub levels, which are only reachable from their parent level."""

    def test(self, slot: Slot) -> bool:
        return not slot.sub_level

    def get_predicate(self) -> ColumnElement[bool]:
        return Slot.sub_level.is_(False)


class PlayerCountFilter(SlotFilter):
    def __init__(self, players: int):
        if players < 1:
            raise UnknownFilterError(f"Player count must be positive, got {players}")
        self.players = players

    def test(self, slot: Slot) -> bool:
        return (slot.minimum_players or 0) <= self.players <= (slot.maximum_players or 0)

    def get_predicate(self) -> ColumnElement[bool]:
        return and_(Slot.minimum_players <= self.players, Slot.maximum_players >= self.players)


class CreatorFilter(SlotFilter):
    def __init__(self, creator_id: int):
        self.creator_id = creator_id

    def test(self, slot: Slot) -> bool:
        return slot.creator_id == self.creator_id

    def get_predicate(self) -> ColumnElement[bool]:
        return Slot.creator_id == self.creator_id


class AuthorLabelFilter(SlotFilter):
    """Slots carrying every one of the given author labels."""

    def __init__(self, *labels: str):
        # "A,B" asks for both labels, same as passing them separately
        self.labels = [
            part.replace(" ", "")
            for label in labels
            for part in label.split(",")
            if part.strip()
        ]

    def test(self, slot: Slot) -> bool:
        slot_labels = set((slot.author_labels or "").replace(" ", "").split(","))
        return all(label in slot_labels for label in self.labels)

    def get_predicate(self) -> ColumnElement[bool]:
        # Pad with delimiters so a label can't match inside a longer one
        labels = func.replace(func.coalesce(Slot.author_labels, ""), " ", "", type_=String)
        padded = literal(",").concat(labels).concat(",")
        return and_(true(), *(padded.contains(f",{label},", autoescape=True) for label in self.labels))


class FirstUploadedFilter(SlotFilter):
    """Inclusive window over the first publish time; either bound may be open."""

    def __init__(self, start: int | None = None, end: int | None = None):
        if start is not None and end is not None and start > end:
            raise UnknownFilterError(f"Upload window start {start} is after end {end}")
        self.start = start
        self.end = end

    def test(self, slot: Slot) -> bool:
        uploaded = slot.first_uploaded or 0
        if self.start is not None and uploaded < self.start:
            return False
        if self.end is not None and uploaded > self.end:
            return False
        return True

    def get_predicate(self) -> ColumnElement[bool]:
        clauses = []
        if self.start is not None:
            clauses.append(Slot.first_uploaded >= self.start)
        if self.end is not None:
            clauses.append(Slot.first_uploaded <= self.end)
        return and_(true(), *clauses)


_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def _ascii_lower_sql(expr) -> ColumnElement[str]:
    # Same folding as _ascii_lower; SQL lower() differs between databases
    for upper, lower in zip(string.ascii_uppercase, string.ascii_lowercase):
        expr = func.replace(expr, upper, lower, type_=String)
    return expr


class TextFilter(SlotFilter):
    """Substring search over name and description.

    Case folding is ASCII only, in memory and in SQL alike; other letters
    must match exactly.
    """

    def __init__(self, query: str):
        self.query = query.strip()
        if not self.query:
            raise UnknownFilterError("Search text must not be empty")

    def test(self, slot: Slot) -> bool:
        needle = _ascii_lower(self.query)
        return needle in _ascii_lower(slot.name or "") or needle in _ascii_lower(slot.description or "")

    def get_predicate(self) -> ColumnElement[bool]:
        needle = _ascii_lower(self.query)
        return or_(
            _ascii_lower_sql(func.coalesce(Slot.name, "")).contains(needle, autoescape=True),
            _ascii_lower_sql(func.coalesce(Slot.description, "")).contains(needle, autoescape=True),
        )


class NotFilter(SlotFilter):
    def __init__(self, inner: SlotFilter):
        self.inner = inner

    def test(self, slot: Slot) -> bool:
        return not self.inner.test(slot)

    def get_predicate(self) -> ColumnElement[bool]:
        return not_(self.inner.get_predicate())


class AllFilter(SlotFilter):
    """Conjunction of filters. Empty means accept everything."""

    def __init__(self, filters: Iterable[SlotFilter] = ()):
        self.filters = list(filters)

    def test(self, slot: Slot) -> bool:
        return all(f.test(slot) for f in self.filters)

    def get_predicate(self) -> ColumnElement[bool]:
        if not self.filters:
            return true()
        return and_(*(f.get_predicate() for f in self.filters))


def combine_filters(filters: Iterable[SlotFilter]) -> SlotFilter:
    """AND the given filters into one."""
    return AllFilter(filters)


def filter_slots(slots: Iterable[Slot], filters: Iterable[SlotFilter]) -> list[Slot]:
    """Apply the combined filter to already loaded slots, keeping their order."""
    combined = combine_filters(filters)
    return [slot for slot in slots if combined.test(slot)]


class SlotQueryBuilder:
    """Collects filters and builds the catalog ``select``."""

    def __init__(self, filters: Sequence[SlotFilter] = ()):
        self._filters: list[SlotFilter] = list(filters)

    def add_filter(self, slot_filter: SlotFilter) -> "SlotQueryBuilder":
        self._filters.append(slot_filter)
        return self

    @property
    def filters(self) -> list[SlotFilter]:
        return list(self._filters)

    def build(self) -> SlotFilter:
        return combine_filters(self._filters)

    def statement(self, limit: int | None = None, offset: int | None = None) -> Select:
        stmt = select(Slot).where(self.build().get_predicate()).order_by(Slot.slot_id)
        if offset:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        return stmt


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ("1", "true", "yes", "on"):
        return True
    if text in ("0", "false", "no", "off"):
        return False
    raise UnknownFilterError(f"Not a boolean: {value!r}")


def _parse_int(value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise UnknownFilterError(f"Not an integer: {value!r}") from None


def _build_game_version(value, exact: bool = False) -> SlotFilter:
    number = _parse_int(value)
    try:
        version = GameVersion(number)
    except ValueError:
        raise UnknownFilterError(f"Unknown game version: {value!r}") from None
    return GameVersionFilter(version, exact=exact)


# Rule name -> builder taking the raw parameter value
FILTER_BUILDERS = {
    "team_pick": lambda value: TeamPickFilter() if _parse_bool(value) else NotFilter(TeamPickFilter()),
    "game_version": _build_game_version,
    "exact_version": lambda value: _build_game_version(value, exact=True),
    "exclude_lbp1_only": lambda value: ExcludeLbp1OnlyFilter() if _parse_bool(value) else AllFilter(),
    "exclude_sub_levels": lambda value: SubLevelFilter() if _parse_bool(value) else AllFilter(),
    "players": lambda value: PlayerCountFilter(_parse_int(value)),
    "creator_id": lambda value: CreatorFilter(_parse_int(value)),
    "label": lambda value: AuthorLabelFilter(*([value] if isinstance(value, str) else value)),
    "uploaded_after": lambda value: FirstUploadedFilter(start=_parse_int(value)),
    "uploaded_before": lambda value: FirstUploadedFilter(end=_parse_int(value)),
    "q": lambda value: TextFilter(str(value)),
}


def build_filter(name: str, value) -> SlotFilter:
    """Build a filter from a rule name and raw value, e.g. from query params."""
    builder = FILTER_BUILDERS.get(name)
    if builder is None:
        raise UnknownFilterError(f"Unknown filter: {name}")
    return builder(value)
