"""Slot service - catalog lookups, filtered listing and wire rendering."""

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lighthouse.core.filters import SlotFilter, SlotQueryBuilder
from lighthouse.core.slot_serializer import serialize_slot
from lighthouse.models.location import Location
from lighthouse.models.rating import RatedLevel
from lighthouse.models.slot import Slot
from lighthouse.models.user import User
from lighthouse.models.visit import VisitedLevel
from lighthouse.services.slot_stats_service import slot_stats_service
from lighthouse.utils.logger import setup_logger

logger = setup_logger(__name__)


class SlotService:
    @staticmethod
    async def get_slot(db: AsyncSession, slot_id: int) -> Slot | None:
        result = await db.execute(select(Slot).where(Slot.slot_id == slot_id))
        return result.scalar_one_or_none()

    @staticmethod
    async def find_slots(
        db: AsyncSession,
        filters: Sequence[SlotFilter] = (),
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[Slot]:
        """Slots matching every filter, ordered by id. The filters run in SQL."""
        stmt = SlotQueryBuilder(filters).statement(limit=limit, offset=offset)
        logger.debug(f"Listing slots with {len(filters)} filter(s), limit={limit}, offset={offset}")
        result = await db.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    async def get_creator(db: AsyncSession, slot: Slot) -> User | None:
        if slot.creator_id is None:
            return None
        return await db.get(User, slot.creator_id)

    @staticmethod
    async def get_location(db: AsyncSession, slot: Slot) -> Location | None:
        if slot.location_id is None:
            return None
        return await db.get(Location, slot.location_id)

    @staticmethod
    async def get_viewer_rating(db: AsyncSession, slot_id: int, user_id: int) -> RatedLevel | None:
        result = await db.execute(
            select(RatedLevel).where(RatedLevel.slot_id == slot_id, RatedLevel.user_id == user_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def get_viewer_visit(db: AsyncSession, slot_id: int, user_id: int) -> VisitedLevel | None:
        result = await db.execute(
            select(VisitedLevel).where(VisitedLevel.slot_id == slot_id, VisitedLevel.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def render_slot(self, db: AsyncSession, slot: Slot, viewer_id: int | None = None) -> str:
        """Resolve everything the wire document needs, then serialize it."""
        creator = await self.get_creator(db, slot)
        if creator is None and slot.creator_id is not None:
            logger.warning(f"Slot {slot.slot_id} references missing creator {slot.creator_id}")
        location = await self.get_location(db, slot)

        your_rating = None
        your_visit = None
        if viewer_id is not None:
            your_rating = await self.get_viewer_rating(db, slot.slot_id, viewer_id)
            your_visit = await self.get_viewer_visit(db, slot.slot_id, viewer_id)

        stats = await slot_stats_service.get_stats(db, slot.slot_id)
        return serialize_slot(
            slot,
            stats,
            creator=creator,
            location=location,
            your_rating=your_rating,
            your_visit=your_visit,
        )


slot_service = SlotService()
