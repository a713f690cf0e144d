"""Slot statistics service - hearts, thumbs and average rating for a slot.

Every call runs a fresh aggregate query; nothing is cached, so a caller
always sees the latest committed hearts and ratings.
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from lighthouse.core.slot_stats import DEFAULT_AVERAGE_RATING, SlotStats
from lighthouse.models.heart import HeartedLevel
from lighthouse.models.rating import RatedLevel
from lighthouse.utils.logger import setup_logger

logger = setup_logger(__name__)


class SlotStatsService:
    @staticmethod
    async def heart_count(db: AsyncSession, slot_id: int) -> int:
        """Number of users who hearted the slot."""
        result = await db.execute(
            select(func.count()).select_from(HeartedLevel).where(HeartedLevel.slot_id == slot_id)
        )
        return result.scalar_one()

    @staticmethod
    async def _rating_count(db: AsyncSession, slot_id: int, rating: int) -> int:
        result = await db.execute(
            select(func.count())
            .select_from(RatedLevel)
            .where(RatedLevel.slot_id == slot_id, RatedLevel.rating == rating)
        )
        return result.scalar_one()

    @staticmethod
    async def thumbs_up(db: AsyncSession, slot_id: int) -> int:
        return await SlotStatsService._rating_count(db, slot_id, 1)

    @staticmethod
    async def thumbs_down(db: AsyncSession, slot_id: int) -> int:
        return await SlotStatsService._rating_count(db, slot_id, -1)

    @staticmethod
    async def average_rating(db: AsyncSession, slot_id: int) -> float:
        """Mean of the positive star ratings, or DEFAULT_AVERAGE_RATING if there are none."""
        result = await db.execute(
            select(func.avg(RatedLevel.rating_lbp1)).where(
                RatedLevel.slot_id == slot_id, RatedLevel.rating_lbp1 > 0
            )
        )
        average = result.scalar_one_or_none()
        if average is None:
            return DEFAULT_AVERAGE_RATING
        return float(average)

    @staticmethod
    async def get_stats(db: AsyncSession, slot_id: int) -> SlotStats:
        """All derived statistics for one slot. Unknown ids give empty stats."""
        logger.debug(f"Aggregating stats for slot {slot_id}")
        return SlotStats(
            heart_count=await SlotStatsService.heart_count(db, slot_id),
            thumbs_up=await SlotStatsService.thumbs_up(db, slot_id),
            thumbs_down=await SlotStatsService.thumbs_down(db, slot_id),
            average_rating=await SlotStatsService.average_rating(db, slot_id),
        )


slot_stats_service = SlotStatsService()
