"""Rated level model - one user's vote on a slot."""

from sqlalchemy import CheckConstraint, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from lighthouse.db.database import Base


class RatedLevel(Base):
    """A user's rating of a slot.

    ``rating`` is the thumbs signal: 1 is a thumbs up, -1 a thumbs down, 0 neutral.
    ``rating_lbp1`` is the separate star score from the first game, 0 when unset.
    """
    __tablename__ = "rated_levels"
    __table_args__ = (
        UniqueConstraint("slot_id", "user_id", name="uq_rated_levels_slot_user"),
        CheckConstraint("rating IN (-1, 0, 1)", name="ck_rated_levels_rating"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    slot_id: Mapped[int] = mapped_column(ForeignKey("slots.slot_id"), index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"))
    rating: Mapped[int] = mapped_column(Integer, default=0)
    rating_lbp1: Mapped[float] = mapped_column(default=0)
