"""Visited level model - a user's own play counts on a slot, per game."""

from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from lighthouse.db.database import Base


class VisitedLevel(Base):
    __tablename__ = "visited_levels"
    __table_args__ = (
        UniqueConstraint("slot_id", "user_id", name="uq_visited_levels_slot_user"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    slot_id: Mapped[int] = mapped_column(ForeignKey("slots.slot_id"), index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"))
    plays_lbp1: Mapped[int] = mapped_column(Integer, default=0)
    plays_lbp2: Mapped[int] = mapped_column(Integer, default=0)
    plays_lbp3: Mapped[int] = mapped_column(Integer, default=0)
