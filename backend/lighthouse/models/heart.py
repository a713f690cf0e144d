"""Hearted level model - a user's favorite marking on a slot."""

from sqlalchemy import ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from lighthouse.db.database import Base


class HeartedLevel(Base):
    __tablename__ = "hearted_levels"
    __table_args__ = (
        UniqueConstraint("slot_id", "user_id", name="uq_hearted_levels_slot_user"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    slot_id: Mapped[int] = mapped_column(ForeignKey("slots.slot_id"), index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"))
