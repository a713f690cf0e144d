"""Slot model - a published level in the catalog."""

from sqlalchemy import BigInteger, Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.ext.hybrid import hybrid_property
from sqlalchemy.orm import Mapped, mapped_column

from lighthouse.core.resource_list import join_resources, split_resources
from lighthouse.db.database import Base
from lighthouse.models.game_version import GameVersion, GameVersionType


class Slot(Base):
    """A user-published level.

    Play totals are derived from the per-game counters and never stored.
    Creator and location are plain foreign keys; resolving them is the
    service layer's job.
    """
    __tablename__ = "slots"

    slot_id: Mapped[int] = mapped_column(primary_key=True)

    name: Mapped[str] = mapped_column(String(200), default="")
    description: Mapped[str] = mapped_column(Text, default="")
    icon_hash: Mapped[str] = mapped_column(String(64), default="")
    root_level: Mapped[str] = mapped_column(String(64), default="")
    resource_collection: Mapped[str] = mapped_column(Text, default="")
    author_labels: Mapped[str] = mapped_column(String(500), default="")
    background_hash: Mapped[str] = mapped_column(String(64), default="")
    level_type: Mapped[str] = mapped_column(String(50), default="")

    creator_id: Mapped[int | None] = mapped_column(ForeignKey("users.id"), nullable=True, index=True)
    location_id: Mapped[int | None] = mapped_column(ForeignKey("locations.id"), nullable=True)

    initially_locked: Mapped[bool] = mapped_column(Boolean, default=False)
    sub_level: Mapped[bool] = mapped_column(Boolean, default=False)
    lbp1_only: Mapped[bool] = mapped_column(Boolean, default=False)
    move_required: Mapped[bool] = mapped_column(Boolean, default=False)
    team_pick: Mapped[bool] = mapped_column(Boolean, default=False, index=True)

    shareable: Mapped[int] = mapped_column(Integer, default=0)
    minimum_players: Mapped[int] = mapped_column(Integer, default=1)
    maximum_players: Mapped[int] = mapped_column(Integer, default=4)

    game_version: Mapped[GameVersion] = mapped_column(
        GameVersionType, default=GameVersion.LITTLE_BIG_PLANET_1
    )

    # Epoch milliseconds, written by the publish workflow
    first_uploaded: Mapped[int] = mapped_column(BigInteger, default=0)
    last_updated: Mapped[int] = mapped_column(BigInteger, default=0)

    plays_lbp1: Mapped[int] = mapped_column(Integer, default=0)
    plays_lbp1_complete: Mapped[int] = mapped_column(Integer, default=0)
    plays_lbp1_unique: Mapped[int] = mapped_column(Integer, default=0)
    plays_lbp2: Mapped[int] = mapped_column(Integer, default=0)
    plays_lbp2_complete: Mapped[int] = mapped_column(Integer, default=0)
    plays_lbp2_unique: Mapped[int] = mapped_column(Integer, default=0)
    plays_lbp3: Mapped[int] = mapped_column(Integer, default=0)
    plays_lbp3_complete: Mapped[int] = mapped_column(Integer, default=0)
    plays_lbp3_unique: Mapped[int] = mapped_column(Integer, default=0)

    @property
    def resources(self) -> list[str]:
        return split_resources(self.resource_collection)

    @resources.setter
    def resources(self, value: list[str]) -> None:
        self.resource_collection = join_resources(value)

    # Counters are None on a transient instance until the insert defaults apply
    @hybrid_property
    def plays(self) -> int:
        return (self.plays_lbp1 or 0) + (self.plays_lbp2 or 0) + (self.plays_lbp3 or 0)

    @plays.inplace.expression
    @classmethod
    def _plays_expression(cls):
        return cls.plays_lbp1 + cls.plays_lbp2 + cls.plays_lbp3

    @hybrid_property
    def plays_unique(self) -> int:
        return (self.plays_lbp1_unique or 0) + (self.plays_lbp2_unique or 0) + (self.plays_lbp3_unique or 0)

    @plays_unique.inplace.expression
    @classmethod
    def _plays_unique_expression(cls):
        return cls.plays_lbp1_unique + cls.plays_lbp2_unique + cls.plays_lbp3_unique

    @hybrid_property
    def plays_complete(self) -> int:
        return (self.plays_lbp1_complete or 0) + (self.plays_lbp2_complete or 0) + (self.plays_lbp3_complete or 0)

    @plays_complete.inplace.expression
    @classmethod
    def _plays_complete_expression(cls):
        return cls.plays_lbp1_complete + cls.plays_lbp2_complete + cls.plays_lbp3_complete
