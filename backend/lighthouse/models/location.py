"""Location model - where a slot sits on its creator's earth."""

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column

from lighthouse.core.serializer import string_element
from lighthouse.db.database import Base


class Location(Base):
    __tablename__ = "locations"

    id: Mapped[int] = mapped_column(primary_key=True)
    x: Mapped[int] = mapped_column(Integer, default=0)
    y: Mapped[int] = mapped_column(Integer, default=0)

    def serialize(self) -> str:
        return string_element("x", self.x) + string_element("y", self.y)
