"""User model - the publisher/player account a slot points at."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from lighthouse.db.database import Base


class User(Base):
    """Owned by the account service; the catalog only reads the username."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    username: Mapped[str] = mapped_column(String(100), unique=True)
