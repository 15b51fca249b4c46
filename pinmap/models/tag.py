"""
Tag SQLAlchemy model.
"""

from uuid import uuid4

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pinmap.db.base import Base


class Tag(Base):
    """
    Tag definition used to classify pins.

    Pins reference tags by name, so the name is unique at the storage layer.
    """
    __tablename__ = "tags"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid4()),
        comment="Tag unique identifier",
    )
    name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        unique=True,
        comment="Tag display name (unique)",
    )
    color: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        comment="Display color, e.g. #FF5733",
    )

    def __repr__(self) -> str:
        return f"<Tag(name={self.name}, color={self.color})>"
