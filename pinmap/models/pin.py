"""
Pin and PinSupportingTag SQLAlchemy models.
"""

import enum
from datetime import datetime
from typing import Any
from uuid import uuid4

from sqlalchemy import JSON, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pinmap.db.base import Base


class ContentKind(str, enum.Enum):
    """Kinds of content block a pin can carry."""
    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    DOCUMENT = "pdf"


class Pin(Base):
    """
    Geolocated content record.

    The main tag is free text rather than a foreign key; supporting
    tags live in pin_supporting_tags and are removed with the pin.
    """
    __tablename__ = "pins"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid4()),
        comment="Opaque pin identifier",
    )
    title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    position_lat: Mapped[float] = mapped_column(
        Float,
        nullable=False,
    )
    position_lng: Mapped[float] = mapped_column(
        Float,
        nullable=False,
    )
    main_tag: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        index=True,
        comment="Name of the primary tag (not enforced as a foreign key)",
    )
    content: Mapped[list[dict[str, Any]]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        comment="Ordered content blocks: [{type, value, title?}]",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    supporting_tags: Mapped[list["PinSupportingTag"]] = relationship(
        "PinSupportingTag",
        back_populates="pin",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="PinSupportingTag.position",
    )

    @property
    def supporting_tag_names(self) -> list[str]:
        return [tag.tag_name for tag in self.supporting_tags]

    def __repr__(self) -> str:
        return f"<Pin(id={self.id}, title={self.title!r}, main_tag={self.main_tag})>"


class PinSupportingTag(Base):
    """Association between a pin and one supporting tag name."""
    __tablename__ = "pin_supporting_tags"

    pin_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("pins.id", ondelete="CASCADE"),
        primary_key=True,
    )
    tag_name: Mapped[str] = mapped_column(
        Text,
        primary_key=True,
        index=True,
    )
    position: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Order of the tag within the pin's supporting tags",
    )

    pin: Mapped["Pin"] = relationship("Pin", back_populates="supporting_tags")
