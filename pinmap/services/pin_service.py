"""
Pin service - Data access for pins and their supporting tags.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Sequence
from uuid import uuid4

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from pinmap.core.exceptions import PinNotFoundException
from pinmap.models.pin import Pin, PinSupportingTag

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PinService:
    """Service class for pin operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> Sequence[Pin]:
        """List all pins, newest first."""
        query = select(Pin).order_by(Pin.created_at.desc())
        result = await self.db.execute(query)
        return result.scalars().all()

    async def list_by_tag(self, tag_name: str) -> Sequence[Pin]:
        """
        List pins classified by a tag, newest first.

        A pin matches when the tag is its main tag or one of its
        supporting tags.
        """
        supporting = select(PinSupportingTag.pin_id).where(
            PinSupportingTag.tag_name == tag_name
        )
        query = (
            select(Pin)
            .where(or_(Pin.main_tag == tag_name, Pin.id.in_(supporting)))
            .order_by(Pin.created_at.desc())
        )
        result = await self.db.execute(query)
        return result.scalars().all()

    async def get_by_id(self, pin_id: str) -> Pin:
        """
        Get pin by ID.

        Raises:
            PinNotFoundException: If pin not found
        """
        result = await self.db.execute(select(Pin).where(Pin.id == pin_id))
        pin = result.scalar_one_or_none()

        if not pin:
            raise PinNotFoundException(pin_id)

        return pin

    async def create(
        self,
        title: str,
        position_lat: float,
        position_lng: float,
        main_tag: str,
        supporting_tags: list[str],
        content: list[dict[str, Any]],
        pin_id: str | None = None,
    ) -> Pin:
        """Insert a pin; id and both timestamps are assigned here."""
        now = utcnow()
        pin = Pin(
            id=pin_id or str(uuid4()),
            title=title,
            position_lat=position_lat,
            position_lng=position_lng,
            main_tag=main_tag,
            content=content,
            created_at=now,
            updated_at=now,
        )
        pin.supporting_tags = [
            PinSupportingTag(tag_name=name, position=index)
            for index, name in enumerate(supporting_tags)
        ]

        self.db.add(pin)
        await self.db.flush()

        logger.info("Created pin %s (%s)", pin.id, pin.title)
        return pin

    async def update(self, pin_id: str, changes: dict[str, Any]) -> Pin:
        """
        Apply a partial update and refresh ``updated_at``.

        Args:
            pin_id: Pin ID
            changes: Storage-shaped column values; a ``supporting_tags``
                key replaces the whole supporting tag set

        Raises:
            PinNotFoundException: If pin not found
        """
        pin = await self.get_by_id(pin_id)
        changes = dict(changes)

        if "supporting_tags" in changes:
            existing = {tag.tag_name: tag for tag in pin.supporting_tags}
            replacement = []
            for index, name in enumerate(changes.pop("supporting_tags")):
                tag = existing.get(name) or PinSupportingTag(tag_name=name)
                tag.position = index
                replacement.append(tag)
            pin.supporting_tags = replacement

        for column, value in changes.items():
            setattr(pin, column, value)

        pin.updated_at = max(utcnow(), as_utc(pin.created_at))
        await self.db.flush()

        return pin

    async def delete(self, pin_id: str) -> None:
        """
        Delete a pin. Its supporting tag rows go with it.

        Raises:
            PinNotFoundException: If pin not found
        """
        pin = await self.get_by_id(pin_id)
        await self.db.delete(pin)
        await self.db.flush()
        logger.info("Deleted pin %s", pin_id)


def as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
