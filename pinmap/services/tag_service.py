"""
Tag service - Data access for tag definitions.
"""

import logging
from typing import Sequence
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pinmap.core.exceptions import DuplicateTagException, TagNotFoundException
from pinmap.models.pin import Pin, PinSupportingTag
from pinmap.models.tag import Tag

logger = logging.getLogger(__name__)


class TagService:
    """Service class for tag operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> Sequence[Tag]:
        """List all tags ordered by name."""
        result = await self.db.execute(select(Tag).order_by(Tag.name.asc()))
        return result.scalars().all()

    async def get_by_id(self, tag_id: str) -> Tag:
        """
        Get tag by ID.

        Raises:
            TagNotFoundException: If tag not found
        """
        result = await self.db.execute(select(Tag).where(Tag.id == tag_id))
        tag = result.scalar_one_or_none()

        if not tag:
            raise TagNotFoundException(tag_id)

        return tag

    async def get_by_name(self, name: str) -> Tag | None:
        result = await self.db.execute(select(Tag).where(Tag.name == name))
        return result.scalar_one_or_none()

    async def create(self, name: str, color: str, tag_id: str | None = None) -> Tag:
        """
        Create a tag.

        Raises:
            DuplicateTagException: If a tag with this name already exists
        """
        if await self.get_by_name(name) is not None:
            raise DuplicateTagException(name)

        tag = Tag(id=tag_id or str(uuid4()), name=name, color=color)
        self.db.add(tag)
        await self._flush(name)

        logger.info("Created tag %s (%s)", tag.name, tag.id)
        return tag

    async def update(self, tag_id: str, name: str | None = None, color: str | None = None) -> Tag:
        """
        Update a tag's name and/or color.

        Pins referencing the old name are not rewritten.

        Raises:
            TagNotFoundException: If tag not found
            DuplicateTagException: If the new name is taken by another tag
        """
        tag = await self.get_by_id(tag_id)

        if name is not None and name != tag.name:
            if await self.get_by_name(name) is not None:
                raise DuplicateTagException(name)
            tag.name = name
        if color is not None:
            tag.color = color

        await self._flush(tag.name)
        return tag

    async def find_usage(self, name: str) -> str | None:
        """
        Report how pins reference a tag name.

        Returns:
            "main" or "supporting" for the first usage found, None if unused
        """
        main = await self.db.execute(select(Pin.id).where(Pin.main_tag == name).limit(1))
        if main.first() is not None:
            return "main"

        supporting = await self.db.execute(
            select(PinSupportingTag.pin_id).where(PinSupportingTag.tag_name == name).limit(1)
        )
        if supporting.first() is not None:
            return "supporting"

        return None

    async def delete(self, tag: Tag) -> None:
        await self.db.delete(tag)
        await self.db.flush()
        logger.info("Deleted tag %s (%s)", tag.name, tag.id)

    async def _flush(self, name: str) -> None:
        # Concurrent writers can still race past the name lookup
        try:
            await self.db.flush()
        except IntegrityError as exc:
            await self.db.rollback()
            raise DuplicateTagException(name) from exc
