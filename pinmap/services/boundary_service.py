"""
Boundary service - The single, optional region boundary.
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from pinmap.models.boundary import RegionBoundary

logger = logging.getLogger(__name__)


class BoundaryService:
    """Service class for the region boundary."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self) -> RegionBoundary | None:
        result = await self.db.execute(select(RegionBoundary).limit(1))
        return result.scalar_one_or_none()

    async def set(
        self,
        name: str,
        coordinates: list[list[float]],
        min_zoom: int,
        max_zoom: int,
    ) -> RegionBoundary:
        """Replace any existing boundary with a new one."""
        await self.delete()

        boundary = RegionBoundary(
            name=name,
            coordinates=coordinates,
            min_zoom=min_zoom,
            max_zoom=max_zoom,
        )
        self.db.add(boundary)
        await self.db.flush()

        logger.info("Region boundary set to %s (%d vertices)", name, len(coordinates))
        return boundary

    async def delete(self) -> None:
        await self.db.execute(delete(RegionBoundary))
