"""
Settings service - Upsert of the single map settings row.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pinmap.models.settings import MapSettings


class SettingsService:
    """Service class for map settings."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self) -> MapSettings | None:
        result = await self.db.execute(select(MapSettings).limit(1))
        return result.scalar_one_or_none()

    async def upsert(
        self,
        default_center: list[float],
        default_zoom: int,
        allowed_content_types: list[str],
        content_display_order: list[str],
        enabled_filters: list[str],
        enabled_sorting: list[str],
    ) -> MapSettings:
        """Insert the settings row on first write, update it afterwards."""
        settings = await self.get()
        if settings is None:
            settings = MapSettings()
            self.db.add(settings)

        settings.default_center = default_center
        settings.default_zoom = default_zoom
        settings.allowed_content_types = allowed_content_types
        settings.content_display_order = content_display_order
        settings.enabled_filters = enabled_filters
        settings.enabled_sorting = enabled_sorting

        await self.db.flush()
        return settings
