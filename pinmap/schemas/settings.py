"""
Pydantic schemas for map settings.
"""

from pydantic import BaseModel, ConfigDict, Field

from pinmap.models.settings import (
    DEFAULT_CENTER,
    DEFAULT_CONTENT_TYPES,
    DEFAULT_FILTERS,
    DEFAULT_SORTING,
    DEFAULT_ZOOM,
)
from pinmap.schemas.pin import Position


class MapSettingsSchema(BaseModel):
    """
    Map settings on the wire.

    Only ``defaultCenter`` and ``defaultZoom`` are required in a PUT body;
    omitted lists fall back to the defaults.
    """

    default_center: Position = Field(alias="defaultCenter")
    default_zoom: int = Field(alias="defaultZoom", ge=0, le=24)
    allowed_content_types: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CONTENT_TYPES), alias="allowedContentTypes"
    )
    content_display_order: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CONTENT_TYPES), alias="contentDisplayOrder"
    )
    enabled_filters: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FILTERS), alias="enabledFilters"
    )
    enabled_sorting: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SORTING), alias="enabledSorting"
    )

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def defaults(cls) -> "MapSettingsSchema":
        """Settings used when none are stored."""
        return cls(default_center=tuple(DEFAULT_CENTER), default_zoom=DEFAULT_ZOOM)
