"""
Map settings endpoints.
"""

from fastapi import APIRouter

from pinmap.auth import RequireAdmin
from pinmap.core.exceptions import NotFoundException
from pinmap.dependencies import DbSession
from pinmap.models.settings import MapSettings
from pinmap.schemas.settings import MapSettingsSchema
from pinmap.services.settings_service import SettingsService

router = APIRouter()


def _settings_to_response(settings: MapSettings) -> MapSettingsSchema:
    return MapSettingsSchema(
        default_center=tuple(settings.default_center),
        default_zoom=settings.default_zoom,
        allowed_content_types=settings.allowed_content_types,
        content_display_order=settings.content_display_order,
        enabled_filters=settings.enabled_filters,
        enabled_sorting=settings.enabled_sorting,
    )


@router.get("", response_model=MapSettingsSchema)
async def get_map_settings(db: DbSession):
    """Get the map settings, or 404 when none are stored."""
    settings = await SettingsService(db).get()
    if settings is None:
        raise NotFoundException("No map settings defined")
    return _settings_to_response(settings)


@router.put("", response_model=MapSettingsSchema)
async def update_map_settings(body: MapSettingsSchema, db: DbSession, _: RequireAdmin):
    """Create the settings on first write, update them afterwards."""
    settings = await SettingsService(db).upsert(
        default_center=list(body.default_center),
        default_zoom=body.default_zoom,
        allowed_content_types=body.allowed_content_types,
        content_display_order=body.content_display_order,
        enabled_filters=body.enabled_filters,
        enabled_sorting=body.enabled_sorting,
    )
    return _settings_to_response(settings)
