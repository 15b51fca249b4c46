"""
Database bootstrap: schema creation and sample data.
Seeding is idempotent and never overwrites existing rows.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncConnection, AsyncSession

from pinmap.db.base import Base
from pinmap.models.settings import (
    DEFAULT_CENTER,
    DEFAULT_CONTENT_TYPES,
    DEFAULT_FILTERS,
    DEFAULT_SORTING,
    DEFAULT_ZOOM,
)
from pinmap.services import BoundaryService, PinService, SettingsService, TagService
from pinmap.core.exceptions import PinNotFoundException

logger = logging.getLogger(__name__)

INITIAL_TAGS = [
    {"id": "1", "name": "culture", "color": "#FF5733"},
    {"id": "2", "name": "environment", "color": "#33FF57"},
    {"id": "3", "name": "health", "color": "#3357FF"},
    {"id": "4", "name": "education", "color": "#F033FF"},
    {"id": "5", "name": "infrastructure", "color": "#FF9933"},
    {"id": "6", "name": "community", "color": "#33FFF9"},
]

# Rough outline of Poland
SAMPLE_BOUNDARY = {
    "name": "Poland",
    "coordinates": [
        [54.8, 14.2],
        [54.8, 23.0],
        [49.0, 23.0],
        [49.0, 14.2],
        [54.8, 14.2],
    ],
    "min_zoom": 5,
    "max_zoom": 18,
}

SAMPLE_PINS = [
    {
        "pin_id": "pin1",
        "title": "Community Center Renovation",
        "position_lat": 52.2297,
        "position_lng": 21.0122,
        "main_tag": "culture",
        "supporting_tags": ["education", "community"],
        "content": [
            {
                "type": "text",
                "value": "This project renovated the local community center to provide "
                "better facilities for cultural events.",
                "title": "Description",
            },
            {"type": "image", "value": "https://via.placeholder.com/400x300", "title": "Community Center"},
        ],
    },
    {
        "pin_id": "pin2",
        "title": "Public Park Improvements",
        "position_lat": 50.0647,
        "position_lng": 19.9450,
        "main_tag": "environment",
        "supporting_tags": ["recreation", "health"],
        "content": [
            {
                "type": "text",
                "value": "Adding new recreational facilities and green spaces to the central public park.",
                "title": "Description",
            },
            {"type": "video", "value": "https://www.youtube.com/embed/dQw4w9WgXcQ", "title": "Park Tour"},
        ],
    },
    {
        "pin_id": "pin3",
        "title": "Healthcare Clinic Expansion",
        "position_lat": 51.1079,
        "position_lng": 17.0385,
        "main_tag": "health",
        "supporting_tags": ["infrastructure"],
        "content": [
            {
                "type": "text",
                "value": "Expansion of the local healthcare clinic to serve more patients "
                "and provide additional medical services.",
                "title": "Description",
            },
            {"type": "pdf", "value": "https://example.com/sample.pdf", "title": "Project Documentation"},
        ],
    },
]


async def create_tables(conn: AsyncConnection) -> None:
    """Create any missing tables from the model metadata."""
    # Import all models to register them
    import pinmap.models  # noqa: F401

    await conn.run_sync(Base.metadata.create_all)


async def initialize_database(session: AsyncSession) -> None:
    """Insert seed tags, default settings, sample boundary and sample pins."""
    tags = TagService(session)
    for tag in INITIAL_TAGS:
        if await tags.get_by_name(tag["name"]) is None:
            await tags.create(name=tag["name"], color=tag["color"], tag_id=tag["id"])

    settings = SettingsService(session)
    if await settings.get() is None:
        await settings.upsert(
            default_center=list(DEFAULT_CENTER),
            default_zoom=DEFAULT_ZOOM,
            allowed_content_types=list(DEFAULT_CONTENT_TYPES),
            content_display_order=list(DEFAULT_CONTENT_TYPES),
            enabled_filters=list(DEFAULT_FILTERS),
            enabled_sorting=list(DEFAULT_SORTING),
        )

    boundary = BoundaryService(session)
    if await boundary.get() is None:
        await boundary.set(**SAMPLE_BOUNDARY)

    pins = PinService(session)
    for sample in SAMPLE_PINS:
        try:
            await pins.get_by_id(sample["pin_id"])
        except PinNotFoundException:
            await pins.create(**sample)

    logger.info("Database initialization completed")
