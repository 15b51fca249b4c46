"""
Client-side application state.

One explicit state object, owned by whoever composes the client, holds
the mirrored collections, a loading/error flag pair per collection and
the session-only UI selections.
"""

from dataclasses import dataclass, field
from typing import Literal

from pinmap.schemas.boundary import RegionBoundarySchema
from pinmap.schemas.pin import PinResponse
from pinmap.schemas.settings import MapSettingsSchema
from pinmap.schemas.tag import TagResponse

Collection = Literal["pins", "tags", "boundary", "settings"]
COLLECTIONS: tuple[Collection, ...] = ("pins", "tags", "boundary", "settings")

ViewMode = Literal["map", "list"]

DEFAULT_TAGS = [
    TagResponse(id="1", name="culture", color="#FF5733"),
    TagResponse(id="2", name="environment", color="#33FF57"),
    TagResponse(id="3", name="health", color="#3357FF"),
    TagResponse(id="4", name="education", color="#F033FF"),
    TagResponse(id="5", name="infrastructure", color="#FF9933"),
    TagResponse(id="6", name="community", color="#33FFF9"),
]


@dataclass
class LoadState:
    """Loading flag and last error message for one collection."""

    loading: bool = False
    error: str | None = None


@dataclass
class AppState:
    # Mirrored collections (persisted)
    pins: list[PinResponse] = field(default_factory=list)
    tags: list[TagResponse] = field(default_factory=lambda: list(DEFAULT_TAGS))
    boundary: RegionBoundarySchema | None = None
    settings: MapSettingsSchema = field(default_factory=MapSettingsSchema.defaults)

    status: dict[str, LoadState] = field(
        default_factory=lambda: {name: LoadState() for name in COLLECTIONS}
    )

    # Session-only
    admin_mode: bool = False
    selected_pin_id: str | None = None
    filter_tags: frozenset[str] = frozenset()
    view_mode: ViewMode = "map"
