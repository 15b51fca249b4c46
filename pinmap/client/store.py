"""
Client store: keeps the local mirror of every collection in step with
the API.

Each remote call runs inside ``_remote_call``, which raises the
collection's loading flag, clears its error, and on exit always lowers
the flag. Any failure is logged and recorded as the collection's error
message; the mirror is left as it was. Successful calls apply a pure
reducer to the previous snapshot and persist the result.
"""

import asyncio
import logging
from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager
from typing import Any

import httpx

from pinmap.client.api import MapApiClient
from pinmap.client.persistence import LocalStateStore
from pinmap.client.reducers import (
    append,
    filtered_pins,
    remove_by_id,
    replace_by_id,
    selected_pin,
    sort_pins,
)
from pinmap.client.state import AppState, Collection, ViewMode
from pinmap.config import Settings, get_settings
from pinmap.schemas.boundary import RegionBoundarySchema
from pinmap.schemas.pin import PinCreate, PinResponse, PinUpdate
from pinmap.schemas.settings import MapSettingsSchema

logger = logging.getLogger(__name__)


class MapStore:
    """
    Local mirror of pins, tags, boundary and settings.

    Mutations never raise; check ``errors()`` after a call.

    Usage:
        store = await MapStore.connect()
        await store.load_all()
        store.set_filter_tags({"health"})
        for pin in store.filtered_pins:
            ...
    """

    def __init__(self, api: MapApiClient, storage: LocalStateStore, state: AppState | None = None):
        self.api = api
        self.storage = storage
        self.state = state or AppState()

    @classmethod
    async def open(cls, api: MapApiClient, storage: LocalStateStore) -> "MapStore":
        """Create a store whose collections are restored from local snapshots."""
        state = AppState()
        state.pins = await storage.load("pins", state.pins)
        state.tags = await storage.load("tags", state.tags)
        state.boundary = await storage.load("boundary", state.boundary)
        state.settings = await storage.load("settings", state.settings)
        return cls(api, storage, state)

    @classmethod
    async def connect(
        cls,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "MapStore":
        """Build the API client and snapshot storage from configuration."""
        settings = settings or get_settings()
        api = MapApiClient(
            settings.CLIENT_BASE_URL,
            admin_token=settings.ADMIN_TOKEN,
            transport=transport,
            timeout=settings.CLIENT_TIMEOUT,
            api_prefix=settings.API_PREFIX,
        )
        return await cls.open(api, LocalStateStore(settings.CLIENT_STATE_DIR))

    async def close(self) -> None:
        await self.api.aclose()

    # Internals

    @asynccontextmanager
    async def _remote_call(self, collection: Collection, action: str) -> AsyncIterator[None]:
        status = self.state.status[collection]
        status.loading = True
        status.error = None
        try:
            yield
        except Exception as exc:
            logger.error("Error %s: %s", action, exc)
            status.error = str(exc) or f"Error {action}"
        finally:
            status.loading = False

    async def _set(self, collection: Collection, value: Any) -> None:
        setattr(self.state, collection, value)
        await self.storage.save(collection, value)

    # Loading

    async def load_pins(self) -> None:
        async with self._remote_call("pins", "loading pins"):
            await self._set("pins", await self.api.list_pins())

    async def load_tags(self) -> None:
        async with self._remote_call("tags", "loading tags"):
            await self._set("tags", await self.api.list_tags())

    async def load_boundary(self) -> None:
        """A server without a boundary leaves the mirror at None, not in error."""
        async with self._remote_call("boundary", "loading region boundary"):
            await self._set("boundary", await self.api.get_boundary())

    async def load_settings(self) -> None:
        """A server without settings keeps the current (default) settings."""
        async with self._remote_call("settings", "loading map settings"):
            settings = await self.api.get_settings()
            if settings is not None:
                await self._set("settings", settings)

    async def load_all(self) -> None:
        """
        Refresh all four collections concurrently.

        Completes even when some loads fail; each failure shows up only
        in its own collection's error.
        """
        await asyncio.gather(
            self.load_pins(),
            self.load_tags(),
            self.load_boundary(),
            self.load_settings(),
        )

    async def retry(self) -> None:
        await self.load_all()

    # Pins

    async def add_pin(self, pin: PinCreate) -> str | None:
        """
        Create a pin on the server and append it locally.

        Returns:
            The new pin's id, or None if the call failed
        """
        created: PinResponse | None = None
        async with self._remote_call("pins", "adding pin"):
            created = await self.api.create_pin(pin.model_dump(mode="json", by_alias=True))
            await self._set("pins", append(self.state.pins, created))
        return created.id if created else None

    async def update_pin(self, pin_id: str, updates: PinUpdate) -> None:
        async with self._remote_call("pins", "updating pin"):
            updated = await self.api.update_pin(
                pin_id, updates.model_dump(mode="json", by_alias=True, exclude_unset=True)
            )
            await self._set("pins", replace_by_id(self.state.pins, updated))

    async def delete_pin(self, pin_id: str) -> None:
        """Delete a pin; clears the selection when it was the selected pin."""
        async with self._remote_call("pins", "deleting pin"):
            await self.api.delete_pin(pin_id)
            await self._set("pins", remove_by_id(self.state.pins, pin_id))
            if self.state.selected_pin_id == pin_id:
                self.state.selected_pin_id = None

    # Tags

    async def add_tag(self, name: str, color: str) -> str | None:
        created = None
        async with self._remote_call("tags", "adding tag"):
            created = await self.api.create_tag(name, color)
            await self._set("tags", append(self.state.tags, created))
        return created.id if created else None

    async def update_tag(self, tag_id: str, name: str | None = None, color: str | None = None) -> None:
        updates = {key: value for key, value in (("name", name), ("color", color)) if value is not None}
        async with self._remote_call("tags", "updating tag"):
            updated = await self.api.update_tag(tag_id, updates)
            await self._set("tags", replace_by_id(self.state.tags, updated))

    async def delete_tag(self, tag_id: str) -> None:
        async with self._remote_call("tags", "deleting tag"):
            await self.api.delete_tag(tag_id)
            await self._set("tags", remove_by_id(self.state.tags, tag_id))

    # Boundary

    async def set_boundary(self, boundary: RegionBoundarySchema) -> None:
        async with self._remote_call("boundary", "setting region boundary"):
            await self._set("boundary", await self.api.set_boundary(boundary))

    async def delete_boundary(self) -> None:
        async with self._remote_call("boundary", "deleting region boundary"):
            await self.api.delete_boundary()
            await self._set("boundary", None)

    # Settings

    async def update_settings(self, **changes: Any) -> None:
        """
        Merge ``changes`` (field names, e.g. ``default_zoom=8``) into the
        current settings and store the server's result.
        """
        async with self._remote_call("settings", "updating map settings"):
            merged = MapSettingsSchema.model_validate({**self.state.settings.model_dump(), **changes})
            await self._set("settings", await self.api.update_settings(merged))

    # Session-only state

    def select_pin(self, pin_id: str | None) -> None:
        self.state.selected_pin_id = pin_id

    def set_filter_tags(self, names: Iterable[str]) -> None:
        self.state.filter_tags = frozenset(names)

    def toggle_filter_tag(self, name: str) -> None:
        self.state.filter_tags = self.state.filter_tags ^ {name}

    def set_view_mode(self, mode: ViewMode) -> None:
        self.state.view_mode = mode

    def set_admin_mode(self, enabled: bool) -> None:
        self.state.admin_mode = enabled

    # Derived views

    @property
    def filtered_pins(self) -> list[PinResponse]:
        return filtered_pins(self.state.pins, self.state.filter_tags)

    @property
    def selected_pin(self) -> PinResponse | None:
        return selected_pin(self.state.pins, self.state.selected_pin_id)

    def list_view(self, sort_by: str | None = None, descending: bool = False) -> list[PinResponse]:
        """
        Filtered pins for the list view, optionally sorted.

        Raises:
            ValueError: If ``sort_by`` is not enabled in the map settings
        """
        pins = self.filtered_pins
        if sort_by is None:
            return pins
        if sort_by not in self.state.settings.enabled_sorting:
            raise ValueError(f"Sorting by {sort_by!r} is not enabled")
        return sort_pins(pins, sort_by, descending)

    def errors(self) -> dict[str, str]:
        """Every collection currently in error, for the error banner."""
        return {
            name: status.error
            for name, status in self.state.status.items()
            if status.error
        }

    def is_loading(self) -> bool:
        return any(status.loading for status in self.state.status.values())
