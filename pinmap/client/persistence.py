"""
Local snapshot storage for the client state.

Each collection is kept as one JSON file under a state directory.
Failures to read or write are logged and never raised; callers fall
back to their in-memory defaults.
"""

import logging
from pathlib import Path
from typing import Any, TypeVar

import aiofiles
from pydantic import TypeAdapter

from pinmap.schemas.boundary import RegionBoundarySchema
from pinmap.schemas.pin import PinResponse
from pinmap.schemas.settings import MapSettingsSchema
from pinmap.schemas.tag import TagResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

SNAPSHOT_TYPES: dict[str, TypeAdapter] = {
    "pins": TypeAdapter(list[PinResponse]),
    "tags": TypeAdapter(list[TagResponse]),
    "boundary": TypeAdapter(RegionBoundarySchema | None),
    "settings": TypeAdapter(MapSettingsSchema),
}


class LocalStateStore:
    """
    JSON-file snapshots of the mirrored collections.

    Args:
        base_path: Directory holding one <collection>.json per collection
    """

    def __init__(self, base_path: str | Path):
        self.base_path = Path(base_path)

    def _get_full_path(self, key: str) -> Path:
        return self.base_path / f"{key}.json"

    async def load(self, key: str, default: T) -> T:
        """Return the stored snapshot for ``key``, or ``default``."""
        path = self._get_full_path(key)
        if not path.exists():
            return default

        try:
            async with aiofiles.open(path, "rb") as f:
                raw = await f.read()
            return SNAPSHOT_TYPES[key].validate_json(raw)
        except Exception as e:
            logger.warning("Error reading %s snapshot from %s: %s", key, path, e)
            return default

    async def save(self, key: str, value: Any) -> None:
        """Rewrite the snapshot for ``key``."""
        path = self._get_full_path(key)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            data = SNAPSHOT_TYPES[key].dump_json(value, by_alias=True)
            async with aiofiles.open(path, "wb") as f:
                await f.write(data)
        except Exception as e:
            logger.warning("Error writing %s snapshot to %s: %s", key, path, e)
