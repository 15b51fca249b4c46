"""
Client state layer: a local, persisted mirror of the API's collections.
"""

from pinmap.client.api import ApiError, MapApiClient
from pinmap.client.persistence import LocalStateStore
from pinmap.client.state import AppState, LoadState
from pinmap.client.store import MapStore

__all__ = [
    "ApiError",
    "MapApiClient",
    "LocalStateStore",
    "AppState",
    "LoadState",
    "MapStore",
]
