"""
Data-access services for the Pin Map API.
Services issue the storage statements; routes handle wire shaping.
"""

from pinmap.services.pin_service import PinService
from pinmap.services.tag_service import TagService
from pinmap.services.boundary_service import BoundaryService
from pinmap.services.settings_service import SettingsService

__all__ = [
    "PinService",
    "TagService",
    "BoundaryService",
    "SettingsService",
]
