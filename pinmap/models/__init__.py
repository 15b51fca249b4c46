"""
SQLAlchemy ORM models for the Pin Map API.
"""

from pinmap.models.pin import ContentKind, Pin, PinSupportingTag
from pinmap.models.tag import Tag
from pinmap.models.boundary import RegionBoundary
from pinmap.models.settings import MapSettings

__all__ = [
    "ContentKind",
    "Pin",
    "PinSupportingTag",
    "Tag",
    "RegionBoundary",
    "MapSettings",
]
