"""
Pydantic schemas for request/response validation.
"""

from pinmap.schemas.pin import ContentBlock, PinCreate, PinUpdate, PinResponse
from pinmap.schemas.tag import TagCreate, TagUpdate, TagResponse
from pinmap.schemas.boundary import RegionBoundarySchema
from pinmap.schemas.settings import MapSettingsSchema
from pinmap.schemas.error import ErrorResponse

__all__ = [
    # Pin schemas
    "ContentBlock",
    "PinCreate",
    "PinUpdate",
    "PinResponse",
    # Tag schemas
    "TagCreate",
    "TagUpdate",
    "TagResponse",
    # Boundary / settings
    "RegionBoundarySchema",
    "MapSettingsSchema",
    # Error schemas
    "ErrorResponse",
]
