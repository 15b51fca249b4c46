"""
API Router - Aggregates all endpoints.
Base Path: /api
"""

from fastapi import APIRouter

from pinmap.api import boundary, health, pins, settings, tags
from pinmap.schemas.error import ErrorResponse

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Malformed request or tag in use"},
    401: {"model": ErrorResponse, "description": "Admin token missing or invalid"},
    404: {"model": ErrorResponse, "description": "Resource not found"},
}

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(pins.router, prefix="/pins", tags=["pins"], responses=ERROR_RESPONSES)
api_router.include_router(
    tags.router,
    prefix="/tags",
    tags=["tags"],
    responses={**ERROR_RESPONSES, 409: {"model": ErrorResponse, "description": "Tag name already taken"}},
)
api_router.include_router(boundary.router, prefix="/boundary", tags=["boundary"], responses=ERROR_RESPONSES)
api_router.include_router(settings.router, prefix="/settings", tags=["settings"], responses=ERROR_RESPONSES)
