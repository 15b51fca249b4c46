"""
Region boundary endpoints.
"""

from fastapi import APIRouter

from pinmap.auth import RequireAdmin
from pinmap.core.exceptions import NotFoundException
from pinmap.dependencies import DbSession
from pinmap.models.boundary import RegionBoundary
from pinmap.schemas.boundary import RegionBoundarySchema
from pinmap.services.boundary_service import BoundaryService

router = APIRouter()


def _boundary_to_response(boundary: RegionBoundary) -> RegionBoundarySchema:
    return RegionBoundarySchema(
        name=boundary.name,
        coordinates=[tuple(vertex) for vertex in boundary.coordinates],
        min_zoom=boundary.min_zoom,
        max_zoom=boundary.max_zoom,
    )


@router.get("", response_model=RegionBoundarySchema)
async def get_boundary(db: DbSession):
    """Get the region boundary, or 404 when none is defined."""
    boundary = await BoundaryService(db).get()
    if boundary is None:
        raise NotFoundException("No region boundary defined")
    return _boundary_to_response(boundary)


@router.put("", response_model=RegionBoundarySchema)
async def set_boundary(body: RegionBoundarySchema, db: DbSession, _: RequireAdmin):
    """Replace the region boundary."""
    boundary = await BoundaryService(db).set(
        name=body.name,
        coordinates=[list(vertex) for vertex in body.coordinates],
        min_zoom=body.min_zoom,
        max_zoom=body.max_zoom,
    )
    return _boundary_to_response(boundary)


@router.delete("")
async def delete_boundary(db: DbSession, _: RequireAdmin):
    await BoundaryService(db).delete()
    return {"success": True}
