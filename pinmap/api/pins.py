"""
Pin endpoints.
Translate between the wire format (camelCase, [lat, lng] position) and
the storage rows (snake_case, separate latitude/longitude columns).
"""

from typing import Any

from fastapi import APIRouter, Query

from pinmap.auth import RequireAdmin
from pinmap.dependencies import DbSession
from pinmap.models.pin import Pin
from pinmap.schemas.pin import PinCreate, PinResponse, PinUpdate
from pinmap.services.pin_service import PinService, as_utc

router = APIRouter()


def pin_to_response(pin: Pin) -> PinResponse:
    """Convert a Pin row to its wire representation."""
    return PinResponse(
        id=pin.id,
        title=pin.title,
        position=(pin.position_lat, pin.position_lng),
        main_tag=pin.main_tag,
        supporting_tags=pin.supporting_tag_names,
        content=pin.content or [],
        created_at=as_utc(pin.created_at),
        updated_at=as_utc(pin.updated_at),
    )


@router.get("", response_model=list[PinResponse])
async def list_pins(
    db: DbSession,
    tag: str | None = Query(default=None, description="Only pins with this main or supporting tag"),
):
    """
    List all pins, newest first.

    With ``tag`` set, only pins whose main tag or one of whose
    supporting tags equals it are returned.
    """
    service = PinService(db)
    pins = await service.list_by_tag(tag) if tag else await service.list_all()
    return [pin_to_response(pin) for pin in pins]


@router.post("", response_model=PinResponse, status_code=201)
async def create_pin(body: PinCreate, db: DbSession, _: RequireAdmin):
    """Create a pin. The server assigns the id and both timestamps."""
    lat, lng = body.position
    pin = await PinService(db).create(
        title=body.title,
        position_lat=lat,
        position_lng=lng,
        main_tag=body.main_tag,
        supporting_tags=body.supporting_tags,
        content=[block.model_dump(exclude_none=True) for block in body.content],
    )
    return pin_to_response(pin)


@router.get("/{pin_id}", response_model=PinResponse)
async def get_pin(pin_id: str, db: DbSession):
    pin = await PinService(db).get_by_id(pin_id)
    return pin_to_response(pin)


@router.put("/{pin_id}", response_model=PinResponse)
async def update_pin(pin_id: str, body: PinUpdate, db: DbSession, _: RequireAdmin):
    """
    Partially update a pin.

    Only fields present in the body change. ``supportingTags`` replaces
    the whole set. ``updatedAt`` is always refreshed.
    """
    changes: dict[str, Any] = {}
    fields = body.model_fields_set

    if "title" in fields and body.title is not None:
        changes["title"] = body.title
    if "position" in fields and body.position is not None:
        changes["position_lat"], changes["position_lng"] = body.position
    if "main_tag" in fields and body.main_tag is not None:
        changes["main_tag"] = body.main_tag
    if "content" in fields and body.content is not None:
        changes["content"] = [block.model_dump(exclude_none=True) for block in body.content]
    if "supporting_tags" in fields:
        changes["supporting_tags"] = body.supporting_tags or []

    pin = await PinService(db).update(pin_id, changes)
    return pin_to_response(pin)


@router.delete("/{pin_id}")
async def delete_pin(pin_id: str, db: DbSession, _: RequireAdmin):
    """Delete a pin and its supporting tag associations."""
    await PinService(db).delete(pin_id)
    return {"success": True}
