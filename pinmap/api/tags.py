"""
Tag endpoints.
"""

from fastapi import APIRouter

from pinmap.auth import RequireAdmin
from pinmap.core.exceptions import TagInUseException
from pinmap.dependencies import DbSession
from pinmap.schemas.tag import TagCreate, TagResponse, TagUpdate
from pinmap.services.tag_service import TagService

router = APIRouter()


@router.get("", response_model=list[TagResponse])
async def list_tags(db: DbSession):
    """List all tag definitions ordered by name."""
    tags = await TagService(db).list_all()
    return [TagResponse.model_validate(tag) for tag in tags]


@router.post("", response_model=TagResponse, status_code=201)
async def create_tag(body: TagCreate, db: DbSession, _: RequireAdmin):
    """
    Create a tag definition.

    Returns 409 when the name is already taken.
    """
    tag = await TagService(db).create(name=body.name, color=body.color)
    return TagResponse.model_validate(tag)


@router.get("/{tag_id}", response_model=TagResponse)
async def get_tag(tag_id: str, db: DbSession):
    tag = await TagService(db).get_by_id(tag_id)
    return TagResponse.model_validate(tag)


@router.put("/{tag_id}", response_model=TagResponse)
async def update_tag(tag_id: str, body: TagUpdate, db: DbSession, _: RequireAdmin):
    """Update a tag's name and/or color. Returns 409 on a name clash."""
    tag = await TagService(db).update(tag_id, name=body.name, color=body.color)
    return TagResponse.model_validate(tag)


@router.delete("/{tag_id}")
async def delete_tag(tag_id: str, db: DbSession, _: RequireAdmin):
    """
    Delete a tag definition.

    Refused with 400 while any pin uses the tag as its main tag or as a
    supporting tag; the storage layer does not guard either reference.
    """
    service = TagService(db)
    tag = await service.get_by_id(tag_id)

    usage = await service.find_usage(tag.name)
    if usage:
        raise TagInUseException(tag.name, usage)

    await service.delete(tag)
    return {"success": True}
