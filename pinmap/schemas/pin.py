"""
Pydantic schemas for Pin request/response validation.

Wire format uses camelCase names and a combined [lat, lng] position;
the storage layer keeps separate latitude/longitude columns.
"""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator

from pinmap.models.pin import ContentKind


def validate_position(value: tuple[float, float]) -> tuple[float, float]:
    lat, lng = value
    if not -90 <= lat <= 90:
        raise ValueError("latitude must be between -90 and 90")
    if not -180 <= lng <= 180:
        raise ValueError("longitude must be between -180 and 180")
    return value


def unique_tag_names(names: list[str]) -> list[str]:
    """Drop blank and repeated tag names, keeping first-occurrence order."""
    seen: dict[str, None] = {}
    for name in names:
        name = name.strip()
        if name:
            seen.setdefault(name, None)
    return list(seen)


Position = Annotated[tuple[float, float], AfterValidator(validate_position)]
TagNames = Annotated[list[str], AfterValidator(unique_tag_names)]


class ContentBlock(BaseModel):
    """One block of pin content. ``title`` is an optional caption."""

    type: ContentKind
    value: str
    title: str | None = None

    model_config = ConfigDict(use_enum_values=True)


class PinCreate(BaseModel):
    """Request body for POST /pins."""

    title: str = Field(default="Untitled", max_length=500)
    position: Position
    main_tag: str = Field(alias="mainTag", min_length=1)
    supporting_tags: TagNames = Field(default_factory=list, alias="supportingTags")
    content: list[ContentBlock] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("title")
    @classmethod
    def default_blank_title(cls, v: str) -> str:
        return v.strip() or "Untitled"


class PinUpdate(BaseModel):
    """Request body for PUT /pins/{id}. Omitted fields are left unchanged."""

    title: str | None = Field(default=None, min_length=1, max_length=500)
    position: Position | None = None
    main_tag: str | None = Field(default=None, alias="mainTag", min_length=1)
    supporting_tags: TagNames | None = Field(default=None, alias="supportingTags")
    content: list[ContentBlock] | None = None

    model_config = ConfigDict(populate_by_name=True)


class PinResponse(BaseModel):
    """Pin as served to clients."""

    id: str
    title: str
    position: tuple[float, float]
    main_tag: str = Field(alias="mainTag")
    supporting_tags: list[str] = Field(default_factory=list, alias="supportingTags")
    content: list[ContentBlock] = Field(default_factory=list)
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    model_config = ConfigDict(populate_by_name=True)
