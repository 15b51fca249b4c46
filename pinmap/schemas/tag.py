"""
Pydantic schemas for Tag request/response validation.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

DEFAULT_TAG_COLOR = "#cccccc"

# Stripped the same way as pin tag names
TagName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]


class TagCreate(BaseModel):
    """Request body for POST /tags."""

    name: TagName
    color: str = Field(default=DEFAULT_TAG_COLOR, min_length=1, max_length=32)


class TagUpdate(BaseModel):
    """Request body for PUT /tags/{id}. Omitted fields are left unchanged."""

    name: TagName | None = None
    color: str | None = Field(default=None, min_length=1, max_length=32)


class TagResponse(BaseModel):
    """Response schema for a single tag."""

    id: str
    name: str
    color: str

    model_config = ConfigDict(from_attributes=True)
