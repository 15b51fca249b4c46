"""
Pydantic schemas for the region boundary.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pinmap.schemas.pin import Position


class RegionBoundarySchema(BaseModel):
    """Region boundary on the wire, used for both requests and responses."""

    name: str = Field(..., min_length=1)
    coordinates: list[Position] = Field(..., min_length=3)
    min_zoom: int = Field(default=5, alias="minZoom", ge=0, le=24)
    max_zoom: int = Field(default=18, alias="maxZoom", ge=0, le=24)

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def check_zoom_range(self) -> "RegionBoundarySchema":
        if self.min_zoom > self.max_zoom:
            raise ValueError("minZoom must not exceed maxZoom")
        return self
