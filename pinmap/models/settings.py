"""
Map settings SQLAlchemy model.
"""

from sqlalchemy import JSON, Integer
from sqlalchemy.orm import Mapped, mapped_column

from pinmap.db.base import Base

DEFAULT_CENTER: list[float] = [52.0977, 19.0258]
DEFAULT_ZOOM = 6
DEFAULT_CONTENT_TYPES: list[str] = ["text", "image", "video", "pdf"]
DEFAULT_FILTERS: list[str] = ["title", "mainTag", "supportingTags", "createdAt"]
DEFAULT_SORTING: list[str] = ["title", "mainTag", "createdAt", "updatedAt"]


class MapSettings(Base):
    """Global display configuration. Upserted as a single row."""
    __tablename__ = "map_settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    default_center: Mapped[list[float]] = mapped_column(JSON, nullable=False)
    default_zoom: Mapped[int] = mapped_column(Integer, nullable=False)
    allowed_content_types: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    content_display_order: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    enabled_filters: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    enabled_sorting: Mapped[list[str]] = mapped_column(JSON, nullable=False)
