"""
Region boundary SQLAlchemy model.
"""

from sqlalchemy import JSON, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from pinmap.db.base import Base


class RegionBoundary(Base):
    """Polygon annotating the map's area of interest. At most one row exists."""
    __tablename__ = "region_boundaries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    coordinates: Mapped[list[list[float]]] = mapped_column(
        JSON,
        nullable=False,
        comment="Ordered [lat, lng] vertices",
    )
    min_zoom: Mapped[int] = mapped_column(Integer, nullable=False)
    max_zoom: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<RegionBoundary(name={self.name}, vertices={len(self.coordinates)})>"
