"""Database module for the Pin Map API."""

from pinmap.db.base import Base
from pinmap.db.session import get_db, engine, AsyncSessionLocal

__all__ = ["Base", "get_db", "engine", "AsyncSessionLocal"]
