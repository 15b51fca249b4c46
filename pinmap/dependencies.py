"""
FastAPI dependency injection functions.
Provides common dependencies used across endpoints.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pinmap.db.session import get_db

# Type alias for cleaner endpoint signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]
