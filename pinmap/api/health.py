"""
Health endpoint.
"""

from fastapi import APIRouter
from sqlalchemy import text

from pinmap.db.session import is_using_sqlite_fallback
from pinmap.dependencies import DbSession

router = APIRouter()


@router.get("/health")
async def health_check(db: DbSession):
    """
    Service health check endpoint.

    Returns:
        {"status": "ok"} when the database answers
        {"status": "degraded", "issues": [...]} otherwise
    """
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        return {
            "status": "degraded",
            "issues": [f"Database: {e}"],
        }

    return {
        "status": "ok",
        "database": "sqlite (dev fallback)" if is_using_sqlite_fallback() else "postgresql",
    }
