"""
Access control dependencies for FastAPI.
Guards the mutating endpoints with an optional admin token.
"""

import secrets
from typing import Annotated

from fastapi import Depends, Header

from pinmap.config import Settings, get_settings
from pinmap.core.exceptions import UnauthorizedException


async def require_admin(
    settings: Annotated[Settings, Depends(get_settings)],
    authorization: str | None = Header(default=None),
) -> bool:
    """
    Dependency for endpoints that change stored data.

    With no ADMIN_TOKEN configured every caller is treated as admin
    (development mode). Otherwise the request must carry
    "Authorization: Bearer <ADMIN_TOKEN>".

    Raises:
        UnauthorizedException: If the token is missing or wrong
    """
    if not settings.ADMIN_TOKEN:
        return True

    if not authorization:
        raise UnauthorizedException("Authorization header required")

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise UnauthorizedException("Invalid authorization header format")

    if not secrets.compare_digest(parts[1], settings.ADMIN_TOKEN):
        raise UnauthorizedException("Invalid admin token")

    return True


RequireAdmin = Annotated[bool, Depends(require_admin)]
