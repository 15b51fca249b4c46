"""Access control for the Pin Map API."""

from pinmap.auth.dependencies import RequireAdmin, require_admin

__all__ = ["RequireAdmin", "require_admin"]
