"""
Custom exceptions for the Pin Map API.
Every exception renders as {"error": "<message>"} with its status code.
"""

from typing import Any


class PinMapException(Exception):
    """Base exception for all Pin Map API errors."""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to response dictionary."""
        return {"error": self.message}


class UnauthorizedException(PinMapException):
    """401 - Missing or invalid admin token."""

    def __init__(self, message: str = "Valid admin token required"):
        super().__init__(message=message, status_code=401)


class NotFoundException(PinMapException):
    """404 - Entity not found, or no boundary/settings defined."""

    def __init__(self, message: str):
        super().__init__(message=message, status_code=404)


class PinNotFoundException(NotFoundException):
    def __init__(self, pin_id: str):
        super().__init__(f"Pin '{pin_id}' not found")


class TagNotFoundException(NotFoundException):
    def __init__(self, tag_id: str):
        super().__init__(f"Tag '{tag_id}' not found")


class ConflictException(PinMapException):
    """409 - Uniqueness conflict detected by the storage layer."""

    def __init__(self, message: str):
        super().__init__(message=message, status_code=409)


class DuplicateTagException(ConflictException):
    def __init__(self, name: str):
        super().__init__(f"A tag named '{name}' already exists")


class TagInUseException(PinMapException):
    """400 - Tag still referenced by at least one pin."""

    def __init__(self, name: str, usage: str):
        super().__init__(
            message=f"Cannot delete tag '{name}' that is used as a {usage} tag by pins",
            status_code=400,
        )
