"""Core utilities and exceptions for the Pin Map API."""

from pinmap.core.exceptions import (
    PinMapException,
    UnauthorizedException,
    NotFoundException,
    PinNotFoundException,
    TagNotFoundException,
    ConflictException,
    DuplicateTagException,
    TagInUseException,
)

__all__ = [
    "PinMapException",
    "UnauthorizedException",
    "NotFoundException",
    "PinNotFoundException",
    "TagNotFoundException",
    "ConflictException",
    "DuplicateTagException",
    "TagInUseException",
]
