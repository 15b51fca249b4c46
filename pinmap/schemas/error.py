"""
Pydantic schema for error responses.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Error body returned by every failing endpoint.

    Examples:
        400: {"error": "position: Field required"}
        404: {"error": "Pin 'abc' not found"}
        409: {"error": "A tag named 'health' already exists"}
    """

    error: str = Field(..., description="Human-readable error message")
