"""Shared response shapes."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Plain ``{"message": ...}`` body used for deletes and errors."""

    message: str
