"""Shared response schemas."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Body of confirmations and error responses."""
    message: str
