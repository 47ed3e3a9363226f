"""Shared response schemas."""

from pydantic import BaseModel, Field


class Message(BaseModel):
    """Body of the welcome response and of every error response."""

    message: str = Field(..., examples=["Taller no encontrado"])
