"""
Pydantic models for participant data.

A participant belongs to exactly one workshop through ``tallerId``.
``telefono`` is optional and, when it was never provided, stays unset
on the record so the participant endpoints (which serialise with
``exclude_unset``) leave it out of the response entirely.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Participante(BaseModel):
    id: str = Field(..., examples=["5d0c8a53-93a4-4b43-8b0e-0f2e4f0f9c41"])
    nombre: str = Field(..., examples=["Ana Pérez"])
    email: str = Field(..., examples=["ana@demo.com"])
    telefono: Optional[str] = Field(None, examples=["700-11111"])
    tallerId: str = Field(..., examples=["0b7e1c6e-6a53-4cf4-9a44-2f4f1f8c2d10"])

    model_config = {"extra": "allow"}
