"""
Pydantic models for workshop (taller) data.

``Taller`` is the stored record and the response body.  Request
bodies are not parsed into this model directly: create and update
build a candidate dict first, run ``validate_taller`` over it and only
then construct the record, so that field errors are reported with the
API's own messages instead of pydantic's.
"""

from enum import Enum
from typing import Union

from pydantic import BaseModel, Field


class Modalidad(str, Enum):
    """Delivery mode of a workshop."""

    presencial = "presencial"
    virtual = "virtual"


class Taller(BaseModel):
    id: str = Field(..., examples=["0b7e1c6e-6a53-4cf4-9a44-2f4f1f8c2d10"])
    titulo: str = Field(..., examples=["Intro a APIs REST"])
    # Kept as the client sent it; only checked to parse as ISO 8601.
    fecha: str = Field(..., examples=["2025-09-10T14:00:00.000Z"])
    duracionMin: Union[int, float] = Field(..., examples=[120])
    cupos: Union[int, float] = Field(..., examples=[30])
    modalidad: Modalidad = Field(..., examples=["presencial"])
    docente: str = Field(..., examples=["Jaime Zagal"])

    # Extra body keys are stored and echoed alongside the known fields.
    model_config = {"extra": "allow"}
