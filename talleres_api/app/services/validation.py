"""
Validation of candidate workshop and participant records.

A candidate is the plain dict a write would commit: the request body
on create, or the stored record overlaid with the body on update.
Each validator walks its rules in a fixed order and returns the
message of the first one that fails, or ``None`` when the candidate
is acceptable.

Numeric fields must arrive as JSON numbers.  Numeric strings such as
``"60"`` and booleans are rejected with the field's message.
"""

import math
import re
from datetime import datetime
from typing import Any, Mapping, Optional

from ..core.store import Store
from ..schemas.taller import Modalidad

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
MODALIDADES = tuple(modalidad.value for modalidad in Modalidad)


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _is_text(value: Any, min_length: int = 1) -> bool:
    return isinstance(value, str) and len(value) >= min_length


def is_valid_datetime(value: Any) -> bool:
    """Return True if ``value`` is an ISO 8601 date or date-time string."""
    if not _is_text(value):
        return False
    text = value.strip()
    # fromisoformat only understands the "Z" suffix from Python 3.11 on
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    try:
        datetime.fromisoformat(text)
    except ValueError:
        return False
    return True


def is_valid_email(value: Any) -> bool:
    return isinstance(value, str) and EMAIL_PATTERN.search(value) is not None


def validate_taller(candidate: Mapping[str, Any]) -> Optional[str]:
    """Check a candidate workshop; return the first violated rule's message."""
    if not _is_text(candidate.get("titulo"), 3):
        return "El título es requerido y debe tener al menos 3 caracteres."
    if not is_valid_datetime(candidate.get("fecha")):
        return "La fecha es requerida y debe ser un formato ISO válido."
    duracion = candidate.get("duracionMin")
    if not _is_number(duracion) or duracion <= 0:
        return "La duración es requerida y debe ser mayor a 0."
    cupos = candidate.get("cupos")
    if not _is_number(cupos) or cupos < 5:
        return "Los cupos son requeridos y deben ser 5 o más."
    if candidate.get("modalidad") not in MODALIDADES:
        return "La modalidad es requerida y debe ser 'presencial' o 'virtual'."
    if not _is_text(candidate.get("docente")):
        return "El docente es requerido."
    return None


def validate_participante(
    candidate: Mapping[str, Any],
    store: Store,
    is_new: bool = True,
) -> Optional[str]:
    """Check a candidate participant against its fields and the store.

    Email uniqueness looks at every stored participant.  On create
    (``is_new``) any match is a conflict; on update the candidate's
    own stored record is skipped, so a participant can be saved again
    with the email it already holds.  ``tallerId`` must name a
    workshop that exists right now.
    """
    if not _is_text(candidate.get("nombre"), 2):
        return "El nombre es requerido y debe tener al menos 2 caracteres."

    email = candidate.get("email")
    if not is_valid_email(email):
        return "El email es requerido y debe tener un formato válido."
    for participante in store.participantes:
        if participante.email == email and (is_new or participante.id != candidate.get("id")):
            return "El email ya está registrado por otro participante."

    taller_id = candidate.get("tallerId")
    if not taller_id:
        return "El tallerId es requerido."
    if not isinstance(taller_id, str) or store.find_taller(taller_id) is None:
        return "El tallerId proporcionado no existe."

    telefono = candidate.get("telefono")
    if telefono is not None and not isinstance(telefono, str):
        return "El teléfono debe ser un texto."
    return None
