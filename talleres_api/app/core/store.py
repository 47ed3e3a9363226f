"""
In-memory store for workshops and participants.

The application factory creates one ``Store`` and keeps it on
``app.state.store``; routes receive it through the ``get_store``
dependency, so every handler sees the same lists and every mutation is
visible immediately.  Lookups are linear scans over the lists, which
also keeps list responses in insertion order.

Services hold ``store.lock`` for the whole validate-then-write
sequence of a mutation, so the email/tallerId checks and the
append/replace/remove that follows them stay atomic even if routes
run in FastAPI's threadpool instead of on the event loop.
"""

import threading
import uuid
from typing import List, Optional

from fastapi import Request

from ..schemas.participante import Participante
from ..schemas.taller import Modalidad, Taller


def new_id() -> str:
    """Return a fresh opaque identifier for a record."""
    return str(uuid.uuid4())


class Store:
    """Holds the ``talleres`` and ``participantes`` collections."""

    def __init__(
        self,
        talleres: Optional[List[Taller]] = None,
        participantes: Optional[List[Participante]] = None,
    ) -> None:
        self.talleres: List[Taller] = list(talleres or [])
        self.participantes: List[Participante] = list(participantes or [])
        self.lock = threading.RLock()

    @classmethod
    def seeded(cls) -> "Store":
        """Build a store holding the two demo workshops and two participants."""
        talleres = [
            Taller(
                id=new_id(),
                titulo="Intro a APIs REST",
                fecha="2025-09-10T14:00:00.000Z",
                duracionMin=120,
                cupos=30,
                modalidad=Modalidad.presencial,
                docente="Jaime Zagal",
            ),
            Taller(
                id=new_id(),
                titulo="MongoDB para Web",
                fecha="2025-09-12T13:30:00.000Z",
                duracionMin=90,
                cupos=25,
                modalidad=Modalidad.virtual,
                docente="Invitado UDI",
            ),
        ]
        participantes = [
            Participante(
                id=new_id(),
                nombre="Ana Pérez",
                email="ana@demo.com",
                telefono="700-11111",
                tallerId=talleres[0].id,
            ),
            # No telefono: the field stays unset and is omitted from responses.
            Participante(
                id=new_id(),
                nombre="Luis Rojas",
                email="luis@demo.com",
                tallerId=talleres[0].id,
            ),
        ]
        return cls(talleres, participantes)

    def index_of_taller(self, taller_id: str) -> int:
        """Position of the workshop with ``taller_id``, or ``-1``."""
        for index, taller in enumerate(self.talleres):
            if taller.id == taller_id:
                return index
        return -1

    def index_of_participante(self, participante_id: str) -> int:
        """Position of the participant with ``participante_id``, or ``-1``."""
        for index, participante in enumerate(self.participantes):
            if participante.id == participante_id:
                return index
        return -1

    def find_taller(self, taller_id: str) -> Optional[Taller]:
        index = self.index_of_taller(taller_id)
        return self.talleres[index] if index >= 0 else None

    def find_participante(self, participante_id: str) -> Optional[Participante]:
        index = self.index_of_participante(participante_id)
        return self.participantes[index] if index >= 0 else None


def get_store(request: Request) -> Store:
    """FastAPI dependency returning the store owned by the running app."""
    return request.app.state.store
