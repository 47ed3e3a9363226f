"""
Business logic for participants.

Mirrors ``TallerService`` but validates against the whole store:
emails are unique across participants and ``tallerId`` must point at
an existing workshop at the moment of the write.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from ..core.errors import ValidationError
from ..core.store import Store, new_id
from ..schemas.participante import Participante
from .validation import validate_participante


class ParticipanteService:
    """CRUD operations over ``store.participantes``."""

    def __init__(self, store: Store) -> None:
        self.store = store

    async def list_participantes(self) -> List[Participante]:
        return list(self.store.participantes)

    async def get_participante(self, participante_id: str) -> Optional[Participante]:
        return self.store.find_participante(participante_id)

    async def create_participante(self, data: Mapping[str, Any]) -> Participante:
        """Validate ``data`` as a new participant and append it.

        Optional fields missing from ``data`` (``telefono``) are left
        unset rather than defaulted.
        """
        logger = logging.getLogger(__name__)
        candidate = {key: value for key, value in data.items() if key != "id"}
        with self.store.lock:
            error = validate_participante(candidate, self.store, is_new=True)
            if error:
                logger.warning("Rejected new participante: %s", error)
                raise ValidationError(error)
            participante = Participante(id=new_id(), **candidate)
            self.store.participantes.append(participante)
        logger.info("Created participante %s for taller %s", participante.id, participante.tallerId)
        return participante

    async def update_participante(self, participante_id: str, data: Mapping[str, Any]) -> Optional[Participante]:
        """Overlay ``data`` on the stored participant and save the result.

        Returns ``None`` if the participant does not exist.  The
        candidate keeps the stored ``id`` so the email check skips the
        participant's own record.
        """
        logger = logging.getLogger(__name__)
        with self.store.lock:
            index = self.store.index_of_participante(participante_id)
            if index < 0:
                return None
            candidate: Dict[str, Any] = self.store.participantes[index].model_dump(mode="json", exclude_unset=True)
            candidate.update({key: value for key, value in data.items() if key != "id"})
            error = validate_participante(candidate, self.store, is_new=False)
            if error:
                logger.warning("Rejected update of participante %s: %s", participante_id, error)
                raise ValidationError(error)
            participante = Participante(**candidate)
            self.store.participantes[index] = participante
        logger.info("Updated participante %s", participante_id)
        return participante

    async def delete_participante(self, participante_id: str) -> bool:
        logger = logging.getLogger(__name__)
        with self.store.lock:
            index = self.store.index_of_participante(participante_id)
            if index < 0:
                return False
            del self.store.participantes[index]
        logger.info("Deleted participante %s", participante_id)
        return True
