"""
Business logic for workshops (talleres).

The service works on the in-memory ``Store`` it is given.  Writes
follow a merge-then-validate pattern: the candidate record is built
first (the body on create; the stored record overlaid with the body on
update), checked as a whole by ``validate_taller`` and only then
committed.  An update therefore behaves like a PATCH even though it is
exposed as PUT: fields missing from the body keep their stored value.

Deleting a workshop does not look at participants that still reference
it; they keep their ``tallerId`` and fail validation on their next
update until they are moved to an existing workshop.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from ..core.errors import ValidationError
from ..core.store import Store, new_id
from ..schemas.taller import Taller
from .validation import validate_taller


class TallerService:
    """CRUD operations over ``store.talleres``."""

    def __init__(self, store: Store) -> None:
        self.store = store

    async def list_talleres(self) -> List[Taller]:
        """Return every workshop in insertion order."""
        return list(self.store.talleres)

    async def get_taller(self, taller_id: str) -> Optional[Taller]:
        """Return the workshop with ``taller_id`` or ``None``."""
        return self.store.find_taller(taller_id)

    async def create_taller(self, data: Mapping[str, Any]) -> Taller:
        """Validate ``data`` and append it as a new workshop.

        Any ``id`` in ``data`` is ignored; the store assigns a fresh
        one.  Raises ``ValidationError`` with the first failed rule.
        """
        logger = logging.getLogger(__name__)
        candidate = _without_id(data)
        with self.store.lock:
            error = validate_taller(candidate)
            if error:
                logger.warning("Rejected new taller: %s", error)
                raise ValidationError(error)
            taller = Taller(id=new_id(), **candidate)
            self.store.talleres.append(taller)
        logger.info("Created taller %s ('%s')", taller.id, taller.titulo)
        return taller

    async def update_taller(self, taller_id: str, data: Mapping[str, Any]) -> Optional[Taller]:
        """Overlay ``data`` on the stored workshop and save the result.

        Returns ``None`` if the workshop does not exist.  The merged
        candidate is validated as a whole, so a partial body is fine as
        long as the result is a valid workshop.
        """
        logger = logging.getLogger(__name__)
        with self.store.lock:
            index = self.store.index_of_taller(taller_id)
            if index < 0:
                return None
            candidate: Dict[str, Any] = self.store.talleres[index].model_dump(mode="json", exclude_unset=True)
            candidate.update(_without_id(data))
            error = validate_taller(candidate)
            if error:
                logger.warning("Rejected update of taller %s: %s", taller_id, error)
                raise ValidationError(error)
            taller = Taller(**candidate)
            self.store.talleres[index] = taller
        logger.info("Updated taller %s", taller_id)
        return taller

    async def delete_taller(self, taller_id: str) -> bool:
        """Remove the workshop; return ``False`` if it did not exist."""
        logger = logging.getLogger(__name__)
        with self.store.lock:
            index = self.store.index_of_taller(taller_id)
            if index < 0:
                return False
            del self.store.talleres[index]
        logger.info("Deleted taller %s", taller_id)
        return True


def _without_id(data: Mapping[str, Any]) -> Dict[str, Any]:
    # Ids are assigned by the store and never change afterwards.
    return {key: value for key, value in data.items() if key != "id"}
