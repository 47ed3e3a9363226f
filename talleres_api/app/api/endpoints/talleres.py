"""
Workshop endpoints.

CRUD routes for ``/api/talleres``.  Request bodies are taken as plain
JSON objects and handed to ``TallerService``, which builds and
validates the candidate record; rejected payloads come back as 400
with the message of the first failed rule.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, status

from talleres_api.app.core.errors import NotFoundError
from talleres_api.app.core.store import Store, get_store
from talleres_api.app.schemas.common import Message
from talleres_api.app.schemas.taller import Taller
from talleres_api.app.services.taller_service import TallerService

router = APIRouter()

NOT_FOUND = "Taller no encontrado"


def get_taller_service(store: Store = Depends(get_store)) -> TallerService:
    return TallerService(store)


@router.get("", response_model=List[Taller])
async def list_talleres(service: TallerService = Depends(get_taller_service)) -> List[Taller]:
    """Return every workshop in insertion order."""
    return await service.list_talleres()


@router.get("/{taller_id}", response_model=Taller, responses={404: {"model": Message}})
async def get_taller(taller_id: str, service: TallerService = Depends(get_taller_service)) -> Taller:
    """Retrieve a single workshop by its ID."""
    taller = await service.get_taller(taller_id)
    if taller is None:
        raise NotFoundError(NOT_FOUND)
    return taller


@router.post(
    "",
    response_model=Taller,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": Message}},
)
async def create_taller(
    data: Optional[Dict[str, Any]] = Body(None),
    service: TallerService = Depends(get_taller_service),
) -> Taller:
    """Create a workshop; the server assigns its ``id``."""
    return await service.create_taller(data or {})


@router.put(
    "/{taller_id}",
    response_model=Taller,
    responses={400: {"model": Message}, 404: {"model": Message}},
)
async def update_taller(
    taller_id: str,
    data: Optional[Dict[str, Any]] = Body(None),
    service: TallerService = Depends(get_taller_service),
) -> Taller:
    """Update a workshop.

    Only the fields present in the body change; the merged record must
    still pass validation as a whole.
    """
    taller = await service.update_taller(taller_id, data or {})
    if taller is None:
        raise NotFoundError(NOT_FOUND)
    return taller


@router.delete("/{taller_id}", status_code=status.HTTP_204_NO_CONTENT, responses={404: {"model": Message}})
async def delete_taller(taller_id: str, service: TallerService = Depends(get_taller_service)) -> None:
    """Delete a workshop.  Participants referencing it are left as they are."""
    deleted = await service.delete_taller(taller_id)
    if not deleted:
        raise NotFoundError(NOT_FOUND)
    return None
