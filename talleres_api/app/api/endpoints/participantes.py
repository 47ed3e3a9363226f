"""
Participant endpoints.

CRUD routes for ``/api/participantes``.  Responses are serialised with
``exclude_unset`` so a participant that never had a ``telefono`` is
returned without the key rather than with ``null``.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, status

from talleres_api.app.core.errors import NotFoundError
from talleres_api.app.core.store import Store, get_store
from talleres_api.app.schemas.common import Message
from talleres_api.app.schemas.participante import Participante
from talleres_api.app.services.participante_service import ParticipanteService

router = APIRouter()

NOT_FOUND = "Participante no encontrado"


def get_participante_service(store: Store = Depends(get_store)) -> ParticipanteService:
    return ParticipanteService(store)


@router.get("", response_model=List[Participante], response_model_exclude_unset=True)
async def list_participantes(
    service: ParticipanteService = Depends(get_participante_service),
) -> List[Participante]:
    return await service.list_participantes()


@router.get(
    "/{participante_id}",
    response_model=Participante,
    response_model_exclude_unset=True,
    responses={404: {"model": Message}},
)
async def get_participante(
    participante_id: str,
    service: ParticipanteService = Depends(get_participante_service),
) -> Participante:
    participante = await service.get_participante(participante_id)
    if participante is None:
        raise NotFoundError(NOT_FOUND)
    return participante


@router.post(
    "",
    response_model=Participante,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": Message}},
)
async def create_participante(
    data: Optional[Dict[str, Any]] = Body(None),
    service: ParticipanteService = Depends(get_participante_service),
) -> Participante:
    """Enrol a participant in an existing workshop.

    Fails with 400 if the email is already taken or ``tallerId`` does
    not match any workshop.
    """
    return await service.create_participante(data or {})


@router.put(
    "/{participante_id}",
    response_model=Participante,
    response_model_exclude_unset=True,
    responses={400: {"model": Message}, 404: {"model": Message}},
)
async def update_participante(
    participante_id: str,
    data: Optional[Dict[str, Any]] = Body(None),
    service: ParticipanteService = Depends(get_participante_service),
) -> Participante:
    """Update a participant; fields missing from the body are kept."""
    participante = await service.update_participante(participante_id, data or {})
    if participante is None:
        raise NotFoundError(NOT_FOUND)
    return participante


@router.delete(
    "/{participante_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": Message}},
)
async def delete_participante(
    participante_id: str,
    service: ParticipanteService = Depends(get_participante_service),
) -> None:
    deleted = await service.delete_participante(participante_id)
    if not deleted:
        raise NotFoundError(NOT_FOUND)
    return None
