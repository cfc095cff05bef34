import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from launchpad.api.dependencies import StoreDep
from launchpad.models.launchpad import Participant, Presale, PresaleStatus
from launchpad.services.store import LaunchpadStore
from launchpad.schemas.launchpad import (
    ErrorResponse,
    ParticipantCreate,
    ParticipateRequest,
    PresaleCreate,
    PresaleUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/presales", tags=["presales"])

PRESALE_NOT_FOUND = "Presale not found"


def _presale_or_404(store: LaunchpadStore, presale_id: str) -> Presale:
    presale = store.get_presale(presale_id)
    if presale is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PRESALE_NOT_FOUND)
    return presale


@router.get("", response_model=List[Presale], summary="List presales")
async def list_presales(
    store: StoreDep,
    status_filter: Optional[PresaleStatus] = Query(None, alias="status"),
) -> List[Presale]:
    """All presales, newest first, optionally filtered by status."""
    if status_filter is None:
        return store.get_all_presales()
    return store.get_presales_by_status(status_filter)


@router.get("/active", response_model=List[Presale], summary="List active presales")
async def list_active_presales(store: StoreDep) -> List[Presale]:
    return store.get_active_presales()


@router.get(
    "/{presale_id}",
    response_model=Presale,
    responses={404: {"model": ErrorResponse}},
    summary="Get a presale",
)
async def get_presale(presale_id: str, store: StoreDep) -> Presale:
    return _presale_or_404(store, presale_id)


@router.post(
    "",
    response_model=Presale,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create a presale",
    description="totalRaised and participantCount always start at zero.",
)
async def create_presale(request: PresaleCreate, store: StoreDep) -> Presale:
    if store.get_token(request.token_id) is None:
        logger.info(f"Presale created for token {request.token_id} which is not in the store")
    return store.create_presale(request)


@router.patch(
    "/{presale_id}",
    response_model=Presale,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Update a presale",
)
async def update_presale(presale_id: str, request: PresaleUpdate, store: StoreDep) -> Presale:
    try:
        presale = store.update_presale(presale_id, request.changes())
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if presale is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PRESALE_NOT_FOUND)
    return presale


# --- Participants ---


@router.get(
    "/{presale_id}/participants",
    response_model=List[Participant],
    summary="List presale participants",
)
async def list_participants(presale_id: str, store: StoreDep) -> List[Participant]:
    """Contributions to a presale, most recent first."""
    return store.get_participants_by_presale(presale_id)


@router.post(
    "/{presale_id}/participate",
    response_model=Participant,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Contribute to a presale",
    description="Records the contribution and adds it to the presale's totalRaised and participantCount.",
)
async def participate(
    presale_id: str,
    request: ParticipateRequest,
    store: StoreDep,
) -> Participant:
    participant = store.create_participant(
        ParticipantCreate(presale_id=presale_id, **request.model_dump())
    )
    if participant is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PRESALE_NOT_FOUND)
    return participant
