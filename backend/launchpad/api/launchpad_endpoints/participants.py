from fastapi import APIRouter, HTTPException, status

from launchpad.api.dependencies import StoreDep
from launchpad.models.launchpad import Participant
from launchpad.schemas.launchpad import ErrorResponse

router = APIRouter(prefix="/participants", tags=["participants"])


@router.get(
    "/{participant_id}",
    response_model=Participant,
    responses={404: {"model": ErrorResponse}},
    summary="Get a participant record",
)
async def get_participant(participant_id: str, store: StoreDep) -> Participant:
    participant = store.get_participant(participant_id)
    if participant is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Participant not found")
    return participant
