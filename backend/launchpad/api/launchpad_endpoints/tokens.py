import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from launchpad.api.dependencies import DeployerDep, SettingsDep, StoreDep
from launchpad.models.launchpad import Token
from launchpad.schemas.launchpad import ErrorResponse, TokenCreate, TokenUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/tokens", tags=["tokens"])

TOKEN_NOT_FOUND = "Token not found"


@router.get("", response_model=List[Token], summary="List tokens")
async def list_tokens(store: StoreDep) -> List[Token]:
    """All tokens, newest first."""
    return store.get_all_tokens()


@router.get("/recent", response_model=List[Token], summary="List recent tokens")
async def list_recent_tokens(
    store: StoreDep,
    settings: SettingsDep,
    limit: Optional[int] = Query(None, ge=0, le=100),
) -> List[Token]:
    if limit is None:
        limit = settings.recent_tokens_limit
    return store.get_recent_tokens(limit)


@router.get(
    "/creator/{creator_address}",
    response_model=List[Token],
    summary="List tokens by creator",
)
async def list_tokens_by_creator(creator_address: str, store: StoreDep) -> List[Token]:
    """Tokens created by a wallet. The address match is case-insensitive."""
    return store.get_tokens_by_creator(creator_address)


@router.get(
    "/{token_id}",
    response_model=Token,
    responses={404: {"model": ErrorResponse}},
    summary="Get a token",
)
async def get_token(token_id: str, store: StoreDep) -> Token:
    token = store.get_token(token_id)
    if token is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TOKEN_NOT_FOUND)
    return token


@router.post(
    "",
    response_model=Token,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create a confidential token",
    description="Stores the token and, when enabled, starts a mock deployment in the background.",
)
async def create_token(
    request: TokenCreate,
    store: StoreDep,
    settings: SettingsDep,
    deployer: DeployerDep,
) -> Token:
    token = store.create_token(request)

    if settings.simulate_deployment:
        deployer.schedule(token.id)
        logger.info(f"Scheduled mock deployment for token {token.id}")

    return token


@router.patch(
    "/{token_id}",
    response_model=Token,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Update a token",
)
async def update_token(token_id: str, request: TokenUpdate, store: StoreDep) -> Token:
    token = store.update_token(token_id, request.changes())
    if token is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TOKEN_NOT_FOUND)
    return token
