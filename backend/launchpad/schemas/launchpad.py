from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from launchpad.core.constants import (
    DECIMAL_AMOUNT_PATTERN,
    EVM_ADDRESS_PATTERN,
    INTEGER_AMOUNT_PATTERN,
    TX_HASH_PATTERN,
)
from launchpad.models.launchpad import PresaleStatus, TokenStatus


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive timestamps are taken as UTC so that dates stay comparable."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class RequestSchema(BaseModel):
    """Request bodies are camelCase; unknown fields are dropped."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class PartialUpdate(RequestSchema):
    """Base for PATCH bodies: only fields the client sent are merged."""

    # Fields that may be sent but never cleared with an explicit null
    NON_NULLABLE: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_for_required(self):
        for name in self.model_fields_set & self.NON_NULLABLE:
            if getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


# --- Tokens ---


class TokenCreate(RequestSchema):
    """Input for creating a confidential token."""
    name: str = Field(..., min_length=1, max_length=100)
    symbol: str = Field(..., min_length=1, max_length=20)
    total_supply: str = Field(
        ..., pattern=INTEGER_AMOUNT_PATTERN, description="Total supply as an integer string"
    )
    is_encrypted: bool = True
    contract_address: Optional[str] = Field(None, pattern=EVM_ADDRESS_PATTERN)
    deployment_tx_hash: Optional[str] = Field(None, pattern=TX_HASH_PATTERN)
    creator_address: str = Field(..., pattern=EVM_ADDRESS_PATTERN)
    network: str = "sepolia"
    status: TokenStatus = TokenStatus.DRAFT


class TokenUpdate(PartialUpdate):
    """Partial token update."""
    NON_NULLABLE: ClassVar[FrozenSet[str]] = frozenset(
        {"name", "symbol", "total_supply", "is_encrypted", "creator_address", "network", "status"}
    )

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    symbol: Optional[str] = Field(None, min_length=1, max_length=20)
    total_supply: Optional[str] = Field(None, pattern=INTEGER_AMOUNT_PATTERN)
    is_encrypted: Optional[bool] = None
    contract_address: Optional[str] = Field(None, pattern=EVM_ADDRESS_PATTERN)
    deployment_tx_hash: Optional[str] = Field(None, pattern=TX_HASH_PATTERN)
    creator_address: Optional[str] = Field(None, pattern=EVM_ADDRESS_PATTERN)
    network: Optional[str] = None
    status: Optional[TokenStatus] = None


# --- Presales ---


class PresaleCreate(RequestSchema):
    """
    Input for creating a presale.

    totalRaised and participantCount are not accepted: the store derives them
    from participant contributions.
    """
    token_id: str = Field(..., min_length=1)
    token_name: str = Field(..., min_length=1)
    token_symbol: str = Field(..., min_length=1)
    price_per_token: str = Field(..., pattern=DECIMAL_AMOUNT_PATTERN, description="Price in ETH")
    hard_cap: str = Field(..., pattern=INTEGER_AMOUNT_PATTERN)
    soft_cap: Optional[str] = Field(None, pattern=INTEGER_AMOUNT_PATTERN)
    start_date: datetime
    end_date: datetime
    contract_address: Optional[str] = Field(None, pattern=EVM_ADDRESS_PATTERN)
    owner_address: str = Field(..., pattern=EVM_ADDRESS_PATTERN)
    status: PresaleStatus = PresaleStatus.UPCOMING
    is_encrypted: bool = True

    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_dates(cls, value):
        return _as_utc(value)

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date <= self.start_date:
            raise ValueError("endDate must be after startDate")
        return self


class PresaleUpdate(PartialUpdate):
    """Partial presale update. Running totals are not writable."""
    NON_NULLABLE: ClassVar[FrozenSet[str]] = frozenset(
        {
            "token_id",
            "token_name",
            "token_symbol",
            "price_per_token",
            "hard_cap",
            "start_date",
            "end_date",
            "owner_address",
            "status",
            "is_encrypted",
        }
    )

    token_id: Optional[str] = Field(None, min_length=1)
    token_name: Optional[str] = Field(None, min_length=1)
    token_symbol: Optional[str] = Field(None, min_length=1)
    price_per_token: Optional[str] = Field(None, pattern=DECIMAL_AMOUNT_PATTERN)
    hard_cap: Optional[str] = Field(None, pattern=INTEGER_AMOUNT_PATTERN)
    soft_cap: Optional[str] = Field(None, pattern=INTEGER_AMOUNT_PATTERN)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    contract_address: Optional[str] = Field(None, pattern=EVM_ADDRESS_PATTERN)
    owner_address: Optional[str] = Field(None, pattern=EVM_ADDRESS_PATTERN)
    status: Optional[PresaleStatus] = None
    is_encrypted: Optional[bool] = None

    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_dates(cls, value):
        return _as_utc(value)

    @model_validator(mode="after")
    def check_dates(self):
        if self.start_date and self.end_date and self.end_date <= self.start_date:
            raise ValueError("endDate must be after startDate")
        return self


# --- Participants ---


class ParticipateRequest(RequestSchema):
    """Contribution body for POST /presales/{id}/participate."""
    wallet_address: str = Field(..., pattern=EVM_ADDRESS_PATTERN)
    contribution_amount: str = Field(..., pattern=DECIMAL_AMOUNT_PATTERN, description="Amount in ETH")
    token_amount: str = Field(..., pattern=DECIMAL_AMOUNT_PATTERN, description="Tokens allocated")
    transaction_hash: Optional[str] = Field(None, pattern=TX_HASH_PATTERN)


class ParticipantCreate(ParticipateRequest):
    """Store input: the contribution plus the presale it targets."""
    presale_id: str = Field(..., min_length=1)


# --- Misc ---


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    detail: Optional[List[Dict[str, Any]]] = None
