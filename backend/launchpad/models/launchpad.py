"""
In-memory record models for the launchpad.

These models track:
- Confidential tokens and their (mock) deployment state
- Presales tied to a token, with running totals
- Individual participant contributions

Records are immutable; the store replaces a record on every update so that no
caller can mutate store-owned state. Monetary fields are decimal strings.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TokenStatus(str, Enum):
    """Token deployment status."""
    DRAFT = "draft"
    DEPLOYING = "deploying"
    DEPLOYED = "deployed"
    FAILED = "failed"


class PresaleStatus(str, Enum):
    """Presale lifecycle status."""
    UPCOMING = "upcoming"
    ACTIVE = "active"
    ENDED = "ended"
    FINALIZED = "finalized"
    CANCELLED = "cancelled"


class Record(BaseModel):
    """Base for stored records: frozen, camelCase on the wire."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )


class Token(Record):
    id: str
    name: str
    symbol: str
    total_supply: str  # Integer string, may exceed 64 bits
    is_encrypted: bool = True
    contract_address: Optional[str] = None
    deployment_tx_hash: Optional[str] = None
    creator_address: str
    network: str = "sepolia"
    status: TokenStatus = TokenStatus.DRAFT
    created_at: datetime


class Presale(Record):
    id: str
    token_id: str

    # Snapshot of the token at presale creation
    token_name: str
    token_symbol: str

    price_per_token: str  # In ETH
    hard_cap: str
    soft_cap: Optional[str] = None
    start_date: datetime
    end_date: datetime
    contract_address: Optional[str] = None
    owner_address: str

    # Derived from accepted participants only
    total_raised: str = "0"
    participant_count: int = 0

    status: PresaleStatus = PresaleStatus.UPCOMING
    is_encrypted: bool = True
    created_at: datetime


class Participant(Record):
    id: str
    presale_id: str
    wallet_address: str
    contribution_amount: str  # In ETH
    token_amount: str  # Tokens allocated
    transaction_hash: Optional[str] = None
    contributed_at: datetime


class DashboardStats(Record):
    total_tokens: int
    active_presales: int
    total_transactions: int
    total_value_locked: str
