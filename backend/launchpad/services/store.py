"""
In-memory entity store for tokens, presales and participants.

The store exclusively owns all entity state. Records are immutable pydantic
models; updates replace the stored record with a merged copy. Lookups of an
unknown id return None rather than raising, and the API layer turns that into
a 404.

Contribution accounting is a single store operation: recording a participant
and bumping the presale's running totals happen under that presale's lock, so
concurrent contributions can never lose an update.
"""

import itertools
import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional, TypeVar

from launchpad.models.launchpad import (
    DashboardStats,
    Participant,
    Presale,
    PresaleStatus,
    Token,
)
from launchpad.schemas.launchpad import ParticipantCreate, PresaleCreate, TokenCreate
from launchpad.services.statistics import (
    compute_dashboard_stats,
    format_amount,
    sum_amounts,
    to_decimal,
)

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", Token, Presale, Participant)

# Never writable through update_*
IMMUTABLE_FIELDS = frozenset({"id", "created_at"})
# Derived from participants; only create_participant changes them
DERIVED_PRESALE_FIELDS = frozenset({"total_raised", "participant_count"})


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LaunchpadStore:
    """Keyed in-memory collections with CRUD and query operations."""

    def __init__(self, clock: Callable[[], datetime] = utcnow):
        self._clock = clock
        self._tokens: Dict[str, Token] = {}
        self._presales: Dict[str, Presale] = {}
        self._participants: Dict[str, Participant] = {}

        # Insertion sequence, breaks ties between identical timestamps
        self._sequence = itertools.count()
        self._inserted: Dict[str, int] = {}

        self._lock = threading.RLock()
        self._presale_locks: Dict[str, threading.RLock] = {}

    # --- Internals ---

    def _new_id(self) -> str:
        return str(uuid.uuid4())

    def _track(self, record_id: str) -> None:
        self._inserted[record_id] = next(self._sequence)

    def _newest_first(self, records: List[RecordT], timestamp: str) -> List[RecordT]:
        return sorted(
            records,
            key=lambda r: (getattr(r, timestamp), self._inserted.get(r.id, -1)),
            reverse=True,
        )

    def _presale_lock(self, presale_id: str) -> Optional[threading.RLock]:
        # Locks exist only for stored presales, created alongside the record
        with self._lock:
            return self._presale_locks.get(presale_id)

    @staticmethod
    def _merge(record: RecordT, updates: Mapping[str, Any], protected: frozenset) -> RecordT:
        changes = {k: v for k, v in updates.items() if k not in protected}
        ignored = set(updates) - set(changes)
        if ignored:
            logger.debug(f"Ignoring non-writable fields on {record.id}: {sorted(ignored)}")
        return type(record).model_validate({**record.model_dump(), **changes})

    # --- Token operations ---

    def get_token(self, token_id: str) -> Optional[Token]:
        return self._tokens.get(token_id)

    def get_all_tokens(self) -> List[Token]:
        with self._lock:
            tokens = list(self._tokens.values())
        return self._newest_first(tokens, "created_at")

    def get_recent_tokens(self, limit: int = 5) -> List[Token]:
        return self.get_all_tokens()[: max(limit, 0)]

    def get_tokens_by_creator(self, creator_address: str) -> List[Token]:
        address = creator_address.lower()
        return [t for t in self.get_all_tokens() if t.creator_address.lower() == address]

    def create_token(self, data: TokenCreate) -> Token:
        token = Token(
            **data.model_dump(),
            id=self._new_id(),
            created_at=self._clock(),
        )
        with self._lock:
            self._tokens[token.id] = token
            self._track(token.id)
        logger.info(f"Created token {token.id} ({token.name}/{token.symbol})")
        return token

    def update_token(self, token_id: str, updates: Mapping[str, Any]) -> Optional[Token]:
        with self._lock:
            token = self._tokens.get(token_id)
            if token is None:
                return None
            updated = self._merge(token, updates, IMMUTABLE_FIELDS)
            self._tokens[token_id] = updated
            return updated

    # --- Presale operations ---

    def get_presale(self, presale_id: str) -> Optional[Presale]:
        return self._presales.get(presale_id)

    def get_all_presales(self) -> List[Presale]:
        with self._lock:
            presales = list(self._presales.values())
        return self._newest_first(presales, "created_at")

    def get_active_presales(self) -> List[Presale]:
        return self.get_presales_by_status(PresaleStatus.ACTIVE)

    def get_presales_by_status(self, status: str) -> List[Presale]:
        return [p for p in self.get_all_presales() if p.status == status]

    def create_presale(self, data: PresaleCreate) -> Presale:
        presale = Presale(
            **data.model_dump(),
            id=self._new_id(),
            total_raised="0",
            participant_count=0,
            created_at=self._clock(),
        )
        with self._lock:
            self._presales[presale.id] = presale
            self._presale_locks[presale.id] = threading.RLock()
            self._track(presale.id)
        logger.info(f"Created presale {presale.id} for token {presale.token_id}")
        return presale

    def update_presale(self, presale_id: str, updates: Mapping[str, Any]) -> Optional[Presale]:
        """
        Merge writable fields into a presale.

        Raises ValueError, leaving the presale untouched, if the merged dates
        would end the presale before it starts.
        """
        lock = self._presale_lock(presale_id)
        if lock is None:
            return None

        with lock, self._lock:
            presale = self._presales[presale_id]
            updated = self._merge(
                presale, updates, IMMUTABLE_FIELDS | DERIVED_PRESALE_FIELDS
            )
            if updated.end_date <= updated.start_date:
                raise ValueError("endDate must be after startDate")
            self._presales[presale_id] = updated
            return updated

    # --- Participant operations ---

    def get_participant(self, participant_id: str) -> Optional[Participant]:
        return self._participants.get(participant_id)

    def get_participants_by_presale(self, presale_id: str) -> List[Participant]:
        with self._lock:
            participants = [
                p for p in self._participants.values() if p.presale_id == presale_id
            ]
        return self._newest_first(participants, "contributed_at")

    def create_participant(self, data: ParticipantCreate) -> Optional[Participant]:
        """
        Record a contribution and apply it to the presale's running totals.

        Returns None, recording nothing, when the presale does not exist.
        """
        lock = self._presale_lock(data.presale_id)
        if lock is None:
            logger.warning(
                f"Rejected contribution from {data.wallet_address}: "
                f"unknown presale {data.presale_id}"
            )
            return None

        with lock:
            presale = self._presales[data.presale_id]
            participant = Participant(
                **data.model_dump(),
                id=self._new_id(),
                contributed_at=self._clock(),
            )
            total_raised = sum_amounts(
                [
                    to_decimal(presale.total_raised),
                    to_decimal(participant.contribution_amount),
                ]
            )

            with self._lock:
                self._participants[participant.id] = participant
                self._track(participant.id)
                self._presales[presale.id] = self._merge(
                    presale,
                    {
                        "total_raised": format_amount(total_raised),
                        "participant_count": presale.participant_count + 1,
                    },
                    IMMUTABLE_FIELDS,
                )

        logger.info(
            f"Contribution {participant.contribution_amount} to presale {presale.id} "
            f"from {participant.wallet_address}, total raised {format_amount(total_raised)}"
        )
        return participant

    # --- Statistics ---

    def get_dashboard_stats(self) -> DashboardStats:
        with self._lock:
            tokens = list(self._tokens.values())
            presales = list(self._presales.values())
            participants = list(self._participants.values())
        return compute_dashboard_stats(tokens, presales, participants)

    def counts(self) -> Dict[str, int]:
        with self._lock:
            return {
                "tokens": len(self._tokens),
                "presales": len(self._presales),
                "participants": len(self._participants),
            }
