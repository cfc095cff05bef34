"""Shared pytest fixtures for launchpad tests.

This module provides fixtures for:
- A fresh, unseeded store per test
- Input factories for tokens, presales and contributions
- A TestClient bound to an app built around the test store

Usage:
    def test_something(store, token_input):
        token = store.create_token(token_input(symbol="ABC"))
        assert token.symbol == "ABC"
"""

from collections.abc import Callable, Generator
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest
from fastapi.testclient import TestClient

from launchpad.core.config import Settings
from launchpad.main import create_app
from launchpad.schemas.launchpad import ParticipantCreate, PresaleCreate, TokenCreate
from launchpad.services.store import LaunchpadStore
from tests.support.payloads import CREATOR, OWNER, WALLET


# =============================================================================
# Store
# =============================================================================


class StepClock:
    """Deterministic clock: every call is one second after the previous one."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2025, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture
def clock() -> StepClock:
    return StepClock()


@pytest.fixture
def store(clock: StepClock) -> LaunchpadStore:
    """Empty store with a deterministic clock."""
    return LaunchpadStore(clock=clock)


# =============================================================================
# Input factories
# =============================================================================


@pytest.fixture
def token_input() -> Callable[..., TokenCreate]:
    def _make(**overrides: Any) -> TokenCreate:
        data = {
            "name": "Token A",
            "symbol": "TKA",
            "total_supply": "1000",
            "creator_address": CREATOR,
        }
        data.update(overrides)
        return TokenCreate(**data)

    return _make


@pytest.fixture
def presale_input() -> Callable[..., PresaleCreate]:
    def _make(token_id: str = "token-1", **overrides: Any) -> PresaleCreate:
        start = datetime(2025, 2, 1, tzinfo=timezone.utc)
        data = {
            "token_id": token_id,
            "token_name": "Token A",
            "token_symbol": "TKA",
            "price_per_token": "0.01",
            "hard_cap": "100",
            "start_date": start,
            "end_date": start + timedelta(days=7),
            "owner_address": OWNER,
        }
        data.update(overrides)
        return PresaleCreate(**data)

    return _make


@pytest.fixture
def participant_input() -> Callable[..., ParticipantCreate]:
    def _make(presale_id: str, contribution_amount: str = "1", **overrides: Any) -> ParticipantCreate:
        data = {
            "presale_id": presale_id,
            "wallet_address": WALLET,
            "contribution_amount": contribution_amount,
            "token_amount": "100",
        }
        data.update(overrides)
        return ParticipantCreate(**data)

    return _make


# =============================================================================
# HTTP
# =============================================================================


@pytest.fixture
def test_settings() -> Settings:
    return Settings(seed_demo_data=False, simulate_deployment=False)


@pytest.fixture
def client(test_settings: Settings, store: LaunchpadStore) -> Generator[TestClient, None, None]:
    """TestClient for an app wrapping the test's own store."""
    app = create_app(settings=test_settings, store=store)
    with TestClient(app) as test_client:
        yield test_client
