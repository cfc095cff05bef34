"""Unit tests for request validation."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from launchpad.models.launchpad import PresaleStatus, TokenStatus
from launchpad.schemas.launchpad import (
    ParticipateRequest,
    PresaleCreate,
    PresaleUpdate,
    TokenCreate,
    TokenUpdate,
)
from tests.support.payloads import contribution_payload, presale_payload, token_payload

pytestmark = pytest.mark.unit


class TestTokenCreate:
    def test_accepts_camel_case_and_applies_defaults(self) -> None:
        token = TokenCreate.model_validate(token_payload())

        assert token.total_supply == "1000"
        assert token.is_encrypted is True
        assert token.network == "sepolia"
        assert token.status == TokenStatus.DRAFT

    @pytest.mark.parametrize("supply", ["-1", "1.5", "abc", ""])
    def test_rejects_non_integer_supply(self, supply) -> None:
        with pytest.raises(ValidationError):
            TokenCreate.model_validate(token_payload(totalSupply=supply))

    @pytest.mark.parametrize("address", ["0x123", "1" * 42, "0x" + "g" * 40])
    def test_rejects_bad_creator_address(self, address) -> None:
        with pytest.raises(ValidationError):
            TokenCreate.model_validate(token_payload(creatorAddress=address))

    def test_rejects_unknown_status(self) -> None:
        with pytest.raises(ValidationError):
            TokenCreate.model_validate(token_payload(status="minted"))


class TestPresaleCreate:
    def test_parses_dates_and_drops_running_totals(self) -> None:
        presale = PresaleCreate.model_validate(
            presale_payload("token-1", totalRaised="50", participantCount=3)
        )

        assert presale.start_date == datetime(2025, 2, 1, tzinfo=timezone.utc)
        assert presale.status == PresaleStatus.UPCOMING
        assert "total_raised" not in presale.model_dump()

    def test_naive_dates_are_utc(self) -> None:
        presale = PresaleCreate.model_validate(
            presale_payload("token-1", startDate="2025-02-01T00:00:00", endDate="2025-02-08T00:00:00Z")
        )

        assert presale.start_date.tzinfo is not None

    def test_end_must_follow_start(self) -> None:
        with pytest.raises(ValidationError, match="endDate must be after startDate"):
            PresaleCreate.model_validate(
                presale_payload("token-1", endDate="2025-02-01T00:00:00Z")
            )

    @pytest.mark.parametrize(
        "field, value",
        [("pricePerToken", "abc"), ("hardCap", "1.5"), ("softCap", "-2"), ("ownerAddress", "nope")],
    )
    def test_rejects_bad_amounts_and_addresses(self, field, value) -> None:
        with pytest.raises(ValidationError):
            PresaleCreate.model_validate(presale_payload("token-1", **{field: value}))


class TestParticipateRequest:
    def test_accepts_decimal_contribution(self) -> None:
        request = ParticipateRequest.model_validate(contribution_payload("5.5"))

        assert request.contribution_amount == "5.5"

    @pytest.mark.parametrize("amount", ["-1", "1e5", "five", ""])
    def test_rejects_bad_contribution(self, amount) -> None:
        with pytest.raises(ValidationError):
            ParticipateRequest.model_validate(contribution_payload(amount))


class TestPartialUpdates:
    def test_only_sent_fields_are_changes(self) -> None:
        update = TokenUpdate.model_validate({"status": "deployed", "contractAddress": None})

        assert update.changes() == {"status": TokenStatus.DEPLOYED, "contract_address": None}

    def test_required_fields_cannot_be_nulled(self) -> None:
        with pytest.raises(ValidationError, match="name cannot be null"):
            TokenUpdate.model_validate({"name": None})

    def test_presale_update_ignores_running_totals(self) -> None:
        update = PresaleUpdate.model_validate({"totalRaised": "1000", "status": "active"})

        assert update.changes() == {"status": PresaleStatus.ACTIVE}

    def test_presale_update_checks_dates_when_both_sent(self) -> None:
        with pytest.raises(ValidationError):
            PresaleUpdate.model_validate(
                {"startDate": "2025-03-01T00:00:00Z", "endDate": "2025-02-01T00:00:00Z"}
            )
