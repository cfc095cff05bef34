"""
Demo data for a fresh store.

Seeds two deployed confidential tokens, an active presale for the first one
(with a few contributions, so its running totals come from real participant
records) and an upcoming presale for the second.
"""

import logging
from datetime import timedelta

from launchpad.models.launchpad import PresaleStatus, TokenStatus
from launchpad.schemas.launchpad import ParticipantCreate, PresaleCreate, TokenCreate
from launchpad.services.statistics import format_amount, to_decimal
from launchpad.services.store import LaunchpadStore, utcnow

logger = logging.getLogger(__name__)


def _address(digit: str) -> str:
    return "0x" + digit * 40


def _tx_hash(digit: str) -> str:
    return "0x" + digit * 64


DEMO_CONTRIBUTIONS = [
    # (wallet, ETH contributed)
    (_address("7"), "12.5"),
    (_address("8"), "8"),
    (_address("9"), "5"),
]


def seed_demo_data(store: LaunchpadStore) -> None:
    now = utcnow()

    privacy = store.create_token(
        TokenCreate(
            name="Privacy Coin",
            symbol="PRIV",
            total_supply="1000000",
            contract_address=_address("1"),
            deployment_tx_hash=_tx_hash("a"),
            creator_address=_address("2"),
            status=TokenStatus.DEPLOYED,
        )
    )
    secure = store.create_token(
        TokenCreate(
            name="Secure Token",
            symbol="SCRT",
            total_supply="500000",
            contract_address=_address("3"),
            deployment_tx_hash=_tx_hash("b"),
            creator_address=_address("4"),
            status=TokenStatus.DEPLOYED,
        )
    )

    active = store.create_presale(
        PresaleCreate(
            token_id=privacy.id,
            token_name=privacy.name,
            token_symbol=privacy.symbol,
            price_per_token="0.001",
            hard_cap="100",
            soft_cap="10",
            start_date=now - timedelta(days=2),
            end_date=now + timedelta(days=5),
            contract_address=_address("5"),
            owner_address=privacy.creator_address,
            status=PresaleStatus.ACTIVE,
        )
    )
    store.create_presale(
        PresaleCreate(
            token_id=secure.id,
            token_name=secure.name,
            token_symbol=secure.symbol,
            price_per_token="0.002",
            hard_cap="50",
            soft_cap="5",
            start_date=now + timedelta(days=1),
            end_date=now + timedelta(days=10),
            contract_address=_address("6"),
            owner_address=secure.creator_address,
        )
    )

    price = active.price_per_token
    for wallet, amount in DEMO_CONTRIBUTIONS:
        store.create_participant(
            ParticipantCreate(
                presale_id=active.id,
                wallet_address=wallet,
                contribution_amount=amount,
                token_amount=format_amount((to_decimal(amount) / to_decimal(price)).to_integral_value()),
            )
        )

    logger.info(f"Seeded demo data: {store.counts()}")
