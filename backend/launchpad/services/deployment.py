"""
Mock token deployment.

No chain is touched: after a token is created, a background task marks it
deploying, waits a configurable delay and then records a random contract
address and deployment transaction hash. Pending tasks are cancelled when the
application shuts down.
"""

import asyncio
import logging
import secrets
from typing import Optional, Set

from launchpad.core.constants import CONTRACT_ADDRESS_HEX_LENGTH, TX_HASH_HEX_LENGTH
from launchpad.models.launchpad import Token, TokenStatus
from launchpad.services.store import LaunchpadStore

logger = logging.getLogger(__name__)


def mock_contract_address() -> str:
    return "0x" + secrets.token_hex(CONTRACT_ADDRESS_HEX_LENGTH // 2)


def mock_tx_hash() -> str:
    return "0x" + secrets.token_hex(TX_HASH_HEX_LENGTH // 2)


class DeploymentSimulator:
    """Schedules and tracks mock deployments for newly created tokens."""

    def __init__(self, store: LaunchpadStore, delay_seconds: float = 3.0):
        self._store = store
        self._delay = delay_seconds
        self._tasks: Set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def schedule(self, token_id: str) -> asyncio.Task:
        """Start a deployment in the background. Must be called from a running loop."""
        task = asyncio.create_task(self.deploy(token_id))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def deploy(self, token_id: str) -> Optional[Token]:
        token = self._store.update_token(token_id, {"status": TokenStatus.DEPLOYING})
        if token is None:
            logger.warning(f"deployment: token {token_id} not found, skipping")
            return None

        logger.info(f"deployment: deploying {token.symbol} ({token_id}) to {token.network}")
        try:
            await asyncio.sleep(self._delay)
            deployed = self._store.update_token(
                token_id,
                {
                    "status": TokenStatus.DEPLOYED,
                    "contract_address": mock_contract_address(),
                    "deployment_tx_hash": mock_tx_hash(),
                },
            )
        except asyncio.CancelledError:
            logger.info(f"deployment: cancelled for {token_id}")
            raise
        except Exception as e:
            logger.error(f"deployment: failed for {token_id}: {e}")
            return self._store.update_token(token_id, {"status": TokenStatus.FAILED})

        logger.info(f"deployment: {token_id} deployed at {deployed.contract_address}")
        return deployed

    async def shutdown(self) -> None:
        """Cancel deployments that have not finished yet."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
