from fastapi import APIRouter
from datetime import datetime, timezone

from launchpad.api.dependencies import DeployerDep, StoreDep

router = APIRouter(tags=["health"])


@router.get("/health", summary="Health check")
async def health_check():
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/ready", summary="Readiness check")
async def readiness_check(store: StoreDep, deployer: DeployerDep):
    """
    Readiness check - reports what the in-memory store currently holds.

    The store lives in process memory, so the service is ready as soon as the
    app has started.
    """
    return {
        "status": "ready",
        "store": store.counts(),
        "pending_deployments": deployer.pending,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
