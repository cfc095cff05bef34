from fastapi import APIRouter

from launchpad.api.dependencies import StoreDep
from launchpad.models.launchpad import DashboardStats

router = APIRouter(tags=["stats"])


@router.get(
    "/stats",
    response_model=DashboardStats,
    summary="Get dashboard statistics",
)
async def get_dashboard_stats(store: StoreDep) -> DashboardStats:
    """Counts and total value locked, derived from the store at call time."""
    return store.get_dashboard_stats()
