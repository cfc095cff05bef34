from fastapi import APIRouter

from launchpad.api.launchpad_endpoints.participants import router as participants_router
from launchpad.api.launchpad_endpoints.presales import router as presales_router
from launchpad.api.launchpad_endpoints.stats import router as stats_router
from launchpad.api.launchpad_endpoints.tokens import router as tokens_router

router = APIRouter()

router.include_router(stats_router)
router.include_router(tokens_router)
router.include_router(presales_router)
router.include_router(participants_router)
