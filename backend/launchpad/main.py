import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from launchpad.api import health, launchpad_router
from launchpad.core.config import Settings, settings as default_settings
from launchpad.schemas.launchpad import ErrorResponse
from launchpad.services.demo_data import seed_demo_data
from launchpad.services.deployment import DeploymentSimulator
from launchpad.services.store import LaunchpadStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup/shutdown events."""
    logger.info(f"{app.title} started with store {app.state.store.counts()}")
    yield
    # Shutdown - cancel mock deployments still in flight
    await app.state.deployer.shutdown()


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed input as 400, before it ever reaches the store."""
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
    logger.info(f"Rejected {request.method} {request.url.path}: {errors}")
    body = ErrorResponse(error="Invalid request", detail=errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[LaunchpadStore] = None,
) -> FastAPI:
    """
    Build the API around an explicit store instance.

    Tests pass their own settings and store; the module-level ``app`` uses
    the environment and a fresh (optionally seeded) store.
    """
    settings = settings or default_settings
    configure_logging(settings)

    if store is None:
        store = LaunchpadStore()
        if settings.seed_demo_data:
            seed_demo_data(store)

    app = FastAPI(
        title=settings.app_name,
        description="""
    Confidential Launchpad API

    This API provides endpoints for:
    - Creating confidential tokens (with a mock deployment)
    - Creating presales for those tokens
    - Contributing to presales and listing participants
    - Dashboard statistics derived from the current store

    All data lives in memory for the lifetime of the process.
    """,
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.settings = settings
    app.state.store = store
    app.state.deployer = DeploymentSimulator(store, delay_seconds=settings.deployment_delay_seconds)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Include routers
    app.include_router(health.router)
    app.include_router(launchpad_router.router, prefix=settings.api_prefix)

    @app.get("/", tags=["root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": settings.app_name,
            "version": "1.0.0",
            "docs": "/docs",
            "health": "/health",
            "api": settings.api_prefix,
        }

    return app


app = create_app()
