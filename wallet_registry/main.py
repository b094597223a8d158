from __future__ import annotations

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wallet_registry import __version__
from wallet_registry.core.container import ApplicationContainer, get_container
from wallet_registry.core.logging import configure_logging
from wallet_registry.interfaces.http import create_api_router
from wallet_registry.interfaces.http.errors import register_exception_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.container.settings
    logger.info("Wallet backend running on port %s", settings.port)
    yield


def create_app(container: ApplicationContainer | None = None) -> FastAPI:
    """Build the application around ``container`` (the process-wide one by default)."""
    container = container or get_container()
    settings = container.settings
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        description="In-memory wallet registry: registration, admin credits and transfers",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(create_api_router())

    return app


app = create_app()
