"""
FastAPI Application Factory.
Creates and configures the FastAPI application with the RPC router, middleware, and DI.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from src.application.services import DefaultDataService
from src.config.logging_config import correlation_id_var
from src.config.settings import get_config
from src.presentation.api import rpc_router
from src.presentation.api.rpc import INVALID_PARAMS
from src.setup.ioc.container import create_container

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", "NO Correlation ID")

        # Set in contextvars (propagates to async tasks and logging)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id

        return response


def create_fastapi_app(
    container: Optional[AsyncContainer] = None, seed_default_data: Optional[bool] = None
) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: DI container; defaults to the Prisma-backed container
        seed_default_data: create the default profile/market on startup;
            defaults to SEED_DEFAULT_DATA of the APP_ENV config
            (off under "testing")

    Returns:
        FastAPI application instance
    """
    if container is None:
        container = create_container()
    if seed_default_data is None:
        seed_default_data = get_config().SEED_DEFAULT_DATA

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        - Startup: seed default data (container already created)
        - Shutdown: close DI container (disconnects Prisma)
        """
        if seed_default_data:
            async with container() as request_container:
                seeder = await request_container.get(DefaultDataService)
                profile, market = await seeder.seed_default_data()
                logger.info(f"Default profile {profile.id}, default market {market.id}")
        logger.info("FastAPI application started. DI container initialized.")
        yield
        await container.close()
        logger.info("FastAPI application shutdown. DI container closed.")

    app = FastAPI(
        title="Marketplace RPC API",
        description="JSON-RPC backend for marketplace templates, markets and proposals",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container, app)

    app.add_middleware(CorrelationIdMiddleware)

    # Malformed JSON-RPC envelopes
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        logger.warning(f"[VALIDATION ERROR] {errors}")
        return JSONResponse(
            status_code=400,
            content={
                "jsonrpc": "2.0",
                "id": None,
                "error": {
                    "code": INVALID_PARAMS,
                    "message": "Invalid request",
                    "data": jsonable_encoder(errors),
                },
            },
        )

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    app.include_router(rpc_router)

    return app
