"""FastAPI application factory with Lambda handler."""

import logging
from collections.abc import Iterable
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from mangum import Mangum

from .config import Settings, settings
from .routes import alexa, health
from .services.pipeline import Step, pipe_handler, tracer

# Configure logging
logging.basicConfig(
    level=logging.INFO if not settings.debug else logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(steps: Iterable[Step], config: Settings = settings) -> FastAPI:
    """
    Create the webhook application for a skill pipeline.

    Args:
        steps: Pipeline steps, typically ending with a router
        config: Settings to use (defaults to the environment)

    Returns:
        FastAPI app serving the health check and the Alexa webhook
    """
    steps = list(steps)
    if config.trace_requests:
        steps.insert(0, tracer())

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler for startup/shutdown events."""
        logger.info(f"Starting {config.service_name} in {config.environment} mode")
        yield
        logger.info(f"Shutting down {config.service_name}")

    app = FastAPI(
        title="Skill Router",
        description="Middleware pipeline and intent router for Alexa skills",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if config.debug else None,
        redoc_url="/redoc" if config.debug else None,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(health.build_health_router(config))
    app.include_router(alexa.build_alexa_router(pipe_handler(steps), path=config.webhook_path))

    return app


def create_handler(steps: Iterable[Step], config: Settings = settings) -> Mangum:
    """Lambda handler serving the webhook app through API Gateway."""
    return Mangum(create_app(steps, config), lifespan="off")
