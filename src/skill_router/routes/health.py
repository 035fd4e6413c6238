"""Health check endpoint."""

from fastapi import APIRouter

from ..config import Settings


def build_health_router(config: Settings) -> APIRouter:
    """Build the health router reporting the app's routing configuration."""
    router = APIRouter(tags=["health"])

    @router.get("/health")
    async def health_check() -> dict[str, str | bool]:
        """Return service health and where the skill webhook listens."""
        return {
            "status": "healthy",
            "service": config.service_name,
            "environment": config.environment,
            "webhookPath": config.webhook_path,
            "stateKey": config.session_state_key,
            "tracing": config.trace_requests,
        }

    return router
