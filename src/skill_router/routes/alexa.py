"""Alexa Skill webhook endpoint."""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request
from pydantic import ValidationError

from ..errors import UnhandledEventError
from ..services.deferred import resolve
from ..services.pipeline import Handler, parse_request

logger = logging.getLogger(__name__)


def build_alexa_router(handler: Handler, path: str = "/alexa") -> APIRouter:
    """
    Build the webhook router for a skill handler.

    Alexa posts the request envelope to ``path``; the handler's response
    envelope is returned as JSON. SessionEndedRequest answers with an
    empty object since Alexa ignores its response.
    """
    router = APIRouter(tags=["alexa"])

    @router.post(path)
    async def alexa_webhook(request: Request) -> dict[str, Any]:
        """Handle Alexa Skill requests."""
        body = await request.json()

        try:
            envelope = parse_request(body)
        except ValidationError as e:
            logger.warning(f"Invalid Alexa request: {e.error_count()} validation errors")
            raise HTTPException(
                status_code=422,
                detail=e.errors(include_url=False, include_context=False),
            )

        logger.info(f"Alexa request received: {envelope.describe()}")

        try:
            response = await resolve(handler(envelope))
        except UnhandledEventError as e:
            logger.error(f"Unhandled Alexa request: {e}")
            raise HTTPException(status_code=400, detail=str(e))

        if response is None:
            return {}
        return response.to_json_dict()

    return router
