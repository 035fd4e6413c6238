"""AWS Lambda entry points for skill handlers."""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from .models.alexa import AlexaResponse
from .services.deferred import run_sync
from .services.pipeline import Handler, Step, pipe_handler
from .services.router import Routes, router_handler

logger = logging.getLogger(__name__)

LambdaCallback = Callable[..., Any]


def _serialize(response: AlexaResponse | None) -> dict[str, Any] | None:
    if response is None:
        return None
    return response.to_json_dict()


def lambda_handler(handler: Handler) -> Callable[[dict[str, Any], Any], dict[str, Any] | None]:
    """
    Adapt a handler to the Python Lambda convention ``(event, context)``.

    Deferred results are driven to completion before returning. Failures
    are raised so Lambda reports them as invocation errors.
    """

    def entry(event: dict[str, Any], context: Any) -> dict[str, Any] | None:
        return _serialize(run_sync(handler(event)))

    return entry


def callback_handler(handler: Handler) -> Callable[[dict[str, Any], Any, LambdaCallback], None]:
    """
    Adapt a handler to the callback convention ``(event, context, callback)``.

    ``callback(None, result)`` is called on success and ``callback(error)``
    on any failure, whether raised directly or by a deferred result.
    """

    def entry(event: dict[str, Any], context: Any, callback: LambdaCallback) -> None:
        try:
            result = run_sync(handler(event))
        except Exception as e:
            logger.error(f"Skill handler failed: {e}")
            callback(e)
            return
        callback(None, _serialize(result))

    return entry


def lambda_router(routes: Routes) -> Callable[[dict[str, Any], Any], dict[str, Any] | None]:
    """Lambda entry point for a single router."""
    return lambda_handler(router_handler(routes))


def lambda_pipe(steps: Iterable[Step]) -> Callable[[dict[str, Any], Any], dict[str, Any] | None]:
    """Lambda entry point for a composed pipeline."""
    return lambda_handler(pipe_handler(steps))
