"""Middleware pipeline runtime.

A step is a callable ``(request, call_next) -> response``. ``call_next``
runs the rest of the pipeline for a request; a step may return its own
response instead and short-circuit everything after it.

    handler = pipe_handler([tracer(), build_router(routes), fallback_step])

``call_next`` returns whatever the rest of the chain produces: an
immediate response when every later step is synchronous, a
:class:`~.deferred.Deferred` otherwise. Async steps must therefore await
it through :func:`~.deferred.resolve`, never directly:

    async def step(request, call_next):
        response = await resolve(call_next(request))
        ...
"""

import json
import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any, Protocol

from pydantic import BaseModel

from ..errors import UnhandledEventError
from ..models.alexa import AlexaRequestEnvelope, AlexaResponse
from .deferred import ValueOrFuture, map_result

logger = logging.getLogger(__name__)

StepResult = ValueOrFuture[AlexaResponse | None]

CallNext = Callable[[AlexaRequestEnvelope], StepResult]
Handler = Callable[[AlexaRequestEnvelope | Mapping[str, Any]], StepResult]
TraceLogger = Callable[[str, Any], None]


class Step(Protocol):
    """A composable unit of request processing.

    Returns a response, ``None``, or a Deferred of either. Async
    implementations use ``await resolve(call_next(request))``.
    """

    def __call__(
        self, request: AlexaRequestEnvelope, call_next: CallNext | None = None
    ) -> StepResult: ...


class Continuation:
    """The rest of a pipeline, bound to its remaining steps."""

    __slots__ = ("step", "rest")

    def __init__(self, step: Step, rest: CallNext):
        self.step = step
        self.rest = rest

    def __call__(self, request: AlexaRequestEnvelope) -> StepResult:
        return self.step(request, self.rest)


def _no_response(request: AlexaRequestEnvelope) -> None:
    return None


def join(steps: Iterable[Step]) -> Step:
    """
    Compose steps into a single step.

    Steps run in order; each receives a continuation for the steps after
    it. After the last step, the outer ``call_next`` is invoked if given,
    otherwise the pipeline produces no response.
    """
    steps = tuple(steps)

    def joined(request: AlexaRequestEnvelope, call_next: CallNext | None = None) -> StepResult:
        chain: CallNext = call_next if call_next is not None else _no_response
        for step in reversed(steps):
            chain = Continuation(step, chain)
        return chain(request)

    return joined


def parse_request(event: AlexaRequestEnvelope | Mapping[str, Any]) -> AlexaRequestEnvelope:
    """Validate a raw event into a request envelope."""
    if isinstance(event, AlexaRequestEnvelope):
        return event
    return AlexaRequestEnvelope.model_validate(event)


def _unhandled(request: AlexaRequestEnvelope) -> StepResult:
    raise UnhandledEventError(request.describe())


def to_handler(pipe: Step) -> Handler:
    """Wrap a step as a handler that fails when no step answers."""

    def handler(event: AlexaRequestEnvelope | Mapping[str, Any]) -> StepResult:
        return pipe(parse_request(event), _unhandled)

    return handler


def pipe_handler(steps: Iterable[Step]) -> Handler:
    """Compose steps and wrap them as a handler."""
    return to_handler(join(steps))


def do_nothing() -> Step:
    """Step that always delegates to the rest of the pipeline."""

    def step(request: AlexaRequestEnvelope, call_next: CallNext | None = None) -> StepResult:
        return call_next(request) if call_next is not None else None

    return step


def _to_jsonable(obj: Any) -> Any:
    if isinstance(obj, AlexaResponse):
        return obj.to_json_dict()
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json", exclude_none=True)
    return obj


def _log_event(message: str, obj: Any) -> None:
    logger.info(f"{message} {json.dumps(_to_jsonable(obj), default=str)}")


def tracer(log: TraceLogger | None = None) -> Step:
    """
    Step that logs each request and its eventual response.

    Args:
        log: Callable taking a message and the logged object. Defaults to
            one JSON line per event on this module's logger.

    Returns:
        Step passing requests and responses through unchanged
    """
    log = log or _log_event

    def step(request: AlexaRequestEnvelope, call_next: CallNext | None = None) -> StepResult:
        log("Request:", request)
        result = call_next(request) if call_next is not None else None

        def log_response(response: AlexaResponse | None) -> AlexaResponse | None:
            log("Response:", response)
            return response

        return map_result(result, log_response)

    return step
