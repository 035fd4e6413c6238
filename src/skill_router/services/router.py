"""Intent routing with session state threading."""

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field, fields
from typing import Any, Generic, TypeVar

from ..config import settings
from ..models.alexa import (
    AlexaRequestEnvelope,
    IntentRequest,
    LaunchRequest,
    SessionEndedRequest,
)
from ..models.skill import SkillResponse
from .deferred import ValueOrFuture, map_result
from .pipeline import CallNext, Handler, Step, StepResult, to_handler
from .responses import MISSING, build_response

logger = logging.getLogger(__name__)

State = TypeVar("State")

Slots = dict[str, Any]
IntentHandler = Callable[[Any, Slots], ValueOrFuture[SkillResponse | Mapping[str, Any]]]
SessionEndedHandler = Callable[[], ValueOrFuture[None]]


@dataclass(frozen=True)
class StandardIntents:
    """Handlers for Alexa's built-in intents."""

    cancel: IntentHandler | None = None
    fallback: IntentHandler | None = None
    help: IntentHandler | None = None
    loop_off: IntentHandler | None = None
    loop_on: IntentHandler | None = None
    next: IntentHandler | None = None
    no: IntentHandler | None = None
    pause: IntentHandler | None = None
    previous: IntentHandler | None = None
    repeat: IntentHandler | None = None
    resume: IntentHandler | None = None
    shuffle_off: IntentHandler | None = None
    shuffle_on: IntentHandler | None = None
    start_over: IntentHandler | None = None
    stop: IntentHandler | None = None
    yes: IntentHandler | None = None

    def to_table(self) -> dict[str, IntentHandler]:
        """Map configured handlers by their built-in intent name."""
        table = {}
        for f in fields(self):
            handler = getattr(self, f.name)
            if handler is not None:
                table[standard_intent_name(f.name)] = handler
        return table


def standard_intent_name(field_name: str) -> str:
    """``start_over`` -> ``AMAZON.StartOverIntent``."""
    pascal = "".join(part.capitalize() for part in field_name.split("_"))
    return f"AMAZON.{pascal}Intent"


STANDARD_INTENT_NAMES = frozenset(standard_intent_name(f.name) for f in fields(StandardIntents))


@dataclass
class Routes(Generic[State]):
    """Router configuration."""

    initial_state: State
    launch: IntentHandler | None = None
    session_ended: SessionEndedHandler | None = None
    standard: StandardIntents = field(default_factory=StandardIntents)
    custom: Iterable[tuple[str, IntentHandler]] = ()
    state_key: str | None = None  # Defaults to settings.session_state_key


def _custom_table(
    custom: Iterable[tuple[str, IntentHandler]],
    standard: Mapping[str, IntentHandler],
) -> dict[str, IntentHandler]:
    """Build the custom intent table. Later duplicates replace earlier ones."""
    table: dict[str, IntentHandler] = {}
    for name, handler in custom:
        if name in STANDARD_INTENT_NAMES:
            if name in standard:
                logger.warning(f"Custom handler for {name} is shadowed by the built-in handler")
            else:
                logger.debug(f"Built-in intent {name} routed through a custom handler")
        if name in table:
            logger.warning(f"Duplicate custom intent handler for {name}, using the last one")
        table[name] = handler
    return table


def get_state(request: AlexaRequestEnvelope, state_key: str, default: Any = MISSING) -> Any:
    """Read persisted state from the session attributes, or return ``default``."""
    session = request.session
    if session is not None and session.attributes and state_key in session.attributes:
        return session.attributes[state_key]
    return default


def slots_to_map(request: IntentRequest) -> Slots:
    """Map slot names to their values. Values are not validated."""
    slots = request.intent.slots or {}
    return {slot.name: slot.value for slot in slots.values()}


def build_router(routes: Routes[State]) -> Step:
    """
    Build a pipeline step that dispatches requests to handlers.

    Launch and intent handlers are called with the current session state
    and slot map; their result becomes the response, carrying forward
    either the handler's new state or the current one. Intents are looked
    up among the built-in handlers first, then the custom ones. Requests
    without a matching handler are passed unchanged to the next step.

    Args:
        routes: Handlers and initial state

    Returns:
        Pipeline step
    """
    standard_intents = routes.standard.to_table()
    custom_intents = _custom_table(routes.custom, standard_intents)
    state_key = routes.state_key or settings.session_state_key

    def respond(handler: IntentHandler, state: Any, slots: Slots) -> StepResult:
        return map_result(
            handler(state, slots),
            lambda output: build_response(output, state, state_key),
        )

    def router(request: AlexaRequestEnvelope, call_next: CallNext | None = None) -> StepResult:
        state = get_state(request, state_key, routes.initial_state)
        event = request.request

        if isinstance(event, LaunchRequest):
            if routes.launch is not None:
                logger.info("Alexa request type: LaunchRequest")
                return respond(routes.launch, state, {})

        elif isinstance(event, SessionEndedRequest):
            # Alexa does not accept a response to SessionEndedRequest
            if routes.session_ended is not None:
                logger.info(f"Alexa session ended: {event.reason}")
                return map_result(routes.session_ended(), lambda _: None)

        elif isinstance(event, IntentRequest):
            intent_name = event.intent.name
            slots = slots_to_map(event)

            handler = standard_intents.get(intent_name)
            if handler is None:
                handler = custom_intents.get(intent_name)

            if handler is not None:
                logger.info(f"Alexa intent: {intent_name}")
                return respond(handler, state, slots)

        logger.debug(f"No route for {request.describe()}, passing on")
        return call_next(request) if call_next is not None else None

    return router


def router_handler(routes: Routes[State]) -> Handler:
    """Build a router and wrap it as a handler."""
    return to_handler(build_router(routes))
