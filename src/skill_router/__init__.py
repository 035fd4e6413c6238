"""Middleware pipeline and intent router for Alexa skill backends."""

from .errors import MalformedResponseError, SkillRouterError, UnhandledEventError
from .entrypoints import callback_handler, lambda_handler, lambda_pipe, lambda_router
from .models import Card, CardImage, LinkAccount, SkillResponse, Speech
from .services import (
    Deferred,
    Routes,
    StandardIntents,
    build_response,
    build_router,
    do_nothing,
    join,
    map_result,
    pipe_handler,
    router_handler,
    to_handler,
    tracer,
)

__all__ = [
    "Routes",
    "StandardIntents",
    "build_router",
    "router_handler",
    "join",
    "to_handler",
    "pipe_handler",
    "do_nothing",
    "tracer",
    "Deferred",
    "map_result",
    "build_response",
    "SkillResponse",
    "Speech",
    "Card",
    "CardImage",
    "LinkAccount",
    "lambda_handler",
    "callback_handler",
    "lambda_router",
    "lambda_pipe",
    "SkillRouterError",
    "UnhandledEventError",
    "MalformedResponseError",
]
