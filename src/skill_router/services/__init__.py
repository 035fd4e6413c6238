"""Pipeline runtime, intent router and response assembly."""

from .deferred import Deferred, map_result, resolve, run_sync
from .pipeline import do_nothing, join, pipe_handler, to_handler, tracer
from .responses import build_response
from .router import Routes, StandardIntents, build_router, router_handler

__all__ = [
    "Deferred",
    "map_result",
    "resolve",
    "run_sync",
    "join",
    "to_handler",
    "pipe_handler",
    "do_nothing",
    "tracer",
    "build_response",
    "Routes",
    "StandardIntents",
    "build_router",
    "router_handler",
]
