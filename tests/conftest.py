"""Shared fixtures for skill router tests."""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from skill_router.main import create_app
from skill_router.models.skill import SkillResponse, Speech
from skill_router.services.router import Routes, StandardIntents, build_router

STATE_KEY = "_alexaTsState"


def launch_event(attributes: dict[str, Any] | None = None) -> dict[str, Any]:
    """Build a LaunchRequest envelope."""
    return _envelope({"type": "LaunchRequest", "requestId": "req-1"}, attributes)


def intent_event(
    name: str,
    slots: dict[str, Any] | None = None,
    attributes: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build an IntentRequest envelope. ``slots`` maps slot name to value."""
    intent: dict[str, Any] = {"name": name}
    if slots is not None:
        intent["slots"] = {key: {"name": key, "value": value} for key, value in slots.items()}
    return _envelope({"type": "IntentRequest", "requestId": "req-1", "intent": intent}, attributes)


def session_ended_event(attributes: dict[str, Any] | None = None) -> dict[str, Any]:
    """Build a SessionEndedRequest envelope."""
    return _envelope(
        {"type": "SessionEndedRequest", "requestId": "req-1", "reason": "USER_INITIATED"},
        attributes,
    )


def _envelope(request: dict[str, Any], attributes: dict[str, Any] | None) -> dict[str, Any]:
    envelope: dict[str, Any] = {"version": "1.0", "request": request}
    if attributes is not None:
        envelope["session"] = {"sessionId": "session-1", "new": False, "attributes": attributes}
    return envelope


def _capture_task(state: dict[str, int], slots: dict[str, Any]) -> SkillResponse:
    task_text = slots.get("taskText")
    if not task_text:
        return SkillResponse(
            say=Speech(text="I didn't catch the task. Please say: Add, followed by what you want to do."),
        )

    return SkillResponse(
        say=Speech(text=f"Added: {task_text}."),
        new_state={"captured": state["captured"] + 1},
        card={"Title": "Task Added", "Content": task_text},
    )


async def _help(state: dict[str, int], slots: dict[str, Any]) -> dict[str, Any]:
    return {
        "Say": {"Text": "You can say things like: Add buy milk tomorrow."},
        "Reprompt": {"Text": "What would you like to add?"},
    }


@pytest.fixture
def routes() -> Routes:
    """Task capture skill routes."""
    return Routes(
        initial_state={"captured": 0},
        launch=lambda state, slots: {"Say": {"Text": "Welcome to Task Capture."}},
        standard=StandardIntents(
            help=_help,
            stop=lambda state, slots: {"Say": {"Text": "Goodbye!"}, "EndSession": True},
        ),
        custom=[("CaptureTaskIntent", _capture_task)],
    )


@pytest.fixture
def client(routes: Routes) -> TestClient:
    """Test client for the webhook app."""
    return TestClient(create_app([build_router(routes)]))
