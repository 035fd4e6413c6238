"""Pydantic models for request/response schemas."""

from .alexa import (
    AlexaIntent,
    AlexaRequestEnvelope,
    AlexaResponse,
    AlexaSession,
    AlexaSlot,
    IntentRequest,
    LaunchRequest,
    SessionEndedRequest,
)
from .skill import Card, CardImage, LinkAccount, SkillResponse, Speech

__all__ = [
    "AlexaRequestEnvelope",
    "AlexaResponse",
    "AlexaSession",
    "AlexaIntent",
    "AlexaSlot",
    "LaunchRequest",
    "IntentRequest",
    "SessionEndedRequest",
    "SkillResponse",
    "Speech",
    "Card",
    "CardImage",
    "LinkAccount",
]
