"""Alexa response envelope assembly."""

from collections.abc import Mapping
from typing import Any

from ..config import settings
from ..errors import MalformedResponseError
from ..models.alexa import (
    AlexaCard,
    AlexaCardImage,
    AlexaOutputSpeech,
    AlexaPlainTextSpeech,
    AlexaReprompt,
    AlexaResponse,
    AlexaResponseBody,
    AlexaSsmlSpeech,
)
from ..models.skill import Card, LinkAccount, SkillResponse, Speech

# Marks "no previous state"; None is a valid state.
MISSING: Any = object()


def make_speech(speech: Speech) -> AlexaOutputSpeech:
    """Convert speech to Alexa output speech, preferring SSML over text."""
    if speech.ssml is not None:
        return AlexaSsmlSpeech(ssml=speech.ssml)
    if speech.text is not None:
        return AlexaPlainTextSpeech(text=speech.text)
    raise MalformedResponseError("Speech contains neither text nor SSML.")


def make_card(card: Card | LinkAccount) -> AlexaCard:
    """Convert a card description to an Alexa card."""
    if isinstance(card, LinkAccount):
        return AlexaCard(type="LinkAccount")

    if card.image is not None:
        return AlexaCard(
            type="Standard",
            title=card.title,
            text=card.content,
            image=AlexaCardImage(
                smallImageUrl=card.image.small_url,
                largeImageUrl=card.image.large_url,
            ),
        )

    return AlexaCard(type="Simple", title=card.title, content=card.content)


def make_response(result: SkillResponse) -> AlexaResponseBody:
    """Build the Alexa response body for a handler result."""
    body = AlexaResponseBody(
        outputSpeech=make_speech(result.say),
        shouldEndSession=result.end_session,
    )

    if result.reprompt is not None:
        body.reprompt = AlexaReprompt(outputSpeech=make_speech(result.reprompt))

    if result.card is not None:
        body.card = make_card(result.card)

    return body


def coerce_result(result: SkillResponse | Mapping[str, Any]) -> SkillResponse:
    """Accept a handler result as a model or a plain mapping."""
    if isinstance(result, SkillResponse):
        return result
    return SkillResponse.model_validate(result)


def build_response(
    result: SkillResponse | Mapping[str, Any],
    previous_state: Any = MISSING,
    state_key: str | None = None,
) -> AlexaResponse:
    """
    Build the full Alexa response envelope for a handler result.

    Session state is always persisted when known: the handler's replacement
    state if it supplied one, otherwise ``previous_state``.

    Args:
        result: Handler result, as a SkillResponse or mapping
        previous_state: State the handler was invoked with
        state_key: Session attribute key holding the state

    Returns:
        AlexaResponse envelope
    """
    result = coerce_result(result)
    state_key = state_key or settings.session_state_key

    session_attributes: dict[str, Any] = {}
    if result.has_new_state:
        session_attributes[state_key] = result.new_state
    elif previous_state is not MISSING:
        session_attributes[state_key] = previous_state

    return AlexaResponse(
        version=settings.response_version,
        sessionAttributes=session_attributes,
        response=make_response(result),
    )
