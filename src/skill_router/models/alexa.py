"""Alexa Skill request/response models."""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import to_jsonable_python


class AlexaSlot(BaseModel):
    """Alexa slot value."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: Any = None


class AlexaIntent(BaseModel):
    """Alexa intent with slots."""

    model_config = ConfigDict(frozen=True)

    name: str
    slots: dict[str, AlexaSlot] | None = None


class _AlexaRequestBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    requestId: str | None = None
    timestamp: str | None = None
    locale: str = "en-US"


class LaunchRequest(_AlexaRequestBase):
    """Skill opened without an intent."""

    type: Literal["LaunchRequest"] = "LaunchRequest"


class IntentRequest(_AlexaRequestBase):
    """User invoked a named intent."""

    type: Literal["IntentRequest"] = "IntentRequest"
    intent: AlexaIntent


class SessionEndedRequest(_AlexaRequestBase):
    """Session closed by the user, an error or a timeout. Cannot be answered."""

    type: Literal["SessionEndedRequest"] = "SessionEndedRequest"
    reason: str | None = None


AlexaRequest = Annotated[
    LaunchRequest | IntentRequest | SessionEndedRequest,
    Field(discriminator="type"),
]


class AlexaApplication(BaseModel):
    """Skill application identity."""

    model_config = ConfigDict(frozen=True)

    applicationId: str


class AlexaUser(BaseModel):
    """Alexa user identity."""

    model_config = ConfigDict(frozen=True)

    userId: str
    accessToken: str | None = None


class AlexaSession(BaseModel):
    """Alexa session information."""

    model_config = ConfigDict(frozen=True)

    sessionId: str
    new: bool = True
    attributes: dict[str, Any] | None = None
    application: AlexaApplication | None = None
    user: AlexaUser | None = None


class AlexaRequestEnvelope(BaseModel):
    """Full Alexa request envelope."""

    model_config = ConfigDict(frozen=True)

    version: str = "1.0"
    session: AlexaSession | None = None
    request: AlexaRequest
    context: dict[str, Any] = {}

    def describe(self) -> str:
        """Short human-readable label, e.g. ``IntentRequest AMAZON.StopIntent``."""
        if isinstance(self.request, IntentRequest):
            return f"{self.request.type} {self.request.intent.name}"
        return self.request.type


class AlexaPlainTextSpeech(BaseModel):
    """Alexa plain text speech output."""

    type: Literal["PlainText"] = "PlainText"
    text: str


class AlexaSsmlSpeech(BaseModel):
    """Alexa SSML speech output."""

    type: Literal["SSML"] = "SSML"
    ssml: str


AlexaOutputSpeech = AlexaPlainTextSpeech | AlexaSsmlSpeech


class AlexaCardImage(BaseModel):
    """Image URLs for a Standard card."""

    smallImageUrl: str
    largeImageUrl: str


class AlexaCard(BaseModel):
    """Alexa card for visual display."""

    type: Literal["Simple", "Standard", "LinkAccount"] = "Simple"
    title: str | None = None
    content: str | None = None
    text: str | None = None
    image: AlexaCardImage | None = None


class AlexaReprompt(BaseModel):
    """Speech played when the user does not answer."""

    outputSpeech: AlexaOutputSpeech


class AlexaResponseBody(BaseModel):
    """Alexa response body."""

    outputSpeech: AlexaOutputSpeech | None = None
    card: AlexaCard | None = None
    reprompt: AlexaReprompt | None = None
    shouldEndSession: bool = False


class AlexaResponse(BaseModel):
    """Full Alexa response envelope."""

    version: str = "1.0"
    sessionAttributes: dict[str, Any] | None = None
    response: AlexaResponseBody

    def to_json_dict(self) -> dict[str, Any]:
        """Serialize for the wire, dropping unset optional fields.

        Session attributes are caller-owned and kept as-is, ``None`` values included.
        """
        data = self.model_dump(mode="json", exclude_none=True, exclude={"sessionAttributes"})
        if self.sessionAttributes is not None:
            data["sessionAttributes"] = to_jsonable_python(self.sessionAttributes)
        return data
