"""High-level response descriptions returned by intent handlers.

Handlers may build these models directly or return plain dicts that use
either the field names (``say``, ``new_state``) or their PascalCase aliases
(``Say``, ``NewState``).
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class Speech(BaseModel):
    """Text or SSML to speak. SSML wins when both are set."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    text: str | None = Field(None, alias="Text")
    ssml: str | None = Field(None, alias="SSML")


class CardImage(BaseModel):
    """Card image URLs."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    small_url: str = Field(..., alias="SmallUrl", description="720w x 480h")
    large_url: str = Field(..., alias="LargeUrl", description="1200w x 800h")


class Card(BaseModel):
    """Card shown in the Alexa app. Rendered as Standard when an image is set."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    type: Literal["Card"] = Field("Card", alias="Type")
    title: str = Field(..., alias="Title")
    content: str = Field(..., alias="Content")
    image: CardImage | None = Field(None, alias="Image")


class LinkAccount(BaseModel):
    """Card prompting the user to link their account."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    type: Literal["LinkAccount"] = Field("LinkAccount", alias="Type")


class SkillResponse(BaseModel):
    """Response description produced by a launch or intent handler."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    say: Speech = Field(..., alias="Say")
    new_state: Any = Field(None, alias="NewState", description="Replacement session state")
    reprompt: Speech | None = Field(None, alias="Reprompt")
    card: Card | LinkAccount | None = Field(None, alias="Card")
    end_session: bool = Field(False, alias="EndSession")

    @property
    def has_new_state(self) -> bool:
        """Whether the handler supplied a replacement state (``None`` counts)."""
        return "new_state" in self.model_fields_set
