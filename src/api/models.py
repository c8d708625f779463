"""Pydantic request/response schemas for the Meeting Agent API.

Field names are camelCase on the wire (``botId``, ``audioSize``) and
snake_case in Python.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SetBotIdRequest(CamelModel):
    """Request body for POST /set-bot-id. Presence is checked by the registry."""

    bot_id: str | None = None


class SetBotIdResponse(CamelModel):
    success: bool = True
    bot_id: str


class SpeakRequest(CamelModel):
    """Request body for POST /speak."""

    text: str | None = None


class SpeakResponse(CamelModel):
    """Response body for POST /speak.

    ``success`` is False (still HTTP 200) when the audio was generated but
    could not be delivered to the meeting; ``error`` then explains why.
    """

    success: bool
    message: str
    audio_size: int
    error: str | None = None


class BriefingResponse(CamelModel):
    """Response body for POST /briefing."""

    summary: str
    transcript_length: int
    buffer_size: int


class StatusResponse(CamelModel):
    """Discovery document returned by GET /."""

    status: str
    message: str
    endpoints: dict[str, str]
