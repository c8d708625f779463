"""Speak endpoint: text-to-speech played into the meeting."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from src.agent.speech import SpeechDispatchService
from src.api.deps import get_speech_service
from src.api.models import SpeakRequest, SpeakResponse

router = APIRouter()


@router.post("/speak", response_model=SpeakResponse, response_model_exclude_none=True)
async def speak(
    service: Annotated[SpeechDispatchService, Depends(get_speech_service)],
    request: SpeakRequest | None = None,
) -> SpeakResponse:
    """Convert text to speech and play it through the registered bot.

    Body: ``{"text": "Hello, this is the AI agent."}``.

    - 200 ``success: true``: audio generated and delivered.
    - 200 ``success: false``: audio generated but Recall.ai rejected playback;
      ``error`` carries the reason and ``audioSize`` the generated size.
    - 400: missing text or no bot registered.
    - 500: speech synthesis failed.
    """
    result = await service.speak(request.text if request else None)
    if result.delivered:
        return SpeakResponse(
            success=True,
            message="Text converted to speech and sent to meeting",
            audio_size=result.audio_byte_length,
        )
    return SpeakResponse(
        success=False,
        message="Audio generated but failed to send to meeting",
        error=result.delivery_error,
        audio_size=result.audio_byte_length,
    )
