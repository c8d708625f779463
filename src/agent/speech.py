"""Speech dispatch: text -> synthesized audio -> playback in the meeting."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from src.agent.errors import DeliveryFailure, MissingInputError, TargetNotRegisteredError
from src.agent.registry import BotRegistry

logger = logging.getLogger(__name__)


class Synthesizer(Protocol):
    async def synthesize(self, text: str) -> bytes: ...


class AudioPlayback(Protocol):
    async def play_audio(self, bot_id: str, audio: bytes) -> None: ...


@dataclass(frozen=True)
class SpeechResult:
    """Outcome of a speak request.

    ``delivered`` is False when the audio was generated but the connectivity
    provider did not accept it; ``delivery_error`` then holds the reason.
    """

    audio_byte_length: int
    delivered: bool
    delivery_error: str | None = None


class SpeechDispatchService:
    def __init__(
        self,
        registry: BotRegistry,
        synthesizer: Synthesizer,
        playback: AudioPlayback,
    ) -> None:
        self._registry = registry
        self._synthesizer = synthesizer
        self._playback = playback

    async def speak(self, text: str | None) -> SpeechResult:
        """Synthesize ``text`` and play it through the registered bot.

        Raises:
            MissingInputError: ``text`` is empty or absent.
            TargetNotRegisteredError: No bot id has been registered.
            SynthesisFailure: Text-to-speech failed; nothing was delivered.
        """
        if not text:
            raise MissingInputError("text field is required")

        bot_id = self._registry.current()
        if bot_id is None:
            raise TargetNotRegisteredError("Bot ID not set. Use POST /set-bot-id first.")

        logger.info("Converting text to speech: %r", text)
        audio = await self._synthesizer.synthesize(text)
        logger.info("Generated %d bytes of audio", len(audio))

        try:
            await self._playback.play_audio(bot_id, audio)
        except DeliveryFailure as exc:
            logger.error("Audio playback failed for bot %s: %s", bot_id, exc.message)
            return SpeechResult(
                audio_byte_length=len(audio),
                delivered=False,
                delivery_error=exc.message,
            )

        logger.info("Audio sent to bot %s", bot_id)
        return SpeechResult(audio_byte_length=len(audio), delivered=True)
