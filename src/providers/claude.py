"""Claude-powered transcript summaries (alternative summarization backend)."""

from __future__ import annotations

import asyncio
import logging

from anthropic import Anthropic, APIError
from anthropic.types import TextBlock

from src.agent.errors import SummarizationFailure

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a meeting assistant. Summarize the live meeting transcript excerpt "
    "you are given in two or three sentences so someone joining late can catch up.\n\n"
    "Rules:\n"
    "- Only use what is in the transcript.\n"
    "- Plain prose, no headings or bullet points."
)


class ClaudeSummarizer:
    def __init__(self, api_key: str, model: str, client: Anthropic | None = None) -> None:
        self._client = client or Anthropic(api_key=api_key)
        self._model = model

    async def summarize(self, text: str) -> str | None:
        # The SDK client is synchronous; keep it off the event loop.
        try:
            return await asyncio.to_thread(self._summarize_sync, text)
        except APIError as exc:
            logger.error("Claude summarization error: %s", exc)
            raise SummarizationFailure("Failed to generate summary") from exc

    def _summarize_sync(self, text: str) -> str | None:
        response = self._client.messages.create(
            model=self._model,
            max_tokens=300,
            system=SYSTEM_PROMPT,
            messages=[{"role": "user", "content": f"Transcript:\n\n{text}"}],
        )
        if not response.content:
            return None
        block = response.content[0]
        if not isinstance(block, TextBlock):
            return None
        return block.text.strip() or None
