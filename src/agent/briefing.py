"""Briefing service: summarize the recent transcript window on demand."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from src.transcript.window import TranscriptWindowStore

logger = logging.getLogger(__name__)

NO_DATA_SUMMARY = "No conversation data available yet."
FALLBACK_SUMMARY = "Unable to generate summary"


class Summarizer(Protocol):
    """Summarization backend.

    Returns the short summary, or None when the provider response carries
    no summary. Raises SummarizationFailure when the provider call fails.
    """

    async def summarize(self, text: str) -> str | None: ...


@dataclass(frozen=True)
class Briefing:
    """Result of a briefing request."""

    summary: str
    source_text_length: int
    entry_count: int


class BriefingService:
    """Evicts stale fragments, then summarizes whatever remains in the window."""

    def __init__(
        self,
        store: TranscriptWindowStore,
        summarizer: Summarizer,
        window_seconds: float,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._store = store
        self._summarizer = summarizer
        self._window_seconds = window_seconds
        self._clock = clock

    async def generate_briefing(self) -> Briefing:
        """Summarize the transcript fragments younger than the window duration.

        An empty window short-circuits with a fixed message and no provider
        call. Every call recomputes from the current window.

        Raises:
            SummarizationFailure: The summarization provider call failed.
        """
        self._store.evict_older_than(self._clock(), self._window_seconds)
        entries = self._store.read_all()
        if not entries:
            return Briefing(summary=NO_DATA_SUMMARY, source_text_length=0, entry_count=0)

        transcript_text = " ".join(entry.text for entry in entries)
        logger.info("Generating summary for %d characters of transcript", len(transcript_text))

        summary = await self._summarizer.summarize(transcript_text)
        return Briefing(
            summary=summary or FALLBACK_SUMMARY,
            source_text_length=len(transcript_text),
            entry_count=len(entries),
        )
