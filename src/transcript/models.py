"""Data models for the rolling transcript window."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TranscriptEntry:
    """A single final transcript fragment and the time it was received."""

    text: str
    timestamp: float  # epoch seconds
