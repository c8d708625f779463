"""Rolling, time-windowed store of transcript fragments."""

from __future__ import annotations

import threading

from src.transcript.models import TranscriptEntry


class TranscriptWindowStore:
    """Ordered transcript fragments with lazy age-based eviction.

    Entries are kept in insertion order, which is chronological because each
    transcription session yields its fragments in order. Nothing is evicted
    on append; callers evict explicitly before reading for a summary, so the
    window may briefly hold entries older than the configured duration.

    All operations take the same lock so a read never observes a
    half-finished eviction.
    """

    def __init__(self) -> None:
        self._entries: list[TranscriptEntry] = []
        self._lock = threading.Lock()

    def append(self, text: str, timestamp: float) -> TranscriptEntry:
        """Add a fragment at the end of the window.

        Raises:
            ValueError: If ``text`` is empty.
        """
        if not text:
            raise ValueError("Transcript text must be non-empty")
        entry = TranscriptEntry(text=text, timestamp=timestamp)
        with self._lock:
            self._entries.append(entry)
        return entry

    def evict_older_than(self, now: float, window_seconds: float) -> int:
        """Drop every entry whose age at ``now`` is ``window_seconds`` or more.

        Returns:
            The number of entries removed.
        """
        with self._lock:
            before = len(self._entries)
            self._entries = [e for e in self._entries if now - e.timestamp < window_seconds]
            return before - len(self._entries)

    def read_all(self) -> tuple[TranscriptEntry, ...]:
        """Return a snapshot of the retained entries, oldest first."""
        with self._lock:
            return tuple(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
