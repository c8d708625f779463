"""Provider configuration: summarizer enum and fixed request options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SummarizationProvider(str, Enum):
    """Available backends for briefing summaries."""

    DEEPGRAM = "deepgram"
    ANTHROPIC = "anthropic"


@dataclass(frozen=True)
class LiveTranscriptionOptions:
    """Options sent when opening a live transcription session.

    Interim results stay off so only final fragments reach the transcript window.
    """

    model: str = "nova-2"
    language: str = "en-US"
    smart_format: bool = True
    punctuate: bool = True
    interim_results: bool = False

    def as_query_params(self) -> dict[str, str]:
        return {
            "model": self.model,
            "language": self.language,
            "smart_format": str(self.smart_format).lower(),
            "punctuate": str(self.punctuate).lower(),
            "interim_results": str(self.interim_results).lower(),
        }


@dataclass(frozen=True)
class SpeechOptions:
    """Voice and audio format used for text-to-speech."""

    model: str = "aura-asteria-en"
    encoding: str = "linear16"
    container: str = "wav"
    content_type: str = "audio/wav"


@dataclass(frozen=True)
class SummaryOptions:
    """Options for the Deepgram text-intelligence summary request."""

    summarize: str = "v2"
    language: str = "en"
