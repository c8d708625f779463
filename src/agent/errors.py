"""Exception hierarchy for the meeting agent services.

Each error carries the HTTP status the API layer renders it with, so services
stay independent of FastAPI.
"""

from __future__ import annotations


class AgentError(Exception):
    """Base class for all meeting agent errors."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(AgentError):
    """A request field is malformed."""

    status_code = 400


class MissingInputError(InvalidInputError):
    """A required request field is absent or empty."""


class InvalidIdentifierFormatError(InvalidInputError):
    """A bot identifier contains characters outside ``[A-Za-z0-9_-]``."""


class TargetNotRegisteredError(AgentError):
    """No bot has been registered for audio playback."""

    status_code = 400


class UpstreamError(AgentError):
    """An external provider call failed."""


class SummarizationFailure(UpstreamError):
    pass


class SynthesisFailure(UpstreamError):
    pass


class TranscriptionFailure(UpstreamError):
    pass


class DeliveryFailure(AgentError):
    """Audio was generated but the connectivity provider rejected playback.

    Never rendered as an HTTP error: the speak endpoint reports it as a
    partial success.
    """
