"""FastAPI dependencies resolving the services owned by the running app."""

from __future__ import annotations

from starlette.requests import HTTPConnection

from src.agent.briefing import BriefingService
from src.agent.registry import BotRegistry
from src.agent.relay import IngestionRelay
from src.agent.speech import SpeechDispatchService


# HTTPConnection works for both HTTP requests and WebSocket routes.
def get_registry(conn: HTTPConnection) -> BotRegistry:
    return conn.app.state.registry  # type: ignore[no-any-return]


def get_briefing_service(conn: HTTPConnection) -> BriefingService:
    return conn.app.state.briefing  # type: ignore[no-any-return]


def get_speech_service(conn: HTTPConnection) -> SpeechDispatchService:
    return conn.app.state.speech  # type: ignore[no-any-return]


def get_relay(conn: HTTPConnection) -> IngestionRelay:
    return conn.app.state.relay  # type: ignore[no-any-return]
