"""Shared fixtures: a fresh app per test and in-memory provider fakes."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.agent.errors import DeliveryFailure, SummarizationFailure, SynthesisFailure
from src.api.main import create_app
from src.config import Settings

FIXED_NOW = 1_700_000_000.0


class FakeSummarizer:
    def __init__(self, summary: str | None = "Team agreed to ship on Friday.") -> None:
        self.summary = summary
        self.calls: list[str] = []
        self.fail = False

    async def summarize(self, text: str) -> str | None:
        self.calls.append(text)
        if self.fail:
            raise SummarizationFailure("Failed to generate summary")
        return self.summary


class FakeSynthesizer:
    def __init__(self, audio: bytes = b"RIFF" + b"\x00" * 44) -> None:
        self.audio = audio
        self.calls: list[str] = []
        self.fail = False

    async def synthesize(self, text: str) -> bytes:
        self.calls.append(text)
        if self.fail:
            raise SynthesisFailure("503 Service Unavailable")
        return self.audio


class FakePlayback:
    def __init__(self) -> None:
        self.deliveries: list[tuple[str, bytes]] = []
        self.fail = False

    async def play_audio(self, bot_id: str, audio: bytes) -> None:
        if self.fail:
            raise DeliveryFailure("Request failed with status code 404")
        self.deliveries.append((bot_id, audio))


class FakeTranscriptionSession:
    """Echoes each audio frame back as a transcript fragment (decoded as UTF-8).

    ``results()`` ends once ``close()`` has been called.
    """

    def __init__(self) -> None:
        self.sent: list[bytes] = []
        self.closed = False
        self._fragments: asyncio.Queue[str | None] = asyncio.Queue()

    async def send(self, audio: bytes) -> None:
        self.sent.append(audio)
        await self._fragments.put(audio.decode())

    async def results(self) -> AsyncIterator[str]:
        while (fragment := await self._fragments.get()) is not None:
            yield fragment

    async def close(self) -> None:
        self.closed = True
        await self._fragments.put(None)


@pytest.fixture
def settings() -> Settings:
    return Settings(  # type: ignore[call-arg]
        _env_file=None,
        deepgram_api_key="test-key",
        recallai_api_key="test-key",
    )


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def fake_summarizer() -> FakeSummarizer:
    return FakeSummarizer()


@pytest.fixture
def fake_synthesizer() -> FakeSynthesizer:
    return FakeSynthesizer()


@pytest.fixture
def fake_playback() -> FakePlayback:
    return FakePlayback()


@pytest.fixture
def session_factory() -> type[FakeTranscriptionSession]:
    return FakeTranscriptionSession
