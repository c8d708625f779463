"""Deepgram wrappers: live transcription, text summarization, and Aura text-to-speech."""

from __future__ import annotations

import asyncio
import contextlib
import json
import logging
from collections.abc import AsyncIterator
from typing import Any
from urllib.parse import urlencode

import httpx
from websockets.asyncio.client import ClientConnection, connect
from websockets.exceptions import ConnectionClosed, ConnectionClosedError, WebSocketException

from src.agent.errors import SummarizationFailure, SynthesisFailure, TranscriptionFailure
from src.pipeline_config import LiveTranscriptionOptions, SpeechOptions, SummaryOptions

logger = logging.getLogger(__name__)


def parse_transcript_message(raw: str) -> str | None:
    """Extract the transcript from a live ``Results`` message.

    Metadata, utterance-end and interim messages yield None.
    """
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Ignoring non-JSON message from Deepgram: %.100s", raw)
        return None

    if payload.get("type") != "Results" or not payload.get("is_final", True):
        return None
    alternatives = (payload.get("channel") or {}).get("alternatives") or []
    if not alternatives:
        return None
    transcript = alternatives[0].get("transcript")
    return transcript if isinstance(transcript, str) else None


def extract_summary(payload: dict[str, Any]) -> str | None:
    """Pull the short summary out of a Deepgram response body.

    Pre-recorded ``listen`` responses carry ``summary.short``; ``read``
    responses carry ``summary.text``.
    """
    summary = (payload.get("results") or {}).get("summary") or {}
    return summary.get("short") or summary.get("text") or None


class DeepgramLiveSession:
    """A live transcription session over Deepgram's streaming WebSocket API."""

    def __init__(self, connection: ClientConnection, close_timeout: float = 5.0) -> None:
        self._connection = connection
        self._close_timeout = close_timeout

    @classmethod
    async def open(
        cls,
        api_key: str,
        url: str,
        options: LiveTranscriptionOptions | None = None,
    ) -> DeepgramLiveSession:
        options = options or LiveTranscriptionOptions()
        uri = f"{url}?{urlencode(options.as_query_params())}"
        try:
            connection = await connect(
                uri,
                additional_headers={"Authorization": f"Token {api_key}"},
            )
        except (OSError, WebSocketException) as exc:
            raise TranscriptionFailure(f"Could not open live transcription session: {exc}") from exc
        logger.info("Deepgram live session opened (model=%s)", options.model)
        return cls(connection)

    async def send(self, audio: bytes) -> None:
        try:
            await self._connection.send(audio)
        except ConnectionClosed as exc:
            raise TranscriptionFailure(f"Live transcription session closed: {exc}") from exc

    async def results(self) -> AsyncIterator[str]:
        try:
            async for message in self._connection:
                if isinstance(message, bytes):
                    continue
                transcript = parse_transcript_message(message)
                if transcript is not None:
                    yield transcript
        except ConnectionClosedError as exc:
            raise TranscriptionFailure(f"Live transcription session failed: {exc}") from exc

    async def close(self) -> None:
        """Ask Deepgram to flush and finish the stream.

        Deepgram sends its remaining final results and then closes the socket,
        so ``results()`` keeps yielding until that happens. The socket is closed
        from this side only if the server has not closed it within
        ``close_timeout`` seconds.
        """
        with contextlib.suppress(ConnectionClosed):
            await self._connection.send(json.dumps({"type": "CloseStream"}))
        try:
            await asyncio.wait_for(self._connection.wait_closed(), self._close_timeout)
        except asyncio.TimeoutError:
            logger.warning("Deepgram did not finish the stream within %.1fs", self._close_timeout)
        try:
            await self._connection.close()
        except WebSocketException as exc:
            raise TranscriptionFailure(f"Error closing live transcription session: {exc}") from exc


class _DeepgramRestClient:
    def __init__(
        self,
        api_key: str,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            headers={"Authorization": f"Token {self._api_key}"},
            transport=self._transport,
        )


class DeepgramSummarizer(_DeepgramRestClient):
    """Short-form summaries via Deepgram's text intelligence endpoint."""

    def __init__(
        self,
        api_key: str,
        base_url: str,
        options: SummaryOptions | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(api_key, base_url, transport)
        self._options = options or SummaryOptions()

    async def summarize(self, text: str) -> str | None:
        params = {"summarize": self._options.summarize, "language": self._options.language}
        try:
            async with self._client() as client:
                response = await client.post("/v1/read", params=params, json={"text": text})
                response.raise_for_status()
                payload = response.json()
                if not isinstance(payload, dict):
                    raise ValueError(f"Unexpected summary response body: {payload!r:.100}")
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Deepgram summarization error: %s", exc)
            raise SummarizationFailure("Failed to generate summary") from exc
        return extract_summary(payload)


class DeepgramSynthesizer(_DeepgramRestClient):
    """Aura text-to-speech; the streamed body is collected into one payload."""

    def __init__(
        self,
        api_key: str,
        base_url: str,
        options: SpeechOptions | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(api_key, base_url, transport)
        self._options = options or SpeechOptions()

    async def synthesize(self, text: str) -> bytes:
        params = {
            "model": self._options.model,
            "encoding": self._options.encoding,
            "container": self._options.container,
        }
        try:
            async with self._client() as client:
                async with client.stream(
                    "POST", "/v1/speak", params=params, json={"text": text}
                ) as response:
                    response.raise_for_status()
                    audio = b"".join([chunk async for chunk in response.aiter_bytes()])
        except httpx.HTTPError as exc:
            logger.error("Deepgram speech synthesis error: %s", exc)
            raise SynthesisFailure(str(exc)) from exc

        if not audio:
            raise SynthesisFailure("Failed to get audio stream from Deepgram")
        return audio
