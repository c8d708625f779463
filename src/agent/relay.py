"""Ingestion relay: inbound meeting audio -> live transcription -> transcript window."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Protocol

from fastapi import WebSocket, WebSocketDisconnect
from starlette.websockets import WebSocketState

from src.agent.errors import TranscriptionFailure
from src.transcript.window import TranscriptWindowStore

logger = logging.getLogger(__name__)


class TranscriptionSession(Protocol):
    """A bidirectional channel to a streaming speech-to-text provider.

    ``results()`` yields final transcript fragments in the order the provider
    emits them and ends when the session closes. Provider failures surface
    as TranscriptionFailure from any of the three methods.
    """

    async def send(self, audio: bytes) -> None: ...

    def results(self) -> AsyncIterator[str]: ...

    async def close(self) -> None: ...


SessionFactory = Callable[[], Awaitable[TranscriptionSession]]


class IngestionRelay:
    """Bridges one inbound audio WebSocket to one transcription session per connection.

    Every session appends into the shared transcript window. Transcription
    problems are logged and never close the inbound connection: if the
    session cannot be opened, or dies mid-stream, the connection stays open
    and its audio is discarded.
    """

    def __init__(
        self,
        store: TranscriptWindowStore,
        open_session: SessionFactory,
        clock: Callable[[], float] = time.time,
        flush_timeout: float = 10.0,
    ) -> None:
        self._store = store
        self._open_session = open_session
        self._clock = clock
        self._flush_timeout = flush_timeout

    async def handle(self, websocket: WebSocket) -> None:
        await websocket.accept()
        logger.info("New WebSocket connection established for audio streaming")

        session: TranscriptionSession | None
        try:
            session = await self._open_session()
        except TranscriptionFailure as exc:
            logger.error("Error setting up transcription: %s", exc.message)
            session = None

        publisher = None
        if session is not None:
            publisher = asyncio.create_task(self._publish(session, websocket))
        try:
            await self._forward_audio(session, websocket)
        finally:
            # Close first so fragments the provider flushes on close still reach the window.
            if session is not None:
                await self._close_session(session)
            if publisher is not None:
                await self._drain(publisher)
            logger.info("WebSocket connection closed")

    async def _forward_audio(
        self, session: TranscriptionSession | None, websocket: WebSocket
    ) -> None:
        """Relay binary frames to the session until the peer disconnects."""
        forwarding = session is not None
        while True:
            try:
                message = await websocket.receive()
            except Exception:
                logger.exception("WebSocket error")
                return
            if message["type"] == "websocket.disconnect":
                return

            audio = message.get("bytes")
            if audio is None or not forwarding:
                continue  # text frames carry no audio
            try:
                await session.send(audio)  # type: ignore[union-attr]
            except TranscriptionFailure as exc:
                logger.error("Live transcription error, dropping audio: %s", exc.message)
                forwarding = False

    async def _publish(self, session: TranscriptionSession, websocket: WebSocket) -> None:
        """Store each final fragment and echo it to the inbound peer."""
        try:
            async for fragment in session.results():
                text = fragment.strip()
                if not text:
                    continue
                now = self._clock()
                self._store.append(text, now)
                logger.info("Transcript: %s", text)
                if websocket.client_state is not WebSocketState.CONNECTED:
                    continue  # peer gone; the fragment is still stored
                try:
                    await websocket.send_json(
                        {"type": "transcript", "text": text, "timestamp": int(now * 1000)}
                    )
                except (WebSocketDisconnect, RuntimeError) as exc:
                    logger.info("Transcript not echoed, peer disconnected: %s", exc)
        except TranscriptionFailure as exc:
            logger.error("Live transcription error: %s", exc.message)

    async def _drain(self, publisher: asyncio.Task[None]) -> None:
        """Wait for the publisher to finish the flushed results, cancelling it on timeout."""
        try:
            await asyncio.wait_for(publisher, self._flush_timeout)
        except asyncio.TimeoutError:
            logger.warning("Transcription results not finished after %.1fs", self._flush_timeout)
        except Exception as exc:
            logger.error("Transcript publisher stopped: %s", exc)

    async def _close_session(self, session: TranscriptionSession) -> None:
        try:
            await session.close()
        except TranscriptionFailure as exc:
            logger.warning("Transcription session did not close cleanly: %s", exc.message)
