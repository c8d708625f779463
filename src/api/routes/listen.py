"""WebSocket endpoint receiving live meeting audio.

Point the Recall.ai bot's real-time audio destination at
``wss://<host>/listen``. Binary frames are raw audio; the server replies with
``{"type": "transcript", "text": ..., "timestamp": ...}`` JSON frames.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, WebSocket

from src.agent.relay import IngestionRelay
from src.api.deps import get_relay

router = APIRouter()


@router.websocket("/listen")
async def listen(
    websocket: WebSocket,
    relay: Annotated[IngestionRelay, Depends(get_relay)],
) -> None:
    await relay.handle(websocket)
