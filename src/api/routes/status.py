"""Discovery and liveness endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from src.api.models import StatusResponse

router = APIRouter()

ENDPOINTS = {
    "briefing": "POST /briefing - Get conversation summary",
    "speak": "POST /speak - Speak text in meeting",
    "listen": "WebSocket /listen - Audio stream endpoint",
    "setBotId": "POST /set-bot-id - Set Recall.ai bot ID",
}


@router.get("/", response_model=StatusResponse)
async def status() -> StatusResponse:
    return StatusResponse(
        status="running",
        message="AI Meeting Agent Server is operational",
        endpoints=ENDPOINTS,
    )


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}
