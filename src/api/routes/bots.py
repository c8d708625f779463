"""Bot registration endpoint."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from src.agent.registry import BotRegistry
from src.api.deps import get_registry
from src.api.models import SetBotIdRequest, SetBotIdResponse

router = APIRouter()


@router.post("/set-bot-id", response_model=SetBotIdResponse)
async def set_bot_id(
    registry: Annotated[BotRegistry, Depends(get_registry)],
    request: SetBotIdRequest | None = None,
) -> SetBotIdResponse:
    """Register the Recall.ai bot that /speak plays audio through.

    Body: ``{"botId": "bot_abc123"}``. Identifiers may only contain letters,
    digits, underscores and hyphens.
    """
    bot_id = registry.register(request.bot_id if request else None)
    return SetBotIdResponse(success=True, bot_id=bot_id)
