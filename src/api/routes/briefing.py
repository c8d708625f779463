"""Briefing endpoint: summary of the recent conversation."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from src.agent.briefing import BriefingService
from src.api.deps import get_briefing_service
from src.api.models import BriefingResponse

router = APIRouter()


@router.post("/briefing", response_model=BriefingResponse)
async def briefing(
    service: Annotated[BriefingService, Depends(get_briefing_service)],
) -> BriefingResponse:
    """Summarize the transcript window (the last few minutes of conversation).

    Returns the fixed "no data" message without calling the summarizer when
    nothing has been transcribed inside the window. Summarizer failures
    become a 500 via the registered exception handlers.
    """
    result = await service.generate_briefing()
    return BriefingResponse(
        summary=result.summary,
        transcript_length=result.source_text_length,
        buffer_size=result.entry_count,
    )
