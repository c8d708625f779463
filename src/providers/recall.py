"""Recall.ai client for playing synthesized audio into a live call."""

from __future__ import annotations

import httpx

from src.agent.errors import DeliveryFailure


class RecallClient:
    def __init__(
        self,
        api_key: str,
        base_url: str,
        content_type: str = "audio/wav",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._content_type = content_type
        self._transport = transport

    async def play_audio(self, bot_id: str, audio: bytes) -> None:
        """Send raw audio to the bot's playback endpoint.

        Raises:
            DeliveryFailure: Transport error or non-2xx response from Recall.ai.
        """
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url, transport=self._transport
            ) as client:
                response = await client.post(
                    f"/api/v1/bot/{bot_id}/play_audio",
                    content=audio,
                    headers={
                        "Authorization": f"Token {self._api_key}",
                        "Content-Type": self._content_type,
                    },
                )
                response.raise_for_status()
        except httpx.HTTPError as exc:
            raise DeliveryFailure(str(exc)) from exc
