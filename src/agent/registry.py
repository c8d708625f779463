"""Single-slot registry for the active Recall.ai bot."""

from __future__ import annotations

import logging
import re

from src.agent.errors import InvalidIdentifierFormatError, MissingInputError

logger = logging.getLogger(__name__)

# The id is interpolated into the playback URL path, so only URL-safe characters pass.
BOT_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


class BotRegistry:
    """Holds the bot id used as the playback target.

    Registration is last-write-wins; there is no existence check against
    the connectivity provider.
    """

    def __init__(self) -> None:
        self._bot_id: str | None = None

    def register(self, bot_id: str | None) -> str:
        if not bot_id:
            raise MissingInputError("botId is required")
        if not BOT_ID_PATTERN.fullmatch(bot_id):
            raise InvalidIdentifierFormatError("Invalid botId format")
        if self._bot_id is not None and self._bot_id != bot_id:
            logger.info("Replacing bot id %s with %s", self._bot_id, bot_id)
        self._bot_id = bot_id
        return bot_id

    def current(self) -> str | None:
        return self._bot_id
