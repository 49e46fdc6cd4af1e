"""
In-chat map view: one venue pin (Telegram renders it as a map) per stadium.

A MapView owns the pin messages it sent. Showing it again or switching back
to the list deletes them first, so pins never pile up across toggles.
"""

import logging
from typing import List, Sequence

from aiogram import Bot
from aiogram.exceptions import TelegramBadRequest

from core.domain.models import Stadium
from core.services.stats_service import mappable

logger = logging.getLogger(__name__)


class MapView:
    def __init__(self, chat_id: int):
        self.chat_id = chat_id
        self._message_ids: List[int] = []

    @property
    def is_open(self) -> bool:
        return bool(self._message_ids)

    @property
    def message_ids(self) -> List[int]:
        return list(self._message_ids)

    async def show(self, bot: Bot, stadiums: Sequence[Stadium], limit: int) -> int:
        """Replace any previous pins with pins for `stadiums`. Returns pins sent."""
        await self.teardown(bot)

        points = mappable(stadiums)[:limit]
        for stadium in points:
            message = await bot.send_venue(
                chat_id=self.chat_id,
                latitude=stadium.lat,
                longitude=stadium.lng,
                title=stadium.name,
                address=f"{stadium.city} · {stadium.sport}",
                disable_notification=True,
            )
            self._message_ids.append(message.message_id)
        return len(points)

    async def teardown(self, bot: Bot) -> None:
        """Delete every pin this view sent"""
        message_ids, self._message_ids = self._message_ids, []
        for message_id in message_ids:
            try:
                await bot.delete_message(chat_id=self.chat_id, message_id=message_id)
            except TelegramBadRequest as e:
                # Already deleted by the user or too old to delete
                logger.debug(f"Could not delete pin {message_id} in chat {self.chat_id}: {e}")
