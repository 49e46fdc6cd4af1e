"""
Middleware for Telegram bot.

- SessionMiddleware: resolves the caller's ProfileStore and injects it into handler data
"""

import logging
from typing import Any, Awaitable, Callable, Dict

from aiogram import BaseMiddleware
from aiogram.types import Message, CallbackQuery, TelegramObject

from adapters.telegram.sessions import SessionRegistry
from locales import t

logger = logging.getLogger(__name__)


class SessionMiddleware(BaseMiddleware):
    """
    Looks up (or restores) the sender's session before the handler runs,
    so handlers can rely on `profile_store.ready` being set.
    """

    def __init__(self, registry: SessionRegistry):
        self.registry = registry

    async def __call__(
        self,
        handler: Callable[[TelegramObject, Dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: Dict[str, Any],
    ) -> Any:
        user = data.get("event_from_user")
        if not user:
            return await handler(event, data)

        try:
            data["profile_store"] = await self.registry.get(user.id)
        except Exception as e:
            logger.error(f"Failed to open session for user {user.id}: {e}", exc_info=True)
            if isinstance(event, Message):
                await event.answer(t("server_error"))
            elif isinstance(event, CallbackQuery):
                await event.answer(t("server_error"), show_alert=True)
            return

        return await handler(event, data)
