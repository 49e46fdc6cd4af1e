"""
Helpers shared by handlers.
"""

from typing import Optional, Union

from aiogram.types import Message, CallbackQuery

from config.features import features
from config.settings import Settings
from core.services.profile_store import ProfileStore
from adapters.telegram.keyboards import get_guest_keyboard
from adapters.telegram.sessions import SessionRegistry
from locales import t


async def ensure_logged_in(event: Union[Message, CallbackQuery], profile_store: ProfileStore) -> bool:
    """Send the user to login when there is no identity. True if logged in."""
    if profile_store.is_authenticated:
        return True

    if isinstance(event, CallbackQuery):
        await event.answer()
        await event.message.answer(t("login_required"), reply_markup=get_guest_keyboard())
    else:
        await event.answer(t("login_required"), reply_markup=get_guest_keyboard())
    return False


def web_map_url(settings: Settings, registry: SessionRegistry, user_id: int) -> Optional[str]:
    if not features.WEB_MAP_ENABLED or not settings.public_base_url:
        return None
    return settings.map_url(registry.map_token(user_id))
