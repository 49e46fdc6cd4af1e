"""
Profile handler - identity and stadium stats.
"""

from aiogram import Router, F
from aiogram.types import Message, CallbackQuery
from aiogram.filters import Command

from core.services.profile_store import ProfileStore
from core.services.stats_service import compute_stats
from adapters.telegram.handlers.common import ensure_logged_in
from adapters.telegram.keyboards import get_main_menu_keyboard
from adapters.telegram.views import render_profile

router = Router()


def _profile_text(profile_store: ProfileStore) -> str:
    return render_profile(profile_store.identity, compute_stats(profile_store.stadiums))


@router.message(Command("profile"))
async def profile_command(message: Message, profile_store: ProfileStore):
    if not await ensure_logged_in(message, profile_store):
        return
    await message.answer(_profile_text(profile_store), reply_markup=get_main_menu_keyboard())


@router.callback_query(F.data == "profile")
async def profile_callback(callback: CallbackQuery, profile_store: ProfileStore):
    if not await ensure_logged_in(callback, profile_store):
        return
    await callback.answer()
    await callback.message.answer(_profile_text(profile_store), reply_markup=get_main_menu_keyboard())
