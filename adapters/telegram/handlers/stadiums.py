"""
Stadium list handlers - list/map toggle, delete, visited toggle.
"""

import logging

from aiogram import Router, F, Bot
from aiogram.types import Message, CallbackQuery
from aiogram.filters import Command

from config.features import features
from config.settings import Settings
from core.domain.errors import StoreError, NotAuthenticatedError
from core.services.profile_store import ProfileStore
from core.services.stats_service import mappable
from adapters.telegram.handlers.common import ensure_logged_in, web_map_url
from adapters.telegram.keyboards import (
    get_stadium_list_keyboard,
    get_map_view_keyboard,
    get_back_to_menu_keyboard,
)
from adapters.telegram.sessions import SessionRegistry
from adapters.telegram.views import render_stadium_list
from locales import t

logger = logging.getLogger(__name__)

router = Router()


async def _show_list(message: Message, user_id: int, bot: Bot, profile_store: ProfileStore,
                     registry: SessionRegistry, settings: Settings):
    # Switching back to the list removes any map pins in this chat
    await registry.map_view(message.chat.id).teardown(bot)

    stadiums = profile_store.stadiums
    await message.answer(
        render_stadium_list(stadiums),
        reply_markup=get_stadium_list_keyboard(stadiums, web_map_url(settings, registry, user_id)),
    )


# === LIST ===

@router.message(Command("stadiums"))
async def stadiums_command(message: Message, bot: Bot, profile_store: ProfileStore,
                           registry: SessionRegistry, settings: Settings):
    if not await ensure_logged_in(message, profile_store):
        return
    await _show_list(message, message.from_user.id, bot, profile_store, registry, settings)


@router.callback_query(F.data.in_({"menu_list", "view_list"}))
async def list_callback(callback: CallbackQuery, bot: Bot, profile_store: ProfileStore,
                        registry: SessionRegistry, settings: Settings):
    if not await ensure_logged_in(callback, profile_store):
        return
    await callback.answer()
    await _show_list(callback.message, callback.from_user.id, bot, profile_store, registry, settings)


# === MAP ===

@router.callback_query(F.data == "view_map")
async def map_callback(callback: CallbackQuery, bot: Bot, profile_store: ProfileStore,
                       registry: SessionRegistry, settings: Settings):
    if not await ensure_logged_in(callback, profile_store):
        return
    await callback.answer()

    url = web_map_url(settings, registry, callback.from_user.id)
    if not features.MAP_PINS_ENABLED:
        await callback.message.answer(t("map_disabled"), reply_markup=get_map_view_keyboard(url))
        return

    stadiums = profile_store.stadiums
    points = mappable(stadiums)
    if not points:
        await registry.map_view(callback.message.chat.id).teardown(bot)
        await callback.message.answer(t("map_empty"), reply_markup=get_map_view_keyboard(url))
        return

    shown = await registry.map_view(callback.message.chat.id).show(bot, stadiums, features.MAX_MAP_PINS)

    text = t("map_header", count=shown)
    without_coords = len(stadiums) - len(points)
    if without_coords:
        text += "\n" + t("map_skipped", count=without_coords)
    over_limit = len(points) - shown
    if over_limit:
        text += "\n" + t("map_over_limit", count=over_limit, limit=features.MAX_MAP_PINS)
    await callback.message.answer(text, reply_markup=get_map_view_keyboard(url))


# === ROW ACTIONS ===

@router.callback_query(F.data.startswith("del_"))
async def delete_callback(callback: CallbackQuery, bot: Bot, profile_store: ProfileStore,
                          registry: SessionRegistry, settings: Settings):
    if not await ensure_logged_in(callback, profile_store):
        return

    stadium_id = callback.data[len("del_"):]
    try:
        await profile_store.delete_stadium(stadium_id)
    except NotAuthenticatedError:
        await callback.answer(t("login_required"), show_alert=True)
        return
    except StoreError as e:
        logger.warning(f"Delete of {stadium_id} failed: {e}")
        await callback.answer(str(e), show_alert=True)
        return

    await callback.answer(t("deleted"))
    await _refresh_list(callback, profile_store, registry, settings)


@router.callback_query(F.data.startswith("visit_"))
async def toggle_visited_callback(callback: CallbackQuery, profile_store: ProfileStore,
                                  registry: SessionRegistry, settings: Settings):
    if not await ensure_logged_in(callback, profile_store):
        return

    stadium_id = callback.data[len("visit_"):]
    current = next((s for s in profile_store.stadiums if s.id == stadium_id), None)
    if current is None:
        await callback.answer("Stadium not found", show_alert=True)
        return

    try:
        updated = await profile_store.update_stadium(stadium_id, {"visited": not current.visited})
    except StoreError as e:
        logger.warning(f"Visited toggle of {stadium_id} failed: {e}")
        await callback.answer(str(e), show_alert=True)
        return

    await callback.answer(t("marked_visited") if updated.visited else t("marked_to_visit"))
    await _refresh_list(callback, profile_store, registry, settings)


async def _refresh_list(callback: CallbackQuery, profile_store: ProfileStore,
                        registry: SessionRegistry, settings: Settings):
    """Redraw the list message in place after a row action"""
    stadiums = profile_store.stadiums
    keyboard = (
        get_stadium_list_keyboard(stadiums, web_map_url(settings, registry, callback.from_user.id))
        if stadiums else get_back_to_menu_keyboard()
    )
    await callback.message.edit_text(render_stadium_list(stadiums), reply_markup=keyboard)
