"""
Add stadium handlers - type-ahead search over the arena catalog,
manual entry, preview with edit buttons, save.

The pending draft lives in FSM data as a serialized StadiumForm.
"""

import logging
from html import escape as html_escape
from typing import Optional

from aiogram import Router, F
from aiogram.types import Message, CallbackQuery
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext

from core.domain.errors import StoreError
from core.services.arena_search import ArenaCatalog
from core.services.profile_store import ProfileStore
from core.services.stadium_form import StadiumForm
from adapters.telegram.handlers.common import ensure_logged_in
from adapters.telegram.keyboards import (
    get_arena_results_keyboard,
    get_search_fallback_keyboard,
    get_add_confirm_keyboard,
    get_cancel_keyboard,
    get_main_menu_keyboard,
)
from adapters.telegram.states import AddStadiumStates
from adapters.telegram.views import render_draft
from locales import t

logger = logging.getLogger(__name__)

router = Router()

TEXT_INPUT = F.text & ~F.text.startswith("/")

FIELD_PROMPTS = {
    "name": "ask_stadium_name",
    "city": "ask_stadium_city",
    "sport": "ask_stadium_sport",
}


async def _get_form(state: FSMContext) -> StadiumForm:
    data = await state.get_data()
    return StadiumForm(**data.get("form", {}))


async def _save_form(state: FSMContext, form: StadiumForm) -> None:
    await state.update_data(form=form.model_dump())


async def _show_draft(message: Message, state: FSMContext, form: StadiumForm) -> None:
    await _save_form(state, form)
    await state.set_state(AddStadiumStates.confirming)
    await message.answer(render_draft(form), reply_markup=get_add_confirm_keyboard())


# === START ===

async def _start_add(message: Message, state: FSMContext):
    await state.clear()
    await _save_form(state, StadiumForm())
    await state.set_state(AddStadiumStates.searching)
    await message.answer(t("add_search_prompt"), reply_markup=get_search_fallback_keyboard())


@router.message(Command("add"))
async def add_command(message: Message, state: FSMContext, profile_store: ProfileStore):
    if not await ensure_logged_in(message, profile_store):
        return
    await _start_add(message, state)


@router.callback_query(F.data == "add_start")
async def add_callback(callback: CallbackQuery, state: FSMContext, profile_store: ProfileStore):
    if not await ensure_logged_in(callback, profile_store):
        return
    await callback.answer()
    await _start_add(callback.message, state)


# === SEARCH ===

@router.message(AddStadiumStates.searching, TEXT_INPUT)
async def search_arenas(message: Message, arenas: ArenaCatalog):
    query = message.text.strip()
    matches = arenas.search(query)

    if not matches:
        await message.answer(
            t("add_no_matches", query=html_escape(query)),
            reply_markup=get_search_fallback_keyboard(),
        )
        return

    results = [(arenas.index_of(arena), arena) for arena in matches]
    await message.answer(
        t("add_matches", count=len(matches), query=html_escape(query)),
        reply_markup=get_arena_results_keyboard(results),
    )


@router.callback_query(AddStadiumStates.searching, F.data.startswith("arena_"))
async def select_arena(callback: CallbackQuery, state: FSMContext, arenas: ArenaCatalog):
    try:
        arena = arenas.get(int(callback.data[len("arena_"):]))
    except ValueError:
        arena = None

    if arena is None:
        await callback.answer("Unknown stadium, search again", show_alert=True)
        return

    await callback.answer()
    form = (await _get_form(state)).apply_arena(arena)
    await _show_draft(callback.message, state, form)


# === MANUAL ENTRY ===

@router.callback_query(F.data == "add_manual")
async def manual_entry(callback: CallbackQuery, state: FSMContext, profile_store: ProfileStore):
    if not await ensure_logged_in(callback, profile_store):
        return
    await callback.answer()
    await _save_form(state, StadiumForm())
    await state.set_state(AddStadiumStates.entering_name)
    await callback.message.answer(t("ask_stadium_name"), reply_markup=get_cancel_keyboard())


async def _take_field(message: Message, state: FSMContext, field: str) -> Optional[StadiumForm]:
    """Store one typed field. Returns None (and re-asks) on blank input."""
    if not message.text.strip():
        await message.answer(t(FIELD_PROMPTS[field]), reply_markup=get_cancel_keyboard())
        return None
    form = (await _get_form(state)).with_field(field, message.text)
    await _save_form(state, form)
    return form


@router.message(AddStadiumStates.entering_name, TEXT_INPUT)
async def enter_name(message: Message, state: FSMContext):
    if await _take_field(message, state, "name") is None:
        return
    await state.set_state(AddStadiumStates.entering_city)
    await message.answer(t("ask_stadium_city"), reply_markup=get_cancel_keyboard())


@router.message(AddStadiumStates.entering_city, TEXT_INPUT)
async def enter_city(message: Message, state: FSMContext):
    if await _take_field(message, state, "city") is None:
        return
    await state.set_state(AddStadiumStates.entering_sport)
    await message.answer(t("ask_stadium_sport"), reply_markup=get_cancel_keyboard())


@router.message(AddStadiumStates.entering_sport, TEXT_INPUT)
async def enter_sport(message: Message, state: FSMContext):
    form = await _take_field(message, state, "sport")
    if form is None:
        return
    await _show_draft(message, state, form)


# === PREVIEW / EDIT ===

@router.callback_query(AddStadiumStates.confirming, F.data.startswith("add_edit_"))
async def edit_field(callback: CallbackQuery, state: FSMContext):
    field = callback.data[len("add_edit_"):]
    if field not in FIELD_PROMPTS:
        await callback.answer()
        return

    await callback.answer()
    await state.update_data(edit_field=field)
    await state.set_state(AddStadiumStates.editing_field)
    await callback.message.answer(t(FIELD_PROMPTS[field]), reply_markup=get_cancel_keyboard())


@router.message(AddStadiumStates.editing_field, TEXT_INPUT)
async def enter_edited_field(message: Message, state: FSMContext):
    data = await state.get_data()
    form = await _take_field(message, state, data.get("edit_field", "name"))
    if form is None:
        return
    await _show_draft(message, state, form)


# === SAVE / CANCEL ===

@router.callback_query(AddStadiumStates.confirming, F.data == "add_save")
async def save_stadium(callback: CallbackQuery, state: FSMContext, profile_store: ProfileStore):
    form = await _get_form(state)

    ok, error = form.validate_fields()
    if not ok:
        await callback.answer(error, show_alert=True)
        return

    await callback.answer(t("add_saving"))
    try:
        stadium = await profile_store.add_stadium(form.to_create())
    except StoreError as e:
        # Keep the draft so the user can retry or edit
        logger.warning(f"Add stadium failed for tg user {callback.from_user.id}: {e}")
        await callback.message.answer(
            t("add_failed", error=html_escape(str(e))),
            reply_markup=get_add_confirm_keyboard(),
        )
        return

    await state.clear()
    await callback.message.answer(
        t("add_success", name=html_escape(stadium.name)),
        reply_markup=get_main_menu_keyboard(),
    )


@router.callback_query(F.data == "add_cancel")
async def cancel_add(callback: CallbackQuery, state: FSMContext, profile_store: ProfileStore):
    await state.clear()
    await callback.answer(t("cancelled"))
    if profile_store.is_authenticated:
        await callback.message.answer(t("cancelled"), reply_markup=get_main_menu_keyboard())
