"""
Start handler - /start, /help, /cancel and main menu.
"""

from html import escape as html_escape

from aiogram import Router, F
from aiogram.types import Message, CallbackQuery
from aiogram.filters import Command, CommandStart
from aiogram.fsm.context import FSMContext

from core.services.profile_store import ProfileStore
from adapters.telegram.keyboards import get_main_menu_keyboard, get_guest_keyboard
from locales import t

router = Router()


def _home(profile_store: ProfileStore):
    """Text + keyboard of the home screen for the current session"""
    if profile_store.is_authenticated:
        name = html_escape(profile_store.identity.username)
        return t("welcome_back", name=name), get_main_menu_keyboard()
    return t("welcome_guest"), get_guest_keyboard()


@router.message(CommandStart())
async def start_command(message: Message, state: FSMContext, profile_store: ProfileStore):
    """Handle /start. Clears any stuck state."""
    await state.clear()
    text, keyboard = _home(profile_store)
    await message.answer(text, reply_markup=keyboard)


@router.message(Command("help"))
async def help_command(message: Message):
    await message.answer(t("help"))


@router.message(Command("cancel"))
async def cancel_command(message: Message, state: FSMContext, profile_store: ProfileStore):
    await state.clear()
    text, keyboard = _home(profile_store)
    await message.answer(t("cancelled"))
    await message.answer(text, reply_markup=keyboard)


@router.callback_query(F.data == "menu")
async def menu_callback(callback: CallbackQuery, state: FSMContext, profile_store: ProfileStore):
    await state.clear()
    text, keyboard = _home(profile_store)
    await callback.answer()
    await callback.message.answer(text, reply_markup=keyboard)


# === FALLBACK (must stay in the last router) ===

@router.message()
async def fallback_message(message: Message, profile_store: ProfileStore):
    keyboard = get_main_menu_keyboard() if profile_store.is_authenticated else get_guest_keyboard()
    await message.answer(t("fallback"), reply_markup=keyboard)
