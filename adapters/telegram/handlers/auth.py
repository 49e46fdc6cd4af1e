"""
Auth handlers - /login, /register, /logout.
Passwords are read once and their messages deleted from the chat.
"""

import logging
import re
from html import escape as html_escape

from aiogram import Router, F, Bot
from aiogram.exceptions import TelegramBadRequest
from aiogram.types import Message, CallbackQuery
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext

from core.domain.constants import MIN_USERNAME_LENGTH, MAX_USERNAME_LENGTH, MIN_PASSWORD_LENGTH
from core.domain.errors import StoreError
from core.services.profile_store import ProfileStore
from adapters.telegram.keyboards import get_main_menu_keyboard, get_guest_keyboard
from adapters.telegram.sessions import SessionRegistry
from adapters.telegram.states import LoginStates, RegisterStates
from locales import t

logger = logging.getLogger(__name__)

router = Router()

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

# Plain text that is not a command
TEXT_INPUT = F.text & ~F.text.startswith("/")


async def _delete_quietly(message: Message) -> None:
    try:
        await message.delete()
    except TelegramBadRequest as e:
        logger.debug(f"Could not delete password message: {e}")


# === LOGIN ===

async def _start_login(message: Message, state: FSMContext, profile_store: ProfileStore):
    if profile_store.is_authenticated:
        await message.answer(
            t("already_logged_in", name=html_escape(profile_store.identity.username)),
            reply_markup=get_main_menu_keyboard(),
        )
        return
    await state.clear()
    await state.set_state(LoginStates.waiting_email)
    await message.answer(t("ask_email"))


@router.message(Command("login"))
async def login_command(message: Message, state: FSMContext, profile_store: ProfileStore):
    await _start_login(message, state, profile_store)


@router.callback_query(F.data == "auth_login")
async def login_callback(callback: CallbackQuery, state: FSMContext, profile_store: ProfileStore):
    await callback.answer()
    await _start_login(callback.message, state, profile_store)


@router.message(LoginStates.waiting_email, TEXT_INPUT)
async def login_email(message: Message, state: FSMContext):
    email = message.text.strip()
    if not EMAIL_RE.match(email):
        await message.answer(t("invalid_email"))
        return
    await state.update_data(email=email)
    await state.set_state(LoginStates.waiting_password)
    await message.answer(t("ask_password"))


@router.message(LoginStates.waiting_password, TEXT_INPUT)
async def login_password(message: Message, state: FSMContext, profile_store: ProfileStore):
    password = message.text
    await _delete_quietly(message)

    data = await state.get_data()
    await state.clear()

    try:
        identity = await profile_store.login(data.get("email", ""), password)
    except StoreError as e:
        logger.info(f"Login failed for tg user {message.from_user.id}: {e}")
        await message.answer(t("auth_failed", error=html_escape(str(e))), reply_markup=get_guest_keyboard())
        return

    await message.answer(
        t("login_success", name=html_escape(identity.username)),
        reply_markup=get_main_menu_keyboard(),
    )


# === REGISTER ===

async def _start_register(message: Message, state: FSMContext, profile_store: ProfileStore):
    if profile_store.is_authenticated:
        await message.answer(
            t("already_logged_in", name=html_escape(profile_store.identity.username)),
            reply_markup=get_main_menu_keyboard(),
        )
        return
    await state.clear()
    await state.set_state(RegisterStates.waiting_username)
    await message.answer(t("ask_username"))


@router.message(Command("register"))
async def register_command(message: Message, state: FSMContext, profile_store: ProfileStore):
    await _start_register(message, state, profile_store)


@router.callback_query(F.data == "auth_register")
async def register_callback(callback: CallbackQuery, state: FSMContext, profile_store: ProfileStore):
    await callback.answer()
    await _start_register(callback.message, state, profile_store)


@router.message(RegisterStates.waiting_username, TEXT_INPUT)
async def register_username(message: Message, state: FSMContext):
    username = message.text.strip()
    if not MIN_USERNAME_LENGTH <= len(username) <= MAX_USERNAME_LENGTH:
        await message.answer(t("invalid_username"))
        return
    await state.update_data(username=username)
    await state.set_state(RegisterStates.waiting_email)
    await message.answer(t("ask_email"))


@router.message(RegisterStates.waiting_email, TEXT_INPUT)
async def register_email(message: Message, state: FSMContext):
    email = message.text.strip()
    if not EMAIL_RE.match(email):
        await message.answer(t("invalid_email"))
        return
    await state.update_data(email=email)
    await state.set_state(RegisterStates.waiting_password)
    await message.answer(t("ask_new_password"))


@router.message(RegisterStates.waiting_password, TEXT_INPUT)
async def register_password(message: Message, state: FSMContext, profile_store: ProfileStore):
    password = message.text
    await _delete_quietly(message)

    if len(password) < MIN_PASSWORD_LENGTH:
        await message.answer(t("password_too_short"))
        return

    data = await state.get_data()
    await state.clear()

    try:
        identity = await profile_store.register(data.get("username", ""), data.get("email", ""), password)
    except StoreError as e:
        logger.info(f"Registration failed for tg user {message.from_user.id}: {e}")
        await message.answer(t("auth_failed", error=html_escape(str(e))), reply_markup=get_guest_keyboard())
        return

    await message.answer(
        t("register_success", name=html_escape(identity.username)),
        reply_markup=get_main_menu_keyboard(),
    )


# === LOGOUT ===

async def _logout(message: Message, user_id: int, bot: Bot, state: FSMContext,
                  profile_store: ProfileStore, registry: SessionRegistry):
    await state.clear()
    try:
        await profile_store.logout()
    except StoreError as e:
        await message.answer(t("auth_failed", error=html_escape(str(e))))
        return

    await registry.map_view(message.chat.id).teardown(bot)
    registry.revoke_map_token(user_id)
    await message.answer(t("logout_success"), reply_markup=get_guest_keyboard())


@router.message(Command("logout"))
async def logout_command(message: Message, bot: Bot, state: FSMContext,
                         profile_store: ProfileStore, registry: SessionRegistry):
    await _logout(message, message.from_user.id, bot, state, profile_store, registry)


@router.callback_query(F.data == "logout")
async def logout_callback(callback: CallbackQuery, bot: Bot, state: FSMContext,
                          profile_store: ProfileStore, registry: SessionRegistry):
    await callback.answer()
    await _logout(callback.message, callback.from_user.id, bot, state, profile_store, registry)
