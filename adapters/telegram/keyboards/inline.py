"""
Inline keyboards for Telegram bot.
"""

from aiogram.types import InlineKeyboardMarkup, InlineKeyboardButton
from aiogram.utils.keyboard import InlineKeyboardBuilder
from typing import List, Optional, Sequence, Tuple

from core.domain.models import Arena, Stadium
from locales import t

# Telegram caps button labels visually; long names get cut
MAX_BUTTON_LABEL = 32


def _short(text: str, limit: int = MAX_BUTTON_LABEL) -> str:
    return text if len(text) <= limit else text[:limit - 1] + "…"


# === MENUS ===

def get_main_menu_keyboard(lang: str = "en") -> InlineKeyboardMarkup:
    """Main menu for a logged-in user"""
    builder = InlineKeyboardBuilder()
    builder.button(text=t("btn_list", lang), callback_data="menu_list")
    builder.button(text=t("btn_map", lang), callback_data="view_map")
    builder.button(text=t("btn_add", lang), callback_data="add_start")
    builder.button(text=t("btn_profile", lang), callback_data="profile")
    builder.button(text=t("btn_logout", lang), callback_data="logout")
    builder.adjust(2, 2, 1)
    return builder.as_markup()


def get_guest_keyboard(lang: str = "en") -> InlineKeyboardMarkup:
    """Menu shown when nobody is logged in"""
    builder = InlineKeyboardBuilder()
    builder.button(text=t("btn_login", lang), callback_data="auth_login")
    builder.button(text=t("btn_register", lang), callback_data="auth_register")
    builder.adjust(2)
    return builder.as_markup()


def get_back_to_menu_keyboard(lang: str = "en") -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text=t("btn_menu", lang), callback_data="menu")
    return builder.as_markup()


# === LIST / MAP ===

def get_stadium_list_keyboard(
    stadiums: Sequence[Stadium],
    web_map_url: Optional[str] = None,
    lang: str = "en",
) -> InlineKeyboardMarkup:
    """One row per stadium (visited toggle + delete), then the view toggle"""
    builder = InlineKeyboardBuilder()

    for stadium in stadiums:
        mark = "✓" if stadium.visited else "○"
        builder.row(
            InlineKeyboardButton(
                text=f"{mark} {_short(stadium.name)}",
                callback_data=f"visit_{stadium.id}",
            ),
            InlineKeyboardButton(text="✕", callback_data=f"del_{stadium.id}"),
        )

    builder.row(
        InlineKeyboardButton(text=t("btn_map", lang), callback_data="view_map"),
        InlineKeyboardButton(text=t("btn_add", lang), callback_data="add_start"),
    )
    if web_map_url:
        builder.row(InlineKeyboardButton(text=t("btn_web_map", lang), url=web_map_url))
    builder.row(InlineKeyboardButton(text=t("btn_menu", lang), callback_data="menu"))
    return builder.as_markup()


def get_map_view_keyboard(web_map_url: Optional[str] = None, lang: str = "en") -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text=t("btn_back_to_list", lang), callback_data="view_list")
    if web_map_url:
        builder.button(text=t("btn_web_map", lang), url=web_map_url)
    builder.adjust(1)
    return builder.as_markup()


# === ADD STADIUM ===

def get_arena_results_keyboard(results: List[Tuple[int, Arena]], lang: str = "en") -> InlineKeyboardMarkup:
    """Search hits as buttons; callback carries the arena's catalog position"""
    builder = InlineKeyboardBuilder()
    for index, arena in results:
        label = f"{arena.team} · {arena.league}"
        if arena.division:
            label += f" - {arena.division}"
        builder.button(text=_short(label, 48), callback_data=f"arena_{index}")
    builder.button(text=t("btn_manual", lang), callback_data="add_manual")
    builder.button(text=t("btn_cancel", lang), callback_data="add_cancel")
    builder.adjust(1)
    return builder.as_markup()


def get_search_fallback_keyboard(lang: str = "en") -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text=t("btn_manual", lang), callback_data="add_manual")
    builder.button(text=t("btn_cancel", lang), callback_data="add_cancel")
    builder.adjust(2)
    return builder.as_markup()


def get_add_confirm_keyboard(lang: str = "en") -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text=t("btn_save", lang), callback_data="add_save")
    builder.button(text=t("btn_edit_name", lang), callback_data="add_edit_name")
    builder.button(text=t("btn_edit_city", lang), callback_data="add_edit_city")
    builder.button(text=t("btn_edit_sport", lang), callback_data="add_edit_sport")
    builder.button(text=t("btn_cancel", lang), callback_data="add_cancel")
    builder.adjust(1, 3, 1)
    return builder.as_markup()


def get_cancel_keyboard(lang: str = "en") -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text=t("btn_cancel", lang), callback_data="add_cancel")
    return builder.as_markup()
