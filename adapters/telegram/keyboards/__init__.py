from adapters.telegram.keyboards.inline import (
    get_main_menu_keyboard,
    get_guest_keyboard,
    get_back_to_menu_keyboard,
    get_stadium_list_keyboard,
    get_map_view_keyboard,
    get_arena_results_keyboard,
    get_search_fallback_keyboard,
    get_add_confirm_keyboard,
    get_cancel_keyboard,
)

__all__ = [
    "get_main_menu_keyboard",
    "get_guest_keyboard",
    "get_back_to_menu_keyboard",
    "get_stadium_list_keyboard",
    "get_map_view_keyboard",
    "get_arena_results_keyboard",
    "get_search_fallback_keyboard",
    "get_add_confirm_keyboard",
    "get_cancel_keyboard",
]
