"""
FSM States for Telegram bot.
"""

from aiogram.fsm.state import State, StatesGroup


class LoginStates(StatesGroup):
    """FSM states for /login"""
    waiting_email = State()
    waiting_password = State()


class RegisterStates(StatesGroup):
    """FSM states for /register"""
    waiting_username = State()
    waiting_email = State()
    waiting_password = State()


class AddStadiumStates(StatesGroup):
    """FSM states for the add-stadium form"""
    searching = State()         # Type-ahead over the arena catalog
    entering_name = State()     # Manual entry, one field per step
    entering_city = State()
    entering_sport = State()
    editing_field = State()     # Re-entering one field from the preview
    confirming = State()        # Preview with Save / Edit / Cancel
