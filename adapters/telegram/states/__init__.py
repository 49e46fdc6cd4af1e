from adapters.telegram.states.forms import (
    LoginStates,
    RegisterStates,
    AddStadiumStates,
)

__all__ = [
    "LoginStates",
    "RegisterStates",
    "AddStadiumStates",
]
