from core.interfaces.repositories import (
    IProfileRepository,
    IStadiumRepository,
)
from core.interfaces.auth import (
    IAuthProvider,
    AuthSubscription,
    AuthStateListener,
)

__all__ = [
    # Repositories
    "IProfileRepository",
    "IStadiumRepository",
    # Auth
    "IAuthProvider",
    "AuthSubscription",
    "AuthStateListener",
]
