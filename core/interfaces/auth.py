"""
Auth provider interface - narrow view of the hosted auth service.
"""

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Optional
from core.domain.models import AuthEvent, AuthSession, AuthUser


AuthStateListener = Callable[[AuthEvent, Optional[AuthSession]], Awaitable[None]]


class AuthSubscription(ABC):
    """Handle returned by on_auth_state_change"""

    @abstractmethod
    def unsubscribe(self) -> None:
        pass


class IAuthProvider(ABC):
    """Interface for credential and session operations"""

    @abstractmethod
    async def get_session(self) -> Optional[AuthSession]:
        """Current valid session, or None"""
        pass

    @abstractmethod
    async def sign_in_with_password(self, email: str, password: str) -> Optional[AuthUser]:
        """Verify credentials. Raises on rejection"""
        pass

    @abstractmethod
    async def sign_up(self, email: str, password: str) -> Optional[AuthUser]:
        """Create an account. Raises on failure"""
        pass

    @abstractmethod
    async def sign_out(self) -> None:
        """Invalidate the current session. Raises on failure"""
        pass

    @abstractmethod
    def on_auth_state_change(self, listener: AuthStateListener) -> AuthSubscription:
        """
        Subscribe to sign-in/sign-out transitions.
        The listener is awaited on the event loop that subscribed.
        """
        pass
