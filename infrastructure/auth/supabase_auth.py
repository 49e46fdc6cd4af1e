"""
Supabase implementation of the auth provider (GoTrue).
"""

import asyncio
import logging
from typing import Optional, Set

from supabase import Client
from core.domain.models import AuthEvent, AuthSession, AuthUser
from core.interfaces.auth import IAuthProvider, AuthSubscription, AuthStateListener
from infrastructure.database.supabase_client import run_sync

logger = logging.getLogger(__name__)


class SupabaseAuthSubscription(AuthSubscription):
    def __init__(self, subscription):
        self._subscription = subscription

    def unsubscribe(self) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None


class SupabaseAuthProvider(IAuthProvider):
    """Wraps client.auth; the SDK is synchronous so calls go through run_sync"""

    def __init__(self, client: Client):
        self.client = client
        # Listener tasks scheduled from SDK threads; kept so they are not GC'd
        self._tasks: Set[asyncio.Task] = set()

    @staticmethod
    def _to_user(user) -> Optional[AuthUser]:
        if user is None:
            return None
        return AuthUser(id=str(user.id), email=getattr(user, "email", None))

    @classmethod
    def _to_session(cls, session) -> Optional[AuthSession]:
        if session is None or getattr(session, "user", None) is None:
            return None
        return AuthSession(access_token=session.access_token, user=cls._to_user(session.user))

    @run_sync
    def _get_session_sync(self):
        return self.client.auth.get_session()

    async def get_session(self) -> Optional[AuthSession]:
        return self._to_session(await self._get_session_sync())

    @run_sync
    def _sign_in_sync(self, email: str, password: str):
        return self.client.auth.sign_in_with_password({"email": email, "password": password})

    async def sign_in_with_password(self, email: str, password: str) -> Optional[AuthUser]:
        response = await self._sign_in_sync(email, password)
        return self._to_user(response.user)

    @run_sync
    def _sign_up_sync(self, email: str, password: str):
        return self.client.auth.sign_up({"email": email, "password": password})

    async def sign_up(self, email: str, password: str) -> Optional[AuthUser]:
        response = await self._sign_up_sync(email, password)
        return self._to_user(response.user)

    @run_sync
    def _sign_out_sync(self) -> None:
        self.client.auth.sign_out()

    async def sign_out(self) -> None:
        await self._sign_out_sync()

    def on_auth_state_change(self, listener: AuthStateListener) -> AuthSubscription:
        loop = asyncio.get_running_loop()

        def schedule(event: AuthEvent, session: Optional[AuthSession]) -> None:
            task = loop.create_task(listener(event, session))
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)

        def callback(event, session) -> None:
            # Called by the SDK from whichever thread performed the auth action
            try:
                auth_event = AuthEvent(event)
            except ValueError:
                logger.debug(f"Ignoring unknown auth event {event!r}")
                return
            if loop.is_closed():
                return
            loop.call_soon_threadsafe(schedule, auth_event, self._to_session(session))

        return SupabaseAuthSubscription(self.client.auth.on_auth_state_change(callback))
