"""
Profile store - the session cache for one client.

Holds who is logged in and what they have recorded. Every mutation goes to
the remote store first; the local cache only changes after the remote call
succeeded, so callers never observe partial state.
"""

import asyncio
import logging
from typing import List, Optional, Union

from pydantic import ValidationError

from core.domain.constants import MAX_POPULATION_ATTEMPTS, REQUIRED_STADIUM_FIELDS
from core.domain.errors import (
    AuthError, ProfileError, WriteError, NotFoundError, NotAuthenticatedError,
)
from core.domain.models import (
    AuthEvent, AuthSession, Identity, ProfileCreate,
    Stadium, StadiumCreate, StadiumUpdate,
)
from core.interfaces.auth import IAuthProvider, AuthSubscription
from core.interfaces.repositories import IProfileRepository, IStadiumRepository
from core.services.stadium_form import missing_fields

logger = logging.getLogger(__name__)


def _message(error: Exception, fallback: str) -> str:
    """Readable text of a remote error (supabase errors carry .message)"""
    text = getattr(error, "message", None) or str(error)
    return text if isinstance(text, str) and text.strip() else fallback


class ProfileStore:
    """Session/profile cache kept in sync with the auth provider and data store"""

    def __init__(
        self,
        auth: IAuthProvider,
        profile_repo: IProfileRepository,
        stadium_repo: IStadiumRepository,
    ):
        self.auth = auth
        self.profile_repo = profile_repo
        self.stadium_repo = stadium_repo

        self._identity: Optional[Identity] = None
        self._stadiums: List[Stadium] = []
        self._ready = asyncio.Event()
        self._subscription: Optional[AuthSubscription] = None

        # Populations and clears take tickets in start order; a result is only
        # committed when no newer ticket has committed yet.
        self._next_ticket = 0
        self._committed_ticket = 0
        # Bumped on every committed cache change (populations, clears, writes)
        self._version = 0

    # === READ ===

    @property
    def identity(self) -> Optional[Identity]:
        return self._identity

    @property
    def stadiums(self) -> List[Stadium]:
        return list(self._stadiums)

    @property
    def is_authenticated(self) -> bool:
        return self._identity is not None

    @property
    def ready(self) -> bool:
        return self._ready.is_set()

    @property
    def version(self) -> int:
        return self._version

    async def wait_until_ready(self) -> None:
        await self._ready.wait()

    # === SESSION ===

    async def restore(self) -> None:
        """
        Rebuild the cache from an existing provider session and start
        listening for auth-state transitions. Never raises; `ready` is set
        once the initial check is done, whatever the outcome.
        """
        if self._subscription is None:
            self._subscription = self.auth.on_auth_state_change(self._on_auth_state_change)

        try:
            session = await self.auth.get_session()
            if session:
                await self._populate(session.user.id, session.user.email or "")
        except Exception as e:
            logger.error(f"Error checking user session: {e}", exc_info=True)
        finally:
            self._ready.set()

    async def login(self, email: str, password: str) -> Identity:
        try:
            user = await self.auth.sign_in_with_password(email, password)
        except Exception as e:
            raise AuthError(_message(e, "Login failed")) from e

        if not user:
            raise AuthError("No user returned from login")

        await self._load(user.id, user.email or email)
        logger.info(f"User {user.id} logged in")
        return self._identity

    async def register(self, username: str, email: str, password: str) -> Identity:
        try:
            user = await self.auth.sign_up(email, password)
        except Exception as e:
            raise AuthError(_message(e, "Registration failed")) from e

        if not user:
            raise AuthError("No user returned from signup")

        try:
            await self.profile_repo.create(ProfileCreate(id=user.id, username=username, email=email))
        except Exception as e:
            # The auth account stays behind without a profile row
            logger.error(f"Profile insert failed for new account {user.id}: {e}")
            raise ProfileError(_message(e, "Failed to create profile")) from e

        await self._load(user.id, user.email or email)
        logger.info(f"User {user.id} registered as {username}")
        return self._identity

    async def logout(self) -> None:
        try:
            await self.auth.sign_out()
        except Exception as e:
            raise AuthError(_message(e, "Logout failed")) from e
        self._clear()

    def close(self) -> None:
        """Stop listening for auth-state transitions"""
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    # === STADIUMS ===

    async def add_stadium(self, draft: StadiumCreate) -> Stadium:
        identity = self._require_identity()

        missing = missing_fields(draft)
        if missing:
            raise WriteError("Please fill in all fields")

        try:
            stadium = await self.stadium_repo.create(identity.id, draft)
        except Exception as e:
            raise WriteError(_message(e, "Failed to add stadium")) from e

        if self._owns_cache(identity):
            # A population that committed mid-insert may already hold the row
            self._stadiums = [*(s for s in self._stadiums if s.id != stadium.id), stadium]
            self._version += 1
        return stadium

    async def update_stadium(
        self,
        stadium_id: str,
        fields: Union[StadiumUpdate, dict],
    ) -> Stadium:
        identity = self._require_identity()

        if isinstance(fields, dict):
            try:
                fields = StadiumUpdate(**fields)
            except (TypeError, ValidationError) as e:
                raise WriteError(f"Invalid stadium fields: {e}") from e
        changes = fields.model_dump(exclude_unset=True)
        if not changes:
            raise WriteError("Nothing to update")
        if any(
            field in changes and not (changes[field] or "").strip()
            for field in REQUIRED_STADIUM_FIELDS
        ):
            raise WriteError("Please fill in all fields")

        try:
            updated = await self.stadium_repo.update(stadium_id, identity.id, fields)
        except Exception as e:
            raise WriteError(_message(e, "Failed to update stadium")) from e

        if updated is None:
            raise NotFoundError("Stadium not found")

        if not self._owns_cache(identity):
            return updated

        merged = updated
        stadiums = []
        for stadium in self._stadiums:
            if stadium.id == stadium_id:
                merged = stadium.model_copy(update=changes)
                stadiums.append(merged)
            else:
                stadiums.append(stadium)
        self._stadiums = stadiums
        self._version += 1
        return merged

    async def delete_stadium(self, stadium_id: str) -> None:
        identity = self._require_identity()

        try:
            deleted = await self.stadium_repo.delete(stadium_id, identity.id)
        except Exception as e:
            raise WriteError(_message(e, "Failed to delete stadium")) from e

        if not deleted:
            raise NotFoundError("Stadium not found")

        if self._owns_cache(identity):
            self._stadiums = [s for s in self._stadiums if s.id != stadium_id]
            self._version += 1

    # === INTERNALS ===

    def _require_identity(self) -> Identity:
        if self._identity is None:
            raise NotAuthenticatedError()
        return self._identity

    def _owns_cache(self, identity: Identity) -> bool:
        """A write only touches the cache if the same identity is still cached"""
        return self._identity is not None and self._identity.id == identity.id

    def _take_ticket(self) -> int:
        self._next_ticket += 1
        return self._next_ticket

    async def _load(self, user_id: str, email: str) -> None:
        try:
            await self._populate(user_id, email)
        except Exception as e:
            raise ProfileError(f"Could not load profile: {_message(e, 'unknown error')}") from e

    async def _populate(self, user_id: str, email: str) -> bool:
        """Fetch profile + stadiums and commit them. False if superseded."""
        ticket = self._take_ticket()

        for attempt in range(1, MAX_POPULATION_ATTEMPTS + 1):
            started_at = self._version
            profile = await self.profile_repo.get_by_id(user_id)
            stadiums = await self.stadium_repo.list_for_user(user_id)

            if ticket < self._committed_ticket:
                logger.debug(f"Dropping stale population #{ticket} for {user_id}")
                return False
            if self._version == started_at:
                break
            # A write landed while we were fetching; the rows may predate it
            logger.debug(f"Cache changed during population #{ticket}, attempt {attempt}")

        self._identity = Identity(
            id=user_id,
            username=(profile.username if profile and profile.username else email),
            email=email or (profile.email if profile else ""),
        )
        self._stadiums = list(stadiums)
        self._committed_ticket = ticket
        self._version += 1
        return True

    def _clear(self) -> None:
        self._committed_ticket = self._take_ticket()
        self._identity = None
        self._stadiums = []
        self._version += 1

    async def _on_auth_state_change(self, event: AuthEvent, session: Optional[AuthSession]) -> None:
        try:
            if session:
                await self._populate(session.user.id, session.user.email or "")
            else:
                self._clear()
        except Exception as e:
            logger.error(f"Error reloading profile after {event.value}: {e}", exc_info=True)
