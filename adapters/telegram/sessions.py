"""
Session registry - one ProfileStore per Telegram user.

Stores are created lazily on the user's first update and restored before
any handler sees them. The registry also owns per-chat map views and the
opaque tokens that identify a session's web map.
"""

import logging
import secrets
from collections import OrderedDict
from typing import Callable, Dict, Optional

from core.services.profile_store import ProfileStore
from adapters.telegram.views.map_view import MapView

logger = logging.getLogger(__name__)

StoreFactory = Callable[[int], ProfileStore]

# Logged-out sessions kept around (least recently used are closed first)
MAX_GUEST_SESSIONS = 200


class SessionRegistry:
    def __init__(self, store_factory: StoreFactory, max_guests: int = MAX_GUEST_SESSIONS):
        self._store_factory = store_factory
        self._max_guests = max_guests
        self._stores: "OrderedDict[int, ProfileStore]" = OrderedDict()
        self._map_views: Dict[int, MapView] = {}
        self._map_tokens: Dict[str, int] = {}
        self._tokens_by_user: Dict[int, str] = {}

    @property
    def active_count(self) -> int:
        return len(self._stores)

    async def get(self, user_key: int) -> ProfileStore:
        """Store for a user, restored from any saved session on first access"""
        store = self._stores.get(user_key)
        if store is None:
            store = self._store_factory(user_key)
            self._stores[user_key] = store
            logger.debug(f"New session for user {user_key}")
            await store.restore()
            self._evict_guests(keep=user_key)
        else:
            self._stores.move_to_end(user_key)
            await store.wait_until_ready()
        return store

    def _evict_guests(self, keep: int) -> None:
        """Close the least recently used logged-out sessions beyond the cap"""
        guests = [
            key for key, store in self._stores.items()
            if key != keep and not store.is_authenticated
        ]
        for key in guests[:max(0, len(guests) - self._max_guests)]:
            self._stores.pop(key).close()
            self.revoke_map_token(key)
            logger.debug(f"Evicted idle guest session {key}")

    def map_view(self, chat_id: int) -> MapView:
        view = self._map_views.get(chat_id)
        if view is None:
            view = MapView(chat_id)
            self._map_views[chat_id] = view
        return view

    def map_token(self, user_key: int) -> str:
        """Stable per-session token for the web map link"""
        token = self._tokens_by_user.get(user_key)
        if token is None:
            token = secrets.token_urlsafe(16)
            self._tokens_by_user[user_key] = token
            self._map_tokens[token] = user_key
        return token

    def revoke_map_token(self, user_key: int) -> None:
        token = self._tokens_by_user.pop(user_key, None)
        if token is not None:
            self._map_tokens.pop(token, None)

    def store_for_token(self, token: str) -> Optional[ProfileStore]:
        user_key = self._map_tokens.get(token)
        if user_key is None:
            return None
        return self._stores.get(user_key)

    def close(self) -> None:
        for store in self._stores.values():
            store.close()
        self._stores.clear()
        self._map_views.clear()
        self._map_tokens.clear()
        self._tokens_by_user.clear()
