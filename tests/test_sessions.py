"""
Tests for the per-user session registry.
"""

import pytest

from core.services.profile_store import ProfileStore
from adapters.telegram.sessions import SessionRegistry
from fakes import FakeAuthProvider, FakeProfileRepository, FakeStadiumRepository


@pytest.fixture
def registry(backend):
    created = []

    def factory(user_key):
        store = ProfileStore(
            auth=FakeAuthProvider(backend),
            profile_repo=FakeProfileRepository(backend),
            stadium_repo=FakeStadiumRepository(backend),
        )
        created.append(user_key)
        return store

    registry = SessionRegistry(factory, max_guests=2)
    registry.created = created
    return registry


class TestSessionRegistry:
    @pytest.mark.asyncio
    async def test_store_created_once_and_restored(self, registry):
        first = await registry.get(1)
        again = await registry.get(1)

        assert first is again
        assert first.ready
        assert registry.created == [1]
        assert registry.active_count == 1

    @pytest.mark.asyncio
    async def test_users_are_isolated(self, registry, backend):
        backend.add_account("alice", "alice@example.com")
        alice_store = await registry.get(1)
        await alice_store.login("alice@example.com", "secret1")

        other = await registry.get(2)

        assert other is not alice_store
        assert not other.is_authenticated

    def test_map_view_per_chat(self, registry):
        assert registry.map_view(10) is registry.map_view(10)
        assert registry.map_view(10) is not registry.map_view(11)

    @pytest.mark.asyncio
    async def test_map_token_resolves_to_store(self, registry):
        store = await registry.get(1)
        token = registry.map_token(1)

        assert registry.map_token(1) == token
        assert registry.store_for_token(token) is store
        assert registry.store_for_token("unknown") is None

    @pytest.mark.asyncio
    async def test_revoked_token_no_longer_resolves(self, registry):
        await registry.get(1)
        token = registry.map_token(1)

        registry.revoke_map_token(1)

        assert registry.store_for_token(token) is None
        assert registry.map_token(1) != token

    @pytest.mark.asyncio
    async def test_close_unsubscribes_everything(self, registry):
        store = await registry.get(1)
        auth = store.auth

        registry.close()

        assert auth.listeners == []
        assert registry.active_count == 0

    @pytest.mark.asyncio
    async def test_idle_guests_evicted_past_cap(self, registry, backend):
        backend.add_account("alice", "alice@example.com")
        alice = await registry.get(1)
        await alice.login("alice@example.com", "secret1")
        guest = await registry.get(2)
        token = registry.map_token(2)
        stale = await registry.get(3)
        await registry.get(2)
        await registry.get(4)

        await registry.get(5)

        assert stale.auth.listeners == []
        assert guest.auth.listeners != []
        assert registry.store_for_token(token) is guest

        await registry.get(6)

        assert guest.auth.listeners == []
        assert registry.store_for_token(token) is None
        assert registry.active_count == 4
        assert await registry.get(1) is alice
        assert alice.is_authenticated
