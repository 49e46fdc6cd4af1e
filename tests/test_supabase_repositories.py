"""
Tests for the Supabase repositories against a mocked client.
"""

from unittest.mock import MagicMock

import pytest

from core.domain.models import ProfileCreate, StadiumCreate, StadiumUpdate
from infrastructure.database import SupabaseProfileRepository, SupabaseStadiumRepository


ROW = {
    "id": 7,
    "user_id": "u-alice",
    "name": "Fenway Park",
    "city": "Boston, MA",
    "sport": "Baseball",
    "lat": "42.3467",
    "lng": -71.0972,
    "visited": None,
    "created_at": "2024-05-01T12:00:00+00:00",
}


def response(data):
    return MagicMock(data=data)


@pytest.fixture
def client():
    return MagicMock()


class TestStadiumRepository:
    @pytest.mark.asyncio
    async def test_list_for_user(self, client):
        query = client.table.return_value.select.return_value.eq.return_value.order.return_value
        query.execute.return_value = response([ROW])

        stadiums = await SupabaseStadiumRepository(client).list_for_user("u-alice")

        client.table.assert_called_with("stadiums")
        client.table.return_value.select.return_value.eq.assert_called_with("user_id", "u-alice")
        assert len(stadiums) == 1
        stadium = stadiums[0]
        assert stadium.id == "7"
        assert stadium.lat == 42.3467
        assert stadium.visited is True
        assert stadium.created_at.year == 2024

    @pytest.mark.asyncio
    async def test_list_empty(self, client):
        query = client.table.return_value.select.return_value.eq.return_value.order.return_value
        query.execute.return_value = response(None)

        assert await SupabaseStadiumRepository(client).list_for_user("u-alice") == []

    @pytest.mark.asyncio
    async def test_create_sends_owner(self, client):
        client.table.return_value.insert.return_value.execute.return_value = response([ROW])
        draft = StadiumCreate(name="Fenway Park", city="Boston, MA", sport="Baseball")

        stadium = await SupabaseStadiumRepository(client).create("u-alice", draft)

        sent = client.table.return_value.insert.call_args[0][0]
        assert sent["user_id"] == "u-alice"
        assert sent["visited"] is True
        assert stadium.name == "Fenway Park"

    @pytest.mark.asyncio
    async def test_update_is_owner_scoped(self, client):
        update = client.table.return_value.update
        scoped = update.return_value.eq.return_value.eq
        scoped.return_value.execute.return_value = response([{**ROW, "visited": False}])

        stadium = await SupabaseStadiumRepository(client).update(
            "7", "u-alice", StadiumUpdate(visited=False)
        )

        update.assert_called_with({"visited": False})
        update.return_value.eq.assert_called_with("id", "7")
        scoped.assert_called_with("user_id", "u-alice")
        assert stadium.visited is False

    @pytest.mark.asyncio
    async def test_update_no_rows(self, client):
        scoped = client.table.return_value.update.return_value.eq.return_value.eq
        scoped.return_value.execute.return_value = response([])

        result = await SupabaseStadiumRepository(client).update("7", "u-bob", StadiumUpdate(visited=False))

        assert result is None

    @pytest.mark.asyncio
    async def test_delete(self, client):
        scoped = client.table.return_value.delete.return_value.eq.return_value.eq
        scoped.return_value.execute.return_value = response([ROW])

        assert await SupabaseStadiumRepository(client).delete("7", "u-alice") is True
        scoped.assert_called_with("user_id", "u-alice")

    @pytest.mark.asyncio
    async def test_delete_no_rows(self, client):
        scoped = client.table.return_value.delete.return_value.eq.return_value.eq
        scoped.return_value.execute.return_value = response([])

        assert await SupabaseStadiumRepository(client).delete("7", "u-bob") is False

    @pytest.mark.asyncio
    async def test_errors_propagate(self, client):
        client.table.return_value.insert.return_value.execute.side_effect = RuntimeError("boom")
        draft = StadiumCreate(name="a", city="b", sport="c")

        with pytest.raises(RuntimeError, match="boom"):
            await SupabaseStadiumRepository(client).create("u-alice", draft)


class TestProfileRepository:
    @pytest.mark.asyncio
    async def test_get_by_id(self, client):
        query = client.table.return_value.select.return_value.eq.return_value
        query.execute.return_value = response([{"id": "u-alice", "username": "alice", "email": "a@x.io"}])

        identity = await SupabaseProfileRepository(client).get_by_id("u-alice")

        client.table.assert_called_with("users")
        assert identity.username == "alice"

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, client):
        query = client.table.return_value.select.return_value.eq.return_value
        query.execute.return_value = response([])

        assert await SupabaseProfileRepository(client).get_by_id("u-nobody") is None

    @pytest.mark.asyncio
    async def test_create(self, client):
        client.table.return_value.insert.return_value.execute.return_value = response([])
        profile = ProfileCreate(id="u-alice", username="alice", email="a@x.io")

        identity = await SupabaseProfileRepository(client).create(profile)

        client.table.return_value.insert.assert_called_with(profile.model_dump())
        assert identity.id == "u-alice"
