"""
Tests for the aiohttp web map and health check.
"""

import pytest
from aiohttp import test_utils

from core.domain.models import Stadium
from adapters.telegram.sessions import SessionRegistry
from adapters.telegram.web.map import create_web_app, render_map_page
from fakes import FakeAuthProvider, FakeProfileRepository, FakeStadiumRepository
from core.services.profile_store import ProfileStore


@pytest.fixture
def registry(backend):
    def factory(user_key):
        return ProfileStore(
            auth=FakeAuthProvider(backend),
            profile_repo=FakeProfileRepository(backend),
            stadium_repo=FakeStadiumRepository(backend),
        )
    return SessionRegistry(factory)


class TestRenderMapPage:
    def test_markers_for_mappable_only(self):
        stadiums = [
            Stadium(id="1", name="Fenway Park", city="Boston, MA", sport="Baseball",
                    lat=42.3467, lng=-71.0972),
            Stadium(id="2", name="Backyard", city="Boston, MA", sport="Baseball"),
        ]

        html = render_map_page("alice", stadiums)

        assert "leaflet@1.9.4" in html
        assert '"Fenway Park"' in html
        assert "Backyard" not in html
        assert "setView([37.8, -96.0], 4)" in html

    def test_escapes_user_content(self):
        stadiums = [
            Stadium(id="1", name="</script><script>alert(1)</script>", city="X", sport="Y",
                    lat=1.0, lng=2.0),
        ]

        html = render_map_page("<b>alice</b>", stadiums)

        assert "</script><script>alert(1)" not in html
        assert "&lt;b&gt;alice&lt;/b&gt;" in html


class TestWebApp:
    @pytest.mark.asyncio
    async def test_health(self, registry):
        async with test_utils.TestClient(test_utils.TestServer(create_web_app(registry))) as client:
            resp = await client.get("/health")
            assert resp.status == 200
            assert (await resp.json())["status"] == "ok"

    @pytest.mark.asyncio
    async def test_unknown_token(self, registry):
        async with test_utils.TestClient(test_utils.TestServer(create_web_app(registry))) as client:
            resp = await client.get("/map/nope")
            assert resp.status == 404

    @pytest.mark.asyncio
    async def test_logged_out_session_is_not_found(self, registry):
        await registry.get(1)
        token = registry.map_token(1)

        async with test_utils.TestClient(test_utils.TestServer(create_web_app(registry))) as client:
            resp = await client.get(f"/map/{token}")
            assert resp.status == 404

    @pytest.mark.asyncio
    async def test_map_for_logged_in_user(self, registry, backend):
        user_id = backend.add_account("alice", "alice@example.com")
        backend.add_stadium(user_id, "Fenway Park", "Boston, MA", "Baseball", lat=42.3467, lng=-71.0972)
        store = await registry.get(1)
        await store.login("alice@example.com", "secret1")
        token = registry.map_token(1)

        async with test_utils.TestClient(test_utils.TestServer(create_web_app(registry))) as client:
            resp = await client.get(f"/map/{token}")
            assert resp.status == 200
            body = await resp.text()

        assert "Fenway Park" in body
        assert "alice" in body
