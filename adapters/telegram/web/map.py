"""
Web map - lightweight aiohttp app served alongside the bot.
Access: GET /map/{token} (token comes from the bot's "Open full map" button)
"""

import json
import logging
from html import escape as html_escape
from typing import Sequence

from aiohttp import web

from core.domain.constants import (
    LEAFLET_VERSION, MAP_DEFAULT_CENTER, MAP_DEFAULT_ZOOM, MAP_MAX_ZOOM, MAP_TILE_URL,
)
from core.domain.models import Stadium
from core.services.stats_service import mappable
from adapters.telegram.sessions import SessionRegistry

logger = logging.getLogger(__name__)


def _markers_json(stadiums: Sequence[Stadium]) -> str:
    markers = [
        {
            "name": s.name,
            "city": s.city,
            "sport": s.sport,
            "visited": s.visited,
            "lat": s.lat,
            "lng": s.lng,
        }
        for s in mappable(stadiums)
    ]
    # Safe inside a <script> block
    return json.dumps(markers).replace("</", "<\\/")


def render_map_page(username: str, stadiums: Sequence[Stadium]) -> str:
    """Leaflet page with one marker per stadium that has coordinates"""
    lat, lng = MAP_DEFAULT_CENTER
    leaflet = f"https://unpkg.com/leaflet@{LEAFLET_VERSION}/dist"
    title = html_escape(username)
    count = len(mappable(stadiums))

    return f"""<!DOCTYPE html>
<html><head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{title} · Stadium Map</title>
<link rel="stylesheet" href="{leaflet}/leaflet.css">
<script src="{leaflet}/leaflet.js"></script>
<style>
  html, body {{ height: 100%; margin: 0; font-family: -apple-system, BlinkMacSystemFont, sans-serif; }}
  header {{ padding: 10px 16px; background: #0d1117; color: #e6edf3; }}
  .muted {{ color: #8b949e; font-size: 0.85em; }}
  #map {{ position: absolute; top: 56px; bottom: 0; left: 0; right: 0; }}
</style>
</head><body>
<header>{title} <span class="muted">&middot; {count} stadium(s) on the map</span></header>
<div id="map"></div>
<script>
  var map = L.map("map").setView([{lat}, {lng}], {MAP_DEFAULT_ZOOM});
  L.tileLayer("{MAP_TILE_URL}", {{
    maxZoom: {MAP_MAX_ZOOM},
    attribution: "&copy; OpenStreetMap contributors"
  }}).addTo(map);

  var stadiums = {_markers_json(stadiums)};
  stadiums.forEach(function (s) {{
    var popup = document.createElement("div");
    var name = document.createElement("b");
    name.textContent = s.name;
    var details = document.createElement("div");
    details.textContent = s.city + " · " + s.sport + " · " + (s.visited ? "Visited" : "To visit");
    popup.appendChild(name);
    popup.appendChild(details);
    L.marker([s.lat, s.lng]).addTo(map).bindPopup(popup);
  }});
</script>
</body></html>"""


def create_web_app(registry: SessionRegistry) -> web.Application:
    """Create aiohttp app with /health and /map/{token} routes."""

    async def handle_health(request: web.Request) -> web.Response:
        return web.json_response({"status": "ok", "sessions": registry.active_count})

    async def handle_map(request: web.Request) -> web.Response:
        store = registry.store_for_token(request.match_info["token"])
        if store is None or not store.is_authenticated:
            return web.Response(text="Not found", status=404)

        html = render_map_page(store.identity.username, store.stadiums)
        return web.Response(text=html, content_type="text/html")

    app = web.Application()
    app.router.add_get("/health", handle_health)
    app.router.add_get("/map/{token}", handle_map)
    return app
