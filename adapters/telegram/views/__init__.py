from adapters.telegram.views.map_view import MapView
from adapters.telegram.views.render import render_stadium_list, render_draft, render_profile

__all__ = [
    "MapView",
    "render_stadium_list",
    "render_draft",
    "render_profile",
]
