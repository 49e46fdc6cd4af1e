"""
Tests for message rendering.
"""

from core.domain.models import Identity, Stadium
from core.services.stadium_form import StadiumForm
from core.services.stats_service import compute_stats
from adapters.telegram.views import render_stadium_list, render_draft, render_profile


def make(id, name, sport, visited=True):
    return Stadium(id=id, name=name, city="Boston, MA", sport=sport, visited=visited)


ALICE = Identity(id="u-alice", username="alice", email="alice@example.com")


class TestRenderStadiumList:
    def test_empty(self):
        assert "No stadiums yet" in render_stadium_list([])

    def test_grouped_by_sport(self):
        text = render_stadium_list([
            make("1", "Fenway Park", "Baseball"),
            make("2", "TD Garden", "Hockey", visited=False),
            make("3", "Wrigley Field", "Baseball"),
        ])

        assert "(3)" in text
        assert text.index("Baseball") < text.index("Hockey")
        assert text.index("Wrigley Field") < text.index("TD Garden")
        assert "To visit" in text

    def test_escapes_html(self):
        text = render_stadium_list([make("1", "A & <B>", "Baseball")])
        assert "A &amp; &lt;B&gt;" in text


class TestRenderDraft:
    def test_with_coordinates(self):
        form = StadiumForm(name="Fenway Park", city="Boston, MA", sport="MLB", lat=42.3467, lng=-71.0972)
        text = render_draft(form)
        assert "Fenway Park" in text
        assert "42.3467, -71.0972" in text

    def test_blank_fields_shown_as_dash(self):
        text = render_draft(StadiumForm(name="Fenway Park"))
        assert "📍 -" in text


class TestRenderProfile:
    def test_empty_profile(self):
        text = render_profile(ALICE, compute_stats([]))
        assert "alice" in text
        assert "haven't added any stadiums" in text

    def test_stats_and_recent(self):
        stadiums = [make("1", "Fenway Park", "Baseball"), make("2", "TD Garden", "Hockey", visited=False)]
        text = render_profile(ALICE, compute_stats(stadiums))

        assert "Total: <b>2</b>" in text
        assert "Visited: <b>1</b>" in text
        assert "To visit: <b>1</b>" in text
        assert "TD Garden" in text
