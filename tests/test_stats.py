"""
Tests for derived views: grouping, stats, map points.
"""

from datetime import datetime, timezone

from core.domain.models import Stadium
from core.services.stats_service import group_by_sport, compute_stats, mappable


def make(id, name, sport, city="Boston, MA", visited=True, lat=None, lng=None, created_at=None):
    return Stadium(id=id, name=name, city=city, sport=sport, visited=visited,
                   lat=lat, lng=lng, created_at=created_at)


class TestGroupBySport:
    def test_groups_in_first_seen_order(self):
        stadiums = [
            make("1", "Fenway Park", "Baseball"),
            make("2", "TD Garden", "Hockey"),
            make("3", "Wrigley Field", "Baseball", city="Chicago, IL"),
        ]

        groups = group_by_sport(stadiums)

        assert list(groups) == ["Baseball", "Hockey"]
        assert [s.id for s in groups["Baseball"]] == ["1", "3"]
        assert [s.id for s in groups["Hockey"]] == ["2"]

    def test_empty(self):
        assert group_by_sport([]) == {}


class TestComputeStats:
    def test_counts(self):
        stadiums = [
            make("1", "Fenway Park", "Baseball"),
            make("2", "TD Garden", "Hockey", visited=False),
            make("3", "Wrigley Field", "Baseball", city="Chicago, IL"),
            make("4", "Gillette Stadium", "Football", city="boston, ma ", visited=False),
        ]

        stats = compute_stats(stadiums)

        assert stats.total == 4
        assert stats.visited == 2
        assert stats.to_visit == 2
        assert stats.cities == 2
        assert [(c.sport, c.count) for c in stats.by_sport][0] == ("Baseball", 2)

    def test_empty(self):
        stats = compute_stats([])
        assert stats.total == 0
        assert stats.by_sport == []
        assert stats.recent == []

    def test_recent_newest_first_and_capped(self):
        stadiums = [
            make(str(i), f"Stadium {i}", "Baseball",
                 created_at=datetime(2024, 1, i + 1, tzinfo=timezone.utc))
            for i in range(8)
        ]

        recent = compute_stats(stadiums).recent

        assert [s.id for s in recent] == ["7", "6", "5", "4", "3", "2"]

    def test_recent_undated_last(self):
        stadiums = [
            make("a", "Undated A", "Hockey"),
            make("b", "Dated", "Hockey", created_at=datetime(2024, 5, 1)),
            make("c", "Undated C", "Hockey"),
        ]

        recent = compute_stats(stadiums).recent

        assert [s.id for s in recent] == ["b", "a", "c"]


class TestMappable:
    def test_only_records_with_both_coordinates(self):
        stadiums = [
            make("1", "Fenway Park", "Baseball", lat=42.3467, lng=-71.0972),
            make("2", "Backyard", "Baseball", lat=42.0),
            make("3", "Somewhere", "Baseball"),
            make("4", "Null Island", "Soccer", lat=0.0, lng=0.0),
        ]

        assert [s.id for s in mappable(stadiums)] == ["1", "4"]
