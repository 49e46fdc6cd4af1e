"""
Derived views over a user's stadium list: grouping, stats, map points.
Pure functions - no I/O, safe to call on every render.
"""

from collections import Counter
from datetime import datetime, timezone
from typing import Dict, List, Sequence

from core.domain.constants import RECENT_STADIUMS_LIMIT
from core.domain.models import Stadium, StadiumStats, SportCount


def group_by_sport(stadiums: Sequence[Stadium]) -> Dict[str, List[Stadium]]:
    """Group records by sport label, groups in first-seen order"""
    groups: Dict[str, List[Stadium]] = {}
    for stadium in stadiums:
        groups.setdefault(stadium.sport, []).append(stadium)
    return groups


def mappable(stadiums: Sequence[Stadium]) -> List[Stadium]:
    """Records that can be plotted (both coordinates present)"""
    return [s for s in stadiums if s.has_coordinates]


def _created_utc(stadium: Stadium) -> datetime:
    created = stadium.created_at
    if created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    return created


def _recent_first(stadiums: Sequence[Stadium]) -> List[Stadium]:
    # Newest first; records without a timestamp follow in list order
    dated = sorted(
        (s for s in stadiums if s.created_at is not None),
        key=_created_utc,
        reverse=True,
    )
    return dated + [s for s in stadiums if s.created_at is None]


def compute_stats(stadiums: Sequence[Stadium]) -> StadiumStats:
    total = len(stadiums)
    visited = sum(1 for s in stadiums if s.visited)
    by_sport = Counter(s.sport for s in stadiums)

    return StadiumStats(
        total=total,
        visited=visited,
        to_visit=total - visited,
        cities=len({s.city.strip().lower() for s in stadiums}),
        by_sport=[SportCount(sport=sport, count=count) for sport, count in by_sport.most_common()],
        recent=_recent_first(stadiums)[:RECENT_STADIUMS_LIMIT],
    )
