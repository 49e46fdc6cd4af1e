from core.services.profile_store import ProfileStore
from core.services.arena_search import ArenaCatalog, ArenaDataError
from core.services.stadium_form import StadiumForm, missing_fields
from core.services.stats_service import group_by_sport, compute_stats, mappable

__all__ = [
    "ProfileStore",
    "ArenaCatalog",
    "ArenaDataError",
    "StadiumForm",
    "missing_fields",
    "group_by_sport",
    "compute_stats",
    "mappable",
]
