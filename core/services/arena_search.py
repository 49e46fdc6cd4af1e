"""
Arena catalog - static reference dataset and type-ahead search over it.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from pydantic import ValidationError

from core.domain.constants import ARENA_SEARCH_LIMIT
from core.domain.models import Arena

logger = logging.getLogger(__name__)

DEFAULT_ARENAS_PATH = Path(__file__).resolve().parent.parent / "data" / "arenas.json"


class ArenaDataError(ValueError):
    """Raised when the arena reference file is missing or malformed"""


class ArenaCatalog:
    """Read-only list of known venues, searchable by team or league"""

    def __init__(self, arenas: Iterable[Arena]):
        self._arenas: List[Arena] = list(arenas)

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "ArenaCatalog":
        json_path = Path(path) if path is not None else DEFAULT_ARENAS_PATH
        if not json_path.exists():
            raise ArenaDataError(f"Arena reference file not found: {json_path}")

        try:
            raw = json.loads(json_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ArenaDataError(f"Arena reference file is not valid JSON: {e}") from e

        if not isinstance(raw, list):
            raise ArenaDataError("Arena reference file must contain a list of entries")

        arenas = []
        for index, entry in enumerate(raw):
            try:
                arenas.append(Arena(**entry))
            except (TypeError, ValidationError) as e:
                raise ArenaDataError(f"Invalid arena entry #{index}: {e}") from e

        logger.info(f"Loaded {len(arenas)} arenas from {json_path.name}")
        return cls(arenas)

    def __len__(self) -> int:
        return len(self._arenas)

    def get(self, index: int) -> Optional[Arena]:
        """Arena by position (positions are stable for the catalog's lifetime)"""
        if 0 <= index < len(self._arenas):
            return self._arenas[index]
        return None

    def index_of(self, arena: Arena) -> int:
        return self._arenas.index(arena)

    def search(self, query: str, limit: int = ARENA_SEARCH_LIMIT) -> List[Arena]:
        """Case-insensitive substring match on team or league, first `limit` hits"""
        needle = query.strip().lower()
        if not needle:
            return []

        matches = []
        for arena in self._arenas:
            if needle in arena.team.lower() or needle in arena.league.lower():
                matches.append(arena)
                if len(matches) >= limit:
                    break
        return matches
