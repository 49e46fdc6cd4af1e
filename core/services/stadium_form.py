"""
Pending "add stadium" draft - what the creation form holds before saving.
"""

from typing import List, Optional, Union
from pydantic import BaseModel

from core.domain.constants import REQUIRED_STADIUM_FIELDS, MAX_FIELD_LENGTH
from core.domain.models import Arena, StadiumCreate


def missing_fields(draft: Union[StadiumCreate, "StadiumForm"]) -> List[str]:
    """Required fields that are empty or whitespace only"""
    return [
        field for field in REQUIRED_STADIUM_FIELDS
        if not (getattr(draft, field) or "").strip()
    ]


class StadiumForm(BaseModel):
    """Form state; serializable so it can live in FSM storage between messages"""
    name: str = ""
    city: str = ""
    sport: str = ""
    lat: Optional[float] = None
    lng: Optional[float] = None

    def apply_arena(self, arena: Arena) -> "StadiumForm":
        """Copy a reference arena into the draft (team -> name, league -> sport)"""
        return StadiumForm(
            name=arena.team,
            city=arena.city,
            sport=arena.league,
            lat=arena.lat,
            lng=arena.lng,
        )

    def with_field(self, field: str, value: str) -> "StadiumForm":
        if field not in REQUIRED_STADIUM_FIELDS:
            raise ValueError(f"Unknown form field: {field}")
        return self.model_copy(update={field: value.strip()})

    def validate_fields(self) -> tuple[bool, str]:
        if missing_fields(self):
            return False, "Please fill in all fields"
        for field in REQUIRED_STADIUM_FIELDS:
            if len(getattr(self, field).strip()) > MAX_FIELD_LENGTH:
                return False, f"{field.capitalize()} must be at most {MAX_FIELD_LENGTH} characters"
        return True, ""

    def to_create(self) -> StadiumCreate:
        return StadiumCreate(
            name=self.name.strip(),
            city=self.city.strip(),
            sport=self.sport.strip(),
            lat=self.lat,
            lng=self.lng,
            visited=True,
        )
