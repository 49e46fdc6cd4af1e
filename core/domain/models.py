"""
Domain models - the core of business logic.
These models are transport-agnostic (work with Telegram, the web map, tests, etc.)
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from enum import Enum


# === ENUMS ===

class AuthEvent(str, Enum):
    """Auth-state transitions raised by the auth provider"""
    INITIAL_SESSION = "INITIAL_SESSION"
    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"
    TOKEN_REFRESHED = "TOKEN_REFRESHED"
    USER_UPDATED = "USER_UPDATED"
    USER_DELETED = "USER_DELETED"
    PASSWORD_RECOVERY = "PASSWORD_RECOVERY"


# === IDENTITY ===

class AuthUser(BaseModel):
    """Account as returned by the auth provider"""
    id: str
    email: Optional[str] = None


class AuthSession(BaseModel):
    """Active provider session (token + the user it belongs to)"""
    access_token: str
    user: AuthUser


class Identity(BaseModel):
    """Authenticated user as known to this app"""
    id: str
    username: str
    email: str


class ProfileCreate(BaseModel):
    """Profile row inserted right after sign-up"""
    id: str
    username: str
    email: str


# === STADIUM ===

class StadiumBase(BaseModel):
    name: str
    city: str
    sport: str
    lat: Optional[float] = None
    lng: Optional[float] = None


class StadiumCreate(StadiumBase):
    """Draft for a new stadium record"""
    visited: bool = True


class Stadium(StadiumBase):
    """Full stadium record as stored"""
    id: str
    user_id: Optional[str] = None
    visited: bool = True
    created_at: Optional[datetime] = None

    @property
    def has_coordinates(self) -> bool:
        return self.lat is not None and self.lng is not None


class StadiumUpdate(BaseModel):
    """Partial update - only fields that were explicitly set are sent"""
    name: Optional[str] = None
    city: Optional[str] = None
    sport: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    visited: Optional[bool] = None


# === REFERENCE DATA ===

class Arena(BaseModel):
    """Entry of the static arena dataset used to pre-fill the add form"""
    team: str
    city: str
    league: str
    division: str = ""
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)


# === DERIVED ===

class SportCount(BaseModel):
    sport: str
    count: int


class StadiumStats(BaseModel):
    """Aggregate numbers shown on the profile screen"""
    total: int = 0
    visited: int = 0
    to_visit: int = 0
    cities: int = 0
    by_sport: List[SportCount] = Field(default_factory=list)
    recent: List[Stadium] = Field(default_factory=list)
