"""
Repository interfaces - abstractions for data access.
This allows swapping implementations (Supabase -> in-memory fakes in tests, etc.)
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from core.domain.models import (
    Identity, ProfileCreate,
    Stadium, StadiumCreate, StadiumUpdate,
)


class IProfileRepository(ABC):
    """Interface for rows of the `users` table"""

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[Identity]:
        """Get profile by auth identity id"""
        pass

    @abstractmethod
    async def create(self, profile: ProfileCreate) -> Identity:
        """Insert the profile row for a freshly signed-up account"""
        pass


class IStadiumRepository(ABC):
    """Interface for rows of the `stadiums` table"""

    @abstractmethod
    async def list_for_user(self, user_id: str) -> List[Stadium]:
        """Get every stadium owned by a user"""
        pass

    @abstractmethod
    async def create(self, user_id: str, draft: StadiumCreate) -> Stadium:
        """Insert a stadium owned by user_id and return the stored row"""
        pass

    @abstractmethod
    async def update(self, stadium_id: str, user_id: str, fields: StadiumUpdate) -> Optional[Stadium]:
        """Update a stadium scoped by (id AND owner). None when no row matched"""
        pass

    @abstractmethod
    async def delete(self, stadium_id: str, user_id: str) -> bool:
        """Delete a stadium scoped by (id AND owner). False when no row matched"""
        pass
