"""
Supabase implementation of Profile repository (`users` table).
"""

from typing import Optional
from supabase import Client
from core.domain.constants import USERS_TABLE
from core.domain.models import Identity, ProfileCreate
from core.interfaces.repositories import IProfileRepository
from infrastructure.database.supabase_client import run_sync


class SupabaseProfileRepository(IProfileRepository):
    """Supabase implementation of profile repository"""

    def __init__(self, client: Client):
        self.client = client

    def _to_model(self, data: dict) -> Identity:
        """Convert database row to Identity model"""
        return Identity(
            id=str(data["id"]),
            username=data.get("username") or "",
            email=data.get("email") or "",
        )

    @run_sync
    def _get_by_id_sync(self, user_id: str) -> Optional[dict]:
        response = self.client.table(USERS_TABLE).select("*").eq("id", user_id).execute()
        return response.data[0] if response.data else None

    async def get_by_id(self, user_id: str) -> Optional[Identity]:
        data = await self._get_by_id_sync(user_id)
        return self._to_model(data) if data else None

    @run_sync
    def _create_sync(self, profile: ProfileCreate) -> dict:
        response = self.client.table(USERS_TABLE).insert(profile.model_dump()).execute()
        return response.data[0] if response.data else profile.model_dump()

    async def create(self, profile: ProfileCreate) -> Identity:
        data = await self._create_sync(profile)
        return self._to_model(data)
