"""
Supabase implementation of Stadium repository.
"""

from typing import Optional, List
from supabase import Client
from core.domain.constants import STADIUMS_TABLE
from core.domain.models import Stadium, StadiumCreate, StadiumUpdate
from core.interfaces.repositories import IStadiumRepository
from infrastructure.database.supabase_client import run_sync


def _to_float(value) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)


class SupabaseStadiumRepository(IStadiumRepository):
    """Supabase implementation of stadium repository. Every write is owner-scoped."""

    def __init__(self, client: Client):
        self.client = client

    def _to_model(self, data: dict) -> Stadium:
        """Convert database row to Stadium model"""
        return Stadium(
            id=str(data["id"]),
            user_id=str(data["user_id"]) if data.get("user_id") else None,
            name=data.get("name") or "",
            city=data.get("city") or "",
            sport=data.get("sport") or "",
            lat=_to_float(data.get("lat")),
            lng=_to_float(data.get("lng")),
            visited=data["visited"] if data.get("visited") is not None else True,
            created_at=data.get("created_at"),
        )

    @run_sync
    def _list_for_user_sync(self, user_id: str) -> List[dict]:
        response = self.client.table(STADIUMS_TABLE).select("*")\
            .eq("user_id", user_id)\
            .order("created_at")\
            .execute()
        return response.data if response.data else []

    async def list_for_user(self, user_id: str) -> List[Stadium]:
        data = await self._list_for_user_sync(user_id)
        return [self._to_model(d) for d in data]

    @run_sync
    def _create_sync(self, user_id: str, draft: StadiumCreate) -> dict:
        data = draft.model_dump()
        data["user_id"] = user_id
        response = self.client.table(STADIUMS_TABLE).insert(data).execute()
        return response.data[0]

    async def create(self, user_id: str, draft: StadiumCreate) -> Stadium:
        data = await self._create_sync(user_id, draft)
        return self._to_model(data)

    @run_sync
    def _update_sync(self, stadium_id: str, user_id: str, fields: StadiumUpdate) -> Optional[dict]:
        # exclude_unset (not exclude_none) so coordinates can be cleared explicitly
        update_dict = fields.model_dump(exclude_unset=True)
        if not update_dict:
            return None
        response = self.client.table(STADIUMS_TABLE).update(update_dict)\
            .eq("id", stadium_id)\
            .eq("user_id", user_id)\
            .execute()
        return response.data[0] if response.data else None

    async def update(self, stadium_id: str, user_id: str, fields: StadiumUpdate) -> Optional[Stadium]:
        data = await self._update_sync(stadium_id, user_id, fields)
        return self._to_model(data) if data else None

    @run_sync
    def _delete_sync(self, stadium_id: str, user_id: str) -> List[dict]:
        response = self.client.table(STADIUMS_TABLE).delete()\
            .eq("id", stadium_id)\
            .eq("user_id", user_id)\
            .execute()
        return response.data if response.data else []

    async def delete(self, stadium_id: str, user_id: str) -> bool:
        deleted = await self._delete_sync(stadium_id, user_id)
        return len(deleted) > 0
