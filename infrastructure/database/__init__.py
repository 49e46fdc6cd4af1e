from infrastructure.database.profile_repository import SupabaseProfileRepository
from infrastructure.database.stadium_repository import SupabaseStadiumRepository
from infrastructure.database.supabase_client import (
    create_session_client,
    run_sync,
    shutdown_executor,
    SupabaseConfigError,
)

__all__ = [
    "SupabaseProfileRepository",
    "SupabaseStadiumRepository",
    "create_session_client",
    "run_sync",
    "shutdown_executor",
    "SupabaseConfigError",
]
