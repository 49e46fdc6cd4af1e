"""
Supabase client factory.
Each chat session gets its own client: the auth session (and the JWT that
row-level security sees) lives inside the client instance.
"""

from supabase import create_client, Client, ClientOptions
import asyncio
import concurrent.futures
import logging
from functools import wraps
from typing import Optional

from config.settings import Settings

logger = logging.getLogger(__name__)


class SupabaseConfigError(RuntimeError):
    """Supabase credentials are missing"""


def create_session_client(settings: Settings, storage=None) -> Client:
    """
    Build a client for one session.
    `storage` persists the auth token (see infrastructure.auth.session_storage).
    """
    if not settings.supabase_url or not settings.supabase_key:
        raise SupabaseConfigError(
            "Supabase credentials not configured. Required env vars: SUPABASE_URL, SUPABASE_KEY"
        )

    option_kwargs = {"schema": settings.db_schema}
    if storage is not None:
        option_kwargs["storage"] = storage

    return create_client(
        settings.supabase_url,
        settings.supabase_key,
        options=ClientOptions(**option_kwargs),
    )


# Dedicated bounded thread pool for DB/auth operations: the Supabase Python
# SDK is synchronous and many sessions may call it concurrently.
_db_executor: Optional[concurrent.futures.ThreadPoolExecutor] = None


def _get_executor() -> concurrent.futures.ThreadPoolExecutor:
    global _db_executor
    if _db_executor is None:
        _db_executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=10,
            thread_name_prefix="supabase-db",
        )
    return _db_executor


def shutdown_executor() -> None:
    global _db_executor
    if _db_executor is not None:
        _db_executor.shutdown(wait=False)
        _db_executor = None


def run_sync(func):
    """
    Decorator to run synchronous Supabase operations in async context.
    Uses a dedicated bounded thread pool instead of the default executor.
    """
    @wraps(func)
    async def wrapper(*args, **kwargs):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(_get_executor(), lambda: func(*args, **kwargs))
    return wrapper
