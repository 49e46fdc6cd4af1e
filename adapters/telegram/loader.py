"""
Telegram bot loader - builds the bot, dispatcher and session registry.
Nothing is created at import time; main.py wires everything together.
"""

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode
from aiogram.fsm.storage.memory import MemoryStorage

from config.features import features
from config.settings import Settings
from core.services.arena_search import ArenaCatalog
from core.services.profile_store import ProfileStore
from adapters.telegram.sessions import SessionRegistry, StoreFactory

# Infrastructure
from infrastructure.auth import SupabaseAuthProvider, FileSessionStorage
from infrastructure.database import (
    SupabaseProfileRepository,
    SupabaseStadiumRepository,
    create_session_client,
)


def create_bot(settings: Settings) -> Bot:
    return Bot(
        token=settings.telegram_bot_token,
        default=DefaultBotProperties(parse_mode=ParseMode.HTML),
    )


def build_store_factory(settings: Settings) -> StoreFactory:
    """Each Telegram user gets a separate Supabase client, auth session and token file"""

    def factory(user_key: int) -> ProfileStore:
        storage = None
        if features.PERSIST_SESSIONS:
            storage = FileSessionStorage(settings.session_dir / f"{user_key}.json")
        client = create_session_client(settings, storage=storage)
        return ProfileStore(
            auth=SupabaseAuthProvider(client),
            profile_repo=SupabaseProfileRepository(client),
            stadium_repo=SupabaseStadiumRepository(client),
        )

    return factory


def create_dispatcher(settings: Settings, registry: SessionRegistry, arenas: ArenaCatalog) -> Dispatcher:
    """Dispatcher with shared objects exposed to handlers as keyword arguments"""
    dp = Dispatcher(storage=MemoryStorage())
    dp["settings"] = settings
    dp["registry"] = registry
    dp["arenas"] = arenas
    return dp
