"""
Stadium Tracker Bot - Main entry point.

Log the stadiums and arenas you've been to, see them on a map,
and keep count per sport.
"""

import asyncio
import logging
import sys
from aiohttp import web
from aiogram import Bot
from aiogram.exceptions import TelegramConflictError, TelegramUnauthorizedError
from adapters.telegram.loader import create_bot, create_dispatcher, build_store_factory
from adapters.telegram.handlers import routers
from adapters.telegram.middleware import SessionMiddleware
from adapters.telegram.sessions import SessionRegistry
from adapters.telegram.web.map import create_web_app
from config.features import features
from config.settings import settings
from core.services.arena_search import ArenaCatalog, ArenaDataError
from infrastructure.database import shutdown_executor

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler("bot.log", encoding="utf-8"),
    ],
)
logger = logging.getLogger(__name__)

# Set DEBUG level only for our app loggers, not for noisy libraries
if features.DEBUG_MODE or settings.debug:
    for name in ['adapters', 'core', 'infrastructure', '__main__']:
        logging.getLogger(name).setLevel(logging.DEBUG)
    # Silence noisy HTTP debug logs
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)
    logging.getLogger('hpack').setLevel(logging.WARNING)

# Retry settings
MAX_RETRIES = 5
RETRY_DELAY = 10  # seconds


async def run_web_server(registry: SessionRegistry) -> web.AppRunner:
    """Run aiohttp web map + health check alongside the bot."""
    app = create_web_app(registry)
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "0.0.0.0", settings.port)
    await site.start()
    logger.info(f"Web server running on port {settings.port} (/health, /map/<token>)")
    return runner


def check_settings() -> None:
    missing = [
        name for name, value in (
            ("TELEGRAM_BOT_TOKEN", settings.telegram_bot_token),
            ("SUPABASE_URL", settings.supabase_url),
            ("SUPABASE_KEY", settings.supabase_key),
        )
        if not value
    ]
    if missing:
        logger.error(f"Missing required settings: {', '.join(missing)}")
        sys.exit(1)


async def poll(bot: Bot, dp) -> None:
    retries = 0
    while retries < MAX_RETRIES:
        try:
            await dp.start_polling(bot)
            break  # Normal exit

        except TelegramConflictError:
            retries += 1
            if retries >= MAX_RETRIES:
                logger.error(
                    "Another bot instance is running with the same token.\n"
                    "   Stop the other instance or wait 1-2 minutes for Telegram\n"
                    "   to release the connection, then start again."
                )
                sys.exit(1)
            else:
                logger.warning(
                    f"Conflict detected (another instance running). "
                    f"Retry {retries}/{MAX_RETRIES} in {RETRY_DELAY}s..."
                )
                await asyncio.sleep(RETRY_DELAY)

        except TelegramUnauthorizedError:
            logger.error("Bot token was revoked or is invalid.")
            sys.exit(1)

        except Exception as e:
            logger.error(f"Unexpected error: {e}")
            retries += 1
            if retries < MAX_RETRIES:
                logger.info(f"Retrying in {RETRY_DELAY}s... ({retries}/{MAX_RETRIES})")
                await asyncio.sleep(RETRY_DELAY)
            else:
                raise


async def main():
    """Main function - starts the bot with graceful error handling."""

    logger.info("=== Stadium Tracker Bot Starting ===")
    logger.info("Feature Flags:")
    for key, value in features.to_dict().items():
        logger.info(f"  {key}: {value}")

    check_settings()

    try:
        arenas = ArenaCatalog.load(settings.arenas_path)
    except ArenaDataError as e:
        logger.error(f"Cannot start without arena reference data: {e}")
        sys.exit(1)

    bot = create_bot(settings)
    registry = SessionRegistry(build_store_factory(settings))
    dp = create_dispatcher(settings, registry, arenas)

    # Register middlewares
    session_middleware = SessionMiddleware(registry)
    dp.message.middleware(session_middleware)
    dp.callback_query.middleware(session_middleware)
    logger.info("Middlewares registered (sessions)")

    # Register Telegram routers
    for router in routers:
        dp.include_router(router)

    runner = await run_web_server(registry)

    # Delete webhook (if exists) and start polling
    try:
        await bot.delete_webhook(drop_pending_updates=True)
    except TelegramUnauthorizedError:
        logger.error("Invalid bot token! Check TELEGRAM_BOT_TOKEN env var.")
        sys.exit(1)

    logger.info("Stadium Tracker Bot started!")

    try:
        await poll(bot, dp)
    finally:
        registry.close()
        await runner.cleanup()
        await bot.session.close()
        shutdown_executor()
        logger.info("Bot session closed.")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Bot stopped by user (Ctrl+C)")
    except SystemExit as e:
        sys.exit(e.code)
