import asyncio
import logging
import sys
from typing import List

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode

from utils.logger import configure_logging
from utils.config import ConfigError, Settings, load_settings
from utils.catalog import CatalogEntry, CatalogError, load_catalog
from utils.middleware import HandlerTimeoutMiddleware
from utils.transport import TransportPlan, run_transport, select_transport
from handlers.start import router as start_router
from handlers.identify import router as identify_router
from handlers.inline import router as inline_router
from handlers.audio import router as audio_router


logger = logging.getLogger("AudioBot")


# ───────────────────────────────────────────────
# BOT FACTORY
# ───────────────────────────────────────────────
def make_bot(settings: Settings) -> Bot:
    return Bot(
        token=settings.bot_token,
        default=DefaultBotProperties(parse_mode=ParseMode.HTML),
    )


def make_dispatcher(settings: Settings, catalog: List[CatalogEntry]) -> Dispatcher:
    # settings and catalog are injected into handlers as keyword arguments
    dp = Dispatcher(settings=settings, catalog=catalog)
    dp.update.outer_middleware(HandlerTimeoutMiddleware(settings.handler_timeout))
    dp.include_router(start_router)
    dp.include_router(identify_router)
    dp.include_router(inline_router)
    # ingestion is switched by settings.ingest_enabled inside the router
    dp.include_router(audio_router)
    return dp


# ───────────────────────────────────────────────
# STARTUP REPORT
# ───────────────────────────────────────────────
def startup_report(settings: Settings, catalog: List[CatalogEntry], plan: TransportPlan):
    logger.info("═════════════ 🎵 AudioBot Startup Check ═════════════")
    logger.info(f"💬 Telegram Token: {'✅ Loaded' if settings.bot_token else '❌ Missing'}")
    logger.info(f"📚 Catalog: {len(catalog)} entries from {settings.catalog_path}")
    logger.info(f"🚚 Transport: {plan.mode.value} ({settings.environment})")
    logger.info(f"📥 Ingestion: {'enabled' if settings.ingest_enabled else 'disabled'}")
    logger.info("═════════════════════════════════════════════════════")


def prepare():
    """Reads everything needed before serving. Any failure here is fatal."""
    try:
        settings = load_settings()
    except ConfigError as e:
        configure_logging()
        logger.error(f"❌ {e}")
        sys.exit(1)

    configure_logging(settings.log_level)
    try:
        catalog = load_catalog(settings.catalog_path)
        plan = select_transport(settings)
    except (CatalogError, ConfigError) as e:
        logger.error(f"❌ {e}")
        sys.exit(1)
    return settings, catalog, plan


# ───────────────────────────────────────────────
# MAIN
# ───────────────────────────────────────────────
async def serve(settings: Settings, catalog: List[CatalogEntry], plan: TransportPlan):
    bot = make_bot(settings)
    dp = make_dispatcher(settings, catalog)
    await run_transport(bot, dp, plan, settings)


def main():
    settings, catalog, plan = prepare()
    startup_report(settings, catalog, plan)
    try:
        asyncio.run(serve(settings, catalog, plan))
    except Exception:
        logger.exception("💥 Bot stopped with an error")
        sys.exit(1)


if __name__ == "__main__":
    main()
