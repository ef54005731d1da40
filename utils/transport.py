# utils/transport.py
"""
Update transport: long-polling for local runs, webhook for deployments.

The mode is decided once from Settings before anything is started. Both
modes expose a small aiohttp health endpoint on GET /.
"""
import asyncio
import logging
import signal
from contextlib import suppress
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from aiogram import Bot, Dispatcher
from aiogram.webhook.aiohttp_server import SimpleRequestHandler, setup_application
from aiohttp import web

from utils.config import ConfigError, Settings

logger = logging.getLogger("transport")

ALLOWED_UPDATES = ("inline_query", "chosen_inline_result", "message")


class TransportMode(str, Enum):
    POLLING = "polling"
    WEBHOOK = "webhook"


@dataclass(frozen=True)
class TransportPlan:
    mode: TransportMode
    webhook_path: Optional[str] = None
    webhook_url: Optional[str] = None
    allowed_updates: Tuple[str, ...] = ALLOWED_UPDATES


def webhook_base(domain: str) -> str:
    base = domain.strip().rstrip("/")
    if "://" not in base:
        base = f"https://{base}"
    return base


def select_transport(settings: Settings) -> TransportPlan:
    if settings.use_polling or (not settings.webhook_domain and not settings.is_production):
        return TransportPlan(mode=TransportMode.POLLING)

    if not settings.webhook_domain:
        raise ConfigError("WEBHOOK_DOMAIN is required in production unless USE_POLLING=true")

    path = f"/webhook/{settings.webhook_secret}"
    return TransportPlan(
        mode=TransportMode.WEBHOOK,
        webhook_path=path,
        webhook_url=f"{webhook_base(settings.webhook_domain)}{path}",
    )


# ───────────────────────────────────────────────
# HEALTH
# ───────────────────────────────────────────────
def make_app(plan: TransportPlan) -> web.Application:
    async def health(request: web.Request) -> web.Response:
        return web.json_response({"ok": True, "mode": plan.mode.value})

    app = web.Application()
    app.router.add_get("/", health)
    return app


async def _start_site(app: web.Application, settings: Settings) -> web.AppRunner:
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, settings.host, settings.port)
    await site.start()
    logger.info(f"💓 Listening on http://{settings.host}:{settings.port}")
    return runner


# ───────────────────────────────────────────────
# RUNNERS
# ───────────────────────────────────────────────
async def run_polling(bot: Bot, dp: Dispatcher, plan: TransportPlan, settings: Settings) -> None:
    runner = await _start_site(make_app(plan), settings)
    try:
        # getUpdates is refused while a webhook is registered
        await bot.delete_webhook()
        logger.info("🔄 Bot started in polling mode")
        await dp.start_polling(bot, allowed_updates=list(plan.allowed_updates))
    finally:
        await runner.cleanup()


async def run_webhook(bot: Bot, dp: Dispatcher, plan: TransportPlan, settings: Settings) -> None:
    app = make_app(plan)
    SimpleRequestHandler(dispatcher=dp, bot=bot).register(app, path=plan.webhook_path)
    setup_application(app, dp, bot=bot)

    stop = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        with suppress(NotImplementedError):
            loop.add_signal_handler(sig, stop.set)

    runner = await _start_site(app, settings)
    try:
        await bot.set_webhook(plan.webhook_url, allowed_updates=list(plan.allowed_updates))
        logger.info(f"🔗 Webhook set to {plan.webhook_url}")
        await stop.wait()
        logger.info("🛑 Shutdown requested")
    finally:
        await runner.cleanup()


async def run_transport(bot: Bot, dp: Dispatcher, plan: TransportPlan, settings: Settings) -> None:
    if plan.mode is TransportMode.POLLING:
        await run_polling(bot, dp, plan, settings)
    else:
        await run_webhook(bot, dp, plan, settings)
