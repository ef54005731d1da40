import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict

from aiogram import BaseMiddleware
from aiogram.types import TelegramObject, Update

logger = logging.getLogger("middleware")


class HandlerTimeoutMiddleware(BaseMiddleware):
    """Aborts handling of a single update once it exceeds `timeout` seconds."""

    def __init__(self, timeout: float):
        self.timeout = timeout

    async def __call__(
        self,
        handler: Callable[[TelegramObject, Dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: Dict[str, Any],
    ) -> Any:
        loop = asyncio.get_running_loop()
        started = loop.time()
        try:
            return await asyncio.wait_for(handler(event, data), timeout=self.timeout)
        except asyncio.TimeoutError:
            # a TimeoutError raised by the handler itself is not ours to swallow
            if loop.time() - started < self.timeout:
                raise
            update_id = event.update_id if isinstance(event, Update) else None
            logger.warning(f"⏱ Update {update_id} exceeded {self.timeout}s, handling aborted")
            return None
