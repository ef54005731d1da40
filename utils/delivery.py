import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Optional

from aiogram.exceptions import TelegramAPIError

logger = logging.getLogger("delivery")


@dataclass(frozen=True)
class Delivery:
    """Outcome of a best-effort call to the Bot API."""

    ok: bool
    result: Any = None
    error: Optional[Exception] = None


async def deliver(call: Awaitable[Any], what: str = "reply") -> Delivery:
    """
    Awaits an outbound Bot API call and reports the outcome instead of raising.
    Failures are logged and never retried.
    """
    try:
        result = await call
    except TelegramAPIError as e:
        logger.warning(f"⚠️ {what} failed: {e}")
        return Delivery(ok=False, error=e)
    return Delivery(ok=True, result=result)
