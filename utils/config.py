import os
import secrets
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv


class ConfigError(RuntimeError):
    """Raised when required startup configuration is missing or malformed."""


TRUE_VALUES = {"1", "true", "yes", "on"}

# Telegram accepts at most 50 results per answerInlineQuery
MAX_INLINE_RESULTS = 50


@dataclass(frozen=True)
class Settings:
    bot_token: str
    webhook_domain: Optional[str] = None
    webhook_secret: str = ""
    host: str = "0.0.0.0"
    port: int = 3000
    use_polling: bool = False
    environment: str = "development"
    catalog_path: str = "data/audios.json"
    inline_limit: int = 25
    inline_cache_time: int = 5
    handler_timeout: float = 10.0
    ingest_enabled: bool = True
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


def _flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in TRUE_VALUES


def _number(env: Mapping[str, str], name: str, default, cast):
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}")


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Builds the settings object from the process environment.

    When no mapping is given, a local .env file is loaded first and
    os.environ is used. This is the only place the environment is read.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    token = (environ.get("BOT_TOKEN") or environ.get("TELEGRAM_BOT_TOKEN") or "").strip()
    if not token:
        raise ConfigError("BOT_TOKEN is required!")

    domain = (environ.get("WEBHOOK_DOMAIN") or "").strip() or None
    secret = (environ.get("WEBHOOK_SECRET") or "").strip() or secrets.token_hex(8)

    inline_limit = _number(environ, "INLINE_LIMIT", 25, int)
    if not 1 <= inline_limit <= MAX_INLINE_RESULTS:
        raise ConfigError(f"INLINE_LIMIT must be between 1 and {MAX_INLINE_RESULTS}, got {inline_limit}")

    return Settings(
        bot_token=token,
        webhook_domain=domain,
        webhook_secret=secret,
        host=environ.get("HOST", "0.0.0.0"),
        port=_number(environ, "PORT", 3000, int),
        use_polling=_flag(environ, "USE_POLLING", False),
        environment=(environ.get("APP_ENV") or "development").strip(),
        catalog_path=environ.get("CATALOG_PATH", "data/audios.json"),
        inline_limit=inline_limit,
        inline_cache_time=_number(environ, "INLINE_CACHE_TIME", 5, int),
        handler_timeout=_number(environ, "HANDLER_TIMEOUT", 10.0, float),
        ingest_enabled=_flag(environ, "INGEST_ENABLED", True),
        log_level=environ.get("LOG_LEVEL", "INFO").upper(),
    )
