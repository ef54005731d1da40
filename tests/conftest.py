"""Shared fixtures for handler and formatter tests."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from aiogram import Dispatcher

from bot import make_dispatcher
from utils.catalog import parse_catalog
from utils.config import Settings

CATALOG_ITEMS = [
    {"title": "Song A", "performer": "X", "url": "http://a"},
    {"title": "Song B", "file_id": "F1"},
    {"id": "v1", "title": "Hello", "file_id": "F2", "voice_file_id": "V1", "is_voice": True},
    {"title": "Lecture", "performer": "Prof", "document_file_id": "D1"},
    {"title": "Broken"},
]


@pytest.fixture
def settings() -> Settings:
    return Settings(bot_token="123456:TEST", webhook_secret="s3cr3t")


@pytest.fixture
def catalog():
    return parse_catalog(CATALOG_ITEMS)


@pytest.fixture(scope="session")
def dispatcher() -> Dispatcher:
    # routers are module-level and can be attached to a single dispatcher only
    return make_dispatcher(Settings(bot_token="123456:TEST", webhook_secret="s3cr3t"), parse_catalog(CATALOG_ITEMS))


@pytest.fixture
def message() -> MagicMock:
    msg = MagicMock()
    msg.answer = AsyncMock()
    msg.chat = SimpleNamespace(id=-100500, type="private")
    msg.from_user = SimpleNamespace(id=42, username="listener")
    msg.bot.me = AsyncMock(return_value=SimpleNamespace(username="audio_bot"))
    return msg
