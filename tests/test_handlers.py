"""Tests for command, inline and ingestion handlers."""

from __future__ import annotations

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from aiogram.exceptions import TelegramNetworkError
from aiogram.filters import CommandObject
from aiogram.types import Audio, Document

from handlers.audio import (
    entry_draft,
    handle_audio_submission,
    handle_voice_submission,
    is_audio_document,
    slugify,
)
from handlers.identify import cmd_id
from handlers.inline import handle_chosen_result, handle_inline_query
from handlers.start import cmd_start


@pytest.mark.asyncio
async def test_start_without_payload_sends_usage(message) -> None:
    await cmd_start(message, CommandObject(command="start"))

    text = message.answer.await_args.args[0]
    assert "@audio_bot" in text
    assert message.answer.await_args.kwargs["reply_markup"] is not None


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", ["id", "GetID"])
async def test_start_with_id_payload_replies_with_ids(message, payload) -> None:
    await cmd_start(message, CommandObject(command="start", args=payload))

    text = message.answer.await_args.args[0]
    assert "-100500" in text
    assert "@listener" in text


@pytest.mark.asyncio
async def test_start_with_unknown_payload_sends_usage(message) -> None:
    await cmd_start(message, CommandObject(command="start", args="promo"))

    assert "@audio_bot" in message.answer.await_args.args[0]


@pytest.mark.asyncio
async def test_id_reply_failure_is_swallowed(message) -> None:
    message.answer = AsyncMock(side_effect=TelegramNetworkError(method=MagicMock(), message="timeout"))

    await cmd_id(message)

    message.answer.assert_awaited_once()


@pytest.mark.asyncio
async def test_inline_query_answers_with_matches(catalog, settings) -> None:
    inline_query = MagicMock(query="A")
    inline_query.answer = AsyncMock()

    await handle_inline_query(inline_query, catalog, settings)

    results = inline_query.answer.await_args.args[0]
    assert [r.audio_url for r in results] == ["http://a"]
    assert inline_query.answer.await_args.kwargs == {"cache_time": 5, "is_personal": True}


@pytest.mark.asyncio
async def test_inline_query_answer_failure_is_swallowed(catalog, settings) -> None:
    inline_query = MagicMock(query="")
    inline_query.answer = AsyncMock(side_effect=TelegramNetworkError(method=MagicMock(), message="down"))

    await handle_inline_query(inline_query, catalog, settings)

    assert len(inline_query.answer.await_args.args[0]) == 4


@pytest.mark.asyncio
async def test_chosen_result_is_logged(caplog) -> None:
    chosen = SimpleNamespace(query="song", result_id="0", from_user=SimpleNamespace(id=1, username=None))

    with caplog.at_level("INFO", logger="inline"):
        await handle_chosen_result(chosen)

    assert "result_id=0" in caplog.text


@pytest.mark.parametrize(
    ("mime_type", "file_name", "expected"),
    [
        ("audio/mpeg", None, True),
        (None, "Track.FLAC", True),
        ("application/octet-stream", "track.ogg", True),
        ("application/pdf", "notes.pdf", False),
        (None, None, False),
    ],
)
def test_is_audio_document(mime_type, file_name, expected) -> None:
    document = Document(file_id="D", file_unique_id="U", mime_type=mime_type, file_name=file_name)

    assert is_audio_document(document) is expected


def test_slugify() -> None:
    assert slugify("  Song A (Live)! ") == "song-a-live"
    assert slugify("Песня") == ""


def test_entry_draft_from_audio() -> None:
    audio = Audio(file_id="F1", file_unique_id="U1", duration=3, title="Song A", performer="X")
    draft = entry_draft(SimpleNamespace(audio=audio, document=None))

    assert draft == {"id": "song-a", "title": "Song A", "performer": "X", "file_id": "F1"}


def test_entry_draft_from_document_falls_back_to_unique_id() -> None:
    document = Document(file_id="D1", file_unique_id="U9", file_name="Песня.mp3", mime_type="audio/mpeg")
    draft = entry_draft(SimpleNamespace(audio=None, document=document))

    assert draft == {"id": "U9", "title": "Песня", "file_id": "D1", "tg_type": "document"}


def test_entry_draft_untitled_audio() -> None:
    audio = Audio(file_id="F1", file_unique_id="U1", duration=3)
    draft = entry_draft(SimpleNamespace(audio=audio, document=None))

    assert draft["title"] == "Untitled"
    assert draft["id"] == "untitled"


@pytest.mark.asyncio
async def test_audio_submission_echoes_entry(message) -> None:
    message.audio = Audio(file_id="F1", file_unique_id="U1", duration=3, title="Song A")
    message.document = None

    await handle_audio_submission(message)

    text = message.answer.await_args.args[0]
    assert "&quot;file_id&quot;: &quot;F1&quot;" in text
    body = text.split("<pre>")[1].split("</pre>")[0].replace("&quot;", '"')
    assert json.loads(body)["id"] == "song-a"


@pytest.mark.asyncio
async def test_voice_submission_asks_for_file(message) -> None:
    await handle_voice_submission(message)

    assert "audio file" in message.answer.await_args.args[0]
