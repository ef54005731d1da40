"""
Catalog ingestion over direct messages.

Users send audio files (or audio documents) to the bot in a private chat and
get back a JSON entry they can paste into the catalog file. Nothing is stored.
"""
import html
import json
import logging
import os
import re
from typing import Optional

from aiogram import F, Router
from aiogram.enums import ChatType
from aiogram.types import Document, Message

from templates.messages import ENTRY_DRAFT_TEXT, VOICE_RESEND_TEXT
from utils.config import Settings
from utils.delivery import deliver


def ingest_enabled(message: Message, settings: Settings) -> bool:
    return settings.ingest_enabled


router = Router(name="audio")
router.message.filter(F.chat.type == ChatType.PRIVATE, ingest_enabled)
logger = logging.getLogger("audio")

AUDIO_EXTENSIONS = {".mp3", ".m4a", ".aac", ".ogg", ".oga", ".opus", ".wav", ".flac", ".wma", ".amr"}


def is_audio_document(document: Optional[Document]) -> bool:
    if document is None:
        return False
    if (document.mime_type or "").lower().startswith("audio/"):
        return True
    ext = os.path.splitext(document.file_name or "")[1].lower()
    return ext in AUDIO_EXTENSIONS


def slugify(text: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")


def entry_draft(message: Message) -> dict:
    """Builds a catalog entry from an audio attachment or an audio document."""
    if message.audio:
        media = message.audio
        file_stem = os.path.splitext(media.file_name or "")[0]
        title = media.title or file_stem or "Untitled"
        performer = media.performer
        tg_type = None
    else:
        media = message.document
        title = os.path.splitext(media.file_name or "")[0] or "Untitled"
        performer = None
        tg_type = "document"

    draft = {
        "id": slugify(title) or media.file_unique_id,
        "title": title,
    }
    if performer:
        draft["performer"] = performer
    draft["file_id"] = media.file_id
    if tg_type:
        draft["tg_type"] = tg_type
    return draft


@router.message(F.audio | F.document.func(is_audio_document))
async def handle_audio_submission(message: Message):
    draft = entry_draft(message)
    logger.info(f"📥 Entry draft for user {message.from_user.id}: {draft['id']}")

    entry = html.escape(json.dumps(draft, ensure_ascii=False, indent=2))
    await deliver(message.answer(ENTRY_DRAFT_TEXT.format(entry=entry)), what="entry draft reply")


@router.message(F.voice)
async def handle_voice_submission(message: Message):
    await deliver(message.answer(VOICE_RESEND_TEXT), what="voice resend reply")
