# utils/catalog.py
import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from utils.config import TRUE_VALUES

logger = logging.getLogger("catalog")


class CatalogError(RuntimeError):
    """Raised when the catalog file cannot be read or parsed."""


class EntryKind(str, Enum):
    VOICE = "voice"
    DOCUMENT = "document"
    CACHED_AUDIO = "cached_audio"
    URL_AUDIO = "url_audio"


DEFAULT_TITLES = {
    EntryKind.VOICE: "Voice message",
    EntryKind.DOCUMENT: "Document",
    EntryKind.CACHED_AUDIO: "Audio",
    EntryKind.URL_AUDIO: "Audio",
}


@dataclass(frozen=True)
class CatalogEntry:
    """
    One validated catalog record.

    `media` holds whatever reference the kind needs: a Telegram file_id for
    voice, document and cached audio, or an http(s) URL for URL audio.
    """
    kind: EntryKind
    media: str
    position: int
    id: Optional[str] = None
    unique_id: Optional[str] = None
    title: Optional[str] = None
    performer: Optional[str] = None
    caption: Optional[str] = None

    @classmethod
    def voice(cls, voice_file_id: str, position: int, **fields) -> "CatalogEntry":
        return cls(EntryKind.VOICE, voice_file_id, position, **fields)

    @classmethod
    def document(cls, document_file_id: str, position: int, **fields) -> "CatalogEntry":
        return cls(EntryKind.DOCUMENT, document_file_id, position, **fields)

    @classmethod
    def cached_audio(cls, file_id: str, position: int, **fields) -> "CatalogEntry":
        return cls(EntryKind.CACHED_AUDIO, file_id, position, **fields)

    @classmethod
    def url_audio(cls, url: str, position: int, **fields) -> "CatalogEntry":
        return cls(EntryKind.URL_AUDIO, url, position, **fields)

    @property
    def display_title(self) -> str:
        return self.title or DEFAULT_TITLES[self.kind]

    @property
    def haystack(self) -> str:
        return f"{self.title or ''} {self.performer or ''}".lower()


def _text(raw: dict, key: str) -> Optional[str]:
    value = raw.get(key)
    if value is None or value == "":
        return None
    return str(value)


def _flag(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in TRUE_VALUES
    return value is True


def resolve_kind(raw: dict) -> Optional[EntryKind]:
    """Picks the deliverable shape for a raw entry. First match wins."""
    tg_type = (_text(raw, "tg_type") or "").lower()

    is_voice = tg_type == "voice" or _flag(raw.get("is_voice")) or _text(raw, "voice_file_id")
    if is_voice and (_text(raw, "voice_file_id") or _text(raw, "file_id")):
        return EntryKind.VOICE

    is_document = tg_type == "document" or _text(raw, "document_file_id")
    if is_document and (_text(raw, "document_file_id") or _text(raw, "file_id")):
        return EntryKind.DOCUMENT

    if _text(raw, "file_id"):
        return EntryKind.CACHED_AUDIO
    if _text(raw, "url"):
        return EntryKind.URL_AUDIO
    return None


def parse_entry(raw: dict, position: int) -> Optional[CatalogEntry]:
    """Validates one raw JSON object. Returns None when it has no usable media."""
    kind = resolve_kind(raw)
    if kind is None:
        return None

    fields = dict(
        id=_text(raw, "id"),
        unique_id=_text(raw, "file_unique_id"),
        title=_text(raw, "title"),
        performer=_text(raw, "performer"),
        caption=_text(raw, "caption"),
    )
    if kind is EntryKind.VOICE:
        return CatalogEntry.voice(_text(raw, "voice_file_id") or _text(raw, "file_id"), position, **fields)
    if kind is EntryKind.DOCUMENT:
        return CatalogEntry.document(_text(raw, "document_file_id") or _text(raw, "file_id"), position, **fields)
    if kind is EntryKind.CACHED_AUDIO:
        return CatalogEntry.cached_audio(_text(raw, "file_id"), position, **fields)
    return CatalogEntry.url_audio(_text(raw, "url"), position, **fields)


def parse_catalog(items) -> List[CatalogEntry]:
    if not isinstance(items, list):
        raise CatalogError(f"Catalog must be a JSON array, got {type(items).__name__}")

    entries = []
    for position, raw in enumerate(items):
        entry = parse_entry(raw, position) if isinstance(raw, dict) else None
        if entry is None:
            logger.warning(f"⚠️ Skipping catalog entry #{position}: no usable media reference")
            continue
        entries.append(entry)
    return entries


def load_catalog(path: str) -> List[CatalogEntry]:
    """Reads and validates the catalog file. Any read or parse failure is a CatalogError."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            items = json.load(f)
    except (OSError, ValueError) as e:
        raise CatalogError(f"Failed to load {path}: {e}") from e

    entries = parse_catalog(items)
    logger.info(f"📚 Loaded {len(entries)} of {len(items)} catalog entries from {path}")
    return entries
