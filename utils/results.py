# utils/results.py
from typing import Iterable, List, Union

from aiogram.types import (
    InlineQueryResultAudio,
    InlineQueryResultCachedAudio,
    InlineQueryResultCachedDocument,
    InlineQueryResultCachedVoice,
)

from utils.catalog import CatalogEntry, EntryKind

InlineAudioResult = Union[
    InlineQueryResultCachedVoice,
    InlineQueryResultCachedDocument,
    InlineQueryResultCachedAudio,
    InlineQueryResultAudio,
]


def result_id(entry: CatalogEntry, index: int) -> str:
    # Entries sharing all three may collide; Telegram rejects the whole answer then.
    return entry.id or entry.unique_id or str(index)


def format_result(entry: CatalogEntry, index: int) -> InlineAudioResult:
    rid = result_id(entry, index)

    if entry.kind is EntryKind.VOICE:
        return InlineQueryResultCachedVoice(
            id=rid,
            voice_file_id=entry.media,
            title=entry.display_title,
            caption=entry.caption,
        )
    if entry.kind is EntryKind.DOCUMENT:
        return InlineQueryResultCachedDocument(
            id=rid,
            document_file_id=entry.media,
            title=entry.display_title,
            description=entry.performer,
            caption=entry.caption,
        )
    if entry.kind is EntryKind.CACHED_AUDIO:
        return InlineQueryResultCachedAudio(
            id=rid,
            audio_file_id=entry.media,
            caption=entry.caption,
        )
    return InlineQueryResultAudio(
        id=rid,
        audio_url=entry.media,
        title=entry.display_title,
        performer=entry.performer,
        caption=entry.caption,
    )


def build_results(entries: Iterable[CatalogEntry]) -> List[InlineAudioResult]:
    """Formats matched entries in order, keyed by their catalog position."""
    return [format_result(entry, entry.position) for entry in entries]
