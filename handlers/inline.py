import logging
from typing import List

from aiogram import Router
from aiogram.types import ChosenInlineResult, InlineQuery

from utils.catalog import CatalogEntry
from utils.config import Settings
from utils.delivery import deliver
from utils.results import build_results
from utils.search import search

router = Router(name="inline")
logger = logging.getLogger("inline")


@router.inline_query()
async def handle_inline_query(inline_query: InlineQuery, catalog: List[CatalogEntry], settings: Settings):
    """Answers an inline query with matching catalog tracks."""
    items = search(catalog, inline_query.query, settings.inline_limit)
    results = build_results(items)
    logger.debug(f"🔍 Inline query {inline_query.query!r}: {len(results)} result(s)")

    await deliver(
        inline_query.answer(results, cache_time=settings.inline_cache_time, is_personal=True),
        what="answerInlineQuery",
    )


@router.chosen_inline_result()
async def handle_chosen_result(chosen: ChosenInlineResult):
    user = chosen.from_user
    logger.info(
        f"🎯 chosen_inline_result query={chosen.query!r} "
        f"result_id={chosen.result_id} from={user.username or user.id}"
    )
