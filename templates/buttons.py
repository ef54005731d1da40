from aiogram.types import InlineKeyboardMarkup, InlineKeyboardButton


def try_inline_kb(query: str = ""):
    """Opens inline mode in the current chat with an optional prefilled query."""
    return InlineKeyboardMarkup(
        inline_keyboard=[
            [
                InlineKeyboardButton(text="🔎 Try inline search", switch_inline_query_current_chat=query),
            ]
        ]
    )
