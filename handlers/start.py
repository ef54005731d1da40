from aiogram import Router
from aiogram.filters import CommandObject, CommandStart
from aiogram.types import Message

from handlers.identify import reply_with_ids
from templates.buttons import try_inline_kb
from templates.messages import START_TEXT
from utils.delivery import deliver

router = Router(name=__name__)

ID_PAYLOADS = {"id", "getid"}


@router.message(CommandStart())
async def cmd_start(message: Message, command: CommandObject):
    payload = (command.args or "").strip().lower()
    if payload in ID_PAYLOADS:
        await reply_with_ids(message)
        return

    me = await deliver(message.bot.me(), what="getMe")
    username = me.result.username if me.ok else "bot"
    await deliver(
        message.answer(START_TEXT.format(bot_username=username), reply_markup=try_inline_kb()),
        what="start reply",
    )
