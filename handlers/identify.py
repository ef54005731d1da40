# handlers/identify.py
from aiogram import Router
from aiogram.filters import Command
from aiogram.types import Message

from templates.messages import ID_TEXT
from utils.delivery import Delivery, deliver

router = Router(name="identify")


async def reply_with_ids(message: Message) -> Delivery:
    user = message.from_user
    text = ID_TEXT.format(
        chat_id=message.chat.id,
        chat_type=message.chat.type,
        user_id=user.id if user else "—",
        username=f"@{user.username}" if user and user.username else "",
    )
    return await deliver(message.answer(text), what="id reply")


@router.message(Command("id", "myid"))
async def cmd_id(message: Message):
    await reply_with_ids(message)
