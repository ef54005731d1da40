# templates/messages.py

START_TEXT = (
    "🎵 <b>Hi! I'm an inline audio bot.</b>\n\n"
    "In any chat, type <code>@{bot_username} query</code>\n"
    "and pick a track from the list.\n\n"
    "• /id shows your chat and user ids\n"
    "• Send me an audio file to get a catalog entry for it"
)

ID_TEXT = (
    "🪪 <b>Chat</b>: <code>{chat_id}</code> ({chat_type})\n"
    "👤 <b>User</b>: <code>{user_id}</code> {username}"
)

ENTRY_DRAFT_TEXT = (
    "🗂 <b>Catalog entry draft</b>\n"
    "Add it to <code>data/audios.json</code>:\n\n"
    "<pre>{entry}</pre>"
)

VOICE_RESEND_TEXT = (
    "🎙 Voice notes can't be added as tracks.\n"
    "Please resend it as an audio file or as a document (mp3, m4a, ogg…)."
)
