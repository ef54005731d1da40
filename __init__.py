"""
inline audio bot

Root of the Telegram inline audio bot.
Contains:
- bot.py entrypoint
- handlers for commands, inline queries and audio submissions
- utils for settings, catalog, search, transport and logging
- templates for messages and keyboards
"""
