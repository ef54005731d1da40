"""
handlers package

Contains aiogram routers for different bot functionalities:
- start.py: /start with optional deep-link payload
- identify.py: /id and /myid
- inline.py: inline queries and chosen inline results
- audio.py: catalog entry drafts from direct-message audio
"""
