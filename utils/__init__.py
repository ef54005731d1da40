"""
utils package

Bot internals that do not depend on a particular update:
- config.py: environment settings
- logger.py: logging setup
- catalog.py: audio catalog loading and validation
- search.py / results.py: inline search and result shaping
- delivery.py: best-effort Bot API calls
- middleware.py: per-update timeout
- transport.py: polling / webhook selection and runners
"""
