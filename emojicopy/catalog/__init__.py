"""
Catalog package for the emoji API.

Contains the ``Emoji`` schema, the in-memory store and the routes that
let the front-end search emojis, browse categories, show what is
trending and count copy events.
"""

from .router import router as catalog_router  # noqa: F401
