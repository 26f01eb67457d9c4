"""
SEO landing pages: schemas, store, markdown template, generator and
the admin-facing routes.
"""

from .router import router as pages_router  # noqa: F401
