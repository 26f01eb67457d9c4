"""
Data store for the SEO landing pages.

Pages live in the in-memory ``PAGES`` list. When ``config.PAGES_FILE`` is
set, the list is loaded from that JSON file at startup and written back
after every create or update so that manual edits survive a restart.
Writes and file access are synchronised with a ``threading.RLock``.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any, List, Optional

from .. import config
from .schemas import SeoPage

logger = logging.getLogger(__name__)

PAGES: List[SeoPage] = []
_next_page_id = 1
_lock = threading.RLock()

UPDATABLE_FIELDS = {"title", "meta_description", "content", "related_emojis", "is_generated"}


class DuplicateSlugError(ValueError):
    """Raised when a page with the same slug already exists."""


def _pages_file() -> Optional[Path]:
    return config.PAGES_FILE


def load() -> int:
    """Replace the in-memory pages with the snapshot file contents.

    Returns
    -------
    int
        Number of pages loaded. ``0`` when no file is configured, the
        file does not exist yet, or it cannot be read.
    """
    global _next_page_id

    path = _pages_file()
    if path is None or not path.exists():
        return 0
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
        pages = [SeoPage.model_validate(entry) for entry in raw]
    except (OSError, ValueError) as exc:
        logger.warning("Could not load pages from %s: %s", path, exc)
        return 0

    with _lock:
        PAGES[:] = pages
        _next_page_id = max((p.id for p in pages), default=0) + 1
    logger.info("Loaded %d pages from %s", len(pages), path)
    return len(pages)


def _save() -> None:
    path = _pages_file()
    if path is None:
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    data = [p.model_dump() for p in PAGES]
    # Replaced atomically; load() never sees a partial file.
    tmp = path.with_suffix(path.suffix + ".tmp")
    with tmp.open("w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    tmp.replace(path)


def list_pages(generated: Optional[bool] = None) -> List[SeoPage]:
    if generated is None:
        return list(PAGES)
    return [p for p in PAGES if p.is_generated == generated]


def count_pages() -> int:
    return len(PAGES)


def get_page(page_id: int) -> Optional[SeoPage]:
    return next((p for p in PAGES if p.id == page_id), None)


def get_page_by_slug(slug: str) -> Optional[SeoPage]:
    return next((p for p in PAGES if p.slug == slug), None)


def get_ungenerated_pages(limit: int) -> List[SeoPage]:
    """Up to ``limit`` pages still waiting for content, in id order."""
    return [p for p in PAGES if not p.is_generated][: max(0, limit)]


def create_page(
    slug: str,
    keyword: str,
    title: str,
    meta_description: str,
    content: Optional[str] = None,
    related_emojis: Optional[List[str]] = None,
    is_generated: bool = False,
) -> SeoPage:
    """Insert a new page.

    Raises
    ------
    DuplicateSlugError
        If a page with ``slug`` is already stored.
    """
    global _next_page_id

    with _lock:
        if get_page_by_slug(slug) is not None:
            raise DuplicateSlugError(f"Page with slug {slug!r} already exists")
        page = SeoPage(
            id=_next_page_id,
            slug=slug,
            keyword=keyword,
            title=title,
            meta_description=meta_description,
            content=content,
            related_emojis=related_emojis,
            is_generated=is_generated,
        )
        PAGES.append(page)
        _next_page_id += 1
        _save()
    return page


def update_page(page_id: int, **fields: Any) -> Optional[SeoPage]:
    """Apply ``fields`` to the page with ``page_id``.

    Unknown field names raise ``ValueError``. Returns the updated page, or
    ``None`` when no page has that id.
    """
    unknown = set(fields) - UPDATABLE_FIELDS
    if unknown:
        raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")

    with _lock:
        page = get_page(page_id)
        if page is None:
            return None
        updated = page.model_copy(update=fields)
        PAGES[PAGES.index(page)] = updated
        _save()
    return updated


def clear() -> None:
    """Drop every page and restart numbering (used by tests)."""
    global _next_page_id
    with _lock:
        PAGES.clear()
        _next_page_id = 1
