"""
Simple data store for the emoji catalogue.

``EMOJIS`` is an in-memory list filled by the seed routine at startup.
If you wish to replace it with a database, keep the function
signatures below and swap their bodies; the routers and the page
generator only talk to this module through them.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional

from ..text import slugify
from .schemas import Emoji, EmojiIn

logger = logging.getLogger(__name__)

EMOJIS: List[Emoji] = []
_next_emoji_id = 1
# Copy events arrive from the threadpool FastAPI runs sync handlers in.
_lock = threading.Lock()


def _norm(s: Optional[str]) -> str:
    """Normalize a string for case-insensitive comparison."""
    return (s or "").strip().lower()


def create_emojis(batch: Iterable[EmojiIn]) -> List[Emoji]:
    """Insert a batch of records, assigning ids and slugs.

    Slugs are unique: a record whose slug is already stored (or appears
    earlier in the same batch) is skipped and logged.

    Parameters
    ----------
    batch : Iterable[EmojiIn]
        Records in the order they should be numbered.

    Returns
    -------
    List[Emoji]
        The emojis actually stored.
    """
    global _next_emoji_id

    created: List[Emoji] = []
    with _lock:
        taken = {e.slug for e in EMOJIS}
        for item in batch:
            slug = slugify(item.name)
            if slug in taken:
                logger.warning("Skipping %r: slug %r already exists", item.name, slug)
                continue
            taken.add(slug)
            emoji = Emoji(
                id=_next_emoji_id,
                slug=slug,
                copy_count=0,
                **item.model_dump(),
            )
            EMOJIS.append(emoji)
            created.append(emoji)
            _next_emoji_id += 1
    return created


def count_emojis() -> int:
    return len(EMOJIS)


def list_emojis(search: Optional[str] = None, category: Optional[str] = None) -> List[Emoji]:
    """List emojis, optionally filtered.

    Parameters
    ----------
    search : Optional[str]
        Free-text query. Keeps emojis whose name or any keyword contains
        the query, case-insensitively.
    category : Optional[str]
        Exact category name.

    Returns
    -------
    List[Emoji]
        Matching emojis in id order.
    """
    items = list(EMOJIS)
    nq = _norm(search)

    if nq:
        def _matches(emoji: Emoji) -> bool:
            if nq in _norm(emoji.name):
                return True
            return any(nq in _norm(k) for k in emoji.keywords)
        items = [e for e in items if _matches(e)]

    if category:
        items = [e for e in items if e.category == category]

    return items


def get_emoji(emoji_id: int) -> Optional[Emoji]:
    return next((e for e in EMOJIS if e.id == emoji_id), None)


def get_emoji_by_slug(slug: str) -> Optional[Emoji]:
    return next((e for e in EMOJIS if e.slug == slug), None)


def get_categories() -> List[str]:
    """Distinct categories, in the order they first appear."""
    seen: List[str] = []
    for e in EMOJIS:
        if e.category not in seen:
            seen.append(e.category)
    return seen


def get_trending(limit: int) -> List[Emoji]:
    # Most copied first; equal counts fall back to id order.
    ranked = sorted(EMOJIS, key=lambda e: (-e.copy_count, e.id))
    return ranked[: max(0, limit)]


def increment_copy_count(emoji_id: int) -> Optional[int]:
    """Record one copy event.

    Returns the new count, or ``None`` when ``emoji_id`` is unknown (the
    store is left untouched in that case).
    """
    with _lock:
        emoji = get_emoji(emoji_id)
        if emoji is None:
            return None
        emoji.copy_count += 1
        return emoji.copy_count


def clear() -> None:
    """Drop every record and restart numbering (used by tests)."""
    global _next_emoji_id
    with _lock:
        EMOJIS.clear()
        _next_emoji_id = 1
