"""
Content generation for SEO landing pages.

``generate_for_keyword`` fills in (or creates) the page for one keyword,
``generate_batch`` backfills a handful of stubs per call and
``generate_all`` repeats batches until nothing is left or the round cap
is reached.
"""

from __future__ import annotations

import logging
import threading
from typing import List, Tuple

from .. import config
from ..catalog import store as emoji_store
from ..catalog.schemas import Emoji
from ..text import slugify, strip_emoji_suffix
from . import store as page_store
from .content import generate_seo_content, page_meta_description, page_title
from .schemas import SeoPage

logger = logging.getLogger(__name__)

# Held while pages are selected and written so concurrent admin calls
# never generate the same stub twice.
_generation_lock = threading.Lock()


def _related_emojis(keyword: str) -> List[Emoji]:
    return emoji_store.list_emojis(search=strip_emoji_suffix(keyword))


def _fill_page(page: SeoPage) -> SeoPage:
    matches = _related_emojis(page.keyword)
    content = generate_seo_content(page.keyword, matches)
    updated = page_store.update_page(
        page.id,
        content=content,
        related_emojis=[e.emoji for e in matches[: config.RELATED_EMOJI_LIMIT]],
        is_generated=True,
    )
    if updated is None:
        raise LookupError(f"Page {page.id} disappeared during generation")
    return updated


def generate_for_keyword(keyword: str) -> Tuple[SeoPage, bool]:
    """Return the generated page for ``keyword``, creating it if needed.

    Parameters
    ----------
    keyword : str
        Search keyword such as ``"fire emoji"``.

    Returns
    -------
    Tuple[SeoPage, bool]
        The page, and whether a new page record was created. A page that
        is already generated is returned unchanged.

    Raises
    ------
    ValueError
        If the keyword is blank or has no usable characters for a slug.
    """
    keyword = (keyword or "").strip()
    if not keyword:
        raise ValueError("Keyword is required")
    slug = slugify(keyword)
    if not slug:
        raise ValueError("Keyword must contain letters or digits")

    with _generation_lock:
        existing = page_store.get_page_by_slug(slug)
        if existing is not None and existing.is_generated:
            return existing, False
        if existing is not None:
            logger.info("Generating content for stub %r", slug)
            return _fill_page(existing), False

        matches = _related_emojis(keyword)
        page = page_store.create_page(
            slug=slug,
            keyword=keyword,
            title=page_title(keyword),
            meta_description=page_meta_description(keyword),
            content=generate_seo_content(keyword, matches),
            related_emojis=[e.emoji for e in matches[: config.RELATED_EMOJI_LIMIT]],
            is_generated=True,
        )
        logger.info("Created page %r with %d related emojis", slug, len(page.related_emojis or []))
        return page, True


def generate_batch(limit: int = config.BATCH_SIZE) -> int:
    """Generate content for up to ``limit`` stubs; return how many were done."""
    generated = 0
    with _generation_lock:
        for page in page_store.get_ungenerated_pages(limit):
            _fill_page(page)
            generated += 1
    if generated:
        logger.info("Batch generated %d pages", generated)
    return generated


def generate_all(
    batch_size: int = config.BATCH_SIZE,
    max_rounds: int = config.MAX_BATCH_ROUNDS,
) -> Tuple[int, int]:
    """Run batches until one comes back empty or ``max_rounds`` is hit.

    Returns
    -------
    Tuple[int, int]
        Total pages generated and the number of batch calls made.
    """
    total = 0
    rounds = 0
    while rounds < max_rounds:
        rounds += 1
        done = generate_batch(batch_size)
        if done == 0:
            break
        total += done
    else:
        if page_store.get_ungenerated_pages(1):
            logger.warning("Stopped after %d rounds with pages still ungenerated", max_rounds)
    return total, rounds
