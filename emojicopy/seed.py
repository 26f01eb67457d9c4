"""
Startup seeding for the catalog and the SEO page stubs.

The emoji dataset ships with the package in ``data/emojis.json``. Page
stubs are built from ``TOP_KEYWORDS``; their content is produced later
by the generator, either on first visit or from the admin bulk action.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from . import config
from .catalog import store as emoji_store
from .catalog.schemas import EmojiIn
from .pages import store as page_store
from .pages.content import page_meta_description, page_title
from .text import slugify

logger = logging.getLogger(__name__)

TOP_KEYWORDS: List[str] = [
    "heart emoji",
    "red heart emoji",
    "broken heart emoji",
    "love emoji",
    "smile emoji",
    "happy emoji",
    "laughing emoji",
    "crying emoji",
    "sad emoji",
    "angry emoji",
    "skull emoji",
    "fire emoji",
    "sparkle emoji",
    "star emoji",
    "moon emoji",
    "sun emoji",
    "rainbow emoji",
    "flower emoji",
    "butterfly emoji",
    "cat emoji",
    "dog emoji",
    "party emoji",
    "birthday emoji",
    "christmas emoji",
    "halloween emoji",
    "thumbs up emoji",
    "clap emoji",
    "pray emoji",
    "wave emoji",
    "peace emoji",
    "cool emoji",
    "kiss emoji",
    "ghost emoji",
    "money emoji",
    "food emoji",
    "coffee emoji",
    "sport emoji",
    "game emoji",
    "flag emoji",
    "aesthetic emoji",
]


def load_emoji_data(path: Optional[Path] = None) -> List[EmojiIn]:
    """Read the emoji dataset.

    Parameters
    ----------
    path : Optional[Path]
        JSON file to read; defaults to ``config.EMOJI_DATA_FILE``.

    Returns
    -------
    List[EmojiIn]
        Records in file order.
    """
    path = path or config.EMOJI_DATA_FILE
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    return [EmojiIn.model_validate(entry) for entry in raw]


def build_page_stubs(keywords: Sequence[str]) -> List[Dict[str, object]]:
    """One ungenerated page definition per keyword."""
    return [
        {
            "slug": slugify(keyword),
            "keyword": keyword,
            "title": page_title(keyword),
            "meta_description": page_meta_description(keyword),
            "is_generated": False,
        }
        for keyword in keywords
    ]


def seed_database(
    emojis: Optional[Sequence[EmojiIn]] = None,
    keywords: Sequence[str] = TOP_KEYWORDS,
) -> bool:
    """Populate an empty catalog and create the page stubs.

    Returns ``False`` without touching anything when the catalog already
    holds emojis.
    """
    count = emoji_store.count_emojis()
    if count > 0:
        logger.info("Database already has %d emojis, skipping seed.", count)
        return False

    logger.info("Seeding emoji database...")
    data = list(emojis) if emojis is not None else load_emoji_data()
    batch_size = max(1, config.SEED_BATCH_SIZE)
    seeded = 0
    for i in range(0, len(data), batch_size):
        seeded += len(emoji_store.create_emojis(data[i:i + batch_size]))
    logger.info("Seeded %d emojis.", seeded)

    stubs = build_page_stubs(keywords)
    created = 0
    for stub in stubs:
        try:
            page_store.create_page(**stub)
            created += 1
        except page_store.DuplicateSlugError:
            logger.debug("Page stub %r already exists", stub["slug"])
    logger.info("Created %d SEO page stubs.", created)
    return True
