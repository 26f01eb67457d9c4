"""
Pydantic schema definitions for the catalog module.

The ``Emoji`` model is what the front-end renders as a copyable card.
``slug`` is derived from ``name`` when records are inserted, and
``copy_count`` only ever grows through copy events.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class EmojiIn(BaseModel):
    """An emoji record as it appears in the seed dataset."""

    emoji: str
    name: str
    category: str
    subcategory: Optional[str] = None
    description: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)


class Emoji(EmojiIn):
    """A stored emoji.

    ``keywords`` keeps the order of the source data; it is used both for
    search matching and for the "related" list on landing pages.
    """

    id: int
    slug: str
    copy_count: int = 0


class CopyResult(BaseModel):
    copy_count: int
