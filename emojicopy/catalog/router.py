"""
Route definitions for the emoji catalogue.

Endpoints under /api/emojis:
- GET  /                 : list emojis (search + category filters)
- GET  /categories       : distinct category names
- GET  /trending         : most copied emojis
- GET  /{slug}           : one emoji
- POST /{emoji_id}/copy  : record a copy event
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from .. import config
from . import store
from .schemas import CopyResult, Emoji

router = APIRouter(prefix="/api/emojis", tags=["emojis"])


@router.get("", response_model=List[Emoji])
def list_emojis(
    search: Optional[str] = Query(default=None, description="Search name and keywords"),
    category: Optional[str] = Query(default=None, description="Exact category"),
) -> List[Emoji]:
    return store.list_emojis(search=search, category=category)


# Static paths are declared before /{slug} so they are not captured by it.
@router.get("/categories", response_model=List[str])
def list_categories() -> List[str]:
    return store.get_categories()


@router.get("/trending", response_model=List[Emoji])
def list_trending(
    limit: int = Query(default=config.TRENDING_LIMIT, ge=1, le=500),
) -> List[Emoji]:
    return store.get_trending(limit)


@router.get("/{slug}", response_model=Emoji)
def get_emoji(slug: str) -> Emoji:
    emoji = store.get_emoji_by_slug(slug)
    if emoji is None:
        raise HTTPException(status_code=404, detail="Emoji not found")
    return emoji


@router.post("/{emoji_id}/copy", response_model=CopyResult)
def copy_emoji(emoji_id: int) -> CopyResult:
    copy_count = store.increment_copy_count(emoji_id)
    if copy_count is None:
        raise HTTPException(status_code=404, detail="Emoji not found")
    return CopyResult(copy_count=copy_count)
