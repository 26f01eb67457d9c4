"""
Route definitions for the SEO landing pages.

Endpoints under /api/pages:
- GET   /                : list pages (optionally only generated / stubs)
- GET   /{slug}          : one page
- PATCH /{page_id}       : manual edit of title, meta description, content
- POST  /generate        : generate (or create) the page for a keyword
- POST  /generate-batch  : backfill a few stubs
- POST  /generate-all    : run batches until every stub is done
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, Response

from . import generator
from . import store
from .schemas import BatchResult, BulkResult, GenerateRequest, PageUpdate, SeoPage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/pages", tags=["pages"])


@router.get("", response_model=List[SeoPage])
def list_pages(
    generated: Optional[bool] = Query(default=None, description="Filter on the generated flag"),
) -> List[SeoPage]:
    return store.list_pages(generated=generated)


@router.post("/generate", response_model=SeoPage)
def generate_page(req: GenerateRequest, response: Response) -> SeoPage:
    if not req.keyword or not req.keyword.strip():
        raise HTTPException(status_code=400, detail="Keyword is required")

    try:
        page, created = generator.generate_for_keyword(req.keyword)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logger.exception("Error generating page for %r", req.keyword)
        raise HTTPException(status_code=500, detail="Failed to generate page")

    if created:
        response.status_code = 201
    return page


@router.post("/generate-batch", response_model=BatchResult)
def generate_batch() -> BatchResult:
    try:
        return BatchResult(generated=generator.generate_batch())
    except Exception:
        logger.exception("Error batch generating")
        raise HTTPException(status_code=500, detail="Failed to batch generate")


@router.post("/generate-all", response_model=BulkResult)
def generate_all() -> BulkResult:
    try:
        total, rounds = generator.generate_all()
    except Exception:
        logger.exception("Error bulk generating")
        raise HTTPException(status_code=500, detail="Failed to batch generate")
    return BulkResult(generated=total, rounds=rounds)


@router.get("/{slug}", response_model=SeoPage)
def get_page(slug: str) -> SeoPage:
    page = store.get_page_by_slug(slug)
    if page is None:
        raise HTTPException(status_code=404, detail="Page not found")
    return page


@router.patch("/{page_id}", response_model=SeoPage)
def update_page(page_id: int, req: PageUpdate) -> SeoPage:
    fields = {
        k: v
        for k, v in req.model_dump(exclude_unset=True).items()
        if v is not None or k == "content"
    }
    try:
        updated = store.update_page(page_id, **fields)
    except Exception:
        logger.exception("Error updating page %s", page_id)
        raise HTTPException(status_code=500, detail="Failed to update page")
    if updated is None:
        raise HTTPException(status_code=404, detail="Page not found")
    return updated
