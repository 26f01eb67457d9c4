"""
Pydantic schema definitions for the SEO landing pages.

A ``SeoPage`` starts life as a stub (``is_generated`` false, no content)
and is filled in by the generator or edited by hand from the admin.
"""

from typing import List, Optional

from pydantic import BaseModel


class SeoPage(BaseModel):
    id: int
    slug: str
    keyword: str
    title: str
    meta_description: str
    content: Optional[str] = None
    related_emojis: Optional[List[str]] = None
    is_generated: bool = False


class PageUpdate(BaseModel):
    """Manual override from the admin editor.

    Only the fields present in the request body are applied. An explicit
    null clears ``content``; a null title or meta description is ignored
    since a page always has both.
    """

    title: Optional[str] = None
    meta_description: Optional[str] = None
    content: Optional[str] = None


class GenerateRequest(BaseModel):
    # Optional so that a missing keyword is answered with a 400, not a 422.
    keyword: Optional[str] = None


class BatchResult(BaseModel):
    generated: int


class BulkResult(BaseModel):
    generated: int
    rounds: int
