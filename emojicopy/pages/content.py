"""Markdown template for the SEO landing pages.

``generate_seo_content`` is pure: the same keyword and emoji list always
produce the same document.
"""

from typing import Sequence

from ..catalog.schemas import Emoji
from ..text import strip_emoji_suffix, title_case

POPULAR_LIMIT = 10


def page_title(keyword: str) -> str:
    return f"{title_case(keyword)} - Copy & Paste"


def page_meta_description(keyword: str) -> str:
    return (
        f"Copy and paste {keyword} instantly! Find the best {keyword} "
        "for messages, social media, and more."
    )


def generate_seo_content(keyword: str, related: Sequence[Emoji]) -> str:
    """Render the landing page markdown for ``keyword``.

    Parameters
    ----------
    keyword : str
        The search keyword the page targets, e.g. ``"heart emoji"``.
    related : Sequence[Emoji]
        Emojis matching the keyword; the first ten are listed.

    Returns
    -------
    str
        The markdown document.
    """
    title = title_case(keyword)
    clean_keyword = strip_emoji_suffix(keyword)
    popular = list(related[:POPULAR_LIMIT])

    popular_lines = "\n".join(
        f"- {e.emoji} **{e.name}** - "
        f"{e.description or 'A popular emoji for expressing ' + clean_keyword}"
        for e in popular
    )
    samples = ", ".join(f"{e.emoji} {e.name}" for e in popular)
    related_sentence = f"Related emojis include {samples}." if related else ""

    return f"""# {title} - Copy & Paste

Looking for the perfect **{keyword}** to use in your messages? You've come to the right place! Simply click any emoji below to copy it to your clipboard instantly.

## Popular {title}s

{popular_lines}

## How to Use {title}

Using {keyword}s is easy! Just click on any emoji above and it will be copied to your clipboard. Then paste it anywhere - in text messages, social media posts, emails, or documents.

### Where to Use {title}

- **Text Messages**: Add expression to your iMessage, WhatsApp, or Telegram chats
- **Social Media**: Make your Instagram, Twitter/X, Facebook, and TikTok posts stand out
- **Email**: Add a personal touch to casual emails
- **Documents**: Use in Google Docs, Microsoft Word, and other editors

## About {title}

The {keyword} is one of the most popular emojis used in digital communication. It helps convey emotions and add personality to text-based conversations. {related_sentence}

## Frequently Asked Questions

### How do I copy the {keyword}?
Simply click on the emoji and it will be automatically copied to your clipboard. Then use Ctrl+V (or Cmd+V on Mac) to paste it anywhere.

### Can I use the {keyword} on any device?
Yes! Emojis are universal and work on all modern devices including iPhone, Android, Windows, and Mac computers.

### What does the {keyword} mean?
The {keyword} is commonly used to express feelings related to {clean_keyword}. Its meaning can vary slightly depending on context and culture."""
