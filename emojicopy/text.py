"""Small text helpers shared by the catalog and the page generator."""

import re

_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_EMOJI_SUFFIX = re.compile(r"\s+emoji$", re.IGNORECASE)


def slugify(value: str) -> str:
    """Return the URL slug for ``value``.

    Lowercases, collapses every run of characters outside ``[a-z0-9]`` into
    a single ``-`` and strips separators from both ends, so
    ``slugify(slugify(x)) == slugify(x)``.
    """
    return _NON_ALNUM.sub("-", (value or "").lower()).strip("-")


def title_case(value: str) -> str:
    # Only the first letter of each word changes; the rest is kept as typed.
    return " ".join(w[:1].upper() + w[1:] for w in value.split(" "))


def strip_emoji_suffix(keyword: str) -> str:
    """``"heart emoji"`` -> ``"heart"``; other keywords are returned as-is."""
    return _EMOJI_SUFFIX.sub("", keyword.strip())
