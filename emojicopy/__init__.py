"""Emoji catalog with click-to-copy counts and SEO landing pages."""

__version__ = "1.0.0"
