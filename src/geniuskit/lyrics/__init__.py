"""Lyrics scraping from Genius song pages."""

from .fetcher import LyricsFetcher, fetch_lyrics
from .fingerprint import USER_AGENTS, VIEWPORTS, BrowserProfile, Viewport
from .normalize import extract_lyrics, markup_to_text, strip_section_markers

__all__ = [
    "LyricsFetcher",
    "fetch_lyrics",
    "BrowserProfile",
    "Viewport",
    "USER_AGENTS",
    "VIEWPORTS",
    "extract_lyrics",
    "markup_to_text",
    "strip_section_markers",
]
