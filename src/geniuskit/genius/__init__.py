"""Genius API integration module."""

from .client import GeniusClient
from .models import Album, Artist, PaginatedSongs, Song

__all__ = [
    "GeniusClient",
    "Album",
    "Artist",
    "Song",
    "PaginatedSongs",
]
