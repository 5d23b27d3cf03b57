"""geniuskit - Genius song, artist and album metadata plus lyrics scraping."""

from geniuskit.config import Settings, settings
from geniuskit.exceptions import (
    AccessDeniedError,
    GeniusAPIError,
    GeniusKitError,
    InvalidArgumentError,
    NoResultError,
    NotFoundError,
    RequiresGeniusKeyError,
)
from geniuskit.genius import Album, Artist, GeniusClient, PaginatedSongs, Song
from geniuskit.lyrics import LyricsFetcher, fetch_lyrics, strip_section_markers

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Configuration
    "Settings",
    "settings",
    # Client and models
    "GeniusClient",
    "Album",
    "Artist",
    "PaginatedSongs",
    "Song",
    # Lyrics
    "LyricsFetcher",
    "fetch_lyrics",
    "strip_section_markers",
    # Exceptions
    "AccessDeniedError",
    "GeniusAPIError",
    "GeniusKitError",
    "InvalidArgumentError",
    "NoResultError",
    "NotFoundError",
    "RequiresGeniusKeyError",
]
