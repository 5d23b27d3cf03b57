"""Pydantic data models for Genius API data."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, HttpUrl, PrivateAttr

from geniuskit.exceptions import InvalidArgumentError, RequiresGeniusKeyError
from geniuskit.lyrics import LyricsFetcher, strip_section_markers

if TYPE_CHECKING:
    from .client import GeniusClient


class Artist(BaseModel):
    """Represents a Genius artist."""

    id: int = Field(..., description="Genius artist ID")
    name: str = Field(..., description="Artist name")
    url: HttpUrl = Field(..., description="Genius profile URL")
    image_url: HttpUrl | None = Field(None, description="Artist image URL")
    thumbnail_url: HttpUrl | None = Field(None, description="Artist header image URL")
    is_verified: bool = Field(False, description="Whether artist is verified")
    endpoint: str | None = Field(None, description="API path of the artist")
    partial: bool = Field(False, description="Built from an embedded, abbreviated payload")

    model_config = {"frozen": True}

    @classmethod
    def from_api(cls, data: dict[str, Any], partial: bool = False) -> Artist:
        """Build an Artist from an API ``artist`` object."""
        return cls(
            id=data["id"],
            name=data["name"],
            url=data["url"],
            image_url=data.get("image_url"),
            thumbnail_url=data.get("header_image_url"),
            is_verified=data.get("is_verified", False),
            endpoint=data.get("api_path"),
            partial=partial,
        )


class Album(BaseModel):
    """Represents a Genius album."""

    id: int = Field(..., description="Genius album ID")
    name: str = Field(..., description="Album name")
    full_title: str = Field(..., description="Album name with artist")
    url: HttpUrl = Field(..., description="Genius album URL")
    image_url: HttpUrl | None = Field(None, description="Cover art URL")
    endpoint: str | None = Field(None, description="API path of the album")
    artist: Artist

    model_config = {"frozen": True}

    @classmethod
    def from_api(cls, data: dict[str, Any], artist: Artist) -> Album:
        """Build an Album from an API ``album`` object owned by ``artist``."""
        return cls(
            id=data["id"],
            name=data["name"],
            full_title=data.get("full_title", data["name"]),
            url=data["url"],
            image_url=data.get("cover_art_url"),
            endpoint=data.get("api_path"),
            artist=artist,
        )


class Song(BaseModel):
    """Represents a Genius song.

    Songs coming from search results are ``partial``: they carry no album or
    release date until :meth:`fetch` loads the full record.
    """

    id: int = Field(..., description="Genius song ID")
    title: str = Field(..., description="Song title")
    full_title: str = Field(..., description="Title with primary artist")
    featured_title: str = Field(..., description="Title with featured artists")
    url: HttpUrl = Field(..., description="Genius song URL")
    endpoint: str | None = Field(None, description="API path of the song")
    thumbnail_url: HttpUrl | None = Field(None, description="Header image thumbnail URL")
    image_url: HttpUrl | None = Field(None, description="Header image URL")
    artist: Artist
    album: Album | None = None
    released_at: date | None = Field(None, description="Release date")
    instrumental: bool = False
    partial: bool = False
    raw: dict[str, Any] = Field(default_factory=dict, repr=False)

    _client: Any = PrivateAttr(default=None)

    @classmethod
    def from_api(
        cls,
        data: dict[str, Any],
        client: GeniusClient | None = None,
        partial: bool = False,
    ) -> Song:
        """Build a Song from an API ``song`` object."""
        artist = Artist.from_api(data["primary_artist"], partial=True)
        album_data = data.get("album")
        song = cls(
            id=int(data["id"]),
            title=data["title"],
            full_title=data.get("full_title", data["title"]),
            featured_title=data.get("title_with_featured", data["title"]),
            url=data["url"],
            endpoint=data.get("api_path"),
            thumbnail_url=data.get("header_image_thumbnail_url"),
            image_url=data.get("header_image_url"),
            artist=artist,
            album=Album.from_api(album_data, artist) if album_data and not partial else None,
            released_at=data.get("release_date") if not partial else None,
            instrumental=data.get("instrumental", False),
            partial=partial,
            raw=data,
        )
        song._client = client
        return song

    def lyrics(self, remove_chorus: bool = False) -> str:
        """Fetch the lyrics of this song from its Genius page.

        Raises:
            InvalidArgumentError: If ``remove_chorus`` is not a bool.
            AccessDeniedError: If Genius blocks the request.
            NoResultError: If the page has no lyrics.
        """
        if not isinstance(remove_chorus, bool):
            raise InvalidArgumentError("remove_chorus", "bool", type(remove_chorus).__name__)
        fetcher = self._client.lyrics_fetcher if self._client is not None else LyricsFetcher()
        return fetcher.fetch_lyrics(str(self.url), remove_chorus)

    def fetch(self) -> Song:
        """Load the full song record and update album and release date in place.

        Raises:
            RequiresGeniusKeyError: If the owning client has no access token.
        """
        if self._client is None or not self._client.key:
            raise RequiresGeniusKeyError()

        data = self._client.song_data(self.id)
        album_data = data.get("album")
        self.album = Album.from_api(album_data, self.artist) if album_data else None
        release_date = data.get("release_date")
        self.released_at = date.fromisoformat(release_date) if release_date else None
        self.partial = False
        self.raw = data
        return self

    @staticmethod
    def remove_chorus(lyrics: str) -> str:
        """Strip ``[Section]`` markers from lyrics text."""
        return strip_section_markers(lyrics)


class PaginatedSongs(BaseModel):
    """Paginated list of songs from artist."""

    songs: list[Song]
    page: int = Field(1, description="Current page number")
    per_page: int = Field(20, description="Songs per page")
    has_next: bool = Field(False, description="Whether more pages exist")
    total_fetched: int = Field(0, description="Total songs fetched so far")
