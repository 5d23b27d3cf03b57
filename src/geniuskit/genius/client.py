"""Authenticated Genius API client."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import requests.exceptions
from lyricsgenius import Genius

from geniuskit.config import Settings, settings
from geniuskit.exceptions import GeniusAPIError, NotFoundError, RequiresGeniusKeyError
from geniuskit.lyrics import LyricsFetcher
from geniuskit.logging import get_logger

from .models import Artist, PaginatedSongs, Song

logger = get_logger("genius.client")

T = TypeVar("T")


class GeniusClient:
    """Wrapper around the Genius API for songs and artists.

    Metadata calls need an access token. Lyrics are scraped from the song page
    and work without one.
    """

    DEFAULT_PER_PAGE = 20

    def __init__(
        self,
        access_token: str | None = None,
        settings_obj: Settings | None = None,
        fetcher: LyricsFetcher | None = None,
    ) -> None:
        """
        Initialize GeniusClient.

        Args:
            access_token: Genius API access token. Falls back to settings.
            settings_obj: Settings instance. Uses global settings if None.
            fetcher: LyricsFetcher used for song pages.
        """
        self._settings = settings_obj or settings
        self._token = access_token or self._settings.get_access_token() or None
        self.lyrics_fetcher = fetcher or LyricsFetcher(settings_obj=self._settings)

        self._api: Genius | None = None
        if self._token:
            self._api = Genius(
                access_token=self._token,
                timeout=self._settings.api_timeout,
                retries=0,
                verbose=False,
            )

    @property
    def key(self) -> str | None:
        """The access token, or None when running without one."""
        return self._token

    def search_songs(self, query: str, per_page: int = 10) -> list[Song]:
        """
        Search songs matching a free-text query.

        Args:
            query: Search terms (title, artist, lyrics fragment).
            per_page: Maximum number of hits to return.

        Returns:
            Partial Song models in relevance order.

        Raises:
            RequiresGeniusKeyError: If no access token is configured.
            GeniusAPIError: If the API request fails.
        """
        logger.debug("Searching songs: %s", query)
        result = self._request(lambda api: api.search_songs(query, per_page=per_page))
        hits = (result or {}).get("hits", [])
        songs = [
            Song.from_api(hit["result"], client=self, partial=True)
            for hit in hits
            if hit.get("type", "song") == "song"
        ]
        logger.info("Found %d songs for query: %s", len(songs), query)
        return songs

    def song_data(self, song_id: int) -> dict[str, Any]:
        """
        Get the raw ``/songs/{id}`` payload.

        Raises:
            RequiresGeniusKeyError: If no access token is configured.
            NotFoundError: If the song does not exist.
            GeniusAPIError: If the API request fails.
        """
        result = self._request(lambda api: api.song(song_id))
        if not result or not result.get("song"):
            raise NotFoundError(f"Song not found with ID: {song_id}", song_id=song_id)
        return result["song"]

    def get_song(self, song_id: int) -> Song:
        """Get the full record of a song."""
        return Song.from_api(self.song_data(song_id), client=self)

    def get_artist(self, artist_id: int) -> Artist:
        """
        Get an artist by ID.

        Raises:
            RequiresGeniusKeyError: If no access token is configured.
            NotFoundError: If the artist does not exist.
            GeniusAPIError: If the API request fails.
        """
        result = self._request(lambda api: api.artist(artist_id))
        if not result or not result.get("artist"):
            raise NotFoundError(f"Artist not found with ID: {artist_id}", artist_id=artist_id)
        artist = Artist.from_api(result["artist"])
        logger.info("Found artist: %s (id=%d)", artist.name, artist.id)
        return artist

    def get_artist_songs(
        self,
        artist_id: int,
        page: int = 1,
        per_page: int = DEFAULT_PER_PAGE,
        sort: str = "popularity",
    ) -> PaginatedSongs:
        """
        Get songs for an artist with pagination.

        Args:
            artist_id: Genius artist ID.
            page: Page number (1-indexed).
            per_page: Number of songs per page.
            sort: Sort order - "popularity", "title", or "release_date".

        Returns:
            PaginatedSongs with partial songs for the requested page.

        Raises:
            RequiresGeniusKeyError: If no access token is configured.
            GeniusAPIError: If the API request fails.
        """
        result = self._request(
            lambda api: api.artist_songs(artist_id, per_page=per_page, page=page, sort=sort)
        )

        if result is None:
            return PaginatedSongs(
                songs=[], page=page, per_page=per_page, has_next=False, total_fetched=0
            )

        songs = [
            Song.from_api(data, client=self, partial=True) for data in result.get("songs", [])
        ]

        return PaginatedSongs(
            songs=songs,
            page=page,
            per_page=per_page,
            has_next=result.get("next_page") is not None,
            total_fetched=len(songs),
        )

    def lyrics(self, song: Song, remove_chorus: bool = False) -> str:
        """Fetch the lyrics of ``song`` through this client's LyricsFetcher."""
        return self.lyrics_fetcher.fetch_lyrics(str(song.url), remove_chorus)

    def _request(self, request_fn: Callable[[Genius], T]) -> T:
        """Run one API call, translating transport errors to GeniusAPIError.

        Programming errors are not caught and propagate unchanged.
        """
        if self._api is None:
            raise RequiresGeniusKeyError()

        try:
            return request_fn(self._api)
        except requests.exceptions.HTTPError as e:
            status_code = _status_code(e)
            if status_code == 404:
                raise NotFoundError("Resource not found", status_code=status_code) from e
            raise GeniusAPIError(f"Request failed: {e}", status_code=status_code) from e
        except requests.exceptions.RequestException as e:
            raise GeniusAPIError(f"Request failed: {e}") from e


def _status_code(error: requests.exceptions.HTTPError) -> int | None:
    """Get the HTTP status of an error.

    lyricsgenius raises ``HTTPError(status_code, description)`` without
    attaching the response.
    """
    if error.response is not None:
        return error.response.status_code
    if error.args and isinstance(error.args[0], int):
        return error.args[0]
    return None
