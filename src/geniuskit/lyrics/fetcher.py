"""Scrape song lyrics from Genius song pages."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Any

import requests

from geniuskit.config import Settings, settings
from geniuskit.exceptions import AccessDeniedError, InvalidArgumentError, NoResultError
from geniuskit.logging import get_logger

from .fingerprint import USER_AGENTS, VIEWPORTS, Viewport, browser_headers, random_profile
from .normalize import ContainerExtractor, extract_lyrics, soup_containers, strip_section_markers

logger = get_logger("lyrics.fetcher")


class LyricsFetcher:
    """Fetch a song page while posing as a desktop browser and extract its lyrics.

    Each call draws a fresh browser fingerprint and request timeout. The
    fetcher holds no per-call state, so one instance can serve concurrent
    callers.
    """

    def __init__(
        self,
        settings_obj: Settings | None = None,
        session: requests.Session | None = None,
        rng: random.Random | None = None,
        user_agents: Sequence[str] = USER_AGENTS,
        viewports: Sequence[Viewport] = VIEWPORTS,
        extractor: ContainerExtractor = soup_containers,
    ) -> None:
        """
        Initialize LyricsFetcher.

        Args:
            settings_obj: Settings instance. Uses global settings if None.
            session: HTTP session to send requests with. Uses ``requests.get`` if None.
            rng: Random source for fingerprints and timeout jitter.
            user_agents: Pool of User-Agent strings to choose from.
            viewports: Pool of viewport sizes to choose from.
            extractor: Backend returning the inner markup of lyrics containers.
        """
        self._settings = settings_obj or settings
        self._session = session
        self._rng = rng or random.Random()
        self._user_agents = tuple(user_agents)
        self._viewports = tuple(viewports)
        self._extractor = extractor

    def fetch_lyrics(self, url: str, remove_section_markers: bool = False) -> str:
        """
        Fetch the lyrics of the song at ``url``.

        Args:
            url: Canonical Genius page URL of the song.
            remove_section_markers: Strip ``[Chorus]``-style markers at line starts.

        Returns:
            Lyrics as newline-delimited text.

        Raises:
            InvalidArgumentError: If ``remove_section_markers`` is not a bool.
            AccessDeniedError: If Genius answers with HTTP 403.
            NoResultError: If the page holds no lyrics text.
            requests.exceptions.RequestException: On any other transport failure.
        """
        if not isinstance(remove_section_markers, bool):
            raise InvalidArgumentError(
                "remove_section_markers", "bool", type(remove_section_markers).__name__
            )

        page = self._get_page(url)
        lyrics, containers = extract_lyrics(
            page,
            selector=self._settings.lyrics_container_selector,
            extractor=self._extractor,
        )

        if not lyrics:
            logger.debug("No lyrics text in %d containers at %s", containers, url)
            raise NoResultError(url=url, containers=containers)

        logger.debug("Extracted lyrics from %d containers at %s", containers, url)
        return strip_section_markers(lyrics) if remove_section_markers else lyrics

    def request_options(self) -> dict[str, Any]:
        """Draw headers and timeout for a single request."""
        profile = random_profile(self._rng, self._user_agents, self._viewports)
        jitter_ms = self._settings.timeout_jitter_ms
        timeout_ms = self._settings.request_timeout_ms + (
            self._rng.randrange(jitter_ms) if jitter_ms else 0
        )
        return {"headers": browser_headers(profile), "timeout": timeout_ms / 1000}

    def _get_page(self, url: str) -> str:
        """GET the page, separating 403 responses from other failures."""
        get = self._session.get if self._session is not None else requests.get
        try:
            response = get(url, **self.request_options())
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            if e.response is not None and e.response.status_code == 403:
                raise AccessDeniedError(url) from e
            logger.error("Error fetching lyrics from %s: %s", url, e)
            raise
        except requests.exceptions.RequestException as e:
            logger.error("Error fetching lyrics from %s: %s", url, e)
            raise
        return response.text


def fetch_lyrics(url: str, remove_section_markers: bool = False) -> str:
    """Fetch lyrics with a default LyricsFetcher."""
    return LyricsFetcher().fetch_lyrics(url, remove_section_markers)
