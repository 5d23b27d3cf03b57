"""Randomized browser fingerprints for lyrics page requests."""

from __future__ import annotations

import random
from collections.abc import Mapping, Sequence
from typing import Final, NamedTuple, TypeVar

T = TypeVar("T")


class Viewport(NamedTuple):
    """Desktop screen dimensions in CSS pixels."""

    width: int
    height: int


class BrowserProfile(NamedTuple):
    """User-Agent and viewport sent together with one request."""

    user_agent: str
    viewport: Viewport


USER_AGENTS: Final[tuple[str, ...]] = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:123.0) Gecko/20100101 Firefox/123.0",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.3 Safari/605.1.15",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Edge/120.0.0.0",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
)

VIEWPORTS: Final[tuple[Viewport, ...]] = (
    Viewport(1920, 1080),
    Viewport(1366, 768),
    Viewport(1536, 864),
    Viewport(1440, 900),
    Viewport(1280, 720),
)

GENIUS_ORIGIN: Final = "https://genius.com"

_BASE_HEADERS: Final[Mapping[str, str]] = {
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,"
        "image/apng,*/*;q=0.8,application/signed-exchange;v=b3;q=0.7"
    ),
    "Accept-Language": "en-US,en;q=0.9",
    "Accept-Encoding": "gzip, deflate, br",
    "Referer": f"{GENIUS_ORIGIN}/",
    "Origin": GENIUS_ORIGIN,
    "Sec-Ch-Ua": '"Chromium";v="120", "Not(A:Brand";v="24"',
    "Sec-Ch-Ua-Mobile": "?0",
    "Sec-Ch-Ua-Platform": '"Windows"',
    "Sec-Fetch-Dest": "document",
    "Sec-Fetch-Mode": "navigate",
    "Sec-Fetch-Site": "same-origin",
    "Sec-Fetch-User": "?1",
    "Upgrade-Insecure-Requests": "1",
    "Cache-Control": "max-age=0",
    "Device-Memory": "8",
    "Connection": "keep-alive",
}


def pick(items: Sequence[T], rng: random.Random) -> T:
    """Return one element of ``items`` chosen uniformly at random.

    Raises:
        ValueError: If ``items`` is empty.
    """
    if not items:
        raise ValueError("Cannot pick a random item from an empty pool")
    return items[rng.randrange(len(items))]


def random_profile(
    rng: random.Random,
    user_agents: Sequence[str] = USER_AGENTS,
    viewports: Sequence[Viewport] = VIEWPORTS,
) -> BrowserProfile:
    """Draw a User-Agent and a viewport independently of each other."""
    return BrowserProfile(user_agent=pick(user_agents, rng), viewport=pick(viewports, rng))


def browser_headers(profile: BrowserProfile) -> dict[str, str]:
    """Build navigation headers for a desktop browser described by ``profile``."""
    headers = {"User-Agent": profile.user_agent}
    headers.update(_BASE_HEADERS)
    headers["Viewport-Width"] = str(profile.viewport.width)
    return headers
