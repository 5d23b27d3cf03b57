"""Shared fixtures for lyrics module tests."""

import random
from unittest.mock import MagicMock

import pytest
import requests


@pytest.fixture
def song_url() -> str:
    return "https://genius.com/Test-artist-test-song-lyrics"


@pytest.fixture
def song_page() -> str:
    """Song page with two lyrics containers around unrelated markup."""
    return """<!DOCTYPE html>
<html>
<head><title>Test Artist - Test Song Lyrics | Genius Lyrics</title></head>
<body>
<div class="Header">Test Song</div>
<div data-lyrics-container="true" class="Lyrics__Container">[Verse 1]<br>I love you<br/>You &amp; me<br /><a href="/annotation"><span>Tom&#039;s &quot;song&quot;</span></a></div>
<div class="Ad">Advertisement</div>
<div data-lyrics-container="true">[Chorus]<br/>You love me</div>
</body>
</html>"""


@pytest.fixture
def empty_page() -> str:
    return (
        "<html><body><div class='LyricsPlaceholder'>"
        "Lyrics for this song have yet to be released."
        "</div></body></html>"
    )


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)


def make_response(text: str = "", status_code: int = 200) -> MagicMock:
    """Build a requests.Response stand-in whose raise_for_status behaves like the real one."""
    response = MagicMock(spec=requests.Response)
    response.text = text
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Client Error", response=response
        )
    return response


@pytest.fixture
def make_session():
    """Factory for a mock session returning the given page or raising the given error."""

    def _make(text: str = "", status_code: int = 200, error: Exception | None = None) -> MagicMock:
        session = MagicMock(spec=requests.Session)
        if error is not None:
            session.get.side_effect = error
        else:
            session.get.return_value = make_response(text, status_code)
        return session

    return _make
