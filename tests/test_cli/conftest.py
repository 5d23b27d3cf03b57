"""Shared fixtures for CLI tests."""

import pytest
from typer.testing import CliRunner


@pytest.fixture
def cli_runner():
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture
def mock_settings():
    """Mock Settings object for testing."""
    from geniuskit.config import Settings

    return Settings(genius_access_token="test_token_123")


@pytest.fixture
def mock_song():
    """Create a full Song model."""
    from geniuskit.genius.models import Song

    return Song.from_api(
        {
            "id": 456,
            "title": "Test Song",
            "full_title": "Test Song by Test Artist",
            "title_with_featured": "Test Song (Ft. Guest)",
            "url": "https://genius.com/Test-artist-test-song-lyrics",
            "primary_artist": {
                "id": 123,
                "name": "Test Artist",
                "url": "https://genius.com/artists/Test-artist",
            },
            "album": {
                "id": 789,
                "name": "Test Album",
                "url": "https://genius.com/albums/Test-artist/Test-album",
            },
            "release_date": "2020-03-20",
        }
    )
