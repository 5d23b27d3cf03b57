"""Shared fixtures for genius module tests."""

from typing import Any

import pytest


@pytest.fixture
def artist_payload() -> dict[str, Any]:
    """An API ``artist`` object."""
    return {
        "id": 123,
        "name": "Test Artist",
        "url": "https://genius.com/artists/Test-artist",
        "image_url": "https://images.genius.com/artist.jpg",
        "header_image_url": "https://images.genius.com/artist-header.jpg",
        "is_verified": True,
        "api_path": "/artists/123",
    }


@pytest.fixture
def album_payload() -> dict[str, Any]:
    return {
        "id": 789,
        "name": "Test Album",
        "full_title": "Test Album by Test Artist",
        "url": "https://genius.com/albums/Test-artist/Test-album",
        "cover_art_url": "https://images.genius.com/cover.jpg",
        "api_path": "/albums/789",
    }


@pytest.fixture
def search_song_payload(artist_payload) -> dict[str, Any]:
    """A song as returned in search hits (no album or release date)."""
    return {
        "id": 456,
        "title": "Test Song",
        "full_title": "Test Song by Test Artist",
        "title_with_featured": "Test Song (Ft. Guest)",
        "url": "https://genius.com/Test-artist-test-song-lyrics",
        "api_path": "/songs/456",
        "header_image_thumbnail_url": "https://images.genius.com/song-thumb.jpg",
        "header_image_url": "https://images.genius.com/song.jpg",
        "instrumental": False,
        "primary_artist": artist_payload,
    }


@pytest.fixture
def full_song_payload(search_song_payload, album_payload) -> dict[str, Any]:
    """A ``/songs/{id}`` payload."""
    return {
        **search_song_payload,
        "album": album_payload,
        "release_date": "2020-03-20",
    }


@pytest.fixture
def mock_settings():
    """Settings with a token for client tests."""
    from geniuskit.config import Settings

    return Settings(genius_access_token="test_token_123")
