"""
Shared pytest fixtures.

Every external dependency (the aiohttp session, Home Assistant's executor and
the google-auth token refresh) is replaced by mocks so no test touches the
network.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest


def make_response(status=200, json_data=None, json_error=None):
    """Build a mock aiohttp response."""
    response = MagicMock()
    response.status = status
    response.ok = 200 <= status < 300
    if json_error is not None:
        response.json = AsyncMock(side_effect=json_error)
    else:
        response.json = AsyncMock(return_value=json_data)
    return response


def make_session(*responses):
    """Build a mock aiohttp session whose ``get`` yields ``responses`` in order."""
    session = MagicMock()
    contexts = []
    for response in responses:
        context = MagicMock()
        context.__aenter__ = AsyncMock(return_value=response)
        context.__aexit__ = AsyncMock(return_value=False)
        contexts.append(context)
    session.get = MagicMock(side_effect=contexts)
    return session


@pytest.fixture
def mock_hass():
    """Home Assistant stand-in whose executor runs jobs inline."""
    hass = MagicMock()
    hass.data = {}
    hass.async_add_executor_job = AsyncMock(side_effect=lambda func, *args: func(*args))
    return hass


@pytest.fixture
def channel_payload():
    """Data API response for ``channels?part=snippet,statistics&mine=true``."""
    return {
        "items": [
            {
                "id": "UC1234567890abcdefghijkl",
                "snippet": {
                    "title": "Test Channel",
                    "thumbnails": {"default": {"url": "https://img.example/ch.jpg"}},
                },
                "statistics": {
                    "subscriberCount": "1500",
                    "viewCount": "250000",
                    "videoCount": "3",
                },
            }
        ]
    }


@pytest.fixture
def uploads_payload():
    """Data API response for ``channels?part=contentDetails&mine=true``."""
    return {
        "items": [
            {"contentDetails": {"relatedPlaylists": {"uploads": "UU1234567890abcdefghijkl"}}}
        ]
    }


@pytest.fixture
def playlist_payload():
    """Uploads playlist with three members."""
    return {
        "items": [
            {"contentDetails": {"videoId": "vid1"}},
            {"contentDetails": {"videoId": "vid2"}},
            {"contentDetails": {"videoId": "vid3"}},
        ]
    }


@pytest.fixture
def videos_payload():
    """Data API response for the three playlist members."""
    return {
        "items": [
            {
                "id": "vid1",
                "snippet": {
                    "title": "Long form tutorial",
                    "publishedAt": "2024-01-01T10:00:00Z",
                    "thumbnails": {"medium": {"url": "https://img.example/1.jpg"}},
                },
                "statistics": {"viewCount": "1000", "likeCount": "100", "commentCount": "10"},
                "contentDetails": {"duration": "PT12M30S"},
            },
            {
                "id": "vid2",
                "snippet": {
                    "title": "Quick tip #Shorts",
                    "publishedAt": "2024-01-02T10:00:00Z",
                    "thumbnails": {"medium": {"url": "https://img.example/2.jpg"}},
                },
                "statistics": {"viewCount": "5000", "likeCount": "300", "commentCount": "20"},
                "contentDetails": {"duration": "PT1M5S"},
            },
            {
                "id": "vid3",
                "snippet": {
                    "title": "Behind the scenes",
                    "publishedAt": "2024-01-03T10:00:00Z",
                    "thumbnails": {"medium": {"url": "https://img.example/3.jpg"}},
                },
                "statistics": {"viewCount": "3000", "likeCount": "150"},
                "contentDetails": {"duration": "PT45S"},
            },
        ]
    }
