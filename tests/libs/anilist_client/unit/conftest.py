"""Shared fixtures for anilist_client unit tests."""

import copy
import json
from typing import Any, Callable, Generator
from unittest.mock import AsyncMock, MagicMock

import pytest

from anilist_client.config import get_settings

ANIME_PAYLOAD: dict[str, Any] = {
    "id": 20,
    "idMal": 20,
    "type": "ANIME",
    "title": {
        "romaji": "NARUTO",
        "english": "Naruto",
        "native": "NARUTO -ナルト-",
        "userPreferred": "NARUTO",
    },
    "format": "TV",
    "status": "FINISHED",
    "description": "Naruto Uzumaki, a hyperactive and knuckle-headed ninja...",
    "startDate": {"year": 2002, "month": 10, "day": 3},
    "endDate": {"year": 2007, "month": 2, "day": 8},
    "season": "FALL",
    "seasonYear": 2002,
    "seasonInt": 24,
    "episodes": 220,
    "duration": 23,
    "countryOfOrigin": "JP",
    "isLicensed": True,
    "source": "MANGA",
    "hashtag": "#NARUTO",
    "updatedAt": 1700000000,
    "coverImage": {
        "extraLarge": "https://img.anili.st/cover/xl/20.jpg",
        "large": "https://img.anili.st/cover/l/20.jpg",
        "medium": "https://img.anili.st/cover/m/20.jpg",
        "color": "#e47850",
    },
    "bannerImage": "https://img.anili.st/banner/20.jpg",
    "genres": ["Action", "Adventure"],
    "synonyms": ["NARUTO ナルト"],
    "averageScore": 79,
    "meanScore": 79,
    "popularity": 600000,
    "isLocked": False,
    "trending": 10,
    "favourites": 50000,
    "tags": [
        {
            "id": 111,
            "name": "Ninja",
            "description": "Prominently features ninja.",
            "category": "Theme-Other-Organisations",
            "rank": 95,
            "isGeneralSpoiler": False,
            "isMediaSpoiler": False,
            "isAdult": False,
            "userId": None,
        }
    ],
    "relations": {
        "edges": [
            {
                "id": 1001,
                "relationType": "SEQUEL",
                "isMainStudio": False,
                "node": {
                    "id": 1735,
                    "type": "ANIME",
                    "title": {"romaji": "Naruto: Shippuuden"},
                    "format": "TV",
                    "status": "FINISHED",
                },
            },
            {
                "id": 1002,
                "relationType": "ADAPTATION",
                "isMainStudio": False,
                "node": {
                    "id": 30011,
                    "type": "MANGA",
                    "title": {"romaji": "NARUTO"},
                    "format": "MANGA",
                    "status": "FINISHED",
                },
            },
        ]
    },
    "characters": {
        "edges": [
            {
                "role": "MAIN",
                "node": {
                    "id": 17,
                    "name": {"full": "Naruto Uzumaki", "native": "うずまきナルト"},
                    "image": {"large": "https://img.anili.st/char/l/17.png", "medium": None},
                    "siteUrl": "https://anilist.co/character/17",
                },
                "voiceActors": [
                    {
                        "id": 95011,
                        "name": {"full": "Junko Takeuchi"},
                        "languageV2": "Japanese",
                    }
                ],
            }
        ]
    },
    "studios": {
        "edges": [
            {
                "isMain": True,
                "node": {"id": 1, "name": "Studio Pierrot", "isAnimationStudio": True},
            }
        ]
    },
    "isFavourite": False,
    "isFavouriteBlocked": False,
    "isAdult": False,
    "nextAiringEpisode": None,
    "externalLinks": [
        {
            "id": 1,
            "url": "https://www.crunchyroll.com/naruto",
            "site": "Crunchyroll",
            "siteId": 5,
            "type": "STREAMING",
            "language": "English",
            "color": "#F88A24",
            "icon": None,
            "notes": None,
            "isDisabled": False,
        }
    ],
    "streamingEpisodes": [],
    "siteUrl": "https://anilist.co/anime/20",
}

SEARCH_ANIME_PAYLOAD: dict[str, Any] = {
    "data": {
        "Page": {
            "media": [
                {
                    "id": 20,
                    "idMal": 20,
                    "type": "ANIME",
                    "title": {"romaji": "NARUTO", "english": "Naruto"},
                    "format": "TV",
                    "status": "FINISHED",
                    "coverImage": {"medium": "https://img.anili.st/cover/m/20.jpg"},
                    "isAdult": False,
                    "siteUrl": "https://anilist.co/anime/20",
                },
                {
                    "id": 1735,
                    "type": "ANIME",
                    "title": {"romaji": "Naruto: Shippuuden"},
                    "format": "TV",
                    "status": "FINISHED",
                    "siteUrl": "https://anilist.co/anime/1735",
                },
            ]
        }
    }
}


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Run every test without a token from the environment and with fresh settings."""
    monkeypatch.delenv("ANILIST_API_TOKEN", raising=False)
    monkeypatch.delenv("ANILIST_TIMEOUT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def anime_payload() -> dict[str, Any]:
    return copy.deepcopy(ANIME_PAYLOAD)


@pytest.fixture
def anime_envelope(anime_payload: dict[str, Any]) -> dict[str, Any]:
    return {"data": {"Media": anime_payload}}


@pytest.fixture
def search_anime_envelope() -> dict[str, Any]:
    return copy.deepcopy(SEARCH_ANIME_PAYLOAD)


def _cm(response: Any) -> AsyncMock:
    cm = AsyncMock()
    cm.__aenter__ = AsyncMock(return_value=response)
    cm.__aexit__ = AsyncMock(return_value=None)
    return cm


def _response(body: Any, status: int = 200) -> AsyncMock:
    response = AsyncMock()
    response.status = status
    if isinstance(body, bytes):
        raw = body
    elif isinstance(body, str):
        raw = body.encode("utf-8")
    else:
        raw = json.dumps(body).encode("utf-8")
    response.read = AsyncMock(return_value=raw)
    return response


@pytest.fixture
def make_session() -> Callable[..., MagicMock]:
    """
    Build a mock aiohttp session whose ``post`` answers with the given bodies in order.

    Each body is a JSON-serialisable object, a raw string or bytes, or a ``(status, body)`` tuple.
    """

    def factory(*bodies: Any) -> MagicMock:
        responses = []
        for body in bodies:
            status = 200
            if isinstance(body, tuple):
                status, body = body
            responses.append(_cm(_response(body, status)))
        session = MagicMock()
        session.post = MagicMock(side_effect=responses)
        return session

    return factory
