"""Typed asynchronous client for the AniList GraphQL API."""

from .client import AniListClient
from .config import ANILIST_GRAPHQL_URL, AniListSettings, get_settings
from .edges import unwrap_characters, unwrap_relations, unwrap_studios
from .exceptions import (
    AlreadyLoadedError,
    AniListError,
    ApiError,
    ClientNotAttachedError,
    DecodeError,
    InvalidIdentifierError,
    TransportError,
    UnsupportedOperationError,
)
from .executor import RequestExecutor
from .loader import load_full
from .operations import ActionKind, EntityKind, resolve

__all__ = [
    "ANILIST_GRAPHQL_URL",
    "ActionKind",
    "AlreadyLoadedError",
    "AniListClient",
    "AniListError",
    "AniListSettings",
    "ApiError",
    "ClientNotAttachedError",
    "DecodeError",
    "EntityKind",
    "InvalidIdentifierError",
    "RequestExecutor",
    "TransportError",
    "UnsupportedOperationError",
    "get_settings",
    "load_full",
    "resolve",
    "unwrap_characters",
    "unwrap_relations",
    "unwrap_studios",
]
