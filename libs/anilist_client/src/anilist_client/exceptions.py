"""Exceptions raised by the AniList client."""

from typing import Any


class AniListError(Exception):
    """Base exception for AniList client errors."""


class InvalidIdentifierError(AniListError, ValueError):
    """Raised when an identifier cannot be resolved by the API (zero, negative or missing)."""


class TransportError(AniListError):
    """Raised when the HTTP round trip fails (network error, timeout, non-JSON error status)."""


class DecodeError(AniListError):
    """Raised when a response body is not JSON or does not fit the typed record."""


class ApiError(AniListError):
    """Raised when the API answers with a GraphQL ``errors`` array and no usable data.

    Attributes:
        errors: Error objects as returned by the service; items that are
            not objects are wrapped as ``{"message": str(item)}``.
        status: HTTP-like status of the first error, when the service sent one.
    """

    def __init__(self, errors: list[Any]):
        self.errors: list[dict[str, Any]] = [
            e if isinstance(e, dict) else {"message": str(e)} for e in errors
        ]
        self.status: int | None = next(
            (e.get("status") for e in self.errors if isinstance(e.get("status"), int)),
            None,
        )
        messages = "; ".join(str(e.get("message", e)) for e in self.errors) or "unknown error"
        super().__init__(messages)


class UnsupportedOperationError(AniListError):
    """Raised when no query document is bundled for an (entity, action) pair."""

    def __init__(self, entity: str, action: str):
        self.entity = entity
        self.action = action
        super().__init__(f"No '{action}' operation is available for '{entity}'")


class ClientNotAttachedError(AniListError):
    """Raised when a partial record has no owning client to reload through."""


class AlreadyLoadedError(RuntimeError):
    """Raised when ``load_full`` is called on a record that is already fully loaded.

    This is a programming error, so it does not derive from
    :class:`AniListError`.
    """

    def __init__(self, record_type: str):
        super().__init__(f"This {record_type} is already fully loaded")
