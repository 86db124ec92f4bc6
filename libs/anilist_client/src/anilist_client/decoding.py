"""Turning GraphQL response envelopes into typed records."""

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import ValidationError

from .exceptions import ApiError, DecodeError
from .models.record import Record

if TYPE_CHECKING:
    from .client import AniListClient

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Record)


def decode_record(
    model: type[RecordT],
    payload: Any,
    *,
    client: "AniListClient | None" = None,
    full_loaded: bool = False,
) -> RecordT:
    """
    Validate one JSON object into ``model``.

    Parameters:
        model: Record class to decode into.
        payload: The JSON object for a single entity.
        client: Client the record may later reload itself through.
        full_loaded: Whether ``payload`` came from a ``get`` document.

    Raises:
        DecodeError: If ``payload`` is not an object or does not fit ``model``.
    """
    if not isinstance(payload, dict):
        raise DecodeError(
            f"Expected a JSON object for {model.__name__}, got {type(payload).__name__}"
        )
    try:
        record = model.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(f"Failed to decode {model.__name__}: {exc}") from exc
    record._attach(client, full_loaded=full_loaded)
    return record


def extract_data(envelope: Any, key: str) -> Any:
    """
    Return ``envelope["data"][key]``.

    GraphQL errors alongside usable data are logged and otherwise ignored.

    Raises:
        ApiError: If the envelope carries ``errors`` and no data under ``key``.
        DecodeError: If the envelope is not an object or has no data under ``key``.
    """
    if not isinstance(envelope, dict):
        raise DecodeError(f"Expected a JSON object envelope, got {type(envelope).__name__}")

    errors = envelope.get("errors") or []
    data = envelope.get("data")
    subtree = data.get(key) if isinstance(data, dict) else None

    if errors:
        if subtree is None:
            logger.warning(f"AniList GraphQL errors for '{key}': {errors}")
            raise ApiError(errors if isinstance(errors, list) else [{"message": str(errors)}])
        logger.warning(f"AniList GraphQL errors with partial data for '{key}': {errors}")

    if subtree is None:
        raise DecodeError(f"Response has no data for '{key}'")
    return subtree


def decode_get(
    envelope: Any,
    key: str,
    model: type[RecordT],
    *,
    client: "AniListClient | None" = None,
) -> RecordT:
    """Decode the single fully loaded record of a ``get`` response."""
    payload = extract_data(envelope, key)
    try:
        return decode_record(model, payload, client=client, full_loaded=True)
    except DecodeError as exc:
        logger.error(f"Could not decode AniList '{key}' response: {exc}")
        raise


def decode_search(
    envelope: Any,
    list_key: str,
    model: type[RecordT],
    *,
    client: "AniListClient | None" = None,
) -> list[RecordT]:
    """Decode the partial records listed under ``data.Page.<list_key>``."""
    page = extract_data(envelope, "Page")
    if not isinstance(page, dict):
        raise DecodeError(f"Expected 'Page' to be an object, got {type(page).__name__}")

    items = page.get(list_key) or []
    if not isinstance(items, list):
        raise DecodeError(f"Expected 'Page.{list_key}' to be a list")
    return [decode_record(model, item, client=client) for item in items]
