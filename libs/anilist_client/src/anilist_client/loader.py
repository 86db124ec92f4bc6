"""Reloading partial records through the client that produced them."""

import logging
from typing import TYPE_CHECKING, TypeVar

from .exceptions import AlreadyLoadedError, ClientNotAttachedError
from .models.record import Record

if TYPE_CHECKING:
    from .client import AniListClient

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Record)


async def load_full(record: RecordT, client: "AniListClient | None" = None) -> RecordT:
    """
    Fetch the fully loaded version of a partial record.

    The ``get`` request goes through ``client`` when given, otherwise through
    the client attached to the record, so the original token and timeout
    apply. ``record`` itself is not modified.

    Raises:
        AlreadyLoadedError: If ``record`` is already fully loaded.
        ClientNotAttachedError: If no client is available.
        UnsupportedOperationError: If the entity has no ``get`` document.
    """
    if record.is_full_loaded:
        raise AlreadyLoadedError(type(record).__name__)

    owner = client if client is not None else record.client
    if owner is None:
        raise ClientNotAttachedError(
            f"{type(record).__name__} {record.id} has no client to load through"
        )

    logger.debug(f"Loading full {type(record).__name__} {record.id}")
    return await owner.fetch(record.entity_kind, record.id)
