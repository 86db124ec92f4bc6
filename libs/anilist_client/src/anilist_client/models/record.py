"""Base class for top-level records that can be reloaded through the API."""

from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import Field, PrivateAttr, model_validator

from ..operations import EntityKind
from .base import WireModel

if TYPE_CHECKING:
    from ..client import AniListClient


class Record(WireModel):
    """
    A top-level entity (media, character, person, studio or user).

    Records are immutable snapshots. A record decoded from a ``get`` response
    is fully loaded; one decoded from a search result or an edge is partial
    and keeps a reference to the client that fetched it so ``load_full`` can
    reissue the request with the same token and timeout.
    """

    entity_kind: ClassVar[EntityKind]

    id: int

    _full_loaded: bool = PrivateAttr(default=False)
    _client: Any = PrivateAttr(default=None)

    @property
    def is_full_loaded(self) -> bool:
        return self._full_loaded

    @property
    def client(self) -> "AniListClient | None":
        return self._client

    def _attach(self, client: "AniListClient | None", *, full_loaded: bool) -> "Record":
        self._client = client
        self._full_loaded = full_loaded
        return self

    async def load_full(self, client: "AniListClient | None" = None) -> "Record":
        """
        Fetch the complete version of this partial record.

        Returns a new record; ``self`` is left unchanged.

        Raises:
            AlreadyLoadedError: If the record is already fully loaded.
            ClientNotAttachedError: If no client is attached and none is given.
        """
        from ..loader import load_full

        return await load_full(self, client)


class GraphFragment(WireModel):
    """
    A connection (``{"edges": [...]}``) kept exactly as the API returned it.

    Edges are typed only when the owning record's accessor is called, and
    that work is repeated on every call. A missing or malformed connection is
    treated as empty.
    """

    edges: list[Any] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def tolerate_shape(cls, data: Any) -> Any:
        if not isinstance(data, dict) or not isinstance(data.get("edges"), list):
            return {}
        return data

    def __len__(self) -> int:
        return len(self.edges)
