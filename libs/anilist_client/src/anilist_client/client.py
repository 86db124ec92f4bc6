"""
Asynchronous client for the AniList GraphQL API.

Each method issues exactly one HTTP request. The client holds configuration
only (token, timeout, optional session), so one instance can serve
concurrent calls.
"""

import logging
from typing import Any

from .config import get_settings
from .decoding import decode_get, decode_search
from .exceptions import InvalidIdentifierError
from .executor import RequestExecutor
from .loader import load_full
from .models.media import Anime, Manga
from .models.people import Character, Person
from .models.record import Record
from .models.studio import Studio
from .models.user import User
from .operations import ActionKind, EntityKind, resolve

logger = logging.getLogger(__name__)

# Entity -> (key under "data" in a get response, record class)
_GET_TARGETS: dict[EntityKind, tuple[str, type[Record]]] = {
    EntityKind.ANIME: ("Media", Anime),
    EntityKind.MANGA: ("Media", Manga),
    EntityKind.CHARACTER: ("Character", Character),
    EntityKind.PERSON: ("Staff", Person),
    EntityKind.USER: ("User", User),
    EntityKind.STUDIO: ("Studio", Studio),
}

# Entity -> (list key under "data.Page" in a search response, record class)
_SEARCH_TARGETS: dict[EntityKind, tuple[str, type[Record]]] = {
    EntityKind.ANIME: ("media", Anime),
    EntityKind.MANGA: ("media", Manga),
    EntityKind.CHARACTER: ("characters", Character),
    EntityKind.PERSON: ("staff", Person),
    EntityKind.USER: ("users", User),
    EntityKind.STUDIO: ("studios", Studio),
}


def _require_id(value: Any, name: str = "id") -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidIdentifierError(f"{name} must be a positive integer, got {value!r}")
    return value


class AniListClient:
    """
    Typed access to AniList anime, manga, characters, staff and users.

    Args:
        api_token: Bearer token. Defaults to ``ANILIST_API_TOKEN``.
        timeout: Per-request timeout in seconds, 1 to 300. Defaults to
            ``ANILIST_TIMEOUT`` (20). Values outside that range raise ``ValueError``.
        session: Optional aiohttp session shared by all requests. The client
            never closes a session it was given.
    """

    def __init__(
        self,
        api_token: str | None = None,
        timeout: float | None = None,
        *,
        session: Any = None,
    ) -> None:
        settings = get_settings()
        self._executor = RequestExecutor(
            api_token=api_token if api_token is not None else settings.anilist_api_token,
            timeout=timeout if timeout is not None else settings.anilist_timeout,
            session=session,
        )

    @property
    def api_token(self) -> str | None:
        return self._executor.api_token

    @property
    def timeout(self) -> float:
        return self._executor.timeout

    @property
    def session(self) -> Any:
        return self._executor.session

    @classmethod
    def _from_executor(cls, executor: RequestExecutor) -> "AniListClient":
        """Build a client around ``executor`` without consulting settings."""
        client = cls.__new__(cls)
        client._executor = executor
        return client

    def _copy(self, *, api_token: str | None, timeout: float) -> "AniListClient":
        return self._from_executor(
            RequestExecutor(api_token=api_token, timeout=timeout, session=self.session)
        )

    def with_token(self, api_token: str | None) -> "AniListClient":
        """Return a copy of this client that authenticates with ``api_token``.

        ``None`` gives an unauthenticated copy, even when ``ANILIST_API_TOKEN`` is set.
        """
        return self._copy(api_token=api_token, timeout=self.timeout)

    def with_timeout(self, seconds: float) -> "AniListClient":
        """Return a copy of this client with a different per-request timeout."""
        return self._copy(api_token=self.api_token, timeout=seconds)

    def clone(self) -> "AniListClient":
        return self._copy(api_token=self.api_token, timeout=self.timeout)

    def __repr__(self) -> str:
        authenticated = "yes" if self.api_token else "no"
        return f"AniListClient(authenticated={authenticated}, timeout={self.timeout})"

    async def request(
        self,
        entity: EntityKind | str,
        action: ActionKind | str,
        variables: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Run the bundled document for ``(entity, action)`` and return the raw envelope.

        Raises:
            UnsupportedOperationError: If no document exists for the pair.
            TransportError: If the request fails.
            DecodeError: If the response is not a JSON object.
        """
        document = resolve(entity, action)
        return await self._executor.execute(document, variables)

    async def fetch(self, entity: EntityKind, record_id: int) -> Record:
        """Get any entity by id as a fully loaded record."""
        _require_id(record_id)
        key, model = _GET_TARGETS[entity]
        envelope = await self.request(entity, ActionKind.GET, {"id": record_id})
        return decode_get(envelope, key, model, client=self)

    async def _get_media(
        self, entity: EntityKind, media_id: int | None, mal_id: int | None
    ) -> Record:
        if media_id is not None and mal_id is not None:
            raise InvalidIdentifierError("Pass either an AniList id or a MAL id, not both")
        if media_id is None and mal_id is None:
            raise InvalidIdentifierError("An AniList id or a MAL id is required")
        if media_id is not None:
            return await self.fetch(entity, media_id)

        key, model = _GET_TARGETS[entity]
        envelope = await self.request(
            entity, ActionKind.GET, {"mal_id": _require_id(mal_id, "mal_id")}
        )
        return decode_get(envelope, key, model, client=self)

    async def get_anime(self, anime_id: int | None = None, *, mal_id: int | None = None) -> Anime:
        """
        Get a fully loaded anime by AniList id or MyAnimeList id.

        Raises:
            InvalidIdentifierError: If neither or both ids are given, or an id is not positive.
            ApiError: If AniList reports an error, such as an unknown id.
        """
        return await self._get_media(EntityKind.ANIME, anime_id, mal_id)

    async def get_manga(self, manga_id: int | None = None, *, mal_id: int | None = None) -> Manga:
        """Get a fully loaded manga by AniList id or MyAnimeList id."""
        return await self._get_media(EntityKind.MANGA, manga_id, mal_id)

    async def get_character(self, character_id: int) -> Character:
        return await self.fetch(EntityKind.CHARACTER, character_id)

    async def get_person(self, person_id: int) -> Person:
        return await self.fetch(EntityKind.PERSON, person_id)

    async def get_user(self, user_id: int) -> User:
        return await self.fetch(EntityKind.USER, user_id)

    async def get_user_by_name(self, name: str) -> User:
        """Get a fully loaded user by user name."""
        if not isinstance(name, str) or not name.strip():
            raise InvalidIdentifierError("User name must be a non-empty string")
        key, model = _GET_TARGETS[EntityKind.USER]
        envelope = await self.request(EntityKind.USER, ActionKind.GET, {"name": name.strip()})
        return decode_get(envelope, key, model, client=self)

    async def _search(
        self, entity: EntityKind, term: str, page: int, per_page: int
    ) -> list[Record]:
        list_key, model = _SEARCH_TARGETS[entity]
        variables = {"search": term, "page": page, "per_page": per_page}
        envelope = await self.request(entity, ActionKind.SEARCH, variables)
        results = decode_search(envelope, list_key, model, client=self)
        logger.debug(f"AniList {entity.value} search for {term!r} returned {len(results)} results")
        return results

    async def search_anime(self, term: str, page: int = 1, per_page: int = 10) -> list[Anime]:
        """Search anime by title. Results are partial; see ``load_full``."""
        return await self._search(EntityKind.ANIME, term, page, per_page)

    async def search_manga(self, term: str, page: int = 1, per_page: int = 10) -> list[Manga]:
        """Search manga by title. Results are partial; see ``load_full``."""
        return await self._search(EntityKind.MANGA, term, page, per_page)

    async def search_user(self, term: str, page: int = 1, per_page: int = 10) -> list[User]:
        return await self._search(EntityKind.USER, term, page, per_page)

    async def load_full(self, record: Record) -> Record:
        """Reload a partial record through this client."""
        return await load_full(record, self)
