"""Mapping from (entity, action) pairs to the bundled GraphQL query documents."""

from enum import Enum
from functools import lru_cache
from importlib import resources

from .exceptions import UnsupportedOperationError


class EntityKind(str, Enum):
    """Entities exposed by the AniList API."""

    ANIME = "anime"
    MANGA = "manga"
    CHARACTER = "character"
    PERSON = "person"
    USER = "user"
    STUDIO = "studio"


class ActionKind(str, Enum):
    """Operations that can be performed on an entity."""

    GET = "get"
    SEARCH = "search"


# Only the pairs listed here have a query document.
QUERY_DOCUMENTS: dict[tuple[EntityKind, ActionKind], str] = {
    (EntityKind.ANIME, ActionKind.GET): "get_anime.graphql",
    (EntityKind.MANGA, ActionKind.GET): "get_manga.graphql",
    (EntityKind.CHARACTER, ActionKind.GET): "get_character.graphql",
    (EntityKind.PERSON, ActionKind.GET): "get_person.graphql",
    (EntityKind.USER, ActionKind.GET): "get_user.graphql",
    (EntityKind.ANIME, ActionKind.SEARCH): "search_anime.graphql",
    (EntityKind.MANGA, ActionKind.SEARCH): "search_manga.graphql",
    (EntityKind.USER, ActionKind.SEARCH): "search_user.graphql",
}


def _coerce(kind: type[Enum], value: "str | Enum", *, entity: str, action: str) -> Enum:
    if isinstance(value, kind):
        return value
    try:
        return kind(str(value).strip().lower())
    except ValueError as exc:
        raise UnsupportedOperationError(entity, action) from exc


@lru_cache
def _read_document(filename: str) -> str:
    return resources.files(__package__).joinpath("queries", filename).read_text(
        encoding="utf-8"
    )


def resolve(entity: EntityKind | str, action: ActionKind | str) -> str:
    """
    Return the query document bundled for ``(entity, action)``.

    Strings are accepted case-insensitively (``"Anime"``, ``"SEARCH"``).

    Raises:
        UnsupportedOperationError: If the pair is unknown or has no bundled document.
    """
    entity_name = getattr(entity, "value", entity)
    action_name = getattr(action, "value", action)
    entity_kind = _coerce(EntityKind, entity, entity=entity_name, action=action_name)
    action_kind = _coerce(ActionKind, action, entity=entity_name, action=action_name)

    filename = QUERY_DOCUMENTS.get((entity_kind, action_kind))
    if filename is None:
        raise UnsupportedOperationError(entity_kind.value, action_kind.value)
    return _read_document(filename)


def is_supported(entity: EntityKind | str, action: ActionKind | str) -> bool:
    """Return whether a query document exists for ``(entity, action)``."""
    try:
        resolve(entity, action)
    except UnsupportedOperationError:
        return False
    return True
