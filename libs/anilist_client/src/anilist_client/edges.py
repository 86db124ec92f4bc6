"""
Flattening of GraphQL connections (``{"edges": [{"node": ..., ...}]}``).

Unwrapping is lenient for every entity: an edge that is not an object, has
no ``node`` or whose node fails to decode is skipped and logged, and the
remaining edges are still returned.
"""

import logging
from typing import TYPE_CHECKING, Any, Iterator

from pydantic import ValidationError

from .decoding import decode_record
from .exceptions import DecodeError
from .models.enums import CharacterRole, MediaType
from .models.media import Anime, Manga, Relation
from .models.people import Character, Person
from .models.record import GraphFragment
from .models.studio import Studio

if TYPE_CHECKING:
    from .client import AniListClient

logger = logging.getLogger(__name__)

_MEDIA_MODELS: dict[MediaType, type[Anime] | type[Manga]] = {
    MediaType.ANIME: Anime,
    MediaType.MANGA: Manga,
}


def _edges(fragment: GraphFragment | dict[str, Any] | None) -> Iterator[tuple[int, dict[str, Any]]]:
    if fragment is None:
        return
    if not isinstance(fragment, GraphFragment):
        fragment = GraphFragment.model_validate(fragment)
    for index, edge in enumerate(fragment.edges):
        if not isinstance(edge, dict):
            logger.debug(f"Skipping edge {index}: not an object")
            continue
        yield index, edge


def unwrap_characters(
    fragment: GraphFragment | dict[str, Any] | None,
    *,
    client: "AniListClient | None" = None,
) -> list[Character]:
    """
    Decode character edges, merging each edge's ``role`` and ``voiceActors``.

    Returned characters are partial records.
    """
    characters: list[Character] = []
    for index, edge in _edges(fragment):
        try:
            character = decode_record(Character, edge.get("node"), client=client)
        except DecodeError as exc:
            logger.debug(f"Skipping character edge {index}: {exc}")
            continue

        update: dict[str, Any] = {}
        if edge.get("role") is not None:
            update["role"] = CharacterRole(edge["role"])
        voice_actors = _voice_actors(edge.get("voiceActors"), client)
        if voice_actors:
            update["voice_actors"] = voice_actors

        characters.append(character.model_copy(update=update) if update else character)
    return characters


def _voice_actors(raw: Any, client: "AniListClient | None") -> list[Person]:
    if not isinstance(raw, list):
        return []
    people = []
    for item in raw:
        try:
            people.append(decode_record(Person, item, client=client))
        except DecodeError as exc:
            logger.debug(f"Skipping voice actor: {exc}")
    return people


def unwrap_relations(
    fragment: GraphFragment | dict[str, Any] | None,
    *,
    client: "AniListClient | None" = None,
) -> list[Relation]:
    """
    Decode relation edges into :class:`Relation` values.

    The node's ``type`` tag selects :class:`Anime` or :class:`Manga`. A node
    with an unknown or missing tag yields a relation whose ``media`` is
    ``None`` and whose ``media_type`` is ``UNKNOWN``.
    """
    relations: list[Relation] = []
    for index, edge in _edges(fragment):
        node = edge.get("node")
        if not isinstance(node, dict):
            logger.debug(f"Skipping relation edge {index}: no node")
            continue

        media_type = MediaType(node.get("type") or MediaType.UNKNOWN.value)
        model = _MEDIA_MODELS.get(media_type)
        media = None
        if model is not None:
            try:
                media = decode_record(model, node, client=client)
            except DecodeError as exc:
                logger.debug(f"Skipping relation edge {index}: {exc}")
                continue

        try:
            relation = Relation(
                id=edge.get("id"),
                relation_type=edge.get("relationType"),
                is_main_studio=edge.get("isMainStudio"),
                media_type=media_type,
                media=media,
            )
        except ValidationError as exc:
            logger.debug(f"Skipping relation edge {index}: {exc}")
            continue
        relations.append(relation)
    return relations


def unwrap_studios(
    fragment: GraphFragment | dict[str, Any] | None,
    *,
    client: "AniListClient | None" = None,
) -> list[Studio]:
    """Decode studio edges, merging each edge's ``isMain`` flag."""
    studios: list[Studio] = []
    for index, edge in _edges(fragment):
        try:
            studio = decode_record(Studio, edge.get("node"), client=client)
        except DecodeError as exc:
            logger.debug(f"Skipping studio edge {index}: {exc}")
            continue
        if edge.get("isMain"):
            studio = studio.model_copy(update={"is_main": True})
        studios.append(studio)
    return studios
