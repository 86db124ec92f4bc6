"""Tests for the (entity, action) -> query document mapping."""

import pytest

from anilist_client.exceptions import UnsupportedOperationError
from anilist_client.operations import (
    QUERY_DOCUMENTS,
    ActionKind,
    EntityKind,
    is_supported,
    resolve,
)

SUPPORTED = [
    (EntityKind.ANIME, ActionKind.GET),
    (EntityKind.MANGA, ActionKind.GET),
    (EntityKind.CHARACTER, ActionKind.GET),
    (EntityKind.PERSON, ActionKind.GET),
    (EntityKind.USER, ActionKind.GET),
    (EntityKind.ANIME, ActionKind.SEARCH),
    (EntityKind.MANGA, ActionKind.SEARCH),
    (EntityKind.USER, ActionKind.SEARCH),
]


@pytest.mark.parametrize("entity, action", SUPPORTED)
def test_supported_pairs_resolve_to_a_document(entity: EntityKind, action: ActionKind):
    document = resolve(entity, action)

    assert document.lstrip().startswith("query")
    assert is_supported(entity, action)


def test_matrix_has_exactly_the_bundled_pairs():
    assert set(QUERY_DOCUMENTS) == set(SUPPORTED)


@pytest.mark.parametrize(
    "entity, action",
    [
        (EntityKind.STUDIO, ActionKind.GET),
        (EntityKind.CHARACTER, ActionKind.SEARCH),
        (EntityKind.PERSON, ActionKind.SEARCH),
        (EntityKind.STUDIO, ActionKind.SEARCH),
    ],
)
def test_missing_pairs_raise_unsupported(entity: EntityKind, action: ActionKind):
    with pytest.raises(UnsupportedOperationError) as exc_info:
        resolve(entity, action)

    assert exc_info.value.entity == entity.value
    assert exc_info.value.action == action.value
    assert not is_supported(entity, action)


def test_strings_resolve_case_insensitively():
    assert resolve("Anime", "GET") == resolve(EntityKind.ANIME, ActionKind.GET)


@pytest.mark.parametrize("entity, action", [("planet", "get"), ("anime", "delete")])
def test_unknown_names_raise_unsupported(entity: str, action: str):
    with pytest.raises(UnsupportedOperationError):
        resolve(entity, action)


def test_documents_target_the_right_root_fields():
    assert "type: ANIME" in resolve("anime", "get")
    assert "type: MANGA" in resolve("manga", "get")
    assert "Staff(" in resolve("person", "get")
    assert "users(search" in resolve("user", "search")
