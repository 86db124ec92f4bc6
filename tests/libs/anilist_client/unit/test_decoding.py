"""Tests for decoding response envelopes into records."""

import logging
from typing import Any

import pytest
from pydantic import ValidationError

from anilist_client.decoding import decode_get, decode_record, decode_search, extract_data
from anilist_client.exceptions import ApiError, DecodeError
from anilist_client.models import Anime, Format, Manga, MediaType, Season, Status, User


class TestDecodeRecord:
    def test_camel_case_keys_map_to_fields(self, anime_payload: dict[str, Any]):
        anime = decode_record(Anime, anime_payload)

        assert anime.id == 20
        assert anime.id_mal == 20
        assert anime.season_year == 2002
        assert anime.country_of_origin == "JP"
        assert anime.average_score == 79
        assert anime.format is Format.TV
        assert anime.status is Status.FINISHED
        assert anime.season is Season.FALL

    def test_renamed_fields(self, anime_payload: dict[str, Any]):
        anime = decode_record(Anime, anime_payload)

        assert anime.media_type is MediaType.ANIME
        assert anime.cover is not None
        assert anime.cover.largest() == "https://img.anili.st/cover/xl/20.jpg"
        assert anime.banner == "https://img.anili.st/banner/20.jpg"
        assert anime.url == "https://anilist.co/anime/20"

    def test_nulls_become_defaults(self, anime_payload: dict[str, Any]):
        anime_payload.update({"genres": None, "tags": None, "description": None, "relations": None})

        anime = decode_record(Anime, anime_payload)

        assert anime.genres == []
        assert anime.tags == []
        assert anime.description is None
        assert anime.relations() == []
        assert anime.next_airing_episode is None

    def test_unknown_keys_are_ignored(self, anime_payload: dict[str, Any]):
        anime_payload["somethingNew"] = {"nested": True}

        assert decode_record(Anime, anime_payload).id == 20

    def test_decoding_twice_gives_equal_records(self, anime_payload: dict[str, Any]):
        assert decode_record(Anime, anime_payload) == decode_record(Anime, anime_payload)

    def test_missing_id_is_decode_error(self, anime_payload: dict[str, Any]):
        del anime_payload["id"]

        with pytest.raises(DecodeError, match="Anime"):
            decode_record(Anime, anime_payload)

    def test_missing_title_is_decode_error(self, anime_payload: dict[str, Any]):
        anime_payload["title"] = {}

        with pytest.raises(DecodeError):
            decode_record(Anime, anime_payload)

    def test_non_object_payload_is_decode_error(self):
        with pytest.raises(DecodeError):
            decode_record(Anime, ["not", "an", "object"])

    def test_attaches_client_and_load_state(self, anime_payload: dict[str, Any]):
        sentinel = object()

        anime = decode_record(Anime, anime_payload, client=sentinel, full_loaded=True)

        assert anime.client is sentinel
        assert anime.is_full_loaded

    def test_records_are_immutable(self, anime_payload: dict[str, Any]):
        anime = decode_record(Anime, anime_payload)

        with pytest.raises(ValidationError):
            anime.episodes = 1


class TestExtractData:
    def test_returns_subtree(self):
        assert extract_data({"data": {"Media": {"id": 1}}}, "Media") == {"id": 1}

    def test_errors_without_data_raise_api_error(self):
        envelope = {
            "data": {"Media": None},
            "errors": [{"message": "Not Found.", "status": 404, "locations": []}],
        }

        with pytest.raises(ApiError) as exc_info:
            extract_data(envelope, "Media")

        assert exc_info.value.status == 404
        assert exc_info.value.errors == envelope["errors"]
        assert "Not Found." in str(exc_info.value)

    def test_errors_with_null_data_raise_api_error(self):
        with pytest.raises(ApiError):
            extract_data({"data": None, "errors": [{"message": "Invalid token"}]}, "User")

    def test_error_items_that_are_not_objects_become_messages(self):
        with pytest.raises(ApiError) as exc_info:
            extract_data({"errors": ["boom", 7], "data": None}, "Media")

        assert exc_info.value.errors == [{"message": "boom"}, {"message": "7"}]
        assert exc_info.value.status is None
        assert str(exc_info.value) == "boom; 7"

    def test_errors_with_data_log_a_warning(self, caplog: pytest.LogCaptureFixture):
        envelope = {
            "data": {"Media": {"id": 1}},
            "errors": [{"message": "Field deprecated"}],
        }

        with caplog.at_level(logging.WARNING, logger="anilist_client.decoding"):
            assert extract_data(envelope, "Media") == {"id": 1}

        assert "Field deprecated" in caplog.text

    def test_missing_subtree_is_decode_error(self):
        with pytest.raises(DecodeError):
            extract_data({"data": {}}, "Media")

    def test_non_object_envelope_is_decode_error(self):
        with pytest.raises(DecodeError):
            extract_data("oops", "Media")


class TestDecodeGet:
    def test_get_records_are_full_loaded(self, anime_envelope: dict[str, Any]):
        anime = decode_get(anime_envelope, "Media", Anime)

        assert isinstance(anime, Anime)
        assert anime.is_full_loaded

    def test_same_payload_decodes_as_manga(self, anime_envelope: dict[str, Any]):
        manga = decode_get(anime_envelope, "Media", Manga)

        assert isinstance(manga, Manga)
        assert manga.chapters is None


class TestDecodeSearch:
    def test_search_results_are_partial(self, search_anime_envelope: dict[str, Any]):
        results = decode_search(search_anime_envelope, "media", Anime)

        assert [anime.id for anime in results] == [20, 1735]
        assert not any(anime.is_full_loaded for anime in results)
        assert results[0].description is None

    def test_empty_page(self):
        assert decode_search({"data": {"Page": {"media": []}}}, "media", Anime) == []

    def test_null_list_is_empty(self):
        assert decode_search({"data": {"Page": {"users": None}}}, "users", User) == []

    def test_non_list_is_decode_error(self):
        with pytest.raises(DecodeError):
            decode_search({"data": {"Page": {"media": {"id": 1}}}}, "media", Anime)
