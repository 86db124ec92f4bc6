"""Anime and manga records and the relations between them."""

from typing import TYPE_CHECKING

from pydantic import Field

from ..operations import EntityKind
from .base import WireModel
from .enums import Format, MediaType, RelationType, Season, Source, Status
from .record import GraphFragment, Record
from .values import AiringSchedule, Cover, Date, Link, Tag, Title

if TYPE_CHECKING:
    from .people import Character
    from .studio import Studio


class Media(Record):
    """Fields shared by anime and manga."""

    id_mal: int | None = None
    media_type: MediaType | None = Field(default=None, alias="type")
    title: Title
    format: Format | None = None
    status: Status | None = None
    description: str | None = None
    start_date: Date | None = None
    end_date: Date | None = None
    country_of_origin: str | None = None
    is_licensed: bool | None = None
    source: Source | None = None
    hashtag: str | None = None
    updated_at: int | None = None
    cover: Cover | None = Field(default=None, alias="coverImage")
    banner: str | None = Field(default=None, alias="bannerImage")
    genres: list[str] = Field(default_factory=list)
    synonyms: list[str] = Field(default_factory=list)
    average_score: int | None = None
    mean_score: int | None = None
    popularity: int | None = None
    is_locked: bool | None = None
    trending: int | None = None
    favourites: int | None = None
    tags: list[Tag] = Field(default_factory=list)
    is_favourite: bool | None = None
    is_favourite_blocked: bool | None = None
    is_adult: bool | None = None
    external_links: list[Link] = Field(default_factory=list)
    url: str | None = Field(default=None, alias="siteUrl")

    raw_relations: GraphFragment = Field(default_factory=GraphFragment, alias="relations")
    raw_characters: GraphFragment = Field(default_factory=GraphFragment, alias="characters")
    raw_studios: GraphFragment = Field(default_factory=GraphFragment, alias="studios")

    def characters(self) -> list["Character"]:
        """Characters of this media with their role in it. Re-decoded on every call."""
        from ..edges import unwrap_characters

        return unwrap_characters(self.raw_characters, client=self.client)

    def relations(self) -> list["Relation"]:
        """Related anime and manga. Re-decoded on every call."""
        from ..edges import unwrap_relations

        return unwrap_relations(self.raw_relations, client=self.client)

    def studios(self) -> list["Studio"]:
        from ..edges import unwrap_studios

        return unwrap_studios(self.raw_studios, client=self.client)


class Anime(Media):
    """An anime."""

    entity_kind = EntityKind.ANIME

    season: Season | None = None
    season_year: int | None = None
    season_int: int | None = None
    episodes: int | None = None
    duration: int | None = None
    next_airing_episode: AiringSchedule | None = None
    streaming_episodes: list[Link] = Field(default_factory=list)


class Manga(Media):
    """A manga, light novel or one-shot."""

    entity_kind = EntityKind.MANGA

    chapters: int | None = None
    volumes: int | None = None


class Relation(WireModel):
    """
    Edge from a media to a related media.

    ``media`` holds an :class:`Anime` or a :class:`Manga` depending on
    ``media_type``; it is ``None`` when the node type could not be resolved.
    """

    id: int | None = None
    relation_type: RelationType = RelationType.OTHER
    is_main_studio: bool = False
    media_type: MediaType = MediaType.UNKNOWN
    media: Anime | Manga | None = None
