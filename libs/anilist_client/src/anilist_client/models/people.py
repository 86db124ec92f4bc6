"""Character and staff records."""

from pydantic import Field

from ..operations import EntityKind
from .enums import CharacterRole, Language
from .record import Record
from .values import Date, Image, Name


class Person(Record):
    """A staff member: voice actor, director, author and so on."""

    entity_kind = EntityKind.PERSON

    name: Name | None = None
    language: Language | None = Field(default=None, alias="languageV2")
    image: Image | None = None
    description: str | None = None
    primary_occupations: list[str] = Field(default_factory=list)
    gender: str | None = None
    date_of_birth: Date | None = None
    date_of_death: Date | None = None
    age: int | None = None
    years_active: list[int] = Field(default_factory=list)
    home_town: str | None = None
    blood_type: str | None = None
    is_favourite: bool | None = None
    is_favourite_blocked: bool | None = None
    favourites: int | None = None
    url: str | None = Field(default=None, alias="siteUrl")
    mod_notes: str | None = None


class Character(Record):
    """
    A character.

    ``role`` and ``voice_actors`` describe the character within one media;
    they are only filled in when the character comes from that media's
    character edges and stay empty on a character fetched by id.
    """

    entity_kind = EntityKind.CHARACTER

    name: Name | None = None
    image: Image | None = None
    description: str | None = None
    gender: str | None = None
    date_of_birth: Date | None = None
    age: str | None = None
    blood_type: str | None = None
    is_favourite: bool | None = None
    is_favourite_blocked: bool | None = None
    favourites: int | None = None
    url: str | None = Field(default=None, alias="siteUrl")
    mod_notes: str | None = None

    role: CharacterRole | None = None
    voice_actors: list[Person] = Field(default_factory=list)
