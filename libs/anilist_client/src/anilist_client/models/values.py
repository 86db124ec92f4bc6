"""Value objects nested inside AniList records."""

import datetime
import re

from pydantic import Field, model_validator

from .base import WireModel
from .color import Color
from .enums import Language, LinkType

_DATE_TOKEN = re.compile(r"\{(\w+)\}")


class Title(WireModel):
    """Title of a media in its language variants. At least one variant is set."""

    romaji: str | None = None
    english: str | None = None
    native: str | None = None
    user_preferred: str | None = None

    @model_validator(mode="after")
    def require_one_variant(self) -> "Title":
        if not any((self.romaji, self.english, self.native, self.user_preferred)):
            raise ValueError("Title has no non-empty language variant")
        return self

    def preferred(self) -> str:
        """First non-empty of user-preferred, romaji, english and native."""
        for variant in (self.user_preferred, self.romaji, self.english, self.native):
            if variant:
                return variant
        return ""

    def __str__(self) -> str:
        return self.preferred()


class Image(WireModel):
    """Image of a character, person or user avatar."""

    large: str | None = None
    medium: str | None = None

    def largest(self) -> str | None:
        return self.large or self.medium or None


class Cover(WireModel):
    """Cover image of a media in several resolutions with an optional accent color."""

    extra_large: str | None = None
    large: str | None = None
    medium: str | None = None
    color: Color | None = None

    def largest(self) -> str | None:
        """URL of the largest available resolution, or ``None`` if there is none."""
        return self.extra_large or self.large or self.medium or None


class Date(WireModel):
    """
    Possibly incomplete calendar date as AniList reports it (``FuzzyDate``).

    ``format`` substitutes ``{token}`` placeholders:

    - year: ``{year}`` ``{yyyy}`` ``{y}`` (and upper case), ``{yy}`` two digits
    - month: ``{month}`` ``{mon}`` ``{mm}`` (zero padded, and upper case), ``{m}``
    - day: ``{day}`` ``{dd}`` (zero padded, and upper case), ``{d}``

    Placeholders for unknown parts are left untouched.
    """

    year: int | None = None
    month: int | None = None
    day: int | None = None

    @classmethod
    def today(cls) -> "Date":
        today = datetime.date.today()
        return cls(year=today.year, month=today.month, day=today.day)

    @classmethod
    def from_date(cls, value: datetime.date) -> "Date":
        return cls(year=value.year, month=value.month, day=value.day)

    def is_valid(self) -> bool:
        """Whether year, month and day are all known."""
        return self.year is not None and self.month is not None and self.day is not None

    def as_date(self) -> datetime.date | None:
        if not self.is_valid():
            return None
        try:
            return datetime.date(self.year, self.month, self.day)
        except ValueError:
            return None

    def format(self, pattern: str) -> str:
        values: dict[str, str] = {}
        if self.year is not None:
            full_year = str(self.year)
            short_year = f"{self.year % 100:02d}"
            for token in ("year", "yyyy", "y"):
                values[token] = values[token.upper()] = full_year
            values["yy"] = values["YY"] = short_year
        if self.month is not None:
            padded = f"{self.month:02d}"
            for token in ("month", "mon", "mm"):
                values[token] = values[token.upper()] = padded
            values["m"] = values["M"] = str(self.month)
        if self.day is not None:
            padded = f"{self.day:02d}"
            for token in ("day", "dd"):
                values[token] = values[token.upper()] = padded
            values["d"] = values["D"] = str(self.day)

        return _DATE_TOKEN.sub(lambda m: values.get(m.group(1), m.group(0)), pattern)

    def __str__(self) -> str:
        year = "" if self.year is None else str(self.year)
        month = "" if self.month is None else f"{self.month:02d}"
        day = "" if self.day is None else f"{self.day:02d}"
        return f"{year}-{month}-{day}"


class Name(WireModel):
    """Name of a character or person."""

    first: str | None = None
    middle: str | None = None
    last: str | None = None
    full: str | None = None
    native: str | None = None
    alternative: list[str] = Field(default_factory=list)
    alternative_spoiler: list[str] = Field(default_factory=list)
    user_preferred: str | None = None

    def __str__(self) -> str:
        return self.user_preferred or self.full or self.native or ""


class Tag(WireModel):
    """Descriptive tag attached to a media."""

    id: int
    name: str
    description: str | None = None
    category: str | None = None
    rank: int | None = None
    is_general_spoiler: bool = False
    is_media_spoiler: bool = False
    is_adult: bool = False
    user_id: int | None = None


class Link(WireModel):
    """External site or streaming episode link."""

    id: int | None = None
    title: str | None = None
    thumbnail: str | None = None
    url: str | None = None
    site: str | None = None
    site_id: int | None = None
    link_type: LinkType | None = Field(default=None, alias="type")
    language: Language | None = None
    color: Color | None = None
    icon: str | None = None
    notes: str | None = None
    is_disabled: bool | None = None


class AiringSchedule(WireModel):
    """Next airing episode of an anime."""

    id: int | None = None
    episode: int
    at: int = Field(alias="airingAt")
    time_until: int = Field(alias="timeUntilAiring")

    @property
    def airs_at(self) -> datetime.datetime:
        return datetime.datetime.fromtimestamp(self.at, tz=datetime.timezone.utc)
