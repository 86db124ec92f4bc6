"""Profile and accent colors: a named palette entry or an arbitrary hex string."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class NamedColor(str, Enum):
    """Colors AniList exposes by name."""

    BLUE = "BLUE"
    PURPLE = "PURPLE"
    PINK = "PINK"
    ORANGE = "ORANGE"
    RED = "RED"
    GREEN = "GREEN"
    GRAY = "GRAY"


class Color(BaseModel):
    """
    Tagged union of a :class:`NamedColor` and a raw color string.

    Exactly one of ``named`` and ``hex`` is set. Decoding first tries a named
    match (trimmed, case-insensitive) and only keeps the raw string when no
    name matches.
    """

    model_config = ConfigDict(frozen=True)

    named: NamedColor | None = None
    hex: str | None = None

    @model_validator(mode="before")
    @classmethod
    def from_wire(cls, data: Any) -> Any:
        if isinstance(data, NamedColor):
            return {"named": data}
        if isinstance(data, str):
            return cls._split(data)
        return data

    @model_validator(mode="after")
    def exactly_one_branch(self) -> "Color":
        if (self.named is None) == (self.hex is None):
            raise ValueError("Color needs either a named value or a hex string")
        return self

    @staticmethod
    def _split(raw: str) -> dict[str, Any]:
        candidate = raw.strip().upper()
        if candidate in NamedColor.__members__:
            return {"named": NamedColor[candidate]}
        return {"hex": raw}

    @classmethod
    def parse(cls, raw: str) -> "Color":
        return cls.model_validate(raw)

    @property
    def is_named(self) -> bool:
        return self.named is not None

    @property
    def hex_value(self) -> str | None:
        """The raw string when this is not a named color."""
        return self.hex

    def __str__(self) -> str:
        if self.named is not None:
            return self.named.value.capitalize()
        return self.hex or ""
