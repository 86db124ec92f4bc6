"""Shared building blocks for records decoded from AniList responses."""

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


class LenientEnum(str, Enum):
    """
    String enum that never rejects a wire value.

    Matching is case-insensitive and ignores surrounding whitespace. Values
    that match no member decode to :meth:`default`, the first declared member
    unless a subclass overrides it, so a new variant added on the server does
    not break decoding of the whole record.
    """

    @classmethod
    def default(cls) -> "LenientEnum":
        return next(iter(cls))

    @classmethod
    def _missing_(cls, value: object) -> "LenientEnum":
        if isinstance(value, str):
            wanted = value.strip().casefold()
            for member in cls:
                if member.value.casefold() == wanted:
                    return member
        logger.debug(f"Unknown {cls.__name__} value {value!r}, using default")
        return cls.default()


class WireModel(BaseModel):
    """
    Base for every decoded record.

    Wire names are lower camel case and are derived from the snake case field
    names. Fields whose wire name is unrelated to their own name declare an
    explicit alias. Null values are dropped before validation so that optional
    fields fall back to their defaults instead of failing.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data
