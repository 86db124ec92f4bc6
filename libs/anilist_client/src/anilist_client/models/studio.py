"""Studio record."""

from pydantic import Field

from ..operations import EntityKind
from .record import Record


class Studio(Record):
    """An animation studio or producer. ``is_main`` is set from the media edge."""

    entity_kind = EntityKind.STUDIO

    name: str
    is_animation_studio: bool = False
    url: str | None = Field(default=None, alias="siteUrl")
    is_favourite: bool | None = None
    favourites: int | None = None

    is_main: bool = False
