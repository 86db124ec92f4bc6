"""Typed records decoded from AniList responses."""

from .base import LenientEnum, WireModel
from .color import Color, NamedColor
from .enums import (
    CharacterRole,
    Format,
    Language,
    LinkType,
    MediaType,
    NotificationType,
    RelationType,
    Season,
    Source,
    Status,
    UserStaffNameLanguage,
    UserTitleLanguage,
)
from .media import Anime, Manga, Media, Relation
from .people import Character, Person
from .record import GraphFragment, Record
from .studio import Studio
from .user import (
    ListActivityOption,
    MediaListOptions,
    MediaListTypeOptions,
    NotificationOption,
    User,
    UserFormatStatistic,
    UserOptions,
    UserStatistics,
    UserStatisticTypes,
    UserStatusStatistic,
)
from .values import AiringSchedule, Cover, Date, Image, Link, Name, Tag, Title

__all__ = [
    "AiringSchedule",
    "Anime",
    "Character",
    "CharacterRole",
    "Color",
    "Cover",
    "Date",
    "Format",
    "GraphFragment",
    "Image",
    "Language",
    "LenientEnum",
    "Link",
    "LinkType",
    "ListActivityOption",
    "Manga",
    "Media",
    "MediaListOptions",
    "MediaListTypeOptions",
    "MediaType",
    "Name",
    "NamedColor",
    "NotificationOption",
    "NotificationType",
    "Person",
    "Record",
    "Relation",
    "RelationType",
    "Season",
    "Source",
    "Status",
    "Studio",
    "Tag",
    "Title",
    "User",
    "UserFormatStatistic",
    "UserOptions",
    "UserStaffNameLanguage",
    "UserStatistics",
    "UserStatisticTypes",
    "UserStatusStatistic",
    "UserTitleLanguage",
    "WireModel",
]
