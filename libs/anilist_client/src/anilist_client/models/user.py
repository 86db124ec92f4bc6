"""User record and the settings and statistics nested in it."""

from pydantic import Field

from ..operations import EntityKind
from .base import WireModel
from .color import Color
from .enums import (
    Format,
    NotificationType,
    Status,
    UserStaffNameLanguage,
    UserTitleLanguage,
)
from .record import Record
from .values import Image


class NotificationOption(WireModel):
    notification_type: NotificationType = Field(
        default=NotificationType.ACTIVITY_MESSAGE, alias="type"
    )
    enabled: bool = False


class ListActivityOption(WireModel):
    status: Status | None = Field(default=None, alias="type")
    disabled: bool = False


class UserOptions(WireModel):
    """Site preferences of a user."""

    title_language: UserTitleLanguage | None = None
    display_adult_content: bool = False
    airing_notifications: bool = False
    profile_color: Color | None = None
    notification_options: list[NotificationOption] = Field(default_factory=list)
    timezone: str | None = None
    activity_merge_time: int = 0
    staff_name_language: UserStaffNameLanguage = UserStaffNameLanguage.ROMAJI
    restrict_messages_to_following: bool = False
    disabled_list_activity: list[ListActivityOption] = Field(default_factory=list)


class MediaListTypeOptions(WireModel):
    section_order: list[str] = Field(default_factory=list)
    split_completed_section_by_format: bool = False
    custom_lists: list[str] = Field(default_factory=list)
    advanced_scoring: list[str] = Field(default_factory=list)
    advanced_scoring_enabled: bool = False


class MediaListOptions(WireModel):
    score_format: str | None = None
    row_order: str | None = None
    anime_list: MediaListTypeOptions | None = None
    manga_list: MediaListTypeOptions | None = None


class UserFormatStatistic(WireModel):
    count: int = 0
    minutes_watched: int | None = None
    chapters_read: int | None = None
    media_ids: list[int] = Field(default_factory=list)
    format: Format | None = None


class UserStatusStatistic(WireModel):
    count: int = 0
    minutes_watched: int | None = None
    chapters_read: int | None = None
    media_ids: list[int] = Field(default_factory=list)
    status: Status | None = None


class UserStatistics(WireModel):
    """Anime or manga list statistics of a user."""

    count: int = 0
    mean_score: float | None = None
    standard_deviation: float | None = None
    minutes_watched: int | None = None
    episodes_watched: int | None = None
    chapters_read: int | None = None
    volumes_read: int | None = None
    formats: list[UserFormatStatistic] = Field(default_factory=list)
    statuses: list[UserStatusStatistic] = Field(default_factory=list)


class UserStatisticTypes(WireModel):
    anime: UserStatistics | None = None
    manga: UserStatistics | None = None


class User(Record):
    """An AniList user profile."""

    entity_kind = EntityKind.USER

    name: str
    about: str | None = None
    avatar: Image | None = None
    banner: str | None = Field(default=None, alias="bannerImage")
    donator_badge: str | None = None
    donator_tier: int | None = None
    is_blocked: bool | None = None
    is_follower: bool | None = None
    is_following: bool | None = None
    media_list_options: MediaListOptions | None = None
    options: UserOptions | None = None
    url: str | None = Field(default=None, alias="siteUrl")
    statistics: UserStatisticTypes | None = None
    unread_notification_count: int | None = None
    created_at: int | None = None
    updated_at: int | None = None
