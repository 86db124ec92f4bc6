"""Controlled vocabularies used by AniList records."""

from .base import LenientEnum


class MediaType(LenientEnum):
    """Kind of a media node, used to resolve relation targets."""

    UNKNOWN = "UNKNOWN"
    ANIME = "ANIME"
    MANGA = "MANGA"


class Format(LenientEnum):
    """Format a media was released in."""

    TV = "TV"
    TV_SHORT = "TV_SHORT"
    MOVIE = "MOVIE"
    SPECIAL = "SPECIAL"
    OVA = "OVA"
    ONA = "ONA"
    MUSIC = "MUSIC"
    MANGA = "MANGA"
    NOVEL = "NOVEL"
    ONE_SHOT = "ONE_SHOT"

    @property
    def label(self) -> str:
        return _FORMAT_LABELS[self]

    @property
    def summary(self) -> str:
        return _FORMAT_SUMMARIES[self]


_FORMAT_LABELS = {
    Format.TV: "TV",
    Format.TV_SHORT: "TV Short",
    Format.MOVIE: "Movie",
    Format.SPECIAL: "Special",
    Format.OVA: "OVA",
    Format.ONA: "ONA",
    Format.MUSIC: "Music",
    Format.MANGA: "Manga",
    Format.NOVEL: "Novel",
    Format.ONE_SHOT: "One-Shot",
}

_FORMAT_SUMMARIES = {
    Format.TV: "Anime broadcast on television",
    Format.TV_SHORT: "Anime which are under 15 minutes in length and broadcast on television",
    Format.MOVIE: "Anime movies with a theatrical release",
    Format.SPECIAL: "Special episodes that have been included in DVD/Blu-ray releases, picture dramas, pilots, etc",
    Format.OVA: "(Original Video Animation) Anime that have been released directly on DVD/Blu-ray without originally going through a theatrical release or television broadcast",
    Format.ONA: "(Original Net Animation) Anime that have been originally released online or are only available through streaming services.",
    Format.MUSIC: "Short anime released as a music video",
    Format.MANGA: "Professionally published manga with more than one chapter",
    Format.NOVEL: "Written books released as a series of light novels",
    Format.ONE_SHOT: "Manga with just one chapter",
}


class Status(LenientEnum):
    """Release status of a media, or list status in user statistics."""

    NOT_YET_RELEASED = "NOT_YET_RELEASED"
    FINISHED = "FINISHED"
    RELEASING = "RELEASING"
    CANCELLED = "CANCELLED"
    HIATUS = "HIATUS"
    CURRENT = "CURRENT"
    PLANNING = "PLANNING"
    COMPLETED = "COMPLETED"
    DROPPED = "DROPPED"
    PAUSED = "PAUSED"
    REPEATING = "REPEATING"

    @property
    def summary(self) -> str:
        return _STATUS_SUMMARIES[self]


_STATUS_SUMMARIES = {
    Status.FINISHED: "Has completed and is no longer being updated.",
    Status.RELEASING: "Currently releasing.",
    Status.NOT_YET_RELEASED: "To be released in the future.",
    Status.CANCELLED: "Ended before the work could be completed.",
    Status.HIATUS: "Currently paused with the intention of resuming in the future.",
    Status.CURRENT: "Currently being updated.",
    Status.PLANNING: "Planned for future release.",
    Status.COMPLETED: "Has completed and is no longer being updated.",
    Status.DROPPED: "Dropped before completion.",
    Status.PAUSED: "Currently paused.",
    Status.REPEATING: "Repeating the same content.",
}


class Source(LenientEnum):
    """Source material a media was adapted from."""

    ORIGINAL = "ORIGINAL"
    MANGA = "MANGA"
    LIGHT_NOVEL = "LIGHT_NOVEL"
    VISUAL_NOVEL = "VISUAL_NOVEL"
    VIDEO_GAME = "VIDEO_GAME"
    OTHER = "OTHER"
    NOVEL = "NOVEL"
    DOUJINSHI = "DOUJINSHI"
    ANIME = "ANIME"
    WEB_NOVEL = "WEB_NOVEL"
    LIVE_ACTION = "LIVE_ACTION"
    GAME = "GAME"
    COMIC = "COMIC"
    MULTIMEDIA_PROJECT = "MULTIMEDIA_PROJECT"
    PICTURE_BOOK = "PICTURE_BOOK"


class Season(LenientEnum):
    """Season of the year a media aired in."""

    WINTER = "WINTER"
    SPRING = "SPRING"
    SUMMER = "SUMMER"
    FALL = "FALL"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class RelationType(LenientEnum):
    """How a related media is connected to the media it was fetched from."""

    OTHER = "OTHER"
    ADAPTATION = "ADAPTATION"
    PREQUEL = "PREQUEL"
    SEQUEL = "SEQUEL"
    PARENT = "PARENT"
    SIDE_STORY = "SIDE_STORY"
    CHARACTER = "CHARACTER"
    SUMMARY = "SUMMARY"
    ALTERNATIVE = "ALTERNATIVE"
    SPIN_OFF = "SPIN_OFF"
    SOURCE = "SOURCE"
    COMPILATION = "COMPILATION"
    CONTAINS = "CONTAINS"


class CharacterRole(LenientEnum):
    """Role of a character in one specific media."""

    BACKGROUND = "BACKGROUND"
    MAIN = "MAIN"
    SUPPORTING = "SUPPORTING"


class LinkType(LenientEnum):
    """Category of an external link."""

    INFO = "INFO"
    STREAMING = "STREAMING"
    SOCIAL = "SOCIAL"


class NotificationType(LenientEnum):
    """Notification categories a user can enable or disable."""

    ACTIVITY_MESSAGE = "ACTIVITY_MESSAGE"
    ACTIVITY_REPLY = "ACTIVITY_REPLY"
    FOLLOWING = "FOLLOWING"
    ACTIVITY_MENTION = "ACTIVITY_MENTION"
    THREAD_COMMENT_MENTION = "THREAD_COMMENT_MENTION"
    THREAD_SUBSCRIBED = "THREAD_SUBSCRIBED"
    THREAD_COMMENT_REPLY = "THREAD_COMMENT_REPLY"
    AIRING = "AIRING"
    ACTIVITY_LIKE = "ACTIVITY_LIKE"
    ACTIVITY_REPLY_LIKE = "ACTIVITY_REPLY_LIKE"
    THREAD_LIKE = "THREAD_LIKE"
    THREAD_COMMENT_LIKE = "THREAD_COMMENT_LIKE"
    ACTIVITY_REPLY_SUBSCRIBED = "ACTIVITY_REPLY_SUBSCRIBED"
    RELATED_MEDIA_ADDITION = "RELATED_MEDIA_ADDITION"
    MEDIA_DATA_CHANGE = "MEDIA_DATA_CHANGE"
    MEDIA_MERGE = "MEDIA_MERGE"
    MEDIA_DELETION = "MEDIA_DELETION"


class UserTitleLanguage(LenientEnum):
    """Language a user prefers media titles in."""

    ROMAJI = "ROMAJI"
    ENGLISH = "ENGLISH"
    NATIVE = "NATIVE"
    ROMAJI_STYLISED = "ROMAJI_STYLISED"
    ENGLISH_STYLISED = "ENGLISH_STYLISED"
    NATIVE_STYLISED = "NATIVE_STYLISED"


class UserStaffNameLanguage(LenientEnum):
    """Naming order a user prefers for staff and characters."""

    ROMAJI = "ROMAJI"
    ROMAJI_WESTERN = "ROMAJI_WESTERN"
    NATIVE = "NATIVE"


class Language(LenientEnum):
    """Language of a voice actor, staff member or external link."""

    JAPANESE = "Japanese"
    ENGLISH = "English"
    KOREAN = "Korean"
    ITALIAN = "Italian"
    SPANISH = "Spanish"
    PORTUGUESE = "Portuguese"
    FRENCH = "French"
    GERMAN = "German"
    HEBREW = "Hebrew"
    HUNGARIAN = "Hungarian"
    CHINESE = "Chinese"
    ARABIC = "Arabic"
    FILIPINO = "Filipino"
    CATALAN = "Catalan"
    FINNISH = "Finnish"
    TURKISH = "Turkish"
    DUTCH = "Dutch"
    SWEDISH = "Swedish"
    THAI = "Thai"
    TAGALOG = "Tagalog"
    MALAYSIAN = "Malaysian"
    INDONESIAN = "Indonesian"
    VIETNAMESE = "Vietnamese"
    NEPALI = "Nepali"
    HINDI = "Hindi"
    URDU = "Urdu"

    @classmethod
    def _missing_(cls, value: object) -> "Language":
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member, code in _LANGUAGE_CODES.items():
                if code == wanted:
                    return member
            if wanted in _LANGUAGE_ALIASES:
                return _LANGUAGE_ALIASES[wanted]
        return super()._missing_(value)

    @property
    def code(self) -> str:
        """ISO 639-1 code (``fil`` for Filipino, which has none)."""
        return _LANGUAGE_CODES[self]

    @property
    def native(self) -> str:
        """Name of the language written in that language."""
        return _LANGUAGE_NATIVE_NAMES[self]


_LANGUAGE_CODES = {
    Language.JAPANESE: "ja",
    Language.ENGLISH: "en",
    Language.KOREAN: "ko",
    Language.ITALIAN: "it",
    Language.SPANISH: "es",
    Language.PORTUGUESE: "pt",
    Language.FRENCH: "fr",
    Language.GERMAN: "de",
    Language.HEBREW: "he",
    Language.HUNGARIAN: "hu",
    Language.CHINESE: "zh",
    Language.ARABIC: "ar",
    Language.FILIPINO: "fil",
    Language.CATALAN: "ca",
    Language.FINNISH: "fi",
    Language.TURKISH: "tr",
    Language.DUTCH: "nl",
    Language.SWEDISH: "sv",
    Language.THAI: "th",
    Language.TAGALOG: "tl",
    Language.MALAYSIAN: "ms",
    Language.INDONESIAN: "id",
    Language.VIETNAMESE: "vi",
    Language.NEPALI: "ne",
    Language.HINDI: "hi",
    Language.URDU: "ur",
}

# Country codes and alternative names seen in the wild, next to the ISO codes.
_LANGUAGE_ALIASES = {
    "jp": Language.JAPANESE,
    "uk": Language.ENGLISH,
    "philippine": Language.FILIPINO,
}

_LANGUAGE_NATIVE_NAMES = {
    Language.JAPANESE: "日本語",
    Language.ENGLISH: "English",
    Language.KOREAN: "한국어",
    Language.ITALIAN: "Italiano",
    Language.SPANISH: "Español",
    Language.PORTUGUESE: "Português",
    Language.FRENCH: "Français",
    Language.GERMAN: "Deutsch",
    Language.HEBREW: "עברית",
    Language.HUNGARIAN: "Magyar",
    Language.CHINESE: "中文",
    Language.ARABIC: "العربية",
    Language.FILIPINO: "Filipino",
    Language.CATALAN: "Català",
    Language.FINNISH: "Suomi",
    Language.TURKISH: "Türkçe",
    Language.DUTCH: "Nederlands",
    Language.SWEDISH: "Svenska",
    Language.THAI: "ไทย",
    Language.TAGALOG: "Tagalog",
    Language.MALAYSIAN: "Bahasa Melayu",
    Language.INDONESIAN: "Bahasa Indonesia",
    Language.VIETNAMESE: "Tiếng Việt",
    Language.NEPALI: "नेपाली",
    Language.HINDI: "हिंदी",
    Language.URDU: "اردو",
}
