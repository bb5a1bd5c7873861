from datetime import date, datetime

import pytz

from screamscore.core.config import settings

TMDB_IMAGE_BASE = "https://image.tmdb.org/t/p"
YOUTUBE_EMBED_BASE = "https://www.youtube.com/embed"
YOUTUBE_THUMBNAIL_TEMPLATE = "https://img.youtube.com/vi/{key}/hqdefault.jpg"


def now_local_naive() -> datetime:
    tz = pytz.timezone(settings.TIMEZONE)
    return datetime.now(tz).replace(tzinfo=None)


def today_local() -> date:
    return now_local_naive().date()


def get_poster_url(path: str | None, size: str = "w500") -> str | None:
    if not path:
        return None
    return f"{TMDB_IMAGE_BASE}/{size}{path}"


def get_backdrop_url(path: str | None, size: str = "w1280") -> str | None:
    if not path:
        return None
    return f"{TMDB_IMAGE_BASE}/{size}{path}"


def get_profile_url(path: str | None, size: str = "w185") -> str | None:
    if not path:
        return None
    return f"{TMDB_IMAGE_BASE}/{size}{path}"


def get_youtube_embed_url(key: str | None) -> str | None:
    if not key:
        return None
    return f"{YOUTUBE_EMBED_BASE}/{key}"


def get_youtube_thumbnail_url(key: str | None) -> str | None:
    if not key:
        return None
    return YOUTUBE_THUMBNAIL_TEMPLATE.format(key=key)
