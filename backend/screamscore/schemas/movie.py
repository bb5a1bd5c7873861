import datetime as dt
from typing import Any

from sqlmodel import SQLModel

from screamscore.core.scoring import RatingAverages
from screamscore.models.movie import MovieBase

from .rating import RatingPublic

__all__ = [
    "CastMember",
    "MoviePublic",
    "MovieDetail",
    "MovieSearchResult",
    "MovieSearchResponse",
    "MovieSearchResults",
    "TmdbSearchResponse",
    "HomeSections",
]


class CastMember(SQLModel):
    name: str
    character: str | None = None
    profile_path: str | None = None
    profile_url: str | None = None


class MoviePublic(MovieBase):
    id: int
    created_at: dt.datetime
    averages: RatingAverages
    poster_url: str | None = None
    backdrop_url: str | None = None
    trailer_url: str | None = None
    trailer_thumbnail_url: str | None = None
    parsed_cast: list[CastMember] = []
    is_upcoming: bool = False


class MovieDetail(MoviePublic):
    ratings: list[RatingPublic]


class MovieSearchResult(SQLModel):
    id: int
    title: str
    year: int | None = None
    poster_url: str | None = None


class MovieSearchResponse(SQLModel):
    movies: list[MovieSearchResult]


class MovieSearchResults(SQLModel):
    query: str
    movies: list[MoviePublic]
    has_filters: bool


class TmdbSearchResponse(SQLModel):
    results: list[dict[str, Any]]


class HomeSections(SQLModel):
    upcoming: list[MoviePublic]
    recent: list[MoviePublic]
    highest_rated: list[MoviePublic]
    classics: list[MoviePublic]
    has_filters: bool
