import json
from datetime import date
from logging import getLogger

from pydantic import ValidationError

from screamscore.converters import rating as rating_converters
from screamscore.core.release import is_upcoming
from screamscore.core.scoring import calculate_averages
from screamscore.models.movie import Movie
from screamscore.schemas.movie import (
    CastMember,
    MovieDetail,
    MoviePublic,
    MovieSearchResult,
)
from screamscore.utils import (
    get_backdrop_url,
    get_poster_url,
    get_profile_url,
    get_youtube_embed_url,
    get_youtube_thumbnail_url,
    today_local,
)

logger = getLogger(__name__)

SEARCH_POSTER_SIZE = "w185"


def parse_cast(cast_json: str | None) -> list[CastMember]:
    """
    Parse the serialized cast list stored on a movie.

    Parameters:
        cast_json (str | None): JSON list of {name, character, profilePath}.
    Returns:
        list[CastMember]: The cast with profile image URLs, empty when the
        stored value is missing or malformed.
    """
    if not cast_json:
        return []
    try:
        raw_cast = json.loads(cast_json)
        return [
            CastMember(
                name=member["name"],
                character=member.get("character"),
                profile_path=member.get("profilePath"),
                profile_url=get_profile_url(member.get("profilePath")),
            )
            for member in raw_cast
        ]
    except (ValueError, TypeError, KeyError, AttributeError, ValidationError):
        logger.warning("Could not parse cast JSON: %r", cast_json[:80])
        return []


def to_public(movie: Movie, *, today: date | None = None) -> MoviePublic:
    """
    Convert a Movie row to the MoviePublic schema, deriving averages and URLs.

    Parameters:
        movie (Movie): The Movie object to convert. Its ratings are read.
        today (date | None): Reference day for `is_upcoming`, defaults to today.
    Returns:
        MoviePublic: The converted schema.
    """
    today = today or today_local()
    return MoviePublic(
        **movie.model_dump(),
        averages=calculate_averages(movie.ratings),
        poster_url=get_poster_url(movie.poster_path),
        backdrop_url=get_backdrop_url(movie.backdrop_path),
        trailer_url=get_youtube_embed_url(movie.trailer_key),
        trailer_thumbnail_url=get_youtube_thumbnail_url(movie.trailer_key),
        parsed_cast=parse_cast(movie.cast),
        is_upcoming=is_upcoming(movie, today),
    )


def to_detail(movie: Movie, *, today: date | None = None) -> MovieDetail:
    """
    Convert a Movie row to the MovieDetail schema, including its ratings.

    Parameters:
        movie (Movie): The Movie object to convert.
        today (date | None): Reference day for `is_upcoming`.
    Returns:
        MovieDetail: The converted schema, ratings newest first.
    """
    public = to_public(movie, today=today)
    newest_first = sorted(
        movie.ratings, key=lambda r: (r.created_at, r.id or 0), reverse=True
    )
    ratings = [rating_converters.to_public(rating) for rating in newest_first]
    return MovieDetail(**public.model_dump(), ratings=ratings)


def to_search_result(movie: Movie) -> MovieSearchResult:
    assert movie.id is not None
    return MovieSearchResult(
        id=movie.id,
        title=movie.title,
        year=movie.year,
        poster_url=get_poster_url(movie.poster_path, SEARCH_POSTER_SIZE),
    )
