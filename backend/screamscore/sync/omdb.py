from typing import Any

import requests
from loguru import logger
from pydantic import BaseModel

from screamscore.core.config import settings

OMDB_BASE_URL = "https://www.omdbapi.com/"
NOT_AVAILABLE = "N/A"


class OmdbRatings(BaseModel):
    imdb_rating: float | None = None
    imdb_votes: int | None = None
    rotten_tomatoes: int | None = None
    metacritic: int | None = None


def _available(value: Any) -> str | None:
    if not value or value == NOT_AVAILABLE:
        return None
    return str(value)


def _to_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value.replace(",", "").replace("%", "").split("/")[0])
    except ValueError:
        return None


def extract_ratings(data: dict[str, Any]) -> OmdbRatings:
    """
    Pull the ratings out of an OMDb movie payload.

    "N/A" values become None, vote counts lose their thousands separators and
    the Rotten Tomatoes percentage is read from the Ratings list.
    """
    imdb_rating_raw = _available(data.get("imdbRating"))
    try:
        imdb_rating = float(imdb_rating_raw) if imdb_rating_raw else None
    except ValueError:
        imdb_rating = None

    rotten_tomatoes = next(
        (
            _to_int(_available(r.get("Value")))
            for r in data.get("Ratings") or []
            if r.get("Source") == "Rotten Tomatoes"
        ),
        None,
    )

    return OmdbRatings(
        imdb_rating=imdb_rating,
        imdb_votes=_to_int(_available(data.get("imdbVotes"))),
        rotten_tomatoes=rotten_tomatoes,
        metacritic=_to_int(_available(data.get("Metascore"))),
    )


def get_movie_by_imdb_id(imdb_id: str) -> dict[str, Any] | None:
    try:
        response = requests.get(
            OMDB_BASE_URL,
            params={"i": imdb_id, "apikey": settings.OMDB_KEY},
            timeout=settings.TMDB_TIMEOUT_SECONDS,
        )
        response.raise_for_status()
        data: dict[str, Any] = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning(f"Failed to fetch OMDb data for {imdb_id}. Error: {e}")
        return None

    if data.get("Response") == "False":
        logger.warning(f"OMDb error for {imdb_id}: {data.get('Error')}")
        return None
    return data


def get_ratings_by_imdb_id(imdb_id: str) -> OmdbRatings | None:
    data = get_movie_by_imdb_id(imdb_id)
    if data is None:
        return None
    return extract_ratings(data)
