import json
from datetime import date
from typing import Any

import requests
from loguru import logger

from screamscore.core.config import settings
from screamscore.exceptions.provider_exceptions import TmdbError
from screamscore.models.movie import MovieCreate

TMDB_BASE_URL = "https://api.themoviedb.org/3"
HORROR_GENRE_ID = 27
TOP_CAST_SIZE = 3

session = requests.Session()


def _get(endpoint: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
    url = f"{TMDB_BASE_URL}{endpoint}"
    try:
        response = session.get(
            url,
            params=params,
            headers={
                "Authorization": f"Bearer {settings.TMDB_KEY}",
                "Accept": "application/json",
            },
            timeout=settings.TMDB_TIMEOUT_SECONDS,
        )
    except requests.RequestException as e:
        raise TmdbError(endpoint) from e

    if not response.ok:
        raise TmdbError(endpoint, response.status_code)

    payload: dict[str, Any] = response.json()
    return payload


def search_movies(query: str, page: int = 1) -> list[dict[str, Any]]:
    payload = _get(
        "/search/movie",
        {
            "query": query,
            "include_adult": "false",
            "language": "en-US",
            "page": page,
        },
    )
    results: list[dict[str, Any]] = payload.get("results", [])
    return results


def get_movie_details(tmdb_id: int) -> dict[str, Any]:
    return _get(f"/movie/{tmdb_id}", {"language": "en-US"})


def get_movie_credits(tmdb_id: int) -> dict[str, Any]:
    return _get(f"/movie/{tmdb_id}/credits")


def get_movie_videos(tmdb_id: int) -> list[dict[str, Any]]:
    payload = _get(f"/movie/{tmdb_id}/videos", {"language": "en-US"})
    results: list[dict[str, Any]] = payload.get("results", [])
    return results


def discover_horror_movies(params: dict[str, Any]) -> list[dict[str, Any]]:
    """
    Run a TMDB discover query restricted to the horror genre.

    Parameters:
        params (dict[str, Any]): Extra discover parameters (sorting, dates).
    Returns:
        list[dict[str, Any]]: The first page of results.
    Raises:
        TmdbError: If the request fails.
    """
    payload = _get(
        "/discover/movie",
        {"with_genres": HORROR_GENRE_ID, "language": "en-US", **params},
    )
    results: list[dict[str, Any]] = payload.get("results", [])
    return results


def pick_trailer(videos: list[dict[str, Any]]) -> dict[str, Any] | None:
    """
    Choose the video to show as trailer. Preference: official YouTube trailer,
    any YouTube trailer, YouTube teaser, any YouTube video.
    """
    youtube = [v for v in videos if v.get("site") == "YouTube"]
    preferences = [
        lambda v: v.get("type") == "Trailer" and v.get("official"),
        lambda v: v.get("type") == "Trailer",
        lambda v: v.get("type") == "Teaser",
        lambda v: True,
    ]
    for matches in preferences:
        for video in youtube:
            if matches(video):
                return video
    return None


def parse_release_date(value: str | None) -> date | None:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(f"Unparseable TMDB release date: {value!r}")
        return None


def get_full_movie_data(tmdb_id: int) -> MovieCreate:
    """
    Fetch details, credits and videos of a TMDB movie and combine them into
    the data needed to store it.

    Parameters:
        tmdb_id (int): TMDB ID of the movie.
    Returns:
        MovieCreate: The movie to insert.
    Raises:
        TmdbError: If any of the requests fail.
    """
    details = get_movie_details(tmdb_id)
    credits = get_movie_credits(tmdb_id)
    videos = get_movie_videos(tmdb_id)

    release_date = parse_release_date(details.get("release_date"))
    trailer = pick_trailer(videos)
    director = next(
        (c.get("name") for c in credits.get("crew", []) if c.get("job") == "Director"),
        None,
    )
    top_cast = [
        {
            "name": c.get("name"),
            "character": c.get("character"),
            "profilePath": c.get("profile_path"),
        }
        for c in credits.get("cast", [])[:TOP_CAST_SIZE]
    ]
    genres = ", ".join(g["name"] for g in details.get("genres", []) if g.get("name"))

    return MovieCreate(
        tmdb_id=details.get("id", tmdb_id),
        title=details.get("title") or f"TMDB {tmdb_id}",
        year=release_date.year if release_date else None,
        release_date=release_date,
        description=details.get("overview") or None,
        tagline=details.get("tagline") or None,
        runtime=details.get("runtime") or None,
        imdb_id=details.get("imdb_id") or None,
        poster_path=details.get("poster_path"),
        backdrop_path=details.get("backdrop_path"),
        trailer_key=trailer["key"] if trailer else None,
        genres=genres or None,
        director=director,
        cast=json.dumps(top_cast),
        tmdb_rating=details.get("vote_average") or None,
        tmdb_votes=details.get("vote_count") or None,
    )
