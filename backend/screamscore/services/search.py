from logging import getLogger
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from screamscore.converters import movie as movie_converters
from screamscore.crud import movie as movies_crud
from screamscore.exceptions.provider_exceptions import TmdbError
from screamscore.exceptions.search_exceptions import SearchError
from screamscore.inputs.movie import HomeFilters
from screamscore.schemas.movie import (
    MovieSearchResponse,
    MovieSearchResults,
    TmdbSearchResponse,
)
from screamscore.services.home import passes_filters
from screamscore.sync import tmdb as tmdb_client
from screamscore.utils import today_local

logger = getLogger(__name__)

CATALOG_SEARCH_LIMIT = 8
TMDB_SEARCH_LIMIT = 10
TMDB_QUERY_MAX_LENGTH = 100


def search_catalog(*, session: Session, query: str) -> MovieSearchResponse:
    """
    Title search for the search dropdown.

    Parameters:
        session (Session): Database session.
        query (str): Text typed by the user.
    Returns:
        MovieSearchResponse: At most 8 matching movies, none for a blank query.
    Raises:
        SearchError: If the database query fails.
    """
    query = query.strip()
    if not query:
        return MovieSearchResponse(movies=[])

    try:
        movies = movies_crud.search_movies(
            session=session,
            query=query,
            limit=CATALOG_SEARCH_LIMIT,
        )
    except SQLAlchemyError as e:
        logger.exception("Catalog search failed for %r", query)
        raise SearchError from e

    return MovieSearchResponse(
        movies=[movie_converters.to_search_result(movie) for movie in movies]
    )


def search_results(
    *,
    session: Session,
    query: str,
    filters: HomeFilters,
) -> MovieSearchResults:
    """
    Full search results page: every title match, narrowed by the rating and
    year filters.

    Parameters:
        session (Session): Database session.
        query (str): Text typed by the user.
        filters (HomeFilters): Optional IMDb rating and year bounds.
    Returns:
        MovieSearchResults: All matching movies ordered by title, none for a
        blank query.
    Raises:
        SearchError: If the database query fails.
    """
    query = query.strip()
    if not query:
        return MovieSearchResults(query="", movies=[], has_filters=filters.any_set)

    try:
        movies = movies_crud.search_movies(session=session, query=query)
    except SQLAlchemyError as e:
        logger.exception("Search results failed for %r", query)
        raise SearchError from e

    today = today_local()
    return MovieSearchResults(
        query=query,
        movies=[
            movie_converters.to_public(movie, today=today)
            for movie in movies
            if passes_filters(movie, filters)
        ],
        has_filters=filters.any_set,
    )


def search_tmdb(*, query: str) -> TmdbSearchResponse:
    """
    Search TMDB for movies to import.

    Parameters:
        query (str): Text typed by the user, trimmed and capped at 100 chars.
    Returns:
        TmdbSearchResponse: At most 10 raw TMDB results.
    Raises:
        SearchError: If TMDB cannot be reached.
    """
    query = query.strip()[:TMDB_QUERY_MAX_LENGTH]
    if not query:
        return TmdbSearchResponse(results=[])

    try:
        results: list[dict[str, Any]] = tmdb_client.search_movies(query)
    except TmdbError as e:
        logger.exception("TMDB search failed for %r", query)
        raise SearchError("Failed to search TMDB") from e

    return TmdbSearchResponse(results=results[:TMDB_SEARCH_LIMIT])
