from logging import getLogger

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session

from screamscore.converters import movie as movie_converters
from screamscore.converters import rating as rating_converters
from screamscore.core.similarity import select_similar_movies
from screamscore.crud import movie as movies_crud
from screamscore.crud import rating as ratings_crud
from screamscore.exceptions.base import AppError
from screamscore.exceptions.movie_exceptions import (
    MovieCreateError,
    MovieDeleteError,
    MovieFetchError,
    MovieNotFoundError,
    MovieTitleRequiredError,
)
from screamscore.exceptions.provider_exceptions import TmdbError
from screamscore.inputs.movie import MovieSubmission
from screamscore.models.movie import Movie, MovieCreate
from screamscore.schemas.movie import MovieDetail, MoviePublic
from screamscore.schemas.rating import RatingPublic
from screamscore.sync import tmdb as tmdb_client
from screamscore.utils import today_local

logger = getLogger(__name__)


def _get_movie_or_404(*, session: Session, movie_id: int) -> Movie:
    movie = movies_crud.get_movie_by_id(session=session, id=movie_id)
    if movie is None:
        raise MovieNotFoundError(movie_id)
    return movie


def list_movies(*, session: Session) -> list[MoviePublic]:
    """
    Get the whole catalog with derived averages, newest first.

    Parameters:
        session (Session): Database session.
    Returns:
        list[MoviePublic]: Every movie in the catalog.
    Raises:
        MovieFetchError: If the catalog cannot be read.
    """
    try:
        movies = movies_crud.get_movies(session=session)
    except SQLAlchemyError as e:
        logger.exception("Error fetching movies")
        raise MovieFetchError from e
    today = today_local()
    return [movie_converters.to_public(movie, today=today) for movie in movies]


def get_movie_detail(*, session: Session, movie_id: int) -> MovieDetail:
    """
    Get a single movie with its ratings.

    Parameters:
        session (Session): Database session.
        movie_id (int): ID of the movie to retrieve.
    Returns:
        MovieDetail: Movie details, ratings newest first.
    Raises:
        MovieNotFoundError: If the movie with the given ID does not exist.
    """
    movie = _get_movie_or_404(session=session, movie_id=movie_id)
    return movie_converters.to_detail(movie)


def get_movie_ratings(*, session: Session, movie_id: int) -> list[RatingPublic]:
    """
    Get the ratings of a movie, newest first.

    Raises:
        MovieNotFoundError: If the movie with the given ID does not exist.
    """
    _get_movie_or_404(session=session, movie_id=movie_id)
    ratings = ratings_crud.get_ratings_for_movie(session=session, movie_id=movie_id)
    return [rating_converters.to_public(rating) for rating in ratings]


def get_top_rated_movies(*, session: Session, limit: int) -> list[MoviePublic]:
    """
    Get rated movies ordered by spook score, highest first.

    Parameters:
        session (Session): Database session.
        limit (int): Maximum number of movies to return.
    Returns:
        list[MoviePublic]: At most `limit` movies that have ratings.
    """
    today = today_local()
    movies = [
        movie_converters.to_public(movie, today=today)
        for movie in movies_crud.get_rated_movies(session=session)
    ]
    movies.sort(key=lambda m: m.averages.spook_score, reverse=True)
    return movies[:limit]


def get_similar_movies(
    *,
    session: Session,
    movie_id: int,
    limit: int,
) -> list[MoviePublic]:
    """
    Get movies that share a genre with the given movie, topped up with the
    highest externally rated movies when there are not enough of them.

    Parameters:
        session (Session): Database session.
        movie_id (int): ID of the subject movie.
        limit (int): Maximum number of movies to return.
    Returns:
        list[MoviePublic]: At most `limit` movies, never the subject itself.
    Raises:
        MovieNotFoundError: If the movie with the given ID does not exist.
    """
    movie = _get_movie_or_404(session=session, movie_id=movie_id)
    catalog = movies_crud.get_movies(session=session)
    similar = select_similar_movies(
        catalog,
        genres=movie.genres,
        exclude_movie_id=movie.id,
        limit=limit,
    )
    today = today_local()
    return [movie_converters.to_public(m, today=today) for m in similar]


def insert_movie_if_not_exists(
    *,
    session: Session,
    movie_create: MovieCreate,
) -> bool:
    """
    Insert a movie into the database if no movie with its TMDB ID exists yet.

    Parameters:
        session (Session): Database session.
        movie_create (MovieCreate): Movie data to insert.
    Returns:
        bool: True if the movie was inserted, False if it already exists.
    Raises:
        AppError: If the insert fails for any other reason.
    """
    try:
        movies_crud.create_movie(
            session=session,
            movie_create=movie_create,
        )
        session.commit()
        return True
    except IntegrityError as e:
        session.rollback()
        if movie_create.tmdb_id is not None and movies_crud.get_movie_by_tmdb_id(
            session=session, tmdb_id=movie_create.tmdb_id
        ):
            return False
        raise AppError from e
    except Exception as e:
        session.rollback()
        raise AppError from e


def import_movie_from_tmdb(*, session: Session, tmdb_id: int) -> tuple[Movie, bool]:
    """
    Import a movie from TMDB unless it is already in the catalog.

    Parameters:
        session (Session): Database session.
        tmdb_id (int): TMDB ID of the movie.
    Returns:
        tuple[Movie, bool]: The stored movie and whether it was created now.
    Raises:
        MovieCreateError: If TMDB cannot be reached or the insert fails.
    """
    existing = movies_crud.get_movie_by_tmdb_id(session=session, tmdb_id=tmdb_id)
    if existing is not None:
        return existing, False

    try:
        movie_create = tmdb_client.get_full_movie_data(tmdb_id)
    except TmdbError as e:
        logger.exception("Could not fetch TMDB movie %s", tmdb_id)
        raise MovieCreateError from e

    try:
        created = insert_movie_if_not_exists(session=session, movie_create=movie_create)
    except AppError as e:
        logger.exception("Could not store TMDB movie %s", tmdb_id)
        raise MovieCreateError from e

    movie = movies_crud.get_movie_by_tmdb_id(session=session, tmdb_id=tmdb_id)
    if movie is None:
        raise MovieCreateError
    return movie, created


def add_movie(*, session: Session, submission: MovieSubmission) -> MoviePublic:
    """
    Add a movie, either by importing it from TMDB or from manual input.

    Parameters:
        session (Session): Database session.
        submission (MovieSubmission): The request body.
    Returns:
        MoviePublic: The stored movie.
    Raises:
        MovieTitleRequiredError: If no TMDB ID is given and the title is blank.
        MovieCreateError: If the movie cannot be stored.
    """
    if submission.tmdb_id:
        movie, _ = import_movie_from_tmdb(session=session, tmdb_id=submission.tmdb_id)
        return movie_converters.to_public(movie)

    title = (submission.title or "").strip()
    if not title:
        raise MovieTitleRequiredError

    description = submission.description.strip() if submission.description else None
    movie_create = MovieCreate(
        title=title,
        year=submission.year,
        description=description or None,
    )
    try:
        movie = movies_crud.create_movie(session=session, movie_create=movie_create)
        session.commit()
        session.refresh(movie)
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception("Error adding movie %r", title)
        raise MovieCreateError from e

    logger.info("Movie %s created manually: %s", movie.id, movie.title)
    return movie_converters.to_public(movie)


def delete_movie(*, session: Session, movie_id: int) -> None:
    """
    Delete a movie and all of its ratings.

    Raises:
        MovieNotFoundError: If the movie with the given ID does not exist.
        MovieDeleteError: If the delete fails.
    """
    movie = _get_movie_or_404(session=session, movie_id=movie_id)
    try:
        movies_crud.delete_movie(session=session, db_movie=movie)
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception("Error deleting movie %s", movie_id)
        raise MovieDeleteError from e
    logger.info("Movie %s deleted", movie_id)
