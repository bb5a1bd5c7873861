from sqlalchemy import func
from sqlmodel import Session, col, select

from screamscore.models.movie import Movie, MovieCreate, MovieUpdate
from screamscore.models.rating import Rating
from screamscore.utils import now_local_naive


def get_movie_by_id(*, session: Session, id: int) -> Movie | None:
    """
    Retrieve a movie by its ID.
    Parameters:
        session (Session): The database session.
        id (int): The ID of the movie to retrieve.
    Returns:
        Movie | None: The movie object if found, otherwise None.
    """
    movie = session.get(Movie, id)
    return movie


def get_movie_by_tmdb_id(*, session: Session, tmdb_id: int) -> Movie | None:
    """
    Retrieve a movie by its TMDB ID.

    Parameters:
        session (Session): The database session.
        tmdb_id (int): The TMDB ID of the movie to retrieve.
    Returns:
        Movie | None: The movie object if found, otherwise None.
    """
    stmt = select(Movie).where(col(Movie.tmdb_id) == tmdb_id)
    movie: Movie | None = session.exec(stmt).one_or_none()
    return movie


def get_movies(*, session: Session) -> list[Movie]:
    """
    Retrieve the whole catalog, newest first.

    Parameters:
        session (Session): The database session.
    Returns:
        list[Movie]: All movies ordered by creation time, descending.
    """
    stmt = select(Movie).order_by(
        col(Movie.created_at).desc(),
        col(Movie.id).desc(),
    )
    return list(session.exec(stmt).all())


def get_rated_movies(*, session: Session) -> list[Movie]:
    """
    Retrieve every movie that has at least one user rating.

    Parameters:
        session (Session): The database session.
    Returns:
        list[Movie]: Rated movies, newest first.
    """
    stmt = (
        select(Movie)
        .where(col(Movie.id).in_(select(Rating.movie_id)))
        .order_by(col(Movie.created_at).desc(), col(Movie.id).desc())
    )
    return list(session.exec(stmt).all())


def search_movies(
    *,
    session: Session,
    query: str,
    limit: int | None = None,
) -> list[Movie]:
    """
    Case-insensitive title substring search. `%` and `_` in the query match
    themselves.

    Parameters:
        session (Session): The database session.
        query (str): Text to look for in the title.
        limit (int | None): Maximum number of movies to return, all when None.
    Returns:
        list[Movie]: Matching movies ordered by title.
    """
    stmt = (
        select(Movie)
        .where(col(Movie.title).icontains(query, autoescape=True))
        .order_by(col(Movie.title), col(Movie.id))
    )
    if limit is not None:
        stmt = stmt.limit(limit)
    return list(session.exec(stmt).all())


def get_movies_without_release_date(*, session: Session) -> list[Movie]:
    """
    Retrieve movies that were imported from TMDB but have no release date.

    Parameters:
        session (Session): The database session.
    Returns:
        list[Movie]: Movies with a TMDB ID and no release date.
    """
    stmt = select(Movie).where(
        col(Movie.tmdb_id).is_not(None),
        col(Movie.release_date).is_(None),
    )
    return list(session.exec(stmt).all())


def get_movies_with_imdb_id(*, session: Session) -> list[Movie]:
    """
    Retrieve every movie that can be matched against IMDb data.

    Parameters:
        session (Session): The database session.
    Returns:
        list[Movie]: Movies with an IMDb ID.
    """
    stmt = select(Movie).where(col(Movie.imdb_id).is_not(None))
    return list(session.exec(stmt).all())


def count_movies(*, session: Session) -> int:
    stmt = select(func.count()).select_from(Movie)
    return int(session.exec(stmt).one())


def create_movie(*, session: Session, movie_create: MovieCreate) -> Movie:
    """
    Create a new movie in the database. Raises an IntegrityError if a movie with
    the same TMDB ID already exists.

    Parameters:
        session (Session): The database session.
        movie_create (MovieCreate): The movie data to create.
    Returns:
        Movie: The created movie object.
    Raises:
        IntegrityError: If a movie with the same TMDB ID already exists.
    """
    db_obj = Movie(**movie_create.model_dump())
    session.add(db_obj)
    session.flush()  # Check for Unique Violations
    return db_obj


def update_movie(*, db_movie: Movie, movie_update: MovieUpdate) -> Movie:
    """
    Update an existing movie. Does not flush, that is up to the caller.

    Parameters:
        db_movie (Movie): The existing movie object to update.
        movie_update (MovieUpdate): The updated movie data.
    Returns:
        Movie: The updated movie object.
    """
    movie_data = movie_update.model_dump(exclude_unset=True)
    db_movie.sqlmodel_update(movie_data)
    db_movie.updated_at = now_local_naive()
    return db_movie


def delete_movie(*, session: Session, db_movie: Movie) -> None:
    """
    Delete a movie together with its ratings. Does not commit.

    Parameters:
        session (Session): The database session.
        db_movie (Movie): The movie to delete.
    """
    session.delete(db_movie)
    session.flush()
