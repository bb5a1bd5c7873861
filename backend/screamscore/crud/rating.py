from sqlmodel import Session, col, select

from screamscore.models.rating import Rating, RatingCreate


def create_rating(*, session: Session, rating_create: RatingCreate) -> Rating:
    """
    Insert a rating. Raises an IntegrityError when the movie does not exist
    and the database enforces foreign keys.

    Parameters:
        session (Session): The database session.
        rating_create (RatingCreate): The validated rating data.
    Returns:
        Rating: The created rating object.
    """
    db_obj = Rating(**rating_create.model_dump())
    session.add(db_obj)
    session.flush()
    return db_obj


def get_ratings_for_movie(*, session: Session, movie_id: int) -> list[Rating]:
    """
    Retrieve the ratings of a movie, newest first.

    Parameters:
        session (Session): The database session.
        movie_id (int): The ID of the movie.
    Returns:
        list[Rating]: The ratings of the movie.
    """
    stmt = (
        select(Rating)
        .where(col(Rating.movie_id) == movie_id)
        .order_by(col(Rating.created_at).desc(), col(Rating.id).desc())
    )
    return list(session.exec(stmt).all())
