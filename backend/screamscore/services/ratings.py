from logging import getLogger

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from screamscore.converters import rating as rating_converters
from screamscore.crud import movie as movies_crud
from screamscore.crud import rating as ratings_crud
from screamscore.exceptions.rating_exceptions import (
    MissingMovieIdError,
    MissingSubScoreError,
    RatedMovieNotFoundError,
    RatingCreateError,
    RatingValidationError,
    SubScoreOutOfRangeError,
)
from screamscore.inputs.rating import RatingSubmission
from screamscore.models.rating import (
    DEFAULT_AUTHOR,
    SUB_SCORE_MAX,
    SUB_SCORE_MIN,
    RatingCreate,
)
from screamscore.schemas.rating import RatingPublic

logger = getLogger(__name__)

AUTHOR_MAX_LENGTH = 255


def validate_submission(submission: RatingSubmission) -> RatingCreate:
    """
    Check a rating submission and normalize its free-text fields.

    Checks run in order: movie ID present, all three sub-scores present, each
    sub-score within range.

    Parameters:
        submission (RatingSubmission): The raw request body.
    Returns:
        RatingCreate: The validated rating, review trimmed and author defaulted.
    Raises:
        RatingValidationError: If any check fails.
    """
    if submission.movie_id is None:
        raise MissingMovieIdError

    scores = (submission.scream, submission.psychological, submission.suspense)
    if any(score is None for score in scores):
        raise MissingSubScoreError

    if any(not SUB_SCORE_MIN <= score <= SUB_SCORE_MAX for score in scores):  # type: ignore[operator]
        raise SubScoreOutOfRangeError

    review = submission.review.strip() if submission.review else ""
    author = submission.author.strip() if submission.author else ""
    if len(author) > AUTHOR_MAX_LENGTH:
        raise RatingValidationError(
            f"Author must be at most {AUTHOR_MAX_LENGTH} characters"
        )

    return RatingCreate(
        movie_id=submission.movie_id,
        scream=submission.scream,  # type: ignore[arg-type]
        psychological=submission.psychological,  # type: ignore[arg-type]
        suspense=submission.suspense,  # type: ignore[arg-type]
        review=review or None,
        author=author or DEFAULT_AUTHOR,
    )


def add_rating(*, session: Session, submission: RatingSubmission) -> RatingPublic:
    """
    Store a user rating for a movie.

    Parameters:
        session (Session): Database session.
        submission (RatingSubmission): The raw request body.
    Returns:
        RatingPublic: The created rating.
    Raises:
        RatingValidationError: If the submission is invalid or the movie is unknown.
        RatingCreateError: If the rating cannot be stored.
    """
    rating_create = validate_submission(submission)

    movie = movies_crud.get_movie_by_id(session=session, id=rating_create.movie_id)
    if movie is None:
        raise RatedMovieNotFoundError(rating_create.movie_id)

    try:
        rating = ratings_crud.create_rating(
            session=session,
            rating_create=rating_create,
        )
        session.commit()
        session.refresh(rating)
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception("Error adding rating for movie %s", rating_create.movie_id)
        raise RatingCreateError from e

    logger.info("Rating %s created for movie %s", rating.id, rating.movie_id)
    return rating_converters.to_public(rating)
