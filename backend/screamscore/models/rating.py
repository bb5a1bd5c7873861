import datetime as dt
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint
from sqlmodel import Field, Relationship, SQLModel

from screamscore.utils import now_local_naive

if TYPE_CHECKING:
    from .movie import Movie

__all__ = [
    "RatingBase",
    "RatingCreate",
    "Rating",
    "SUB_SCORE_MIN",
    "SUB_SCORE_MAX",
    "DEFAULT_AUTHOR",
]

SUB_SCORE_MIN = 1
SUB_SCORE_MAX = 100
DEFAULT_AUTHOR = "Anonymous"


# Shared properties
class RatingBase(SQLModel):
    scream: int = Field(ge=SUB_SCORE_MIN, le=SUB_SCORE_MAX)
    psychological: int = Field(ge=SUB_SCORE_MIN, le=SUB_SCORE_MAX)
    suspense: int = Field(ge=SUB_SCORE_MIN, le=SUB_SCORE_MAX)
    review: str | None = None
    author: str = Field(default=DEFAULT_AUTHOR, max_length=255)


# Properties to receive on rating creation
class RatingCreate(RatingBase):
    movie_id: int


# Ratings are immutable once created, so there is no RatingUpdate
class Rating(RatingBase, table=True):
    __table_args__ = (
        CheckConstraint(
            "scream BETWEEN 1 AND 100", name="ck_rating_scream_range"
        ),
        CheckConstraint(
            "psychological BETWEEN 1 AND 100", name="ck_rating_psychological_range"
        ),
        CheckConstraint(
            "suspense BETWEEN 1 AND 100", name="ck_rating_suspense_range"
        ),
    )
    id: int | None = Field(default=None, primary_key=True)
    movie_id: int = Field(foreign_key="movie.id", index=True, ondelete="CASCADE")
    movie: "Movie" = Relationship(back_populates="ratings")
    created_at: dt.datetime = Field(default_factory=now_local_naive, index=True)
