from .movie import Movie, MovieBase, MovieCreate, MovieUpdate
from .rating import (
    DEFAULT_AUTHOR,
    SUB_SCORE_MAX,
    SUB_SCORE_MIN,
    Rating,
    RatingBase,
    RatingCreate,
)

Movie.model_rebuild()
Rating.model_rebuild()

__all__ = [
    "Movie",
    "MovieBase",
    "MovieCreate",
    "MovieUpdate",
    "Rating",
    "RatingBase",
    "RatingCreate",
    "DEFAULT_AUTHOR",
    "SUB_SCORE_MIN",
    "SUB_SCORE_MAX",
]
