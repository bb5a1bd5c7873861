from fastapi import status

from .base import AppError


class RatingValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class MissingMovieIdError(RatingValidationError):
    detail = "Movie ID is required"


class MissingSubScoreError(RatingValidationError):
    detail = "All rating values are required"


class SubScoreOutOfRangeError(RatingValidationError):
    detail = "Rating values must be between 1 and 100"


class RatedMovieNotFoundError(RatingValidationError):
    def __init__(self, movie_id: int):
        self.movie_id = movie_id
        super().__init__(f"Movie with ID {movie_id} not found.")


class RatingCreateError(AppError):
    detail = "Failed to add rating"
