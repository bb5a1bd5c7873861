from fastapi import status

from .base import AppError


class MovieNotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, movie_id: int):
        self.movie_id = movie_id
        detail = f"Movie with ID {movie_id} not found."
        super().__init__(detail)


class MovieTitleRequiredError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Title is required"


class MovieFetchError(AppError):
    detail = "Failed to fetch movies"


class MovieCreateError(AppError):
    detail = "Failed to add movie"


class MovieDeleteError(AppError):
    detail = "Failed to delete movie"
