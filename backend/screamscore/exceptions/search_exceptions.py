from .base import AppError


class SearchError(AppError):
    detail = "Search failed"
