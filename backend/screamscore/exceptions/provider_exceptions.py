__all__ = [
    "ProviderError",
    "TmdbError",
    "ImdbDatasetError",
]


class ProviderError(Exception):
    """Base class for failures talking to an external movie data provider."""

    def __init__(self, message: str = "External provider request failed."):
        super().__init__(message)
        self.message = message


class TmdbError(ProviderError):
    """Raised when a TMDB request fails or returns a non-2xx status."""

    def __init__(self, endpoint: str, status_code: int | None = None):
        if status_code is not None:
            message = f"TMDB API error {status_code} for {endpoint}"
        else:
            message = f"TMDB request failed for {endpoint}"
        super().__init__(message)
        self.endpoint = endpoint
        self.status_code = status_code


class ImdbDatasetError(ProviderError):
    """Raised when the IMDb ratings dataset cannot be downloaded."""
