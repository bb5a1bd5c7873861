# screamscore/inputs/movie.py

from typing import Annotated, Any

from fastapi import Query
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class MovieSubmission(BaseModel):
    """Body of a movie creation request. Accepts camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = None
    year: int | None = None
    description: str | None = None
    tmdb_id: int | None = None

    @field_validator("year", "tmdb_id", mode="before")
    @classmethod
    def empty_numbers_are_missing(cls, value: Any) -> Any:
        return _blank_to_none(value)


class HomeFilters(BaseModel):
    min_imdb: float | None = None
    max_imdb: float | None = None
    min_year: int | None = None
    max_year: int | None = None

    @property
    def any_set(self) -> bool:
        return any(
            value is not None
            for value in (self.min_imdb, self.max_imdb, self.min_year, self.max_year)
        )


def get_home_filters(
    min_imdb: Annotated[
        float | None,
        Query(ge=0, le=10, description="Minimum IMDb rating"),
    ] = None,
    max_imdb: Annotated[
        float | None,
        Query(ge=0, le=10, description="Maximum IMDb rating"),
    ] = None,
    min_year: Annotated[
        int | None,
        Query(description="Earliest release year"),
    ] = None,
    max_year: Annotated[
        int | None,
        Query(description="Latest release year"),
    ] = None,
) -> HomeFilters:
    return HomeFilters(
        min_imdb=min_imdb,
        max_imdb=max_imdb,
        min_year=min_year,
        max_year=max_year,
    )
