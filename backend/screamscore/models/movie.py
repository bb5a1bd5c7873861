import datetime as dt
from typing import TYPE_CHECKING

from sqlmodel import Field, Relationship, SQLModel

from screamscore.utils import now_local_naive

if TYPE_CHECKING:
    from .rating import Rating

__all__ = [
    "MovieBase",
    "MovieCreate",
    "MovieUpdate",
    "Movie",
]


# Shared properties
class MovieBase(SQLModel):
    title: str = Field(min_length=1, max_length=512)
    year: int | None = None
    release_date: dt.date | None = None
    description: str | None = None
    tagline: str | None = None
    runtime: int | None = None
    tmdb_id: int | None = Field(default=None, unique=True, index=True)
    imdb_id: str | None = Field(default=None, index=True, max_length=32)
    poster_path: str | None = None
    backdrop_path: str | None = None
    trailer_key: str | None = None
    genres: str | None = None
    director: str | None = None
    cast: str | None = None
    tmdb_rating: float | None = None
    tmdb_votes: int | None = None
    imdb_rating: float | None = None
    imdb_votes: int | None = None


# Properties to receive on movie creation
class MovieCreate(MovieBase):
    pass


# Properties to receive on movie update
class MovieUpdate(SQLModel):
    title: str | None = None
    year: int | None = None
    release_date: dt.date | None = None
    description: str | None = None
    tagline: str | None = None
    runtime: int | None = None
    imdb_id: str | None = None
    poster_path: str | None = None
    backdrop_path: str | None = None
    trailer_key: str | None = None
    genres: str | None = None
    director: str | None = None
    cast: str | None = None
    tmdb_rating: float | None = None
    tmdb_votes: int | None = None
    imdb_rating: float | None = None
    imdb_votes: int | None = None


# Database model, database table inferred from class name
class Movie(MovieBase, table=True):
    id: int | None = Field(default=None, primary_key=True)
    created_at: dt.datetime = Field(default_factory=now_local_naive, index=True)
    updated_at: dt.datetime = Field(default_factory=now_local_naive)
    ratings: list["Rating"] = Relationship(
        back_populates="movie",
        sa_relationship_kwargs={
            "cascade": "all, delete-orphan",
            "lazy": "selectin",
            "order_by": "[desc(Rating.created_at), desc(Rating.id)]",
        },
    )
