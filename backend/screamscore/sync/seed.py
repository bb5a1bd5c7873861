from dataclasses import dataclass
from pathlib import Path

import yaml
from loguru import logger
from pydantic import BaseModel
from sqlmodel import Session

from screamscore.crud import movie as movies_crud
from screamscore.crud import rating as ratings_crud
from screamscore.exceptions.base import AppError
from screamscore.models.movie import MovieUpdate
from screamscore.models.rating import RatingBase, RatingCreate
from screamscore.services import movies as movies_service
from screamscore.sync import omdb


class SeedMovie(BaseModel):
    tmdb_id: int
    ratings: list[RatingBase] = []


@dataclass
class SeedStats:
    created: int = 0
    skipped: int = 0
    failed: int = 0


def load_seed_movies(path: Path) -> list[SeedMovie]:
    with open(path, encoding="utf-8") as file:
        entries = yaml.safe_load(file) or []
    return [SeedMovie.model_validate(entry) for entry in entries]


def seed_movies(*, session: Session, seed: list[SeedMovie]) -> SeedStats:
    """
    Import the seed titles from TMDB, add their IMDb ratings from OMDb and
    store their sample ratings. Titles already in the catalog are skipped.
    """
    stats = SeedStats()
    for entry in seed:
        try:
            movie, created = movies_service.import_movie_from_tmdb(
                session=session,
                tmdb_id=entry.tmdb_id,
            )
        except AppError as e:
            stats.failed += 1
            logger.error(f"Failed to seed TMDB ID {entry.tmdb_id}: {e}")
            continue

        if not created:
            stats.skipped += 1
            logger.info(f"Skipping {movie.title}, already exists")
            continue

        if movie.imdb_id:
            ratings = omdb.get_ratings_by_imdb_id(movie.imdb_id)
            if ratings is not None:
                movies_crud.update_movie(
                    db_movie=movie,
                    movie_update=MovieUpdate(
                        imdb_rating=ratings.imdb_rating,
                        imdb_votes=ratings.imdb_votes,
                    ),
                )

        assert movie.id is not None
        for rating in entry.ratings:
            ratings_crud.create_rating(
                session=session,
                rating_create=RatingCreate(**rating.model_dump(), movie_id=movie.id),
            )
        session.commit()
        stats.created += 1
        logger.info(
            f"Created {movie.title} ({movie.year}) with {len(entry.ratings)} rating(s)"
        )

    logger.info(
        f"Seeding finished: {stats.created} created, {stats.skipped} skipped, "
        f"{stats.failed} failed"
    )
    return stats
