import time
from collections.abc import Callable
from dataclasses import asdict, dataclass

from loguru import logger
from sqlmodel import Session

from screamscore.api.deps import get_db_context
from screamscore.core.config import settings
from screamscore.crud import movie as movies_crud
from screamscore.exceptions.provider_exceptions import TmdbError
from screamscore.logging_ import setup_logger
from screamscore.models.movie import MovieUpdate
from screamscore.sync import tmdb
from screamscore.sync.tmdb import parse_release_date


@dataclass
class BackfillStats:
    updated: int = 0
    skipped: int = 0
    failed: int = 0


def backfill_release_dates(
    *,
    session: Session,
    delay: float | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> BackfillStats:
    """
    Fill in release dates of TMDB-imported movies that do not have one. The
    year is corrected too when it is missing or different.

    Parameters:
        session (Session): Database session.
        delay (float | None): Seconds between TMDB calls, defaults to settings.
        sleep (Callable[[float], None]): Sleep function.
    Returns:
        BackfillStats: Counts per outcome.
    """
    delay = settings.BACKFILL_REQUEST_DELAY_SECONDS if delay is None else delay
    movies = movies_crud.get_movies_without_release_date(session=session)
    logger.info(f"Found {len(movies)} movies without a release date")

    stats = BackfillStats()
    for movie in movies:
        assert movie.tmdb_id is not None
        try:
            details = tmdb.get_movie_details(movie.tmdb_id)
        except TmdbError as e:
            stats.failed += 1
            logger.error(f"Failed to fetch {movie.title} ({movie.tmdb_id}): {e}")
            sleep(delay)
            continue

        release_date = parse_release_date(details.get("release_date"))
        if release_date is None:
            stats.skipped += 1
            logger.debug(f"No release date on TMDB for {movie.title}")
        else:
            changes: dict = {"release_date": release_date}
            if movie.year != release_date.year:
                changes["year"] = release_date.year
            movie_update = MovieUpdate(**changes)
            movies_crud.update_movie(db_movie=movie, movie_update=movie_update)
            session.commit()
            stats.updated += 1
            logger.info(f"{movie.title}: release date {release_date}")
        sleep(delay)

    logger.info(f"Release date backfill finished: {asdict(stats)}")
    return stats


def main() -> None:
    setup_logger("backfill_release_dates")
    with get_db_context() as session:
        backfill_release_dates(session=session)


if __name__ == "__main__":
    main()
