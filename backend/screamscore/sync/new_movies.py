import time
from collections.abc import Callable
from dataclasses import asdict, dataclass
from datetime import date, timedelta
from typing import Any

from loguru import logger
from sqlmodel import Session

from screamscore.api.deps import get_db_context
from screamscore.core.config import settings
from screamscore.exceptions.base import AppError
from screamscore.exceptions.provider_exceptions import TmdbError
from screamscore.logging_ import setup_logger
from screamscore.services import movies as movies_service
from screamscore.sync import tmdb
from screamscore.utils import today_local

UPCOMING_WINDOW = timedelta(days=365)
RECENT_WINDOW = timedelta(days=180)
TOP_RATED_MIN_VOTES = 100


@dataclass
class SyncStats:
    fetched: int = 0
    imported: int = 0
    skipped: int = 0
    failed: int = 0
    total: int = 0


def discover_queries(today: date) -> dict[str, dict[str, Any]]:
    return {
        "upcoming": {
            "primary_release_date.gte": today.isoformat(),
            "primary_release_date.lte": (today + UPCOMING_WINDOW).isoformat(),
            "sort_by": "primary_release_date.asc",
        },
        "recent": {
            "primary_release_date.gte": (today - RECENT_WINDOW).isoformat(),
            "primary_release_date.lte": today.isoformat(),
            "sort_by": "primary_release_date.desc",
        },
        "popular": {"sort_by": "popularity.desc"},
        "top_rated": {
            "sort_by": "vote_average.desc",
            "vote_count.gte": TOP_RATED_MIN_VOTES,
        },
    }


def fetch_candidates(today: date) -> list[dict[str, Any]]:
    """
    Collect the discover lists and dedupe them by TMDB id, keeping the first
    occurrence.
    """
    seen: set[int] = set()
    candidates: list[dict[str, Any]] = []
    for name, params in discover_queries(today).items():
        results = tmdb.discover_horror_movies(params)
        logger.info(f"Fetched {len(results)} {name} horror movies")
        for result in results:
            tmdb_id = result.get("id")
            if tmdb_id is None or tmdb_id in seen:
                continue
            seen.add(tmdb_id)
            candidates.append(result)
    return candidates


def sync_new_movies(
    *,
    session: Session,
    today: date | None = None,
    delay: float | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> SyncStats:
    """
    Import new horror movies from TMDB. Failed imports are logged and counted,
    the batch continues.

    Parameters:
        session (Session): Database session.
        today (date | None): Reference day for the upcoming and recent windows.
        delay (float | None): Seconds between imports, defaults to settings.
        sleep (Callable[[float], None]): Sleep function.
    Returns:
        SyncStats: Counts per outcome.
    Raises:
        TmdbError: If the discover lists cannot be fetched.
    """
    today = today or today_local()
    delay = settings.SYNC_REQUEST_DELAY_SECONDS if delay is None else delay

    candidates = fetch_candidates(today)
    stats = SyncStats(fetched=len(candidates))

    for candidate in candidates:
        tmdb_id = candidate["id"]
        title = candidate.get("title", f"TMDB {tmdb_id}")
        try:
            _, created = movies_service.import_movie_from_tmdb(
                session=session,
                tmdb_id=tmdb_id,
            )
        except (AppError, TmdbError) as e:
            stats.failed += 1
            logger.error(f"Failed to import {title} ({tmdb_id}): {e}")
        else:
            if created:
                stats.imported += 1
                logger.info(f"Imported {title} ({tmdb_id})")
            else:
                stats.skipped += 1
                logger.debug(f"Skipped {title} ({tmdb_id}), already exists")
        sleep(delay)

    stats.total = stats.imported + stats.skipped + stats.failed
    logger.info(f"New movie sync finished: {asdict(stats)}")
    return stats


def main() -> None:
    setup_logger("new_movies")
    with get_db_context() as session:
        sync_new_movies(session=session)


if __name__ == "__main__":
    main()
