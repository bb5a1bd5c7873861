import sys
from collections.abc import Callable

from loguru import logger
from sqlmodel import Session

from screamscore.api.deps import get_db_context
from screamscore.logging_ import setup_logger
from screamscore.sync.imdb_ratings import update_imdb_ratings
from screamscore.sync.new_movies import sync_new_movies

WeeklyStep = tuple[str, Callable[..., object]]

WEEKLY_STEPS: list[WeeklyStep] = [
    ("new movie sync", sync_new_movies),
    ("IMDb ratings refresh", update_imdb_ratings),
]


def run_weekly_sync(
    *,
    session: Session,
    steps: list[WeeklyStep] | None = None,
) -> bool:
    """
    Run the weekly sync steps in order. A failing step is logged and the next
    one still runs.

    Returns:
        bool: True when every step succeeded.
    """
    ok = True
    for name, step in steps or WEEKLY_STEPS:
        logger.info(f"Starting {name}...")
        try:
            step(session=session)
        except Exception:
            ok = False
            session.rollback()
            logger.exception(f"{name} failed")
        else:
            logger.info(f"{name} finished successfully.")
    return ok


def run() -> None:
    setup_logger("weekly_sync")
    with get_db_context() as session:
        ok = run_weekly_sync(session=session)
    if not ok:
        sys.exit(1)


if __name__ == "__main__":
    run()
