from apscheduler.schedulers.blocking import (  # type: ignore[import-untyped]
    BlockingScheduler,
)
from apscheduler.triggers.cron import CronTrigger  # type: ignore[import-untyped]

from screamscore.core.config import settings


def weekly_sync() -> None:
    from screamscore.api.deps import get_db_context
    from screamscore.logging_ import setup_logger
    from screamscore.sync.runner import run_weekly_sync

    setup_logger("weekly_sync")
    with get_db_context() as session:
        run_weekly_sync(session=session)


def build_scheduler() -> BlockingScheduler:
    scheduler = BlockingScheduler(timezone=settings.TIMEZONE)
    scheduler.add_job(
        func=weekly_sync,
        trigger=CronTrigger(day_of_week="sun", hour=3, minute=0),
        id="weekly_sync",
    )
    return scheduler


def main() -> None:
    build_scheduler().start()


if __name__ == "__main__":
    main()
