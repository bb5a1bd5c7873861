import os
import sys
from datetime import datetime
from typing import Any

import pytz
from loguru import logger
from loguru._logger import Logger

from screamscore.core.config import settings

# (file name, level, retention, only when DEBUG)
FILE_SINKS: list[tuple[str, str, str | None, bool]] = [
    ("trace.log", "TRACE", "3 days", True),
    ("debug.log", "DEBUG", "7 days", True),
    ("error.log", "ERROR", "30 days", False),
    ("info.log", "INFO", None, False),
]


def file_formatter(record: Any) -> str:
    fmt = "[{time:HH:mm:ss}] [{level}] {module}:{function}:{line} - {message}"

    extras = record.get("extra", {})
    if extras:
        fmt += " (" + ", ".join(f"{key}={value}" for key, value in extras.items()) + ")"
    fmt += "\n"

    if record["exception"]:
        fmt += "{exception}"
    return fmt


def console_formatter(record: Any) -> str:
    fmt = (
        "[<green>{time:HH:mm:ss}</green>] <level>[{level}]</level> "
        "{module}:{function}:<blue>{line}</blue> - {message}\n"
    )
    if record["exception"]:
        fmt += "{exception}"
    return fmt


def job_log_dir(name: str, log_dir: str | None = None) -> str:
    today = datetime.now(pytz.timezone(settings.TIMEZONE)).strftime("%Y-%m-%d")
    return os.path.join(log_dir or settings.LOG_DIR, today, name)


def setup_logger(name: str, log_dir: str | None = None) -> Logger:
    """
    Route loguru output to the console and to per-day log files of a batch job.

    Files land in `<log_dir>/<YYYY-MM-DD>/<name>/`, one per level, rotated at
    midnight and zipped. Trace and debug files are only written with DEBUG on.

    Parameters:
        name (str): Job name, used as the log subdirectory.
        log_dir (str | None): Root log directory, defaults to settings.LOG_DIR.
    Returns:
        Logger: The configured loguru logger, bound to the job name.
    """
    log_path = job_log_dir(name, log_dir)
    os.makedirs(log_path, exist_ok=True)

    logger.remove()  # Remove default handler

    for file_name, level, retention, debug_only in FILE_SINKS:
        if debug_only and not settings.DEBUG:
            continue
        logger.add(
            os.path.join(log_path, file_name),
            format=file_formatter,
            level=level,
            rotation="00:00",
            compression="zip",
            retention=retention,
            enqueue=True,
            backtrace=True,
            diagnose=True,
        )

    logger.add(
        sys.stderr,
        format=console_formatter,
        level="DEBUG" if settings.DEBUG else "INFO",
        enqueue=True,
        backtrace=True,
        diagnose=True,
        colorize=True,
    )

    return logger.bind(job=name)  # type: ignore
