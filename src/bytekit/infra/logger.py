"""
Logging setup for the ``bytekit`` logger hierarchy.
"""

__all__ = ["setup_logging"]

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LOGGER_NAME = "bytekit"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(
    log_level: str = "INFO",
    log_dir: Path | None = None,
    log_filename: str = "bytekit.log",
) -> logging.Logger:
    """Configure the package logger.

    Handlers attached by a previous call are removed first, so this can be
    called again after the settings change.

    Args:
        log_level: Level name such as ``"DEBUG"`` or ``"INFO"``.
        log_dir: If given, also log to a daily-rotated file in this
            directory.
        log_filename: Name of the log file inside ``log_dir``.

    Returns:
        logging.Logger: The configured ``bytekit`` logger.

    Raises:
        ValueError: If ``log_level`` is not a known level name.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(level)
    logger.propagate = False
    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            log_dir / log_filename,
            when="midnight",
            backupCount=7,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
