"""File logging setup shared by every module logger."""

from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pythonjsonlogger.json import JsonFormatter

from app.configs.settings import settings

LOG_FILE_NAME = "app.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3


def file_logger(logger: Logger) -> Logger:
    """
    Attach a rotating JSON file handler to a logger.

    Does nothing when `LOG_TO_FILE` is disabled or when the logger already
    carries a file handler, so calling it at import time is idempotent.

    Args:
        logger: Logger to extend.

    Returns:
        Logger: The same logger instance.
    """
    if not settings.LOG_TO_FILE:
        return logger

    if any(isinstance(handler, RotatingFileHandler) for handler in logger.handlers):
        return logger

    log_dir = Path(settings.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)
    return logger
