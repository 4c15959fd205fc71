import logging

from .config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
ROOT_LOGGER_NAME = "scheduleday"


def _resolve_log_level(value: str) -> int:
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level_name: str | None = None) -> logging.Logger:
    """Set up process logging for the package.

    Falls back to ``LOG_LEVEL`` from settings when no level is given. Existing
    root handlers (installed by a host application) are left alone.
    """
    if level_name is None:
        level_name = get_settings().log_level
    log_level = _resolve_log_level(level_name)

    if not logging.getLogger().handlers:
        logging.basicConfig(level=log_level, format=LOG_FORMAT)
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(log_level)
    return logger
