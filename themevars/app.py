"""Service bootstrap and logging setup."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from themevars.config.settings import AppSettings
from themevars.service import CssDataService

LOGGER_NAME = "themevars"


def configure_logging(settings: AppSettings) -> logging.Logger:
    """Attach a rotating file handler to the package logger once."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, settings.log_level, logging.INFO))
    if logger.handlers:
        return logger

    handler = RotatingFileHandler(
        settings.logs_dir / "themevars.log",
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def create_service(settings: AppSettings | None = None) -> CssDataService:
    """Build a service wired to persistent settings and file logging."""
    settings = settings or AppSettings()
    logger = configure_logging(settings)
    themes_dir = settings.themes_dir
    if not themes_dir.exists():
        logger.warning("themes root missing at %s", themes_dir)
    logger.info("service ready themes_dir=%s", themes_dir)
    return CssDataService(settings)
