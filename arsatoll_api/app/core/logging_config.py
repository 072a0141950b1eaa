"""
Logging configuration for the application.

``setup_logging`` attaches a console handler, and a file handler when
``settings.log_file`` is set, to the ``arsatoll_api`` package logger.
Records still propagate to the root logger, so uvicorn or a test
runner can capture them too.  Calling it again (for instance from a
second ``create_app``) replaces the handlers installed by the previous
call instead of stacking duplicates.
"""

import logging
from pathlib import Path
from typing import List

from .config import Settings

PACKAGE_LOGGER = "arsatoll_api"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_handlers(app_settings: Settings) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if app_settings.log_file:
        log_path = Path(app_settings.log_file).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.set_name(PACKAGE_LOGGER)
    return handlers


def setup_logging(app_settings: Settings) -> logging.Logger:
    """Configure the package logger from ``app_settings``.

    The level comes from ``log_level`` (case insensitive, ``INFO`` when
    unknown) and is forced to ``DEBUG`` when ``debug`` is on, so that the
    per-request ``REST request to ...`` lines become visible.

    Returns
    -------
    logging.Logger
        The configured ``arsatoll_api`` logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        if handler.get_name() == PACKAGE_LOGGER:
            logger.removeHandler(handler)
            handler.close()

    level = logging.DEBUG if app_settings.debug else getattr(logging, app_settings.log_level.upper(), logging.INFO)
    logger.setLevel(level)
    for handler in _build_handlers(app_settings):
        logger.addHandler(handler)
    return logger
