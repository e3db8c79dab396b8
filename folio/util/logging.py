"""Stdlib logging setup.

Structured events and spans go through Logfire; plain ``logging`` covers the
few places that only need a line in the process log (login attempts, startup).
"""

import logging
import sys

from folio.config import Settings

# Loggers that are noisy at INFO and only useful when debugging
_QUIET_LOGGERS = ("asyncpg", "sqlalchemy.engine", "uvicorn.access", "httpx")


def _level_for(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for the current environment.

    Args:
        settings: Application settings
    """
    level = _level_for(settings)

    logging.basicConfig(
        level=level,
        format=f"%(asctime)s [{settings.environment}] %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
        stream=sys.stdout,
        force=True,
    )

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    logging.getLogger("folio").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging ready (environment=%s, level=%s)",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, e.g. ``get_logger(__name__)``."""
    return logging.getLogger(name)
