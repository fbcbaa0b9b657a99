"""Logging setup for applications embedding dirprincipal.

Library modules only obtain named loggers (``logging.getLogger(__name__)``)
and never configure handlers.  Applications call
``Settings.configure_logging()`` (or ``setup_logging()`` directly) once at
startup.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: int | str) -> int:
    """Return the numeric logging level for *level*.

    Accepts integer constants (``logging.DEBUG``) and case-insensitive
    level names (``"debug"``).

    Raises
    ------
    ValueError
        If *level* is not a known level name.
    """
    if isinstance(level, int):
        return level
    numeric = logging.getLevelName(level.strip().upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return numeric


def setup_logging(level: int | str = logging.INFO) -> int:
    """Configure the root logger and return the numeric level applied.

    ``ldap3`` logs every protocol operation when it is enabled, so its
    logger is held at WARNING unless *level* is stricter than that.
    """
    numeric = resolve_level(level)
    logging.basicConfig(
        level=numeric,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        stream=sys.stdout,
        force=True,
    )
    logging.getLogger("ldap3").setLevel(max(numeric, logging.WARNING))
    return numeric
