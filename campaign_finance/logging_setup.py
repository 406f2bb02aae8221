"""Logging for ``campaign_finance``.

Everything logs under the ``campaign_finance`` logger tree. Parsers and the
summary assembler only call :func:`get_logger`; they stay silent until the
CLI (or a host application) calls :func:`configure_logging`, which routes
row counts, header detection and the per-summary INFO line to one stream.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

LOGGER_NAME = "campaign_finance"
LEVEL_ENV_VAR = "CAMPAIGN_FINANCE_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_handler: logging.Handler | None = None


def resolve_level(level: int | str | None = None) -> int:
    """Turn ``"debug"``, ``"10"`` or ``10`` into a level number.

    ``None`` reads ``CAMPAIGN_FINANCE_LOG_LEVEL``; unknown names give INFO.
    """

    if level is None:
        level = os.environ.get(LEVEL_ENV_VAR) or logging.INFO
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name.isascii() and name.isdigit():
        return int(name)
    return logging.getLevelNamesMapping().get(name, logging.INFO)


def configure_logging(
    level: int | str | None = None, *, stream: IO[str] | None = None
) -> logging.Handler:
    """Send package logs to ``stream`` (stderr by default).

    Only the first call installs a handler; later calls return it unchanged.
    """

    global _handler
    if _handler is not None:
        return _handler

    pkg = logging.getLogger(LOGGER_NAME)
    for h in [h for h in pkg.handlers if isinstance(h, logging.NullHandler)]:
        pkg.removeHandler(h)

    _handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    pkg.addHandler(_handler)
    pkg.setLevel(resolve_level(level))
    # Report output goes to stdout; keep logs out of any root handlers.
    pkg.propagate = False
    return _handler


def reset_logging() -> None:
    """Undo :func:`configure_logging` so it can run again."""

    global _handler
    pkg = logging.getLogger(LOGGER_NAME)
    for h in list(pkg.handlers):
        pkg.removeHandler(h)
    pkg.setLevel(logging.NOTSET)
    pkg.propagate = True
    _handler = None


def get_logger(name: str) -> logging.Logger:
    pkg = logging.getLogger(LOGGER_NAME)
    if _handler is None and not pkg.handlers:
        pkg.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "reset_logging", "resolve_level"]
