"""Logger wiring shared by every ``sales_statistics`` module.

Modules obtain loggers through :func:`get_logger` and never add handlers of
their own. Rejected log lines (``sales_statistics.parsing``), report sink
failures (``sales_statistics.report``) and run summaries
(``sales_statistics.api``) all flow to the single ``"sales_statistics"``
logger.

Only an entrypoint decides where that output goes: the ``sales-statistics``
CLI calls :func:`configure_logging` once at startup. Embedded in another
program, the package stays silent until the host configures logging.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

_PKG_LOGGER_NAME = "sales_statistics"
_LEVEL_ENV_VAR = "SALES_STATISTICS_LOG_LEVEL"
_CONFIGURED = False


def _parse_level(level: int | str | None) -> int:
    if level is None:
        # Env override when no explicit ``level`` is given
        level = os.getenv(_LEVEL_ENV_VAR)
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        # Numeric strings or standard level names (INFO/DEBUG/etc.).
        name = level.strip().upper()
        if name.isdigit():
            return int(name)
        numeric = getattr(logging, name, None)
        if isinstance(numeric, int):
            return numeric
    return logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Send ``sales_statistics`` log records to ``stream``; later calls are no-ops.

    Parameters
    ----------
    level:
        ``--log-level`` value from the CLI: a number or a name such as
        ``"warning"``. ``None`` means ``SALES_STATISTICS_LOG_LEVEL``, and INFO
        when that is unset or unrecognised.
    fmt:
        Record format; timestamp, logger name, level and message by default.
    stream:
        Destination of the one handler installed; ``sys.stderr`` when omitted,
        so the report on stdout stays clean.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)

    # The NullHandler from get_logger() is no longer needed.
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    resolved = _parse_level(level)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(
        logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s")
    )

    logger.setLevel(resolved)
    logger.addHandler(handler)
    # Avoid double emission via the root logger.
    logger.propagate = False

    _CONFIGURED = True


def reset_logging() -> None:
    """Undo :func:`configure_logging` (used by tests and embedding hosts)."""

    global _CONFIGURED
    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    _CONFIGURED = False


def get_logger(name: str) -> logging.Logger:
    """Logger for one module, e.g. ``get_logger("sales_statistics.reduce")``.

    Before :func:`configure_logging` runs, a ``NullHandler`` keeps rejected
    lines from being dumped by Python's last-resort handler.
    """

    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
