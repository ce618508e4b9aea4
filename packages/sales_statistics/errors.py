"""Exception types raised by ``sales_statistics``.

Per-line problems in the input are not exceptions: the parser returns a
:class:`~sales_statistics.models.Rejection` value instead. The classes below
cover the failures that escape a single line.
"""

from __future__ import annotations

from pathlib import Path


class SalesStatisticsError(Exception):
    """Base class for all package errors."""


class ConfigurationError(SalesStatisticsError):
    """Settings could not be resolved into a valid configuration."""


class InputUnavailableError(SalesStatisticsError):
    """The transaction log could not be opened; no aggregation took place."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot read sales log '{self.path}': {reason}")


class SinkWriteError(SalesStatisticsError):
    """The report file could not be written."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot write report '{self.path}': {reason}")


__all__ = [
    "ConfigurationError",
    "InputUnavailableError",
    "SalesStatisticsError",
    "SinkWriteError",
]
