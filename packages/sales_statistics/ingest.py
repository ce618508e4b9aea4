"""Line source for the sales log.

Reads the file lazily so only the current line is held in memory. The first
line is a column header and is discarded unconditionally.
"""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike
from pathlib import Path
from typing import TextIO

from .errors import InputUnavailableError
from .logging_setup import get_logger

_logger = get_logger("sales_statistics.ingest")


def open_sales_log(path: str | PathLike[str]) -> TextIO:
    """Open ``path`` for reading or raise :class:`InputUnavailableError`."""

    p = Path(path)
    try:
        # newline=None folds \r\n into \n; undecodable bytes become U+FFFD so
        # a damaged line is judged by the parser instead of ending the read.
        return p.open(encoding="utf-8", errors="replace", newline=None)
    except FileNotFoundError as e:
        raise InputUnavailableError(p, "file not found") from e
    except PermissionError as e:
        raise InputUnavailableError(p, "permission denied") from e
    except IsADirectoryError as e:
        raise InputUnavailableError(p, "is a directory") from e
    except OSError as e:
        raise InputUnavailableError(p, e.strerror or str(e)) from e


def iter_lines(stream: TextIO, *, skip_header: bool = True) -> Iterator[str]:
    """Yield data lines from an open text stream, without line terminators.

    Blank lines are skipped.
    """

    first = True
    for raw in stream:
        if first:
            first = False
            if skip_header:
                continue
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        yield line


def iter_sales_lines(
    path: str | PathLike[str], *, skip_header: bool = True
) -> Iterator[str]:
    """Open ``path`` and stream its data lines.

    The file is opened eagerly, so :class:`InputUnavailableError` surfaces at
    call time rather than on the first ``next()``.
    """

    stream = open_sales_log(path)
    _logger.debug("reading sales log %s", path)
    return _closing_lines(stream, skip_header=skip_header)


def _closing_lines(stream: TextIO, *, skip_header: bool) -> Iterator[str]:
    with stream:
        yield from iter_lines(stream, skip_header=skip_header)


__all__ = ["iter_lines", "iter_sales_lines", "open_sales_log"]
