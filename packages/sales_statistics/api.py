"""Public API and orchestration for the ``sales_statistics`` package.

- :func:`compute_monthly_statistics`: lines in, reduced statistics out. No I/O.
- :func:`generate_report`: the full run over a log file, delivering the text
  report to the console and to a report file.

Each call builds its own grouping, so repeated runs in one process share no
state.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike

from rich.console import Console

from .aggregate import aggregate_lines
from .ingest import iter_sales_lines
from .logging_setup import get_logger
from .models import MonthlyStatistics, Rejection
from .reduce import reduce_grouping
from .report import deliver_report, format_report

_logger = get_logger("sales_statistics.api")


@dataclass(frozen=True, slots=True)
class RunResult:
    """Outcome of one run.

    Attributes
    ----------
    statistics:
        Per-month reports and the grand total.
    accepted:
        Number of lines folded into the statistics.
    rejections:
        One entry per skipped line, in input order.
    report_text:
        Rendered report (``None`` when no report was produced).
    written:
        ``True`` when the report file was written, ``False`` when the write
        failed, ``None`` when no write was attempted.
    """

    statistics: MonthlyStatistics
    accepted: int
    rejections: tuple[Rejection, ...]
    report_text: str | None = None
    written: bool | None = None

    @property
    def rejected(self) -> int:
        return len(self.rejections)


def compute_monthly_statistics(lines: Iterable[str], *, delimiter: str = ",") -> RunResult:
    """Parse, fold and reduce ``lines`` (header already removed)."""

    aggregation = aggregate_lines(lines, delimiter=delimiter)
    statistics = reduce_grouping(aggregation.grouping)
    return RunResult(
        statistics=statistics,
        accepted=aggregation.accepted,
        rejections=tuple(aggregation.rejections),
    )


def generate_report(
    input_path: str | PathLike[str],
    output_path: str | PathLike[str],
    *,
    delimiter: str = ",",
    console: Console | None = None,
) -> RunResult:
    """Run the whole pipeline for ``input_path`` and deliver the report.

    Raises :class:`~sales_statistics.errors.InputUnavailableError` when the
    log cannot be opened; nothing is aggregated in that case. A failed report
    write is reflected in ``RunResult.written`` rather than raised.
    """

    lines = iter_sales_lines(input_path)
    result = compute_monthly_statistics(lines, delimiter=delimiter)
    _logger.info(
        "File processing complete. accepted=%d rejected=%d",
        result.accepted,
        result.rejected,
    )

    text = format_report(result.statistics)
    written = deliver_report(text, output_path, console=console)
    return RunResult(
        statistics=result.statistics,
        accepted=result.accepted,
        rejections=result.rejections,
        report_text=text,
        written=written,
    )


__all__ = ["RunResult", "compute_monthly_statistics", "generate_report"]
