"""Rendering and delivery of the monthly statistics report.

The text layout is fixed::

    Monthly statistics:
      Total sales: <grand total>
    <Month>:
      Total sales in month: <revenue>
      Most popular item: <id> (Quantity: <qty>)
      Most revenue item: <id> (Total Revenue: <revenue>)
      Min orders: <min>
      Max orders: <max>
      Average orders: <avg>

Delivery prints to the console first and then writes the file. A failed file
write is logged and reported through the return value; it never undoes the
console output.
"""

from __future__ import annotations

from os import PathLike
from pathlib import Path

from rich.console import Console

from .errors import SinkWriteError
from .logging_setup import get_logger
from .models import MonthlyStatistics

_logger = get_logger("sales_statistics.report")

NOT_AVAILABLE = "N/A"


def _money(value: float | None) -> str:
    return NOT_AVAILABLE if value is None else f"{value:.2f}"


def _count(value: int | None) -> str:
    return NOT_AVAILABLE if value is None else str(value)


def _text(value: str | None) -> str:
    return NOT_AVAILABLE if value is None else value


def format_report(statistics: MonthlyStatistics) -> str:
    """Render ``statistics`` in month order as produced by the reducer."""

    lines = [
        "Monthly statistics:",
        f"  Total sales: {_money(statistics.grand_total)}",
    ]
    for month, stats in statistics.reports.items():
        lines.extend(
            [
                f"{month}:",
                f"  Total sales in month: {_money(stats.total_monthly_revenue)}",
                f"  Most popular item: {_text(stats.most_popular_item)}"
                f" (Quantity: {_count(stats.most_popular_item_quantity)})",
                f"  Most revenue item: {_text(stats.most_revenue_item)}"
                f" (Total Revenue: {_money(stats.most_revenue_amount)})",
                f"  Min orders: {_count(stats.most_popular_item_min_orders)}",
                f"  Max orders: {_count(stats.most_popular_item_max_orders)}",
                f"  Average orders: {_money(stats.most_popular_item_avg_orders)}",
            ]
        )
    return "\n".join(lines) + "\n"


def write_report(text: str, output_path: str | PathLike[str]) -> None:
    """Write ``text`` as UTF-8, creating missing parent directories.

    Raises :class:`SinkWriteError` when the filesystem refuses the write.
    """

    path = Path(output_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise SinkWriteError(path, e.strerror or str(e)) from e


def deliver_report(
    text: str,
    output_path: str | PathLike[str],
    *,
    console: Console | None = None,
) -> bool:
    """Print ``text`` to the console, then persist it to ``output_path``.

    Returns ``True`` when the file was written and ``False`` when the write
    failed (the failure is logged at ERROR).
    """

    console = console or Console()
    # Report text is literal: item ids may contain "[...]" or ":name:" tokens.
    console.print(
        text, markup=False, emoji=False, highlight=False, soft_wrap=True, end=""
    )

    try:
        write_report(text, output_path)
    except SinkWriteError as e:
        _logger.error("Error writing to file: %s", e)
        return False

    _logger.info("Monthly statistics written to %s", output_path)
    return True


__all__ = ["NOT_AVAILABLE", "deliver_report", "format_report", "write_report"]
