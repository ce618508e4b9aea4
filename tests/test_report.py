from __future__ import annotations

import io
import logging
import textwrap
from pathlib import Path

import pytest
from rich.console import Console

from sales_statistics import (
    MonthlyReport,
    MonthlyStatistics,
    SinkWriteError,
    compute_monthly_statistics,
    deliver_report,
    format_report,
)
from sales_statistics.report import write_report


def _console() -> tuple[Console, io.StringIO]:
    buf = io.StringIO()
    return Console(file=buf, width=40, color_system=None), buf


def test_format_report_layout():
    stats = compute_monthly_statistics(
        [
            "2024-01-15, SKU1, 10.00, 2, 20.00",
            "2024-01-20, SKU2, 5.00, 10, 50.00",
            "2024-03-01, SKU9, 1.00, 3, 3.00",
            "2024-03-02, SKU9, 1.00, 7, 7.00",
        ]
    ).statistics

    expected = textwrap.dedent(
        """\
        Monthly statistics:
          Total sales: 80.00
        January:
          Total sales in month: 70.00
          Most popular item: SKU2 (Quantity: 10)
          Most revenue item: SKU2 (Total Revenue: 50.00)
          Min orders: 10
          Max orders: 10
          Average orders: 10.00
        March:
          Total sales in month: 10.00
          Most popular item: SKU9 (Quantity: 10)
          Most revenue item: SKU9 (Total Revenue: 10.00)
          Min orders: 3
          Max orders: 7
          Average orders: 5.00
        """
    )
    assert format_report(stats) == expected


def test_unavailable_metrics_render_as_na():
    empty = MonthlyReport(
        total_monthly_revenue=0.0,
        most_popular_item=None,
        most_popular_item_quantity=None,
        most_popular_item_min_orders=None,
        most_popular_item_max_orders=None,
        most_popular_item_avg_orders=None,
        most_revenue_item=None,
        most_revenue_amount=None,
    )
    text = format_report(MonthlyStatistics(reports={"May": empty}, grand_total=0.0))
    assert "  Most popular item: N/A (Quantity: N/A)\n" in text
    assert "  Min orders: N/A\n" in text
    assert text.endswith("  Average orders: N/A\n")


def test_no_months_renders_header_only():
    text = format_report(MonthlyStatistics(reports={}, grand_total=0.0))
    assert text == "Monthly statistics:\n  Total sales: 0.00\n"


def test_deliver_report_prints_and_writes(tmp_path: Path):
    console, buf = _console()
    out = tmp_path / "nested" / "report.txt"
    text = (
        "Monthly statistics:\n  Total sales: 1.00\n"
        "  Most popular item: [b]x[/b] (Quantity: 1)\n"
        "  Most revenue item: SKU:smile: (Total Revenue: 1.00)\n"
    )

    assert deliver_report(text, out, console=console) is True
    assert out.read_text(encoding="utf-8") == text
    # Printed verbatim: no markup, no emoji codes, no wrapping.
    assert buf.getvalue() == text


def test_deliver_report_write_failure_keeps_console_output(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
):
    console, buf = _console()
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")

    with caplog.at_level(logging.ERROR, logger="sales_statistics"):
        ok = deliver_report("report\n", blocker / "report.txt", console=console)

    assert ok is False
    assert buf.getvalue() == "report\n"
    assert any("Error writing to file" in r.getMessage() for r in caplog.records)


def test_write_report_wraps_os_errors(tmp_path: Path):
    with pytest.raises(SinkWriteError) as excinfo:
        write_report("x", tmp_path)  # a directory cannot be written as a file
    assert excinfo.value.path == tmp_path
    assert isinstance(excinfo.value.__cause__, OSError)
