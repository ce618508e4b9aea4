"""One-shot reduction of a completed grouping into per-month reports.

:func:`reduce_grouping` is pure: it reads the grouping without mutating it and
returns the same :class:`~sales_statistics.models.MonthlyStatistics` for the
same input.

Ordering
--------
- Months are visited in calendar order (January first). Months missing from
  the grouping are skipped.
- Items within a month are visited in encounter order, so when two items tie
  on quantity (or revenue) the one folded first is reported.
"""

from __future__ import annotations

import math
from collections.abc import Mapping

from .models import (
    MONTH_NAMES,
    ItemStatistics,
    MonthlyGrouping,
    MonthlyReport,
    MonthlyStatistics,
)

_NOT_AVAILABLE = MonthlyReport(
    total_monthly_revenue=0.0,
    most_popular_item=None,
    most_popular_item_quantity=None,
    most_popular_item_min_orders=None,
    most_popular_item_max_orders=None,
    most_popular_item_avg_orders=None,
    most_revenue_item=None,
    most_revenue_amount=None,
)


def _ordered_months(grouping: MonthlyGrouping) -> list[str]:
    known = [name for name in MONTH_NAMES if name in grouping]
    # Keys outside the calendar table only appear when callers build the
    # grouping by hand; keep them after the calendar months in encounter order.
    extra = [name for name in grouping if name not in MONTH_NAMES]
    return known + extra


def reduce_month(items: Mapping[str, ItemStatistics]) -> MonthlyReport:
    """Derive one month's report from its item statistics."""

    report, _ = _reduce_month(items, 0.0)
    return report


def _reduce_month(
    items: Mapping[str, ItemStatistics], grand_total: float
) -> tuple[MonthlyReport, float]:
    if not items:
        return _NOT_AVAILABLE, grand_total

    entries = iter(items.items())
    # Both trackers start at the first item; later items must beat it.
    first_id, first = next(entries)
    total = first.cumulative_revenue
    grand_total += first.cumulative_revenue
    popular_id, popular = first_id, first
    revenue_id, revenue_best = first_id, first

    for item_id, stats in entries:
        total += stats.cumulative_revenue
        grand_total += stats.cumulative_revenue
        # Strict comparisons: the first item seen keeps a tie.
        if stats.cumulative_quantity > popular.cumulative_quantity:
            popular_id, popular = item_id, stats
        if stats.cumulative_revenue > revenue_best.cumulative_revenue:
            revenue_id, revenue_best = item_id, stats

    avg: float | None = None
    if popular.transaction_count:
        avg = round(popular.cumulative_quantity / popular.transaction_count, 2)

    report = MonthlyReport(
        total_monthly_revenue=total,
        most_popular_item=popular_id,
        most_popular_item_quantity=popular.cumulative_quantity,
        most_popular_item_min_orders=_bound(popular.min_quantity),
        most_popular_item_max_orders=_bound(popular.max_quantity),
        most_popular_item_avg_orders=avg,
        most_revenue_item=revenue_id,
        most_revenue_amount=revenue_best.cumulative_revenue,
    )
    return report, grand_total


def _bound(value: float) -> int | None:
    # Sentinels survive only for an item that was never folded.
    if math.isinf(value):
        return None
    return int(value)


def reduce_grouping(grouping: MonthlyGrouping) -> MonthlyStatistics:
    """Reduce ``grouping`` into per-month reports and the grand total."""

    reports: dict[str, MonthlyReport] = {}
    grand_total = 0.0
    for month in _ordered_months(grouping):
        reports[month], grand_total = _reduce_month(grouping[month], grand_total)
    return MonthlyStatistics(reports=reports, grand_total=grand_total)


__all__ = ["reduce_grouping", "reduce_month"]
