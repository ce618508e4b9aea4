"""Streaming aggregation of transactions into a ``month -> item`` grouping.

The grouping is a plain value owned by one run: callers create it with
:func:`new_grouping` (or let :func:`aggregate_lines` do so) and hand it to the
reducer once all lines are folded. Raw lines are never retained.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .logging_setup import get_logger
from .models import ItemStatistics, MonthlyGrouping, Rejection, Transaction
from .parsing import parse_line

_logger = get_logger("sales_statistics.aggregate")


def new_grouping() -> MonthlyGrouping:
    return {}


def fold(transaction: Transaction, grouping: MonthlyGrouping) -> None:
    """Fold one validated transaction into ``grouping`` in place.

    Folding the same transaction twice counts it twice; each input line is
    one real order.
    """

    items = grouping.setdefault(transaction.month, {})
    stats = items.get(transaction.item_id)
    if stats is None:
        stats = items[transaction.item_id] = ItemStatistics()

    stats.cumulative_quantity += transaction.quantity
    stats.cumulative_revenue += transaction.revenue
    stats.transaction_count += 1
    if transaction.quantity < stats.min_quantity:
        stats.min_quantity = transaction.quantity
    if transaction.quantity > stats.max_quantity:
        stats.max_quantity = transaction.quantity


@dataclass(slots=True)
class AggregationResult:
    grouping: MonthlyGrouping
    accepted: int = 0
    rejections: list[Rejection] = field(default_factory=list)

    @property
    def rejected(self) -> int:
        return len(self.rejections)


def aggregate_lines(
    lines: Iterable[str],
    *,
    grouping: MonthlyGrouping | None = None,
    delimiter: str = ",",
) -> AggregationResult:
    """Parse and fold every line of ``lines``.

    ``lines`` must not include the header row. Rejected lines are logged by
    the parser, collected on the result, and leave ``grouping`` untouched.
    """

    result = AggregationResult(grouping=new_grouping() if grouping is None else grouping)
    for line in lines:
        parsed = parse_line(line, delimiter=delimiter)
        if isinstance(parsed, Rejection):  # already logged by the parser
            result.rejections.append(parsed)
            continue
        fold(parsed, result.grouping)
        result.accepted += 1

    _logger.debug(
        "aggregated %d lines (%d rejected) into %d months",
        result.accepted,
        result.rejected,
        len(result.grouping),
    )
    return result


__all__ = ["AggregationResult", "aggregate_lines", "fold", "new_grouping"]
