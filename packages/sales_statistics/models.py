"""Data models and type aliases for ``sales_statistics``.

The pipeline moves through four shapes:

- :class:`Transaction`: one validated input line, consumed immediately by the
  fold and never retained.
- :class:`ItemStatistics`: running totals for one ``(month, item)`` pair.
- :data:`MonthlyGrouping`: the two-level ``month -> item -> stats`` mapping
  built by the fold.
- :class:`MonthlyReport` / :class:`MonthlyStatistics`: the derived, immutable
  per-month figures and the grand total.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, TypeAlias

# ---------------------------------------------------------------------------
# Calendar lookup
# ---------------------------------------------------------------------------

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def month_name(month_number: int) -> str:
    """Return the canonical name for ``month_number`` (1-12)."""

    if not 1 <= month_number <= 12:
        raise ValueError(f"month number out of range: {month_number}")
    return MONTH_NAMES[month_number - 1]


# ---------------------------------------------------------------------------
# Parsed input
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Transaction:
    """A single validated sales line.

    Attributes
    ----------
    month:
        Canonical month name (``"January"`` .. ``"December"``).
    item_id:
        Non-empty item identifier (SKU).
    quantity:
        Units ordered, always ``> 0``.
    revenue:
        Total revenue of the line, always ``> 0``.
    """

    month: str
    item_id: str
    quantity: int
    revenue: float


class RejectionKind(Enum):
    MALFORMED_LINE = "malformed_line"
    INVALID_DATE = "invalid_date"
    INVALID_NUMERIC = "invalid_numeric"


class Rejection(NamedTuple):
    """Why a raw line was skipped."""

    kind: RejectionKind
    reason: str
    line: str


# ---------------------------------------------------------------------------
# Fold state
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class ItemStatistics:
    cumulative_quantity: int = 0
    cumulative_revenue: float = 0.0
    transaction_count: int = 0
    min_quantity: float = field(default=math.inf)
    max_quantity: float = field(default=-math.inf)


# month name -> item id -> running statistics. Inner dicts keep encounter order.
MonthlyGrouping: TypeAlias = dict[str, dict[str, ItemStatistics]]


# ---------------------------------------------------------------------------
# Reduction output
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class MonthlyReport:
    """Derived figures for one month.

    ``None`` marks a metric that could not be computed (rendered as ``N/A``).
    The min/max/average fields all describe the most popular item.
    """

    total_monthly_revenue: float
    most_popular_item: str | None
    most_popular_item_quantity: int | None
    most_popular_item_min_orders: int | None
    most_popular_item_max_orders: int | None
    most_popular_item_avg_orders: float | None
    most_revenue_item: str | None
    most_revenue_amount: float | None


class MonthlyStatistics(NamedTuple):
    """Per-month reports in calendar order, plus the grand total."""

    reports: dict[str, MonthlyReport]
    grand_total: float


__all__ = [
    "MONTH_NAMES",
    "ItemStatistics",
    "MonthlyGrouping",
    "MonthlyReport",
    "MonthlyStatistics",
    "Rejection",
    "RejectionKind",
    "Transaction",
    "month_name",
]
