"""Public interface for the ``sales_statistics`` package.

This module exposes the package's API functions and public models/types as the
stable import surface. There is no runtime logic here, only symbol re-exports.
"""

from .aggregate import AggregationResult, aggregate_lines, fold, new_grouping
from .api import RunResult, compute_monthly_statistics, generate_report
from .errors import (
    ConfigurationError,
    InputUnavailableError,
    SalesStatisticsError,
    SinkWriteError,
)
from .models import (
    MONTH_NAMES,
    ItemStatistics,
    MonthlyGrouping,
    MonthlyReport,
    MonthlyStatistics,
    Rejection,
    RejectionKind,
    Transaction,
)
from .parsing import parse_line
from .reduce import reduce_grouping
from .report import deliver_report, format_report

__all__ = [
    # API
    "compute_monthly_statistics",
    "generate_report",
    "RunResult",
    # Pipeline stages
    "parse_line",
    "new_grouping",
    "fold",
    "aggregate_lines",
    "AggregationResult",
    "reduce_grouping",
    "format_report",
    "deliver_report",
    # Models / types
    "MONTH_NAMES",
    "Transaction",
    "Rejection",
    "RejectionKind",
    "ItemStatistics",
    "MonthlyGrouping",
    "MonthlyReport",
    "MonthlyStatistics",
    # Errors
    "SalesStatisticsError",
    "ConfigurationError",
    "InputUnavailableError",
    "SinkWriteError",
]
