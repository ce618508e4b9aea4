"""Record parser: one raw log line in, a Transaction or a Rejection out.

Line layout (comma-separated, no quoting):
``date (YYYY-MM-DD), item id, unit price (unused), quantity, total revenue``

The parser never raises for bad input. Every rejection is logged exactly once
on the ``sales_statistics.parsing`` logger and returned as a value so callers
can count or inspect it.
"""

from __future__ import annotations

import math

from .logging_setup import get_logger
from .models import Rejection, RejectionKind, Transaction, month_name

_logger = get_logger("sales_statistics.parsing")

_FIELD_COUNT = 5


def _split_fields(line: str, delimiter: str) -> list[str]:
    fields = [part.strip() for part in line.split(delimiter)]
    # Short lines behave like lines with empty trailing fields.
    if len(fields) < _FIELD_COUNT:
        fields.extend([""] * (_FIELD_COUNT - len(fields)))
    return fields[:_FIELD_COUNT]


def _is_plain_number(raw: str) -> bool:
    # int()/float() also take "1_000" and non-ASCII digits; the log format does not.
    return raw.isascii() and "_" not in raw


def _parse_month(date: str) -> int | None:
    segments = date.split("-")
    if len(segments) < 2:
        return None
    token = segments[1].strip()
    if not _is_plain_number(token):
        return None
    try:
        month = int(token)
    except ValueError:
        return None
    return month if 1 <= month <= 12 else None


def _parse_quantity(raw: str) -> int | None:
    if not _is_plain_number(raw):
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _parse_revenue(raw: str) -> float | None:
    if not _is_plain_number(raw):
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _reject(kind: RejectionKind, reason: str, line: str) -> Rejection:
    _logger.warning("%s: %r", reason, line)
    return Rejection(kind=kind, reason=reason, line=line)


def parse_line(line: str, *, delimiter: str = ",") -> Transaction | Rejection:
    """Parse one raw log line.

    Returns a :class:`Transaction` for a valid line. Otherwise returns a
    :class:`Rejection` whose ``kind`` is one of:

    - ``MALFORMED_LINE``: date, item id, quantity or revenue empty after trim.
    - ``INVALID_DATE``: month segment absent, not an integer, or outside 1-12.
    - ``INVALID_NUMERIC``: quantity/revenue unparsable or not strictly positive.
    """

    date, item_id, _unit_price, quantity_raw, revenue_raw = _split_fields(line, delimiter)

    if not date or not item_id or not quantity_raw or not revenue_raw:
        return _reject(RejectionKind.MALFORMED_LINE, "Invalid input", line)

    month = _parse_month(date)
    if month is None:
        return _reject(
            RejectionKind.INVALID_DATE, "Invalid date format or month number in line", line
        )

    quantity = _parse_quantity(quantity_raw)
    revenue = _parse_revenue(revenue_raw)
    if quantity is None or revenue is None or quantity <= 0 or revenue <= 0:
        return _reject(
            RejectionKind.INVALID_NUMERIC, "Invalid total price or quantity in line", line
        )

    return Transaction(
        month=month_name(month),
        item_id=item_id,
        quantity=quantity,
        revenue=revenue,
    )


__all__ = ["parse_line"]
