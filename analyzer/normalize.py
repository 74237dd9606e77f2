"""
normalize.py
------------
Turns parsed CSV rows (dicts keyed by lower-case header) into clean
Transaction objects.

Rules, per row:
- date, description and category must be present (not None/NaN, not empty)
- amount must be a finite number, either already numeric or a numeric string
- anything else drops the whole row; nothing is repaired or defaulted

Ids are handed out 1, 2, 3, ... over the rows that survive, so they are
dense even when rows in the middle are dropped.
"""

from __future__ import annotations
import math
import numbers
import re
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence

import pandas as pd

from analyzer.models import RowRejection, Transaction

TEXT_FIELDS = ("date", "description", "category")

NUMBER_PATTERN: re.Pattern[str] = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


@dataclass
class NormalizeResult:
    transactions: List[Transaction] = field(default_factory=list)
    rejections: List[RowRejection] = field(default_factory=list)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if pd.isna(value):
        return True
    return not value


def coerce_amount(value: Any) -> Optional[float]:
    """Numeric value or numeric string -> float. Returns None when it isn't one."""
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, numbers.Real):
        amount = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not NUMBER_PATTERN.match(text):
            return None
        amount = float(text)
    else:
        return None

    if not math.isfinite(amount):
        return None
    return amount


def check_row(row: Mapping[str, Any]) -> Optional[str]:
    """First reason the row can't be used, or None if it is fine."""
    for name in TEXT_FIELDS:
        if _is_missing(row.get(name)):
            return f"missing {name}"

    if coerce_amount(row.get("amount")) is None:
        return f"invalid amount {row.get('amount')!r}"

    return None


def normalize_rows(raw_rows: Sequence[Mapping[str, Any]]) -> NormalizeResult:
    """Clean rows and keep track of what was dropped and why."""
    result = NormalizeResult()

    for row_number, row in enumerate(raw_rows, start=1):
        reason = check_row(row)
        if reason is not None:
            result.rejections.append(RowRejection(row_number=row_number, reason=reason))
            continue

        result.transactions.append(
            Transaction(
                id=len(result.transactions) + 1,
                date=str(row["date"]),
                description=str(row["description"]),
                amount=coerce_amount(row["amount"]),
                category=str(row["category"]),
            )
        )

    return result


def normalize(raw_rows: Sequence[Mapping[str, Any]]) -> List[Transaction]:
    """Same as normalize_rows, but only the kept transactions."""
    return normalize_rows(raw_rows).transactions
