"""
models.py
---------
The shapes that flow through the analyzer pipeline.

    raw bytes -> ingest_csv -> TransactionBatch -> aggregate -> MetricsBundle

Everything here is immutable. A batch is never edited in place; a new
upload builds a new batch and the session swaps it in.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple


@dataclass(frozen=True)
class Transaction:
    """One clean, validated row."""

    id: int
    date: str
    description: str
    amount: float
    category: str


@dataclass(frozen=True)
class RowRejection:
    """Why a source row was dropped (row_number is 1-based over data rows)."""

    row_number: int
    reason: str


class BatchSource(Enum):
    SAMPLE = "sample"
    UPLOADED = "uploaded"


@dataclass(frozen=True)
class TransactionBatch:
    """
    An ordered set of transactions plus where they came from.

    `source` tells the UI whether it is looking at the built-in sample
    or a user upload, so nobody has to compare lists to find out.
    """

    transactions: Tuple[Transaction, ...]
    source: BatchSource
    file_name: Optional[str] = None
    skipped: Tuple[RowRejection, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.transactions)

    @property
    def is_sample(self) -> bool:
        return self.source is BatchSource.SAMPLE


@dataclass(frozen=True)
class ChartPoint:
    name: str
    value: float


@dataclass(frozen=True)
class MetricsBundle:
    total_spent: float
    transaction_count: int
    average_transaction: float
    category_totals: Dict[str, float]
    top_category: str
    top_category_amount: float
    chart_data: Tuple[ChartPoint, ...]
