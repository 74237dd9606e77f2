"""
aggregate.py
------------
Numbers for the dashboard, computed from a batch of transactions.

Each piece is its own small function so it can be reused and tested alone:
- total_spent      -> plain left-to-right sum of amounts
- category_totals  -> {category: sum}, in the order categories first appear
- top_category     -> biggest total; on a tie the earlier category wins
- chart_data       -> [(name, value), ...] ready for a bar chart

compute_metrics() glues them together. It must not be called with an empty
batch (the ingestor never produces one).
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Sequence, Tuple

import pandas as pd

from analyzer.models import ChartPoint, MetricsBundle, Transaction

TABLE_COLUMNS = ["id", "date", "description", "category", "amount"]


def total_spent(transactions: Iterable[Transaction]) -> float:
    total = 0.0
    for tx in transactions:
        total += tx.amount
    return total


def category_totals(transactions: Iterable[Transaction]) -> Dict[str, float]:
    """Sum of amounts per category. Category names are case-sensitive."""
    totals: Dict[str, float] = {}
    for tx in transactions:
        totals[tx.category] = totals.get(tx.category, 0.0) + tx.amount
    return totals


def top_category(totals: Dict[str, float]) -> Tuple[str, float]:
    """(category, amount) with the largest total. Only a strictly bigger total replaces the leader."""
    if not totals:
        raise ValueError("top_category needs at least one category")

    items = iter(totals.items())
    best_name, best_amount = next(items)
    for name, amount in items:
        if amount > best_amount:
            best_name, best_amount = name, amount
    return best_name, best_amount


def chart_data(totals: Dict[str, float]) -> Tuple[ChartPoint, ...]:
    return tuple(ChartPoint(name=name, value=value) for name, value in totals.items())


def compute_metrics(transactions: Iterable[Transaction]) -> MetricsBundle:
    """All dashboard numbers for one batch (a TransactionBatch or any sequence of Transaction)."""
    txs: Sequence[Transaction] = tuple(transactions)
    if not txs:
        raise ValueError("cannot compute metrics for an empty batch")

    total = total_spent(txs)
    totals = category_totals(txs)
    top_name, top_amount = top_category(totals)

    return MetricsBundle(
        total_spent=total,
        transaction_count=len(txs),
        average_transaction=total / len(txs),
        category_totals=totals,
        top_category=top_name,
        top_category_amount=top_amount,
        chart_data=chart_data(totals),
    )


def transactions_frame(transactions: Iterable[Transaction]) -> pd.DataFrame:
    """Transactions as a table, in batch order."""
    rows: List[Dict[str, object]] = [
        {
            "id": tx.id,
            "date": tx.date,
            "description": tx.description,
            "category": tx.category,
            "amount": tx.amount,
        }
        for tx in transactions
    ]
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)


def chart_frame(metrics: MetricsBundle) -> pd.DataFrame:
    """chart_data as a two-column DataFrame (name, value) for charting."""
    return pd.DataFrame(
        [{"name": p.name, "value": p.value} for p in metrics.chart_data],
        columns=["name", "value"],
    )
