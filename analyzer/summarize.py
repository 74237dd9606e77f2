"""
summarize.py
------------
Builds a short, human-readable report (no AI) from a batch and its metrics.

Goal: print something like:
"Transactions: 3 | Total spent ... | Top category ... | By category ..."
"""

from __future__ import annotations
from typing import List

from analyzer.models import MetricsBundle, TransactionBatch

MAX_SKIPPED_SHOWN = 3


def _fmt_money(x: float) -> str:
    return f"${x:,.2f}"


def _source_line(batch: TransactionBatch) -> str:
    if batch.is_sample:
        return "Source: built-in sample data"
    return f"Source: {batch.file_name}"


def generate_summary(batch: TransactionBatch, metrics: MetricsBundle) -> str:
    """Create a concise, deterministic summary in plain language."""
    lines: List[str] = []

    lines.append("=== Personal Finance Summary ===")
    lines.append(_source_line(batch))
    lines.append(f"Transactions: {metrics.transaction_count}")
    lines.append(f"Total spent: {_fmt_money(metrics.total_spent)}")
    lines.append(f"Average transaction: {_fmt_money(metrics.average_transaction)}")
    lines.append(
        f"Top category: {metrics.top_category} ({_fmt_money(metrics.top_category_amount)})"
    )

    lines.append("")
    lines.append("--- By category ---")
    for point in metrics.chart_data:
        lines.append(f"  - {point.name}: {_fmt_money(point.value)}")

    if batch.skipped:
        lines.append("")
        lines.append(f"Skipped rows: {len(batch.skipped)}")
        for rejection in batch.skipped[:MAX_SKIPPED_SHOWN]:
            lines.append(f"  - row {rejection.row_number}: {rejection.reason}")

    return "\n".join(lines)
