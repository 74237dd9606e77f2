"""Built-in transactions shown before the user uploads anything."""

from __future__ import annotations

from analyzer.models import BatchSource, Transaction, TransactionBatch

SAMPLE_TRANSACTIONS = (
    Transaction(1, "2024-01-02", "Grocery Store", 85.40, "Food"),
    Transaction(2, "2024-01-03", "Monthly Rent", 1200.00, "Housing"),
    Transaction(3, "2024-01-05", "Gas Station", 45.25, "Transportation"),
    Transaction(4, "2024-01-07", "Coffee Shop", 6.75, "Food"),
    Transaction(5, "2024-01-10", "Electric Bill", 96.30, "Utilities"),
    Transaction(6, "2024-01-12", "Movie Tickets", 32.00, "Entertainment"),
    Transaction(7, "2024-01-15", "Restaurant", 58.90, "Food"),
    Transaction(8, "2024-01-18", "Internet", 60.00, "Utilities"),
    Transaction(9, "2024-01-21", "Bus Pass", 40.00, "Transportation"),
    Transaction(10, "2024-01-25", "Streaming Subscription", 15.99, "Entertainment"),
)


def load_sample_batch() -> TransactionBatch:
    return TransactionBatch(transactions=SAMPLE_TRANSACTIONS, source=BatchSource.SAMPLE)
