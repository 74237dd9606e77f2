"""
cli.py
------
Simple CLI for the Personal Finance Analyzer.

Commands:
    python cli.py sample
        -> print the summary of the built-in sample transactions

    python cli.py analyze path/to/transactions.csv --out outputs
        -> ingest + validate + summarize the file and save:
            outputs/transactions.csv
            outputs/category_totals.csv
"""

from __future__ import annotations
import sys
from pathlib import Path
from typing import List, Optional

import pandas as pd

from analyzer.aggregate import compute_metrics, transactions_frame
from analyzer.errors import IngestError
from analyzer.ingest_csv import ingest
from analyzer.logging_setup import configure_logging
from analyzer.models import TransactionBatch
from analyzer.sample_data import load_sample_batch
from analyzer.summarize import generate_summary


def _print_summary(batch: TransactionBatch) -> None:
    print(generate_summary(batch, compute_metrics(batch)))


def cmd_sample() -> None:
    """Summarize the built-in sample batch."""
    _print_summary(load_sample_batch())


def cmd_analyze(args: List[str]) -> None:
    """
    Ingest one CSV, print the summary and save the clean tables.
    args is the list that comes after 'analyze'
    e.g. ['data/january.csv', '--out', 'outputs']
    """
    csv_path: Optional[Path] = None
    out_dir: Path = Path("outputs")

    # tiny arg parser
    i = 0
    while i < len(args):
        if args[i] == "--out" and i + 1 < len(args):
            out_dir = Path(args[i + 1]); i += 2
        elif csv_path is None and not args[i].startswith("--"):
            csv_path = Path(args[i]); i += 1
        else:
            print(f"Unknown option: {args[i]}"); sys.exit(1)

    if csv_path is None:
        print("Usage: python cli.py analyze <file.csv> [--out DIR]")
        sys.exit(1)

    try:
        batch = ingest(csv_path.read_bytes(), csv_path.name)
    except (IngestError, OSError) as e:
        print(f"[error] {e}")
        sys.exit(1)

    metrics = compute_metrics(batch)
    print(generate_summary(batch, metrics))

    out_dir.mkdir(parents=True, exist_ok=True)
    tx_path: Path = out_dir / "transactions.csv"
    totals_path: Path = out_dir / "category_totals.csv"

    transactions_frame(batch).to_csv(tx_path, index=False)
    pd.DataFrame(
        list(metrics.category_totals.items()), columns=["category", "total"]
    ).to_csv(totals_path, index=False)

    print(f"\n[ok] wrote {len(batch)} rows to {tx_path}")
    print(f"[ok] category totals saved to {totals_path}")


def main(argv: Optional[List[str]] = None) -> None:
    """Very small CLI dispatcher."""
    argv = sys.argv[1:] if argv is None else argv
    configure_logging()

    if not argv:
        print("Usage: python cli.py <command> [options]")
        print("Commands:")
        print("  sample")
        print("  analyze <file.csv> [--out DIR]")
        sys.exit(1)

    cmd: str = argv[0]
    args: List[str] = argv[1:]

    if cmd == "sample":
        cmd_sample()
    elif cmd == "analyze":
        cmd_analyze(args)
    else:
        print(f"Unknown command: {cmd}")
        sys.exit(1)


if __name__ == "__main__":
    main()
