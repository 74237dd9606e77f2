"""
session.py
----------
Holds the one batch the user is currently looking at.

- starts on the built-in sample
- a successful upload replaces the batch completely (no merging)
- a failed upload keeps whatever was shown before and stores the error text
- metrics are recomputed from the current batch every time they're read
"""

from __future__ import annotations
from typing import Optional

from analyzer.aggregate import compute_metrics
from analyzer.errors import IngestError
from analyzer.ingest_csv import RowParser, ingest, parse_rows
from analyzer.logging_setup import get_logger
from analyzer.models import MetricsBundle, TransactionBatch
from analyzer.sample_data import load_sample_batch

logger = get_logger("analyzer.session")


class AnalyzerSession:
    def __init__(self, parse_rows: RowParser = parse_rows):
        self._parse_rows = parse_rows
        self.batch: TransactionBatch = load_sample_batch()
        self.error: Optional[str] = None

    @property
    def is_sample(self) -> bool:
        return self.batch.is_sample

    @property
    def metrics(self) -> MetricsBundle:
        return compute_metrics(self.batch)

    def upload(self, data: bytes, file_name: str) -> bool:
        """Ingest a file. True if it became the current batch."""
        try:
            batch = ingest(data, file_name, parse_rows=self._parse_rows)
        except IngestError as e:
            self.error = str(e)
            logger.info("upload of %s failed, keeping %s batch", file_name, self.batch.source.value)
            return False

        self.batch = batch
        self.error = None
        return True

    def reset_to_sample(self) -> None:
        self.batch = load_sample_batch()
        self.error = None
