"""
ingest_csv.py
-------------
Uploaded file bytes -> TransactionBatch.

Steps:
1) check the file name ends with .csv
2) parse the bytes into rows (pandas does the tokenizing, amounts become numbers)
3) make sure the required columns are there
4) clean the rows (normalize.py) and refuse the upload if nothing is left

Every failure is raised as an IngestError subclass (see errors.py). This
module never touches the session; the caller decides what to do with the
new batch.
"""

from __future__ import annotations
import io
from typing import Any, Callable, Dict, List

import pandas as pd

from analyzer.errors import EmptyFile, InvalidFileType, MissingColumns, NoValidRows, ParseFailure
from analyzer.logging_setup import get_logger
from analyzer.models import BatchSource, TransactionBatch
from analyzer.normalize import coerce_amount, normalize_rows
from analyzer.schema import missing_columns

logger = get_logger("analyzer.ingest_csv")

CSV_EXTENSION = ".csv"

Row = Dict[str, Any]
RowParser = Callable[[bytes], List[Row]]


def parse_rows(data: bytes) -> List[Row]:
    """
    Read CSV bytes into a list of dicts keyed by lower-case, trimmed header.

    Every cell is read as text, so "NA", "null" or "100" come through
    untouched; only an empty cell is missing. The amount column is the
    one place numbers are guessed. Blank lines are skipped and an input
    with no content at all gives an empty list.
    """
    try:
        df: pd.DataFrame = pd.read_csv(
            io.BytesIO(data),
            encoding="utf-8-sig",
            dtype=str,
            keep_default_na=False,
            na_values=[""],
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError:
        return []

    df = df.rename(columns=lambda c: str(c).strip().lower())
    if "amount" in df.columns:
        df["amount"] = df["amount"].map(_amount_or_text).astype(object)
    return df.to_dict(orient="records")


def _amount_or_text(value: Any) -> Any:
    amount = coerce_amount(value)
    return value if amount is None else amount


def ingest(data: bytes, file_name: str, parse_rows: RowParser = parse_rows) -> TransactionBatch:
    """Validate and normalize an uploaded CSV. Raises IngestError on failure."""
    if not file_name.endswith(CSV_EXTENSION):
        logger.warning("rejected %s: not a .csv file", file_name)
        raise InvalidFileType(file_name)

    try:
        rows = parse_rows(data)
    except ValueError as e:  # pandas ParserError and UnicodeDecodeError included
        logger.warning("could not parse %s: %s", file_name, e)
        raise ParseFailure(str(e)) from e

    if not rows:
        logger.warning("%s has no data rows", file_name)
        raise EmptyFile()

    header_keys = set()
    for row in rows:
        header_keys.update(row.keys())

    missing = missing_columns(header_keys)
    if missing:
        logger.warning("%s is missing columns: %s", file_name, sorted(missing))
        raise MissingColumns(missing)

    result = normalize_rows(rows)
    for rejection in result.rejections:
        logger.debug("%s row %d skipped: %s", file_name, rejection.row_number, rejection.reason)

    if not result.transactions:
        logger.warning("%s: all %d rows were invalid", file_name, len(rows))
        raise NoValidRows()

    logger.info(
        "ingested %s: %d transactions (%d skipped)",
        file_name,
        len(result.transactions),
        len(result.rejections),
    )

    return TransactionBatch(
        transactions=tuple(result.transactions),
        source=BatchSource.UPLOADED,
        file_name=file_name,
        skipped=tuple(result.rejections),
    )
