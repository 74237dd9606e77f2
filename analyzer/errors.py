"""Errors raised while ingesting an uploaded CSV file."""

from __future__ import annotations
from typing import Iterable

from analyzer.schema import REQUIRED_COLUMNS


class IngestError(ValueError):
    """Base class. str(err) is the message shown to the user."""
    pass


class InvalidFileType(IngestError):
    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"Please upload a CSV file (.csv), not {file_name!r}.")


class ParseFailure(IngestError):
    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Error parsing CSV: {message}")


class EmptyFile(IngestError):
    def __init__(self):
        super().__init__("The CSV file is empty.")


class MissingColumns(IngestError):
    def __init__(self, missing: Iterable[str]):
        self.missing = frozenset(missing)
        super().__init__(
            "CSV must contain the following columns: "
            + ", ".join(REQUIRED_COLUMNS)
            + f" (missing: {', '.join(sorted(self.missing))})"
        )


class NoValidRows(IngestError):
    def __init__(self):
        super().__init__("No valid transactions found in the CSV file.")
