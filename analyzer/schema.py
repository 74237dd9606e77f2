"""
schema.py
---------
Which columns an uploaded CSV must have.

Header names are compared lower-cased and trimmed, so "Date", " AMOUNT "
and "amount" are all the same column. Extra columns are fine.
"""

from __future__ import annotations
from typing import Iterable, Set

REQUIRED_COLUMNS = ("date", "description", "amount", "category")


def _clean(keys: Iterable[str]) -> Set[str]:
    return {str(k).strip().lower() for k in keys}


def missing_columns(header_keys: Iterable[str]) -> Set[str]:
    """Required columns that are not in header_keys."""
    present = _clean(header_keys)
    return {col for col in REQUIRED_COLUMNS if col not in present}


def has_required_columns(header_keys: Iterable[str]) -> bool:
    return not missing_columns(header_keys)
