"""Shared helpers for building CSV uploads in tests."""

from __future__ import annotations
import textwrap

import pytest


def make_csv(text: str) -> bytes:
    return textwrap.dedent(text).lstrip("\n").encode("utf-8")


@pytest.fixture
def good_csv() -> bytes:
    return make_csv(
        """
        Date,Description,Amount,Category
        2024-02-01,Groceries,54.20,Food
        2024-02-02,Rent,900,Housing
        2024-02-03,Lunch,12.30,Food
        """
    )
