import math

import pytest

from analyzer.normalize import check_row, coerce_amount, normalize, normalize_rows


def _row(**overrides):
    row = {"date": "2024-01-01", "description": "Coffee", "amount": 4.5, "category": "Food"}
    row.update(overrides)
    return row


@pytest.mark.parametrize(
    "value, expected",
    [
        (12, 12.0),
        (-3.25, -3.25),
        ("42", 42.0),
        (" -7.50 ", -7.5),
        ("+3", 3.0),
        (".5", 0.5),
        ("1e3", 1000.0),
        (0, 0.0),
    ],
)
def test_coerce_amount_accepts_numbers_and_numeric_strings(value, expected):
    assert coerce_amount(value) == expected


@pytest.mark.parametrize(
    "value", ["abc", "", "12abc", "$10", "1,000", "nan", "inf", float("nan"), math.inf, None, True]
)
def test_coerce_amount_rejects_everything_else(value):
    assert coerce_amount(value) is None


def test_valid_row_has_no_rejection_reason():
    assert check_row(_row()) is None


@pytest.mark.parametrize("field", ["date", "description", "category"])
@pytest.mark.parametrize("bad", [None, "", float("nan"), 0])
def test_missing_text_field_rejects_row(field, bad):
    assert check_row(_row(**{field: bad})) == f"missing {field}"


def test_missing_key_rejects_row():
    row = _row()
    del row["category"]
    assert check_row(row) == "missing category"


def test_bad_amount_reason_mentions_value():
    assert check_row(_row(amount="abc")) == "invalid amount 'abc'"


def test_ids_are_dense_over_kept_rows():
    rows = [_row(description="A"), _row(amount="abc"), _row(description="C", amount="10")]

    txs = normalize(rows)

    assert [t.id for t in txs] == [1, 2]
    assert [t.description for t in txs] == ["A", "C"]
    assert txs[1].amount == 10.0


def test_rejections_keep_source_row_number_and_reason():
    rows = [_row(), _row(description=""), _row(), _row(category=None)]

    result = normalize_rows(rows)

    assert len(result.transactions) == 2
    assert [(r.row_number, r.reason) for r in result.rejections] == [
        (2, "missing description"),
        (4, "missing category"),
    ]


def test_fields_are_copied_without_rewriting():
    tx = normalize([_row(description="  Corner Store ", category="food")])[0]
    assert tx.description == "  Corner Store "
    assert tx.category == "food"


def test_negative_and_zero_amounts_are_kept():
    txs = normalize([_row(amount=-20), _row(amount="0")])
    assert [t.amount for t in txs] == [-20.0, 0.0]


def test_no_rows_in_no_rows_out():
    assert normalize([]) == []
