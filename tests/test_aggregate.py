import pytest

from analyzer.aggregate import (
    category_totals,
    chart_data,
    chart_frame,
    compute_metrics,
    top_category,
    total_spent,
    transactions_frame,
)
from analyzer.models import ChartPoint, Transaction
from analyzer.sample_data import load_sample_batch


def _tx(i, amount, category, description="item"):
    return Transaction(id=i, date="2024-01-01", description=description, amount=amount, category=category)


@pytest.fixture
def small_batch():
    return [_tx(1, 10, "Food"), _tx(2, 30, "Food"), _tx(3, 20, "Rent")]


def test_worked_example(small_batch):
    m = compute_metrics(small_batch)

    assert m.total_spent == 60
    assert m.transaction_count == 3
    assert m.average_transaction == 20
    assert m.category_totals == {"Food": 40, "Rent": 20}
    assert m.top_category == "Food"
    assert m.top_category_amount == 40
    assert m.chart_data == (ChartPoint("Food", 40), ChartPoint("Rent", 20))


def test_category_order_is_first_appearance():
    txs = [_tx(1, 5, "Rent"), _tx(2, 5, "Food"), _tx(3, 5, "Rent"), _tx(4, 5, "Fun")]
    assert list(category_totals(txs)) == ["Rent", "Food", "Fun"]
    assert [p.name for p in chart_data(category_totals(txs))] == ["Rent", "Food", "Fun"]


def test_tie_keeps_first_category():
    totals = {"Rent": 50.0, "Food": 50.0, "Fun": 10.0}
    assert top_category(totals) == ("Rent", 50.0)


def test_categories_are_case_sensitive():
    totals = category_totals([_tx(1, 5, "Food"), _tx(2, 7, "food")])
    assert totals == {"Food": 5, "food": 7}


def test_all_negative_amounts_still_pick_a_top_category():
    m = compute_metrics([_tx(1, -40, "Refunds"), _tx(2, -5, "Fees")])
    assert m.top_category == "Fees"
    assert m.top_category_amount == -5
    assert m.total_spent == -45


def test_total_is_a_left_to_right_sum():
    txs = [_tx(1, 0.1, "A"), _tx(2, 0.2, "B"), _tx(3, 0.3, "C")]
    assert total_spent(txs) == (0.1 + 0.2) + 0.3


def test_empty_batch_is_refused():
    with pytest.raises(ValueError):
        compute_metrics([])
    with pytest.raises(ValueError):
        top_category({})


def test_metrics_properties_hold_for_sample_batch():
    batch = load_sample_batch()
    m = compute_metrics(batch)

    assert sum(m.category_totals.values()) == pytest.approx(m.total_spent)
    assert m.top_category_amount == m.category_totals[m.top_category]
    assert all(v <= m.top_category_amount for v in m.category_totals.values())
    assert len(m.chart_data) == len({t.category for t in batch})
    assert sum(p.value for p in m.chart_data) == pytest.approx(m.total_spent)
    assert m.transaction_count == len(batch)


def test_transactions_frame_keeps_batch_order(small_batch):
    df = transactions_frame(small_batch)
    assert list(df.columns) == ["id", "date", "description", "category", "amount"]
    assert df["id"].tolist() == [1, 2, 3]
    assert df["amount"].tolist() == [10, 30, 20]


def test_chart_frame(small_batch):
    df = chart_frame(compute_metrics(small_batch))
    assert df.to_dict(orient="records") == [
        {"name": "Food", "value": 40.0},
        {"name": "Rent", "value": 20.0},
    ]
