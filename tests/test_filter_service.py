import pytest

from models.transaction_filter import TransactionFilter
from services.filter_service import filter_transactions


def ids(rows):
    return [tx.id for tx in rows]


@pytest.mark.parametrize("criteria", [
    None,
    TransactionFilter(),
    TransactionFilter(type="", category="", date_from="", date_to=""),
])
def test_empty_criteria_returns_full_ledger(sample_ledger, criteria):
    result = filter_transactions(sample_ledger, criteria)
    assert result == sample_ledger
    assert result is not sample_ledger


def test_by_type(sample_ledger):
    assert ids(filter_transactions(sample_ledger, TransactionFilter(type="income"))) == [5, 1]


def test_by_category(sample_ledger):
    assert ids(filter_transactions(sample_ledger, TransactionFilter(category="Food"))) == [3, 2]


def test_date_range_is_inclusive(sample_ledger):
    criteria = TransactionFilter(date_from="2024-05-02", date_to="2024-05-20")
    result = filter_transactions(sample_ledger, criteria)
    assert ids(result) == [4, 3, 2]
    assert all("2024-05-02" <= tx.date <= "2024-05-20" for tx in result)


def test_open_ended_ranges(sample_ledger):
    assert ids(filter_transactions(sample_ledger, TransactionFilter(date_from="2024-06-01"))) == [6, 5]
    assert ids(filter_transactions(sample_ledger, TransactionFilter(date_to="2024-05-01"))) == [1]


def test_combined_criteria(sample_ledger):
    criteria = TransactionFilter(type="expense", category="Food", date_from="2024-05-10")
    assert ids(filter_transactions(sample_ledger, criteria)) == [3]


def test_no_match(sample_ledger):
    assert filter_transactions(sample_ledger, TransactionFilter(category="Education")) == []


def test_does_not_mutate_ledger(sample_ledger):
    before = list(sample_ledger)
    filter_transactions(sample_ledger, TransactionFilter(type="expense"))
    assert sample_ledger == before


def test_from_mapping_accepts_short_keys():
    criteria = TransactionFilter.from_mapping(
        {"type": "expense", "category": "", "from": "2024-05-01", "to": "2024-05-31"}
    )
    assert criteria == TransactionFilter(
        type="expense", category=None, date_from="2024-05-01", date_to="2024-05-31"
    )


def test_from_mapping_empty():
    assert TransactionFilter.from_mapping({}).is_empty
