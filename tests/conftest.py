"""Shared fixtures.

Every test gets its own in-memory store and a fake millisecond clock, and the
bootstrap config file is redirected into tmp_path so nothing touches ~/.
"""
import itertools

import pytest

from database.kv_store import MemoryKeyValueStore
from database.transaction_dao import TransactionDAO
from models.transaction import Transaction
from services.ledger_service import LedgerService
import utils.app_config as app_config


@pytest.fixture(autouse=True)
def _isolate_config(tmp_path, monkeypatch):
    config_dir = tmp_path / "config"
    monkeypatch.setattr(app_config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(app_config, "CONFIG_FILE", config_dir / "config.json")


@pytest.fixture
def store():
    return MemoryKeyValueStore()


@pytest.fixture
def clock():
    """Fake ms clock: 1000, 1001, 1002, ..."""
    counter = itertools.count(1000)
    return lambda: next(counter)


@pytest.fixture
def ledger(store, clock):
    svc = LedgerService(TransactionDAO(store), clock=clock)
    svc.load()
    return svc


def make_tx(id_, type_, amount, category, account, date, description=""):
    return Transaction(
        id=id_, type=type_, amount=amount, category=category,
        account=account, description=description, date=date,
    )


@pytest.fixture
def sample_ledger():
    """Newest insertion first, as the ledger stores them."""
    return [
        make_tx(6, "expense", 150000.0, "Transport", "Credit", "2024-06-03", "Taxi"),
        make_tx(5, "income", 750000.0, "Freelance", "Savings", "2024-06-01", "Logo job"),
        make_tx(4, "expense", 300000.0, "Bills", "Checking", "2024-05-20", "Electricity"),
        make_tx(3, "expense", 50000.0, "Food", "Cash", "2024-05-15", "Lunch"),
        make_tx(2, "expense", 200000.0, "Food", "Cash", "2024-05-02", "Groceries"),
        make_tx(1, "income", 5000000.0, "Salary", "Checking", "2024-05-01", "May salary"),
    ]
