from conftest import make_tx
from services import net_worth_service as nws


def test_worked_example():
    ledger = [
        make_tx(2, "expense", 200000.0, "Food", "Cash", "2024-05-02"),
        make_tx(1, "income", 5000000.0, "Salary", "Checking", "2024-05-01"),
    ]
    summary = nws.account_summary(ledger)
    assert summary.balances == {
        "Checking": 5000000.0, "Savings": 0.0, "Credit": 0.0, "Cash": -200000.0,
    }
    assert summary.liquid_assets == 4800000.0
    assert summary.net_worth == 4800000.0


def test_balances_per_account(sample_ledger):
    assert nws.account_balances(sample_ledger) == {
        "Checking": 4700000.0,
        "Savings": 750000.0,
        "Credit": -150000.0,
        "Cash": -250000.0,
    }


def test_liquid_assets_exclude_credit(sample_ledger):
    balances = nws.account_balances(sample_ledger)
    assert nws.liquid_assets(balances) == 5200000.0
    assert nws.liquid_assets(balances) == (
        balances["Checking"] + balances["Savings"] + balances["Cash"]
    )


def test_net_worth_adds_credit(sample_ledger):
    balances = nws.account_balances(sample_ledger)
    assert nws.net_worth(balances) == nws.liquid_assets(balances) + balances["Credit"]
    assert nws.net_worth(balances) == 5050000.0


def test_credit_only_changes_net_worth():
    ledger = [make_tx(1, "expense", 1000.0, "Shopping", "Credit", "2024-05-01")]
    summary = nws.account_summary(ledger)
    assert summary.liquid_assets == 0.0
    assert summary.net_worth == -1000.0


def test_unknown_account_is_ignored(sample_ledger):
    before = nws.account_balances(sample_ledger)
    with_unknown = [make_tx(7, "income", 999.0, "Gift", "Wallet", "2024-06-05")] + sample_ledger
    assert nws.account_balances(with_unknown) == before
    assert "Wallet" not in nws.account_balances(with_unknown)


def test_empty_ledger():
    summary = nws.account_summary([])
    assert set(summary.balances) == {"Checking", "Savings", "Credit", "Cash"}
    assert summary.liquid_assets == 0
    assert summary.net_worth == 0
