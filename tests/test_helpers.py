from datetime import date

import pytest

from conftest import make_tx
from models.transaction import Transaction
from services.category_service import (
    all_categories, categories_for, is_known_account, is_valid_category,
)
from utils import app_config
from utils.currency import format_currency, format_signed, parse_amount
from utils.date_helpers import format_display_date, parse_date, same_month
from utils.logging_setup import get_logger


class TestTransactionModel:
    def test_to_dict_has_exact_fields(self):
        tx = make_tx(1, "income", 10.0, "Gift", "Cash", "2024-05-01", "hi")
        assert tx.to_dict() == {
            "id": 1, "type": "income", "amount": 10.0, "category": "Gift",
            "account": "Cash", "description": "hi", "date": "2024-05-01",
        }

    def test_from_dict_coerces_types(self):
        tx = Transaction.from_dict({
            "id": "17", "type": "expense", "amount": "2.5", "category": "Food",
            "account": "Cash", "description": None, "date": "2024-05-01",
        })
        assert tx.id == 17
        assert tx.amount == 2.5
        assert tx.description == ""

    def test_from_dict_rejects_non_mapping(self):
        with pytest.raises(TypeError):
            Transaction.from_dict([1, 2])

    def test_is_immutable(self):
        tx = make_tx(1, "income", 10.0, "Gift", "Cash", "2024-05-01")
        with pytest.raises(AttributeError):
            tx.amount = 20.0

    def test_signed_amount(self):
        assert make_tx(1, "income", 10.0, "Gift", "Cash", "2024-05-01").signed_amount == 10.0
        assert make_tx(2, "expense", 10.0, "Food", "Cash", "2024-05-01").signed_amount == -10.0


class TestCategories:
    def test_categories_for_type(self):
        assert categories_for("income") == [
            "Salary", "Freelance", "Business", "Investment", "Gift", "Other",
        ]
        assert "Education" in categories_for("expense")
        assert categories_for("transfer") == []

    def test_categories_for_returns_a_copy(self):
        categories_for("income").append("Lottery")
        assert "Lottery" not in categories_for("income")

    def test_all_categories_sorted_union(self):
        names = all_categories()
        assert names == sorted(names)
        assert names.count("Other") == 1
        assert set(names) == set(categories_for("income")) | set(categories_for("expense"))

    def test_validity_helpers(self):
        assert is_valid_category("expense", "Food")
        assert not is_valid_category("income", "Food")
        assert is_known_account("Credit")
        assert not is_known_account("Wallet")


class TestFormatting:
    @pytest.mark.parametrize("amount, expected", [
        (0, "Rp 0"),
        (5000000, "Rp 5.000.000"),
        (1234.6, "Rp 1.235"),
        (-200000, "-Rp 200.000"),
        (-0.2, "Rp 0"),
    ])
    def test_format_currency(self, amount, expected):
        assert format_currency(amount) == expected

    @pytest.mark.parametrize("amount, expected", [
        (float("nan"), "Rp nan"),
        (float("inf"), "Rp inf"),
        (float("-inf"), "Rp -inf"),
    ])
    def test_format_currency_non_finite(self, amount, expected):
        assert format_currency(amount) == expected

    def test_format_signed_non_finite(self):
        assert format_signed(float("inf"), "expense") == "-Rp inf"

    @pytest.mark.parametrize("text, expected", [
        ("5000", 5000.0),
        ("1.500", 1500.0),
        ("1.500,75", 1500.75),
        (" Rp 20.000 ", 20000.0),
        ("0", 0.0),
    ])
    def test_parse_amount(self, text, expected):
        assert parse_amount(text) == expected

    @pytest.mark.parametrize("text", [
        "", "   ", "abc", "nan", "NaN", "inf", "-inf", "infinity", "1e999", "-5",
    ])
    def test_parse_amount_rejects(self, text):
        with pytest.raises(ValueError):
            parse_amount(text)

    def test_format_signed(self):
        assert format_signed(5000, "income") == "+Rp 5.000"
        assert format_signed(5000, "expense") == "-Rp 5.000"

    def test_display_date(self):
        assert format_display_date("2024-05-01") == "1 May 2024"
        assert format_display_date("garbage") == "garbage"
        assert format_display_date("") == ""

    def test_parse_date(self):
        assert parse_date("2024-02-29") == date(2024, 2, 29)
        assert parse_date("2023-02-29") is None
        assert parse_date("") is None

    def test_same_month(self):
        assert same_month("2024-05-31", date(2024, 5, 1))
        assert not same_month("2024-06-01", date(2024, 5, 1))
        assert not same_month("bad", date(2024, 5, 1))


class TestAppConfig:
    def test_missing_config_is_empty(self):
        assert app_config.load_config() == {}
        assert app_config.get_data_folder() is None
        assert app_config.get_storage_backend() == "sqlite"

    def test_corrupt_config_is_empty(self):
        app_config.CONFIG_DIR.mkdir(parents=True)
        app_config.CONFIG_FILE.write_text("{broken", encoding="utf-8")
        assert app_config.load_config() == {}

    def test_non_dict_config_is_empty(self):
        app_config.CONFIG_DIR.mkdir(parents=True)
        app_config.CONFIG_FILE.write_text("[1]", encoding="utf-8")
        assert app_config.load_config() == {}

    def test_data_folder_round_trip(self, tmp_path):
        app_config.set_data_folder(str(tmp_path / "ledger"))
        assert app_config.get_data_folder() == str(tmp_path / "ledger")
        app_config.set_data_folder(None)
        assert app_config.get_data_folder() is None

    def test_storage_backend(self):
        app_config.save_config({"storage_backend": "json", "log_level": "DEBUG"})
        assert app_config.get_storage_backend() == "json"
        assert app_config.get_log_level() == "DEBUG"
        app_config.save_config({"storage_backend": "mongo"})
        assert app_config.get_storage_backend() == "sqlite"


def test_get_logger_namespaces_under_root():
    assert get_logger("services.x").name == "budget_tracker.services.x"
    assert get_logger("budget_tracker.y").name == "budget_tracker.y"
