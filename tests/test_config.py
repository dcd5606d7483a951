import pytest
from pydantic import ValidationError

from src.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("CURRENCY_SYMBOL", "CURRENCY_DECIMALS", "SHOW_SCHEDULE", "LOG_LEVEL"):
            monkeypatch.delenv(f"MORTGAGE_{name}", raising=False)
        s = Settings(_env_file=None)
        assert s.currency_symbol == "$"
        assert s.currency_decimals == 2
        assert s.show_schedule is True
        assert s.log_level == "WARNING"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("MORTGAGE_CURRENCY_SYMBOL", "€")
        monkeypatch.setenv("MORTGAGE_SHOW_SCHEDULE", "false")
        s = Settings(_env_file=None)
        assert s.currency_symbol == "€"
        assert s.show_schedule is False

    def test_negative_decimals_rejected(self, monkeypatch):
        monkeypatch.setenv("MORTGAGE_CURRENCY_DECIMALS", "-1")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
