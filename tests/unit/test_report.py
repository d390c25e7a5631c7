"""
Report runner and settings tests.

Run with: pytest tests/unit/test_report.py -v
"""

import pytest

from shopdash import report
from shopdash.schemas import SalesReport
from shopdash.settings import Settings


def test_runner_prints_every_section(capsys):
    result = report.main(["7d"])

    out = capsys.readouterr().out
    assert isinstance(result, SalesReport)
    for header in ("[1/4] Dashboard (7d)", "[2/4]", "[3/4]", "[4/4]"):
        assert header in out
    assert "orphan_customer_orders: 0" in out


def test_runner_rejects_unknown_range():
    with pytest.raises(ValueError, match="Unknown range key"):
        report.main(["1y"])


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("SHOPDASH_CURRENCY", "USD")
    monkeypatch.setenv("SHOPDASH_LOG_LEVEL", "debug")
    settings = Settings()
    assert settings.currency == "USD"
    assert settings.log_level == "debug"
    assert settings.timezone == "Africa/Accra"
