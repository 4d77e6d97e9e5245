"""End-to-end tests for the click CLI (audit file redirected to tmp_path)."""

import pytest
from click.testing import CliRunner

from pizza_billing.infrastructure import bootstrap
from pizza_billing.infrastructure.cli.main import cli
from pizza_billing.infrastructure.processor.coin_flip_processor import (
    CoinFlipCreditCardProcessor,
)


def _force_outcome(monkeypatch, decline_rate, unreachable_rate):
    monkeypatch.setattr(
        bootstrap,
        "credit_card_processor",
        lambda seed=None: CoinFlipCreditCardProcessor(
            decline_rate=decline_rate, unreachable_rate=unreachable_rate
        ),
    )


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv(bootstrap.DATA_DIR_ENV, str(tmp_path))
    return CliRunner()


class TestChargeCommand:

    @pytest.mark.parametrize("wiring", ["manual", "container"])
    def test_approved_charge_prints_amount(self, runner, monkeypatch, wiring):
        _force_outcome(monkeypatch, decline_rate=0.0, unreachable_rate=0.0)
        result = runner.invoke(
            cli, ["charge", "--amount", "1000", "--card", "1234", "--wiring", wiring]
        )
        assert result.exit_code == 0, result.output
        assert "Status:  SUCCESS" in result.output
        assert "Amount:  1000" in result.output

    @pytest.mark.parametrize("wiring", ["manual", "container"])
    def test_declined_charge_prints_no_amount(self, runner, monkeypatch, wiring):
        _force_outcome(monkeypatch, decline_rate=1.0, unreachable_rate=0.0)
        result = runner.invoke(
            cli, ["charge", "--amount", "1000", "--card", "1234", "--wiring", wiring]
        )
        assert result.exit_code == 0, result.output
        assert "Status:  DECLINED" in result.output
        assert "Amount:" not in result.output

    def test_unreachable_processor_prints_system_failure(self, runner, monkeypatch):
        _force_outcome(monkeypatch, decline_rate=0.0, unreachable_rate=1.0)
        result = runner.invoke(cli, ["charge", "--amount", "1000", "--card", "1234"])
        assert result.exit_code == 0, result.output
        assert "Status:  SYSTEM_FAILURE" in result.output
        assert "Message: System Failure" in result.output
        assert "Amount:" not in result.output

    def test_charge_is_recorded(self, runner, tmp_path):
        runner.invoke(cli, ["charge", "--amount", "1000", "--card", "1234", "--seed", "3"])
        result = runner.invoke(cli, ["transactions"])
        assert result.exit_code == 0
        assert "No transactions recorded." not in result.output

    def test_negative_amount_rejected(self, runner):
        result = runner.invoke(cli, ["charge", "--amount=-5", "--card", "1234"])
        assert result.exit_code == 1
        assert "cannot be negative" in result.output

    def test_blank_card_rejected(self, runner):
        result = runner.invoke(cli, ["charge", "--amount", "5", "--card", " "])
        assert result.exit_code == 1
        assert "non-empty" in result.output


class TestTransactionsCommand:

    def test_empty_log(self, runner):
        result = runner.invoke(cli, ["transactions"])
        assert result.exit_code == 0
        assert "No transactions recorded." in result.output
