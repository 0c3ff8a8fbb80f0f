"""Tests for the pathfolio command-line interface."""

import json

import pytest
from click.testing import CliRunner

import pathfolio.__main__ as main_module
from pathfolio.__main__ import cli


@pytest.fixture
def runner(monkeypatch):
    monkeypatch.setattr(main_module, "setup_logging", lambda log_dir: None)
    for var in ("PF_SIMULATION_DAYS", "PF_SIMULATION_NUM_PATHS", "PF_SIMULATION_SEED", "PF_FEE_RATE"):
        monkeypatch.delenv(var, raising=False)
    return CliRunner()


class TestSimulateCommand:
    def test_json_output(self, runner):
        result = runner.invoke(cli, [
            "simulate", "--price", "100", "--volatility", "0.2",
            "--days", "10", "--paths", "5", "--seed", "1", "--json",
        ])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert len(data["paths"]) == 5
        assert len(data["paths"][0]["points"]) == 11
        assert data["summary"]["avg_end_price"] > 0
        assert data["projection"] is None

    def test_seed_reproducible(self, runner):
        args = ["simulate", "-p", "100", "-s", "0.3", "-d", "5", "-n", "3", "--seed", "42", "--json"]
        first = json.loads(runner.invoke(cli, args).output)
        second = json.loads(runner.invoke(cli, args).output)
        assert first["paths"] == second["paths"]

    def test_defaults_from_settings(self, runner, monkeypatch):
        monkeypatch.setenv("PF_SIMULATION_DAYS", "7")
        monkeypatch.setenv("PF_SIMULATION_NUM_PATHS", "4")
        result = runner.invoke(cli, ["simulate", "-p", "50", "-s", "0.1", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["request"]["horizon_days"] == 7
        assert data["request"]["path_count"] == 4

    def test_text_output_with_projection(self, runner):
        result = runner.invoke(cli, [
            "simulate", "-p", "100", "-s", "0.25", "-d", "20", "-n", "30",
            "--ticker", "2330", "--avg-cost", "90", "--shares", "10",
        ])
        assert result.exit_code == 0, result.output
        assert "Average end price" in result.output
        assert "Projected P/L" in result.output

    def test_zero_paths(self, runner):
        result = runner.invoke(cli, ["simulate", "-p", "100", "-s", "0.25", "-n", "0"])
        assert result.exit_code == 0
        assert "No paths generated" in result.output

    def test_invalid_price_rejected(self, runner):
        result = runner.invoke(cli, ["simulate", "--price=0", "--volatility=0.2"])
        assert result.exit_code == 1
        assert "start_price" in result.output


class TestProfitCommand:
    def test_profit(self, runner):
        result = runner.invoke(cli, ["profit", "100", "80", "10"])
        assert result.exit_code == 0
        assert "1000.00" in result.output
        assert "+200.00 (+25.00%)" in result.output


class TestTradeCommands:
    def test_buy_with_fee(self, runner):
        result = runner.invoke(cli, ["buy", "aapl", "10", "100", "--fee", "20"])
        assert result.exit_code == 0, result.output
        assert "AAPL" in result.output
        assert "102.0000" in result.output

    def test_buy_invalid_shares(self, runner):
        result = runner.invoke(cli, ["buy", "aapl", "0", "100"])
        assert result.exit_code == 1
        assert "must be positive" in result.output

    def test_sell(self, runner):
        result = runner.invoke(cli, [
            "sell", "40", "600", "--avg-cost", "500", "--held", "100", "--fee", "24",
        ])
        assert result.exit_code == 0, result.output
        assert "+3976.00 (+19.88%)" in result.output
        assert "Remaining:   60" in result.output

    def test_sell_too_many(self, runner):
        result = runner.invoke(cli, ["sell", "200", "600", "--avg-cost", "500", "--held", "100"])
        assert result.exit_code == 1
        assert "Cannot sell" in result.output
