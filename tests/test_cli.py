"""Tests for the terminal interface and shared formatting helpers."""

import pytest

import cli
from idr import estimate_all
from stats import compute_stats


def _feed(monkeypatch, answers):
    """Answer successive input() prompts from *answers*."""
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(it))


# --- Formatting ---

def test_fmt():
    assert cli.fmt(1234.4) == "$1,234"
    assert cli.fmt(93.375, 2) == "$93.38"
    assert cli.fmt(-5) == "-$5"


def test_num_trims_trailing_zeros():
    assert cli.num(10.0) == "10"
    assert cli.num(16.666666) == "16.67"
    assert cli.num(1234.5) == "1,234.5"
    assert cli.num(-0.001) == "0"


def test_mode_text():
    assert cli.mode_text(()) == "No mode"
    assert cli.mode_text((2.0, 3.5)) == "2, 3.5"


def test_stat_rows_order():
    labels = [label for label, _ in cli.stat_rows(compute_stats([5, 10, 15]))]
    assert labels[:5] == ["Count", "Sum", "Mean", "Median", "Mode"]
    assert labels[-3:] == ["Q1", "Q3", "IQR"]


def test_idr_display_data():
    d = cli.idr_display_data(estimate_all(50_000, 45_000, 1), "PAYE")
    assert d["plan_name"] == "Pay As You Earn"
    assert d["monthly"] == pytest.approx(186.75)
    assert d["threshold"] == pytest.approx(22_590)
    assert d["rate"] == pytest.approx(10.0)
    assert d["cheapest_plan"] == "SAVE"


# --- Prompts ---

def test_prompt_float_retries_until_valid(monkeypatch, capsys):
    _feed(monkeypatch, ["abc", "-3", "$1,200"])
    assert cli._prompt_float("Balance", "$50,000", 0, currency=True) == 1200.0
    out = capsys.readouterr().out
    assert "Invalid number" in out
    assert "Must be at least 0" in out


def test_prompt_float_default(monkeypatch):
    _feed(monkeypatch, [""])
    assert cli._prompt_float("Balance", "$50,000", currency=True) == 50_000.0


def test_prompt_choice(monkeypatch):
    _feed(monkeypatch, ["maybe", "YES"])
    assert cli._prompt_choice("Save?", ["yes", "no"], "no") == "yes"


# --- Workflows ---

def test_run_statistics(monkeypatch, capsys):
    _feed(monkeypatch, ["", "1, 2, x", "1 2 2"])
    cli.run_statistics()
    out = capsys.readouterr().out
    assert "Please enter some numbers" in out
    assert "is not a number" in out
    assert "DESCRIPTIVE STATISTICS" in out
    assert "Data: 1, 2, 2" in out


def test_run_idr_defaults(monkeypatch, capsys):
    _feed(monkeypatch, ["", "", "", ""])
    cli.run_idr()
    out = capsys.readouterr().out
    assert "IDR PAYMENT ESTIMATE" in out
    assert "$93.38" in out
    assert "Lowest payment: SAVE" in out


def test_run_graphing_table(monkeypatch, capsys):
    _feed(monkeypatch, ["x^2", "", "", "", "", "no"])
    cli.run_graphing()
    out = capsys.readouterr().out
    assert "VALUE TABLE  y = x^2" in out
    assert "100" in out


def test_run_graphing_saves_png(monkeypatch, capsys, tmp_path):
    path = tmp_path / "out.png"
    _feed(monkeypatch, ["x", "", "", "", "", "yes", str(path)])
    cli.run_graphing()
    assert path.read_bytes().startswith(b"\x89PNG")
    assert f"Saved to {path}" in capsys.readouterr().out


def test_run_graphing_invalid(monkeypatch, capsys):
    _feed(monkeypatch, ["sqrt(x-1)", "", "", "", ""])
    cli.run_graphing()
    assert "Invalid function" in capsys.readouterr().out


def test_run_scientific(monkeypatch, capsys):
    _feed(monkeypatch, ["2^10", "sqrt", "deg", "x", "1/0", "2²", ""])
    cli.run_scientific()
    out = capsys.readouterr().out
    assert "= 1024" in out
    assert "= 32" in out
    assert "Angle mode: degrees" in out
    assert "can only be used in the graphing calculator" in out
    assert "has no real value" in out
    assert "Unexpected character" in out
    assert "HISTORY" in out
    assert "sqrt(1024) = 32" in out


def test_run_scientific_without_history(monkeypatch, capsys):
    _feed(monkeypatch, [""])
    cli.run_scientific()
    assert "HISTORY" not in capsys.readouterr().out


def test_run_cli_menu(monkeypatch, capsys):
    _feed(monkeypatch, ["stats", "4 4", "quit"])
    cli.run_cli()
    out = capsys.readouterr().out
    assert "Student Finance Calculators" in out
    assert "DESCRIPTIVE STATISTICS" in out
