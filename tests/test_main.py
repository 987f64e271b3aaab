"""Tests for the command-line entry point."""

import pytest

from main import main


def test_main_prints_default_preset(capsys: pytest.CaptureFixture[str]) -> None:
    """The default preset is printed with its ingredient table."""
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Preset      : Endurance" in out
    assert "Maltodextrin" in out


def test_main_prints_split_bottles(capsys: pytest.CaptureFixture[str]) -> None:
    """Split presets print both bottles and the osmolality."""
    assert main(["Ultra", "Split"]) == 0
    out = capsys.readouterr().out
    assert "Split bottles:" in out
    assert "mOsm/kg" in out


def test_main_unknown_preset(capsys: pytest.CaptureFixture[str]) -> None:
    """Unknown presets return a non-zero status."""
    assert main(["Nope"]) == 1
    assert "Unknown preset" in capsys.readouterr().out


def test_main_prints_trace_electrolytes(capsys: pytest.CaptureFixture[str]) -> None:
    """Trace-electrolyte presets list potassium, calcium and magnesium."""
    assert main(["Isotonic", "Tempo"]) == 0
    out = capsys.readouterr().out
    assert "Potassium" in out
    assert "Magnesium" in out
    assert "Target      : isotonic" in out
