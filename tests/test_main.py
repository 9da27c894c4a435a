"""Tests for the command line entry point."""

import json

import pytest

from nudgefinder.config import Config
from nudgefinder.main import main

NOW = "2026-03-11T10:00:00+00:00"


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    monkeypatch.setattr(Config, "MAX_REMINDERS", 5)
    monkeypatch.setattr(Config, "MIN_CONFIDENCE", 0.8)
    monkeypatch.setattr(Config, "TIMEZONE", "UTC")
    monkeypatch.setattr(Config, "LOG_LEVEL", "INFO")


@pytest.fixture
def transcript(tmp_path):
    path = tmp_path / "transcript.txt"
    path.write_text("Remind me to call mom tomorrow. The weather was nice.", encoding="utf-8")
    return path


def test_main_json(transcript, capsys):
    """Test JSON output for a transcript file."""
    assert main([str(transcript), "--now", NOW, "--json"]) == 0

    [data] = json.loads(capsys.readouterr().out)
    assert data["text"] == "Call mom tomorrow"
    assert data["urgency"] == "This Week"
    assert data["time_reference"]["relative_time"] == "Tomorrow"


def test_main_text(transcript, capsys):
    """Test text output."""
    assert main([str(transcript), "--now", NOW]) == 0

    out = capsys.readouterr().out
    assert out.startswith("Reminders (1)")
    assert "Call mom tomorrow" in out


def test_main_no_reminders(tmp_path, capsys):
    """Test output when nothing is found."""
    path = tmp_path / "empty.txt"
    path.write_text("We had a lovely walk by the river.", encoding="utf-8")

    assert main([str(path), "--now", NOW, "--chunk-size", "100"]) == 0
    assert capsys.readouterr().out.strip() == "No reminders found."


def test_main_configuration_error(transcript, capsys):
    """Test that invalid limits exit with an error code."""
    assert main([str(transcript), "--min-confidence", "2"]) == 1
    assert main([str(transcript), "--timezone", "Nowhere/Special"]) == 1
    assert capsys.readouterr().out == ""
