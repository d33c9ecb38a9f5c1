"""Tests for colour-coded console logging."""

from tilepath.config import Config
from tilepath.logging_utils import (
    Color,
    colored,
    log_error,
    log_info,
    log_search,
    MARK_ERROR,
    MARK_SEARCH,
)


def test_colored_wraps_marker_and_text(monkeypatch):
    monkeypatch.delenv("TILEPATH_NO_COLOR", raising=False)
    text = colored("hello", Color.GREEN, marker="[x]", bold=True)
    assert text == f"{Color.BOLD.value}{Color.GREEN.value}[x] hello{Color.RESET.value}"


def test_no_color_env_keeps_marker(monkeypatch):
    monkeypatch.setenv("TILEPATH_NO_COLOR", "1")
    assert colored("hello", Color.RED) == "hello"
    assert colored("hello", Color.RED, marker=MARK_ERROR) == f"{MARK_ERROR} hello"


def test_log_markers(monkeypatch, capsys):
    monkeypatch.setenv("TILEPATH_NO_COLOR", "1")
    monkeypatch.setattr(Config, "LOG_LEVEL", "INFO")
    log_search("looking")
    log_error("broken")
    out = capsys.readouterr().out
    assert f"{MARK_SEARCH} looking" in out
    assert f"{MARK_ERROR} broken" in out


def test_quiet_level_keeps_errors(monkeypatch, capsys):
    monkeypatch.setenv("TILEPATH_NO_COLOR", "1")
    monkeypatch.setattr(Config, "LOG_LEVEL", "quiet")
    log_info("hidden")
    log_error("shown")
    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "shown" in out
