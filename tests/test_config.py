"""Tests for fluent_guards.config module."""

from __future__ import annotations

import pytest

from fluent_guards.config import DEFAULT_TRACE_STYLE, load_settings


class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults(self) -> None:
        """Test tracing is off with the default style when nothing is set."""
        settings = load_settings()
        assert settings["trace"] is False
        assert settings["trace_style"] == DEFAULT_TRACE_STYLE

    def test_truthy_values_enable_trace(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test accepted spellings of true enable tracing."""
        for raw in ("1", "true", "YES", " on "):
            monkeypatch.setenv("FLUENT_GUARDS_TRACE", raw)
            assert load_settings()["trace"] is True

    def test_other_values_disable_trace(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test any other value leaves tracing off."""
        for raw in ("0", "false", "", "maybe"):
            monkeypatch.setenv("FLUENT_GUARDS_TRACE", raw)
            assert load_settings()["trace"] is False

    def test_custom_style(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the trace style is read from the environment."""
        monkeypatch.setenv("FLUENT_GUARDS_TRACE_STYLE", "yellow")
        assert load_settings()["trace_style"] == "yellow"

    def test_blank_style_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a blank style falls back to the default."""
        monkeypatch.setenv("FLUENT_GUARDS_TRACE_STYLE", "   ")
        assert load_settings()["trace_style"] == DEFAULT_TRACE_STYLE
