"""Pytest fixtures for fluent_guards tests."""

from __future__ import annotations

from typing import NamedTuple

import pytest

import fluent_guards._console as console_mod


class PrintedLine(NamedTuple):
    """One call recorded by the fake console."""

    text: str
    style: str | None
    highlight: bool
    markup: bool | None


class RecordingConsole:
    """Stand-in for rich.console.Console that records printed lines."""

    def __init__(self) -> None:
        self.lines: list[PrintedLine] = []

    def print(
        self,
        *objects: str,
        style: str | None = None,
        highlight: bool = True,
        markup: bool | None = None,
    ) -> None:
        self.lines.append(PrintedLine(" ".join(objects), style, highlight, markup))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test with tracing settings unset."""
    monkeypatch.delenv("FLUENT_GUARDS_TRACE", raising=False)
    monkeypatch.delenv("FLUENT_GUARDS_TRACE_STYLE", raising=False)


@pytest.fixture
def recording_console(monkeypatch: pytest.MonkeyPatch) -> RecordingConsole:
    """Replace the module console with a recorder."""
    console = RecordingConsole()
    monkeypatch.setattr(console_mod, "_console", console)
    return console
