"""Rich console wrapper for guard failure traces.

All terminal output in the package goes through this module. Output is
written to stderr and only when tracing is enabled in the settings.
"""

from __future__ import annotations

from typing import Protocol

from fluent_guards.config import load_settings


class _RichConsole(Protocol):
    """Protocol for rich.console.Console interface."""

    def print(
        self,
        *objects: str,
        style: str | None = None,
        highlight: bool = True,
        markup: bool | None = None,
    ) -> None:
        """Print styled output to console."""
        ...


def _get_console() -> _RichConsole:
    """Get a stderr rich Console instance with strict typing."""
    rich_console_mod = __import__("rich.console", fromlist=["Console"])
    console_cls = rich_console_mod.Console
    console: _RichConsole = console_cls(stderr=True)
    return console


# Module-level console instance
_console: _RichConsole = _get_console()


def log_guard_failure(kind: str, item_name: str, message: str) -> None:
    """Print one trace line for a failed guard, if tracing is enabled.

    Args:
        kind: Name of the error class about to be raised.
        item_name: Name of the guarded argument.
        message: Rendered failure message.
    """
    settings = load_settings()
    if not settings["trace"]:
        return
    _console.print(
        f"[guard] {kind} {item_name}: {message}",
        style=settings["trace_style"],
        highlight=False,
        markup=False,
    )


__all__ = ["log_guard_failure"]
