"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from typing import TypedDict

ENV_PREFIX = "FLUENT_GUARDS_"
DEFAULT_TRACE_STYLE = "bold red"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


class GuardSettings(TypedDict):
    """Settings controlling the optional failure trace."""

    trace: bool
    trace_style: str


def _parse_flag(raw: str | None) -> bool:
    if raw is None:
        return False
    return raw.strip().lower() in _TRUTHY


def load_settings() -> GuardSettings:
    """Read settings from the environment.

    Nothing is cached; every call sees the current environment.

    Returns:
        Settings with tracing off and the default style unless overridden.
    """
    trace = _parse_flag(os.getenv(f"{ENV_PREFIX}TRACE"))
    style = os.getenv(f"{ENV_PREFIX}TRACE_STYLE", DEFAULT_TRACE_STYLE).strip()
    return GuardSettings(trace=trace, trace_style=style or DEFAULT_TRACE_STYLE)


__all__ = ["DEFAULT_TRACE_STYLE", "ENV_PREFIX", "GuardSettings", "load_settings"]
