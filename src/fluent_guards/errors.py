"""Errors raised by guards.

Both guard error kinds derive from ValueError, so callers that only care
about "bad argument" can catch that, while callers that need to tell a
violated bound from a missing value can catch the specific class.
"""

from __future__ import annotations


class GuardError(ValueError):
    """Base class for every error a guard raises.

    Carries the offending item name alongside the rendered message. Both
    are kept in ``args`` so the error survives pickling and copying.
    """

    def __init__(self, item_name: str, message: str) -> None:
        super().__init__(item_name, message)
        self.item_name = item_name
        self.message = message

    def __str__(self) -> str:
        return f"{self.message} (Parameter '{self.item_name}')"


class ArgumentOutOfRangeError(GuardError):
    """A value violates a numeric or length bound."""


class InvalidArgumentError(GuardError):
    """A value is absent or malformed, or a guard was called with bad bounds."""


__all__ = ["ArgumentOutOfRangeError", "GuardError", "InvalidArgumentError"]
