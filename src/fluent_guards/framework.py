"""Guard evaluator: the single control point every guard funnels through.

A guard runs its test once. A true test means the desired state holds and
the original value is returned, which keeps guard calls chainable. A false
test builds the message, constructs the error and raises it.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic

from fluent_guards._console import log_guard_failure
from fluent_guards._types import ErrorT, MessageSource, Test, ValueT
from fluent_guards.templates import ITEM_TOKEN, build_message, check_positional


def _fail(error_factory: Callable[[str], ErrorT], item_name: str, message: str) -> ErrorT:
    error = error_factory(message)
    log_guard_failure(type(error).__name__, item_name, message)
    return error


def _render(message: MessageSource, item_name: str) -> str:
    return message if isinstance(message, str) else message(item_name)


def evaluate(
    value: ValueT,
    item_name: str,
    test: Test,
    message: MessageSource,
    error_factory: Callable[[str], ErrorT],
) -> ValueT:
    """Run a guard test and return the value or raise.

    Args:
        value: Value under test; returned unchanged on success.
        item_name: Name of the argument/parameter/state being tested.
        test: Zero-argument predicate; True means the value is valid.
        message: Pre-built message, or a producer called with the item
            name. A producer is only called when the test fails.
        error_factory: Builds the error to raise from the message.

    Returns:
        The value, if the test passes.
    """
    if test():
        return value
    raise _fail(error_factory, item_name, _render(message, item_name))


def evaluate_present(
    value: ValueT | None,
    item_name: str,
    test: Test,
    message: MessageSource,
    error_factory: Callable[[str], ErrorT],
) -> ValueT:
    """Same as :func:`evaluate`, but None always fails.

    The returned value is typed as not None.
    """
    if value is not None and test():
        return value
    raise _fail(error_factory, item_name, _render(message, item_name))


class MessageTemplateGuard(Generic[ValueT, ErrorT]):
    """Guard whose message comes from a positional or a name template.

    If both templates are set, the positional template is used.

    Example:
        >>> MessageTemplateGuard(
        ...     "abc",
        ...     item_name="code",
        ...     test=lambda: True,
        ...     error_factory=ValueError,
        ...     name_template="{item} must be set.",
        ... ).guard()
        'abc'
    """

    __slots__ = ("_value", "_item_name", "_test", "_error_factory", "_template", "_name_template")

    def __init__(
        self,
        value: ValueT,
        *,
        item_name: str,
        test: Test,
        error_factory: Callable[[str], ErrorT],
        template: str | None = None,
        name_template: str | None = None,
    ) -> None:
        has_template = template is not None and template.strip() != ""
        if not has_template and name_template is None:
            raise ValueError("a positional template or a name template is required")
        if template is not None and has_template:
            check_positional(template)
        if not has_template and name_template is not None and ITEM_TOKEN not in name_template:
            raise ValueError(f"name template {name_template!r} has no {ITEM_TOKEN} placeholder")
        self._value = value
        self._item_name = item_name
        self._test = test
        self._error_factory = error_factory
        self._template = template
        self._name_template = name_template

    def _failure(self) -> ErrorT:
        message = build_message(self._item_name, self._template, self._name_template)
        return _fail(self._error_factory, self._item_name, message)

    def guard(self) -> ValueT:
        # Desired result is a true test.
        if not self._test():
            raise self._failure()
        return self._value

    def guard_present(self: MessageTemplateGuard[ValueT | None, ErrorT]) -> ValueT:
        """Same as :meth:`guard`, but None always fails.

        The returned value is typed as not None.
        """
        value = self._value
        if value is None or not self._test():
            raise self._failure()
        return value


__all__ = ["MessageTemplateGuard", "evaluate", "evaluate_present"]
