"""Guards for values of any type."""

from __future__ import annotations

from functools import partial

from fluent_guards._types import ValueT
from fluent_guards.errors import InvalidArgumentError
from fluent_guards.framework import MessageTemplateGuard, evaluate_present
from fluent_guards.templates import NOT_NONE


def guard_not_none(value: ValueT | None, item_name: str) -> ValueT:
    """Guard that a value is not None.

    Falsy values such as ``0``, ``""`` or ``[]`` pass.

    Raises:
        InvalidArgumentError: If the value is None.
    """
    return MessageTemplateGuard(
        value,
        item_name=item_name,
        test=lambda: value is not None,
        error_factory=partial(InvalidArgumentError, item_name),
        name_template=NOT_NONE.text,
    ).guard_present()


def guard_not_none_with_message(value: ValueT | None, item_name: str, message: str) -> ValueT:
    """Same as :func:`guard_not_none`, but raises with the given message, verbatim."""
    return evaluate_present(
        value,
        item_name,
        lambda: True,
        message,
        partial(InvalidArgumentError, item_name),
    )


__all__ = ["guard_not_none", "guard_not_none_with_message"]
