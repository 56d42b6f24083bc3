"""Guards for ordered values.

Defend against invalid states/parameters/arguments when the value is
numeric, or of any other type with a total order (``Decimal``, ``date``,
strings, user classes defining ``<`` and ``>``). Each guard validates that
the value does not have one particular kind of error. If it does, an
:class:`~fluent_guards.errors.ArgumentOutOfRangeError` is raised; otherwise
the value is returned, allowing for a fluent guard API.
"""

from __future__ import annotations

from functools import partial

from fluent_guards._types import MessageSource, OrderedT
from fluent_guards.compare import greater_than, less_than
from fluent_guards.errors import ArgumentOutOfRangeError
from fluent_guards.framework import evaluate
from fluent_guards.templates import ABOVE_MAXIMUM, BELOW_MINIMUM, OUT_OF_RANGE


def _check_minimum(
    value: OrderedT, item_name: str, minimum: OrderedT, message: MessageSource
) -> OrderedT:
    return evaluate(
        value,
        item_name,
        lambda: not less_than(value, minimum),
        message,
        partial(ArgumentOutOfRangeError, item_name),
    )


def _check_maximum(
    value: OrderedT, item_name: str, maximum: OrderedT, message: MessageSource
) -> OrderedT:
    return evaluate(
        value,
        item_name,
        lambda: not greater_than(value, maximum),
        message,
        partial(ArgumentOutOfRangeError, item_name),
    )


def _check_in_range(
    value: OrderedT,
    item_name: str,
    lower: OrderedT,
    upper: OrderedT,
    message: MessageSource,
) -> OrderedT:
    return evaluate(
        value,
        item_name,
        lambda: not less_than(value, lower) and not greater_than(value, upper),
        message,
        partial(ArgumentOutOfRangeError, item_name),
    )


def guard_minimum(value: OrderedT, item_name: str, minimum: OrderedT) -> OrderedT:
    """Guard that a value is equal to or above the minimum value.

    Args:
        value: Value to test.
        item_name: Name of argument/parameter/state being tested.
        minimum: Minimum acceptable value.

    Returns:
        The value, if it is valid.

    Raises:
        ArgumentOutOfRangeError: If the value is below the minimum.
    """

    def message(item: str) -> str:
        return BELOW_MINIMUM.using_item(item).using_value(value).with_minimum(minimum).prepare()

    return _check_minimum(value, item_name, minimum, message)


def guard_minimum_with_message(
    value: OrderedT, item_name: str, minimum: OrderedT, message: str
) -> OrderedT:
    """Guard that a value is equal to or above the minimum value.

    Same as :func:`guard_minimum`, but raises with the given message.
    """
    return _check_minimum(value, item_name, minimum, message)


def guard_maximum(value: OrderedT, item_name: str, maximum: OrderedT) -> OrderedT:
    """Guard that a value is equal to or below the maximum value.

    Args:
        value: Value to test.
        item_name: Name of argument/parameter/state being tested.
        maximum: Maximum acceptable value.

    Returns:
        The value, if it is valid.

    Raises:
        ArgumentOutOfRangeError: If the value is above the maximum.
    """

    def message(item: str) -> str:
        return ABOVE_MAXIMUM.using_item(item).using_value(value).with_maximum(maximum).prepare()

    return _check_maximum(value, item_name, maximum, message)


def guard_maximum_with_message(
    value: OrderedT, item_name: str, maximum: OrderedT, message: str
) -> OrderedT:
    """Same as :func:`guard_maximum`, but raises with the given message."""
    return _check_maximum(value, item_name, maximum, message)


def guard_in_range(value: OrderedT, item_name: str, lower: OrderedT, upper: OrderedT) -> OrderedT:
    """Validate that the value is within the provided limits, inclusive.

    Args:
        value: Value to test.
        item_name: Name of argument/parameter.
        lower: Lower limit of valid values.
        upper: Upper limit of valid values.

    Returns:
        The value, if it is valid.

    Raises:
        ArgumentOutOfRangeError: If the value is outside ``[lower, upper]``.
    """

    def message(item: str) -> str:
        return OUT_OF_RANGE.using_item(item).with_minimum(lower).with_maximum(upper).prepare()

    return _check_in_range(value, item_name, lower, upper, message)


def guard_in_range_with_message(
    value: OrderedT, item_name: str, lower: OrderedT, upper: OrderedT, message: str
) -> OrderedT:
    """Same as :func:`guard_in_range`, but raises with the given message."""
    return _check_in_range(value, item_name, lower, upper, message)


__all__ = [
    "guard_in_range",
    "guard_in_range_with_message",
    "guard_maximum",
    "guard_maximum_with_message",
    "guard_minimum",
    "guard_minimum_with_message",
]
