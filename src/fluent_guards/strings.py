"""Guards for text values.

A string is *set* when it is not None and holds at least one character
that is not whitespace.
"""

from __future__ import annotations

from functools import partial

from fluent_guards._types import MessageSource
from fluent_guards.compare import greater_than, less_than
from fluent_guards.errors import ArgumentOutOfRangeError, InvalidArgumentError
from fluent_guards.framework import MessageTemplateGuard, evaluate, evaluate_present
from fluent_guards.templates import (
    BAD_GUARD_RANGE,
    BAD_GUARD_REQUIRED_LENGTH,
    IS_SET,
    NOT_REQUIRED_SIZE,
    TEXT_SIZE_OUT_OF_RANGE,
)


def is_set(value: str | None) -> bool:
    """Return True if the value is not None, empty or whitespace only."""
    return value is not None and value.strip() != ""


def guard_is_set(value: str | None, item_name: str) -> str:
    """Guard that a string is set: not None, empty or whitespace.

    Args:
        value: Value to test.
        item_name: Name of argument/parameter/state being tested.

    Returns:
        The same string object, if it is set.

    Raises:
        InvalidArgumentError: If the string is not set.
    """
    return MessageTemplateGuard(
        value,
        item_name=item_name,
        test=lambda: is_set(value),
        error_factory=partial(InvalidArgumentError, item_name),
        name_template=IS_SET.text,
    ).guard_present()


def guard_is_set_with_message(value: str | None, item_name: str, message: str) -> str:
    """Same as :func:`guard_is_set`, but raises with the given message.

    The message is used verbatim, even when blank.
    """
    return evaluate_present(
        value,
        item_name,
        lambda: is_set(value),
        message,
        partial(InvalidArgumentError, item_name),
    )


def _check_required_length(
    value: str | None, item_name: str, required_length: int, message: MessageSource
) -> str:
    evaluate(
        required_length,
        "required_length",
        lambda: required_length > 0,
        BAD_GUARD_REQUIRED_LENGTH,
        partial(InvalidArgumentError, "required_length"),
    )
    return evaluate_present(
        value,
        item_name,
        lambda: value is not None and len(value) == required_length,
        message,
        partial(ArgumentOutOfRangeError, item_name),
    )


def guard_required_length(value: str | None, item_name: str, required_length: int) -> str:
    """Guard that a string has exactly the required length.

    Args:
        value: Value to test.
        item_name: Name of argument/parameter/state being tested.
        required_length: Required number of characters. Must be above zero.

    Returns:
        The value, if it has the required length.

    Raises:
        InvalidArgumentError: If ``required_length`` is zero or less, whatever
            the value.
        ArgumentOutOfRangeError: If the value is None or of another length.
    """

    def message(item: str) -> str:
        return (
            NOT_REQUIRED_SIZE.using_item(item)
            .using_value(value)
            .requiring_length(required_length)
            .prepare()
        )

    return _check_required_length(value, item_name, required_length, message)


def guard_required_length_with_message(
    value: str | None, item_name: str, required_length: int, message: str
) -> str:
    """Same as :func:`guard_required_length`, but raises with the given message."""
    return _check_required_length(value, item_name, required_length, message)


def check_length_bounds(minimum: int, maximum: int) -> None:
    """Raise InvalidArgumentError if length limits are negative or reversed.

    A negative minimum is reported against ``minimum``; a maximum below the
    minimum (including a negative maximum) against ``maximum``.
    """
    evaluate(
        minimum,
        "minimum",
        lambda: not less_than(minimum, 0),
        BAD_GUARD_RANGE,
        partial(InvalidArgumentError, "minimum"),
    )
    evaluate(
        maximum,
        "maximum",
        lambda: not less_than(maximum, minimum),
        BAD_GUARD_RANGE,
        partial(InvalidArgumentError, "maximum"),
    )


def _check_size(
    value: str | None, item_name: str, minimum: int, maximum: int, message: MessageSource
) -> str:
    check_length_bounds(minimum, maximum)
    checked = evaluate_present(
        value,
        item_name,
        lambda: is_set(value),
        message,
        partial(InvalidArgumentError, item_name),
    )
    length = len(checked)
    return evaluate(
        checked,
        item_name,
        lambda: not less_than(length, minimum) and not greater_than(length, maximum),
        message,
        partial(ArgumentOutOfRangeError, item_name),
    )


def guard_size(value: str | None, item_name: str, minimum: int, maximum: int) -> str:
    """Guard that a string is set and its length is within the limits, inclusive.

    Presence is checked first: a string that is not set always fails, even
    when an empty string would satisfy the limits.

    Args:
        value: Value to test.
        item_name: Name of argument/parameter/state being tested.
        minimum: Minimum number of characters.
        maximum: Maximum number of characters.

    Returns:
        The value, if it is valid.

    Raises:
        InvalidArgumentError: If the string is not set, or the limits are
            negative or reversed.
        ArgumentOutOfRangeError: If the length is outside the limits.
    """

    def message(item: str) -> str:
        return (
            TEXT_SIZE_OUT_OF_RANGE.using_item(item)
            .using_value(value)
            .with_minimum(minimum)
            .with_maximum(maximum)
            .prepare()
        )

    return _check_size(value, item_name, minimum, maximum, message)


def guard_size_with_message(
    value: str | None, item_name: str, minimum: int, maximum: int, message: str
) -> str:
    """Same as :func:`guard_size`, but raises with the given message."""
    return _check_size(value, item_name, minimum, maximum, message)


__all__ = [
    "check_length_bounds",
    "guard_is_set",
    "guard_is_set_with_message",
    "guard_required_length",
    "guard_required_length_with_message",
    "guard_size",
    "guard_size_with_message",
    "is_set",
]
