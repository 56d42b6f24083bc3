"""Guards for sized collections (lists, tuples, dicts, sets, ...)."""

from __future__ import annotations

from functools import partial

from fluent_guards._types import MessageSource, SizedT
from fluent_guards.compare import greater_than, less_than
from fluent_guards.errors import ArgumentOutOfRangeError, InvalidArgumentError
from fluent_guards.framework import MessageTemplateGuard, evaluate, evaluate_present
from fluent_guards.strings import check_length_bounds
from fluent_guards.templates import COUNT_OUT_OF_RANGE, NOT_EMPTY


def guard_not_empty(value: SizedT | None, item_name: str) -> SizedT:
    """Guard that a collection is not None and holds at least one element.

    Args:
        value: Collection to test.
        item_name: Name of argument/parameter/state being tested.

    Returns:
        The same collection, if it is not empty.

    Raises:
        InvalidArgumentError: If the collection is None or empty.
    """
    return MessageTemplateGuard(
        value,
        item_name=item_name,
        test=lambda: value is not None and len(value) > 0,
        error_factory=partial(InvalidArgumentError, item_name),
        name_template=NOT_EMPTY.text,
    ).guard_present()


def guard_not_empty_with_message(value: SizedT | None, item_name: str, message: str) -> SizedT:
    """Same as :func:`guard_not_empty`, but raises with the given message, verbatim."""
    return evaluate_present(
        value,
        item_name,
        lambda: value is not None and len(value) > 0,
        message,
        partial(InvalidArgumentError, item_name),
    )


def _check_count(
    value: SizedT | None,
    item_name: str,
    minimum: int,
    maximum: int,
    message: MessageSource,
) -> SizedT:
    check_length_bounds(minimum, maximum)
    checked = evaluate_present(
        value,
        item_name,
        lambda: True,
        message,
        partial(InvalidArgumentError, item_name),
    )
    count = len(checked)
    return evaluate(
        checked,
        item_name,
        lambda: not less_than(count, minimum) and not greater_than(count, maximum),
        message,
        partial(ArgumentOutOfRangeError, item_name),
    )


def guard_count(value: SizedT | None, item_name: str, minimum: int, maximum: int) -> SizedT:
    """Guard that a collection holds between minimum and maximum elements, inclusive.

    Args:
        value: Collection to test.
        item_name: Name of argument/parameter/state being tested.
        minimum: Minimum number of elements.
        maximum: Maximum number of elements.

    Returns:
        The same collection, if it is valid.

    Raises:
        InvalidArgumentError: If the collection is None, or the limits are
            negative or reversed.
        ArgumentOutOfRangeError: If the element count is outside the limits.
    """

    def message(item: str) -> str:
        builder = COUNT_OUT_OF_RANGE.using_item(item)
        if value is not None:
            builder = builder.with_count(len(value))
        return builder.with_minimum(minimum).with_maximum(maximum).prepare()

    return _check_count(value, item_name, minimum, maximum, message)


def guard_count_with_message(
    value: SizedT | None, item_name: str, minimum: int, maximum: int, message: str
) -> SizedT:
    """Same as :func:`guard_count`, but raises with the given message."""
    return _check_count(value, item_name, minimum, maximum, message)


__all__ = [
    "guard_count",
    "guard_count_with_message",
    "guard_not_empty",
    "guard_not_empty_with_message",
]
