"""Fluent guard clauses for argument and state validation.

Each guard returns the value it checked, or raises a
:class:`~fluent_guards.errors.GuardError` naming the offending item.
"""

from fluent_guards.collection import (
    guard_count,
    guard_count_with_message,
    guard_not_empty,
    guard_not_empty_with_message,
)
from fluent_guards.compare import equal_to, greater_than, less_than
from fluent_guards.config import GuardSettings, load_settings
from fluent_guards.errors import ArgumentOutOfRangeError, GuardError, InvalidArgumentError
from fluent_guards.framework import MessageTemplateGuard, evaluate, evaluate_present
from fluent_guards.numeric import (
    guard_in_range,
    guard_in_range_with_message,
    guard_maximum,
    guard_maximum_with_message,
    guard_minimum,
    guard_minimum_with_message,
)
from fluent_guards.objects import guard_not_none, guard_not_none_with_message
from fluent_guards.strings import (
    guard_is_set,
    guard_is_set_with_message,
    guard_required_length,
    guard_required_length_with_message,
    guard_size,
    guard_size_with_message,
    is_set,
)
from fluent_guards.templates import CustomTemplate, GuardContext, ItemTemplate, build_message

__all__ = [
    "ArgumentOutOfRangeError",
    "CustomTemplate",
    "GuardContext",
    "GuardError",
    "GuardSettings",
    "InvalidArgumentError",
    "ItemTemplate",
    "MessageTemplateGuard",
    "build_message",
    "equal_to",
    "evaluate",
    "evaluate_present",
    "greater_than",
    "guard_count",
    "guard_count_with_message",
    "guard_in_range",
    "guard_in_range_with_message",
    "guard_is_set",
    "guard_is_set_with_message",
    "guard_maximum",
    "guard_maximum_with_message",
    "guard_minimum",
    "guard_minimum_with_message",
    "guard_not_empty",
    "guard_not_empty_with_message",
    "guard_not_none",
    "guard_not_none_with_message",
    "guard_required_length",
    "guard_required_length_with_message",
    "guard_size",
    "guard_size_with_message",
    "is_set",
    "less_than",
    "load_settings",
]
