"""Internal type aliases and protocols for strict typing.

These types let the comparison guards stay generic over any ordered
value without falling back to Any.
"""

from __future__ import annotations

from collections.abc import Callable, Sized
from typing import Protocol, TypeVar


class SupportsOrdering(Protocol):
    """Protocol for values that support a total order via < and >."""

    def __lt__(self, other: SupportsOrdering, /) -> bool: ...

    def __gt__(self, other: SupportsOrdering, /) -> bool: ...


OrderedT = TypeVar("OrderedT", bound=SupportsOrdering)
SizedT = TypeVar("SizedT", bound=Sized)
ValueT = TypeVar("ValueT")
ErrorT = TypeVar("ErrorT", bound=Exception)

# A pre-built message, or a producer called with the item name.
MessageSource = str | Callable[[str], str]
Test = Callable[[], bool]


__all__ = [
    "ErrorT",
    "MessageSource",
    "OrderedT",
    "SizedT",
    "SupportsOrdering",
    "Test",
    "ValueT",
]
