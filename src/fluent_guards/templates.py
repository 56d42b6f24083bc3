"""Message templates and the assembler that renders them.

Three kinds of template are used by the guards:

- A *name template* holds the single placeholder ``{item}``, replaced with
  the item name (see :class:`ItemTemplate`).
- A *positional template* is a ``str.format`` pattern whose ``{0}`` is the
  item name (see :func:`build_message`).
- A *custom template* is an ordered run of positional segments, each bound
  to one field of a :class:`GuardContext`. Segments whose field is missing
  from the context are left out, so a partially filled context renders a
  prefix of the full message (see :class:`CustomTemplate`).

Templates are validated when they are constructed. Rendering a validated
template does not raise.
"""

from __future__ import annotations

from typing import Literal, NamedTuple, Protocol

ITEM_TOKEN = "{item}"

Field = Literal["item", "value", "minimum", "maximum", "required_length", "count"]
BoundName = Literal["minimum", "maximum", "required_length", "count"]


class Bound(NamedTuple):
    """A named comparison value, e.g. a minimum or a required length."""

    name: BoundName
    value: object


class GuardContext(NamedTuple):
    """Values available to a template when a guard fails."""

    item_name: str
    value: object = None
    has_value: bool = False
    bounds: tuple[Bound, ...] = ()

    def lookup(self, field: Field) -> tuple[bool, object]:
        """Return (present, value) for a field."""
        if field == "item":
            return True, self.item_name
        if field == "value":
            return self.has_value, self.value
        for bound in self.bounds:
            if bound.name == field:
                return True, bound.value
        return False, None


class Segment(NamedTuple):
    """One piece of a custom template, rendered with its field as ``{0}``."""

    field: Field
    text: str


class _Template(Protocol):
    def render(self, context: GuardContext) -> str: ...


def check_positional(template: str) -> str:
    """Validate that a positional template formats with a single argument.

    Raises:
        ValueError: If the template references anything but ``{0}`` or is
            otherwise malformed.
    """
    try:
        template.format("item")
    except (IndexError, KeyError, ValueError) as exc:
        raise ValueError(f"malformed positional template {template!r}: {exc}") from exc
    return template


def build_message(item_name: str, template: str | None, name_template: str | None) -> str:
    """Assemble a message from a positional template or a name template.

    A non-blank positional template always takes priority over the name
    template. With neither set, the item name alone is returned.

    Args:
        item_name: Name of the argument/parameter/state being guarded.
        template: Positional template; ``{0}`` is the item name.
        name_template: Template containing ``{item}``.

    Returns:
        The rendered message.
    """
    if template is not None and template.strip():
        return template.format(item_name)
    if name_template is not None:
        return name_template.replace(ITEM_TOKEN, item_name)
    return item_name


class CustomTemplate:
    """Template rendered from the fields present in a guard context."""

    __slots__ = ("name", "segments")

    def __init__(self, name: str, *segments: Segment) -> None:
        if not segments or segments[0].field != "item":
            raise ValueError(f"template {name!r} must start with an item segment")
        for segment in segments:
            check_positional(segment.text)
        self.name = name
        self.segments = segments

    def __repr__(self) -> str:
        return f"CustomTemplate({self.name!r})"

    def render(self, context: GuardContext) -> str:
        parts: list[str] = []
        for segment in self.segments:
            present, value = context.lookup(segment.field)
            if present:
                parts.append(segment.text.format(value))
        return "".join(parts)

    def using_item(self, item_name: str) -> MessageBuilder:
        """Start a message for the named item."""
        return MessageBuilder(self, GuardContext(item_name=item_name))


class ItemTemplate:
    """Name template: a message about an item, with no other values."""

    __slots__ = ("text",)

    def __init__(self, text: str) -> None:
        if ITEM_TOKEN not in text:
            raise ValueError(f"name template {text!r} has no {ITEM_TOKEN} placeholder")
        self.text = text

    def __repr__(self) -> str:
        return f"ItemTemplate({self.text!r})"

    def render(self, context: GuardContext) -> str:
        return build_message(context.item_name, None, self.text)

    def using_item(self, item_name: str) -> MessageBuilder:
        """Start a message for the named item."""
        return MessageBuilder(self, GuardContext(item_name=item_name))


class MessageBuilder(NamedTuple):
    """Immutable builder collecting context before rendering a template.

    Each ``with``/``using`` call returns a new builder; ``prepare`` renders.
    """

    template: _Template
    context: GuardContext

    def _bound(self, name: BoundName, value: object) -> MessageBuilder:
        bounds = self.context.bounds + (Bound(name, value),)
        return self._replace(context=self.context._replace(bounds=bounds))

    def using_item(self, item_name: str) -> MessageBuilder:
        return self._replace(context=self.context._replace(item_name=item_name))

    def using_value(self, value: object) -> MessageBuilder:
        return self._replace(context=self.context._replace(value=value, has_value=True))

    def with_minimum(self, minimum: object) -> MessageBuilder:
        return self._bound("minimum", minimum)

    def with_maximum(self, maximum: object) -> MessageBuilder:
        return self._bound("maximum", maximum)

    def requiring_length(self, required_length: int) -> MessageBuilder:
        return self._bound("required_length", required_length)

    def with_count(self, count: int) -> MessageBuilder:
        return self._bound("count", count)

    def prepare(self) -> str:
        """Render the template against the collected context."""
        return self.template.render(self.context)


# =============================================================================
# Fixed Messages
# =============================================================================

BAD_GUARD_REQUIRED_LENGTH = (
    "Bad guard usage: the required length must be greater than zero."
)
BAD_GUARD_RANGE = (
    "Bad guard usage: the minimum must be zero or more and not above the maximum."
)


# =============================================================================
# Name Templates
# =============================================================================

IS_SET = ItemTemplate("{item} must be set to a value that is not empty or whitespace.")
NOT_NONE = ItemTemplate("{item} must not be None.")
NOT_EMPTY = ItemTemplate("{item} must contain at least one element.")


# =============================================================================
# Custom Templates
# =============================================================================

BELOW_MINIMUM = CustomTemplate(
    "below-minimum",
    Segment("item", "{0} is below the minimum allowed value."),
    Segment("value", " Value: {0!r}."),
    Segment("minimum", " Minimum: {0!r}."),
)
ABOVE_MAXIMUM = CustomTemplate(
    "above-maximum",
    Segment("item", "{0} is above the maximum allowed value."),
    Segment("value", " Value: {0!r}."),
    Segment("maximum", " Maximum: {0!r}."),
)
OUT_OF_RANGE = CustomTemplate(
    "out-of-range",
    Segment("item", "{0} is outside the allowed range."),
    Segment("value", " Value: {0!r}."),
    Segment("minimum", " Minimum: {0!r}."),
    Segment("maximum", " Maximum: {0!r}."),
)
NOT_REQUIRED_SIZE = CustomTemplate(
    "not-required-size",
    Segment("item", "{0} is not the required length."),
    Segment("value", " Value: {0!r}."),
    Segment("required_length", " Required length: {0}."),
)
TEXT_SIZE_OUT_OF_RANGE = CustomTemplate(
    "text-size-out-of-range",
    Segment("item", "{0} must be set and its length must be within the allowed range."),
    Segment("value", " Value: {0!r}."),
    Segment("minimum", " Minimum length: {0}."),
    Segment("maximum", " Maximum length: {0}."),
)
COUNT_OUT_OF_RANGE = CustomTemplate(
    "count-out-of-range",
    Segment("item", "{0} does not hold an allowed number of elements."),
    Segment("count", " Count: {0}."),
    Segment("minimum", " Minimum count: {0}."),
    Segment("maximum", " Maximum count: {0}."),
)


__all__ = [
    "ABOVE_MAXIMUM",
    "BAD_GUARD_RANGE",
    "BAD_GUARD_REQUIRED_LENGTH",
    "BELOW_MINIMUM",
    "COUNT_OUT_OF_RANGE",
    "IS_SET",
    "ITEM_TOKEN",
    "NOT_EMPTY",
    "NOT_NONE",
    "NOT_REQUIRED_SIZE",
    "OUT_OF_RANGE",
    "TEXT_SIZE_OUT_OF_RANGE",
    "Bound",
    "CustomTemplate",
    "GuardContext",
    "ItemTemplate",
    "MessageBuilder",
    "Segment",
    "build_message",
    "check_positional",
]
