"""Tests for fluent_guards.framework module."""

from __future__ import annotations

from functools import partial

import pytest

from fluent_guards.errors import ArgumentOutOfRangeError, InvalidArgumentError
from fluent_guards.framework import MessageTemplateGuard, evaluate, evaluate_present


class TestEvaluate:
    """Tests for the evaluate function."""

    def test_passing_test_returns_same_object(self) -> None:
        """Test a passing test returns the value itself."""
        value = ["a"]
        result = evaluate(value, "items", lambda: True, "never used", ValueError)
        assert result is value

    def test_failing_test_raises_built_error(self) -> None:
        """Test a failing test raises the error built from the message."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            evaluate(1, "count", lambda: False, "bad count", partial(InvalidArgumentError, "count"))
        assert exc_info.value.item_name == "count"
        assert exc_info.value.message == "bad count"

    def test_message_producer_receives_item_name(self) -> None:
        """Test a message producer is called with the item name."""
        with pytest.raises(ValueError, match="^size is wrong$"):
            evaluate(1, "size", lambda: False, lambda item: f"{item} is wrong", ValueError)

    def test_message_producer_not_called_on_success(self) -> None:
        """Test the message producer is skipped when the test passes."""
        calls: list[str] = []

        def producer(item: str) -> str:
            calls.append(item)
            return item

        evaluate(1, "size", lambda: True, producer, ValueError)
        assert calls == []

    def test_test_runs_once(self) -> None:
        """Test the predicate is evaluated exactly once."""
        calls: list[int] = []

        def test() -> bool:
            calls.append(1)
            return False

        with pytest.raises(ValueError):
            evaluate(1, "size", test, "bad", ValueError)
        assert calls == [1]


class TestEvaluatePresent:
    """Tests for the evaluate_present function."""

    def test_none_fails_even_when_test_passes(self) -> None:
        """Test None raises regardless of the predicate."""
        with pytest.raises(InvalidArgumentError, match="required"):
            evaluate_present(None, "x", lambda: True, "required", partial(InvalidArgumentError, "x"))

    def test_returns_same_object(self) -> None:
        """Test a present value that passes is returned unchanged."""
        value = {"k": 1}
        assert evaluate_present(value, "x", lambda: True, "unused", ValueError) is value

    def test_failing_test_raises(self) -> None:
        """Test a present value that fails the predicate raises."""
        with pytest.raises(ValueError, match="^x is wrong$"):
            evaluate_present(0, "x", lambda: False, lambda item: f"{item} is wrong", ValueError)


class TestMessageTemplateGuard:
    """Tests for MessageTemplateGuard."""

    def test_pass_returns_value(self) -> None:
        """Test a passing guard returns the value itself."""
        value = "abc"
        guard = MessageTemplateGuard(
            value,
            item_name="code",
            test=lambda: True,
            error_factory=ValueError,
            name_template="{item} must be set.",
        )
        assert guard.guard() is value

    def test_fail_uses_name_template(self) -> None:
        """Test a failing guard renders the name template."""
        guard = MessageTemplateGuard(
            "",
            item_name="code",
            test=lambda: False,
            error_factory=partial(InvalidArgumentError, "code"),
            name_template="{item} must be set.",
        )
        with pytest.raises(InvalidArgumentError) as exc_info:
            guard.guard()
        assert exc_info.value.message == "code must be set."

    def test_fail_prefers_positional_template(self) -> None:
        """Test the positional template wins when both templates are set."""
        guard = MessageTemplateGuard(
            5,
            item_name="level",
            test=lambda: False,
            error_factory=partial(ArgumentOutOfRangeError, "level"),
            template="positional {0}",
            name_template="named {item}",
        )
        with pytest.raises(ArgumentOutOfRangeError) as exc_info:
            guard.guard()
        assert exc_info.value.message == "positional level"

    def test_guard_present_rejects_none(self) -> None:
        """Test guard_present raises for None even when the test passes."""
        guard = MessageTemplateGuard(
            None,
            item_name="client",
            test=lambda: True,
            error_factory=partial(InvalidArgumentError, "client"),
            name_template="{item} must not be None.",
        )
        with pytest.raises(InvalidArgumentError, match="client must not be None"):
            guard.guard_present()

    def test_guard_present_returns_value(self) -> None:
        """Test guard_present returns a present value unchanged."""
        value = [1]
        guard = MessageTemplateGuard(
            value,
            item_name="items",
            test=lambda: True,
            error_factory=ValueError,
            name_template="{item} must be set.",
        )
        assert guard.guard_present() is value

    def test_requires_a_template(self) -> None:
        """Test construction without any template fails."""
        with pytest.raises(ValueError, match="template is required"):
            MessageTemplateGuard(1, item_name="x", test=lambda: True, error_factory=ValueError)

    def test_blank_template_alone_is_rejected(self) -> None:
        """Test a blank positional template does not count as a template."""
        with pytest.raises(ValueError, match="template is required"):
            MessageTemplateGuard(
                1, item_name="x", test=lambda: True, error_factory=ValueError, template="  "
            )

    def test_malformed_positional_template_fails_at_construction(self) -> None:
        """Test a malformed positional template is rejected before evaluation."""
        with pytest.raises(ValueError, match="malformed positional template"):
            MessageTemplateGuard(
                1, item_name="x", test=lambda: True, error_factory=ValueError, template="{1}"
            )

    def test_name_template_without_token_fails_at_construction(self) -> None:
        """Test a name template lacking {item} is rejected before evaluation."""
        with pytest.raises(ValueError, match="placeholder"):
            MessageTemplateGuard(
                1, item_name="x", test=lambda: True, error_factory=ValueError, name_template="bad"
            )
