"""Tests for the exception hierarchy and error handling helpers."""

import logging
from unittest.mock import Mock

import pytest

from huepicker.exceptions import (
    ColorParseError,
    ConfigurationError,
    ConfigValidationError,
    ErrorContext,
    HuePickerError,
    InvalidColorError,
    UnresolvableColorError,
    collect_errors,
    format_error_for_display,
    handle_errors,
)


class TestHierarchy:
    """Test exception classes."""

    @pytest.mark.unit
    def test_color_errors(self):
        error = UnresolvableColorError("mauvish")
        assert isinstance(error, ColorParseError)
        assert isinstance(error, HuePickerError)
        assert str(error) == "Unknown color 'mauvish'"
        assert error.value == "mauvish"
        assert "Suggestion:" in error.get_full_message()

    @pytest.mark.unit
    def test_invalid_color_keeps_reason(self):
        error = InvalidColorError("#12", "too short")
        assert error.reason == "too short"
        assert "too short" in error.user_message
        assert "str" in error.technical_message

    @pytest.mark.unit
    def test_config_errors(self):
        error = ConfigValidationError("cache_size", 0, "too small", file_path="/tmp/c.json")
        assert isinstance(error, ConfigurationError)
        assert "/tmp/c.json" in error.recovery_hint
        assert "positive integer" in error.recovery_hint

    @pytest.mark.unit
    def test_technical_message_defaults_to_user_message(self):
        error = HuePickerError("plain")
        assert error.technical_message == "plain"
        assert error.get_full_message() == "plain"


class TestFormatErrorForDisplay:
    """Test format_error_for_display."""

    @pytest.mark.unit
    def test_custom_error(self):
        message, hint = format_error_for_display(UnresolvableColorError("x"))
        assert message == "Unknown color 'x'"
        assert "Hex" in hint

    @pytest.mark.unit
    def test_other_error(self):
        assert format_error_for_display(ValueError("bad")) == ("ValueError: bad", None)


class TestErrorCollector:
    """Test batch error collection."""

    @pytest.mark.unit
    def test_collects_custom_errors(self):
        collector = collect_errors("convert colors")

        with collector.try_operation("red"):
            pass
        with collector.try_operation("nope"):
            raise UnresolvableColorError("nope")

        assert collector.has_errors
        assert collector.error_count == 1
        assert collector.success_count == 1
        assert "Failed 1 of 2 operations" in collector.get_summary()
        assert "nope: Unknown color 'nope'" in collector.get_summary()

    @pytest.mark.unit
    def test_all_successful(self):
        collector = collect_errors("convert colors")
        with collector.try_operation("red"):
            pass
        assert collector.get_summary() == "All operations completed successfully (1 total)"

    @pytest.mark.unit
    def test_other_errors_propagate(self):
        collector = collect_errors("convert colors")
        with pytest.raises(KeyError):
            with collector.try_operation("red"):
                raise KeyError("bug")
        assert not collector.has_errors


class TestHandleErrors:
    """Test the handle_errors decorator."""

    @pytest.mark.unit
    def test_fallback_value(self):
        @handle_errors(operation_name="parse", re_raise=False, fallback_value=False)
        def parse():
            raise UnresolvableColorError("x")

        assert parse() is False

    @pytest.mark.unit
    def test_re_raise(self):
        @handle_errors(operation_name="parse")
        def parse():
            raise UnresolvableColorError("x")

        with pytest.raises(UnresolvableColorError):
            parse()

    @pytest.mark.unit
    def test_user_notification(self):
        notify = Mock()

        @handle_errors(operation_name="parse", user_notification=notify, re_raise=False)
        def parse():
            raise UnresolvableColorError("x")

        assert parse() is None
        notify.assert_called_once()
        assert "Unknown color 'x'" in notify.call_args.args[0]

    @pytest.mark.unit
    def test_unexpected_errors_always_propagate(self):
        @handle_errors(operation_name="parse", re_raise=False, fallback_value=False)
        def parse():
            raise ZeroDivisionError()

        with pytest.raises(ZeroDivisionError):
            parse()

    @pytest.mark.unit
    def test_return_value_passes_through(self):
        @handle_errors(operation_name="parse")
        def parse(value):
            return value * 2

        assert parse(21) == 42
        assert parse.__name__ == "parse"

    @pytest.mark.unit
    def test_logs_at_requested_level(self, caplog):
        @handle_errors(operation_name="parse", re_raise=False, log_level=logging.WARNING)
        def parse():
            raise UnresolvableColorError("x")

        with caplog.at_level(logging.WARNING, logger="huepicker.exceptions.handlers"):
            parse()
        assert "Failed to parse" in caplog.text


class TestErrorContext:
    """Test the ErrorContext context manager."""

    @pytest.mark.unit
    def test_success(self):
        with ErrorContext("work") as ctx:
            pass
        assert ctx.error is None

    @pytest.mark.unit
    def test_suppresses_custom_error(self):
        with ErrorContext("work", re_raise=False) as ctx:
            raise UnresolvableColorError("x")
        assert isinstance(ctx.error, UnresolvableColorError)

    @pytest.mark.unit
    def test_re_raises_by_default(self):
        with pytest.raises(UnresolvableColorError):
            with ErrorContext("work"):
                raise UnresolvableColorError("x")

    @pytest.mark.unit
    def test_never_suppresses_other_errors(self):
        with pytest.raises(ValueError):
            with ErrorContext("work", re_raise=False):
                raise ValueError("bug")
