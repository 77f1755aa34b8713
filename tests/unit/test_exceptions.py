# tests/unit/test_exceptions.py

import json

import pytest

from echo_function.exceptions import (
    ConfigurationError,
    EchoFunctionError,
    HandlerNotFoundError,
    InvalidEventError,
    InvalidInvocationDataError,
    NonRetryableError,
    RetryableError,
    ValidationError,
    get_error_context,
    is_retryable_error,
)


class TestEchoFunctionError:
    """Test the base EchoFunctionError class."""

    def test_basic_initialization(self):
        error = EchoFunctionError("Test message")
        assert str(error) == "Test message"
        assert error.message == "Test message"
        assert error.error_code == "EchoFunctionError"
        assert error.context == {}
        assert error.correlation_id is None

    def test_context_is_copied(self):
        context = {"key": "value"}
        error = EchoFunctionError("Test message", context=context)
        context["key"] = "mutated"
        assert error.context == {"key": "value"}

    def test_to_dict(self):
        error = EchoFunctionError(
            "Test message",
            error_code="TEST_CODE",
            context={"key": "value"},
            correlation_id="test-123",
        )
        assert error.to_dict() == {
            "error_type": "EchoFunctionError",
            "error_code": "TEST_CODE",
            "message": "Test message",
            "context": {"key": "value"},
            "correlation_id": "test-123",
            "retryable": False,
        }

    def test_to_dict_is_json_serializable(self):
        error = HandlerNotFoundError("missing", correlation_id="req-1")
        assert json.loads(json.dumps(error.to_dict()))["context"] == {"handler": "missing"}


class TestSpecificErrors:
    def test_invalid_event_error(self):
        error = InvalidEventError("bad event")
        assert isinstance(error, ValidationError)
        assert isinstance(error, NonRetryableError)
        assert error.error_code == "INVALID_EVENT"

    def test_invalid_event_error_keeps_explicit_code(self):
        assert InvalidEventError("bad", error_code="CUSTOM").error_code == "CUSTOM"

    def test_invalid_invocation_data_error(self):
        error = InvalidInvocationDataError("Data path should be absolute")
        assert error.message == (
            "Unable to parse data given in the arguments: Data path should be absolute"
        )
        assert error.context == {"reason": "Data path should be absolute"}
        assert error.error_code == "INVALID_INVOCATION_DATA"

    def test_handler_not_found_error(self):
        error = HandlerNotFoundError("nope")
        assert error.message == "Handler not found: nope"
        assert error.error_code == "HANDLER_NOT_FOUND"

    def test_configuration_error(self):
        error = ConfigurationError("bad config")
        assert error.error_code == "CONFIGURATION_ERROR"
        assert isinstance(error, NonRetryableError)


class TestUtilityFunctions:
    @pytest.mark.parametrize(
        "error, expected",
        [
            (RetryableError("transient"), True),
            (InvalidEventError("bad"), False),
            (HandlerNotFoundError("x"), False),
            (ValueError("plain"), False),
        ],
    )
    def test_is_retryable_error(self, error, expected):
        assert is_retryable_error(error) is expected

    def test_host_grade_subclass_is_retryable(self):
        class UpstreamUnavailableError(RetryableError):
            pass

        error = UpstreamUnavailableError("upstream down")
        assert is_retryable_error(error) is True
        assert error.to_dict()["retryable"] is True
        assert error.error_code == "UpstreamUnavailableError"

    def test_get_error_context_for_own_errors(self):
        context = get_error_context(RetryableError("transient"))
        assert context["error_type"] == "RetryableError"
        assert context["retryable"] is True

    def test_get_error_context_for_foreign_errors(self):
        assert get_error_context(KeyError("k")) == {
            "error_type": "KeyError",
            "message": "'k'",
            "retryable": False,
        }
