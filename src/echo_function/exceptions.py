# src/echo_function/exceptions.py

"""
Shared custom exceptions for the Echo Function.

Centralizing exception definitions in a separate module prevents circular
import errors between other modules that need to raise or catch them.

Exception Hierarchy:
- EchoFunctionError (base)
  - RetryableError (can be retried by the host)
  - NonRetryableError (should not be retried)
    - ValidationError
      - InvalidEventError
      - InvalidInvocationDataError
    - HandlerNotFoundError
    - ConfigurationError

Failures of the diagnostic log emission never appear here: they are
absorbed inside the handlers and never reach the caller.
"""

from typing import Any, Dict, Optional


class EchoFunctionError(Exception):
    """Base exception for all Echo Function errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        correlation_id: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = dict(context) if context else {}
        self.correlation_id = correlation_id

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
            "correlation_id": self.correlation_id,
            "retryable": isinstance(self, RetryableError),
        }


class RetryableError(EchoFunctionError):
    """
    Base class for errors that can be retried.

    None of the reference handlers raise one. Host-grade handlers built on
    this contract subclass it for transient failures the host should retry.
    """
    pass


class NonRetryableError(EchoFunctionError):
    """Base class for errors that should not be retried."""
    pass


# === Validation Errors ===

class ValidationError(NonRetryableError):
    """Base class for validation errors."""
    pass


class InvalidEventError(ValidationError):
    """Raised when the host payload cannot be decoded into an Event."""

    def __init__(self, message: str, **kwargs):
        if "error_code" not in kwargs:
            kwargs["error_code"] = "INVALID_EVENT"
        super().__init__(message, **kwargs)


class InvalidInvocationDataError(ValidationError):
    """Raised when data supplied for a local invocation cannot be used."""

    def __init__(self, reason: str, **kwargs):
        message = f"Unable to parse data given in the arguments: {reason}"
        context = {"reason": reason}
        super().__init__(message, error_code="INVALID_INVOCATION_DATA", context=context, **kwargs)


# === Registry Errors ===

class HandlerNotFoundError(NonRetryableError):
    """Raised when a handler name is not registered."""

    def __init__(self, name: str, **kwargs):
        message = f"Handler not found: {name}"
        context = {"handler": name}
        super().__init__(message, error_code="HANDLER_NOT_FOUND", context=context, **kwargs)


# === Configuration Errors ===

class ConfigurationError(NonRetryableError):
    """Raised when there's an error in the application configuration."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, error_code="CONFIGURATION_ERROR", **kwargs)


# === Utility Functions ===

def is_retryable_error(error: Exception) -> bool:
    """Check if an error is retryable."""
    return isinstance(error, RetryableError)


def get_error_context(error: Exception) -> Dict[str, Any]:
    """Extract error context for logging."""
    if isinstance(error, EchoFunctionError):
        return error.to_dict()
    else:
        return {
            "error_type": error.__class__.__name__,
            "message": str(error),
            "retryable": False,  # Unknown errors default to non-retryable
        }
