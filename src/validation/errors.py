"""
Error taxonomy for the input validation toolkit.

This module provides the error kinds reported by the validation core and a
structured exception hierarchy for logging, dialogs and cancellation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    """Reason a candidate string was rejected."""

    PARSE_FAILURE = "parse_failure"  # not convertible to the requested numeric type
    RANGE_FAILURE = "range_failure"  # convertible, but outside the inclusive bounds
    PATTERN_FAILURE = "pattern_failure"  # does not fully match the required pattern
    MEMBERSHIP_FAILURE = "membership_failure"  # character not in the allowed set


class ErrorType(Enum):
    """Error type categories for consistent error handling."""

    VALIDATION = "validation"
    CONFIG = "config"
    SYSTEM = "system"


class ErrorCode(Enum):
    """Specific error codes for common scenarios."""

    # Validation errors
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_FORMAT = "INVALID_FORMAT"
    VALUE_OUT_OF_RANGE = "VALUE_OUT_OF_RANGE"
    REQUIRED_FIELD_MISSING = "REQUIRED_FIELD_MISSING"

    # Configuration errors
    CONFIG_INVALID = "CONFIG_INVALID"
    CONFIG_PARSE_ERROR = "CONFIG_PARSE_ERROR"
    PATTERN_INVALID = "PATTERN_INVALID"

    # System errors
    OPERATION_CANCELLED = "OPERATION_CANCELLED"
    OS_ERROR = "OS_ERROR"

    # Generic
    UNKNOWN = "UNKNOWN"


class ErrorSeverity(Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


# ErrorKind -> ErrorCode used when a failed result is turned into an exception
_KIND_TO_CODE: dict[ErrorKind, ErrorCode] = {
    ErrorKind.PARSE_FAILURE: ErrorCode.INVALID_FORMAT,
    ErrorKind.PATTERN_FAILURE: ErrorCode.INVALID_FORMAT,
    ErrorKind.RANGE_FAILURE: ErrorCode.VALUE_OUT_OF_RANGE,
    ErrorKind.MEMBERSHIP_FAILURE: ErrorCode.INVALID_INPUT,
}


@dataclass
class BaseAppError(Exception):
    """
    Base application error with structured metadata.

    Root of all toolkit errors, carrying enough information for logging
    and for user-facing feedback.
    """

    type: ErrorType
    code: ErrorCode
    user_message: str
    technical_message: str | None = None
    severity: ErrorSeverity = ErrorSeverity.MEDIUM
    retriable: bool = False
    context: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        """Return user-friendly error message."""
        return self.user_message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"type={self.type.value}, "
            f"code={self.code.value}, "
            f"message='{self.user_message}'"
            f")"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "type": self.type.value,
            "code": self.code.value,
            "user_message": self.user_message,
            "technical_message": self.technical_message,
            "severity": self.severity.value,
            "retriable": self.retriable,
            "context": self.context,
        }


class ValidationError(BaseAppError):
    """A rejected input, optionally tied to a field."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        field: str | None = None,
        kind: ErrorKind | None = None,
        technical_message: str | None = None,
        severity: ErrorSeverity = ErrorSeverity.LOW,
        context: dict[str, Any] | None = None,
    ):
        context = context or {}
        if field:
            context["field"] = field
        if kind:
            context["kind"] = kind.value

        super().__init__(
            type=ErrorType.VALIDATION,
            code=code,
            user_message=user_message,
            technical_message=technical_message,
            severity=severity,
            retriable=True,
            context=context,
        )
        self.kind = kind

    @property
    def field(self) -> str | None:
        """Get the field that caused the validation error."""
        return self.context.get("field")

    @classmethod
    def from_kind(
        cls,
        kind: ErrorKind,
        user_message: str,
        field: str | None = None,
        value: str | None = None,
    ) -> ValidationError:
        """Build a ValidationError from a rejection kind."""
        code = _KIND_TO_CODE[kind]
        if value == "":
            code = ErrorCode.REQUIRED_FIELD_MISSING

        label = field or "input"
        return cls(
            code=code,
            user_message=user_message,
            field=field,
            kind=kind,
            technical_message=f"Validation failed for '{label}' ({kind.value}): {value!r}",
            context={"value": value} if value is not None else None,
        )


class ConfigError(BaseAppError):
    """Configuration related errors."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        technical_message: str | None = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(
            type=ErrorType.CONFIG,
            code=code,
            user_message=user_message,
            technical_message=technical_message,
            severity=severity,
            retriable=False,
            context=context or {},
        )


class PatternLibraryError(ConfigError):
    """Raised when a pattern file or a registered pattern is unusable."""

    def __init__(self, user_message: str, technical_message: str | None = None, code: ErrorCode = ErrorCode.PATTERN_INVALID):
        super().__init__(code=code, user_message=user_message, technical_message=technical_message)


class SystemError(BaseAppError):
    """System level errors, including cancellation."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        technical_message: str | None = None,
        severity: ErrorSeverity = ErrorSeverity.HIGH,
        retriable: bool = False,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(
            type=ErrorType.SYSTEM,
            code=code,
            user_message=user_message,
            technical_message=technical_message,
            severity=severity,
            retriable=retriable,
            context=context or {},
        )


class OperationCancelledError(SystemError):
    """Raised out of a prompt loop when its token fires or its input ends."""

    def __init__(self, message: str = "Input was cancelled"):
        super().__init__(
            code=ErrorCode.OPERATION_CANCELLED,
            user_message=message,
            severity=ErrorSeverity.LOW,
            retriable=True,
        )


# Exception mapping configuration
_EXCEPTION_MAPPING: dict[type[Exception], tuple[ErrorType, ErrorCode, str]] = {
    ValueError: (ErrorType.VALIDATION, ErrorCode.INVALID_INPUT, "Invalid input provided"),
    OSError: (ErrorType.SYSTEM, ErrorCode.OS_ERROR, "System error occurred"),
}


def map_exception(exc: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
    """
    Map a built-in exception to a toolkit error.

    Args:
        exc: The exception to map
        context: Optional context information

    Returns:
        BaseAppError instance with appropriate type and metadata
    """
    context = context or {}

    if isinstance(exc, BaseAppError):
        return exc

    # Subclasses (e.g. FileNotFoundError) map through their nearest listed base
    for exc_type, (error_type, error_code, default_message) in _EXCEPTION_MAPPING.items():
        if not isinstance(exc, exc_type):
            continue

        user_message = str(exc) if str(exc) else default_message
        technical_message = f"{type(exc).__name__}: {exc}"
        if error_type == ErrorType.VALIDATION:
            return ValidationError(
                code=error_code,
                user_message=user_message,
                technical_message=technical_message,
                context=context,
            )
        return SystemError(
            code=error_code,
            user_message=user_message,
            technical_message=technical_message,
            context=context,
        )

    logger.warning(f"Unknown exception type: {type(exc).__name__}: {exc}")
    return SystemError(
        code=ErrorCode.UNKNOWN,
        user_message="An unexpected error occurred",
        technical_message=f"{type(exc).__name__}: {exc}",
        context=context,
    )
