"""
Validation rules shared by the prompt and field validators.

This module holds the per-request ValidationSpec, the typed Valid/Invalid
results, and the evaluate_* functions that turn a candidate string into a
result. Neither entry point performs any check that is not defined here.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .constants import (
    MATCH_ANY,
    MATCH_CHAR,
    MSG_INVALID_CHAR,
    MSG_INVALID_DECIMAL,
    MSG_INVALID_INT,
    MSG_INVALID_STRING,
    MSG_OUT_OF_RANGE,
)
from .errors import ErrorKind, ValidationError

T = TypeVar("T")

# Optional sign followed by ASCII digits, the only accepted integer syntax
_INT_SYNTAX = re.compile(r"[+-]?[0-9]+")

# ASCII decimal literal with optional exponent, or a named infinity or NaN
_DECIMAL_SYNTAX = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class ValidationSpec:
    """
    What a single validation request requires of its input.

    Attributes:
        pattern: Full-string regular expression the text must match
        error_message: Message reported when the text is rejected
        numeric_range: Inclusive (minimum, maximum) bounds, if numeric
        allowed_chars: Accepted characters (case-insensitive), if any
    """

    pattern: str = MATCH_ANY
    error_message: str = MSG_INVALID_STRING
    numeric_range: tuple[float, float] | None = None
    allowed_chars: str | None = None

    def matches(self, text: str) -> bool:
        """Check the text against the pattern as a whole."""
        return full_match(self.pattern, text)

    def in_range(self, value: float) -> bool:
        """Check a number against the inclusive bounds (always true if unbounded)."""
        if self.numeric_range is None:
            return True
        minimum, maximum = self.numeric_range
        return in_range(value, minimum, maximum)

    def allows(self, char: str) -> bool:
        """Check case-insensitive membership in the allowed set."""
        if self.allowed_chars is None:
            return True
        return char.lower() in self.allowed_chars.lower()

    def range_message(self) -> str:
        """Message naming the exact bounds of the numeric range."""
        if self.numeric_range is None:
            return self.error_message
        minimum, maximum = self.numeric_range
        return MSG_OUT_OF_RANGE.format(minimum=minimum, maximum=maximum)


@dataclass(frozen=True)
class Valid(Generic[T]):
    """Accepted input, converted to its requested type."""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid:
    """Rejected input and the reason it was rejected."""

    kind: ErrorKind
    message: str
    raw_text: str

    @property
    def ok(self) -> bool:
        return False

    def to_error(self, field: str | None = None) -> ValidationError:
        """Convert to a ValidationError for logging or error dialogs."""
        return ValidationError.from_kind(self.kind, self.message, field=field, value=self.raw_text)


ValidationResult = Valid[Any] | Invalid


def full_match(pattern: str, text: str) -> bool:
    """Return True if the whole of text matches pattern."""
    return re.fullmatch(pattern, text) is not None


def in_range(value: float, minimum: float, maximum: float) -> bool:
    """Inclusive range check; NaN is never in range."""
    return minimum <= value <= maximum


def parse_int(text: str) -> int:
    """
    Parse a strict integer literal.

    Raises:
        ValueError: If the text is not an optional sign followed by digits
    """
    if not _INT_SYNTAX.fullmatch(text):
        raise ValueError(f"invalid integer literal: {text!r}")
    return int(text)


def parse_double(text: str) -> float:
    """
    Parse a decimal literal.

    Only ASCII digits are accepted, as for integers. NaN and infinities parse
    here and are rejected later by the range check.

    Raises:
        ValueError: If the text is not a floating-point literal
    """
    if not _DECIMAL_SYNTAX.fullmatch(text):
        raise ValueError(f"invalid decimal literal: {text!r}")
    return float(text)


def evaluate_string(text: str, spec: ValidationSpec) -> ValidationResult:
    """Accept text verbatim if it fully matches the spec's pattern."""
    if not spec.matches(text):
        return Invalid(ErrorKind.PATTERN_FAILURE, spec.error_message, text)
    return Valid(text)


def evaluate_int(text: str, spec: ValidationSpec) -> ValidationResult:
    """Parse text as an integer, then check it against the spec's range."""
    try:
        value = parse_int(text)
    except ValueError:
        return Invalid(ErrorKind.PARSE_FAILURE, spec.error_message, text)

    if not spec.in_range(value):
        return Invalid(ErrorKind.RANGE_FAILURE, spec.range_message(), text)
    return Valid(value)


def evaluate_double(text: str, spec: ValidationSpec) -> ValidationResult:
    """Parse text as a decimal, then check it against the spec's range."""
    try:
        value = parse_double(text)
    except ValueError:
        return Invalid(ErrorKind.PARSE_FAILURE, spec.error_message, text)

    if not spec.in_range(value):
        return Invalid(ErrorKind.RANGE_FAILURE, spec.range_message(), text)
    return Valid(value)


def evaluate_char(text: str, spec: ValidationSpec) -> ValidationResult:
    """Accept exactly one allowed character and return it uppercased."""
    if len(text) != 1:
        return Invalid(ErrorKind.PATTERN_FAILURE, spec.error_message, text)
    if not spec.allows(text):
        return Invalid(ErrorKind.MEMBERSHIP_FAILURE, spec.error_message, text)
    return Valid(text.upper())


def int_spec(minimum: int, maximum: int, error_message: str = MSG_INVALID_INT) -> ValidationSpec:
    """Spec for an integer in [minimum, maximum]."""
    return ValidationSpec(error_message=error_message, numeric_range=(minimum, maximum))


def double_spec(minimum: float, maximum: float, error_message: str = MSG_INVALID_DECIMAL) -> ValidationSpec:
    """Spec for a decimal in [minimum, maximum]; bounds are reported as floats."""
    return ValidationSpec(error_message=error_message, numeric_range=(float(minimum), float(maximum)))


def char_spec(allowed_chars: str | None = None, error_message: str = MSG_INVALID_CHAR) -> ValidationSpec:
    """
    Spec for a single character, optionally restricted to allowed_chars.

    When the default message is used with an allowed set, the accepted
    characters are appended in both cases, e.g. " [BSEbse]".
    """
    if allowed_chars and error_message == MSG_INVALID_CHAR:
        error_message = f"{error_message} [{allowed_chars.upper()}{allowed_chars.lower()}]"
    return ValidationSpec(pattern=MATCH_CHAR, error_message=error_message, allowed_chars=allowed_chars or None)
