"""
Single-shot validation for text pulled from externally-owned fields.

Unlike the prompt validator, nothing here loops or performs I/O: each call
evaluates the supplied text once and returns a Valid or Invalid result. On
the Invalid branch the caller decides what to do (flag the field, show a
dialog); on success the field's registry entry is cleared.
"""

from __future__ import annotations

import logging

from .constants import (
    DOUBLE_MAX,
    INT_MAX,
    INT_MIN,
    MATCH_ANY,
    MATCH_NOT_EMPTY,
    MSG_INVALID_DECIMAL,
    MSG_INVALID_INT,
    MSG_INVALID_STRING,
)
from .registry import ErrorFieldRegistry
from .rules import (
    Invalid,
    Valid,
    ValidationResult,
    ValidationSpec,
    double_spec,
    evaluate_double,
    evaluate_int,
    evaluate_string,
    int_spec,
)

logger = logging.getLogger(__name__)


class FieldValidator:
    """
    Validates field text once per call.

    Args:
        registry: Registry whose entry for a field is cleared when that
            field validates successfully
    """

    def __init__(self, registry: ErrorFieldRegistry | None = None) -> None:
        self._registry = registry

    @property
    def registry(self) -> ErrorFieldRegistry | None:
        return self._registry

    def validate_string(
        self,
        raw_text: str,
        pattern: str = MATCH_ANY,
        error_message: str = MSG_INVALID_STRING,
        field_id: str | None = None,
    ) -> ValidationResult:
        """Return the text unchanged if it fully matches pattern."""
        result = evaluate_string(raw_text, ValidationSpec(pattern=pattern, error_message=error_message))
        return self._finish(result, field_id)

    def validate_int(
        self,
        raw_text: str,
        minimum: int = INT_MIN,
        maximum: int = INT_MAX,
        error_message: str = MSG_INVALID_INT,
        field_id: str | None = None,
    ) -> ValidationResult:
        """
        Validate non-empty text as an integer within [minimum, maximum].

        Every failure is reported as Invalid with the caller's error_message;
        Invalid.kind tells empty/parse/range failures apart.
        """
        spec = int_spec(minimum, maximum, error_message)
        result = self._require_text(raw_text, error_message)
        if result is None:
            result = evaluate_int(raw_text, spec)
        return self._finish(self._with_message(result, error_message), field_id)

    def validate_double(
        self,
        raw_text: str,
        minimum: float = -DOUBLE_MAX,
        maximum: float = DOUBLE_MAX,
        error_message: str = MSG_INVALID_DECIMAL,
        field_id: str | None = None,
    ) -> ValidationResult:
        """Validate non-empty text as a decimal within [minimum, maximum]."""
        spec = double_spec(minimum, maximum, error_message)
        result = self._require_text(raw_text, error_message)
        if result is None:
            result = evaluate_double(raw_text, spec)
        return self._finish(self._with_message(result, error_message), field_id)

    @staticmethod
    def _require_text(raw_text: str, error_message: str) -> Invalid | None:
        result = evaluate_string(raw_text, ValidationSpec(pattern=MATCH_NOT_EMPTY, error_message=error_message))
        return result if isinstance(result, Invalid) else None

    @staticmethod
    def _with_message(result: ValidationResult, error_message: str) -> ValidationResult:
        # Range failures carry the bounds message; field callers get their own
        if isinstance(result, Invalid) and result.message != error_message:
            return Invalid(result.kind, error_message, result.raw_text)
        return result

    def _finish(self, result: ValidationResult, field_id: str | None) -> ValidationResult:
        if isinstance(result, Valid):
            if field_id is not None and self._registry is not None:
                self._registry.clear(field_id)
        else:
            logger.debug(f"Field '{field_id or '?'}' rejected {result.raw_text!r}: {result.kind.value}")
        return result
