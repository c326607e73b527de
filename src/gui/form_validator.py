"""
Signal-based field validation for Qt forms.

FormValidator owns one error-field registry per form, validates registered
QLineEdit fields through the single-shot FieldValidator, and performs the
Invalid-branch side effects: flag the field, log the error, emit a signal
and optionally show a dialog.
"""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal
from PySide6.QtWidgets import QLineEdit

from validation.config_manager import ConfigManager
from validation.constants import (
    DOUBLE_MAX,
    INT_MAX,
    INT_MIN,
    MSG_INVALID_DECIMAL,
    MSG_INVALID_INT,
    MSG_INVALID_STRING,
)
from validation.error_handler import get_error_handler
from validation.field_validator import FieldValidator
from validation.registry import ErrorFieldRegistry
from validation.rules import Invalid, ValidationResult

from .highlighter import LineEditHighlighter


class FormValidator(QObject):
    """
    Validates the fields of one form on demand.

    Signals:
        fieldValidityChanged(str, bool, str): key, valid, message
    """

    fieldValidityChanged = Signal(str, bool, str)

    def __init__(
        self,
        parent: QObject | None = None,
        highlighter: LineEditHighlighter | None = None,
        config: ConfigManager | None = None,
    ):
        super().__init__(parent)
        self._logger = logging.getLogger(__name__)
        self._highlighter = highlighter or LineEditHighlighter()
        self._config = config or ConfigManager()
        self._registry = ErrorFieldRegistry(self._highlighter, error_color=self._config.get("error_background"))
        self._validator = FieldValidator(self._registry)
        self._error_handler = get_error_handler()
        self._show_dialogs: bool = self._config.get("show_error_dialogs")

    @property
    def registry(self) -> ErrorFieldRegistry:
        return self._registry

    @property
    def show_dialogs(self) -> bool:
        return self._show_dialogs

    @show_dialogs.setter
    def show_dialogs(self, value: bool) -> None:
        self._show_dialogs = value

    def register_field(self, key: str, widget: QLineEdit) -> None:
        """
        Register a field for validation.

        Args:
            key: Unique identifier for the field
            widget: The input widget to validate
        """
        self._highlighter.register(key, widget)

    def validate_string(self, key: str, pattern: str, error_message: str = MSG_INVALID_STRING) -> ValidationResult:
        """Validate a field's text against a full-match pattern."""
        text = self._highlighter.text(key)
        result = self._validator.validate_string(text, pattern, error_message, field_id=key)
        return self._report(key, result)

    def validate_int(
        self,
        key: str,
        error_message: str = MSG_INVALID_INT,
        minimum: int = INT_MIN,
        maximum: int = INT_MAX,
    ) -> ValidationResult:
        """Validate a field's text as an integer within [minimum, maximum]."""
        text = self._highlighter.text(key)
        result = self._validator.validate_int(text, minimum, maximum, error_message, field_id=key)
        return self._report(key, result)

    def validate_double(
        self,
        key: str,
        error_message: str = MSG_INVALID_DECIMAL,
        minimum: float = -DOUBLE_MAX,
        maximum: float = DOUBLE_MAX,
    ) -> ValidationResult:
        """Validate a field's text as a decimal within [minimum, maximum]."""
        text = self._highlighter.text(key)
        result = self._validator.validate_double(text, minimum, maximum, error_message, field_id=key)
        return self._report(key, result)

    def is_field_flagged(self, key: str) -> bool:
        return self._registry.is_flagged(key)

    def reset_all(self) -> None:
        """Restore every flagged field to its original state."""
        flagged = self._registry.flagged_fields()
        self._logger.debug(f"Resetting {len(flagged)} flagged fields")
        for key in flagged:
            self._highlighter.set_error_state(key, None)
            self.fieldValidityChanged.emit(key, True, "")
        self._registry.reset_all()

    def _report(self, key: str, result: ValidationResult) -> ValidationResult:
        if isinstance(result, Invalid):
            self._registry.mark_invalid(key)
            self._highlighter.set_error_state(key, result.message)
            self._error_handler.handle(result.to_error(key))
            self.fieldValidityChanged.emit(key, False, result.message)
            if self._show_dialogs:
                self._highlighter.show_error_dialog(key, result.message)
        else:
            self._highlighter.set_error_state(key, None)
            self.fieldValidityChanged.emit(key, True, "")
        return result
