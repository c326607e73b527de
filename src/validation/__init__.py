"""
Input validation toolkit.

Retry-until-valid console prompts and single-shot field validation sharing
one set of pattern, range and character rules.
"""

from .cancellation import CancellationToken
from .constants import (
    COLOR_ERROR_BACKGROUND,
    MATCH_ANY,
    MATCH_CHAR,
    MATCH_CHOICE_YN,
    MATCH_EMAIL,
    MATCH_NOT_EMPTY,
    MATCH_SSN,
    MSG_INVALID_CHAR,
    MSG_INVALID_DECIMAL,
    MSG_INVALID_INT,
    MSG_INVALID_STRING,
)
from .errors import ErrorKind, OperationCancelledError, PatternLibraryError, ValidationError
from .field_validator import FieldValidator
from .patterns import PatternLibrary
from .prompt_validator import PromptValidator
from .registry import ErrorFieldRegistry, FieldHighlighter
from .rules import Invalid, Valid, ValidationResult, ValidationSpec
from .sources import ConsoleLineSource, ConsoleMessageSink, StaticLineSource

__all__ = [
    "COLOR_ERROR_BACKGROUND",
    "MATCH_ANY",
    "MATCH_CHAR",
    "MATCH_CHOICE_YN",
    "MATCH_EMAIL",
    "MATCH_NOT_EMPTY",
    "MATCH_SSN",
    "MSG_INVALID_CHAR",
    "MSG_INVALID_DECIMAL",
    "MSG_INVALID_INT",
    "MSG_INVALID_STRING",
    "CancellationToken",
    "ConsoleLineSource",
    "ConsoleMessageSink",
    "ErrorFieldRegistry",
    "ErrorKind",
    "FieldHighlighter",
    "FieldValidator",
    "Invalid",
    "OperationCancelledError",
    "PatternLibrary",
    "PatternLibraryError",
    "PromptValidator",
    "StaticLineSource",
    "Valid",
    "ValidationError",
    "ValidationResult",
    "ValidationSpec",
]
