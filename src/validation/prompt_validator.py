"""
Retry-until-valid console prompts.

Each get_* method reads a line, evaluates it with the shared rules, reports
the error message and re-prompts on failure, and only returns a valid value.
There is no retry limit. A loop returns only on valid input; a cancelled
token or a closed source raises OperationCancelledError.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .cancellation import CancellationToken
from .constants import (
    DOUBLE_MAX,
    INT_MAX,
    INT_MIN,
    MATCH_ANY,
    MATCH_CHAR,
    MSG_INVALID_CHAR,
    MSG_INVALID_DECIMAL,
    MSG_INVALID_INT,
    MSG_INVALID_STRING,
)
from .errors import OperationCancelledError
from .rules import (
    Invalid,
    ValidationResult,
    ValidationSpec,
    char_spec,
    double_spec,
    evaluate_char,
    evaluate_double,
    evaluate_int,
    evaluate_string,
    int_spec,
)
from .sources import ConsoleLineSource, ConsoleMessageSink, LineSource, MessageSink

logger = logging.getLogger(__name__)


class PromptValidator:
    """
    Interactive validator that loops until the input is valid.

    Args:
        source: Where candidate lines come from (defaults to the console)
        sink: Where error messages go (defaults to the console)
    """

    def __init__(self, source: LineSource | None = None, sink: MessageSink | None = None) -> None:
        self._source = source or ConsoleLineSource()
        self._sink = sink or ConsoleMessageSink()

    def get_int(
        self,
        prompt: str,
        minimum: int = INT_MIN,
        maximum: int = INT_MAX,
        cancel_token: CancellationToken | None = None,
    ) -> int:
        """Prompt until an integer within [minimum, maximum] is entered."""
        spec = int_spec(minimum, maximum, MSG_INVALID_INT)
        value: int = self._loop(prompt, spec, evaluate_int, cancel_token)
        return value

    def get_double(
        self,
        prompt: str,
        minimum: float = -DOUBLE_MAX,
        maximum: float = DOUBLE_MAX,
        cancel_token: CancellationToken | None = None,
    ) -> float:
        """Prompt until a decimal within [minimum, maximum] is entered."""
        spec = double_spec(minimum, maximum, MSG_INVALID_DECIMAL)
        value: float = self._loop(prompt, spec, evaluate_double, cancel_token)
        return value

    def get_char(
        self,
        prompt: str,
        allowed_chars: str | None = None,
        error_message: str = MSG_INVALID_CHAR,
        cancel_token: CancellationToken | None = None,
    ) -> str:
        """
        Prompt until a single character is entered and return it uppercased.

        Args:
            prompt: Text shown before each read
            allowed_chars: Accepted characters, compared case-insensitively;
                None accepts any character
            error_message: Shown after each rejected attempt
            cancel_token: Optional token that aborts the loop

        Returns:
            The accepted character, uppercased
        """
        spec = char_spec(allowed_chars, error_message)
        while True:
            text = self.get_string(prompt, MATCH_CHAR, spec.error_message, cancel_token)
            result = evaluate_char(text, spec)
            if isinstance(result, Invalid):
                self._reject(result)
                continue
            char: str = result.value
            return char

    def get_string(
        self,
        prompt: str,
        pattern: str = MATCH_ANY,
        error_message: str = MSG_INVALID_STRING,
        cancel_token: CancellationToken | None = None,
    ) -> str:
        """Prompt until the whole line matches pattern; return it verbatim."""
        spec = ValidationSpec(pattern=pattern, error_message=error_message)
        text: str = self._loop(prompt, spec, evaluate_string, cancel_token)
        return text

    def _loop(
        self,
        prompt: str,
        spec: ValidationSpec,
        evaluate: Callable[[str, ValidationSpec], ValidationResult],
        cancel_token: CancellationToken | None,
    ) -> Any:
        while True:
            text = self._read(prompt, cancel_token)
            result: ValidationResult = evaluate(text, spec)
            if isinstance(result, Invalid):
                self._reject(result)
                continue
            return result.value

    def _read(self, prompt: str, cancel_token: CancellationToken | None) -> str:
        if cancel_token is not None:
            cancel_token.raise_if_cancelled()

        text = self._source.read_line(prompt)

        # The read itself may have been interrupted
        if cancel_token is not None:
            cancel_token.raise_if_cancelled()
        if getattr(self._source, "closed", False):
            raise OperationCancelledError("End of input reached")
        return text

    def _reject(self, result: Invalid) -> None:
        logger.debug(f"Rejected {result.raw_text!r}: {result.kind.value}")
        self._sink.show(result.message)
