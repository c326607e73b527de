"""
Named pattern library shared by the prompt and field validators.

Provides the built-in patterns, registration of custom ones, and loading
and saving pattern files with schema validation and atomic writes.
"""

from __future__ import annotations

import json
import logging
import os
import re
import tempfile
from dataclasses import dataclass
from pathlib import Path

import jsonschema

from .config import PATTERN_LIBRARY_JSON_SCHEMA, SCHEMA_VERSION
from .constants import (
    MATCH_ANY,
    MATCH_CHAR,
    MATCH_CHOICE_YN,
    MATCH_EMAIL,
    MATCH_NOT_EMPTY,
    MATCH_SSN,
    MSG_INVALID_CHAR,
    MSG_INVALID_STRING,
)
from .errors import ErrorCode, PatternLibraryError
from .rules import ValidationSpec, full_match

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NamedPattern:
    """A full-match pattern and the message shown when it is not matched."""

    pattern: str
    message: str = MSG_INVALID_STRING


BUILTIN_PATTERNS: dict[str, NamedPattern] = {
    "choice_yn": NamedPattern(MATCH_CHOICE_YN, "Please enter Y or N."),
    "ssn": NamedPattern(MATCH_SSN, "Please enter a social security number, e.g. 123-45-6789."),
    "email": NamedPattern(MATCH_EMAIL, "Please enter a valid email address."),
    "not_empty": NamedPattern(MATCH_NOT_EMPTY, "A value is required."),
    "any": NamedPattern(MATCH_ANY),
    "char": NamedPattern(MATCH_CHAR, MSG_INVALID_CHAR),
}


class PatternLibrary:
    """
    Registry of named patterns.

    Starts from the built-in patterns; custom entries registered or loaded
    later take precedence over built-ins with the same name.
    """

    def __init__(self, patterns: dict[str, NamedPattern] | None = None) -> None:
        self._patterns: dict[str, NamedPattern] = dict(BUILTIN_PATTERNS)
        self._custom: set[str] = set()
        for name, entry in (patterns or {}).items():
            self.register(name, entry.pattern, entry.message)

    @classmethod
    def default(cls) -> PatternLibrary:
        """Library holding only the built-in patterns."""
        return cls()

    def register(self, name: str, pattern: str, message: str = MSG_INVALID_STRING) -> None:
        """
        Register (or replace) a named pattern.

        Raises:
            PatternLibraryError: If the pattern does not compile
        """
        try:
            re.compile(pattern)
        except re.error as e:
            raise PatternLibraryError(
                f"Pattern '{name}' is not a valid regular expression",
                technical_message=f"{pattern!r}: {e}",
            ) from e

        self._patterns[name] = NamedPattern(pattern, message)
        self._custom.add(name)
        logger.debug(f"Registered pattern '{name}': {pattern}")

    def get(self, name: str) -> NamedPattern:
        try:
            return self._patterns[name]
        except KeyError:
            raise KeyError(f"Unknown pattern '{name}'") from None

    def __contains__(self, name: object) -> bool:
        return name in self._patterns

    def names(self) -> list[str]:
        return sorted(self._patterns)

    def matches(self, name: str, text: str) -> bool:
        """Full-match text against the named pattern."""
        return full_match(self.get(name).pattern, text)

    def spec(self, name: str) -> ValidationSpec:
        """Build a ValidationSpec from the named pattern and its message."""
        entry = self.get(name)
        return ValidationSpec(pattern=entry.pattern, error_message=entry.message)

    @classmethod
    def load(cls, path: Path | str) -> PatternLibrary:
        """
        Load a pattern file layered over the built-in patterns.

        Args:
            path: JSON pattern library file

        Returns:
            PatternLibrary with the file's entries registered

        Raises:
            PatternLibraryError: If the file cannot be read, parsed or validated
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise PatternLibraryError(
                f"Pattern library '{path.name}' is not valid JSON",
                technical_message=str(e),
                code=ErrorCode.CONFIG_PARSE_ERROR,
            ) from e
        except OSError as e:
            raise PatternLibraryError(
                f"Failed to read pattern library '{path}'",
                technical_message=str(e),
                code=ErrorCode.CONFIG_INVALID,
            ) from e

        try:
            jsonschema.validate(data, PATTERN_LIBRARY_JSON_SCHEMA)
        except jsonschema.ValidationError as e:
            raise PatternLibraryError(
                f"Pattern library validation failed: {e.message}",
                code=ErrorCode.CONFIG_INVALID,
            ) from e

        library = cls()
        for name, entry in data["patterns"].items():
            library.register(name, entry["pattern"], entry.get("message", MSG_INVALID_STRING))

        logger.info(f"Loaded {len(data['patterns'])} patterns from {path}")
        return library

    def save(self, path: Path | str) -> None:
        """
        Write the custom (non built-in) entries to a pattern file.

        Raises:
            PatternLibraryError: If the file cannot be written
        """
        path = Path(path)
        data = {
            "schema_version": SCHEMA_VERSION,
            "patterns": {
                name: {"pattern": self._patterns[name].pattern, "message": self._patterns[name].message}
                for name in sorted(self._custom)
            },
        }

        # Write atomically using temporary file
        temp_path: str | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="w", suffix=".json", dir=path.parent, delete=False, encoding="utf-8"
            ) as temp_file:
                temp_path = temp_file.name
                json.dump(data, temp_file, ensure_ascii=False, indent=2, sort_keys=True)

            os.replace(temp_path, path)
            logger.info(f"Saved {len(self._custom)} patterns to {path}")
        except OSError as e:
            if temp_path is not None and os.path.exists(temp_path):
                os.unlink(temp_path)
            raise PatternLibraryError(
                f"Failed to save pattern library '{path}'",
                technical_message=str(e),
                code=ErrorCode.CONFIG_INVALID,
            ) from e
