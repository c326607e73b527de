"""
Tests for the named pattern library.

Tests cover:
- Built-in patterns
- Registration and lookup
- Loading and saving pattern files with schema validation
"""

import json
import time

import pytest

from validation.config import SCHEMA_VERSION
from validation.constants import MATCH_EMAIL, MSG_INVALID_STRING
from validation.errors import ErrorCode, PatternLibraryError
from validation.patterns import PatternLibrary
from validation.rules import ValidationSpec


class TestBuiltinPatterns:
    """Test the default pattern library."""

    def setup_method(self):
        """Set up test fixtures."""
        self.library = PatternLibrary.default()

    def test_builtin_names(self):
        assert self.library.names() == ["any", "char", "choice_yn", "email", "not_empty", "ssn"]

    @pytest.mark.parametrize("text", ["y", "Y", "n", "N"])
    def test_choice_yn_accepts(self, text):
        assert self.library.matches("choice_yn", text)

    @pytest.mark.parametrize("text", ["", "yes", "x", "yn"])
    def test_choice_yn_rejects(self, text):
        assert not self.library.matches("choice_yn", text)

    @pytest.mark.parametrize("text", ["123-45-6789", "123456789", "123-456789"])
    def test_ssn_accepts_with_or_without_hyphens(self, text):
        assert self.library.matches("ssn", text)

    @pytest.mark.parametrize("text", ["12-345-6789", "123-45-678", "abc-de-fghi"])
    def test_ssn_rejects(self, text):
        assert not self.library.matches("ssn", text)

    @pytest.mark.parametrize("text", ["user@example.com", "first.last@mail.example.org", "a+tag@x-y.io"])
    def test_email_accepts(self, text):
        assert self.library.matches("email", text)

    @pytest.mark.parametrize("text", ["trailing.@example.com", "o'neil@example.co.uk", "a.b.c@d.e"])
    def test_email_dotted_local_parts(self, text):
        assert self.library.matches("email", text)

    @pytest.mark.parametrize("text", ["", "user", "user@", "@example.com", "user@example", ".user@example.com"])
    def test_email_rejects(self, text):
        assert not self.library.matches("email", text)

    @pytest.mark.parametrize("text", ["user..name@example.com", "a@@example.com"])
    def test_email_rejects_doubled_separators(self, text):
        assert not self.library.matches("email", text)

    @pytest.mark.parametrize("text", ["a" * 5000 + "!", "a." * 2500 + "!", "a@" + "b" * 5000 + "!"])
    def test_email_rejects_long_input_quickly(self, text):
        start = time.perf_counter()
        assert not self.library.matches("email", text)
        assert time.perf_counter() - start < 0.5

    def test_char_allows_zero_or_one(self):
        assert self.library.matches("char", "")
        assert self.library.matches("char", "x")
        assert not self.library.matches("char", "xy")

    def test_spec_uses_pattern_and_message(self):
        spec = self.library.spec("email")
        assert isinstance(spec, ValidationSpec)
        assert spec.pattern == MATCH_EMAIL
        assert spec.error_message == self.library.get("email").message

    def test_unknown_pattern(self):
        with pytest.raises(KeyError, match="zip"):
            self.library.get("zip")
        assert "zip" not in self.library


class TestRegistration:
    """Test registering custom patterns."""

    def test_register_and_match(self):
        library = PatternLibrary()
        library.register("zip", r"[0-9]{5}(-[0-9]{4})?", "Enter a ZIP code.")

        assert "zip" in library
        assert library.matches("zip", "63101")
        assert library.matches("zip", "63101-1234")
        assert not library.matches("zip", "6310")

    def test_register_overrides_builtin(self):
        library = PatternLibrary()
        library.register("choice_yn", r"[yn]")
        assert not library.matches("choice_yn", "Y")

    def test_default_message(self):
        library = PatternLibrary()
        library.register("digits", r"[0-9]+")
        assert library.get("digits").message == MSG_INVALID_STRING

    def test_invalid_regex_rejected(self):
        library = PatternLibrary()
        with pytest.raises(PatternLibraryError) as exc_info:
            library.register("broken", r"[0-9")
        assert exc_info.value.code == ErrorCode.PATTERN_INVALID
        assert "broken" not in library


class TestLoadAndSave:
    """Test pattern library files."""

    def write(self, path, data):
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    def test_load_layers_over_builtins(self, tmp_path):
        path = self.write(
            tmp_path / "patterns.json",
            {
                "schema_version": SCHEMA_VERSION,
                "patterns": {"zip": {"pattern": "[0-9]{5}", "message": "Enter a ZIP code."}},
            },
        )

        library = PatternLibrary.load(path)

        assert library.matches("zip", "12345")
        assert library.get("zip").message == "Enter a ZIP code."
        assert "email" in library

    def test_load_rejects_schema_violation(self, tmp_path):
        path = self.write(tmp_path / "patterns.json", {"schema_version": SCHEMA_VERSION, "patterns": {"zip": {}}})

        with pytest.raises(PatternLibraryError) as exc_info:
            PatternLibrary.load(path)
        assert exc_info.value.code == ErrorCode.CONFIG_INVALID

    def test_load_rejects_wrong_version(self, tmp_path):
        path = self.write(tmp_path / "patterns.json", {"schema_version": "0.1", "patterns": {}})

        with pytest.raises(PatternLibraryError):
            PatternLibrary.load(path)

    def test_load_rejects_bad_json(self, tmp_path):
        path = tmp_path / "patterns.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(PatternLibraryError) as exc_info:
            PatternLibrary.load(path)
        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(PatternLibraryError):
            PatternLibrary.load(tmp_path / "missing.json")

    def test_load_rejects_uncompilable_pattern(self, tmp_path):
        path = self.write(
            tmp_path / "patterns.json",
            {"schema_version": SCHEMA_VERSION, "patterns": {"broken": {"pattern": "(unclosed"}}},
        )

        with pytest.raises(PatternLibraryError):
            PatternLibrary.load(path)

    def test_save_round_trip_custom_entries_only(self, tmp_path):
        library = PatternLibrary()
        library.register("zip", r"[0-9]{5}", "Enter a ZIP code.")
        path = tmp_path / "nested" / "patterns.json"

        library.save(path)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == {
            "schema_version": SCHEMA_VERSION,
            "patterns": {"zip": {"pattern": "[0-9]{5}", "message": "Enter a ZIP code."}},
        }
        assert PatternLibrary.load(path).matches("zip", "12345")
        assert list(tmp_path.joinpath("nested").iterdir()) == [path]
