"""
Tests for the shared validation rules.

Tests cover:
- Strict integer and decimal parsing
- Inclusive range checks and bound messages
- Character rules and the accepted-characters suffix
"""

import math

import pytest

from validation.constants import (
    DOUBLE_MAX,
    INT_MAX,
    INT_MIN,
    MATCH_ANY,
    MATCH_NOT_EMPTY,
    MSG_INVALID_CHAR,
    MSG_INVALID_INT,
)
from validation.errors import ErrorCode, ErrorKind
from validation.rules import (
    Invalid,
    Valid,
    ValidationSpec,
    char_spec,
    double_spec,
    evaluate_char,
    evaluate_double,
    evaluate_int,
    evaluate_string,
    full_match,
    in_range,
    int_spec,
    parse_double,
    parse_int,
)


class TestParsing:
    """Test the strict numeric parsers."""

    @pytest.mark.parametrize("text,expected", [("0", 0), ("42", 42), ("-7", -7), ("+5", 5), ("007", 7)])
    def test_parse_int_accepts_signed_digits(self, text, expected):
        assert parse_int(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "1.5", " 1", "1 ", "1_000", "0x10", "--1", "+"])
    def test_parse_int_rejects_other_syntax(self, text):
        with pytest.raises(ValueError):
            parse_int(text)

    @pytest.mark.parametrize("text,expected", [("1.5", 1.5), ("-2", -2.0), ("1e3", 1000.0), (".5", 0.5)])
    def test_parse_double_accepts_decimals(self, text, expected):
        assert parse_double(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "1,5", "1_000.0", " 1.5", "1.5 ", "١٢", "1.٥", "0x1p3", "."])
    def test_parse_double_rejects_other_syntax(self, text):
        with pytest.raises(ValueError):
            parse_double(text)

    @pytest.mark.parametrize("text", ["inf", "-Infinity", "NaN"])
    def test_parse_double_accepts_named_values(self, text):
        assert not math.isfinite(parse_double(text))

    def test_non_ascii_digits_rejected_by_both_parsers(self):
        int_result = evaluate_int("١٢", int_spec(0, 100))
        double_result = evaluate_double("١٢", double_spec(0, 100))

        assert isinstance(int_result, Invalid)
        assert isinstance(double_result, Invalid)
        assert int_result.kind == double_result.kind == ErrorKind.PARSE_FAILURE


class TestRangeAndMatch:
    """Test range checks and full-string matching."""

    def test_range_is_inclusive(self):
        assert in_range(0, 0, 100)
        assert in_range(100, 0, 100)
        assert not in_range(-1, 0, 100)
        assert not in_range(101, 0, 100)

    def test_nan_is_never_in_range(self):
        assert not in_range(math.nan, -DOUBLE_MAX, DOUBLE_MAX)

    def test_full_match_is_not_partial(self):
        assert full_match(r"[0-9]+", "123")
        assert not full_match(r"[0-9]+", "123abc")
        assert not full_match(r"[0-9]+", "abc123")

    def test_not_empty_and_any(self):
        assert not full_match(MATCH_NOT_EMPTY, "")
        assert full_match(MATCH_NOT_EMPTY, "x")
        assert full_match(MATCH_ANY, "")


class TestEvaluate:
    """Test evaluate_* results."""

    def test_int_in_range(self):
        assert evaluate_int("42", int_spec(0, 100)) == Valid(42)

    def test_int_parse_failure_uses_generic_message(self):
        result = evaluate_int("abc", int_spec(0, 100))
        assert isinstance(result, Invalid)
        assert result.kind == ErrorKind.PARSE_FAILURE
        assert result.message == MSG_INVALID_INT

    def test_int_range_failure_names_bounds(self):
        result = evaluate_int("150", int_spec(0, 100))
        assert isinstance(result, Invalid)
        assert result.kind == ErrorKind.RANGE_FAILURE
        assert "0 through 100" in result.message

    def test_int_outside_default_bounds(self):
        result = evaluate_int(str(INT_MAX + 1), int_spec(INT_MIN, INT_MAX))
        assert isinstance(result, Invalid)
        assert result.kind == ErrorKind.RANGE_FAILURE

    def test_double_bounds_reported_as_floats(self):
        result = evaluate_double("150", double_spec(0, 100))
        assert isinstance(result, Invalid)
        assert "0.0 through 100.0" in result.message

    def test_double_infinity_outside_default_range(self):
        result = evaluate_double("inf", double_spec(-DOUBLE_MAX, DOUBLE_MAX))
        assert isinstance(result, Invalid)
        assert result.kind == ErrorKind.RANGE_FAILURE

    def test_string_returned_verbatim(self):
        assert evaluate_string("  Mixed Case  ", ValidationSpec()) == Valid("  Mixed Case  ")

    def test_string_pattern_failure(self):
        result = evaluate_string("", ValidationSpec(pattern=MATCH_NOT_EMPTY, error_message="Required"))
        assert result == Invalid(ErrorKind.PATTERN_FAILURE, "Required", "")

    def test_result_ok_flags(self):
        assert Valid(1).ok
        assert not Invalid(ErrorKind.PARSE_FAILURE, "m", "x").ok


class TestCharRules:
    """Test single-character rules."""

    def test_char_uppercased(self):
        assert evaluate_char("b", char_spec("BSE")) == Valid("B")

    def test_char_membership_is_case_insensitive(self):
        assert evaluate_char("s", char_spec("bse")) == Valid("S")
        assert evaluate_char("S", char_spec("bse")) == Valid("S")

    def test_char_not_in_set(self):
        result = evaluate_char("x", char_spec("BSE", "Invalid"))
        assert result == Invalid(ErrorKind.MEMBERSHIP_FAILURE, "Invalid", "x")

    def test_empty_char_rejected(self):
        result = evaluate_char("", char_spec())
        assert isinstance(result, Invalid)
        assert result.kind == ErrorKind.PATTERN_FAILURE

    def test_any_char_without_allowed_set(self):
        assert evaluate_char("?", char_spec()) == Valid("?")

    def test_default_message_lists_accepted_characters_once(self):
        spec = char_spec("BSE")
        assert spec.error_message == f"{MSG_INVALID_CHAR} [BSEbse]"

    def test_custom_message_is_not_suffixed(self):
        assert char_spec("BSE", "Pick one").error_message == "Pick one"

    def test_default_message_without_allowed_set(self):
        assert char_spec().error_message == MSG_INVALID_CHAR


class TestInvalidToError:
    """Test converting a failed result into a ValidationError."""

    def test_range_failure_code(self):
        error = Invalid(ErrorKind.RANGE_FAILURE, "Too big", "150").to_error("age")
        assert error.code == ErrorCode.VALUE_OUT_OF_RANGE
        assert error.field == "age"
        assert error.kind == ErrorKind.RANGE_FAILURE
        assert str(error) == "Too big"

    def test_empty_text_is_required_field(self):
        error = Invalid(ErrorKind.PATTERN_FAILURE, "Required", "").to_error("name")
        assert error.code == ErrorCode.REQUIRED_FIELD_MISSING

    def test_parse_failure_is_format_error(self):
        error = Invalid(ErrorKind.PARSE_FAILURE, "Not a number", "abc").to_error()
        assert error.code == ErrorCode.INVALID_FORMAT
        assert error.field is None
