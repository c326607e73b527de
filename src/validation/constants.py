"""
Shared patterns, messages and bounds for the validation toolkit.

Patterns are always applied as full-string matches.
"""

import sys

# Pattern matching constants (regular expressions)

# Yes/No in the form of Y, y, N or n
MATCH_CHOICE_YN = r"[yYnN]"

# Social security number, with or without hyphens
MATCH_SSN = r"[0-9]{3}-?[0-9]{2}-?[0-9]{4}"

# Handles most characters allowed by RFC 3696 section 3. Escaped or quoted
# local parts are not supported. Dots separate runs of local-part characters
# (one trailing dot allowed), so every address has exactly one parse.
MATCH_EMAIL = r"[\w\+!\$#%&'*\-/=?\^`{}|~]+(\.[\w\+!\$#%&'*\-/=?\^`{}|~]+)*\.?@(\w|-)+(\.\w+)+"

# An empty value is not allowed
MATCH_NOT_EMPTY = r".+"

# An empty value is allowed
MATCH_ANY = r".*"

# Zero or one character
MATCH_CHAR = r".?"

# Error message constants
MSG_INVALID_CHAR = "Please enter a valid character."
MSG_INVALID_STRING = "Your input is not valid. Please try again."
MSG_INVALID_INT = "The value entered must be an integer. Please try again."
MSG_INVALID_DECIMAL = "The value entered must be a decimal. Please try again."
MSG_OUT_OF_RANGE = "The value entered must be within the range {minimum} through {maximum}. Please try again."

# Background color for highlighting an invalid field (faded yellow)
COLOR_ERROR_BACKGROUND = "#ffffb4"

# Default numeric bounds
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
DOUBLE_MAX = sys.float_info.max
