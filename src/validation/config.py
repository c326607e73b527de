"""
Configuration for the input validation toolkit.

This module provides the configuration defaults, the JSON schema for custom
pattern library files, and the application directory helpers.
"""

from pathlib import Path
from typing import Any

from PySide6.QtCore import QCoreApplication, QStandardPaths

from .constants import COLOR_ERROR_BACKGROUND

# Application identifiers for QSettings
APP_ORGANIZATION = "InputValidation"
APP_NAME = "Validator"

# JSON Schema version for pattern library compatibility
SCHEMA_VERSION = "1.0.0"

# Default configuration with all supported keys and JSON-serializable types
DEFAULT_CONFIG: dict[str, Any] = {
    # Field highlighting
    "error_background": COLOR_ERROR_BACKGROUND,
    "show_error_dialogs": True,
    # Patterns
    "pattern_library_file": "",  # empty means built-in patterns only
    # Logging
    "log_level": "INFO",  # Options: "DEBUG", "INFO", "WARNING", "ERROR"
}

# JSON Schema for pattern library files (draft-07)
PATTERN_LIBRARY_JSON_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Validation Pattern Library",
    "description": "Named full-match patterns and their error messages",
    "type": "object",
    "required": ["schema_version", "patterns"],
    "additionalProperties": False,
    "properties": {
        "schema_version": {
            "type": "string",
            "const": SCHEMA_VERSION,
            "description": "Schema version for compatibility checking",
        },
        "patterns": {
            "type": "object",
            "propertyNames": {"pattern": "^[a-z][a-z0-9_]*$"},
            "additionalProperties": {
                "type": "object",
                "required": ["pattern"],
                "additionalProperties": False,
                "properties": {
                    "pattern": {"type": "string", "description": "Regular expression, matched as a whole"},
                    "message": {"type": "string", "minLength": 1, "description": "Error message on mismatch"},
                },
            },
        },
    },
}


def get_app_config_dir() -> Path:
    """
    Get the application configuration directory.

    Returns:
        Path to the writable configuration directory for this application
    """
    config_location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.ConfigLocation)
    return Path(config_location) / APP_ORGANIZATION / APP_NAME


def setup_qsettings() -> None:
    """
    Configure QSettings with application identifiers.

    This should be called early in application startup to ensure
    QSettings uses the correct organization and application names.
    """
    QCoreApplication.setOrganizationName(APP_ORGANIZATION)
    QCoreApplication.setApplicationName(APP_NAME)
