"""
Configuration manager for the input validation toolkit.

Provides QSettings-backed configuration management with default fallbacks
and type safety.
"""

import logging
from pathlib import Path
from typing import Any

from PySide6.QtCore import QSettings

from .config import DEFAULT_CONFIG, setup_qsettings
from .errors import PatternLibraryError
from .patterns import PatternLibrary

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    QSettings-backed configuration manager with robust defaults.

    Provides type-safe access to configuration values with automatic
    fallback to defaults when keys are missing or have invalid types.
    """

    def __init__(self) -> None:
        """Initialize the ConfigManager with QSettings."""
        # Ensure QSettings is configured with app identifiers
        setup_qsettings()

        self._settings = QSettings()
        self._defaults = DEFAULT_CONFIG.copy()

    def get(self, key: str, default: Any | None = None) -> Any:
        """
        Get a configuration value with fallback to defaults.

        Args:
            key: Configuration key
            default: Override default value (if None, uses DEFAULT_CONFIG)

        Returns:
            Configuration value with type coercion and default fallback
        """
        fallback = default if default is not None else self._defaults.get(key)

        value = self._settings.value(key, fallback)

        if fallback is not None:
            try:
                # Coerce to the expected type based on the default
                expected_type = type(fallback)
                if expected_type is bool:
                    # QSettings returns strings for booleans, need special handling
                    value = value.lower() in ("true", "1", "yes", "on") if isinstance(value, str) else bool(value)
                elif expected_type in (int, float, str):
                    value = expected_type(value)
                elif not isinstance(value, expected_type):
                    logger.warning(f"Config key '{key}' has unexpected type, using default")
                    value = fallback
            except (ValueError, TypeError) as e:
                logger.warning(f"Failed to coerce config key '{key}': {e}, using default")
                value = fallback

        return value

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value and persist it immediately."""
        self._settings.setValue(key, value)
        self._settings.sync()

    def load_all(self) -> dict[str, Any]:
        """
        Load all configuration values merged with defaults.

        Returns:
            Dictionary with all configuration keys, using stored values
            where available and defaults for missing keys
        """
        config = self._defaults.copy()
        for key in config:
            stored_value = self.get(key)
            if stored_value is not None:
                config[key] = stored_value
        return config

    def reset_to_defaults(self) -> None:
        """Clear all stored settings, reverting to defaults."""
        self._settings.clear()
        self._settings.sync()

        logger.info("Configuration reset to defaults")

    def load_pattern_library(self) -> PatternLibrary:
        """
        Build the pattern library named by the configuration.

        Falls back to the built-in patterns if no file is configured or the
        configured file is unusable.
        """
        library_file = self.get("pattern_library_file")
        if not library_file:
            return PatternLibrary.default()

        try:
            return PatternLibrary.load(Path(library_file).expanduser())
        except PatternLibraryError as e:
            logger.warning(f"Ignoring pattern library '{library_file}': {e}")
            return PatternLibrary.default()
