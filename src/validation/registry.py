"""
Bookkeeping for fields currently flagged as invalid.
"""

from __future__ import annotations

import logging
from typing import Protocol

from .constants import COLOR_ERROR_BACKGROUND

logger = logging.getLogger(__name__)


class FieldHighlighter(Protocol):
    """
    Rendering collaborator for externally-owned text fields.

    Colors are "#rrggbb" strings; the registry never renders anything itself.
    """

    def background_color(self, field_id: str) -> str: ...

    def set_background_color(self, field_id: str, color: str) -> None: ...

    def show_error_dialog(self, field_id: str, message: str) -> None: ...


class ErrorFieldRegistry:
    """
    Tracks which fields are flagged invalid and the color to restore.

    One registry is owned per form. Operations are not atomic; callers
    sharing a registry across threads must synchronize around them.

    Args:
        highlighter: Collaborator that reads and paints field backgrounds
        error_color: Background applied to flagged fields
    """

    def __init__(self, highlighter: FieldHighlighter, error_color: str = COLOR_ERROR_BACKGROUND) -> None:
        self._highlighter = highlighter
        self._error_color = error_color
        self._original_colors: dict[str, str] = {}

    @property
    def error_color(self) -> str:
        return self._error_color

    def mark_invalid(self, field_id: str, current_color: str | None = None) -> None:
        """
        Flag a field and paint it with the error color.

        The color to restore is captured only on the first failure of a
        flagged lifetime; later calls keep the stored original.

        Args:
            field_id: Field to flag
            current_color: Color to restore later; read from the highlighter
                when omitted
        """
        if field_id not in self._original_colors:
            if current_color is None:
                current_color = self._highlighter.background_color(field_id)
            self._original_colors[field_id] = current_color
            logger.debug(f"Flagged field '{field_id}' (restore color {current_color})")

        self._highlighter.set_background_color(field_id, self._error_color)

    def is_flagged(self, field_id: str) -> bool:
        return field_id in self._original_colors

    def clear(self, field_id: str) -> None:
        """Restore a flagged field's color and stop tracking it; no-op otherwise."""
        original = self._original_colors.pop(field_id, None)
        if original is None:
            return

        self._highlighter.set_background_color(field_id, original)
        logger.debug(f"Cleared field '{field_id}'")

    def reset_all(self) -> None:
        """Clear every flagged field."""
        for field_id in list(self._original_colors):
            self.clear(field_id)

    def flagged_fields(self) -> list[str]:
        return list(self._original_colors)
