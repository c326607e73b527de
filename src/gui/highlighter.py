"""
QLineEdit implementation of the field-highlighting collaborator.

Paints field backgrounds through the widget palette and shows error
dialogs; the validation core decides when either happens.
"""

from __future__ import annotations

import logging

from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QLineEdit, QMessageBox

logger = logging.getLogger(__name__)


class LineEditHighlighter:
    """
    Maps field identifiers to QLineEdit widgets and renders their error state.

    Colors are exchanged as "#rrggbb" strings so the registry stays free of
    Qt types.
    """

    DIALOG_TITLE = "Invalid Input"

    def __init__(self) -> None:
        self._widgets: dict[str, QLineEdit] = {}

    def register(self, field_id: str, widget: QLineEdit) -> None:
        self._widgets[field_id] = widget

    def widget(self, field_id: str) -> QLineEdit:
        try:
            return self._widgets[field_id]
        except KeyError:
            raise KeyError(f"Unknown field '{field_id}'") from None

    def text(self, field_id: str) -> str:
        return self.widget(field_id).text()

    def background_color(self, field_id: str) -> str:
        return self.widget(field_id).palette().color(QPalette.ColorRole.Base).name()

    def set_background_color(self, field_id: str, color: str) -> None:
        widget = self.widget(field_id)
        palette = widget.palette()
        palette.setColor(QPalette.ColorRole.Base, QColor(color))
        widget.setPalette(palette)

    def set_error_state(self, field_id: str, message: str | None) -> None:
        """Expose the error on the widget (hasError property and tooltip)."""
        widget = self.widget(field_id)
        widget.setProperty("hasError", message is not None)
        widget.setToolTip(f"Error: {message}" if message else "")
        widget.style().polish(widget)  # Refresh styling

    def show_error_dialog(self, field_id: str, message: str) -> None:
        """Show a modal error dialog anchored to the field, then focus it."""
        widget = self.widget(field_id)

        msg_box = QMessageBox(widget)
        msg_box.setWindowTitle(self.DIALOG_TITLE)
        msg_box.setText(message)
        msg_box.setIcon(QMessageBox.Icon.Critical)
        msg_box.setStandardButtons(QMessageBox.StandardButton.Ok)
        msg_box.exec()

        widget.setFocus()
        widget.selectAll()
