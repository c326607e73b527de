"""
Shared fixtures for the validation toolkit tests.
"""

import os

# Set offscreen platform to prevent display errors on headless systems
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest  # noqa: E402
from PySide6.QtCore import QStandardPaths  # noqa: E402
from PySide6.QtWidgets import QApplication  # noqa: E402

# Keep QSettings and log files out of the real user directories
QStandardPaths.setTestModeEnabled(True)


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """Create QApplication for all tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


class RecordingSink:
    """Message sink that keeps every message it is shown."""

    def __init__(self):
        self.messages = []

    def show(self, message):
        self.messages.append(message)


class FakeHighlighter:
    """In-memory field highlighter."""

    def __init__(self, colors=None):
        self.colors = dict(colors or {})
        self.dialogs = []
        self.color_reads = []

    def background_color(self, field_id):
        self.color_reads.append(field_id)
        return self.colors.get(field_id, "#ffffff")

    def set_background_color(self, field_id, color):
        self.colors[field_id] = color

    def show_error_dialog(self, field_id, message):
        self.dialogs.append((field_id, message))


@pytest.fixture
def sink():
    """Message sink recording error messages."""
    return RecordingSink()


@pytest.fixture
def highlighter():
    """Fake highlighter with two white fields."""
    return FakeHighlighter({"name": "#ffffff", "age": "#ffffff"})
