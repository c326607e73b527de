"""
Main entry point for the order form demo.
"""

import sys

from PySide6.QtWidgets import QApplication

from gui.demo_window import OrderFormWindow
from validation.config_manager import ConfigManager
from validation.error_handler import init_logging, setup_error_handling


def main() -> int:
    """Main application entry point."""
    app = QApplication(sys.argv)

    config = ConfigManager()
    init_logging(config.get("log_level"))
    setup_error_handling()

    window = OrderFormWindow(config)
    window.show()

    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
