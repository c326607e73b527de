"""
Demo order form exercising single-shot field validation.
"""

import logging

from PySide6.QtWidgets import (
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from validation.config_manager import ConfigManager
from validation.rules import Invalid

from .form_validator import FormValidator

logger = logging.getLogger(__name__)


class OrderFormWindow(QMainWindow):
    """
    Order form whose fields are validated when Submit is pressed.

    Validation stops at the first invalid field so only one error dialog
    is shown per submission.
    """

    MAX_QUANTITY = 12
    MAX_UNIT_PRICE = 1000.0

    def __init__(self, config: ConfigManager | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Order Form")

        self.config_manager = config or ConfigManager()
        self.patterns = self.config_manager.load_pattern_library()
        self.form_validator = FormValidator(self, config=self.config_manager)

        self.name_edit = QLineEdit()
        self.email_edit = QLineEdit()
        self.quantity_edit = QLineEdit()
        self.price_edit = QLineEdit()
        self.summary_label = QLabel("")

        self.submit_button = QPushButton("Submit")
        self.reset_button = QPushButton("Reset")

        self._setup_ui()

        self.submit_button.clicked.connect(self.submit)
        self.reset_button.clicked.connect(self.reset)

    def _setup_ui(self) -> None:
        form = QFormLayout()
        form.addRow("Name:", self.name_edit)
        form.addRow("Email:", self.email_edit)
        form.addRow(f"Quantity (1-{self.MAX_QUANTITY}):", self.quantity_edit)
        form.addRow("Unit price:", self.price_edit)

        for key, widget in (
            ("name", self.name_edit),
            ("email", self.email_edit),
            ("quantity", self.quantity_edit),
            ("price", self.price_edit),
        ):
            self.form_validator.register_field(key, widget)

        buttons = QHBoxLayout()
        buttons.addStretch()
        buttons.addWidget(self.reset_button)
        buttons.addWidget(self.submit_button)

        layout = QVBoxLayout()
        layout.addLayout(form)
        layout.addWidget(self.summary_label)
        layout.addLayout(buttons)

        central = QWidget()
        central.setLayout(layout)
        self.setCentralWidget(central)

    def submit(self) -> bool:
        """
        Validate every field in order.

        Returns:
            True if the order was accepted
        """
        not_empty = self.patterns.get("not_empty")
        email = self.patterns.get("email")

        results = []
        for validate in (
            lambda: self.form_validator.validate_string("name", not_empty.pattern, "Please enter your name."),
            lambda: self.form_validator.validate_string("email", email.pattern, email.message),
            lambda: self.form_validator.validate_int(
                "quantity", f"Quantity must be a whole number from 1 to {self.MAX_QUANTITY}.", 1, self.MAX_QUANTITY
            ),
            lambda: self.form_validator.validate_double(
                "price", "Unit price must be a positive amount.", 0.01, self.MAX_UNIT_PRICE
            ),
        ):
            result = validate()
            if isinstance(result, Invalid):
                self.summary_label.setText("")
                return False
            results.append(result.value)

        name, _email, quantity, price = results
        self.summary_label.setText(f"Thank you, {name}: {quantity} x {price:.2f} = {quantity * price:.2f}")
        logger.info(f"Order accepted: {quantity} x {price:.2f}")
        return True

    def reset(self) -> None:
        """Clear all fields and any error highlighting."""
        self.form_validator.reset_all()
        for widget in (self.name_edit, self.email_edit, self.quantity_edit, self.price_edit):
            widget.clear()
        self.summary_label.setText("")
