"""Modal dialog for creating and editing a policy."""

from __future__ import annotations

from datetime import date

from PySide6.QtWidgets import (
    QDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
)

from policy_desk.core.formatting import format_currency, format_date
from policy_desk.core.premium import calculate_premium, to_decimal
from policy_desk.models.policy import Policy
from policy_desk.services.policy_manager import PolicyManager


class PolicyFormDialog(QDialog):
    """Edits a copy of a policy; the manager's list changes only after a save."""

    def __init__(self, policy_manager: PolicyManager, policy: Policy | None = None, parent=None):
        super().__init__(parent)
        self.policy_manager = policy_manager
        self._draft = (policy or Policy.new_draft()).replace()

        self.setWindowTitle("Edit Policy" if not self._draft.is_draft else "Create New Policy")
        self.setModal(True)
        self.resize(480, 360)

        form = QFormLayout()
        self.beneficiary_input = QLineEdit(self._draft.beneficiary_name)
        self.car_brand_input = QLineEdit(self._draft.car_brand)
        self.car_type_input = QLineEdit(self._draft.car_type)
        self.tsi_input = QLineEdit(str(self._draft.tsi))
        self.rate_input = QLineEdit(str(self._draft.premium_rate))
        self.start_date_input = QLineEdit(format_date(self._draft.start_date))
        self.start_date_input.setPlaceholderText("YYYY-MM-DD")
        self.end_date_input = QLineEdit(format_date(self._draft.end_date))
        self.end_date_input.setPlaceholderText("YYYY-MM-DD")
        self.premium_label = QLabel()

        self.tsi_input.textChanged.connect(self._update_premium)
        self.rate_input.textChanged.connect(self._update_premium)

        if self._draft.policy_number:
            form.addRow("Policy Number", QLabel(self._draft.policy_number))
        form.addRow("Beneficiary Name", self.beneficiary_input)
        form.addRow("Car Brand", self.car_brand_input)
        form.addRow("Car Type", self.car_type_input)
        form.addRow("TSI", self.tsi_input)
        form.addRow("Premium Rate (%)", self.rate_input)
        form.addRow("Premium Amount", self.premium_label)
        form.addRow("Start Date", self.start_date_input)
        form.addRow("End Date", self.end_date_input)

        buttons = QHBoxLayout()
        cancel_button = QPushButton("Cancel")
        cancel_button.clicked.connect(self.reject)
        save_button = QPushButton("Save Policy")
        save_button.setDefault(True)
        save_button.clicked.connect(self.submit)
        buttons.addStretch(1)
        buttons.addWidget(cancel_button)
        buttons.addWidget(save_button)

        layout = QVBoxLayout(self)
        layout.addLayout(form)
        layout.addLayout(buttons)

        self._update_premium()

    def _update_premium(self) -> None:
        amount = calculate_premium(self.tsi_input.text(), self.rate_input.text())
        self.premium_label.setText(format_currency(amount))

    @staticmethod
    def _parse_date(raw: str, field_name: str) -> date | None:
        text = raw.strip()
        if not text:
            return None
        try:
            return date.fromisoformat(text)
        except ValueError as error:
            raise ValueError(f"{field_name} must be in YYYY-MM-DD format.") from error

    def draft_from_form(self) -> Policy:
        return self._draft.replace(
            beneficiary_name=self.beneficiary_input.text(),
            car_brand=self.car_brand_input.text(),
            car_type=self.car_type_input.text(),
            tsi=to_decimal(self.tsi_input.text()),
            premium_rate=to_decimal(self.rate_input.text()),
            start_date=self._parse_date(self.start_date_input.text(), "Start date"),
            end_date=self._parse_date(self.end_date_input.text(), "End date"),
        )

    def submit(self) -> None:
        try:
            draft = self.draft_from_form()
        except ValueError as error:
            QMessageBox.critical(self, "Error", str(error))
            return

        if self.policy_manager.save(draft):
            self.accept()
            return
        QMessageBox.critical(self, "Error", self.policy_manager.error or "Failed to save policy.")
