"""Main GUI window listing and managing policies."""

from __future__ import annotations

from PySide6.QtCore import QObject, QThreadPool, Signal
from PySide6.QtWidgets import (
    QAbstractItemView,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from policy_desk.core.formatting import format_currency, format_date
from policy_desk.models.policy import Policy, PolicyId
from policy_desk.services.policy_manager import PolicyManager
from policy_desk.ui.policy_form import PolicyFormDialog
from policy_desk.ui.tasks import LoadPoliciesTask

TABLE_HEADERS = [
    "Policy ID",
    "Beneficiary",
    "Car",
    "TSI",
    "Premium Rate",
    "Premium Amount",
    "Start Date",
    "End Date",
]


class ManagerSignals(QObject):
    """Forwards manager notifications to the UI thread."""

    changed = Signal()


class MainWindow(QMainWindow):
    """GUI for auto-insurance policy management."""

    def __init__(self, policy_manager: PolicyManager):
        super().__init__()
        self.policy_manager = policy_manager
        self.thread_pool = QThreadPool.globalInstance()
        self._visible: list[Policy] = []

        self.manager_signals = ManagerSignals()
        self.manager_signals.changed.connect(self._render)
        self._unsubscribe = policy_manager.subscribe(
            lambda _manager: self.manager_signals.changed.emit()
        )

        self.setWindowTitle("Policy Desk - Auto Insurance Policies")
        self.resize(1200, 720)
        self._build_ui()

        self._render()
        self.refresh_policies()

    def _build_ui(self) -> None:
        central = QWidget()
        layout = QVBoxLayout(central)

        self.error_banner = QLabel()
        self.error_banner.setWordWrap(True)
        self.error_banner.setStyleSheet(
            "background-color: #fee2e2; color: #991b1b; padding: 8px; border-radius: 4px;"
        )
        self.error_banner.hide()

        self.demo_banner = QLabel("Showing built-in demo data. These records are not on the server.")
        self.demo_banner.setStyleSheet(
            "background-color: #fef3c7; color: #92400e; padding: 8px; border-radius: 4px;"
        )
        self.demo_banner.hide()

        toolbar = QHBoxLayout()
        self.search_input = QLineEdit()
        self.search_input.setPlaceholderText("Search by name, car, policy...")
        self.search_input.textChanged.connect(self.policy_manager.set_search_term)
        new_button = QPushButton("New Policy")
        new_button.clicked.connect(self.open_form_for_create)
        edit_button = QPushButton("Edit")
        edit_button.clicked.connect(self.open_form_for_edit)
        delete_button = QPushButton("Delete")
        delete_button.clicked.connect(self.delete_selected_policy)
        self.refresh_button = QPushButton("Refresh")
        self.refresh_button.clicked.connect(self.refresh_policies)
        toolbar.addWidget(self.search_input, 1)
        toolbar.addWidget(new_button)
        toolbar.addWidget(edit_button)
        toolbar.addWidget(delete_button)
        toolbar.addWidget(self.refresh_button)

        self.status_label = QLabel()

        self.policies_table = QTableWidget(0, len(TABLE_HEADERS))
        self.policies_table.setHorizontalHeaderLabels(TABLE_HEADERS)
        self.policies_table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.policies_table.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.policies_table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.policies_table.cellDoubleClicked.connect(lambda _row, _column: self.open_form_for_edit())

        layout.addWidget(QLabel("Auto Insurance Policy Management"))
        layout.addWidget(self.error_banner)
        layout.addWidget(self.demo_banner)
        layout.addLayout(toolbar)
        layout.addWidget(self.status_label)
        layout.addWidget(self.policies_table)
        self.setCentralWidget(central)

    def refresh_policies(self) -> None:
        self.refresh_button.setEnabled(False)
        task = LoadPoliciesTask(self.policy_manager)
        task.signals.done.connect(self._on_refresh_finished)
        task.signals.error.connect(lambda _message: self._on_refresh_finished())
        task.signals.error.connect(lambda message: QMessageBox.critical(self, "Error", message))
        self.thread_pool.start(task)

    def _on_refresh_finished(self) -> None:
        self.refresh_button.setEnabled(True)

    def _selected_policy(self) -> Policy | None:
        row = self.policies_table.currentRow()
        if 0 <= row < len(self._visible):
            return self._visible[row]
        return None

    def open_form_for_create(self) -> None:
        PolicyFormDialog(self.policy_manager, parent=self).exec()

    def open_form_for_edit(self) -> None:
        policy = self._selected_policy()
        if policy is None:
            QMessageBox.information(self, "Notice", "Select a policy first.")
            return
        PolicyFormDialog(self.policy_manager, policy, parent=self).exec()

    def _confirm_delete(self, policy_id: PolicyId) -> bool:
        answer = QMessageBox.question(
            self,
            "Confirm delete",
            f"Are you sure you want to delete policy {policy_id}?",
        )
        return answer == QMessageBox.StandardButton.Yes

    def delete_selected_policy(self) -> None:
        policy = self._selected_policy()
        if policy is None or policy.id is None:
            QMessageBox.information(self, "Notice", "Select a policy first.")
            return
        self.policy_manager.remove(policy.id, self._confirm_delete)

    def _render(self) -> None:
        manager = self.policy_manager
        if manager.closed:
            return

        self.error_banner.setVisible(bool(manager.error))
        self.error_banner.setText(f"Error: {manager.error}" if manager.error else "")
        self.demo_banner.setVisible(manager.is_demo_data)

        self._visible = manager.visible_records
        if manager.loading:
            self.status_label.setText("Loading policies...")
        elif not self._visible:
            self.status_label.setText("No policies found.")
        else:
            self.status_label.setText(f"{len(self._visible)} of {len(manager.records)} policies")
        self._render_policy_table(self.policies_table, self._visible)

    @staticmethod
    def _render_policy_table(table: QTableWidget, policies: list[Policy]) -> None:
        table.setRowCount(len(policies))
        for row_index, policy in enumerate(policies):
            table.setItem(row_index, 0, QTableWidgetItem(str(policy.policy_number or policy.id or "")))
            table.setItem(row_index, 1, QTableWidgetItem(policy.beneficiary_name))
            table.setItem(row_index, 2, QTableWidgetItem(f"{policy.car_brand} {policy.car_type}"))
            table.setItem(row_index, 3, QTableWidgetItem(format_currency(policy.tsi)))
            table.setItem(row_index, 4, QTableWidgetItem(f"{policy.premium_rate}%"))
            table.setItem(row_index, 5, QTableWidgetItem(format_currency(policy.premium_amount)))
            table.setItem(row_index, 6, QTableWidgetItem(format_date(policy.start_date)))
            table.setItem(row_index, 7, QTableWidgetItem(format_date(policy.end_date)))

    def closeEvent(self, event) -> None:  # noqa: N802
        self._unsubscribe()
        self.policy_manager.close()
        super().closeEvent(event)
