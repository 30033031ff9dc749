"""Background worker tasks used by the main GUI window."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import QObject, QRunnable, Signal

if TYPE_CHECKING:
    from policy_desk.services.policy_manager import PolicyManager


class TaskSignals(QObject):
    """Signals for background manager tasks."""

    done = Signal()
    error = Signal(str)


class LoadPoliciesTask(QRunnable):
    """Refresh the policy list without blocking the UI thread."""

    def __init__(self, policy_manager: PolicyManager):
        super().__init__()
        self.policy_manager = policy_manager
        self.signals = TaskSignals()

    def run(self) -> None:
        try:
            self.policy_manager.refresh()
            self.signals.done.emit()
        except Exception as error:  # pylint: disable=broad-except
            # Worker boundary: convert any failure to a user-visible message.
            self.signals.error.emit(str(error))
