"""Policy manager: owns the loaded policies and coordinates API calls."""

from __future__ import annotations

import logging
from collections.abc import Callable

from policy_desk.core.errors import NetworkError
from policy_desk.core.validation import validate_policy
from policy_desk.models.policy import Policy, PolicyId
from policy_desk.repositories.policy_repository import PolicyRepository
from policy_desk.services.demo_data import demo_policies
from policy_desk.services.policy_search import filter_policies

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = (
    "Failed to fetch policies. Make sure the backend server is running and accessible."
)

Listener = Callable[["PolicyManager"], None]


class PolicyManager:
    """Coordinates policy use cases and notifies views about state changes.

    Network failures never escape an operation; they are turned into
    ``error``. A failed listing falls back to the built-in demo records and
    flags them with ``is_demo_data``.
    """

    def __init__(self, repository: PolicyRepository):
        self._repository = repository
        self._listeners: list[Listener] = []
        self._closed = False
        self.records: list[Policy] = []
        self.loading = True
        self.error: str | None = None
        self.is_demo_data = False
        self.search_term = ""

    @property
    def visible_records(self) -> list[Policy]:
        return filter_policies(self.records, self.search_term)

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener and return a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        if self._closed:
            return
        for listener in list(self._listeners):
            listener(self)

    def _start(self) -> None:
        self.loading = True
        self._notify()

    def _fail(self, message: str) -> None:
        self.loading = False
        self.error = message
        self._notify()

    def close(self) -> None:
        """Dispose the manager; responses arriving later are ignored."""
        self._closed = True
        self._listeners.clear()

    def clear_error(self) -> None:
        self.error = None
        self._notify()

    def set_search_term(self, term: str) -> None:
        self.search_term = term
        self._notify()

    def refresh(self) -> None:
        """Reload every policy, falling back to demo data when listing fails."""
        if self._closed:
            return
        self._start()
        try:
            records = self._repository.list_policies()
        except NetworkError as error:
            if self._closed:
                return
            logger.warning("Listing policies failed, showing demo data: %s", error)
            self.records = demo_policies()
            self.is_demo_data = True
            self._fail(FETCH_ERROR_MESSAGE)
            return
        if self._closed:
            logger.debug("Discarding policy list received after close")
            return
        self.records = records
        self.is_demo_data = False
        self.error = None
        self.loading = False
        logger.info("Loaded %d policies", len(records))
        self._notify()

    def save(self, draft: Policy) -> bool:
        """Create or update a policy.

        Returns True when the backend accepted the write, meaning the editing
        view may close. On failure the draft is left untouched.
        """
        if self._closed:
            return False
        try:
            policy = validate_policy(draft)
        except ValueError as error:
            self._fail(str(error))
            return False

        is_update = policy.id is not None
        action = "update" if is_update else "create"
        self._start()
        try:
            if is_update:
                self._repository.update_policy(policy.id, policy)
            else:
                self._repository.create_policy(policy)
        except NetworkError as error:
            logger.error("Could not %s policy: %s", action, error)
            if not self._closed:
                self._fail(f"Failed to {action} policy.")
            return False

        logger.info("Policy %s succeeded (id=%s)", action, policy.id)
        self.refresh()
        return True

    def remove(self, policy_id: PolicyId, confirm: Callable[[PolicyId], bool]) -> bool:
        """Delete a policy once ``confirm`` approves it."""
        if self._closed:
            return False
        if not confirm(policy_id):
            logger.debug("Deletion of policy %s cancelled", policy_id)
            return False

        self._start()
        try:
            self._repository.delete_policy(policy_id)
        except NetworkError as error:
            logger.error("Could not delete policy %s: %s", policy_id, error)
            if not self._closed:
                self._fail("Failed to delete policy.")
            return False

        logger.info("Deleted policy %s", policy_id)
        self.refresh()
        return True
