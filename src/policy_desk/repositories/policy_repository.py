"""HTTP repository for the policy REST resource."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from policy_desk.core.errors import NetworkError
from policy_desk.models.policy import Policy, PolicyId

logger = logging.getLogger(__name__)


class PolicyRepository:
    """Handles policy persistence through the backend API."""

    def __init__(self, client: httpx.Client, base_url: str):
        self._client = client
        self._base_url = base_url.rstrip("/")

    def _item_url(self, policy_id: PolicyId) -> str:
        return f"{self._base_url}/{policy_id}"

    def _send(self, method: str, url: str, json: dict[str, Any] | None = None) -> httpx.Response:
        logger.debug("%s %s", method, url)
        try:
            response = self._client.request(method, url, json=json)
            response.raise_for_status()
        except httpx.HTTPStatusError as error:
            status = error.response.status_code
            logger.error("Policy API returned %s for %s %s", status, method, url)
            raise NetworkError(f"HTTP error! status: {status}", status_code=status) from error
        except httpx.RequestError as error:
            logger.error("Could not reach policy API at %s: %s", url, error)
            raise NetworkError(f"Request to {url} failed: {error}") from error
        return response

    def list_policies(self) -> list[Policy]:
        """Fetch every policy from the backend.

        A body that is not a JSON array of objects is reported as NetworkError.
        """
        response = self._send("GET", self._base_url)
        try:
            data = response.json()
        except ValueError as error:
            raise NetworkError("Policy API returned a non-JSON body.") from error
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            logger.error("Policy API returned an unexpected list body: %.200r", data)
            raise NetworkError("Policy API returned an unexpected response shape.")
        return [Policy.from_payload(item) for item in data]

    def create_policy(self, policy: Policy) -> None:
        """Create a policy; the backend assigns its id."""
        payload = policy.to_payload()
        payload.pop("id", None)
        self._send("POST", self._base_url, json=payload)

    def update_policy(self, policy_id: PolicyId, policy: Policy) -> None:
        """Replace an existing policy."""
        self._send("PUT", self._item_url(policy_id), json=policy.to_payload())

    def delete_policy(self, policy_id: PolicyId) -> None:
        """Delete a policy by id."""
        self._send("DELETE", self._item_url(policy_id))
