"""Error types raised by the policy client."""

from __future__ import annotations


class PolicyDeskError(Exception):
    """Base class for client errors."""


class NetworkError(PolicyDeskError):
    """Transport failure or non-success response from the policy API."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
