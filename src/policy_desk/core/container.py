"""Application dependency container."""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from policy_desk.core.config import AppConfig, load_config
from policy_desk.repositories.policy_repository import PolicyRepository
from policy_desk.services.policy_manager import PolicyManager


@dataclass
class ServiceContainer:
    """Wires the HTTP client, repository and manager."""

    config: AppConfig
    http_client: httpx.Client
    policy_manager: PolicyManager

    def close(self) -> None:
        """Dispose the manager and release the HTTP connection pool."""
        self.policy_manager.close()
        self.http_client.close()


def build_container(config: AppConfig | None = None) -> ServiceContainer:
    """Build dependencies from configuration."""
    config = config or load_config()
    http_client = httpx.Client(
        timeout=config.api.timeout_seconds,
        headers={"Content-Type": "application/json"},
    )
    repository = PolicyRepository(http_client, config.api.base_url)
    return ServiceContainer(
        config=config,
        http_client=http_client,
        policy_manager=PolicyManager(repository),
    )
