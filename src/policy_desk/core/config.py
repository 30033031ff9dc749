"""Configuration loader for the policy API client."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

import yaml


DEFAULT_BASE_URL = "http://localhost:5126/api/Policy"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class ApiConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


@dataclass(frozen=True)
class LoggingConfig:
    level: str = DEFAULT_LOG_LEVEL


@dataclass(frozen=True)
class AppConfig:
    api: ApiConfig = field(default_factory=ApiConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


DEFAULT_CONFIG_REL_PATH = Path("config/client.yaml")
CONFIG_PATH_ENV = "POLICY_DESK_CONFIG_PATH"
API_URL_ENV = "POLICY_DESK_API_URL"
RUNTIME_ENV_REL_PATH = Path("config/runtime.env")
_RUNTIME_ENV_LOADED = False


def _split_key_value(raw_line: str) -> tuple[str, str] | None:
    """Parse a shell or PowerShell key assignment line."""
    line = raw_line.strip()
    if not line or line.startswith("#"):
        return None

    if line.startswith("$env:"):
        line = line[len("$env:") :]
    elif line.startswith("export "):
        line = line[len("export ") :]

    if "=" not in line:
        return None

    key, value = line.split("=", 1)
    key = key.strip()
    value = value.strip()
    if not key:
        return None

    if (value.startswith("'") and value.endswith("'")) or (
        value.startswith('"') and value.endswith('"')
    ):
        value = value[1:-1]

    return key, value


def _project_root() -> Path:
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[3]


def _iter_env_candidates() -> list[Path]:
    """Return local files that may hold environment overrides."""
    roots = [Path.cwd(), _project_root()]
    unique: list[Path] = []
    for root in roots:
        for path in (root / ".env.local", root / RUNTIME_ENV_REL_PATH):
            resolved = path.resolve()
            if resolved not in unique:
                unique.append(resolved)
    return unique


def _load_env_from_file(path: Path) -> None:
    """Load KEY=VALUE lines into the process environment without overriding it."""
    if not path.is_file():
        return
    with path.open("r", encoding="utf-8") as file:
        for line in file:
            parsed = _split_key_value(line)
            if not parsed:
                continue
            key, value = parsed
            if key not in os.environ:
                os.environ[key] = value


def ensure_runtime_env_loaded() -> None:
    """Load local env files once per process."""
    global _RUNTIME_ENV_LOADED
    if _RUNTIME_ENV_LOADED:
        return
    for path in _iter_env_candidates():
        _load_env_from_file(path)
    _RUNTIME_ENV_LOADED = True


def resolve_default_config_path() -> Path:
    """Resolve configuration path for source and packaged execution."""
    env_path = os.getenv(CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path)

    candidates: list[Path] = []
    if getattr(sys, "frozen", False):
        candidates.append(Path(sys.executable).resolve().parent / DEFAULT_CONFIG_REL_PATH)
    candidates.append(Path.cwd() / DEFAULT_CONFIG_REL_PATH)
    candidates.append(Path(__file__).resolve().parents[3] / DEFAULT_CONFIG_REL_PATH)

    for candidate in candidates:
        if candidate.exists():
            return candidate
    return candidates[0]


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load the app configuration from YAML, falling back to defaults."""
    ensure_runtime_env_loaded()
    path = config_path or resolve_default_config_path()

    raw: dict = {}
    if path.exists():
        with path.open("r", encoding="utf-8") as file:
            raw = yaml.safe_load(file) or {}

    api = raw.get("api") or {}
    log = raw.get("logging") or {}
    base_url = os.getenv(API_URL_ENV) or str(api.get("base_url", DEFAULT_BASE_URL))

    return AppConfig(
        api=ApiConfig(
            base_url=base_url.rstrip("/"),
            timeout_seconds=float(api.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS)),
        ),
        logging=LoggingConfig(
            level=str(log.get("level", DEFAULT_LOG_LEVEL)).upper(),
        ),
    )
