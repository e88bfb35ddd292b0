"""Scan settings loader.

Settings come from an optional JSON file (explicit path, else the
``RSC_SCANNER_CONFIG`` environment variable). Every field is optional::

    {
        "extraExcludes": ["coverage"],
        "workers": 4,
        "deadlineSeconds": 120,
        "warnOnly": false
    }

Validation is done here by hand; problems raise ``ConfigError``.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from .discovery import DEFAULT_POLICY, ExclusionPolicy

CONFIG_PATH_ENV_VAR = "RSC_SCANNER_CONFIG"
WARN_ONLY_ENV_VAR = "RSC_SCANNER_WARN_ONLY"

_TRUTHY = {"1", "true", "yes", "y"}


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be loaded or is invalid."""


@dataclass(slots=True, frozen=True)
class ScanSettings:
    """Options shared by every scan mode."""

    extra_excludes: frozenset[str] = frozenset()
    workers: int = 1
    deadline_seconds: float | None = None
    warn_only: bool = False

    def __post_init__(self) -> None:
        if self.workers < 1:
            raise ConfigError("'workers' must be at least 1")
        if self.deadline_seconds is not None and self.deadline_seconds <= 0:
            raise ConfigError("'deadlineSeconds' must be positive")

    @property
    def policy(self) -> ExclusionPolicy:
        return DEFAULT_POLICY.extended(self.extra_excludes)

    def with_overrides(self, **changes: Any) -> ScanSettings:
        """Return a copy with every non-None keyword applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ScanSettings:
        excludes = data.get("extraExcludes", [])
        if not isinstance(excludes, list) or not all(
            isinstance(name, str) and name for name in excludes
        ):
            raise ConfigError("'extraExcludes' must be an array of non-empty strings")

        workers = data.get("workers", 1)
        if isinstance(workers, bool) or not isinstance(workers, int):
            raise ConfigError("'workers' must be an integer")

        deadline = data.get("deadlineSeconds")
        if deadline is not None and (
            isinstance(deadline, bool) or not isinstance(deadline, (int, float))
        ):
            raise ConfigError("'deadlineSeconds' must be a number")

        warn_only = data.get("warnOnly", False)
        if not isinstance(warn_only, bool):
            raise ConfigError("'warnOnly' must be a boolean")

        return cls(
            extra_excludes=frozenset(excludes),
            workers=workers,
            deadline_seconds=float(deadline) if deadline is not None else None,
            warn_only=warn_only,
        )


def _resolve_config_path(path: Path | str | None = None) -> Path | None:
    """Explicit path first, then the environment variable, else None."""
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def warn_only_from_env() -> bool:
    return os.getenv(WARN_ONLY_ENV_VAR, "").strip().lower() in _TRUTHY


def load_settings(path: Path | str | None = None) -> ScanSettings:
    """Load settings from JSON, or return defaults when no file is configured.

    Raises:
        ConfigError: If a configured file is missing, unreadable or invalid.
    """
    config_path = _resolve_config_path(path)
    settings = ScanSettings()

    if config_path is not None:
        if not config_path.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")

        try:
            content = config_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Failed to read configuration file: {exc}") from exc

        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc

        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a JSON object")

        settings = ScanSettings.from_dict(data)

    if warn_only_from_env():
        settings = replace(settings, warn_only=True)

    return settings
