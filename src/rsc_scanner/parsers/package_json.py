"""Parse package.json into the dependency sections the classifier consumes."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from collections.abc import Mapping
from typing import Any

from jsonschema import Draft202012Validator

MANIFEST_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "dependencies": {"type": ["object", "null"]},
        "devDependencies": {"type": ["object", "null"]},
    },
}

_VALIDATOR = Draft202012Validator(MANIFEST_SCHEMA)


class ManifestError(ValueError):
    """Raised when a manifest cannot be read or does not have a usable shape."""


def _frozen(mapping: Mapping[str, str] | None) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class Manifest:
    """Runtime and development dependency maps (name -> version range)."""

    dependencies: Mapping[str, str] = field(default_factory=dict)
    dev_dependencies: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "dependencies", _frozen(self.dependencies))
        object.__setattr__(self, "dev_dependencies", _frozen(self.dev_dependencies))

    def merged(self) -> dict[str, str]:
        """Union of both maps; runtime entries win over development ones."""
        merged = dict(self.dev_dependencies)
        merged.update(self.dependencies)
        return merged

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Manifest:
        return cls(
            dependencies=_section(data, "dependencies"),
            dev_dependencies=_section(data, "devDependencies"),
        )


def _section(data: Mapping[str, Any], key: str) -> dict[str, str]:
    deps = data.get(key) or {}
    return {str(name): str(version) for name, version in deps.items() if version is not None}


def _format_errors(errors: list[Any]) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"{pointer or '<root>'}: {error.message}")
    return "; ".join(messages)


def parse(path: Path) -> Manifest:
    """Return the manifest stored at ``path``.

    Raises:
        ManifestError: if the file cannot be read, is not JSON, or its
            dependency sections are not objects.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(f"Failed to read {path}: {exc}") from exc

    try:
        data = json.loads(content)
    except (ValueError, RecursionError) as exc:
        raise ManifestError(f"Invalid JSON in {path}: {exc}") from exc

    errors = sorted(_VALIDATOR.iter_errors(data), key=lambda e: list(e.path))
    if errors:
        raise ManifestError(f"Unexpected manifest shape in {path}: {_format_errors(errors)}")

    return Manifest.from_dict(data)
