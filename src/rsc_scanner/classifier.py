"""Dependency-based RSC indicators for a parsed manifest."""

from __future__ import annotations

from dataclasses import dataclass

from .parsers.package_json import Manifest
from .parsers.semver import major_version

FRAMEWORK_PACKAGE = "next"
SERVER_BRIDGE_PACKAGE = "react-server-dom-webpack"
BASE_LIBRARY = "react"
BASE_LIBRARY_MIN_MAJOR = 19


@dataclass(frozen=True)
class Indicator:
    """A dependency that signals possible server-component usage."""

    package: str
    version: str
    reason: str


def _framework(deps: dict[str, str]) -> Indicator | None:
    version = deps.get(FRAMEWORK_PACKAGE)
    if version is None:
        return None
    return Indicator(
        package=FRAMEWORK_PACKAGE,
        version=version,
        reason=f'Next.js dependency detected ("{FRAMEWORK_PACKAGE}": "{version}")',
    )


def _server_bridge(deps: dict[str, str]) -> Indicator | None:
    version = deps.get(SERVER_BRIDGE_PACKAGE)
    if version is None:
        return None
    return Indicator(
        package=SERVER_BRIDGE_PACKAGE,
        version=version,
        reason=f'{SERVER_BRIDGE_PACKAGE} dependency detected ("{SERVER_BRIDGE_PACKAGE}": "{version}")',
    )


def _base_library(deps: dict[str, str]) -> Indicator | None:
    version = deps.get(BASE_LIBRARY)
    if version is None:
        return None
    major = major_version(version)
    if major is None or major < BASE_LIBRARY_MIN_MAJOR:
        return None
    return Indicator(
        package=BASE_LIBRARY,
        version=version,
        reason=f"React {version} ({BASE_LIBRARY_MIN_MAJOR}+) detected",
    )


# Evaluated in order; the first rule that matches wins.
RULES = (_framework, _server_bridge, _base_library)


def classify(manifest: Manifest) -> Indicator | None:
    """Return the first dependency indicator in ``manifest``, or None."""
    deps = manifest.merged()
    for rule in RULES:
        indicator = rule(deps)
        if indicator is not None:
            return indicator
    return None
