"""Directory traversal and manifest discovery utilities."""

from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass
from pathlib import Path
from collections.abc import Iterable, Iterator

from .models import ScanTarget

logger = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"

DEFAULT_EXCLUDES = frozenset({"node_modules", ".git", "vendor", "dist", "build", ".next"})


@dataclass(frozen=True)
class ExclusionPolicy:
    """Directory names that are never descended into, at any depth."""

    names: frozenset[str] = DEFAULT_EXCLUDES

    def is_excluded(self, name: str) -> bool:
        return name in self.names

    def extended(self, extra: Iterable[str]) -> ExclusionPolicy:
        return ExclusionPolicy(names=self.names | frozenset(extra))


DEFAULT_POLICY = ExclusionPolicy()


def list_entries(directory: Path) -> list[os.DirEntry[str]] | None:
    """Return the sorted entries of ``directory``, or None if it cannot be listed."""
    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except OSError as exc:
        logger.debug("Skipping unreadable directory %s: %s", directory, exc)
        return None
    return sorted(entries, key=lambda entry: entry.name)


def is_real_dir(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def _expired(deadline: float | None) -> bool:
    return deadline is not None and time.monotonic() >= deadline


class DirectoryWalker:
    """Stack-based depth-first walk over real directories.

    The start path is visited first. Children are pushed in reverse lexical
    order so they pop in lexical order. Symbolic links are not followed.
    When ``deadline`` (a ``time.monotonic()`` value) passes, iteration stops
    and ``truncated`` is set.
    """

    def __init__(
        self,
        policy: ExclusionPolicy = DEFAULT_POLICY,
        deadline: float | None = None,
    ) -> None:
        self.policy = policy
        self.deadline = deadline
        self.truncated = False

    def walk(self, start: Path) -> Iterator[Path]:
        stack = [start]
        while stack:
            if _expired(self.deadline):
                logger.warning("Scan deadline reached; stopping walk under %s", start)
                self.truncated = True
                return
            current = stack.pop()
            yield current

            entries = list_entries(current)
            if entries is None:
                continue

            for entry in reversed(entries):
                if not is_real_dir(entry):
                    continue
                if self.policy.is_excluded(entry.name):
                    continue
                stack.append(Path(entry.path))


def walk_directories(
    start: Path,
    policy: ExclusionPolicy = DEFAULT_POLICY,
) -> list[Path]:
    """Return every directory reachable from ``start`` (inclusive)."""
    return list(DirectoryWalker(policy).walk(start))


def has_manifest(directory: Path) -> bool:
    """True when a manifest file sits directly inside ``directory``."""
    try:
        return (directory / MANIFEST_NAME).is_file()
    except OSError:
        return False


def make_label(prefix: str, base: Path, path: Path) -> str:
    rel = path.relative_to(base).as_posix()
    if rel == ".":
        return prefix or "."
    return f"{prefix}/{rel}" if prefix else rel


def find_manifest_dirs(
    root: Path,
    policy: ExclusionPolicy = DEFAULT_POLICY,
    label_prefix: str = "",
    walker: DirectoryWalker | None = None,
) -> list[ScanTarget]:
    """Find every directory under ``root`` (inclusive) that holds a manifest.

    Descent continues past a match, so nested packages are separate targets.
    Labels are ``root``-relative and prefixed with ``label_prefix``.
    """
    walker = walker or DirectoryWalker(policy)
    found: list[ScanTarget] = []
    for directory in walker.walk(root):
        if has_manifest(directory):
            found.append(ScanTarget(path=directory, label=make_label(label_prefix, root, directory)))
    return found
