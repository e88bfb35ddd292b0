"""Core scanning entrypoints.

This module holds no console or argument handling so that it can back both
the generic tree scanner and the WordPress plugins/themes scanner.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from collections.abc import Iterable, Sequence

from .analyzer import analyze_package, missing_manifest_verdict
from .config import ScanSettings
from .discovery import (
    DirectoryWalker,
    ExclusionPolicy,
    find_manifest_dirs,
    is_real_dir,
    list_entries,
    make_label,
)
from .models import Report, ScanTarget, Verdict
from .report import aggregate

logger = logging.getLogger(__name__)

WORDPRESS_CONTAINERS = ("plugins", "themes")


class RootNotFoundError(RuntimeError):
    """Raised when a supplied root path is missing or is not a directory."""


def _require_dir(root: Path) -> Path:
    root = Path(root)
    if not root.is_dir():
        raise RootNotFoundError(f"Root directory not found: {root}")
    return root.resolve()


def _walker(settings: ScanSettings) -> DirectoryWalker:
    deadline = None
    if settings.deadline_seconds is not None:
        deadline = time.monotonic() + settings.deadline_seconds
    return DirectoryWalker(settings.policy, deadline=deadline)


def _resolve(items: Sequence[ScanTarget | Verdict], settings: ScanSettings) -> list[Verdict]:
    """Analyze pending targets and return verdicts in discovery order.

    Targets are independent and read-only, so they may be analyzed on a
    bounded pool; ``Executor.map`` keeps the input order.
    """
    policy = settings.policy
    targets = [item for item in items if isinstance(item, ScanTarget)]

    if settings.workers > 1 and len(targets) > 1:
        with ThreadPoolExecutor(max_workers=settings.workers) as pool:
            analyzed = iter(list(pool.map(lambda t: analyze_package(t, policy), targets)))
    else:
        analyzed = (analyze_package(t, policy) for t in targets)

    return [next(analyzed) if isinstance(item, ScanTarget) else item for item in items]


def _logical_root_items(
    root: Path,
    label: str,
    policy: ExclusionPolicy,
    walker: DirectoryWalker,
) -> list[ScanTarget | Verdict]:
    targets = find_manifest_dirs(root, policy, label_prefix=label, walker=walker)
    if not targets and not walker.truncated:
        return [missing_manifest_verdict(ScanTarget(path=root, label=label))]
    return list(targets)


def _container_items(
    container: Path,
    prefix: str,
    settings: ScanSettings,
    walker: DirectoryWalker,
) -> list[ScanTarget | Verdict]:
    entries = list_entries(container)
    if entries is None:
        logger.warning("Cannot list %s", container)
        return []

    items: list[ScanTarget | Verdict] = []
    for entry in entries:
        if not is_real_dir(entry):
            continue
        label = f"{prefix}/{entry.name}" if prefix else entry.name
        items.extend(_logical_root_items(Path(entry.path), label, settings.policy, walker))
        if walker.truncated:
            break
    return items


def scan_tree(root: Path, settings: ScanSettings | None = None) -> Report:
    """Classify every directory under ``root``, including ``root`` itself.

    Directories without a manifest are reported as such.
    """
    settings = settings or ScanSettings()
    root = _require_dir(root)
    walker = _walker(settings)

    targets = [
        ScanTarget(path=directory, label=make_label("", root, directory))
        for directory in walker.walk(root)
    ]
    logger.info("Discovered %d folder(s) under %s", len(targets), root)

    return aggregate(_resolve(targets, settings), partial=walker.truncated)


def scan_roots(roots: Iterable[Path], settings: ScanSettings | None = None) -> Report:
    """Treat each root as a logical root and classify every manifest under it.

    A root without any manifest yields a single "not found anywhere" verdict.
    """
    settings = settings or ScanSettings()
    resolved = [_require_dir(root) for root in roots]
    walker = _walker(settings)

    items: list[ScanTarget | Verdict] = []
    for root in resolved:
        items.extend(_logical_root_items(root, root.name or str(root), settings.policy, walker))
        if walker.truncated:
            break

    return aggregate(_resolve(items, settings), partial=walker.truncated)


def scan_children(
    root: Path,
    settings: ScanSettings | None = None,
    label_prefix: str = "",
) -> Report:
    """Treat each immediate child directory of ``root`` as a logical root."""
    settings = settings or ScanSettings()
    root = _require_dir(root)
    walker = _walker(settings)

    items = _container_items(root, label_prefix, settings, walker)
    return aggregate(_resolve(items, settings), partial=walker.truncated)


def scan_wordpress(root: Path, settings: ScanSettings | None = None) -> Report:
    """Scan every plugin and theme under ``<root>/wp-content``.

    A missing plugins or themes folder is logged and contributes nothing.
    """
    settings = settings or ScanSettings()
    root = _require_dir(root)
    content = root / "wp-content"
    walker = _walker(settings)

    items: list[ScanTarget | Verdict] = []
    for name in WORDPRESS_CONTAINERS:
        container = content / name
        if not container.is_dir():
            logger.warning("Folder not found: %s", container)
            continue
        logger.info("Scanning %s: %s", name, container)
        items.extend(_container_items(container, name, settings, walker))
        if walker.truncated:
            break

    return aggregate(_resolve(items, settings), partial=walker.truncated)
