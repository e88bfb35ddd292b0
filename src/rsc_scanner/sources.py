"""Source-file collection and RSC marker detection."""

from __future__ import annotations

import logging
from pathlib import Path

from .discovery import DEFAULT_POLICY, ExclusionPolicy, list_entries

logger = logging.getLogger(__name__)

CODE_EXTENSIONS = frozenset({".js", ".jsx", ".ts", ".tsx", ".mjs", ".cjs"})

MARKERS = (
    '"use server"',
    "'use server'",
    "react-server-dom-webpack",
)


def collect_code_files(directory: Path, policy: ExclusionPolicy = DEFAULT_POLICY) -> list[Path]:
    """Return JS/TS source files under ``directory``, skipping excluded dirs."""
    files: list[Path] = []
    stack = [directory]

    while stack:
        current = stack.pop()
        entries = list_entries(current)
        if entries is None:
            continue

        for entry in reversed(entries):
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError:
                continue
            if is_dir:
                if not policy.is_excluded(entry.name):
                    stack.append(Path(entry.path))
            elif Path(entry.name).suffix.lower() in CODE_EXTENSIONS:
                files.append(Path(entry.path))

    return files


def read_source(path: Path) -> str | None:
    """Return the text of ``path`` or None when it cannot be read as UTF-8."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Cannot read %s: %s", path, exc)
        return None


def has_markers(path: Path) -> bool:
    content = read_source(path)
    if content is None:
        return False
    return any(marker in content for marker in MARKERS)


def find_marker_file(directory: Path, policy: ExclusionPolicy = DEFAULT_POLICY) -> Path | None:
    """Return the first code file under ``directory`` containing a marker."""
    for path in collect_code_files(directory, policy):
        if has_markers(path):
            return path
    return None
