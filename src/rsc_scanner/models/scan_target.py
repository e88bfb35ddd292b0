"""Scan target model."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class ScanTarget:
    """A directory selected for analysis plus its display label.

    Identity is the path; the label is only used for display.
    """

    path: Path
    label: str = field(compare=False)

    def __post_init__(self) -> None:
        if not self.label:
            raise ValueError("ScanTarget label must be non-empty")
