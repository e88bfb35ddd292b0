"""Verdict model."""

from __future__ import annotations

from dataclasses import dataclass

from .scan_target import ScanTarget


@dataclass(frozen=True)
class Verdict:
    """Classification outcome for one scan target."""

    target: ScanTarget
    has_manifest: bool
    vulnerable: bool
    reason: str

    def __post_init__(self) -> None:
        if not self.reason:
            raise ValueError("Verdict reason must be non-empty")
        if self.vulnerable and not self.has_manifest:
            raise ValueError("A target without a manifest cannot be vulnerable")

    @property
    def label(self) -> str:
        return self.target.label

    def to_dict(self) -> dict[str, object]:
        return {
            "target": self.target.label,
            "path": str(self.target.path),
            "hasPackageJson": self.has_manifest,
            "vulnerable": self.vulnerable,
            "reason": self.reason,
        }
