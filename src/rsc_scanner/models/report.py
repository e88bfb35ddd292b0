"""Report model."""

from __future__ import annotations

from dataclasses import dataclass

from .verdict import Verdict


@dataclass(frozen=True)
class Report:
    """Ordered verdicts for one run plus the derived vulnerable count."""

    verdicts: tuple[Verdict, ...]
    vulnerable_count: int
    partial: bool = False

    def __post_init__(self) -> None:
        if self.vulnerable_count < 0:
            raise ValueError("vulnerable_count must be non-negative")

    @property
    def has_findings(self) -> bool:
        return self.vulnerable_count > 0

    def to_dict(self) -> dict[str, object]:
        return {
            "version": "1",
            "hasFindings": self.has_findings,
            "partial": self.partial,
            "totals": {
                "targets": len(self.verdicts),
                "vulnerable": self.vulnerable_count,
            },
            "results": [verdict.to_dict() for verdict in self.verdicts],
        }
