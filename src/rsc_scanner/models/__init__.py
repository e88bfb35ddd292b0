"""Data models for scan targets, verdicts and reports."""

from __future__ import annotations

from .report import Report
from .scan_target import ScanTarget
from .verdict import Verdict

__all__ = [
    "Report",
    "ScanTarget",
    "Verdict",
]
