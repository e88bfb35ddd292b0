"""Report aggregation and exit-code selection."""

from __future__ import annotations

from collections.abc import Iterable

from .models import Report, Verdict

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_FINDINGS = 2


def aggregate(verdicts: Iterable[Verdict], partial: bool = False) -> Report:
    """Collect verdicts in the order given and count the vulnerable ones.

    No reordering or deduplication happens here; duplicate targets would be
    counted twice.
    """
    collected = tuple(verdicts)
    vulnerable_count = sum(1 for verdict in collected if verdict.vulnerable)
    return Report(verdicts=collected, vulnerable_count=vulnerable_count, partial=partial)


def exit_code(report: Report, warn_only: bool = False) -> int:
    if report.has_findings and not warn_only:
        return EXIT_FINDINGS
    return EXIT_OK
