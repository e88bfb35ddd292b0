"""Human-readable report rendering for the console and $GITHUB_STEP_SUMMARY."""

from __future__ import annotations

from .models import Report

MARK_SAFE = "✔️"
MARK_VULNERABLE = "❌"


def render_text(report: Report, title: str = "React Server Components Scan") -> str:
    """Return the console report: one block per verdict plus a closing line."""
    lines = [f"====== {title} ======", ""]

    for verdict in report.verdicts:
        mark = MARK_VULNERABLE if verdict.vulnerable else MARK_SAFE
        lines.append(f"{mark}  {verdict.label}")
        lines.append(f"    - package.json: {'Yes' if verdict.has_manifest else 'No'}")
        lines.append(f"    - Reason: {verdict.reason}")
        lines.append("")

    lines.append("=" * (len(title) + 14))
    lines.append("")

    if report.partial:
        lines.append("⚠️ Scan deadline reached; results are partial.")
    if report.vulnerable_count == 0:
        lines.append(f"{MARK_SAFE} All scanned folders appear SAFE.")
    else:
        lines.append(
            f"{MARK_VULNERABLE} {report.vulnerable_count} folder(s) may be using "
            "React Server Components, please review."
        )

    return "\n".join(lines) + "\n"


def render_summary(report: Report) -> str:
    """Return a Markdown string with totals and a table of verdicts."""
    lines = []
    lines.append("# rsc-scanner Summary")
    lines.append("")
    lines.append(
        f"Total targets: {len(report.verdicts)} | Possibly vulnerable: {report.vulnerable_count}"
    )
    if report.partial:
        lines.append("")
        lines.append("_Scan deadline reached; results are partial._")
    lines.append("")
    lines.append("| Target | package.json | Status | Reason |")
    lines.append("| --- | --- | --- | --- |")

    for verdict in report.verdicts:
        status = "POSSIBLY VULNERABLE" if verdict.vulnerable else "SAFE"
        has_pkg = "Yes" if verdict.has_manifest else "No"
        reason = verdict.reason.replace("|", "\\|")
        lines.append(f"| {verdict.label} | {has_pkg} | {status} | {reason} |")

    if not report.verdicts:
        lines.append("| (no targets scanned) | n/a | n/a | n/a |")

    return "\n".join(lines) + "\n"
