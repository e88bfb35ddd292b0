"""Per-target analysis: manifest dependencies first, then source markers."""

from __future__ import annotations

import logging

from .classifier import classify
from .discovery import DEFAULT_POLICY, MANIFEST_NAME, ExclusionPolicy, has_manifest
from .models import ScanTarget, Verdict
from .parsers.package_json import ManifestError, parse
from .sources import find_marker_file

logger = logging.getLogger(__name__)

REASON_NO_MANIFEST = "No package.json found"
REASON_NO_MANIFEST_ANYWHERE = "No package.json found anywhere in this directory"
REASON_INVALID_MANIFEST = "Invalid package.json (cannot parse JSON)"
REASON_NO_INDICATORS = "no indicators found"


def analyze_package(target: ScanTarget, policy: ExclusionPolicy = DEFAULT_POLICY) -> Verdict:
    """Classify one directory. Filesystem and content problems never raise."""
    if not has_manifest(target.path):
        return Verdict(target=target, has_manifest=False, vulnerable=False, reason=REASON_NO_MANIFEST)

    try:
        manifest = parse(target.path / MANIFEST_NAME)
    except ManifestError as exc:
        logger.debug("%s: %s", target.label, exc)
        return Verdict(
            target=target, has_manifest=True, vulnerable=False, reason=REASON_INVALID_MANIFEST
        )

    indicator = classify(manifest)
    if indicator is not None:
        logger.debug("%s: dependency indicator %s@%s", target.label, indicator.package, indicator.version)
        return Verdict(target=target, has_manifest=True, vulnerable=True, reason=indicator.reason)

    marker_file = find_marker_file(target.path, policy)
    if marker_file is not None:
        rel = marker_file.relative_to(target.path).as_posix()
        return Verdict(
            target=target,
            has_manifest=True,
            vulnerable=True,
            reason=f'RSC-like markers (e.g. "use server") found in {rel}',
        )

    return Verdict(target=target, has_manifest=True, vulnerable=False, reason=REASON_NO_INDICATORS)


def missing_manifest_verdict(target: ScanTarget) -> Verdict:
    """Verdict for a logical root with no manifest at any depth."""
    return Verdict(
        target=target, has_manifest=False, vulnerable=False, reason=REASON_NO_MANIFEST_ANYWHERE
    )
