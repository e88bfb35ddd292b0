"""Command-line entrypoint for the RSC surface scanner.

Usage:
  rsc-scanner tree [ROOT] [--format text|json|markdown] [--warn-only]
  rsc-scanner wordpress [ROOT] [--format text|json|markdown] [--warn-only]

Exit codes: 0 nothing flagged, 2 possibly vulnerable targets found,
1 setup error (missing root, bad configuration).
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .config import ConfigError, ScanSettings, load_settings
from .core import RootNotFoundError, scan_tree, scan_wordpress
from .logger import setup_logger
from .report import EXIT_ERROR, exit_code
from .summary import render_summary, render_text

TITLES = {
    "tree": "Generic React Surface Scan",
    "wordpress": "WordPress RSC Vulnerability Report",
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="rsc-scanner", description=__doc__.splitlines()[0])
    sub = parser.add_subparsers(dest="mode", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("root", nargs="?", type=Path, default=Path("."))
    common.add_argument("--format", choices=("text", "json", "markdown"), default="text")
    common.add_argument("--warn-only", action="store_true", default=None)
    common.add_argument("--workers", type=int, default=None, help="Parallel analysis workers")
    common.add_argument(
        "--deadline",
        type=float,
        default=None,
        help="Stop walking after this many seconds and report partial results",
    )
    common.add_argument(
        "--exclude",
        action="append",
        default=[],
        help="Additional directory name to skip (repeatable)",
    )
    common.add_argument("--config", type=Path, default=None, help="Path to a JSON settings file")
    common.add_argument("--verbose", "-v", action="store_true")
    common.add_argument("--log-file", type=Path, default=None)

    sub.add_parser("tree", parents=[common], help="Classify every folder under ROOT")
    sub.add_parser(
        "wordpress",
        parents=[common],
        help="Classify packages inside ROOT/wp-content/plugins and themes",
    )
    return parser.parse_args(argv)


def _settings(args: argparse.Namespace) -> ScanSettings:
    settings = load_settings(args.config)
    extra = settings.extra_excludes | frozenset(args.exclude) if args.exclude else None
    return settings.with_overrides(
        extra_excludes=extra,
        workers=args.workers,
        deadline_seconds=args.deadline,
        warn_only=args.warn_only,
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        logger = setup_logger(verbose=args.verbose, log_file=args.log_file)
    except OSError as exc:
        print(f"ERROR: Cannot open log file: {exc}", file=sys.stderr)
        return EXIT_ERROR

    try:
        settings = _settings(args)
        if args.mode == "wordpress":
            report = scan_wordpress(args.root, settings)
        else:
            report = scan_tree(args.root, settings)
    except (RootNotFoundError, ConfigError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_ERROR

    logger.debug("Scan finished: %d target(s), %d flagged", len(report.verdicts), report.vulnerable_count)

    if args.format == "json":
        print(json.dumps(report.to_dict(), indent=2))
    elif args.format == "markdown":
        print(render_summary(report), end="")
    else:
        print(render_text(report, title=TITLES[args.mode]), end="")

    return exit_code(report, warn_only=settings.warn_only)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
