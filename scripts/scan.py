#!/usr/bin/env python3
"""Local CLI entrypoint to run the scanner from a source checkout.

Usage:
  python scripts/scan.py tree [ROOT] [--format json] [--warn-only]
  python scripts/scan.py wordpress [ROOT]

This calls the same rsc_scanner.cli.main used by the console script.
"""

from __future__ import annotations

from rsc_scanner.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
