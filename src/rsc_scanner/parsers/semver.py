"""Major-version extraction for declared npm version ranges.

This is a heuristic, not range evaluation: the text before the first ``.``
is stripped of leading non-digits (``^``, ``~``, ``>=``, ``v`` ...) and its
leading integer is taken. OR-ranges such as ``"18.3.0 || 19.0.0"`` only see
their first alternative, and pre-release tags are ignored.
"""

from __future__ import annotations

import re

_LEADING_NON_DIGITS = re.compile(r"^[^0-9]+")
_LEADING_DIGITS = re.compile(r"^[0-9]+")


def major_version(expr: str) -> int | None:
    """Return the major component of ``expr`` or None if there is none."""
    head = expr.strip().split(".", 1)[0]
    head = _LEADING_NON_DIGITS.sub("", head)
    match = _LEADING_DIGITS.match(head)
    if match is None:
        return None
    return int(match.group(0))
