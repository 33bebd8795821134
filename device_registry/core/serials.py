"""Serial number helpers used by the passport range index.

A serial identifier is free text ending in a run of digits, e.g. ``SN-0150``.
Passports own a prefix (``SN-``) and an inclusive numeric window. These helpers
reveal *how* an identifier is split, *when* two windows collide, and *what*
counts as a prefix match. All comparisons are case-sensitive on purpose so the
behaviour does not depend on the database collation.
"""

from __future__ import annotations

import re
from typing import NamedTuple

__all__ = [
    "WILDCARD",
    "SerialParts",
    "split_serial",
    "prefix_matches_pattern",
    "is_serial_prefix",
    "ranges_overlap",
    "range_contains",
    "escape_like",
    "LIKE_ESCAPE",
]

WILDCARD = "%"
LIKE_ESCAPE = "/"

_NUMERIC_TAIL_RE = re.compile(r"(?P<head>.*?)(?P<tail>\d*)", re.DOTALL)


class SerialParts(NamedTuple):
    head: str
    number: int | None


def split_serial(serial_id: str) -> SerialParts:
    """Split a serial into its leading text and the longest trailing digit run.

    ``number`` is ``None`` when the serial does not end in a digit, so
    ``SN-ABC``, ``XYZ-1500ABC`` and ``SN-150\\n`` never resolve to a numeric
    position. A tail too long to convert to an integer is treated the same way.
    """

    match = _NUMERIC_TAIL_RE.fullmatch(serial_id or "")
    head, tail = match.group("head"), match.group("tail")
    if not tail:
        return SerialParts(head, None)
    try:
        number = int(tail)
    except ValueError:
        return SerialParts(head, None)
    return SerialParts(head, number)


def prefix_matches_pattern(pattern: str, prefix: str) -> bool:
    """Match a stored passport prefix against a query pattern.

    A trailing ``%`` turns the pattern into a starts-with test; otherwise the
    prefix must be identical.
    """

    if pattern.endswith(WILDCARD):
        return prefix.startswith(pattern.rstrip(WILDCARD))
    return prefix == pattern


def escape_like(text: str) -> str:
    """Escape ``LIKE`` metacharacters so ``text`` matches literally with ``LIKE_ESCAPE``."""

    return (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def is_serial_prefix(prefix: str, serial_id: str) -> bool:
    """True when ``prefix`` is a literal prefix of ``serial_id``."""

    return serial_id.startswith(prefix)


def ranges_overlap(start: int, end: int, lo: int, hi: int) -> bool:
    """Standard inclusive interval overlap between ``[start, end]`` and ``[lo, hi]``."""

    return start <= hi and end >= lo


def range_contains(start: int, end: int, number: int) -> bool:
    return start <= number <= end
