"""Tests for serial parsing, prefix matching and window arithmetic."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from device_registry.core.serials import (
    escape_like,
    is_serial_prefix,
    prefix_matches_pattern,
    range_contains,
    ranges_overlap,
    split_serial,
)


@pytest.mark.parametrize(
    "serial, head, number",
    [
        ("SN-150", "SN-", 150),
        ("SN-050", "SN-", 50),
        ("AB12-0007", "AB12-", 7),
        ("12345", "", 12345),
        ("SN-ABC", "SN-ABC", None),
        ("XYZ-1500ABC", "XYZ-1500ABC", None),
        ("SN-150\n", "SN-150\n", None),
        ("SN-" + "1" * 5000, "SN-", None),
        ("", "", None),
    ],
)
def test_split_serial_takes_longest_digit_tail(serial, head, number):
    parts = split_serial(serial)
    assert parts.head == head
    assert parts.number == number


def test_prefix_pattern_exact_and_wildcard():
    assert prefix_matches_pattern("SN-", "SN-")
    assert not prefix_matches_pattern("SN-", "SN-X")
    assert prefix_matches_pattern("SN-%", "SN-")
    assert prefix_matches_pattern("SN-%", "SN-X")
    assert not prefix_matches_pattern("SN-%", "sn-")


def test_serial_prefix_is_case_sensitive():
    assert is_serial_prefix("SN-", "SN-123")
    assert not is_serial_prefix("SN-", "sn-123")
    # Only the stored prefix may start the serial, never the reverse.
    assert not is_serial_prefix("SN-123", "SN-")


def test_window_overlap_is_inclusive():
    assert ranges_overlap(100, 199, 199, 200)
    assert ranges_overlap(200, 299, 199, 200)
    assert ranges_overlap(100, 199, 120, 130)
    assert ranges_overlap(120, 130, 100, 199)
    assert not ranges_overlap(100, 199, 0, 99)
    assert not ranges_overlap(100, 199, 200, 250)
    assert range_contains(100, 199, 100)
    assert range_contains(100, 199, 199)
    assert not range_contains(100, 199, 200)


def test_escape_like_makes_metacharacters_literal():
    assert escape_like("SN-") == "SN-"
    assert escape_like("A_B%") == "A/_B/%"
    assert escape_like("a/b") == "a//b"
    # Only the escape character is doubled; backslashes stay literal.
    assert escape_like("C:\\X") == "C:\\X"
