# tests/test_tokeniser_scan.py
"""Tests for tokeniser/scanner.py: quoting, escaping, delimiting and unclosed quotes."""

from __future__ import annotations

import logging

import pytest

from leutils.tokeniser import ScanState, UnclosedQuoteError, scan

# ──────────────────────────────────────────────────────────────────────────────
# Delimiting
# ──────────────────────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", ()),
        ("   ", ()),
        ("hello", ("hello",)),
        ("hello world test", ("hello", "world", "test")),
        ("hello    world", ("hello", "world")),
        ("  padded  both  ", ("padded", "both")),
        ("dup dup dup", ("dup", "dup", "dup")),
        # Only the ASCII space delimits inside the trimmed input
        ("a\tb", ("a\tb",)),
    ],
)
def test_scan_splits_on_spaces(text, expected):
    assert scan(text) == expected


# ──────────────────────────────────────────────────────────────────────────────
# Quoting
# ──────────────────────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "text, expected",
    [
        (
            '--d hello world "Write Once Run Anywhere"',
            ("--d", "hello", "world", "Write Once Run Anywhere"),
        ),
        ('mkdir "location/of folder" dup existing', ("mkdir", "location/of folder", "dup", "existing")),
        ('"  spaced  "', ("  spaced  ",)),
        ('a "" b', ("a", "b")),
        ('abc"def ghi"', ("abcdef ghi",)),
        ('"a b"c', ("a b", "c")),
    ],
)
def test_scan_quoted_spans(text, expected):
    assert scan(text) == expected


def test_scan_unclosed_quote_raises_with_fragment():
    with pytest.raises(UnclosedQuoteError) as excinfo:
        scan('Java: "Write once Run Anywhere')
    err = excinfo.value
    assert err.fragment == "Write once Run Anywhere"
    assert str(err) == 'Expected closing quote for starting quote -> "Write once Run Anywhere'
    assert isinstance(err, ValueError)


# ──────────────────────────────────────────────────────────────────────────────
# Escapes
# ──────────────────────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "text, expected",
    [
        ('hey \\"world\\"', ("hey", '"world"')),
        ('"a \\" b"', ('a " b',)),
        ('\\"abc', ('"abc',)),
        ("endsInBackslash\\", ("endsInBackslash\\",)),
        ('"src\\main\\resources"', ("src\\main\\resources",)),
        # Backslash before a space keeps both and does not delimit
        ("a\\ b", ("a\\ b",)),
        ("a\\\\b", ("a\\\\b",)),
    ],
)
def test_scan_escapes(text, expected):
    assert scan(text) == expected


def test_scan_escaped_quote_inside_quotes_does_not_close():
    with pytest.raises(UnclosedQuoteError) as excinfo:
        scan('"abc\\"')
    assert excinfo.value.fragment == 'abc"'


def test_scan_trailing_backslash_inside_quotes_still_unclosed():
    with pytest.raises(UnclosedQuoteError) as excinfo:
        scan('"abc\\')
    assert excinfo.value.fragment == "abc\\"


def test_scan_without_escapes_treats_backslash_literally():
    assert scan('hey \\"world\\"', escapes=False) == ("hey", "\\world\\")
    assert scan('"src\\main"', escapes=False) == ("src\\main",)


def test_scan_state_members():
    assert {s.name for s in ScanState} == {"NORMAL", "IN_QUOTES", "ESCAPED"}


# ──────────────────────────────────────────────────────────────────────────────
# Logging
# ──────────────────────────────────────────────────────────────────────────────


def test_scan_logs_flushes_and_unclosed(caplog):
    caplog.set_level(logging.DEBUG, logger="leutils.tokeniser.scanner")

    scan("one two")
    assert "flushed argument 'one'" in caplog.text
    assert "flushed argument 'two'" in caplog.text

    with pytest.raises(UnclosedQuoteError):
        scan('"open')
    assert "unclosed quote" in caplog.text
