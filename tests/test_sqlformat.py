import datetime as dt
from decimal import Decimal

import pytest

from mysqlexport.sqlformat import (
    escape_string,
    format_timestamp,
    format_value,
    reset_auto_increment,
)


@pytest.mark.parametrize(
    "raw, escaped",
    [
        ("'", "\\'"),
        ('"', '\\"'),
        ("\\", "\\\\"),
        ("\n", "\\n"),
        ("\r", "\\r"),
        ("\t", "\\t"),
        ("\b", "\\b"),
        ("\f", "\\f"),
        ("\x00", "\\0"),
    ],
)
def test_escape_special_characters(raw, escaped):
    assert escape_string(raw) == escaped


def test_escape_leaves_plain_text_alone():
    text = "hello world 123 ünïcødé"
    assert escape_string(text) == text


def test_escape_is_applied_per_character():
    left, right = "it's", "a\nb\\c"
    assert escape_string(left + right) == escape_string(left) + escape_string(right)


def test_escape_output_has_no_raw_newline_or_nul():
    result = escape_string("a\nb\x00c\rd")
    assert "\n" not in result
    assert "\x00" not in result
    assert "\r" not in result


def test_reset_auto_increment_replaces_value():
    stmt = "CREATE TABLE `t` (`id` int) ENGINE=InnoDB AUTO_INCREMENT=42 DEFAULT CHARSET=utf8mb4"
    assert reset_auto_increment(stmt) == stmt.replace("AUTO_INCREMENT=42", "AUTO_INCREMENT=1")


def test_reset_auto_increment_without_option_is_unchanged():
    stmt = "CREATE TABLE `t` (`id` int) ENGINE=InnoDB"
    assert reset_auto_increment(stmt) == stmt


def test_reset_auto_increment_only_first_occurrence():
    stmt = "AUTO_INCREMENT=5 AUTO_INCREMENT=7"
    assert reset_auto_increment(stmt) == "AUTO_INCREMENT=1 AUTO_INCREMENT=7"


def test_reset_auto_increment_without_digits():
    stmt = "x AUTO_INCREMENT= y"
    assert reset_auto_increment(stmt) == "x AUTO_INCREMENT=1 y"


def test_reset_auto_increment_is_idempotent():
    stmt = "ENGINE=InnoDB AUTO_INCREMENT=99999 DEFAULT"
    once = reset_auto_increment(stmt)
    assert reset_auto_increment(once) == once


def test_format_none_is_null():
    assert format_value(None) == "NULL"


def test_format_string_is_quoted_and_escaped():
    assert format_value("o'neil") == "'" + escape_string("o'neil") + "'"


def test_format_bytes_matches_decoded_string():
    assert format_value(b"abc\n") == format_value("abc\n")


def test_format_numbers_are_bare():
    assert format_value(42) == "42"
    assert format_value(Decimal("12.50")) == "12.50"


def test_format_datetime():
    assert format_value(dt.datetime(2024, 1, 2, 3, 4, 5)) == "'2024-01-02 03:04:05'"


def test_format_date_uses_midnight():
    assert format_timestamp(dt.date(2024, 1, 2)) == format_timestamp(dt.datetime(2024, 1, 2))


def test_format_timestamp_layout():
    moment = dt.datetime(2023, 12, 31, 23, 59, 58)
    assert dt.datetime.strptime(format_timestamp(moment), "%Y-%m-%d %H:%M:%S") == moment


def test_format_timedelta_quoted():
    assert format_value(dt.timedelta(hours=1, minutes=2, seconds=3)) == "'01:02:03'"