"""Rendering of database values as MySQL literals for dump files."""

from __future__ import annotations

import datetime as _dt
import re

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_ESCAPES = str.maketrans(
    {
        "'": "\\'",
        '"': '\\"',
        "\\": "\\\\",
        "\n": "\\n",
        "\r": "\\r",
        "\t": "\\t",
        "\b": "\\b",
        "\f": "\\f",
        "\x00": "\\0",
    }
)

_AUTO_INCREMENT = re.compile(r"AUTO_INCREMENT=[0-9]*")


def escape_string(s: str) -> str:
    """Escape the characters MySQL treats specially inside a quoted string."""
    return s.translate(_ESCAPES)


def reset_auto_increment(create_table_stmt: str) -> str:
    """Replace the first ``AUTO_INCREMENT=<n>`` table option with ``AUTO_INCREMENT=1``."""
    return _AUTO_INCREMENT.sub("AUTO_INCREMENT=1", create_table_stmt, count=1)


def format_timestamp(moment: _dt.date) -> str:
    """Format a date or datetime as ``YYYY-MM-DD HH:MM:SS``."""
    if not isinstance(moment, _dt.datetime):
        moment = _dt.datetime.combine(moment, _dt.time())
    return moment.strftime(TIMESTAMP_FORMAT)


def _format_duration(value: _dt.timedelta) -> str:
    total = abs(value)
    seconds = total.days * 86400 + total.seconds
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    sign = "-" if value < _dt.timedelta(0) else ""
    text = f"{sign}{hours:02d}:{minutes:02d}:{secs:02d}"
    if total.microseconds:
        text += f".{total.microseconds:06d}"
    return text


def _quote(text: str) -> str:
    return "'" + escape_string(text) + "'"


def format_value(value: object) -> str:
    """Render a value fetched from MySQL as an SQL literal for an INSERT statement."""
    if value is None:
        return "NULL"
    if isinstance(value, (bytes, bytearray, memoryview)):
        return _quote(bytes(value).decode("utf-8", errors="replace"))
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, _dt.date):
        return "'" + format_timestamp(value) + "'"
    if isinstance(value, _dt.timedelta):
        return _quote(_format_duration(value))
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)