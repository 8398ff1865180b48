"""
Value Parsers
=============

Parsing rules behind the typed accessors of ``Config``. Every function takes
the raw string stored by a source and either returns the parsed value or
raises ``ValueError``; ``Config`` turns that into ``InvalidValueError`` with
the offending key attached.

Micro-syntaxes:

- list: ``[a, b, c]`` (brackets optional) -> ``["a", "b", "c"]``
- map: ``{a=>1, b=>2}`` (braces optional) -> ``{"a": "1", "b": "2"}``
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Dict, List

from dateutil.parser import isoparse

TRUTHY_VALUES = frozenset({"t", "true", "1", "y", "yes"})

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)
_RFC3339_RE = re.compile(
    r"(?P<date>[0-9]{4}-[0-9]{2}-[0-9]{2})"
    r"[Tt ]"
    r"(?P<time>(?:[01][0-9]|2[0-3]):[0-9]{2}:[0-9]{2})"
    r"(?:\.(?P<fraction>[0-9]+))?"
    r"(?P<offset>[Zz]|[+-][0-9]{2}:[0-9]{2})"
)


def parse_int(value: str) -> int:
    """Parse a signed 64-bit integer. No whitespace, underscores or radix prefixes."""
    if not _INT_RE.fullmatch(value):
        raise ValueError("not an integer")
    number = int(value)
    if not INT64_MIN <= number <= INT64_MAX:
        raise ValueError("integer out of 64-bit range")
    return number


def parse_float(value: str) -> float:
    if not _FLOAT_RE.fullmatch(value):
        raise ValueError("not a floating point number")
    return float(value)


def parse_duration(value: str) -> timedelta:
    """Parse a whole number of seconds. Unit suffixes are not supported."""
    try:
        return timedelta(seconds=parse_int(value))
    except OverflowError as e:
        raise ValueError("duration out of range") from e


def parse_bool(value: str) -> bool:
    """Soft truthiness test; anything outside TRUTHY_VALUES is False."""
    return value.lower() in TRUTHY_VALUES


def parse_datetime(value: str) -> datetime:
    """
    Parse an RFC 3339 timestamp and normalize it to UTC.

    The offset is mandatory. Fractional seconds beyond microsecond precision
    are truncated.

    Args:
        value: Timestamp such as ``2015-05-15T05:05:05+00:00``

    Returns:
        Timezone-aware datetime in UTC
    """
    match = _RFC3339_RE.fullmatch(value)
    if match is None:
        raise ValueError("not an RFC 3339 timestamp")

    normalized = f"{match.group('date')}T{match.group('time')}"
    fraction = match.group("fraction")
    if fraction:
        normalized += "." + fraction[:6]
    offset = match.group("offset")
    normalized += "Z" if offset in ("Z", "z") else offset

    try:
        return isoparse(normalized).astimezone(timezone.utc)
    except OverflowError as e:
        raise ValueError("timestamp out of range in UTC") from e


def _strip_enclosing(value: str, opening: str, closing: str) -> str:
    value = value.strip()
    if value.startswith(opening):
        value = value[1:]
    if value.endswith(closing):
        value = value[:-1]
    return value.strip()


def parse_list(value: str) -> List[str]:
    """
    Split a comma-delimited list, optionally wrapped in brackets.

    An empty value yields ``[""]``, not an empty list.
    """
    return [item.strip() for item in _strip_enclosing(value, "[", "]").split(",")]


def parse_map(value: str) -> Dict[str, str]:
    """
    Parse ``{a=>1, b=>2}`` into a dict.

    Entries are split on the first ``=>``; an entry without one maps to the
    empty string. Later entries win over earlier ones with the same key.
    """
    result: Dict[str, str] = {}
    for entry in _strip_enclosing(value, "{", "}").split(","):
        key, _, item = entry.partition("=>")
        result[key.strip()] = item.strip()
    return result
