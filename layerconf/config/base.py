"""
Config Capability
=================

``Config`` is the one abstraction every source implements: ``get(key)``
returns the raw string or ``None``. All typed accessors are built on top of
``get`` here, so a new source only has to provide that single method.

Typed accessors fail fast. A missing key raises ``MissingKeyError`` and an
unparseable value raises ``InvalidValueError``; both are ``ConfigPanic`` and
are not meant to be handled in-line. ``bool`` is the exception for values:
anything outside the truthy set is simply ``False``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Callable, Dict, List, Optional, TypeVar

from ..errors import InvalidValueError, MissingKeyError
from . import parsers

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Config(ABC):
    """Base class for configuration sources."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the value for ``key`` or ``None`` when it is not set."""

    def must_get(self, key: str) -> str:
        """Like ``get`` but raises ``MissingKeyError`` when there is no value."""
        value = self.get(key)
        if value is None:
            logger.error(f"Required configuration key '{key}' is not set")
            raise MissingKeyError(key)
        return value

    def string(self, key: str) -> str:
        return self.must_get(key)

    def _parse(self, key: str, parser: Callable[[str], T], expected: str) -> T:
        value = self.must_get(key)
        try:
            return parser(value)
        except ValueError as e:
            logger.error(f"Configuration key '{key}' is not a valid {expected}: {value!r}")
            raise InvalidValueError(key, value, expected, str(e)) from e

    def int(self, key: str) -> int:
        """Get the value as a signed 64-bit integer."""
        return self._parse(key, parsers.parse_int, "integer")

    def float(self, key: str) -> float:
        """Get the value as a 64-bit float."""
        return self._parse(key, parsers.parse_float, "float")

    def bool(self, key: str) -> bool:
        """
        Get the value as a bool.

        The case-insensitive values t, true, 1, y and yes are true; every
        other value is false. A missing key still raises ``MissingKeyError``.
        """
        return parsers.parse_bool(self.must_get(key))

    def duration(self, key: str) -> timedelta:
        """Get the value as a duration. The value is a whole number of seconds, no units."""
        return self._parse(key, parsers.parse_duration, "duration in seconds")

    def datetime(self, key: str) -> datetime:
        """Get an RFC 3339 timestamp, normalized to UTC."""
        return self._parse(key, parsers.parse_datetime, "RFC 3339 datetime")

    def list(self, key: str) -> List[str]:
        """
        Get a comma-delimited list, optionally surrounded by brackets
        (e.g. ``[1, 2, 3]`` -> ``["1", "2", "3"]``).
        """
        return parsers.parse_list(self.must_get(key))

    def map(self, key: str) -> Dict[str, str]:
        """
        Get a comma-delimited map of ``key=>value`` pairs, optionally
        surrounded by braces (e.g. ``{a=>1, b=>2}`` -> ``{"a": "1", "b": "2"}``).
        """
        return parsers.parse_map(self.must_get(key))
