"""
Simple Configuration
====================

Extremely simple configuration from a file or string. One ``key = value``
pair per line; whitespace around the line, the key and the value is trimmed.
Lines starting with ``#`` are comments and blank lines are ignored. There is
no hierarchy, quoting or escaping. Use dot-notation if you want some:

    # i am a comment
    mongo.uri = mongodb://localhost/
    mongo.db  = test
"""

import logging
import os
from pathlib import Path
from typing import Dict, Iterator, Optional, Tuple, Union

from ..errors import InvalidKeyValuePair, SourceFileError
from .base import Config

logger = logging.getLogger(__name__)


def read_source_file(path: Path) -> str:
    """Read a configuration file as UTF-8, raising ``SourceFileError`` on failure."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read configuration file {path}: {e}")
        raise SourceFileError(path, str(e)) from e


def parse_line(line: str, lineno: Optional[int] = None) -> Optional[Tuple[str, str]]:
    """
    Parse a single line.

    Returns:
        ``(key, value)`` or ``None`` for comments and blank lines

    Raises:
        InvalidKeyValuePair: if the line has no ``=``
    """
    line = line.strip()
    if not line or line.startswith("#"):
        return None

    key, sep, value = line.partition("=")
    if not sep:
        raise InvalidKeyValuePair(line, lineno)

    return key.strip(), value.strip()


def parse(text: str) -> Dict[str, str]:
    """Parse a whole document; later definitions of a key replace earlier ones."""
    values: Dict[str, str] = {}
    for lineno, line in enumerate(text.split("\n"), start=1):
        try:
            pair = parse_line(line, lineno)
        except InvalidKeyValuePair as e:
            logger.error(f"Invalid configuration line: {e}")
            raise
        if pair is not None:
            values[pair[0]] = pair[1]
    return values


class Simple(Config):
    """Flat key/value configuration parsed from the simple format."""

    def __init__(self, values: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(values or {})

    @classmethod
    def from_str(cls, text: str) -> "Simple":
        """Create a configuration from the given string."""
        return cls(parse(text))

    @classmethod
    def from_file(cls, path: Union[str, os.PathLike]) -> "Simple":
        """
        Like ``from_str`` but the contents come from the file at ``path``.

        Raises:
            SourceFileError: the file cannot be read as UTF-8 text
            InvalidKeyValuePair: a line is malformed
        """
        path = Path(path)
        config = cls.from_str(read_source_file(path))
        logger.info(f"Loaded {len(config._values)} configuration keys from {path}")
        return config

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def keys(self) -> Iterator[str]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Simple):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"Simple({len(self._values)} keys)"
