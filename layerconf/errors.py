"""
Exception hierarchy for layerconf.

Two families live here:

- ``ConfigPanic``: a required key is missing or its value cannot be coerced.
  Configuration is expected to be validated at deployment time, so these are
  not meant to be caught in-line; let them terminate the process.
- ``SourceError``: a source could not be built (unreadable file, malformed
  content). Raised once at startup, callers may log it, fall back or exit.
"""

from typing import Optional


class ConfigError(Exception):
    """Base class for every layerconf error."""


# --- Lookup / coercion (non-recoverable) ---


class ConfigPanic(ConfigError):
    """Non-recoverable; a required value is absent or malformed."""


class MissingKeyError(ConfigPanic, KeyError):
    """Raised when a required key is not present in any source."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"missing required configuration key '{self.key}'"


class InvalidValueError(ConfigPanic, ValueError):
    """Raised when a value cannot be parsed into the requested type."""

    def __init__(self, key: str, value: str, expected: str, reason: Optional[str] = None):
        self.key = key
        self.value = value
        self.expected = expected
        self.reason = reason
        super().__init__(key, value, expected)

    def __str__(self) -> str:
        message = f"configuration key '{self.key}' has value {self.value!r}, expected {self.expected}"
        if self.reason:
            message += f" ({self.reason})"
        return message


# --- Source construction (recoverable) ---


class SourceError(ConfigError):
    """A configuration source could not be constructed."""


class SourceFileError(SourceError):
    """Reading the backing file failed (not found, unreadable, not text)."""

    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"reading '{self.path}': {reason}")


class InvalidSourceFormat(SourceError):
    """Source content is not in the expected format."""


class InvalidKeyValuePair(InvalidSourceFormat):
    """A line does not split into a key and a value on '='."""

    def __init__(self, line: str, lineno: Optional[int] = None):
        self.line = line
        self.lineno = lineno
        where = f"line {lineno}" if lineno is not None else "line"
        super().__init__(f"{where}: invalid key/value pair {line.strip()!r}")
