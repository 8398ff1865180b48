"""In-memory configuration, typically the defaults at the bottom of a chain."""

import logging
from typing import Any, Dict, Iterator, Mapping, Optional

from .base import Config

logger = logging.getLogger(__name__)


class MappingConfig(Config):
    """Configuration backed by a dict. Values are stored as strings; ``None`` values are absent."""

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        self._values: Dict[str, str] = {
            str(k): str(v) for k, v in (values or {}).items() if v is not None
        }

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def keys(self) -> Iterator[str]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MappingConfig):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._values)} keys)"


def default_config(values: Optional[Mapping[str, Any]] = None, **pairs: Any) -> MappingConfig:
    """
    Create a config from key/value pairs.

    Dotted keys cannot be keyword arguments, pass a mapping for those:

        default_config({"mongo.uri": "mongodb://localhost/"}, debug="false")

    Keyword pairs override entries of ``values`` with the same key.
    """
    merged: Dict[str, Any] = dict(values or {})
    merged.update(pairs)
    logger.debug(f"Default config created with keys: {sorted(merged)}")
    return MappingConfig(merged)
