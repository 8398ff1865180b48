"""
Environment Configuration
=========================

Configuration from process environment variables.

The environment is process-wide state owned by nobody in particular: any
thread or library may change it at any time. Every ``get`` reads it afresh,
so changes are visible between calls, and two reads are not guaranteed to be
consistent with each other.
"""

import logging
import os
from typing import Optional

from .base import Config

logger = logging.getLogger(__name__)


class Environment(Config):
    """
    Environment variable source.

    Keys are made environment-variable-like: the prefix and an underscore are
    prepended (nothing for an empty prefix), ``.`` and ``/`` become ``_`` and
    everything is upper-cased. With prefix ``foo``, ``my.app.secret`` is read
    from ``FOO_MY_APP_SECRET``.
    """

    def __init__(self, prefix: str = ""):
        self.prefix = prefix + "_" if prefix else ""

    def env_key(self, key: str) -> str:
        """Return the environment variable name used for ``key``."""
        name = self.prefix + key
        return name.replace(".", "_").replace("/", "_").upper()

    def get(self, key: str) -> Optional[str]:
        name = self.env_key(key)
        value = os.environ.get(name)
        if value is None:
            logger.debug(f"Environment variable {name} not set")
        return value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Environment):
            return NotImplemented
        return self.prefix == other.prefix

    def __repr__(self) -> str:
        return f"Environment(prefix={self.prefix!r})"
