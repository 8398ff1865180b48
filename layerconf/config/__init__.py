"""Configuration package.

Provides the ``Config`` capability, the sources that implement it and the
``MultiConfig`` chain that layers them.
"""
from .base import Config  # noqa: F401
from .environment import Environment  # noqa: F401
from .file_sources import DotEnvConfig, YamlConfig  # noqa: F401
from .mapping import MappingConfig, default_config  # noqa: F401
from .multi import MultiConfig  # noqa: F401
from .simple import Simple  # noqa: F401
