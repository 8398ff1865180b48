"""
layerconf - Layered Configuration Values
========================================

Simplified configuration management. This package isn't meant to solve
every configuration need; it provides one capability, ``get(key)``, typed
accessors built on it, and a way to chain sources with a fixed precedence.

    from layerconf import Environment, MultiConfig, Simple, default_config

    cfg = MultiConfig([
        Environment("myapp"),
        Simple.from_file("myapp.cfg"),
        default_config({"mongo.db": "test"}),
    ])
    cfg.string("mongo.db")

Modules:
- config: the Config capability, sources and the MultiConfig chain
- errors: exception hierarchy
- utils: logging setup
"""

__version__ = "1.0.0"

from .config import (
    Config,
    DotEnvConfig,
    Environment,
    MappingConfig,
    MultiConfig,
    Simple,
    YamlConfig,
    default_config,
)
from .errors import (
    ConfigError,
    ConfigPanic,
    InvalidKeyValuePair,
    InvalidSourceFormat,
    InvalidValueError,
    MissingKeyError,
    SourceError,
    SourceFileError,
)

__all__ = [
    "Config",
    "DotEnvConfig",
    "Environment",
    "MappingConfig",
    "MultiConfig",
    "Simple",
    "YamlConfig",
    "default_config",
    "ConfigError",
    "ConfigPanic",
    "InvalidKeyValuePair",
    "InvalidSourceFormat",
    "InvalidValueError",
    "MissingKeyError",
    "SourceError",
    "SourceFileError",
]
