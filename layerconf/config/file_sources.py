"""
File Sources
============

Flat configuration from YAML and dotenv files.

Both formats can express more than a flat string table, so values are
reduced on load:

- YAML scalars become strings (booleans as ``true``/``false``); ``null``
  values are treated as absent
- a YAML list of scalars is rendered in list syntax (``[a, b]``) and a
  mapping of scalars in map syntax (``{k=>v}``), so ``Config.list`` and
  ``Config.map`` read them back
- anything nested deeper is rejected, there is no key hierarchy
- dotenv keys declared without a value are absent
"""

import io
import logging
import os
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from dotenv import dotenv_values

from ..errors import InvalidSourceFormat
from .mapping import MappingConfig
from .simple import read_source_file

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def _render_scalar(key: str, value: Any) -> str:
    if isinstance(value, (dict, list)):
        raise InvalidSourceFormat(f"value of '{key}' is nested too deeply")
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _render(key: str, value: Any) -> str:
    if isinstance(value, list):
        return "[" + ", ".join(_render_scalar(key, item) for item in value) + "]"
    if isinstance(value, dict):
        pairs = (f"{k}=>{_render_scalar(key, v)}" for k, v in value.items())
        return "{" + ", ".join(pairs) + "}"
    return _render_scalar(key, value)


class YamlConfig(MappingConfig):
    """Configuration from a YAML document whose top level is a mapping."""

    @classmethod
    def from_str(cls, text: str) -> "YamlConfig":
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            logger.error(f"Invalid YAML configuration: {e}")
            raise InvalidSourceFormat(f"invalid YAML: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise InvalidSourceFormat(
                f"YAML configuration must be a mapping, got {type(data).__name__}"
            )

        values: Dict[str, str] = {}
        for key, value in data.items():
            if value is None:
                continue
            values[str(key)] = _render(str(key), value)
        return cls(values)

    @classmethod
    def from_file(cls, path: PathLike) -> "YamlConfig":
        path = Path(path)
        config = cls.from_str(read_source_file(path))
        logger.info(f"Loaded YAML configuration from {path}")
        return config


class DotEnvConfig(MappingConfig):
    """Configuration from a ``.env`` file, parsed by python-dotenv."""

    @classmethod
    def from_str(cls, text: str) -> "DotEnvConfig":
        parsed = dotenv_values(stream=io.StringIO(text))
        return cls({k: v for k, v in parsed.items() if v is not None})

    @classmethod
    def from_file(cls, path: PathLike) -> "DotEnvConfig":
        path = Path(path)
        config = cls.from_str(read_source_file(path))
        logger.info(f"Loaded dotenv configuration from {path}")
        return config
