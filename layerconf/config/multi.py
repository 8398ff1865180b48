"""
Chained Configuration
=====================

Combine several configs so values can come from various places. Sources
are consulted in the order given; the first one that has the key wins and
the rest are not asked. A chain of ``[environment, instance_file,
global_file, defaults]`` gives the usual twelve-factor layering.
"""

import logging
from typing import Any, Iterable, Iterator, Mapping, Optional, Tuple

from .base import Config
from .mapping import MappingConfig

logger = logging.getLogger(__name__)


def _as_config(source: Any) -> Config:
    if isinstance(source, Config):
        return source
    if isinstance(source, Mapping):
        return MappingConfig(source)
    raise TypeError(f"Cannot use {type(source).__name__} as a configuration source")


class MultiConfig(Config):
    """
    First-match-wins composition of configuration sources.

    Plain mappings are accepted and wrapped in ``MappingConfig``. The source
    list is copied on construction and never changes afterwards.
    """

    def __init__(self, configs: Iterable[Any]):
        self._configs: Tuple[Config, ...] = tuple(_as_config(c) for c in configs)
        logger.debug(f"MultiConfig created with {len(self._configs)} sources")

    def get(self, key: str) -> Optional[str]:
        for index, config in enumerate(self._configs):
            value = config.get(key)
            if value is not None:
                logger.debug(f"Key '{key}' resolved by source {index} ({type(config).__name__})")
                return value
        return None

    def __len__(self) -> int:
        return len(self._configs)

    def __iter__(self) -> Iterator[Config]:
        return iter(self._configs)

    def __repr__(self) -> str:
        names = ", ".join(type(c).__name__ for c in self._configs)
        return f"MultiConfig([{names}])"
