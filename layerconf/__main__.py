#!/usr/bin/env python3
"""
Command line access to layered configuration.

Builds a chain from the environment, files and ``--default`` pairs (highest
precedence first) and prints typed values from it:

    python -m layerconf --env-prefix myapp --file app.cfg --default port=8080 \\
        --get port --type int
    python -m layerconf --dump app.cfg

Logging for the tool itself is configured from ``LAYERCONF_LOG_LEVEL`` and
``LAYERCONF_LOG_FILE``.
"""

import sys
from pathlib import Path
from typing import List, Optional

from .config import (
    Config,
    DotEnvConfig,
    Environment,
    MultiConfig,
    Simple,
    YamlConfig,
    default_config,
)
from .errors import ConfigPanic, SourceError
from .utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

VALUE_TYPES = ['string', 'int', 'float', 'bool', 'duration', 'datetime', 'list', 'map']

TOOL_DEFAULTS = {
    'log.level': 'WARNING',
    'log.max_file_size': '10MB',
    'log.backup_count': '5',
}


def load_source(path: str) -> Config:
    """Load a file source, choosing the format from the file name."""
    file_path = Path(path)
    suffix = file_path.suffix.lower()
    if suffix in ('.yaml', '.yml'):
        return YamlConfig.from_file(file_path)
    if suffix == '.env' or file_path.name == '.env':
        return DotEnvConfig.from_file(file_path)
    return Simple.from_file(file_path)


def parse_default(pair: str) -> tuple:
    key, sep, value = pair.partition('=')
    if not sep:
        raise ValueError(f"default must be KEY=VALUE, got {pair!r}")
    return key.strip(), value.strip()


def build_chain(env: bool, env_prefix: Optional[str], files: List[str], defaults: List[str]) -> MultiConfig:
    """Build the lookup chain: environment, then files in order, then defaults."""
    sources: List[Config] = []
    if env or env_prefix is not None:
        sources.append(Environment(env_prefix or ''))
    for path in files:
        sources.append(load_source(path))
    if defaults:
        sources.append(default_config(dict(parse_default(p) for p in defaults)))
    return MultiConfig(sources)


def format_value(config: Config, key: str, value_type: str) -> List[str]:
    """Read ``key`` as ``value_type`` and render it as output lines."""
    if value_type == 'bool':
        return ['true' if config.bool(key) else 'false']
    if value_type == 'duration':
        return [str(int(config.duration(key).total_seconds()))]
    if value_type == 'datetime':
        return [config.datetime(key).isoformat().replace('+00:00', 'Z')]
    if value_type == 'list':
        return config.list(key)
    if value_type == 'map':
        return [f"{k}={v}" for k, v in sorted(config.map(key).items())]
    return [str(getattr(config, value_type)(key))]


def main(argv: Optional[List[str]] = None) -> int:
    """Main function for command-line usage."""
    import argparse

    parser = argparse.ArgumentParser(description='Layered configuration lookup')
    parser.add_argument('--env', action='store_true', help='Consult environment variables (no prefix)')
    parser.add_argument('--env-prefix', help='Consult environment variables named PREFIX_KEY')
    parser.add_argument('--file', action='append', default=[], help='Configuration file (repeatable, earlier wins)')
    parser.add_argument('--default', action='append', default=[], help='Default KEY=VALUE (repeatable)')
    parser.add_argument('--get', metavar='KEY', help='Print the value of KEY')
    parser.add_argument('--type', choices=VALUE_TYPES, default='string', help='Type to read the value as')
    parser.add_argument('--dump', metavar='PATH', help='Print every key/value pair of a file')

    args = parser.parse_args(argv)

    try:
        setup_logging(MultiConfig([Environment('layerconf'), default_config(TOOL_DEFAULTS)]))

        if args.get:
            try:
                chain = build_chain(args.env, args.env_prefix, args.file, args.default)
            except ValueError as e:
                parser.error(str(e))
            for line in format_value(chain, args.get, args.type):
                print(line)

        elif args.dump:
            source = load_source(args.dump)
            for key in source.keys():
                print(f"{key} = {source.get(key)}")

        else:
            parser.print_help()

    except ConfigPanic as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except SourceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
