"""
Example configuration manager built on config-store.

This example shows how to:
- Load `key=value` lines from a text file into a MemoryConfigStore
- Overlay values on top of the loaded configuration
- Enumerate the merged configuration for display
"""

import argparse
import logging
import sys
from pathlib import Path

from config_store.errors import ConfigLoadError
from config_store.loaders.text import load_config_file
from config_store.protocols.config import ConfigContract
from config_store.stores.memory import MemoryConfigStore
from config_store.wrappers.logging import LoggingWrapper

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.txt"

OVERRIDES: dict[str, str] = {"foo": "baz", "bar": "qux"}


def build_config(path: str | Path) -> ConfigContract:
    """
    Load a configuration file and apply the example overrides.

    Args:
        path: The `key=value` file to load

    Returns:
        The merged configuration, with every operation logged at DEBUG
    """
    config = LoggingWrapper(config=MemoryConfigStore(load_config_file(path)))

    for key, value in OVERRIDES.items():
        config.set(key, value)

    return config


def format_config(config: ConfigContract) -> list[str]:
    """Render every configuration item as a `key=value` line under a heading."""
    return ["All config items:", *(f"{key}={value}" for key, value in config.all().items())]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Load a key=value file, apply overrides and print the result")
    parser.add_argument("path", nargs="?", default=DEFAULT_CONFIG_PATH, help="Configuration file to load")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level)

    try:
        config = build_config(args.path)
    except (OSError, ConfigLoadError):
        logger.exception("Failed to load configuration", extra={"path": args.path})
        return 1

    for line in format_config(config):
        print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
