"""Config Store - a small in-memory key/value configuration store."""

from config_store.errors import BaseConfigStoreError, ConfigParseError, ReadOnlyError
from config_store.loaders import load_config_file
from config_store.protocols import ConfigContract
from config_store.stores import BaseConfigStore, MemoryConfigStore

__all__ = [
    "BaseConfigStore",
    "BaseConfigStoreError",
    "ConfigContract",
    "ConfigParseError",
    "MemoryConfigStore",
    "ReadOnlyError",
    "load_config_file",
]
