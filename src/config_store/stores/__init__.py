from config_store.stores.base import BaseConfigStore
from config_store.stores.memory import MemoryConfigStore

__all__ = ["BaseConfigStore", "MemoryConfigStore"]
