from config_store.stores.memory.store import MemoryConfigStore

__all__ = ["MemoryConfigStore"]
