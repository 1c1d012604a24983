import pytest

from config_store.stores.memory import MemoryConfigStore


@pytest.fixture
def memory_store() -> MemoryConfigStore:
    return MemoryConfigStore()
