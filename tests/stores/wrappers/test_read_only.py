import pytest
from inline_snapshot import snapshot

from config_store.errors import ReadOnlyError
from config_store.stores.memory import MemoryConfigStore
from config_store.wrappers.read_only import ReadOnlyWrapper


class TestReadOnlyWrapper:
    @pytest.fixture
    def memory_store(self) -> MemoryConfigStore:
        return MemoryConfigStore({"foo": "bar"})

    def test_read_operations_allowed(self, memory_store: MemoryConfigStore):
        read_only_store = ReadOnlyWrapper(config=memory_store, raise_on_write=True)

        assert read_only_store.has("foo") is True
        assert read_only_store.get("foo") == "bar"
        assert dict(read_only_store.all()) == {"foo": "bar"}

    def test_reads_follow_underlying_store(self, memory_store: MemoryConfigStore):
        read_only_store = ReadOnlyWrapper(config=memory_store)

        memory_store.set("foo", "baz")

        assert read_only_store.get("foo") == "baz"

    def test_write_operations_raise_error(self, memory_store: MemoryConfigStore):
        read_only_store = ReadOnlyWrapper(config=memory_store, raise_on_write=True)

        with pytest.raises(ReadOnlyError) as exc_info:
            read_only_store.set("foo", "baz")

        assert str(exc_info.value) == snapshot("Write operation not allowed on read-only store.: (operation: set;key: foo)")
        assert memory_store.get("foo") == "bar"

    def test_write_operations_silent_ignore(self, memory_store: MemoryConfigStore):
        read_only_store = ReadOnlyWrapper(config=memory_store, raise_on_write=False)

        read_only_store.set("new_key", "value")
        read_only_store.set("foo", "baz")

        assert memory_store.has("new_key") is False
        assert memory_store.get("foo") == "bar"
