import pytest
from typing_extensions import override

from config_store.stores.memory import MemoryConfigStore
from config_store.wrappers.statistics import StatisticsWrapper
from tests.stores.base import BaseConfigStoreTests


class TestStatisticsWrapper(BaseConfigStoreTests):
    @override
    @pytest.fixture
    def store(self, memory_store: MemoryConfigStore) -> StatisticsWrapper:
        return StatisticsWrapper(config=memory_store)

    def test_statistics_start_empty(self, store: StatisticsWrapper):
        assert store.statistics.get.count == 0
        assert store.statistics.has.count == 0
        assert store.statistics.set.count == 0
        assert store.statistics.all.count == 0

    def test_hit_and_miss_tracking(self, store: StatisticsWrapper):
        store.set("foo", "bar")
        store.set("foo", "baz")

        assert store.get("foo") == "baz"
        assert store.get("missing") is None
        assert store.get("missing") is None
        assert store.has("foo") is True
        assert store.has("missing") is False

        assert store.statistics.set.count == 2

        assert store.statistics.get.count == 3
        assert store.statistics.get.hit == 1
        assert store.statistics.get.miss == 2

        assert store.statistics.has.count == 2
        assert store.statistics.has.hit == 1
        assert store.statistics.has.miss == 1

    def test_empty_value_counts_as_hit(self, store: StatisticsWrapper):
        store.set("foo", "")

        assert store.get("foo") == ""
        assert store.statistics.get.hit == 1
        assert store.statistics.get.miss == 0

    def test_all_is_counted_separately(self, store: StatisticsWrapper):
        store.set("foo", "bar")
        assert dict(store.all()) == {"foo": "bar"}

        assert store.statistics.all.count == 1
        assert store.statistics.get.count == 0
