from collections.abc import Mapping
from dataclasses import dataclass, field

from typing_extensions import override

from config_store.protocols.config import ConfigContract
from config_store.wrappers.base import BaseWrapper


@dataclass
class BaseStatistics:
    """Base statistics container with operation counting."""

    count: int = field(default=0)
    """The number of operations."""

    def increment(self) -> None:
        self.count += 1


@dataclass
class BaseHitMissStatistics(BaseStatistics):
    """Statistics container with hit/miss tracking for lookup operations."""

    hit: int = field(default=0)
    """The number of hits."""
    miss: int = field(default=0)
    """The number of misses."""

    def increment_hit(self) -> None:
        self.increment()
        self.hit += 1

    def increment_miss(self) -> None:
        self.increment()
        self.miss += 1


@dataclass
class HasStatistics(BaseHitMissStatistics):
    """Statistics for has operations.

    Tracks the number of keys found (hits) vs. keys not found (misses).
    """


@dataclass
class GetStatistics(BaseHitMissStatistics):
    """Statistics for get operations.

    Tracks the number of successful retrievals (hits) vs. lookups of missing keys (misses).
    """


@dataclass
class SetStatistics(BaseStatistics):
    """Statistics for set operations."""


@dataclass
class AllStatistics(BaseStatistics):
    """Statistics for all operations."""


@dataclass
class ConfigStoreStatistics:
    """Statistics for every operation performed through a StatisticsWrapper."""

    has: HasStatistics = field(default_factory=HasStatistics)
    """The statistics for the has operation."""

    get: GetStatistics = field(default_factory=GetStatistics)
    """The statistics for the get operation."""

    set: SetStatistics = field(default_factory=SetStatistics)
    """The statistics for the set operation."""

    all: AllStatistics = field(default_factory=AllStatistics)
    """The statistics for the all operation."""


class StatisticsWrapper(BaseWrapper):
    """Statistics wrapper around a configuration store that tracks operation statistics.

    Note: enumerating items through `all()` does not count as a `get`.
    """

    def __init__(self, config: ConfigContract) -> None:
        self._statistics: ConfigStoreStatistics = ConfigStoreStatistics()

        super().__init__(config=config)

    @property
    def statistics(self) -> ConfigStoreStatistics:
        return self._statistics

    @override
    def has(self, key: str) -> bool:
        if self.config.has(key=key):
            self.statistics.has.increment_hit()
            return True

        self.statistics.has.increment_miss()

        return False

    @override
    def get(self, key: str) -> str | None:
        value: str | None = self.config.get(key=key)

        if value is not None:
            self.statistics.get.increment_hit()
            return value

        self.statistics.get.increment_miss()

        return None

    @override
    def set(self, key: str, value: str) -> None:
        self.config.set(key=key, value=value)

        self.statistics.set.increment()

    @override
    def all(self) -> Mapping[str, str]:
        items: Mapping[str, str] = self.config.all()

        self.statistics.all.increment()

        return items
