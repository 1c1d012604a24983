"""
Base abstract class for configuration store implementations.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping

from typing_extensions import override

from config_store.protocols.config import ConfigContract


class BaseConfigStore(ConfigContract, ABC):
    """An opinionated abstract base class for configuration stores.

    Concrete stores implement three primitives: `_get_item`, `_put_item` and `_items`. The public
    contract (`has`, `get`, `set`, `all`) and the container dunders are derived from them.
    """

    @abstractmethod
    def _get_item(self, *, key: str) -> str | None:
        """Retrieve the value for a key, or None if the key is not present."""
        ...

    @abstractmethod
    def _put_item(self, *, key: str, value: str) -> None:
        """Insert or overwrite the value for a key."""
        ...

    @abstractmethod
    def _items(self) -> Mapping[str, str]:
        """Return a read-only view of the underlying mapping."""
        ...

    @override
    def has(self, key: str) -> bool:
        return self._get_item(key=key) is not None

    @override
    def get(self, key: str) -> str | None:
        return self._get_item(key=key)

    @override
    def set(self, key: str, value: str) -> None:
        self._put_item(key=key, value=value)

    @override
    def all(self) -> Mapping[str, str]:
        return self._items()

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key=key)

    def __len__(self) -> int:
        return len(self._items())

    def __iter__(self) -> Iterator[str]:
        return iter(self._items())

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}(items={dict(self._items())!r})"
