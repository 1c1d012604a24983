from collections.abc import Mapping
from types import MappingProxyType

from typing_extensions import override

from config_store.stores.base import BaseConfigStore


class MemoryConfigStore(BaseConfigStore):
    """An in-memory configuration store backed by a dictionary."""

    _data: dict[str, str]

    def __init__(self, items: Mapping[str, str] | None = None):
        """Initialize the in-memory store.

        Args:
            items: Optional initial configuration items. The mapping is copied, so later changes to
                it are not visible through the store.
        """
        self._data = dict(items or {})

    @override
    def _get_item(self, *, key: str) -> str | None:
        return self._data.get(key)

    @override
    def _put_item(self, *, key: str, value: str) -> None:
        self._data[key] = value

    @override
    def _items(self) -> Mapping[str, str]:
        return MappingProxyType(self._data)
