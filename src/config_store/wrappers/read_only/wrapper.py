from typing_extensions import override

from config_store.errors import ReadOnlyError
from config_store.protocols.config import ConfigContract
from config_store.wrappers.base import BaseWrapper


class ReadOnlyWrapper(BaseWrapper):
    """Wrapper that prevents all write operations on the underlying store.

    Read operations (`has`, `get`, `all`) pass through unchanged. `set` either raises a
    ReadOnlyError or is silently ignored, depending on `raise_on_write`.

    Example:
        >>> frozen = ReadOnlyWrapper(config=MemoryConfigStore({"foo": "bar"}))
        >>> frozen.get("foo")
        'bar'
        >>> frozen.set("foo", "baz")  # raises ReadOnlyError
    """

    def __init__(self, config: ConfigContract, *, raise_on_write: bool = True) -> None:
        """Initialize the read-only wrapper.

        Args:
            config: The configuration store to wrap.
            raise_on_write: Whether to raise ReadOnlyError on writes. If False, writes are dropped.
        """
        self.raise_on_write: bool = raise_on_write

        super().__init__(config=config)

    @override
    def set(self, key: str, value: str) -> None:
        if self.raise_on_write:
            raise ReadOnlyError(operation="set", key=key)
