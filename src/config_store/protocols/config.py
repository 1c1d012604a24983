from collections.abc import Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class ConfigContract(Protocol):
    """Protocol defining the interface for configuration store implementations.

    A configuration store maps string keys to string values. Every operation is total: lookups of
    missing keys return `False` or `None` rather than raising, and writes always succeed.
    """

    def has(self, key: str) -> bool:
        """Check whether a key exists in the configuration.

        Args:
            key: The key to check.

        Returns:
            True if the key is present, False otherwise.
        """
        ...

    def get(self, key: str) -> str | None:
        """Retrieve the value associated with a key.

        Args:
            key: The key to retrieve.

        Returns:
            The value if the key is present, None otherwise.
        """
        ...

    def set(self, key: str, value: str) -> None:
        """Store a value for a key, replacing any previous value.

        Args:
            key: The key to store.
            value: The value to store. Empty strings are allowed.
        """
        ...

    def all(self) -> Mapping[str, str]:
        """Return a read-only view of every configuration item.

        The view reflects all writes made before it is read. No ordering is promised.
        """
        ...
