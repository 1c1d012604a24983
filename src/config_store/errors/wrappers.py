from config_store.errors.base import BaseConfigStoreError


class ConfigWriteError(BaseConfigStoreError):
    """Base exception for errors raised when a write is refused."""


class ReadOnlyError(ConfigWriteError):
    """Raised when a write operation is attempted on a read-only store."""

    def __init__(self, operation: str, key: str | None = None):
        super().__init__(
            message="Write operation not allowed on read-only store.",
            extra_info={"operation": operation, "key": key},
        )
