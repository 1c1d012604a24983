from collections.abc import Mapping

from typing_extensions import override

from config_store.protocols.config import ConfigContract


class BaseWrapper(ConfigContract):
    """A base wrapper for configuration stores that passes through to the underlying store."""

    config: ConfigContract

    def __init__(self, config: ConfigContract) -> None:
        self.config = config

    @override
    def has(self, key: str) -> bool:
        return self.config.has(key=key)

    @override
    def get(self, key: str) -> str | None:
        return self.config.get(key=key)

    @override
    def set(self, key: str, value: str) -> None:
        return self.config.set(key=key, value=value)

    @override
    def all(self) -> Mapping[str, str]:
        return self.config.all()
