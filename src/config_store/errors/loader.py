from config_store.errors.base import BaseConfigStoreError


class ConfigLoadError(BaseConfigStoreError):
    """Base exception for errors raised while loading configuration items."""


class ConfigParseError(ConfigLoadError):
    """Raised when a line of a configuration file is not a `key=value` pair."""

    def __init__(self, line: str, line_number: int | None = None):
        self.line: str = line
        self.line_number: int | None = line_number

        super().__init__(
            message="A configuration line could not be parsed as key=value.",
            extra_info={"line_number": line_number, "line": line},
        )


class ConfigDecodeError(ConfigLoadError):
    """Raised when a configuration file is not valid UTF-8 text."""

    def __init__(self, path: str, reason: str):
        self.path: str = path

        super().__init__(
            message="A configuration file could not be decoded as UTF-8.",
            extra_info={"path": path, "reason": reason},
        )
