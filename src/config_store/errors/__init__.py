from .base import BaseConfigStoreError, ExtraInfoType
from .loader import ConfigDecodeError, ConfigLoadError, ConfigParseError
from .wrappers import ConfigWriteError, ReadOnlyError

__all__ = [
    "BaseConfigStoreError",
    "ConfigDecodeError",
    "ConfigLoadError",
    "ConfigParseError",
    "ConfigWriteError",
    "ExtraInfoType",
    "ReadOnlyError",
]
