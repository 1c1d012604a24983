from config_store.wrappers.base import BaseWrapper
from config_store.wrappers.logging import LoggingWrapper
from config_store.wrappers.read_only import ReadOnlyWrapper
from config_store.wrappers.statistics import StatisticsWrapper

__all__ = ["BaseWrapper", "LoggingWrapper", "ReadOnlyWrapper", "StatisticsWrapper"]
