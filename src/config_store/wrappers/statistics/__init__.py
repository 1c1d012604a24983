from config_store.wrappers.statistics.wrapper import ConfigStoreStatistics, StatisticsWrapper

__all__ = ["ConfigStoreStatistics", "StatisticsWrapper"]
