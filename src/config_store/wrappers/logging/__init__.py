from config_store.wrappers.logging.wrapper import LoggingWrapper

__all__ = ["LoggingWrapper"]
