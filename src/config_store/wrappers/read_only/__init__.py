from config_store.wrappers.read_only.wrapper import ReadOnlyWrapper

__all__ = ["ReadOnlyWrapper"]
