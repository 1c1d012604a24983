from config_store.protocols.config import ConfigContract

__all__ = ["ConfigContract"]
