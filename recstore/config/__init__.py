"""Configuration for recstore."""

from .store_config import (
    StoreConfig,
    get_store_config,
    reset_store_config,
    update_store_config,
)

__all__ = [
    "StoreConfig",
    "get_store_config",
    "reset_store_config",
    "update_store_config",
]
