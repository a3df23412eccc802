"""Configuration management for record stores and their front ends."""

import os
from dataclasses import dataclass
from typing import Any

ID_STRATEGIES = ("counter", "random")
LIST_FILTERS = ("incomplete", "all")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_bool(name: str, default: bool = False) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    v = os.getenv(name)
    try:
        return int(v) if v is not None else default
    except ValueError:
        return default


@dataclass
class StoreConfig:
    """Configuration for a RecordStore and the CLI/HTTP layers around it."""

    # Store
    default_name: str = "Tasks"
    id_strategy: str = "counter"  # "counter" or "random"
    counter_start: int = 1
    random_id_low: int = 0
    random_id_high: int = 999

    # Presentation
    default_filter: str = "incomplete"  # "incomplete" or "all"
    seed_path: str | None = None

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "StoreConfig":
        """Create configuration from environment variables."""
        return cls(
            default_name=os.getenv("RECSTORE_NAME", "Tasks"),
            id_strategy=os.getenv("RECSTORE_ID_STRATEGY", "counter").lower(),
            counter_start=_env_int("RECSTORE_COUNTER_START", 1),
            random_id_low=_env_int("RECSTORE_RANDOM_LOW", 0),
            random_id_high=_env_int("RECSTORE_RANDOM_HIGH", 999),
            default_filter=os.getenv("RECSTORE_DEFAULT_FILTER", "incomplete").lower(),
            seed_path=os.getenv("RECSTORE_SEED") or None,
            log_level=os.getenv("RECSTORE_LOG_LEVEL", "INFO").upper(),
            json_logs=_env_bool("RECSTORE_JSON_LOGS", False),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "default_name": self.default_name,
            "id_strategy": self.id_strategy,
            "counter_start": self.counter_start,
            "random_id_low": self.random_id_low,
            "random_id_high": self.random_id_high,
            "default_filter": self.default_filter,
            "seed_path": self.seed_path,
            "log_level": self.log_level,
            "json_logs": self.json_logs,
        }

    def update_from_dict(self, config_dict: dict[str, Any]) -> None:
        """Update configuration from dictionary."""
        for key, value in config_dict.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def validate(self) -> list[str]:
        """Validate configuration parameters."""
        errors = []

        if not str(self.default_name).strip():
            errors.append("Default name must not be blank")

        if self.id_strategy not in ID_STRATEGIES:
            errors.append("Id strategy must be 'counter' or 'random'")

        if self.random_id_low > self.random_id_high:
            errors.append("Random id range low bound must not exceed high bound")

        if self.default_filter not in LIST_FILTERS:
            errors.append("Default filter must be 'incomplete' or 'all'")

        if self.log_level not in LOG_LEVELS:
            errors.append(
                "Log level must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL"
            )

        return errors


# Global configuration instance
STORE_CONFIG = StoreConfig.from_env()


def get_store_config() -> StoreConfig:
    """Get the global store configuration."""
    return STORE_CONFIG


def update_store_config(config_dict: dict[str, Any]) -> list[str]:
    """Update the global store configuration."""
    temp_config = StoreConfig(**STORE_CONFIG.to_dict())
    temp_config.update_from_dict(config_dict)
    errors = temp_config.validate()

    if not errors:
        STORE_CONFIG.update_from_dict(config_dict)

    return errors


def reset_store_config() -> None:
    """Reset the global store configuration to environment defaults."""
    global STORE_CONFIG
    STORE_CONFIG = StoreConfig.from_env()
