from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class AppConfig(BaseSettings):
    """Application configuration using Pydantic BaseSettings.

    Loads configuration from environment variables (prefixed ``INVENTORY_``)
    and a .env file if present. Fields are type-checked and validated.
    """
    # Application
    app_env: str = "local"
    log_level: str = "INFO"

    # Storage
    repository_kind: Literal["memory"] = "memory"

    # Ledger policy
    # When False, a fulfillment debit larger than the current stock raises
    # InsufficientStockError instead of clamping the stock at zero.
    allow_over_debit: bool = True

    # Activity log
    max_activity_log_items: int = 50

    # Seed data settings
    default_seed_scale: str = "small"
    default_seed_value: int = 42

    model_config = SettingsConfigDict(
        env_prefix="INVENTORY_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

_config: Optional[AppConfig] = None

def get_config() -> AppConfig:
    """Return the AppConfig instance (singleton pattern)."""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config

def set_config_for_test(**kwargs):
    """For testing only: override the AppConfig instance with new values."""
    global _config
    _config = AppConfig(**kwargs)
