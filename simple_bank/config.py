"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from decimal import Decimal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .currency import Currency


class BankConfig(BaseSettings):
    """Simple bank configuration"""

    model_config = SettingsConfigDict(
        env_prefix="SIMPLE_BANK_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Business rules configuration
    default_currency: str = "USD"
    savings_minimum_balance: Decimal = Decimal("500.00")

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text

    @field_validator("default_currency")
    @classmethod
    def _known_currency(cls, value: str) -> str:
        code = value.upper()
        if code not in Currency.__members__:
            raise ValueError(f"Unsupported currency: {value}")
        return code

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unsupported log level: {value}")
        return level

    @field_validator("log_format")
    @classmethod
    def _known_format(cls, value: str) -> str:
        fmt = value.lower()
        if fmt not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return fmt

    @property
    def currency(self) -> Currency:
        return Currency[self.default_currency]


# Global configuration instance
config = BankConfig()


def get_config() -> BankConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> BankConfig:
    """Reload configuration from environment"""
    global config
    config = BankConfig()
    return config
