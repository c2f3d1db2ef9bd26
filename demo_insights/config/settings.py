"""
Settings Management with Pydantic

Provides type-safe configuration management with:
- Environment variable support
- Validation
- Separate ledger and dashboard configurations
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LedgerConfig(BaseSettings):
    """Customer ledger configuration."""
    model_config = SettingsConfigDict(
        env_prefix="LEDGER_",
        extra="ignore"
    )

    # Raise CustomerNotFoundError instead of ignoring unknown customer ids
    strict_customer_lookup: bool = False

    # Derived product name is "<category label> <suffix>"
    sale_product_suffix: str = "Package"


class DashboardConfig(BaseSettings):
    """Dashboard formatting configuration."""
    model_config = SettingsConfigDict(
        env_prefix="DASHBOARD_",
        extra="ignore"
    )

    currency_symbol: str = "$"
    revenue_display_divisor: int = Field(default=1000, gt=0)
    revenue_display_suffix: str = "k"


class Settings(BaseSettings):
    """Main application settings."""
    model_config = SettingsConfigDict(
        env_prefix="DEMO_INSIGHTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Application
    app_name: str = "Demo Insights"
    debug: bool = False
    log_level: LogLevel = LogLevel.INFO

    # Sub-configurations
    ledger: LedgerConfig = Field(default_factory=LedgerConfig)
    dashboard: DashboardConfig = Field(default_factory=DashboardConfig)

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables."""
        return cls(
            ledger=LedgerConfig(),
            dashboard=DashboardConfig()
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()
