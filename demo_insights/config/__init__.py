"""
Configuration Management

Centralized configuration for:
- Customer ledger behaviour (strict lookup, product naming)
- Dashboard formatting
- Logging
"""

from .settings import (
    Settings,
    LedgerConfig,
    DashboardConfig,
    LogLevel,
    get_settings
)
from .logging_config import setup_logging

__all__ = [
    "Settings",
    "LedgerConfig",
    "DashboardConfig",
    "LogLevel",
    "get_settings",
    "setup_logging"
]
