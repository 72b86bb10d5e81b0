"""
Конфигурация: настройки из окружения и настройка structlog.
"""

from ledger_assets.config.logging import configure_logging, get_logger, setup_logging
from ledger_assets.config.settings import LedgerSettings, get_settings

__all__ = [
    "LedgerSettings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "setup_logging",
]
