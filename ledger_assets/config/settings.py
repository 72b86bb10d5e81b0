"""
Settings: Конфигурация пакета из окружения

Приоритет:
    1. Переменные окружения с префиксом LEDGER_ASSETS_
    2. .env файл в текущем каталоге
    3. Значения по умолчанию

Доменные константы (MAX_AMOUNT, MAX_PRECISION) не конфигурируются:
они определяют формат данных и детерминизм арифметики.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LedgerSettings(BaseSettings):
    """
    Настройки логирования ledger_assets.

    Переменные окружения:
        LEDGER_ASSETS_LOG_LEVEL: Уровень логов пакета (по умолчанию WARNING)
        LEDGER_ASSETS_LOG_JSON: JSON-вывод вместо консольного (по умолчанию false)
    """

    log_level: LogLevel = Field(default="WARNING", description="Уровень логов пакета")
    log_json: bool = Field(default=False, description="JSON renderer для structlog")

    model_config = SettingsConfigDict(
        env_prefix="LEDGER_ASSETS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> LedgerSettings:
    """Кэшированный экземпляр настроек."""
    return LedgerSettings()
