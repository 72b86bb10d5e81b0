"""
Logging: настройка structlog для ledger_assets

Логгеры пакета работают поверх stdlib logging (get_logger), поэтому
без явной настройки события фильтруются уровнем root-логгера (WARNING)
и NullHandler пакета: хост ничего не видит.

Два режима вывода после configure_logging():
- Консольный (по умолчанию): цветной вывод в stderr
- JSON: структурированные JSON строки в stderr

Пакет не настраивает логирование при импорте: хост вызывает
configure_logging() или setup_logging() один раз при старте.
"""

import logging
import sys
from typing import Final

import structlog

from ledger_assets.config.settings import LedgerSettings, get_settings

PACKAGE_LOGGER: Final[str] = "ledger_assets"


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    structlog-логгер, привязанный к stdlib логгеру с тем же именем.

    Уровень и обработчики определяются иерархией logging, а процессоры
    берутся из текущей конфигурации structlog при каждом вызове.
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )


def configure_logging(
    *,
    level: int | str = logging.WARNING,
    log_json: bool = False,
) -> None:
    """
    Настройка процессоров structlog и вывода логгера пакета.

    Args:
        level: Уровень иерархии логгеров ledger_assets
        log_json: JSON renderer вместо консольного
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    # Заменяет и NullHandler, установленный при импорте пакета
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False


def setup_logging(settings: LedgerSettings | None = None) -> None:
    """Настройка логирования из LedgerSettings (по умолчанию из окружения)."""
    settings = settings or get_settings()
    configure_logging(level=settings.log_level, log_json=settings.log_json)
