"""
Asset Errors: Таксономия ошибок и примитив прерывания

Все ошибки фатальны для текущей операции и никогда не восстанавливаются
локально. Единственный способ сигнализировать об ошибке: check():
если условие ложно, поднимается типизированное исключение, и вся цепочка
вызовов разворачивается. Частичных результатов нет.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая ошибка имеет стабильный kind (для логов и аудита)
2. Проверки выполняются ДО изменения состояния
3. Поведение детерминировано: одинаковые входы → одинаковые ошибки
"""

from typing import ClassVar, NoReturn

from ledger_assets.config.logging import get_logger

logger = get_logger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class AssetError(Exception):
    """
    Базовое исключение для всех ошибок операций над количествами.

    Атрибут kind: стабильный идентификатор вида ошибки.
    """

    kind: ClassVar[str] = "asset_error"


class InvalidSymbol(AssetError):
    """Символ не прошёл собственную проверку валидности при конструировании."""

    kind = "invalid_symbol"


class OutOfRange(AssetError):
    """|amount| > MAX_AMOUNT после конструирования или set_amount."""

    kind = "out_of_range"


class SymbolMismatch(AssetError):
    """Бинарная операция между количествами с разными символами."""

    kind = "symbol_mismatch"


class OwnerMismatch(AssetError):
    """Арифметика или упорядочивание между OwnedQuantity с разными владельцами."""

    kind = "owner_mismatch"


class DivideByZero(AssetError):
    """Делитель (скаляр или количество) равен нулю."""

    kind = "divide_by_zero"


class ArithmeticOverflow(AssetError):
    """
    Результат превышает +MAX_AMOUNT.

    Также поднимается для единственного граничного случая знакового деления:
    INT64_MIN / -1.
    """

    kind = "overflow"


class ArithmeticUnderflow(AssetError):
    """Результат меньше -MAX_AMOUNT."""

    kind = "underflow"


class CodecError(AssetError):
    """Некорректные байты при декодировании wire-формата."""

    kind = "codec"


# =============================================================================
# ПРИМИТИВ ПРЕРЫВАНИЯ
# =============================================================================


def abort(error_cls: type[AssetError], message: str) -> NoReturn:
    """
    Безусловное прерывание текущей операции.

    Args:
        error_cls: Класс ошибки из таксономии
        message: Сообщение об ошибке

    Raises:
        error_cls: Всегда
    """
    logger.debug("asset_check_failed", kind=error_cls.kind, reason=message)
    raise error_cls(message)


def check(condition: bool, error_cls: type[AssetError], message: str) -> None:
    """
    Проверка условия с прерыванием при нарушении.

    Args:
        condition: Условие, которое должно выполняться
        error_cls: Класс ошибки, поднимаемой при нарушении
        message: Сообщение об ошибке

    Raises:
        error_cls: Если condition ложно

    Examples:
        >>> check(1 + 1 == 2, OutOfRange, "never raised")
        >>> check(False, DivideByZero, "divide by zero")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        DivideByZero: divide by zero
    """
    if not condition:
        abort(error_cls, message)
