"""
Checked Integer Math: Целочисленная арифметика с проверкой границ

Модуль обеспечивает арифметику над масштабированными суммами:
- Симметричная граница модуля MAX_AMOUNT = 2^62 - 1
- Проверка переполнения ДО сохранения результата
- Умножение в расширенном (128-bit) промежуточном диапазоне
- Усекающее деление (к нулю), а не floor-деление Python

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат любой операции лежит в [-MAX_AMOUNT, MAX_AMOUNT] или операция прерывается
2. Деление на ноль никогда не происходит (DivideByZero)
3. Остаток при делении отбрасывается, без округления
4. Все операции детерминированы и воспроизводимы
"""

from typing import Final

from ledger_assets.core.errors import (
    ArithmeticOverflow,
    ArithmeticUnderflow,
    DivideByZero,
    OutOfRange,
    check,
)

# =============================================================================
# ГРАНИЦЫ
# =============================================================================

# Максимальный модуль суммы: 2^62 - 1
MAX_AMOUNT: Final[int] = (1 << 62) - 1

# Диапазон знакового 64-bit целого (ширина поля amount)
INT64_MIN: Final[int] = -(1 << 63)
INT64_MAX: Final[int] = (1 << 63) - 1


# =============================================================================
# ПРОВЕРКИ ДИАПАЗОНА
# =============================================================================


def is_amount_within_range(amount: int) -> bool:
    """
    Проверка, что сумма лежит в [-MAX_AMOUNT, MAX_AMOUNT].

    Args:
        amount: Масштабированная сумма

    Returns:
        True если -MAX_AMOUNT <= amount <= MAX_AMOUNT
    """
    return -MAX_AMOUNT <= amount <= MAX_AMOUNT


def is_int64(value: int) -> bool:
    """Проверка, что значение помещается в знаковое 64-bit целое."""
    return INT64_MIN <= value <= INT64_MAX


def validate_amount(amount: int) -> int:
    """
    Валидация суммы против MAX_AMOUNT.

    Args:
        amount: Масштабированная сумма

    Returns:
        amount без изменений

    Raises:
        OutOfRange: Если |amount| > MAX_AMOUNT
    """
    check(
        is_amount_within_range(amount),
        OutOfRange,
        "magnitude of asset amount must be less than 2^62",
    )
    return amount


def validate_scalar(value: int, name: str = "scalar") -> int:
    """
    Валидация скалярного множителя/делителя.

    Args:
        value: Скаляр
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        TypeError: Если value не int (bool тоже отвергается)
        ValueError: Если value не помещается в int64
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")

    if not is_int64(value):
        raise ValueError(f"{name} must fit in signed 64-bit integer, got {value}")

    return value


# =============================================================================
# УСЕКАЮЩЕЕ ДЕЛЕНИЕ
# =============================================================================


def trunc_div(numerator: int, denominator: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Python `//` округляет к минус бесконечности; здесь остаток
    отбрасывается к нулю.

    Args:
        numerator: Делимое
        denominator: Делитель (не ноль)

    Returns:
        Частное, усечённое к нулю

    Examples:
        >>> trunc_div(7, 2)
        3
        >>> trunc_div(-7, 2)
        -3
        >>> trunc_div(7, -2)
        -3
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


# =============================================================================
# ПРОВЕРЯЕМАЯ АРИФМЕТИКА
# =============================================================================


def checked_add(a: int, b: int) -> int:
    """
    Сложение с проверкой границы MAX_AMOUNT.

    Raises:
        ArithmeticUnderflow: Если результат < -MAX_AMOUNT
        ArithmeticOverflow: Если результат > MAX_AMOUNT
    """
    result = a + b
    check(-MAX_AMOUNT <= result, ArithmeticUnderflow, "addition underflow")
    check(result <= MAX_AMOUNT, ArithmeticOverflow, "addition overflow")
    return result


def checked_sub(a: int, b: int) -> int:
    """
    Вычитание с проверкой границы MAX_AMOUNT.

    Raises:
        ArithmeticUnderflow: Если результат < -MAX_AMOUNT
        ArithmeticOverflow: Если результат > MAX_AMOUNT
    """
    result = a - b
    check(-MAX_AMOUNT <= result, ArithmeticUnderflow, "subtraction underflow")
    check(result <= MAX_AMOUNT, ArithmeticOverflow, "subtraction overflow")
    return result


def checked_mul(amount: int, scalar: int) -> int:
    """
    Умножение в расширенном промежуточном диапазоне.

    Произведение двух int64 всегда помещается в int128, поэтому
    промежуточное значение проверяется против MAX_AMOUNT до усечения
    обратно в 64 бита.

    Args:
        amount: Масштабированная сумма
        scalar: Знаковый 64-bit множитель

    Returns:
        Произведение в пределах [-MAX_AMOUNT, MAX_AMOUNT]

    Raises:
        ArithmeticOverflow: Если произведение > MAX_AMOUNT
        ArithmeticUnderflow: Если произведение < -MAX_AMOUNT
    """
    wide = amount * scalar
    check(wide <= MAX_AMOUNT, ArithmeticOverflow, "multiplication overflow")
    check(wide >= -MAX_AMOUNT, ArithmeticUnderflow, "multiplication underflow")
    return wide


def checked_div(amount: int, scalar: int) -> int:
    """
    Деление суммы на скаляр с усечением к нулю.

    Args:
        amount: Масштабированная сумма
        scalar: Знаковый 64-bit делитель

    Returns:
        Частное, усечённое к нулю

    Raises:
        DivideByZero: Если scalar == 0
        ArithmeticOverflow: Если amount == INT64_MIN и scalar == -1
    """
    check(scalar != 0, DivideByZero, "divide by zero")
    check(
        not (amount == INT64_MIN and scalar == -1),
        ArithmeticOverflow,
        "signed division overflow",
    )
    return trunc_div(amount, scalar)
