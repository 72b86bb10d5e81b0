"""
Formatting: Десятичное представление масштабированной суммы

Чистая функция (amount, precision, code) → каноническая строка.
Вызывается только для отображения и логирования, никогда на пути арифметики.

Алгоритм:
    p10 = 10^precision
    integer_part = |amount| // p10
    fraction = |amount| % p10, ровно precision цифр с ведущими нулями
    знак "-" ставится перед модулем целой части

При precision = 0 дробная часть и разделитель не выводятся: "10 SYS".
"""

from typing import Final

# Максимальная поддерживаемая точность символа (10^18 < 2^62)
MAX_PRECISION: Final[int] = 18

# Разделитель целой и дробной части
DECIMAL_SEPARATOR: Final[str] = "."


def pow10(precision: int) -> int:
    """
    Множитель масштабирования 10^precision.

    Args:
        precision: Количество дробных знаков (0..MAX_PRECISION)

    Returns:
        10^precision

    Raises:
        ValueError: Если precision вне диапазона 0..MAX_PRECISION
    """
    if not 0 <= precision <= MAX_PRECISION:
        raise ValueError(
            f"precision must be in [0, {MAX_PRECISION}], got {precision}"
        )
    return 10**precision


def format_amount(amount: int, precision: int, code: str) -> str:
    """
    Рендеринг суммы в десятичную строку с кодом валюты.

    Args:
        amount: Масштабированная сумма (знаковая)
        precision: Количество дробных знаков (0..MAX_PRECISION)
        code: Код валюты

    Returns:
        Строка вида "[-]<integer>[.<fraction>] <code>"

    Raises:
        ValueError: Если precision вне диапазона

    Examples:
        >>> format_amount(100000, 4, "SYS")
        '10.0000 SYS'
        >>> format_amount(-5, 4, "SYS")
        '-0.0005 SYS'
        >>> format_amount(10, 0, "SYS")
        '10 SYS'
    """
    p10 = pow10(precision)
    magnitude = abs(amount)
    sign = "-" if amount < 0 else ""

    integer_part = magnitude // p10
    if precision == 0:
        return f"{sign}{integer_part} {code}"

    fraction = str(magnitude % p10).rjust(precision, "0")
    return f"{sign}{integer_part}{DECIMAL_SEPARATOR}{fraction} {code}"
