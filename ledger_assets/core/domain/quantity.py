"""
Quantity: Масштабированная сумма с проверяемой арифметикой

Сумма хранится как знаковое целое, масштабированное на 10^precision символа:
amount=12345 при precision=2 означает 123.45 единиц.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. -MAX_AMOUNT <= amount <= MAX_AMOUNT после конструирования и каждой мутации
2. symbol.is_valid() для любого количества, участвующего в арифметике
3. Символ неизменен после конструирования
4. Проверки выполняются до сохранения результата: частичных мутаций нет

Quantity.empty(): нулевое количество без валидного символа. Его можно
наблюдать, но любая бинарная операция с валидным количеством прерывается
SymbolMismatch.
"""

from typing import Any, Final

from pydantic import BaseModel, Field, field_validator

from ledger_assets.config.logging import get_logger
from ledger_assets.core.codec import INT64, FieldDescriptor, decode, encode
from ledger_assets.core.contracts import validate_quantity
from ledger_assets.core.domain.symbol import SYMBOL_CODEC, Symbol
from ledger_assets.core.errors import DivideByZero, InvalidSymbol, SymbolMismatch, check
from ledger_assets.core.math.checked_int import (
    checked_add,
    checked_div,
    checked_mul,
    checked_sub,
    is_amount_within_range,
    trunc_div,
    validate_amount,
    validate_scalar,
)
from ledger_assets.core.math.formatting import format_amount

logger = get_logger(__name__)

# Порядок полей в wire-формате: amount, symbol
QUANTITY_FIELDS: Final[tuple[FieldDescriptor, ...]] = (
    FieldDescriptor("amount", INT64),
    FieldDescriptor("symbol", SYMBOL_CODEC),
)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class Quantity(BaseModel):
    """
    Количество токенов, привязанное к символу.

    Мутируется только через add_assign/sub_assign/mul_assign/div_assign
    и set_amount (или соответствующие операторы +=, -=, *=, /=).
    Бинарные операторы работают как copy-then-assign.
    """

    amount: int = Field(..., strict=True, description="Сумма, масштабированная на 10^precision")
    symbol: Symbol = Field(..., frozen=True, description="Символ валюты")

    model_config = {"validate_assignment": True}

    def __init__(self, amount: int, symbol: Symbol, **data: Any) -> None:
        super().__init__(amount=amount, symbol=symbol, **data)

    @field_validator("amount")
    @classmethod
    def validate_amount_range(cls, v: int) -> int:
        """Проверка |amount| <= MAX_AMOUNT при конструировании и присваивании."""
        return validate_amount(v)

    @field_validator("symbol")
    @classmethod
    def validate_symbol(cls, v: Symbol) -> Symbol:
        check(v.is_valid(), InvalidSymbol, "invalid symbol name")
        return v

    @classmethod
    def empty(cls) -> "Quantity":
        """Нулевое количество с пустым символом (sentinel, не для арифметики)."""
        return cls.model_construct(amount=0, symbol=Symbol.null())

    # =========================================================================
    # ВАЛИДАЦИЯ
    # =========================================================================

    def is_amount_within_range(self) -> bool:
        return is_amount_within_range(self.amount)

    def is_valid(self) -> bool:
        """Сумма в диапазоне и символ валиден."""
        return self.is_amount_within_range() and self.symbol.is_valid()

    def _check_same_symbol(self, other: "Quantity", message: str) -> None:
        check(other.symbol == self.symbol, SymbolMismatch, message)

    # =========================================================================
    # МУТАЦИИ
    # =========================================================================

    def set_amount(self, amount: int) -> None:
        """
        Установка новой суммы.

        Raises:
            OutOfRange: Если |amount| > MAX_AMOUNT (сумма не меняется)
        """
        self.amount = validate_amount(amount)

    def add_assign(self, other: "Quantity") -> "Quantity":
        """
        Прибавление количества с тем же символом.

        Raises:
            SymbolMismatch: Если символы различаются
            ArithmeticOverflow / ArithmeticUnderflow: При выходе за MAX_AMOUNT
        """
        self._check_same_symbol(other, "attempt to add asset with different symbol")
        self.amount = checked_add(self.amount, other.amount)
        return self

    def sub_assign(self, other: "Quantity") -> "Quantity":
        """
        Вычитание количества с тем же символом.

        Raises:
            SymbolMismatch: Если символы различаются
            ArithmeticOverflow / ArithmeticUnderflow: При выходе за MAX_AMOUNT
        """
        self._check_same_symbol(other, "attempt to subtract asset with different symbol")
        self.amount = checked_sub(self.amount, other.amount)
        return self

    def mul_assign(self, scalar: int) -> "Quantity":
        """
        Умножение на знаковый 64-bit скаляр.

        Произведение проверяется до усечения, поэтому переполнение
        int64 не может тихо исказить сумму.

        Raises:
            TypeError / ValueError: Если скаляр не int64
            ArithmeticOverflow / ArithmeticUnderflow: При выходе за MAX_AMOUNT
        """
        self.amount = checked_mul(self.amount, validate_scalar(scalar))
        return self

    def div_assign(self, scalar: int) -> "Quantity":
        """
        Деление на знаковый 64-bit скаляр с усечением к нулю.

        Raises:
            TypeError / ValueError: Если скаляр не int64
            DivideByZero: Если scalar == 0
            ArithmeticOverflow: Для INT64_MIN / -1
        """
        self.amount = checked_div(self.amount, validate_scalar(scalar))
        return self

    # =========================================================================
    # НОВЫЕ ЗНАЧЕНИЯ
    # =========================================================================

    def negate(self) -> "Quantity":
        """Количество с противоположным знаком (граница симметрична)."""
        result = self.model_copy()
        result.amount = -self.amount
        return result

    def copy_value(self) -> "Quantity":
        return self.model_copy()

    def divide(self, other: "Quantity") -> int:
        """
        Деление количества на количество.

        Args:
            other: Делитель с тем же символом

        Returns:
            amount / other.amount с усечением к нулю

        Raises:
            DivideByZero: Если other.amount == 0
            SymbolMismatch: Если символы различаются
        """
        check(other.amount != 0, DivideByZero, "divide by zero")
        self._check_same_symbol(
            other, "comparison of assets with different symbols is not allowed"
        )
        return trunc_div(self.amount, other.amount)

    # =========================================================================
    # ОПЕРАТОРЫ
    # =========================================================================

    def __neg__(self) -> "Quantity":
        return self.negate()

    def __add__(self, other: Any) -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.copy_value().add_assign(other)

    def __sub__(self, other: Any) -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.copy_value().sub_assign(other)

    def __iadd__(self, other: Any) -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.add_assign(other)

    def __isub__(self, other: Any) -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.sub_assign(other)

    def __mul__(self, scalar: Any) -> "Quantity":
        if not _is_scalar(scalar):
            return NotImplemented
        return self.copy_value().mul_assign(scalar)

    __rmul__ = __mul__

    def __imul__(self, scalar: Any) -> "Quantity":
        if not _is_scalar(scalar):
            return NotImplemented
        return self.mul_assign(scalar)

    def __truediv__(self, other: Any) -> "Quantity | int":
        if isinstance(other, Quantity):
            return self.divide(other)
        if not _is_scalar(other):
            return NotImplemented
        return self.copy_value().div_assign(other)

    __floordiv__ = __truediv__

    def __itruediv__(self, scalar: Any) -> "Quantity":
        if not _is_scalar(scalar):
            return NotImplemented
        return self.div_assign(scalar)

    __ifloordiv__ = __itruediv__

    # =========================================================================
    # СРАВНЕНИЯ
    # =========================================================================

    def _check_comparable(self, other: "Quantity") -> None:
        self._check_same_symbol(
            other, "comparison of assets with different symbols is not allowed"
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._check_comparable(other)
        return self.amount == other.amount

    def __ne__(self, other: Any) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return not self == other

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._check_comparable(other)
        return self.amount < other.amount

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._check_comparable(other)
        return self.amount <= other.amount

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._check_comparable(other)
        return self.amount > other.amount

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._check_comparable(other)
        return self.amount >= other.amount

    # =========================================================================
    # ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def to_string(self) -> str:
        """
        Десятичное представление с кодом валюты.

        Examples:
            >>> Quantity(100000, Symbol(code="SYS", precision=4)).to_string()
            '10.0000 SYS'
        """
        return format_amount(self.amount, self.symbol.precision(), self.symbol.code())

    def __str__(self) -> str:
        return self.to_string()

    def print(self) -> None:
        """Вывод количества в лог."""
        logger.info("quantity", value=self.to_string())

    # =========================================================================
    # СЕРИАЛИЗАЦИЯ
    # =========================================================================

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Quantity":
        """
        Конструирование из JSON формы после проверки контракта.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
            AssetError: Если нарушены инварианты количества
        """
        validate_quantity(data)
        return cls.model_validate(data)

    def pack(self) -> bytes:
        return encode(self, QUANTITY_FIELDS)

    @classmethod
    def unpack(cls, data: bytes) -> "Quantity":
        return decode(cls, data, QUANTITY_FIELDS)
