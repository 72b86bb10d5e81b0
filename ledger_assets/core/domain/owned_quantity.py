"""
OwnedQuantity: Количество, квалифицированное владельцем

Композиция Quantity + Identity (контракт-эмитент или держатель).
Арифметика делегируется Quantity после проверки равенства владельцев.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. add/sub и упорядочивание (<, <=, >, >=) требуют a.owner == b.owner,
   иначе OwnerMismatch
2. Равенство (==, !=) сравнивает пару (quantity, owner) целиком и НЕ требует
   совпадения владельцев: разные владельцы просто дают False.
   Сравнение quantity выполняется первым, поэтому разные символы
   по-прежнему прерываются SymbolMismatch
3. Владелец задаётся при конструировании и не меняется

Асимметрия между равенством и упорядочиванием сохранена для совместимости
с существующими вызывающими сторонами.
"""

from typing import Any, Final

from pydantic import BaseModel, Field, field_validator

from ledger_assets.config.logging import get_logger
from ledger_assets.core.codec import FieldDescriptor, ModelCodec, decode, encode
from ledger_assets.core.contracts import validate_owned_quantity
from ledger_assets.core.domain.identity import IDENTITY_CODEC, Identity
from ledger_assets.core.domain.quantity import QUANTITY_FIELDS, Quantity
from ledger_assets.core.domain.symbol import OWNER_SEPARATOR, ExtendedSymbol
from ledger_assets.core.errors import OwnerMismatch, check

logger = get_logger(__name__)

# Порядок полей в wire-формате: quantity, owner (контракт)
OWNED_QUANTITY_FIELDS: Final[tuple[FieldDescriptor, ...]] = (
    FieldDescriptor("quantity", ModelCodec(Quantity, QUANTITY_FIELDS)),
    FieldDescriptor("owner", IDENTITY_CODEC),
)


class OwnedQuantity(BaseModel):
    """
    Количество с владельцем.

    Содержит собственную копию Quantity: мутации через += / -= не видны
    вызывающей стороне, передавшей исходное количество.
    """

    quantity: Quantity = Field(..., description="Количество")
    owner: Identity = Field(..., frozen=True, description="Контракт-владелец")

    model_config = {"validate_assignment": True}

    def __init__(self, quantity: Quantity, owner: Identity, **data: Any) -> None:
        super().__init__(quantity=quantity, owner=owner, **data)

    @field_validator("quantity")
    @classmethod
    def copy_quantity(cls, v: Quantity) -> Quantity:
        return v.model_copy()

    @classmethod
    def from_extended(cls, amount: int, extended_symbol: ExtendedSymbol) -> "OwnedQuantity":
        """
        Конструирование из суммы и расширенного символа.

        Raises:
            InvalidSymbol / OutOfRange: Из конструктора Quantity
        """
        return cls(
            quantity=Quantity(amount, extended_symbol.get_symbol()),
            owner=extended_symbol.get_contract(),
        )

    @classmethod
    def empty(cls) -> "OwnedQuantity":
        """Пустое значение (sentinel): пустое количество и нулевой владелец."""
        return cls.model_construct(quantity=Quantity.empty(), owner=Identity(value=0))

    def extended_symbol(self) -> ExtendedSymbol:
        return ExtendedSymbol(symbol=self.quantity.symbol, contract=self.owner)

    def _check_same_owner(self, other: "OwnedQuantity") -> None:
        check(self.owner == other.owner, OwnerMismatch, "type mismatch")

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def negate(self) -> "OwnedQuantity":
        return OwnedQuantity(quantity=self.quantity.negate(), owner=self.owner)

    def add_assign(self, other: "OwnedQuantity") -> "OwnedQuantity":
        """
        Прибавление количества того же владельца.

        Raises:
            OwnerMismatch: Если владельцы различаются
            SymbolMismatch / ArithmeticOverflow / ArithmeticUnderflow: Из Quantity
        """
        self._check_same_owner(other)
        self.quantity.add_assign(other.quantity)
        return self

    def sub_assign(self, other: "OwnedQuantity") -> "OwnedQuantity":
        """
        Вычитание количества того же владельца.

        Raises:
            OwnerMismatch: Если владельцы различаются
            SymbolMismatch / ArithmeticOverflow / ArithmeticUnderflow: Из Quantity
        """
        self._check_same_owner(other)
        self.quantity.sub_assign(other.quantity)
        return self

    def __neg__(self) -> "OwnedQuantity":
        return self.negate()

    def __add__(self, other: Any) -> "OwnedQuantity":
        if not isinstance(other, OwnedQuantity):
            return NotImplemented
        self._check_same_owner(other)
        return OwnedQuantity(quantity=self.quantity + other.quantity, owner=self.owner)

    def __sub__(self, other: Any) -> "OwnedQuantity":
        if not isinstance(other, OwnedQuantity):
            return NotImplemented
        self._check_same_owner(other)
        return OwnedQuantity(quantity=self.quantity - other.quantity, owner=self.owner)

    def __iadd__(self, other: Any) -> "OwnedQuantity":
        if not isinstance(other, OwnedQuantity):
            return NotImplemented
        return self.add_assign(other)

    def __isub__(self, other: Any) -> "OwnedQuantity":
        if not isinstance(other, OwnedQuantity):
            return NotImplemented
        return self.sub_assign(other)

    # =========================================================================
    # СРАВНЕНИЯ
    # =========================================================================

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, OwnedQuantity):
            return NotImplemented
        # Владелец не является предусловием: разные владельцы → False
        return self.quantity == other.quantity and self.owner == other.owner

    def __ne__(self, other: Any) -> bool:
        if not isinstance(other, OwnedQuantity):
            return NotImplemented
        return not self == other

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, OwnedQuantity):
            return NotImplemented
        self._check_same_owner(other)
        return self.quantity < other.quantity

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, OwnedQuantity):
            return NotImplemented
        self._check_same_owner(other)
        return self.quantity <= other.quantity

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, OwnedQuantity):
            return NotImplemented
        self._check_same_owner(other)
        return self.quantity > other.quantity

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, OwnedQuantity):
            return NotImplemented
        self._check_same_owner(other)
        return self.quantity >= other.quantity

    # =========================================================================
    # ПРЕДСТАВЛЕНИЕ И СЕРИАЛИЗАЦИЯ
    # =========================================================================

    def to_string(self) -> str:
        return f"{self.quantity.to_string()}{OWNER_SEPARATOR}{self.owner}"

    def __str__(self) -> str:
        return self.to_string()

    def print(self) -> None:
        logger.info("owned_quantity", value=self.to_string())

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OwnedQuantity":
        """
        Конструирование из JSON формы после проверки контракта.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
            AssetError: Если нарушены инварианты количества
        """
        validate_owned_quantity(data)
        return cls.model_validate(data)

    def pack(self) -> bytes:
        return encode(self, OWNED_QUANTITY_FIELDS)

    @classmethod
    def unpack(cls, data: bytes) -> "OwnedQuantity":
        return decode(cls, data, OWNED_QUANTITY_FIELDS)
