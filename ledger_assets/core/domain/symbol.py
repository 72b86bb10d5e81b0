"""
Symbol: Дескриптор валюты (код + точность)

Quantity использует от символа:
- is_valid() → bool
- precision() → int (0..18 для валидного символа)
- code() → str
- равенство по значению

ExtendedSymbol квалифицирует символ контрактом-эмитентом.
Raw-кодирование совпадает с 64-bit раскладкой символа:
младший байт хранит точность, следующие до 7 байт: ASCII-символы кода.
"""

from dataclasses import dataclass
from typing import Final

from pydantic import BaseModel, Field

from ledger_assets.core.codec import UINT64
from ledger_assets.core.domain.identity import Identity
from ledger_assets.core.errors import CodecError
from ledger_assets.core.math.formatting import MAX_PRECISION

# Максимальная длина кода валюты (7 байт в 64-bit раскладке)
SYMBOL_CODE_MAX_LEN: Final[int] = 7

# Разделитель символа и контракта (владельца) в строковом представлении
OWNER_SEPARATOR: Final[str] = "@"


# =============================================================================
# SYMBOL
# =============================================================================


class Symbol(BaseModel):
    """
    Эталонный символ: код валюты и количество дробных знаков.

    Конструирование не проверяет валидность кода, это делает is_valid(),
    так же как и при декодировании произвольного raw значения.
    """

    code_value: str = Field(..., alias="code", description="Код валюты (например, 'SYS')")
    precision_value: int = Field(
        ..., alias="precision", strict=True, ge=0, le=255, description="Дробные знаки (uint8)"
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @classmethod
    def null(cls) -> "Symbol":
        """Пустой (невалидный) символ для sentinel-количества."""
        return cls(code="", precision=0)

    @classmethod
    def from_raw(cls, raw: int) -> "Symbol":
        """
        Декодирование символа из 64-bit raw значения.

        Args:
            raw: precision | code_char_i << 8 * (i + 1)

        Returns:
            Symbol (возможно невалидный, см. is_valid())

        Raises:
            ValueError: Если после нулевого байта-терминатора идут ненулевые байты
        """
        precision = raw & 0xFF
        chars = []
        rest = raw >> 8
        while rest:
            byte = rest & 0xFF
            if byte == 0:
                break
            chars.append(chr(byte))
            rest >>= 8
        if rest:
            raise ValueError(f"symbol raw value {raw:#x} has code bytes after terminator")
        return cls(code="".join(chars), precision=precision)

    def code(self) -> str:
        return self.code_value

    def precision(self) -> int:
        return self.precision_value

    def is_valid(self) -> bool:
        """
        Проверка валидности символа.

        Returns:
            True если код состоит из 1..7 заглавных латинских букв и точность <= 18
        """
        code = self.code_value
        if not 0 < len(code) <= SYMBOL_CODE_MAX_LEN:
            return False
        if not all("A" <= ch <= "Z" for ch in code):
            return False
        return self.precision_value <= MAX_PRECISION

    def raw(self) -> int:
        """
        64-bit raw значение символа.

        Raises:
            ValueError: Если код не помещается в 7 ASCII байт
        """
        code = self.code_value
        if len(code) > SYMBOL_CODE_MAX_LEN or not code.isascii():
            raise ValueError(f"symbol code {code!r} cannot be encoded")

        raw = self.precision_value
        for i, ch in enumerate(code):
            raw |= ord(ch) << (8 * (i + 1))
        return raw

    def __str__(self) -> str:
        return f"{self.precision_value},{self.code_value}"


# =============================================================================
# EXTENDED SYMBOL
# =============================================================================


class ExtendedSymbol(BaseModel):
    """Символ, квалифицированный контрактом-эмитентом."""

    symbol: Symbol = Field(..., description="Символ валюты")
    contract: Identity = Field(..., description="Контракт-эмитент")

    model_config = {"frozen": True}

    def get_symbol(self) -> Symbol:
        return self.symbol

    def get_contract(self) -> Identity:
        return self.contract

    def __str__(self) -> str:
        return f"{self.symbol}{OWNER_SEPARATOR}{self.contract}"


# =============================================================================
# WIRE CODEC
# =============================================================================


@dataclass(frozen=True)
class SymbolCodec:
    """Symbol как 64-bit raw значение (uint64 LE)."""

    def encode(self, value: Symbol) -> bytes:
        try:
            raw = value.raw()
        except ValueError as e:
            raise CodecError(str(e)) from e
        return UINT64.encode(raw)

    def decode(self, data: bytes, offset: int) -> tuple[Symbol, int]:
        raw, offset = UINT64.decode(data, offset)
        try:
            symbol = Symbol.from_raw(raw)
        except ValueError as e:
            raise CodecError(str(e)) from e
        return symbol, offset


SYMBOL_CODEC = SymbolCodec()
