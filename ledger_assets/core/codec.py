"""
Codec: Wire-формат с явным порядком полей

Каждая модель описывается упорядоченным списком FieldDescriptor.
Порядок полей: часть контракта совместимости, переупорядочивать нельзя:
- Quantity: amount (int64 LE), symbol (uint64 LE raw, см. SymbolCodec)
- OwnedQuantity: quantity (Quantity), owner (uint64 LE, см. IdentityCodec)

Декодирование всегда проходит через валидирующий конструктор модели.
"""

import struct
from dataclasses import dataclass
from typing import Any, Protocol

from ledger_assets.config.logging import get_logger
from ledger_assets.core.errors import CodecError, check

logger = get_logger(__name__)


# =============================================================================
# FIELD CODECS
# =============================================================================


class FieldCodec(Protocol):
    """Кодек одного поля фиксированной или составной ширины."""

    def encode(self, value: Any) -> bytes: ...

    def decode(self, data: bytes, offset: int) -> tuple[Any, int]: ...


@dataclass(frozen=True)
class IntCodec:
    """Целое фиксированной ширины (struct формат, little-endian)."""

    fmt: str

    @property
    def size(self) -> int:
        return struct.calcsize(self.fmt)

    def encode(self, value: int) -> bytes:
        try:
            return struct.pack(self.fmt, value)
        except struct.error as e:
            raise CodecError(f"cannot encode {value!r} as {self.fmt}: {e}") from e

    def decode(self, data: bytes, offset: int) -> tuple[int, int]:
        check(
            len(data) - offset >= self.size,
            CodecError,
            f"truncated data: need {self.size} bytes at offset {offset}, have {len(data) - offset}",
        )
        (value,) = struct.unpack_from(self.fmt, data, offset)
        return value, offset + self.size


INT64 = IntCodec("<q")
UINT64 = IntCodec("<Q")


# =============================================================================
# FIELD DESCRIPTORS
# =============================================================================


@dataclass(frozen=True)
class FieldDescriptor:
    """Имя атрибута модели и кодек его значения."""

    name: str
    codec: FieldCodec


@dataclass(frozen=True)
class ModelCodec:
    """
    Составной кодек: поля модели в заданном порядке.

    Используется и как кодек вложенного поля (quantity внутри OwnedQuantity).
    """

    model: type
    fields: tuple[FieldDescriptor, ...]

    def encode(self, value: Any) -> bytes:
        return b"".join(f.codec.encode(getattr(value, f.name)) for f in self.fields)

    def decode(self, data: bytes, offset: int) -> tuple[Any, int]:
        values: dict[str, Any] = {}
        for f in self.fields:
            values[f.name], offset = f.codec.decode(data, offset)
        return self.model(**values), offset


# =============================================================================
# GENERIC ENCODE / DECODE
# =============================================================================


def encode(value: Any, fields: tuple[FieldDescriptor, ...]) -> bytes:
    """
    Кодирование модели по упорядоченному списку полей.

    Args:
        value: Экземпляр модели
        fields: Упорядоченные дескрипторы полей

    Returns:
        Байты wire-формата

    Raises:
        CodecError: Если значение поля не кодируется
    """
    return ModelCodec(type(value), fields).encode(value)


def decode(model: type, data: bytes, fields: tuple[FieldDescriptor, ...]) -> Any:
    """
    Декодирование модели из байт wire-формата.

    Args:
        model: Класс модели (конструируется через валидирующий конструктор)
        data: Байты wire-формата
        fields: Упорядоченные дескрипторы полей

    Returns:
        Провалидированный экземпляр модели

    Raises:
        CodecError: Если данные обрезаны или содержат лишние байты
        AssetError: Если декодированные значения нарушают инварианты модели
    """
    value, offset = ModelCodec(model, fields).decode(bytes(data), 0)
    check(
        offset == len(data),
        CodecError,
        f"trailing bytes: {len(data) - offset} after {model.__name__}",
    )
    logger.debug("decoded", model=model.__name__, size=offset)
    return value
