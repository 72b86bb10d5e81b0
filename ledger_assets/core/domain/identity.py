"""
Identity: Непрозрачный 64-bit дескриптор владельца

Используется только для проверки равенства владельцев OwnedQuantity.
Кодирование имён (name ↔ uint64) вне области модуля.
"""

from dataclasses import dataclass
from typing import Final

from pydantic import BaseModel, Field

from ledger_assets.core.codec import UINT64

# Максимальное значение 64-bit беззнакового дескриптора
IDENTITY_MAX: Final[int] = (1 << 64) - 1


class Identity(BaseModel):
    """
    Дескриптор контракта/аккаунта.

    Immutable модель (frozen=True), равенство по значению.
    """

    value: int = Field(
        ..., strict=True, ge=0, le=IDENTITY_MAX, description="64-bit дескриптор владельца"
    )

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class IdentityCodec:
    """Identity как 64-bit беззнаковое значение (uint64 LE)."""

    def encode(self, value: Identity) -> bytes:
        return UINT64.encode(value.value)

    def decode(self, data: bytes, offset: int) -> tuple[Identity, int]:
        value, offset = UINT64.decode(data, offset)
        return Identity(value=value), offset


IDENTITY_CODEC = IdentityCodec()
