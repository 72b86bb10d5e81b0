"""
Domain models and value objects.

Contains Symbol/Identity collaborators and the Quantity/OwnedQuantity value types.
"""

from ledger_assets.core.domain.identity import IDENTITY_CODEC, IDENTITY_MAX, Identity
from ledger_assets.core.domain.owned_quantity import OWNED_QUANTITY_FIELDS, OwnedQuantity
from ledger_assets.core.domain.quantity import QUANTITY_FIELDS, Quantity
from ledger_assets.core.domain.symbol import (
    OWNER_SEPARATOR,
    SYMBOL_CODE_MAX_LEN,
    SYMBOL_CODEC,
    ExtendedSymbol,
    Symbol,
)

__all__ = [
    # Collaborators
    "Identity",
    "IDENTITY_MAX",
    "IDENTITY_CODEC",
    "Symbol",
    "ExtendedSymbol",
    "SYMBOL_CODE_MAX_LEN",
    "SYMBOL_CODEC",
    "OWNER_SEPARATOR",
    # Quantity
    "Quantity",
    "QUANTITY_FIELDS",
    # OwnedQuantity
    "OwnedQuantity",
    "OWNED_QUANTITY_FIELDS",
]
