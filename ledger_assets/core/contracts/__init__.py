"""
Contract Validation Module

Модуль для валидации JSON контрактов количеств.
"""

from .validators import (
    ContractValidator,
    OwnedQuantityValidator,
    QuantityValidator,
    SchemaLoader,
    validate_owned_quantity,
    validate_quantity,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "QuantityValidator",
    "OwnedQuantityValidator",
    # Functions
    "validate_quantity",
    "validate_owned_quantity",
]
