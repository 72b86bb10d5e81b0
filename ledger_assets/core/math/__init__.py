"""
Core math modules для ledger_assets

Проверяемая целочисленная арифметика и десятичное форматирование.
"""

# Checked Integer Math
from ledger_assets.core.math.checked_int import (
    # Bounds
    INT64_MAX,
    INT64_MIN,
    MAX_AMOUNT,
    # Range checks
    is_amount_within_range,
    is_int64,
    validate_amount,
    validate_scalar,
    # Arithmetic
    checked_add,
    checked_div,
    checked_mul,
    checked_sub,
    trunc_div,
)

# Formatting
from ledger_assets.core.math.formatting import (
    DECIMAL_SEPARATOR,
    MAX_PRECISION,
    format_amount,
    pow10,
)

__all__ = [
    # Checked Integer Math: Bounds
    "INT64_MAX",
    "INT64_MIN",
    "MAX_AMOUNT",
    # Checked Integer Math: Range checks
    "is_amount_within_range",
    "is_int64",
    "validate_amount",
    "validate_scalar",
    # Checked Integer Math: Arithmetic
    "checked_add",
    "checked_div",
    "checked_mul",
    "checked_sub",
    "trunc_div",
    # Formatting
    "DECIMAL_SEPARATOR",
    "MAX_PRECISION",
    "format_amount",
    "pow10",
]
