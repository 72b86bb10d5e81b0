"""
Тесты для таксономии ошибок и примитива check/abort
"""

import pytest
from structlog.testing import capture_logs

from ledger_assets.core.errors import (
    ArithmeticOverflow,
    ArithmeticUnderflow,
    AssetError,
    CodecError,
    DivideByZero,
    InvalidSymbol,
    OutOfRange,
    OwnerMismatch,
    SymbolMismatch,
    abort,
    check,
)


class TestTaxonomy:
    """Тесты иерархии исключений"""

    @pytest.mark.parametrize(
        "error_cls, kind",
        [
            (InvalidSymbol, "invalid_symbol"),
            (OutOfRange, "out_of_range"),
            (SymbolMismatch, "symbol_mismatch"),
            (OwnerMismatch, "owner_mismatch"),
            (DivideByZero, "divide_by_zero"),
            (ArithmeticOverflow, "overflow"),
            (ArithmeticUnderflow, "underflow"),
            (CodecError, "codec"),
        ],
    )
    def test_kinds(self, error_cls: type[AssetError], kind: str) -> None:
        """Каждый вид ошибки имеет стабильный kind и общий базовый класс"""
        assert issubclass(error_cls, AssetError)
        assert error_cls.kind == kind

    def test_not_value_error(self) -> None:
        """Ошибки не являются ValueError и не оборачиваются pydantic"""
        assert not issubclass(AssetError, ValueError)


class TestCheck:
    """Тесты check/abort"""

    def test_passes(self) -> None:
        """Истинное условие ничего не делает"""
        check(True, OutOfRange, "never raised")

    def test_raises_given_class(self) -> None:
        """Ложное условие поднимает указанную ошибку с сообщением"""
        with pytest.raises(DivideByZero, match="divide by zero"):
            check(False, DivideByZero, "divide by zero")

    def test_abort_always_raises(self) -> None:
        with pytest.raises(SymbolMismatch):
            abort(SymbolMismatch, "attempt to add asset with different symbol")

    def test_failure_is_logged(self) -> None:
        """Нарушение проверки логируется с kind и причиной"""
        with capture_logs() as cap_logs:
            with pytest.raises(OwnerMismatch):
                check(False, OwnerMismatch, "type mismatch")
        assert cap_logs == [
            {
                "event": "asset_check_failed",
                "kind": "owner_mismatch",
                "reason": "type mismatch",
                "log_level": "debug",
            }
        ]
