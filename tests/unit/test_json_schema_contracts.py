"""
Tests for JSON Schema Contract Validators

Тестирование JSON Schema валидаторов JSON формы количеств:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов
- Детекция нарушений constraints (maxLength/minimum/maximum)
- Интеграция с Pydantic моделями
"""

import copy
import json

import pytest
from jsonschema import ValidationError

from ledger_assets.core.contracts import (
    OwnedQuantityValidator,
    QuantityValidator,
    SchemaLoader,
    validate_owned_quantity,
    validate_quantity,
)
from ledger_assets.core.domain import Identity, OwnedQuantity, Quantity, Symbol
from ledger_assets.core.errors import OutOfRange


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_quantity():
    """Валидная JSON форма quantity."""
    return {"amount": 100000, "symbol": {"code": "SYS", "precision": 4}}


@pytest.fixture
def valid_owned_quantity(valid_quantity):
    """Валидная JSON форма owned_quantity."""
    return {"quantity": valid_quantity, "owner": {"value": 6138663591592764928}}


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


def test_schema_loader_loads_all_schemas():
    """Проверка загрузки всех схем."""
    loader = SchemaLoader()

    quantity_schema = loader.load_schema("quantity")
    owned_quantity_schema = loader.load_schema("owned_quantity")

    assert quantity_schema["title"] == "quantity"
    assert owned_quantity_schema["title"] == "owned_quantity"
    assert owned_quantity_schema["properties"]["owner"]["properties"]["value"]["maximum"] == 2**64 - 1


def test_schema_loader_caches_schemas():
    """Проверка кэширования схем."""
    loader = SchemaLoader()

    schema1 = loader.load_schema("quantity")
    schema2 = loader.load_schema("quantity")

    assert schema1 is schema2


def test_schema_loader_raises_on_missing_schema():
    """Проверка ошибки при отсутствующей схеме."""
    loader = SchemaLoader()

    with pytest.raises(FileNotFoundError):
        loader.load_schema("non_existent_schema")


def test_schema_loader_raises_on_missing_directory(tmp_path):
    """Несуществующий каталог схем."""
    with pytest.raises(RuntimeError, match="Schema directory not found"):
        SchemaLoader(tmp_path / "missing")


def test_schema_loader_rejects_invalid_schema(tmp_path):
    """Схема, не проходящая meta-validation."""
    (tmp_path / "broken.json").write_text(json.dumps({"type": 5}), encoding="utf-8")
    loader = SchemaLoader(tmp_path)

    with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
        loader.load_schema("broken")


# =============================================================================
# TESTS - QUANTITY VALIDATION
# =============================================================================


def test_quantity_validator_accepts_valid_data(valid_quantity):
    """Валидация правильного quantity."""
    validator = QuantityValidator()
    validator.validate(valid_quantity)
    assert validator.is_valid(valid_quantity)


def test_quantity_validate_function(valid_quantity):
    """Проверка функции validate_quantity."""
    validate_quantity(valid_quantity)


def test_quantity_rejects_missing_required_field(valid_quantity):
    """Валидация отклоняет данные без обязательных полей."""
    data = copy.deepcopy(valid_quantity)
    del data["amount"]

    with pytest.raises(ValidationError) as exc_info:
        validate_quantity(data)
    assert "'amount' is a required property" in str(exc_info.value)


def test_quantity_rejects_wrong_type(valid_quantity):
    """Сумма должна быть целым числом, а не строкой или дробью."""
    validator = QuantityValidator()

    for bad_amount in ("100000", 10.5):
        data = copy.deepcopy(valid_quantity)
        data["amount"] = bad_amount
        assert not validator.is_valid(data)


def test_quantity_rejects_additional_properties(valid_quantity):
    """Лишние поля запрещены."""
    data = copy.deepcopy(valid_quantity)
    data["memo"] = "transfer"

    with pytest.raises(ValidationError):
        validate_quantity(data)


def test_quantity_rejects_long_symbol_code(valid_quantity):
    """Код символа не длиннее 7 символов."""
    data = copy.deepcopy(valid_quantity)
    data["symbol"]["code"] = "ABCDEFGH"

    with pytest.raises(ValidationError):
        validate_quantity(data)


def test_quantity_rejects_precision_outside_uint8(valid_quantity):
    """Точность в диапазоне uint8."""
    validator = QuantityValidator()

    for bad_precision in (-1, 256):
        data = copy.deepcopy(valid_quantity)
        data["symbol"]["precision"] = bad_precision
        assert not validator.is_valid(data)


def test_quantity_schema_does_not_check_range(valid_quantity):
    """Диапазон суммы: доменный инвариант, схема его не проверяет."""
    data = copy.deepcopy(valid_quantity)
    data["amount"] = 2**62

    validate_quantity(data)
    with pytest.raises(OutOfRange):
        Quantity.from_dict(data)


# =============================================================================
# TESTS - OWNED QUANTITY VALIDATION
# =============================================================================


def test_owned_quantity_validator_accepts_valid_data(valid_owned_quantity):
    """Валидация правильного owned_quantity."""
    validator = OwnedQuantityValidator()
    validator.validate(valid_owned_quantity)
    assert validator.is_valid(valid_owned_quantity)


def test_owned_quantity_validate_function(valid_owned_quantity):
    """Проверка функции validate_owned_quantity."""
    validate_owned_quantity(valid_owned_quantity)


def test_owned_quantity_rejects_missing_owner(valid_owned_quantity):
    """Владелец обязателен."""
    data = copy.deepcopy(valid_owned_quantity)
    del data["owner"]

    with pytest.raises(ValidationError) as exc_info:
        validate_owned_quantity(data)
    assert "'owner' is a required property" in str(exc_info.value)


def test_owned_quantity_rejects_owner_out_of_uint64(valid_owned_quantity):
    """Дескриптор владельца в диапазоне uint64."""
    validator = OwnedQuantityValidator()

    for bad_owner in (-1, 2**64):
        data = copy.deepcopy(valid_owned_quantity)
        data["owner"]["value"] = bad_owner
        assert not validator.is_valid(data)


def test_owned_quantity_rejects_nested_violation(valid_owned_quantity):
    """Нарушения внутри quantity тоже обнаруживаются."""
    data = copy.deepcopy(valid_owned_quantity)
    data["quantity"]["symbol"]["precision"] = "4"

    with pytest.raises(ValidationError):
        validate_owned_quantity(data)


# =============================================================================
# TESTS - PYDANTIC INTEGRATION
# =============================================================================


def test_quantity_to_dict_passes_schema():
    """JSON форма Quantity соответствует схеме."""
    quantity = Quantity(-5, Symbol(code="EOS", precision=4))
    validate_quantity(quantity.to_dict())


def test_owned_quantity_to_dict_passes_schema():
    """JSON форма OwnedQuantity соответствует схеме."""
    owned = OwnedQuantity(Quantity(1, Symbol(code="SYS", precision=0)), Identity(value=0))
    validate_owned_quantity(owned.to_dict())


def test_iter_errors_returns_all_errors():
    """Проверка, что iter_errors возвращает все ошибки валидации."""
    validator = OwnedQuantityValidator()

    invalid_data = {
        "quantity": {
            "amount": "1",  # type: integer - НАРУШЕНИЕ
            "symbol": {"code": "ABCDEFGH", "precision": 300},  # maxLength, maximum - НАРУШЕНИЯ
        },
        "owner": {"value": -1},  # minimum: 0 - НАРУШЕНИЕ
    }

    errors = list(validator.iter_errors(invalid_data))
    assert len(errors) >= 4
