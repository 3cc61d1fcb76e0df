"""
Tests for JSON Schema Contract и интеграции с Pydantic

Покрывает:
- Валидность самих схем
- Валидацию сериализованных значений (строка/число)
- Strict-схему (ноль невалиден)
- Использование Positive/StrictPositive как полей Pydantic моделей
- JSON сериализацию/десериализацию и JSON Schema моделей
"""

import json
from decimal import Decimal

import pytest
from jsonschema import Draft202012Validator
from jsonschema import ValidationError as SchemaValidationError
from pydantic import BaseModel, ValidationError

from src.positive.contracts import (
    POSITIVE_SCHEMA,
    STRICT_POSITIVE_SCHEMA,
    PositiveContractValidator,
    schema_for,
    validate_serialized,
)
from src.positive.value import Positive, StrictPositive

# =============================================================================
# FIXTURES
# =============================================================================


class Order(BaseModel):
    """Модель с неотрицательными полями для тестов."""

    quantity: Positive
    price: StrictPositive

    model_config = {"frozen": True}


@pytest.fixture
def validator() -> PositiveContractValidator:
    return PositiveContractValidator()


@pytest.fixture
def strict_validator() -> PositiveContractValidator:
    return PositiveContractValidator(strict=True)


# =============================================================================
# СХЕМЫ
# =============================================================================


class TestSchemas:
    """Тесты самих схем"""

    def test_schemas_are_valid(self) -> None:
        Draft202012Validator.check_schema(POSITIVE_SCHEMA)
        Draft202012Validator.check_schema(STRICT_POSITIVE_SCHEMA)

    def test_schema_for_returns_copy(self) -> None:
        schema = schema_for(allows_zero=True)
        schema["title"] = "changed"
        assert POSITIVE_SCHEMA["title"] == "Positive"

    def test_schema_for_mode(self) -> None:
        assert schema_for(allows_zero=False)["title"] == "StrictPositive"


class TestPositiveContractValidator:
    """Тесты валидатора сериализованных значений"""

    @pytest.mark.parametrize("data", ["100.50", "0", "0.0", "7", 0, 1.5, 42])
    def test_valid(self, validator, data) -> None:
        assert validator.is_valid(data)
        validator.validate(data)

    @pytest.mark.parametrize("data", ["-1", "1e5", "abc", "", "01", -0.5, True, None])
    def test_invalid(self, validator, data) -> None:
        assert not validator.is_valid(data)
        with pytest.raises(SchemaValidationError):
            validator.validate(data)

    def test_iter_errors(self, validator) -> None:
        assert list(validator.iter_errors("-1"))
        assert not list(validator.iter_errors("1"))

    @pytest.mark.parametrize("data", ["0", "0.000", 0, 0.0])
    def test_strict_rejects_zero(self, strict_validator, data) -> None:
        assert not strict_validator.is_valid(data)

    @pytest.mark.parametrize("data", ["0.001", "10", 0.5])
    def test_strict_accepts_positive(self, strict_validator, data) -> None:
        assert strict_validator.is_valid(data)

    def test_validate_serialized(self) -> None:
        validate_serialized("100.50")
        with pytest.raises(SchemaValidationError):
            validate_serialized("0", strict=True)

    @pytest.mark.parametrize("raw", ["100.50", "0", "1E-16", "1E+2", "79228162514264337593543950335"])
    def test_str_form_matches_contract(self, validator, raw) -> None:
        """Текстовое представление всегда удовлетворяет контракту"""
        assert validator.is_valid(str(Positive(raw)))


# =============================================================================
# PYDANTIC
# =============================================================================


class TestPydanticFields:
    """Тесты Positive/StrictPositive как полей Pydantic моделей"""

    def test_valid_model(self) -> None:
        order = Order(quantity="10", price=Decimal("100.50"))
        assert isinstance(order.quantity, Positive)
        assert isinstance(order.price, StrictPositive)
        assert order.price == Decimal("100.50")

    def test_instance_passthrough(self) -> None:
        quantity = Positive(3)
        order = Order(quantity=quantity, price=StrictPositive(1))
        assert order.quantity is quantity

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Order(quantity=-1, price=1)

    def test_strict_zero_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Order(quantity=0, price=0)

    def test_frozen(self) -> None:
        order = Order(quantity=1, price=1)
        with pytest.raises(ValidationError):
            order.quantity = Positive(2)

    def test_json_roundtrip(self) -> None:
        order = Order(quantity="10", price="100.50")
        payload = order.model_dump_json()
        assert json.loads(payload) == {"quantity": "10", "price": "100.50"}
        assert Order.model_validate_json(payload) == order

    def test_json_number_input(self) -> None:
        order = Order.model_validate_json('{"quantity": 1.5, "price": 2}')
        assert order.quantity == Decimal("1.5")
        assert order.price == 2

    def test_python_dump_keeps_type(self) -> None:
        dumped = Order(quantity=1, price=1).model_dump()
        assert isinstance(dumped["quantity"], Positive)

    def test_serialized_fields_match_contract(self) -> None:
        payload = json.loads(Order(quantity=0, price="0.25").model_dump_json())
        validate_serialized(payload["quantity"])
        validate_serialized(payload["price"], strict=True)

    def test_model_json_schema(self) -> None:
        schema = Order.model_json_schema()
        assert "anyOf" in schema["properties"]["quantity"]
        assert "anyOf" in schema["properties"]["price"]
