"""
JSON Schema Contract для сериализованного Positive

Сериализованная форма значения: десятичная строка без экспоненты
(например, "100.50"). Для входа допускается также JSON-число.

Схемы (Draft 2020-12):
- POSITIVE_SCHEMA: величина >= 0
- STRICT_POSITIVE_SCHEMA: величина > 0
"""

from copy import deepcopy
from typing import Any, Dict, Iterator

from jsonschema import Draft202012Validator, ValidationError

# =============================================================================
# СХЕМЫ
# =============================================================================

_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"

# Десятичная строка без знака и экспоненты
_DECIMAL_PATTERN = r"^(0|[1-9][0-9]*)(\.[0-9]+)?$"

# То же, но хотя бы одна ненулевая цифра
_NON_ZERO_DECIMAL_PATTERN = r"^(?=.*[1-9])(0|[1-9][0-9]*)(\.[0-9]+)?$"

POSITIVE_SCHEMA: Dict[str, Any] = {
    "$schema": _SCHEMA_DIALECT,
    "title": "Positive",
    "description": "Non-negative decimal magnitude",
    "anyOf": [
        {"type": "string", "pattern": _DECIMAL_PATTERN},
        {"type": "number", "minimum": 0},
    ],
}

STRICT_POSITIVE_SCHEMA: Dict[str, Any] = {
    "$schema": _SCHEMA_DIALECT,
    "title": "StrictPositive",
    "description": "Strictly positive decimal magnitude",
    "anyOf": [
        {"type": "string", "pattern": _NON_ZERO_DECIMAL_PATTERN},
        {"type": "number", "exclusiveMinimum": 0},
    ],
}

Draft202012Validator.check_schema(POSITIVE_SCHEMA)
Draft202012Validator.check_schema(STRICT_POSITIVE_SCHEMA)


def schema_for(allows_zero: bool) -> Dict[str, Any]:
    """
    Копия схемы для режима.

    Args:
        allows_zero: True для Positive, False для StrictPositive
    """
    return deepcopy(POSITIVE_SCHEMA if allows_zero else STRICT_POSITIVE_SCHEMA)


# =============================================================================
# ВАЛИДАТОР
# =============================================================================


class PositiveContractValidator:
    """
    Валидатор сериализованных значений.

    Проверяет только форму данных; построение значения выполняет
    Positive.create / StrictPositive.create.
    """

    def __init__(self, strict: bool = False):
        """
        Args:
            strict: Проверять по STRICT_POSITIVE_SCHEMA
        """
        self.strict = strict
        self.schema = schema_for(allows_zero=not strict)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


_POSITIVE_VALIDATOR = PositiveContractValidator(strict=False)
_STRICT_POSITIVE_VALIDATOR = PositiveContractValidator(strict=True)


def validate_serialized(data: Any, strict: bool = False) -> None:
    """
    Валидация сериализованного значения.

    Args:
        data: Строка или число из JSON
        strict: Требовать величину > 0

    Raises:
        ValidationError: данные не соответствуют схеме
    """
    validator = _STRICT_POSITIVE_VALIDATOR if strict else _POSITIVE_VALIDATOR
    validator.validate(data)
