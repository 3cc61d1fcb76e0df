"""
Safeguards — Проверки и сравнения для Positive

- Типовой предикат: несёт ли тип гарантию неотрицательности
- Проверка величины без исключения
- Относительное сравнение с толерантностью (для тестов)

Алгоритм relative_eq (три ветки, асимметрия нуля сохраняется):
    1. left == right                      → равны
    2. ровно один из операндов равен нулю → ненулевой <= epsilon
    3. оба ненулевые                      → |left - right| / max(left, right) <= epsilon
"""

from decimal import Decimal
from typing import Any, Tuple, Union

from src.positive.settings import DECIMAL_CONTEXT
from src.positive.value import ConstrainedDecimal, Positive, StrictPositive

Tolerance = Union[ConstrainedDecimal, Decimal, int, float, str]


# =============================================================================
# ТИПОВЫЕ ПРЕДИКАТЫ
# =============================================================================


def is_positive_type(obj: Any) -> bool:
    """
    Несёт ли тип (или тип экземпляра) гарантию неотрицательности.

    Для generic-кода: если False, значение требует отдельной валидации.

    Examples:
        >>> is_positive_type(Positive)
        True
        >>> is_positive_type(Positive(1))
        True
        >>> is_positive_type(float)
        False
    """
    cls = obj if isinstance(obj, type) else type(obj)
    return issubclass(cls, ConstrainedDecimal)


def is_valid_magnitude(value: Any, strict: bool = False) -> bool:
    """
    Проверка, что значение можно превратить в Positive (или StrictPositive).

    Args:
        value: Проверяемое значение
        strict: Проверять правила StrictPositive (ноль невалиден)
    """
    cls = StrictPositive if strict else Positive
    return cls.create_or_none(value) is not None


# =============================================================================
# ОТНОСИТЕЛЬНОЕ СРАВНЕНИЕ
# =============================================================================


def _as_positive(value: Any) -> ConstrainedDecimal:
    if isinstance(value, ConstrainedDecimal):
        return value
    return Positive(value)


def _relative_check(left: Any, right: Any, epsilon: Tolerance) -> Tuple[bool, str]:
    left = _as_positive(left)
    right = _as_positive(right)
    tolerance = _as_positive(epsilon)

    if left == right:
        return True, ""

    if left.is_zero() or right.is_zero():
        non_zero = right if left.is_zero() else left
        return non_zero <= tolerance, (
            "assertion failed: `(left == right)` "
            f"(left: `{left}`, right: `{right}`, "
            f"expected max value: `{tolerance}`, actual value: `{non_zero}`)"
        )

    abs_diff = DECIMAL_CONTEXT.subtract(left.to_dec(), right.to_dec()).copy_abs()
    max_abs = left.to_dec().max(right.to_dec())
    relative_diff = DECIMAL_CONTEXT.divide(abs_diff, max_abs)

    return relative_diff <= tolerance.to_dec(), (
        "assertion failed: `(left ≈ right)` "
        f"(left: `{left}`, right: `{right}`, "
        f"expected relative diff: `{tolerance}`, real relative diff: `{relative_diff}`)"
    )


def relative_eq(left: Any, right: Any, epsilon: Tolerance) -> bool:
    """
    Относительное равенство двух значений с толерантностью epsilon.

    Args:
        left: Первое значение (Positive или число >= 0)
        right: Второе значение
        epsilon: Толерантность

    Returns:
        True если значения равны в смысле трёх веток (см. модуль)

    Examples:
        >>> relative_eq(Positive("1.0"), Positive("1.0001"), Positive("0.001"))
        True
        >>> relative_eq(Positive(0), Positive("0.00001"), Positive("0.00001"))
        True
        >>> relative_eq(Positive(1), Positive(2), Positive("0.1"))
        False
    """
    ok, _ = _relative_check(left, right, epsilon)
    return ok


def assert_pos_relative_eq(left: Any, right: Any, epsilon: Tolerance) -> None:
    """
    Assert-версия relative_eq для тестовых наборов.

    Raises:
        AssertionError: значения не равны; сообщение начинается с "assertion failed"
            и содержит оба значения, ожидаемую и фактическую разницу
    """
    ok, message = _relative_check(left, right, epsilon)
    if not ok:
        raise AssertionError(message)
