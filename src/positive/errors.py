"""
Positive Errors — Таксономия ошибок неотрицательного значения

Все нарушения доменных правил являются восстанавливаемыми и наследуются
от PositiveError (а значит, и от ValueError):
- InvalidMagnitudeError: нарушение инварианта при создании (знак, NaN/Inf, диапазон)
- UnderflowError: вычитание ушло бы ниже нуля
- DivisionByZeroError: checked-деление на ноль
- UndefinedLogarithmError: логарифм нуля (или результат вне инварианта)

Переполнение представления (результат > MAX_MAGNITUDE) НЕ является доменной
ошибкой и сигнализируется встроенным OverflowError.
"""

from decimal import Decimal
from typing import Any


class PositiveError(ValueError):
    """Базовая ошибка для всех нарушений инварианта Positive."""

    pass


class InvalidMagnitudeError(PositiveError):
    """
    Значение не может быть представлено как Positive.

    Attributes:
        value: Исходный аргумент конструктора
        reason: Короткое описание нарушения
    """

    def __init__(self, value: Any, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid magnitude {value!r}: {reason}")


class UnderflowError(PositiveError):
    """Результат вычитания оказался бы отрицательным (или нулевым в strict-режиме)."""

    def __init__(self, minuend: Decimal, subtrahend: Decimal):
        self.minuend = minuend
        self.subtrahend = subtrahend
        super().__init__(
            f"Subtraction underflow: {minuend} - {subtrahend} is out of range"
        )


class DivisionByZeroError(PositiveError):
    """Делитель равен нулю."""

    def __init__(self, dividend: Decimal):
        self.dividend = dividend
        super().__init__(f"Division by zero: {dividend} / 0")


class UndefinedLogarithmError(PositiveError):
    """Логарифм не определён или его результат нарушает инвариант."""

    def __init__(self, value: Decimal, function: str = "ln"):
        self.value = value
        self.function = function
        super().__init__(
            f"{function}({value}) is undefined for a non-negative result"
        )
