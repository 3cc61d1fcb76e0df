"""
Settings — Параметры десятичного представления

Единственный источник констант представления для Positive:
точность арифметики, максимальная величина, epsilon по умолчанию
и общий decimal.Context, через который выполняются все операции.
"""

from decimal import (
    MAX_PREC,
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
)
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Количество значащих цифр в результатах арифметики
# (29, чтобы MAX_MAGNITUDE оставался точным)
DECIMAL_PRECISION: Final[int] = 29

# Максимальная представимая величина (96-битная мантисса)
# Используется также как сентинел "бесконечности"
MAX_MAGNITUDE: Final[Decimal] = Decimal("79228162514264337593543950335")

# Максимальный масштаб (знаков после запятой) 96-битного decimal.
# Ненулевые величины, старшая цифра которых ниже 1e-28, непредставимы.
MAX_SCALE: Final[int] = 28

# Epsilon для приближённых сравнений
DEFAULT_EPSILON: Final[Decimal] = Decimal("1e-16")

# Арифметика: округление к чётному, как у исходного представления.
# Округление до заданного числа знаков использует ROUND_HALF_UP (см. value.py).
DECIMAL_CONTEXT: Final[Context] = Context(
    prec=DECIMAL_PRECISION,
    rounding=ROUND_HALF_EVEN,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)

# Округление и квантование: без ограничения разрядности, результат точный
EXACT_CONTEXT: Final[Context] = Context(
    prec=MAX_PREC,
    traps=[InvalidOperation],
)
