"""
Positive — Неотрицательное десятичное значение

Модуль содержит value-тип с гарантией знака:
- Positive: величина >= 0
- StrictPositive: величина > 0 (ноль непредставим)

Режим выбирается типом, а не флагом времени выполнения: у StrictPositive
нет ни константы ZERO, ни saturating_sub.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Величина проверяется один раз в конструкторе, далее экземпляр неизменяем
2. Каждая операция возвращает новый экземпляр того же типа (type(self))
3. Операции, способные нарушить инвариант, бросают PositiveError
4. Переполнение представления (> MAX_MAGNITUDE) — OverflowError, не доменная ошибка
5. Внутри только decimal.Decimal, никаких binary float

ОТКРЫТЫЙ ВОПРОС (решён):
- Оператор `-` ведёт себя как checked_sub (UnderflowError вместо невалидного значения)
- Оператор `/` делегирует деление на ноль модулю decimal (ZeroDivisionError,
  для 0/0 InvalidOperation); для production-кода используйте checked_div
"""

import logging
import math
from decimal import (
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_UP,
    Decimal,
    InvalidOperation,
    Overflow,
)
from typing import Any, ClassVar, Optional, TypeVar, Union

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from src.positive.contracts import schema_for
from src.positive.errors import (
    DivisionByZeroError,
    InvalidMagnitudeError,
    UndefinedLogarithmError,
    UnderflowError,
)
from src.positive.settings import (
    DECIMAL_CONTEXT,
    EXACT_CONTEXT,
    MAX_MAGNITUDE,
    MAX_SCALE,
)

logger = logging.getLogger(__name__)

Number = Union[Decimal, int, float, str]

T = TypeVar("T", bound="ConstrainedDecimal")


# =============================================================================
# ПРЕОБРАЗОВАНИЕ ВХОДА
# =============================================================================


def _reject(value: Any, reason: str) -> InvalidMagnitudeError:
    logger.debug("Rejected magnitude %r: %s", value, reason)
    return InvalidMagnitudeError(value, reason)


def _to_decimal(value: Any) -> Decimal:
    """
    Преобразование входа в конечный Decimal без округления.

    float проходит через repr (кратчайшее представление),
    str и Decimal копируются как есть.

    Raises:
        InvalidMagnitudeError: NaN/Inf, неразбираемая строка, неподдерживаемый тип
    """
    if isinstance(value, ConstrainedDecimal):
        return value.to_dec()

    # bool — подкласс int, но не величина
    if isinstance(value, bool):
        raise _reject(value, "bool is not a magnitude")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise _reject(value, "must be finite (not NaN/Inf)")
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise _reject(value, "not a decimal number") from None
    else:
        raise _reject(value, f"unsupported type {type(value).__name__}")

    if not result.is_finite():
        raise _reject(value, "must be finite (not NaN/Inf)")

    # -0 нормализуется в 0
    if result.is_zero() and result.is_signed():
        result = result.copy_abs()

    return result


# =============================================================================
# БАЗОВЫЙ ТИП
# =============================================================================


class ConstrainedDecimal:
    """
    Десятичная величина с гарантией знака.

    Общая реализация для Positive и StrictPositive. Подклассы задают
    только allows_zero и набор доступных операций.
    """

    __slots__ = ("_magnitude",)

    allows_zero: ClassVar[bool] = True

    ONE: ClassVar["ConstrainedDecimal"]

    def __init__(self, magnitude: Any) -> None:
        object.__setattr__(self, "_magnitude", self._validate(magnitude))

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    @classmethod
    def _validate(cls, magnitude: Any) -> Decimal:
        value = _to_decimal(magnitude)

        if value.is_signed():
            raise _reject(magnitude, "must be non-negative")

        if value.is_zero() and not cls.allows_zero:
            raise _reject(magnitude, f"zero is not allowed for {cls.__name__}")

        if value > MAX_MAGNITUDE:
            raise _reject(magnitude, f"exceeds maximum {MAX_MAGNITUDE}")

        if value.is_zero():
            # 0E-1000000 и подобные схлопываются в обычный ноль
            if value.as_tuple().exponent < -MAX_SCALE:
                value = Decimal(0)
        elif value.adjusted() < -MAX_SCALE:
            raise _reject(magnitude, f"below minimum scale 1e-{MAX_SCALE}")

        return value

    @classmethod
    def _trusted(cls: type[T], value: Decimal) -> T:
        instance = object.__new__(cls)
        object.__setattr__(instance, "_magnitude", value)
        return instance

    @classmethod
    def _from_result(cls: type[T], value: Decimal) -> T:
        """Оборачивание результата операции с проверкой границ представления."""
        if value > MAX_MAGNITUDE:
            logger.debug("%s overflow: %s > %s", cls.__name__, value, MAX_MAGNITUDE)
            raise OverflowError(
                f"{cls.__name__} overflow: {value} exceeds {MAX_MAGNITUDE}"
            )

        if value.is_zero() and not cls.allows_zero:
            raise _reject(value, f"zero is not allowed for {cls.__name__}")

        return cls._trusted(value)

    @classmethod
    def create(cls: type[T], magnitude: Any) -> T:
        """
        Создание значения с проверкой инварианта.

        Args:
            magnitude: Decimal, int, float, str или другое ограниченное значение

        Returns:
            Новый экземпляр cls

        Raises:
            InvalidMagnitudeError: NaN/Inf, отрицательное (ноль в strict-режиме),
                больше MAX_MAGNITUDE, меньше 1e-28 (MAX_SCALE), неподдерживаемый тип
        """
        return cls(magnitude)

    @classmethod
    def create_or_none(cls: type[T], magnitude: Any) -> Optional[T]:
        """То же, что create, но None вместо ошибки."""
        try:
            return cls(magnitude)
        except InvalidMagnitudeError:
            return None

    @classmethod
    def create_or_panic(cls: type[T], magnitude: Any) -> T:
        """
        Создание заведомо валидного значения (литералы).

        Raises:
            AssertionError: если значение всё-таки невалидно
        """
        try:
            return cls(magnitude)
        except InvalidMagnitudeError as exc:
            raise AssertionError(
                f"Failed to create {cls.__name__} value: {exc}"
            ) from exc

    # -------------------------------------------------------------------------
    # Неизменяемость
    # -------------------------------------------------------------------------

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (str(self),))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    # -------------------------------------------------------------------------
    # Операнды
    # -------------------------------------------------------------------------

    def _coerce(self, other: Any) -> Optional[Decimal]:
        """Величина операнда, проверенная правилами type(self); None для чужих типов."""
        if isinstance(other, ConstrainedDecimal):
            return other._magnitude
        if isinstance(other, (Decimal, int, float)):
            return type(self)._validate(other)
        return None

    def _require(self, other: Any) -> Decimal:
        value = self._coerce(other)
        if value is None:
            raise TypeError(
                f"unsupported operand type for {type(self).__name__}: "
                f"{type(other).__name__}"
            )
        return value

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self: T, other: Any) -> T:
        """
        Сложение. Всегда определено для валидных операндов.

        Raises:
            OverflowError: сумма больше MAX_MAGNITUDE
        """
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._from_result(DECIMAL_CONTEXT.add(self._magnitude, rhs))

    def __radd__(self: T, other: Any) -> T:
        # Начальное значение sum() для StrictPositive
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return self.__add__(other)

    def __mul__(self: T, other: Any) -> T:
        """
        Умножение. Всегда определено для валидных операндов.

        Raises:
            OverflowError: произведение больше MAX_MAGNITUDE
        """
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._from_result(DECIMAL_CONTEXT.multiply(self._magnitude, rhs))

    __rmul__ = __mul__

    def checked_sub(self: T, other: Any) -> T:
        """
        Вычитание с проверкой.

        Raises:
            UnderflowError: other > self (в strict-режиме также other == self)
        """
        return self._subtract(self._magnitude, self._require(other))

    def _subtract(self: T, lhs: Decimal, rhs: Decimal) -> T:
        if rhs > lhs or (rhs == lhs and not self.allows_zero):
            raise UnderflowError(lhs, rhs)
        return self._from_result(DECIMAL_CONTEXT.subtract(lhs, rhs))

    def __sub__(self: T, other: Any) -> T:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._subtract(self._magnitude, rhs)

    def __rsub__(self: T, other: Any) -> T:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return self._subtract(lhs, self._magnitude)

    def checked_div(self: T, other: Any) -> T:
        """
        Деление с проверкой делителя.

        Raises:
            DivisionByZeroError: other == 0
        """
        rhs = self._require(other)
        if rhs.is_zero():
            raise DivisionByZeroError(self._magnitude)
        return self._from_result(DECIMAL_CONTEXT.divide(self._magnitude, rhs))

    def __truediv__(self: T, other: Any) -> T:
        """
        Обычное деление.

        Деление на ноль делегируется decimal: x / 0 бросает decimal.DivisionByZero
        (ZeroDivisionError), 0 / 0 бросает decimal.InvalidOperation.
        """
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._from_result(DECIMAL_CONTEXT.divide(self._magnitude, rhs))

    def __rtruediv__(self: T, other: Any) -> T:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return self._from_result(DECIMAL_CONTEXT.divide(lhs, self._magnitude))

    def __floordiv__(self: T, other: Any) -> T:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._from_result(DECIMAL_CONTEXT.divide_int(self._magnitude, rhs))

    def __rfloordiv__(self: T, other: Any) -> T:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return self._from_result(DECIMAL_CONTEXT.divide_int(lhs, self._magnitude))

    def __mod__(self: T, other: Any) -> T:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._from_result(DECIMAL_CONTEXT.remainder(self._magnitude, rhs))

    def __rmod__(self: T, other: Any) -> T:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return self._from_result(DECIMAL_CONTEXT.remainder(lhs, self._magnitude))

    # -------------------------------------------------------------------------
    # Степени, корни, логарифмы
    # -------------------------------------------------------------------------

    def _power(self: T, exponent: Decimal) -> T:
        if exponent.is_zero():
            return self._from_result(Decimal(1))

        if self._magnitude.is_zero():
            if exponent.is_signed():
                raise DivisionByZeroError(self._magnitude)
            return self._from_result(Decimal(0))

        try:
            result = DECIMAL_CONTEXT.power(self._magnitude, exponent)
        except Overflow as exc:
            raise OverflowError(
                f"{type(self).__name__} overflow: {self}^{exponent}"
            ) from exc
        return self._from_result(result)

    def powi(self: T, exponent: int) -> T:
        """
        Целая степень. Отрицательная степень нуля — DivisionByZeroError.

        Raises:
            OverflowError: результат больше MAX_MAGNITUDE (повторное умножение)
        """
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError(f"powi exponent must be int, got {type(exponent).__name__}")
        return self._power(Decimal(exponent))

    def powf(self: T, exponent: Number) -> T:
        """Вещественная степень (любой конечный показатель)."""
        return self._power(_to_decimal(exponent))

    def __pow__(self: T, exponent: Any, modulo: Any = None) -> T:
        if modulo is not None:
            return NotImplemented
        if isinstance(exponent, int) and not isinstance(exponent, bool):
            return self.powi(exponent)
        if isinstance(exponent, (Decimal, float, ConstrainedDecimal)):
            return self.powf(exponent)
        return NotImplemented

    def __rpow__(self: T, base: Any) -> T:
        value = self._coerce(base)
        if value is None:
            return NotImplemented
        return self._from_result(value)._power(self._magnitude)

    def sqrt(self: T) -> T:
        return self._from_result(DECIMAL_CONTEXT.sqrt(self._magnitude))

    def _log(self: T, function: str) -> T:
        if self._magnitude.is_zero():
            raise UndefinedLogarithmError(self._magnitude, function)

        # Результат обязан сам удовлетворять инварианту
        one = Decimal(1)
        if self._magnitude < one or (self._magnitude == one and not self.allows_zero):
            raise UndefinedLogarithmError(self._magnitude, function)

        if function == "log10":
            return self._from_result(DECIMAL_CONTEXT.log10(self._magnitude))
        return self._from_result(DECIMAL_CONTEXT.ln(self._magnitude))

    def ln(self: T) -> T:
        """
        Натуральный логарифм.

        Raises:
            UndefinedLogarithmError: x == 0, а также x < 1 (результат отрицательный)
        """
        return self._log("ln")

    def log10(self: T) -> T:
        """Десятичный логарифм, те же ограничения, что у ln."""
        return self._log("log10")

    def exp(self: T) -> T:
        """
        Экспонента. Определена всегда, exp(x) >= 1.

        Raises:
            OverflowError: результат больше MAX_MAGNITUDE
        """
        try:
            result = DECIMAL_CONTEXT.exp(self._magnitude)
        except Overflow as exc:
            raise OverflowError(f"{type(self).__name__} overflow: exp({self})") from exc
        return self._from_result(result)

    # -------------------------------------------------------------------------
    # Округление
    # -------------------------------------------------------------------------

    def _integral(self: T, rounding: str) -> T:
        return self._from_result(
            self._magnitude.to_integral_value(rounding=rounding, context=EXACT_CONTEXT)
        )

    def floor(self: T) -> T:
        return self._integral(ROUND_FLOOR)

    def ceiling(self: T) -> T:
        return self._integral(ROUND_CEILING)

    def round(self: T) -> T:
        """Округление до целого, половина — от нуля."""
        return self._integral(ROUND_HALF_UP)

    def truncate(self: T) -> T:
        return self._integral(ROUND_DOWN)

    def round_to(self: T, decimal_places: int) -> T:
        """
        Округление до decimal_places знаков (половина — от нуля).

        Значения, у которых знаков уже не больше decimal_places,
        возвращаются без дополнения нулями.

        Args:
            decimal_places: Количество знаков после запятой (>= 0)

        Raises:
            TypeError: decimal_places не int
            ValueError: decimal_places < 0
            InvalidMagnitudeError: StrictPositive округлился в ноль
        """
        if isinstance(decimal_places, bool) or not isinstance(decimal_places, int):
            raise TypeError(
                f"decimal_places must be int, got {type(decimal_places).__name__}"
            )
        if decimal_places < 0:
            raise ValueError(f"decimal_places must be non-negative, got {decimal_places}")

        exponent = self._magnitude.as_tuple().exponent
        if -exponent <= decimal_places:
            return self

        quantum = Decimal(1).scaleb(-decimal_places)
        return self._from_result(
            self._magnitude.quantize(quantum, rounding=ROUND_HALF_UP, context=EXACT_CONTEXT)
        )

    def __floor__(self) -> int:
        return int(self.floor()._magnitude)

    def __ceil__(self) -> int:
        return int(self.ceiling()._magnitude)

    def __trunc__(self) -> int:
        return int(self._magnitude)

    def __round__(self, ndigits: Optional[int] = None):
        if ndigits is None:
            return int(self.round()._magnitude)
        return self.round_to(ndigits)

    # -------------------------------------------------------------------------
    # Сравнения и экстремумы
    # -------------------------------------------------------------------------

    @staticmethod
    def _comparable(other: Any) -> Any:
        if isinstance(other, ConstrainedDecimal):
            return other._magnitude
        if isinstance(other, (Decimal, int, float)):
            return other
        return None

    def __eq__(self, other: object) -> bool:
        rhs = self._comparable(other)
        if rhs is None:
            return NotImplemented
        return self._magnitude == rhs

    def __lt__(self, other: Any) -> bool:
        rhs = self._comparable(other)
        if rhs is None:
            return NotImplemented
        return self._magnitude < rhs

    def __le__(self, other: Any) -> bool:
        rhs = self._comparable(other)
        if rhs is None:
            return NotImplemented
        return self._magnitude <= rhs

    def __gt__(self, other: Any) -> bool:
        rhs = self._comparable(other)
        if rhs is None:
            return NotImplemented
        return self._magnitude > rhs

    def __ge__(self, other: Any) -> bool:
        rhs = self._comparable(other)
        if rhs is None:
            return NotImplemented
        return self._magnitude >= rhs

    def __hash__(self) -> int:
        return hash(self._magnitude)

    def __bool__(self) -> bool:
        return not self._magnitude.is_zero()

    def is_zero(self) -> bool:
        return self._magnitude.is_zero()

    def is_multiple_of(self, other: Any) -> bool:
        """Делится ли значение на other без остатка (для нуля — только сам ноль)."""
        rhs = self._require(other)
        if rhs.is_zero():
            return self._magnitude.is_zero()
        return DECIMAL_CONTEXT.remainder(self._magnitude, rhs).is_zero()

    def max(self: T, other: Any) -> T:
        rhs = self._require(other)
        return self if self._magnitude >= rhs else self._from_result(rhs)

    def min(self: T, other: Any) -> T:
        rhs = self._require(other)
        return self if self._magnitude <= rhs else self._from_result(rhs)

    def clamp(self: T, low: Any, high: Any) -> T:
        """
        Ограничение значения диапазоном [low, high].

        Raises:
            ValueError: low > high
            InvalidMagnitudeError: StrictPositive прижат к нулевой границе
        """
        low_value = self._require(low)
        high_value = self._require(high)

        if low_value > high_value:
            raise ValueError(f"clamp bounds inverted: low={low_value} > high={high_value}")

        if self._magnitude < low_value:
            return self._from_result(low_value)
        if self._magnitude > high_value:
            return self._from_result(high_value)
        return self

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def to_float(self) -> float:
        """Конверсия в float (может терять точность для больших/длинных значений)."""
        return float(self._magnitude)

    def to_int(self) -> int:
        """Конверсия в int (дробная часть отбрасывается)."""
        return int(self._magnitude)

    def to_dec(self) -> Decimal:
        """Исходный Decimal без потерь."""
        return self._magnitude

    @property
    def sign(self) -> int:
        return 0 if self._magnitude.is_zero() else 1

    def __float__(self) -> float:
        return self.to_float()

    def __int__(self) -> int:
        return self.to_int()

    def __str__(self) -> str:
        return format(self._magnitude, "f")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return format(self._magnitude, format_spec)

    # -------------------------------------------------------------------------
    # Pydantic
    # -------------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._pydantic_validate,
            serialization=core_schema.to_string_ser_schema(when_used="json"),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        json_schema = schema_for(cls.allows_zero)
        json_schema.pop("$schema", None)
        return json_schema

    @classmethod
    def _pydantic_validate(cls, value: Any):
        if isinstance(value, cls):
            return value
        return cls(value)


# =============================================================================
# РЕЖИМЫ
# =============================================================================


class Positive(ConstrainedDecimal):
    """
    Неотрицательная десятичная величина (>= 0).

    Examples:
        >>> Positive("100.50")
        Positive('100.50')
        >>> Positive(10).checked_sub(Positive(3))
        Positive('7')
        >>> Positive(5).saturating_sub(Positive(100))
        Positive('0')
    """

    __slots__ = ()

    allows_zero: ClassVar[bool] = True

    ZERO: ClassVar["Positive"]
    ONE: ClassVar["Positive"]
    TWO: ClassVar["Positive"]
    TEN: ClassVar["Positive"]
    HUNDRED: ClassVar["Positive"]
    THOUSAND: ClassVar["Positive"]
    INFINITY: ClassVar["Positive"]

    def saturating_sub(self, other: Any) -> "Positive":
        """Вычитание с насыщением: ZERO вместо UnderflowError."""
        rhs = self._require(other)
        if rhs >= self._magnitude:
            return Positive.ZERO
        return self._from_result(DECIMAL_CONTEXT.subtract(self._magnitude, rhs))


class StrictPositive(ConstrainedDecimal):
    """
    Строго положительная десятичная величина (> 0).

    Ноль непредставим: нет ZERO, нет saturating_sub, а операции,
    результат которых равен нулю, завершаются ошибкой.
    """

    __slots__ = ()

    allows_zero: ClassVar[bool] = False

    ONE: ClassVar["StrictPositive"]
    TWO: ClassVar["StrictPositive"]
    TEN: ClassVar["StrictPositive"]
    HUNDRED: ClassVar["StrictPositive"]
    THOUSAND: ClassVar["StrictPositive"]
    INFINITY: ClassVar["StrictPositive"]


Positive.ZERO = Positive._trusted(Decimal(0))

for _cls in (Positive, StrictPositive):
    _cls.ONE = _cls._trusted(Decimal(1))
    _cls.TWO = _cls._trusted(Decimal(2))
    _cls.TEN = _cls._trusted(Decimal(10))
    _cls.HUNDRED = _cls._trusted(Decimal(100))
    _cls.THOUSAND = _cls._trusted(Decimal(1000))
    _cls.INFINITY = _cls._trusted(MAX_MAGNITUDE)

del _cls


# =============================================================================
# СОКРАЩЕНИЯ
# =============================================================================


def pos(magnitude: Any) -> Positive:
    """Positive.create: бросает InvalidMagnitudeError."""
    return Positive.create(magnitude)


def spos(magnitude: Any) -> Optional[Positive]:
    """Positive.create_or_none: None вместо ошибки."""
    return Positive.create_or_none(magnitude)


def pos_or_panic(magnitude: Any) -> Positive:
    """Positive.create_or_panic: AssertionError для заведомо валидных литералов."""
    return Positive.create_or_panic(magnitude)
