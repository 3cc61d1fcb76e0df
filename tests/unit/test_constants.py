"""
Тесты для таблицы констант
"""

import math
from decimal import Decimal

import pytest

import src.positive as positive
from src.positive import constants
from src.positive.settings import MAX_MAGNITUDE
from src.positive.value import Positive, StrictPositive


class TestIntegerConstants:
    """Тесты целых констант и кратных"""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("ZERO", 0),
            ("ONE", 1),
            ("FIVE", 5),
            ("TEN", 10),
            ("FIFTEEN", 15),
            ("FIFTY", 50),
            ("NINETY_FIVE", 95),
            ("HUNDRED", 100),
            ("NINE_HUNDRED", 900),
            ("THOUSAND", 1000),
            ("TEN_THOUSAND", 10000),
        ],
    )
    def test_values(self, name, expected) -> None:
        value = getattr(constants, name)
        assert isinstance(value, Positive)
        assert value == expected

    def test_class_attributes_shared(self) -> None:
        assert constants.ZERO is Positive.ZERO
        assert constants.ONE is Positive.ONE
        assert constants.INFINITY is Positive.INFINITY

    def test_zero_is_zero(self) -> None:
        assert constants.ZERO.is_zero()


class TestSpecialConstants:
    """Тесты математических и специальных значений"""

    def test_pi_and_e(self) -> None:
        assert constants.PI.to_float() == pytest.approx(math.pi)
        assert constants.E.to_float() == pytest.approx(math.e)

    def test_epsilon_is_decimal(self) -> None:
        assert isinstance(constants.EPSILON, Decimal)
        assert constants.EPSILON == Decimal("1e-16")

    def test_infinity_is_maximum(self) -> None:
        assert constants.INFINITY == MAX_MAGNITUDE

    def test_days_in_a_year(self) -> None:
        assert constants.DAYS_IN_A_YEAR == 365
        assert str(constants.DAYS_IN_A_YEAR) == "365.0"

    def test_constants_usable_in_arithmetic(self) -> None:
        price = Positive(100)
        discount = Positive(20)
        assert price.checked_sub(price * discount / constants.HUNDRED) == 80


class TestStrictConstants:
    """Для StrictPositive нет нуля"""

    def test_strict_constants(self) -> None:
        assert StrictPositive.ONE == 1
        assert StrictPositive.THOUSAND == 1000
        assert StrictPositive.INFINITY == MAX_MAGNITUDE
        assert not hasattr(StrictPositive, "ZERO")


class TestPublicApi:
    """Все имена из __all__ экспортируются"""

    def test_all_exported(self) -> None:
        for name in positive.__all__:
            assert hasattr(positive, name), name
