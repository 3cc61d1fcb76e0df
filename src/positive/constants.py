"""
Constants — Именованные значения Positive

Статическая таблица предвалидированных констант:
- целые 0..10
- кратные 5 (15..95), 100 (100..900), 1000 (1000..10000)
- математические константы PI и E (29 значащих цифр)
- EPSILON и сентинел INFINITY (= MAX_MAGNITUDE)

Константы существуют только для Positive. Для StrictPositive ноль
непредставим, поэтому его константы — атрибуты класса без ZERO
(StrictPositive.ONE, StrictPositive.TEN, ...).
"""

from decimal import Decimal
from typing import Final

from src.positive.settings import DEFAULT_EPSILON
from src.positive.value import Positive

# =============================================================================
# ЦЕЛЫЕ (0-10)
# =============================================================================

ZERO: Final[Positive] = Positive.ZERO
ONE: Final[Positive] = Positive.ONE
TWO: Final[Positive] = Positive.TWO
THREE: Final[Positive] = Positive(3)
FOUR: Final[Positive] = Positive(4)
FIVE: Final[Positive] = Positive(5)
SIX: Final[Positive] = Positive(6)
SEVEN: Final[Positive] = Positive(7)
EIGHT: Final[Positive] = Positive(8)
NINE: Final[Positive] = Positive(9)
TEN: Final[Positive] = Positive.TEN

# =============================================================================
# КРАТНЫЕ 5 (15-95)
# =============================================================================

FIFTEEN: Final[Positive] = Positive(15)
TWENTY: Final[Positive] = Positive(20)
TWENTY_FIVE: Final[Positive] = Positive(25)
THIRTY: Final[Positive] = Positive(30)
THIRTY_FIVE: Final[Positive] = Positive(35)
FORTY: Final[Positive] = Positive(40)
FORTY_FIVE: Final[Positive] = Positive(45)
FIFTY: Final[Positive] = Positive(50)
FIFTY_FIVE: Final[Positive] = Positive(55)
SIXTY: Final[Positive] = Positive(60)
SIXTY_FIVE: Final[Positive] = Positive(65)
SEVENTY: Final[Positive] = Positive(70)
SEVENTY_FIVE: Final[Positive] = Positive(75)
EIGHTY: Final[Positive] = Positive(80)
EIGHTY_FIVE: Final[Positive] = Positive(85)
NINETY: Final[Positive] = Positive(90)
NINETY_FIVE: Final[Positive] = Positive(95)

# =============================================================================
# КРАТНЫЕ 100 (100-900)
# =============================================================================

HUNDRED: Final[Positive] = Positive.HUNDRED
TWO_HUNDRED: Final[Positive] = Positive(200)
THREE_HUNDRED: Final[Positive] = Positive(300)
FOUR_HUNDRED: Final[Positive] = Positive(400)
FIVE_HUNDRED: Final[Positive] = Positive(500)
SIX_HUNDRED: Final[Positive] = Positive(600)
SEVEN_HUNDRED: Final[Positive] = Positive(700)
EIGHT_HUNDRED: Final[Positive] = Positive(800)
NINE_HUNDRED: Final[Positive] = Positive(900)

# =============================================================================
# КРАТНЫЕ 1000 (1000-10000)
# =============================================================================

THOUSAND: Final[Positive] = Positive.THOUSAND
TWO_THOUSAND: Final[Positive] = Positive(2000)
THREE_THOUSAND: Final[Positive] = Positive(3000)
FOUR_THOUSAND: Final[Positive] = Positive(4000)
FIVE_THOUSAND: Final[Positive] = Positive(5000)
SIX_THOUSAND: Final[Positive] = Positive(6000)
SEVEN_THOUSAND: Final[Positive] = Positive(7000)
EIGHT_THOUSAND: Final[Positive] = Positive(8000)
NINE_THOUSAND: Final[Positive] = Positive(9000)
TEN_THOUSAND: Final[Positive] = Positive(10000)

# =============================================================================
# МАТЕМАТИЧЕСКИЕ КОНСТАНТЫ
# =============================================================================

PI: Final[Positive] = Positive(Decimal("3.1415926535897932384626433833"))
E: Final[Positive] = Positive(Decimal("2.7182818284590452353602874714"))

# =============================================================================
# СПЕЦИАЛЬНЫЕ ЗНАЧЕНИЯ
# =============================================================================

# Толерантность для приближённых сравнений (Decimal, не Positive)
EPSILON: Final[Decimal] = DEFAULT_EPSILON

# Максимальная представимая величина ("бесконечность")
INFINITY: Final[Positive] = Positive.INFINITY

DAYS_IN_A_YEAR: Final[Positive] = Positive(Decimal("365.0"))
