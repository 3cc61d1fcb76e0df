"""
Positive — неотрицательные десятичные значения

Value-тип с гарантией знака, константы, проверки и JSON-контракт.
Импорт всего необходимого одной строкой:

    from src.positive import Positive, pos, pos_or_panic, spos
"""

# Errors
from src.positive.errors import (
    DivisionByZeroError,
    InvalidMagnitudeError,
    PositiveError,
    UndefinedLogarithmError,
    UnderflowError,
)

# Settings
from src.positive.settings import (
    DECIMAL_CONTEXT,
    DECIMAL_PRECISION,
    DEFAULT_EPSILON,
    MAX_MAGNITUDE,
    MAX_SCALE,
)

# Value types
from src.positive.value import (
    ConstrainedDecimal,
    Positive,
    StrictPositive,
    pos,
    pos_or_panic,
    spos,
)

# Safeguards
from src.positive.safeguards import (
    assert_pos_relative_eq,
    is_positive_type,
    is_valid_magnitude,
    relative_eq,
)

# Contracts
from src.positive.contracts import (
    POSITIVE_SCHEMA,
    STRICT_POSITIVE_SCHEMA,
    PositiveContractValidator,
    validate_serialized,
)

# Constants
from src.positive.constants import (
    DAYS_IN_A_YEAR,
    E,
    EIGHT,
    EIGHT_HUNDRED,
    EIGHT_THOUSAND,
    EIGHTY,
    EIGHTY_FIVE,
    EPSILON,
    FIFTEEN,
    FIFTY,
    FIFTY_FIVE,
    FIVE,
    FIVE_HUNDRED,
    FIVE_THOUSAND,
    FORTY,
    FORTY_FIVE,
    FOUR,
    FOUR_HUNDRED,
    FOUR_THOUSAND,
    HUNDRED,
    INFINITY,
    NINE,
    NINE_HUNDRED,
    NINE_THOUSAND,
    NINETY,
    NINETY_FIVE,
    ONE,
    PI,
    SEVEN,
    SEVEN_HUNDRED,
    SEVEN_THOUSAND,
    SEVENTY,
    SEVENTY_FIVE,
    SIX,
    SIX_HUNDRED,
    SIX_THOUSAND,
    SIXTY,
    SIXTY_FIVE,
    TEN,
    TEN_THOUSAND,
    THIRTY,
    THIRTY_FIVE,
    THOUSAND,
    THREE,
    THREE_HUNDRED,
    THREE_THOUSAND,
    TWENTY,
    TWENTY_FIVE,
    TWO,
    TWO_HUNDRED,
    TWO_THOUSAND,
    ZERO,
)

__all__ = [
    # Errors
    "PositiveError",
    "InvalidMagnitudeError",
    "UnderflowError",
    "DivisionByZeroError",
    "UndefinedLogarithmError",
    # Settings
    "DECIMAL_CONTEXT",
    "DECIMAL_PRECISION",
    "DEFAULT_EPSILON",
    "MAX_MAGNITUDE",
    "MAX_SCALE",
    # Value types
    "ConstrainedDecimal",
    "Positive",
    "StrictPositive",
    "pos",
    "pos_or_panic",
    "spos",
    # Safeguards
    "assert_pos_relative_eq",
    "is_positive_type",
    "is_valid_magnitude",
    "relative_eq",
    # Contracts
    "POSITIVE_SCHEMA",
    "STRICT_POSITIVE_SCHEMA",
    "PositiveContractValidator",
    "validate_serialized",
    # Constants — integers
    "ZERO",
    "ONE",
    "TWO",
    "THREE",
    "FOUR",
    "FIVE",
    "SIX",
    "SEVEN",
    "EIGHT",
    "NINE",
    "TEN",
    # Constants — multiples of 5
    "FIFTEEN",
    "TWENTY",
    "TWENTY_FIVE",
    "THIRTY",
    "THIRTY_FIVE",
    "FORTY",
    "FORTY_FIVE",
    "FIFTY",
    "FIFTY_FIVE",
    "SIXTY",
    "SIXTY_FIVE",
    "SEVENTY",
    "SEVENTY_FIVE",
    "EIGHTY",
    "EIGHTY_FIVE",
    "NINETY",
    "NINETY_FIVE",
    # Constants — multiples of 100
    "HUNDRED",
    "TWO_HUNDRED",
    "THREE_HUNDRED",
    "FOUR_HUNDRED",
    "FIVE_HUNDRED",
    "SIX_HUNDRED",
    "SEVEN_HUNDRED",
    "EIGHT_HUNDRED",
    "NINE_HUNDRED",
    # Constants — multiples of 1000
    "THOUSAND",
    "TWO_THOUSAND",
    "THREE_THOUSAND",
    "FOUR_THOUSAND",
    "FIVE_THOUSAND",
    "SIX_THOUSAND",
    "SEVEN_THOUSAND",
    "EIGHT_THOUSAND",
    "NINE_THOUSAND",
    "TEN_THOUSAND",
    # Constants — special
    "PI",
    "E",
    "EPSILON",
    "INFINITY",
    "DAYS_IN_A_YEAR",
]
