"""
Core math modules для регистрового калькулятора

Десятичные целые произвольной точности и арифметические алгоритмы над ними.
"""

# BigDecimal + Normalizer
from src.core.math.big_decimal import (
    INTSIZE,
    PUT_COMMAS,
    RADIX,
    BigDecimal,
    FatalArithmeticError,
    IntegerOverflowError,
    check_overflow,
    format_digits,
    is_overflowed,
    is_zero,
    normalize,
    parse,
    significant_length,
)

# Arithmetic Engine
from src.core.math.arithmetic import (
    add,
    assign,
    at_least,
    carry_over,
    multiply,
    subtract,
)

# Exponentiation
from src.core.math.exponentiation import (
    EXPONENT_MAX,
    exponent_to_int,
    power,
)

# Long Division
from src.core.math.long_division import (
    DivisionByZeroError,
    divide,
)

__all__ = [
    # BigDecimal — Constants
    "INTSIZE",
    "PUT_COMMAS",
    "RADIX",
    # BigDecimal — Types
    "BigDecimal",
    # Fatal conditions
    "FatalArithmeticError",
    "IntegerOverflowError",
    "DivisionByZeroError",
    # BigDecimal — Functions
    "parse",
    "format_digits",
    # Normalizer
    "significant_length",
    "normalize",
    "is_overflowed",
    "check_overflow",
    "is_zero",
    # Arithmetic Engine
    "add",
    "assign",
    "at_least",
    "carry_over",
    "multiply",
    "subtract",
    # Exponentiation
    "EXPONENT_MAX",
    "exponent_to_int",
    "power",
    # Long Division
    "divide",
]
