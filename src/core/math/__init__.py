"""
Core math modules

Десятичная арифметика произвольной точности: digit-примитивы, текстовый
формат, проверяемое сужение и значение BigInt.
"""

# Digit Sequences
from src.core.math.digits import (
    ONE_DIGITS,
    RADIX,
    ZERO_DIGITS,
    DigitInvariantViolation,
    DivisionResult,
    add_digits,
    compare_digits,
    divide_digits,
    fit_digit,
    is_zero_digits,
    long_division,
    multiples_table,
    multiply_by_digit,
    multiply_digits,
    normalize_digits,
    subtract_digits,
    subtract_from_larger,
)

# Decimal Text
from src.core.math.decimal_text import (
    ExtractionResult,
    InvalidFormatError,
    format_decimal,
    is_decimal_string,
    parse_decimal,
    read_decimal,
    read_token,
)

# Narrowing
from src.core.math.narrowing import (
    INT8,
    INT16,
    INT32,
    INT64,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    IntegerWidth,
    OutOfRangeError,
    digits_to_float,
    narrow_digits,
)

# BigInt
from src.core.math.bigint import (
    BigInt,
    BigIntReadResult,
    DivisionByZeroError,
    read_bigint,
    write_bigint,
)

__all__ = [
    # Digit Sequences — Constants
    "ONE_DIGITS",
    "RADIX",
    "ZERO_DIGITS",
    # Digit Sequences — Exceptions
    "DigitInvariantViolation",
    # Digit Sequences — Types
    "DivisionResult",
    # Digit Sequences — Functions
    "add_digits",
    "compare_digits",
    "divide_digits",
    "fit_digit",
    "is_zero_digits",
    "long_division",
    "multiples_table",
    "multiply_by_digit",
    "multiply_digits",
    "normalize_digits",
    "subtract_digits",
    "subtract_from_larger",
    # Decimal Text — Exceptions
    "InvalidFormatError",
    # Decimal Text — Types
    "ExtractionResult",
    # Decimal Text — Functions
    "format_decimal",
    "is_decimal_string",
    "parse_decimal",
    "read_decimal",
    "read_token",
    # Narrowing — Widths
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    # Narrowing — Exceptions
    "OutOfRangeError",
    # Narrowing — Types
    "IntegerWidth",
    # Narrowing — Functions
    "digits_to_float",
    "narrow_digits",
    # BigInt
    "BigInt",
    "BigIntReadResult",
    "DivisionByZeroError",
    "read_bigint",
    "write_bigint",
]
