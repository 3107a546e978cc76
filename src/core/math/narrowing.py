"""
Narrowing — проверяемое сужение magnitude к типам фиксированной ширины

Цифры накапливаются от старшего разряда в аккумуляторе с диапазоном
целевого типа. Перед каждым шагом "умножить на 10 и прибавить цифру"
проверяется, не превысит ли результат предел; OutOfRangeError возникает
ДО переполнения, wraparound не используется.

Предел magnitude:
- signed, value >= 0:  2**(bits-1) - 1
- signed, value < 0:   2**(bits-1)
- unsigned:            2**bits - 1 (отрицательные значения недопустимы)

Преобразование во float идёт через 64-битный signed путь и подчиняется
той же проверке диапазона.
"""

import logging
from typing import Final

from pydantic import BaseModel, Field

from src.core.math.digits import RADIX, is_zero_digits

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class OutOfRangeError(OverflowError):
    """Magnitude не помещается в диапазон целевого типа."""
    pass


# =============================================================================
# INTEGER WIDTH
# =============================================================================


class IntegerWidth(BaseModel):
    """
    Описание целевого целочисленного типа.

    Immutable модель (frozen=True).
    """

    name: str = Field(..., min_length=1, description="Имя типа (например, 'int64')")
    bits: int = Field(..., ge=2, le=1024, description="Разрядность в битах")
    signed: bool = Field(default=True, description="Знаковый тип")

    model_config = {"frozen": True}

    @property
    def max_value(self) -> int:
        """Наибольшее представимое значение."""
        if self.signed:
            return 2 ** (self.bits - 1) - 1
        return 2**self.bits - 1

    @property
    def min_value(self) -> int:
        """Наименьшее представимое значение."""
        if self.signed:
            return -(2 ** (self.bits - 1))
        return 0

    def max_magnitude(self, sign: int) -> int:
        """
        Наибольшая допустимая magnitude для значения со знаком sign.

        Для unsigned типа и sign == -1 допустим только ноль.
        """
        if sign == -1:
            return -self.min_value
        return self.max_value


INT8: Final[IntegerWidth] = IntegerWidth(name="int8", bits=8)
INT16: Final[IntegerWidth] = IntegerWidth(name="int16", bits=16)
INT32: Final[IntegerWidth] = IntegerWidth(name="int32", bits=32)
INT64: Final[IntegerWidth] = IntegerWidth(name="int64", bits=64)
UINT8: Final[IntegerWidth] = IntegerWidth(name="uint8", bits=8, signed=False)
UINT16: Final[IntegerWidth] = IntegerWidth(name="uint16", bits=16, signed=False)
UINT32: Final[IntegerWidth] = IntegerWidth(name="uint32", bits=32, signed=False)
UINT64: Final[IntegerWidth] = IntegerWidth(name="uint64", bits=64, signed=False)

# Путь для float: double через long long
FLOAT_VIA: Final[IntegerWidth] = INT64


# =============================================================================
# NARROWING
# =============================================================================


def _overflow(sign: int, magnitude: str, width: IntegerWidth) -> OutOfRangeError:
    text = ("-" if sign == -1 else "") + magnitude
    logger.debug("narrowing overflow: %s does not fit %s", text, width.name)
    return OutOfRangeError(f"value {text} out of range for {width.name}")


def narrow_digits(sign: int, magnitude: str, width: IntegerWidth = INT64) -> int:
    """
    Сужение (sign, magnitude) к целому типа width.

    Args:
        sign: 1 или -1
        magnitude: Нормализованная magnitude
        width: Целевой тип

    Returns:
        Значение в диапазоне [width.min_value, width.max_value]

    Raises:
        OutOfRangeError: magnitude превышает предел типа (проверка до
            каждого шага накопления)
    """
    if is_zero_digits(magnitude):
        return 0

    limit = width.max_magnitude(sign)
    value = 0
    for ch in magnitude:
        digit = ord(ch) - ord("0")
        if value > limit // RADIX:
            raise _overflow(sign, magnitude, width)
        value *= RADIX
        if value > limit - digit:
            raise _overflow(sign, magnitude, width)
        value += digit

    return sign * value


def digits_to_float(sign: int, magnitude: str) -> float:
    """
    Преобразование во float через 64-битный signed путь.

    Raises:
        OutOfRangeError: значение вне диапазона int64
    """
    return float(narrow_digits(sign, magnitude, FLOAT_VIA))
