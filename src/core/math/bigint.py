"""
BigInt — знаковое целое произвольной точности (десятичная база)

Sign-magnitude представление:
- sign: +1 или -1
- magnitude: нормализованная строка десятичных цифр, старший разряд первым

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нет ведущих нулей, кроме канонического "0"
2. magnitude == "0" ⇒ sign == +1 (отрицательного нуля нет)
3. magnitude непуста и содержит только '0'..'9'

Все арифметические пути создают результат через BigInt._make, где
единственный раз применяется правило канонического нуля.

Значение неизменяемо: операторы возвращают новые экземпляры, `a += b`
перепривязывает имя.

Деление и остаток — как в Python (floor):
    (a // b) * b + (a % b) == a,  a % b == 0 или sign(a % b) == sign(b)
"""

import math
import sys
from typing import Final, NamedTuple, Optional, TextIO, Tuple, Union

from src.core.math.decimal_text import (
    format_decimal,
    parse_decimal,
    read_decimal,
)
from src.core.math.digits import (
    ONE_DIGITS,
    ZERO_DIGITS,
    add_digits,
    compare_digits,
    divide_digits,
    is_zero_digits,
    multiply_digits,
    normalize_digits,
    subtract_digits,
    subtract_from_larger,
)
from src.core.math.narrowing import (
    INT32,
    INT64,
    IntegerWidth,
    OutOfRangeError,
    digits_to_float,
    narrow_digits,
)

# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZeroError(ZeroDivisionError):
    """Делитель равен нулю в // или %. Частичного результата нет."""
    pass


# =============================================================================
# BIGINT
# =============================================================================

Operand = Union["BigInt", int]


class BigInt:
    """
    Неизменяемое целое произвольной длины.

    Создание:
        BigInt()            → 0
        BigInt(12)          → из int
        BigInt("-0042")     → из литерала [+-]?[0-9]+ (InvalidFormatError)
        BigInt(other)       → копия
        BigInt(3.7)         → через from_float (усечение к нулю, int64)
    """

    __slots__ = ("_sign", "_digits")

    def __init__(self, value: Union["BigInt", int, str, float] = 0):
        if isinstance(value, BigInt):
            sign, digits = value._sign, value._digits
        elif isinstance(value, bool):
            raise TypeError("BigInt cannot be created from bool")
        elif isinstance(value, int):
            sign, digits = _int_parts(value)
        elif isinstance(value, str):
            sign, digits = parse_decimal(value)
        elif isinstance(value, float):
            sign, digits = _float_parts(value)
        else:
            raise TypeError(f"BigInt cannot be created from {type(value).__name__}")

        self._sign = sign
        self._digits = digits

    @classmethod
    def _make(cls, sign: int, digits: str) -> "BigInt":
        """Единственная точка нормализации результатов арифметики."""
        digits = normalize_digits(digits)
        obj = cls.__new__(cls)
        obj._sign = 1 if is_zero_digits(digits) else sign
        obj._digits = digits
        return obj

    @classmethod
    def from_float(cls, value: float) -> "BigInt":
        """
        Целая часть float (усечение к нулю) в пределах int64.

        Raises:
            ValueError: NaN или Inf
            OutOfRangeError: значение вне диапазона int64
        """
        return cls._make(*_float_parts(value))

    # -------------------------------------------------------------------------
    # Атрибуты
    # -------------------------------------------------------------------------

    @property
    def sign(self) -> int:
        """+1 или -1 (ноль всегда +1)."""
        return self._sign

    @property
    def magnitude(self) -> str:
        """Нормализованная строка цифр абсолютного значения."""
        return self._digits

    def is_zero(self) -> bool:
        return is_zero_digits(self._digits)

    def is_negative(self) -> bool:
        return self._sign == -1

    # -------------------------------------------------------------------------
    # Сложение и вычитание
    # -------------------------------------------------------------------------

    def __add__(self, other: Operand) -> "BigInt":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented

        if self._sign == other._sign:
            return BigInt._make(self._sign, add_digits(self._digits, other._digits))

        # знаки разные: знак берётся от операнда с большей magnitude
        if self._sign == -1:
            sign, digits = subtract_digits(other._digits, self._digits)
        else:
            sign, digits = subtract_digits(self._digits, other._digits)
        return BigInt._make(sign, digits)

    def __radd__(self, other: int) -> "BigInt":
        return self.__add__(other)

    def __sub__(self, other: Operand) -> "BigInt":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented

        if self._sign == other._sign:
            sign, digits = subtract_digits(self._digits, other._digits)
            return BigInt._make(self._sign * sign, digits)

        # разные знаки: |self| + |other| со знаком self
        return BigInt._make(self._sign, add_digits(self._digits, other._digits))

    def __rsub__(self, other: int) -> "BigInt":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other.__sub__(self)

    def increment(self) -> "BigInt":
        """self + 1"""
        return self + _ONE

    def decrement(self) -> "BigInt":
        """self - 1"""
        return self - _ONE

    # -------------------------------------------------------------------------
    # Умножение
    # -------------------------------------------------------------------------

    def __mul__(self, other: Operand) -> "BigInt":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented

        if self.is_zero() or other.is_zero():
            return _ZERO

        # более длинный операнд повторно масштабируется, короткий итерируется
        if compare_digits(self._digits, other._digits) < 0:
            digits = multiply_digits(other._digits, self._digits)
        else:
            digits = multiply_digits(self._digits, other._digits)
        return BigInt._make(self._sign * other._sign, digits)

    def __rmul__(self, other: int) -> "BigInt":
        return self.__mul__(other)

    # -------------------------------------------------------------------------
    # Floor division и modulo
    # -------------------------------------------------------------------------

    def __floordiv__(self, other: Operand) -> "BigInt":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return BigInt._make(*_floor_divide(self, other))

    def __rfloordiv__(self, other: int) -> "BigInt":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other.__floordiv__(self)

    def __mod__(self, other: Operand) -> "BigInt":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return BigInt._make(*_floor_modulo(self, other))

    def __rmod__(self, other: int) -> "BigInt":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other.__mod__(self)

    def __divmod__(self, other: Operand) -> Tuple["BigInt", "BigInt"]:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.__floordiv__(other), self.__mod__(other)

    def __rdivmod__(self, other: int) -> Tuple["BigInt", "BigInt"]:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other.__divmod__(self)

    # -------------------------------------------------------------------------
    # Унарные операции
    # -------------------------------------------------------------------------

    def __neg__(self) -> "BigInt":
        return BigInt._make(-self._sign, self._digits)

    def __pos__(self) -> "BigInt":
        return self

    def __abs__(self) -> "BigInt":
        return BigInt._make(1, self._digits)

    def __bool__(self) -> bool:
        return not self.is_zero()

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare(self, other: Operand) -> int:
        """
        Полный порядок над знаковыми значениями.

        Returns:
            -1 если self < other, 0 если равны, 1 если self > other

        Raises:
            TypeError: other не BigInt и не int
        """
        other = _require(other)
        if self._sign > other._sign:
            return 1
        if self._sign < other._sign:
            return -1
        return compare_digits(self._digits, other._digits) * self._sign

    def equals(self, other: Operand) -> bool:
        """Равенство знаков и нормализованных magnitude."""
        other = _require(other)
        return self._sign == other._sign and self._digits == other._digits

    def __eq__(self, other: object) -> bool:
        if isinstance(other, float):
            # как у int: 3 == 3.0, нецелые и NaN/Inf не равны
            return other.is_integer() and self.equals(BigInt(int(other)))
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: Operand) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Operand) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Operand) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Operand) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        # совпадает с hash(int) и hash(float) для равных значений
        h = 0
        for ch in self._digits:
            h = (h * 10 + ord(ch) - ord("0")) % _HASH_MODULUS
        h *= self._sign
        return -2 if h == -1 else h

    # -------------------------------------------------------------------------
    # Сужение
    # -------------------------------------------------------------------------

    def narrow(self, width: IntegerWidth = INT64) -> int:
        """
        Значение как целое типа width.

        Raises:
            OutOfRangeError: не помещается в width
        """
        return narrow_digits(self._sign, self._digits, width)

    def to_int32(self) -> int:
        return self.narrow(INT32)

    def to_int64(self) -> int:
        return self.narrow(INT64)

    def to_float(self) -> float:
        """float через int64 (OutOfRangeError вне диапазона)."""
        return digits_to_float(self._sign, self._digits)

    def __int__(self) -> int:
        return self.to_int64()

    def __float__(self) -> float:
        return self.to_float()

    # -------------------------------------------------------------------------
    # Текст
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        """Каноническое представление: без '+', без ведущих нулей, без '-0'."""
        return format_decimal(self._sign, self._digits)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInt({self.to_string()!r})"

    def __format__(self, format_spec: str) -> str:
        return format(self.to_string(), format_spec)


# =============================================================================
# HELPERS
# =============================================================================

_HASH_MODULUS: Final[int] = sys.hash_info.modulus
_INT64_MIN: Final[int] = INT64.min_value
_INT64_MAX: Final[int] = INT64.max_value


def _int_parts(value: int) -> Tuple[int, str]:
    if value < 0:
        return -1, str(-value)
    return 1, str(value)


def _float_parts(value: float) -> Tuple[int, str]:
    if not math.isfinite(value):
        raise ValueError(f"BigInt cannot be created from non-finite float: {value}")

    truncated = math.trunc(value)
    if not _INT64_MIN <= truncated <= _INT64_MAX:
        raise OutOfRangeError(f"float {value!r} out of range for {INT64.name}")
    if truncated == 0:
        return 1, ZERO_DIGITS
    return _int_parts(truncated)


def _coerce(value: object):
    if isinstance(value, BigInt):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInt(value)
    return NotImplemented


def _require(value: object) -> BigInt:
    coerced = _coerce(value)
    if coerced is NotImplemented:
        raise TypeError(f"cannot compare BigInt with {type(value).__name__}")
    return coerced


def _floor_divide(dividend: BigInt, divisor: BigInt) -> Tuple[int, str]:
    """
    (sign, magnitude) частного с округлением к минус бесконечности.

    Raises:
        DivisionByZeroError: divisor == 0
    """
    if divisor.is_zero():
        raise DivisionByZeroError(f"BigInt division by zero: {dividend} // 0")
    if dividend.is_zero():
        return 1, ZERO_DIGITS

    sign = dividend.sign * divisor.sign
    if compare_digits(dividend.magnitude, divisor.magnitude) < 0:
        # |a| < |b|: 0, либо -1 для отрицательной дроби
        return (-1, ONE_DIGITS) if sign == -1 else (1, ZERO_DIGITS)

    return sign, divide_digits(dividend.magnitude, divisor.magnitude, sign)


def _floor_modulo(dividend: BigInt, divisor: BigInt) -> Tuple[int, str]:
    """
    (sign, magnitude) остатка; остаток ноль или со знаком делителя.

    Raises:
        DivisionByZeroError: divisor == 0
    """
    if divisor.is_zero():
        raise DivisionByZeroError(f"BigInt modulo by zero: {dividend} % 0")
    if dividend.is_zero():
        return 1, ZERO_DIGITS

    a = dividend.magnitude
    b = divisor.magnitude
    cmp = compare_digits(a, b)
    if cmp == 0:
        return 1, ZERO_DIGITS

    if cmp < 0:
        if dividend.sign != divisor.sign:
            return divisor.sign, subtract_from_larger(b, a)
        return dividend.sign, a

    quotient = divide_digits(a, b, 1)
    product = multiply_digits(quotient, b)
    if product == a:
        return 1, ZERO_DIGITS

    remainder = subtract_from_larger(a, product)
    if dividend.sign != divisor.sign:
        return divisor.sign, subtract_from_larger(b, remainder)
    return dividend.sign, remainder


_ZERO: Final[BigInt] = BigInt(0)
_ONE: Final[BigInt] = BigInt(1)


# =============================================================================
# ПОТОКОВЫЙ ВВОД/ВЫВОД
# =============================================================================


class BigIntReadResult(NamedTuple):
    """Результат read_bigint. При ok=False value равно None."""

    ok: bool
    value: Optional[BigInt]
    token: str


def read_bigint(stream: TextIO) -> BigIntReadResult:
    """
    Чтение следующего токена потока как BigInt.

    Никогда не выбрасывает exception на некорректном вводе: при ok=False
    value равно None.
    """
    result = read_decimal(stream)
    if not result.ok:
        return BigIntReadResult(ok=False, value=None, token=result.token)
    return BigIntReadResult(
        ok=True, value=BigInt._make(*result.value), token=result.token
    )


def write_bigint(stream: TextIO, value: BigInt) -> None:
    """Запись канонического текста в поток."""
    stream.write(value.to_string())
