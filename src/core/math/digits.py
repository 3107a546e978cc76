"""
Digit Sequences — беззнаковые примитивы десятичной арифметики

Модуль работает только с magnitude: строками из символов '0'..'9',
старший разряд первым. Понятия знака здесь нет.

Операции:
- Сравнение (сначала длина, затем лексикографически)
- Сложение с переносом (carry)
- Вычитание из большего с заёмом (borrow)
- Умножение на одну цифру со сдвигом и полное schoolbook умножение
- Деление столбиком с таблицей кратных делителя (digit-fit probe)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входы нормализованы: нет ведущих нулей, кроме единственного "0"
2. Все результаты нормализованы тем же правилом
3. Нарушение предусловий → DigitInvariantViolation (ошибка в самих примитивах,
   а не в пользовательском вводе)
"""

from typing import Final, List, NamedTuple, Tuple

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO_DIGITS: Final[str] = "0"
ONE_DIGITS: Final[str] = "1"

# Основание системы счисления (только десятичная)
RADIX: Final[int] = 10

_ORD_ZERO: Final[int] = ord("0")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DigitInvariantViolation(RuntimeError):
    """
    Нарушение внутреннего инварианта digit-примитивов.

    Означает ошибку в реализации (например, subtract_from_larger вызван с
    меньшим левым операндом), а не ошибку ввода. Внутри пакета никогда не
    перехватывается.
    """
    pass


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize_digits(digits: str) -> str:
    """
    Удаление ведущих нулей.

    Пустая строка или строка из одних нулей схлопывается в "0".

    Examples:
        >>> normalize_digits("000120")
        '120'
        >>> normalize_digits("0000")
        '0'
    """
    stripped = digits.lstrip("0")
    return stripped if stripped else ZERO_DIGITS


def is_zero_digits(digits: str) -> bool:
    """Является ли нормализованная magnitude нулём."""
    return digits == ZERO_DIGITS


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_digits(d1: str, d2: str) -> int:
    """
    Сравнение двух нормализованных digit-строк.

    Более короткая строка меньше. Строки одинаковой длины сравниваются
    лексикографически, что совпадает с числовым порядком.

    Returns:
        -1 если d1 < d2, 0 если равны, 1 если d1 > d2
    """
    if len(d1) < len(d2):
        return -1
    if len(d1) > len(d2):
        return 1

    if d1 < d2:
        return -1
    if d1 > d2:
        return 1
    return 0


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def _add_digit(a: int, b: int, carry: int) -> Tuple[int, int]:
    total = a + b + carry
    return total // RADIX, total % RADIX


def _sub_digit(a: int, b: int, borrow: int) -> Tuple[int, int]:
    value = a - (b + borrow)
    if value < 0:
        return 1, value + RADIX
    return 0, value


def add_digits(d1: str, d2: str) -> str:
    """
    Schoolbook сложение, начиная с младшего разряда.

    Лишний старший разряд добавляется только при ненулевом carry.

    Examples:
        >>> add_digits("12345", "67")
        '12412'
        >>> add_digits("999", "1")
        '1000'
    """
    result: List[str] = []
    carry = 0
    i1 = len(d1) - 1
    i2 = len(d2) - 1

    while i1 >= 0 or i2 >= 0:
        a = ord(d1[i1]) - _ORD_ZERO if i1 >= 0 else 0
        b = ord(d2[i2]) - _ORD_ZERO if i2 >= 0 else 0
        carry, digit = _add_digit(a, b, carry)
        result.append(chr(digit + _ORD_ZERO))
        i1 -= 1
        i2 -= 1

    if carry:
        result.append(chr(carry + _ORD_ZERO))

    return "".join(reversed(result))


def subtract_from_larger(d1: str, d2: str) -> str:
    """
    Вычитание с заёмом: d1 - d2, где d1 >= d2 обязательно.

    Результат нормализуется (ведущие нули удаляются, все нули → "0").

    Raises:
        DigitInvariantViolation: если d1 < d2 (после последнего разряда
            остаётся заём)
    """
    result: List[str] = []
    borrow = 0
    i1 = len(d1) - 1
    i2 = len(d2) - 1

    while i1 >= 0 or i2 >= 0:
        a = ord(d1[i1]) - _ORD_ZERO if i1 >= 0 else 0
        b = ord(d2[i2]) - _ORD_ZERO if i2 >= 0 else 0
        borrow, digit = _sub_digit(a, b, borrow)
        result.append(chr(digit + _ORD_ZERO))
        i1 -= 1
        i2 -= 1

    if borrow:
        raise DigitInvariantViolation(
            f"subtract_from_larger: {d1!r} is not larger than {d2!r}"
        )

    return normalize_digits("".join(reversed(result)))


def subtract_digits(d1: str, d2: str) -> Tuple[int, str]:
    """
    Знаковое вычитание magnitude.

    Returns:
        (sign, magnitude): sign = 1 если d1 >= d2, иначе -1;
        magnitude = |d1 - d2|
    """
    cmp = compare_digits(d1, d2)
    if cmp < 0:
        return -1, subtract_from_larger(d2, d1)
    if cmp > 0:
        return 1, subtract_from_larger(d1, d2)
    return 1, ZERO_DIGITS


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_by_digit(digits: str, digit: int, shift: int = 0) -> str:
    """
    Умножение на одну десятичную цифру со сдвигом на shift разрядов.

    Args:
        digits: Нормализованная magnitude
        digit: Множитель 0..9
        shift: Количество нулей, дописываемых справа (позиционный вес)

    Returns:
        Нормализованное произведение digits * digit * 10**shift

    Raises:
        DigitInvariantViolation: digit вне 0..9 или carry больше одной цифры
    """
    if not 0 <= digit < RADIX:
        raise DigitInvariantViolation(f"multiply_by_digit: not a digit: {digit}")
    if digit == 0 or is_zero_digits(digits):
        return ZERO_DIGITS

    result: List[str] = []
    carry = 0
    for ch in reversed(digits):
        product = (ord(ch) - _ORD_ZERO) * digit + carry
        carry = product // RADIX
        result.append(chr(product % RADIX + _ORD_ZERO))

    if carry > 0:
        if carry >= RADIX:
            raise DigitInvariantViolation(
                f"multiply_by_digit: carry too large: {carry}"
            )
        result.append(chr(carry + _ORD_ZERO))

    return "".join(reversed(result)) + ZERO_DIGITS * shift


def multiply_digits(d1: str, d2: str) -> str:
    """
    Schoolbook умножение O(n·m).

    Для каждой цифры d2 (с младшей) d1 умножается на неё со сдвигом,
    частичные произведения накапливаются через add_digits. Вызывающему
    выгоднее передавать более длинный операнд первым.

    Examples:
        >>> multiply_digits("999999999999999999999999999999", "2")
        '1999999999999999999999999999998'
    """
    if is_zero_digits(d1) or is_zero_digits(d2):
        return ZERO_DIGITS

    result = ZERO_DIGITS
    for shift, ch in enumerate(reversed(d2)):
        partial = multiply_by_digit(d1, ord(ch) - _ORD_ZERO, shift)
        result = add_digits(result, partial)
    return result


# =============================================================================
# ДЕЛЕНИЕ СТОЛБИКОМ
# =============================================================================
#
# Пример: 12345 / 67
#          67        1
#          564
#          536       8
#           285
#           268      4
#            17      (остаток)
#
# Кратные делителя (67, 134, ..., 603) считаются заранее; на каждом шаге
# ищется наибольшая цифра, чьё кратное помещается в рабочее значение.


class DivisionResult(NamedTuple):
    """Частное и остаток деления столбиком (оба нормализованы)."""

    quotient: str
    remainder: str


def multiples_table(divisor: str) -> List[str]:
    """Таблица кратных 0·divisor … 9·divisor."""
    return [multiply_by_digit(divisor, digit) for digit in range(RADIX)]


def _fits(multiple: str, working: str) -> bool:
    # сначала длина, затем лексикографически
    if len(multiple) != len(working):
        return len(multiple) < len(working)
    return multiple <= working


def fit_digit(multiples: List[str], working: str) -> int:
    """
    Digit-fit probe: наибольшая цифра q, для которой multiples[q] <= working.

    Линейный перебор от 9 вниз. Возвращает 0, если рабочему значению
    ещё не хватает разрядов.
    """
    if len(multiples[1]) > len(working):
        return 0

    for fit in range(RADIX - 1, 0, -1):
        if _fits(multiples[fit], working):
            return fit
    return 0


def long_division(d1: str, d2: str) -> DivisionResult:
    """
    Усечённое деление столбиком |d1| / |d2|.

    Предусловия: d1 >= d2, d2 != "0" (проверяет вызывающий).

    Цифры делимого обрабатываются слева направо. Ведущие нули частного
    подавляются до появления первой ненулевой цифры. Итоговое рабочее
    значение — остаток.

    Raises:
        DigitInvariantViolation: d2 == "0" или d1 < d2
    """
    if is_zero_digits(d2):
        raise DigitInvariantViolation("long_division: divisor is zero")
    if compare_digits(d1, d2) < 0:
        raise DigitInvariantViolation(
            f"long_division: dividend {d1!r} is smaller than divisor {d2!r}"
        )

    multiples = multiples_table(d2)
    working = ZERO_DIGITS
    quotient: List[str] = []

    for ch in d1:
        working = ch if is_zero_digits(working) else working + ch

        fit = fit_digit(multiples, working)
        if fit == 0:
            if quotient:
                quotient.append("0")
            continue

        # multiples[fit] <= working гарантирован fit_digit
        working = subtract_from_larger(working, multiples[fit])
        quotient.append(chr(fit + _ORD_ZERO))

    return DivisionResult(
        quotient=normalize_digits("".join(quotient)),
        remainder=working,
    )


def divide_digits(d1: str, d2: str, sign: int = 1) -> str:
    """
    Деление столбиком с floor-коррекцией для отрицательного частного.

    Args:
        d1: Делимое (magnitude), d1 >= d2
        d2: Делитель (magnitude), не "0"
        sign: Знак итогового частного (1 или -1)

    Returns:
        Magnitude частного. При sign == -1 и ненулевом остатке magnitude
        увеличивается на единицу (округление к минус бесконечности).

    Examples:
        >>> divide_digits("1000", "3")
        '333'
        >>> divide_digits("1000", "3", sign=-1)
        '334'
    """
    quotient, remainder = long_division(d1, d2)
    if sign == -1 and not is_zero_digits(remainder):
        quotient = add_digits(quotient, ONE_DIGITS)
    return quotient
