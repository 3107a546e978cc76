"""
Тесты для BigInt — знаковое целое произвольной точности

Проверяемые инварианты:
1. Канонический ноль: отрицательного нуля нет ни на одном пути
2. Сложение/вычитание с разными знаками
3. Floor division и modulo как в Python
4. DivisionByZeroError для // и %
5. Полный порядок и равенство (в т.ч. с int)
6. Сужение к int32/int64/float с OutOfRangeError
7. Неизменяемость значений
"""

import io

import pytest

from src.core.math.bigint import (
    BigInt,
    BigIntReadResult,
    DivisionByZeroError,
    read_bigint,
    write_bigint,
)
from src.core.math.decimal_text import InvalidFormatError
from src.core.math.narrowing import INT8, UINT8, OutOfRangeError


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def huge():
    """30 девяток."""
    return BigInt("9" * 30)


# =============================================================================
# ТЕСТЫ: Создание
# =============================================================================


class TestConstruction:
    """Тесты конструкторов."""

    def test_default_is_zero(self):
        zero = BigInt()
        assert zero.sign == 1
        assert zero.magnitude == "0"

    def test_from_int(self):
        assert BigInt(-42).sign == -1
        assert BigInt(-42).magnitude == "42"
        assert BigInt(0).sign == 1

    def test_from_huge_int(self):
        value = 2**200
        assert str(BigInt(value)) == str(value)

    def test_from_string(self):
        assert str(BigInt("12345")) == "12345"
        assert str(BigInt("+0012")) == "12"
        assert str(BigInt("-0012")) == "-12"

    def test_negative_zero_string_is_zero(self):
        zero = BigInt("-000")
        assert str(zero) == "0"
        assert zero.sign == 1

    @pytest.mark.parametrize("text", ["", "-", "+", "1 2", "12a", "--5"])
    def test_invalid_string(self, text):
        with pytest.raises(InvalidFormatError):
            BigInt(text)

    def test_copy_is_equal(self):
        original = BigInt("-987")
        copy = BigInt(original)
        assert copy == original
        assert copy.magnitude == original.magnitude

    def test_from_float_truncates_toward_zero(self):
        assert BigInt(3.99) == 3
        assert BigInt(-3.99) == -3
        assert BigInt.from_float(-0.5).sign == 1

    def test_from_float_non_finite(self):
        with pytest.raises(ValueError):
            BigInt(float("nan"))
        with pytest.raises(ValueError):
            BigInt.from_float(float("inf"))

    def test_from_float_out_of_int64_range(self):
        with pytest.raises(OutOfRangeError):
            BigInt(1e30)

    def test_bool_rejected(self):
        with pytest.raises(TypeError):
            BigInt(True)

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            BigInt([1, 2])  # type: ignore[arg-type]


# =============================================================================
# ТЕСТЫ: Сложение и вычитание
# =============================================================================


class TestAddSubtract:
    """Тесты + и -."""

    def test_concrete_sum(self):
        assert str(BigInt("12345") + BigInt("67")) == "12412"

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (5, 3, 8),
            (-5, -3, -8),
            (5, -3, 2),
            (-5, 3, -2),
            (3, -5, -2),
            (-3, 5, 2),
            (5, -5, 0),
            (-5, 5, 0),
        ],
    )
    def test_sign_dispatch_add(self, a, b, expected):
        assert BigInt(a) + BigInt(b) == expected

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (5, 3, 2),
            (3, 5, -2),
            (-5, -3, -2),
            (-3, -5, 2),
            (5, -3, 8),
            (-5, 3, -8),
            (-5, -5, 0),
        ],
    )
    def test_sign_dispatch_subtract(self, a, b, expected):
        assert BigInt(a) - BigInt(b) == expected

    def test_cancellation_gives_positive_zero(self):
        result = BigInt("-123456789") + BigInt("123456789")
        assert result.sign == 1
        assert str(result) == "0"

        result = BigInt("-5") - BigInt("-5")
        assert result.sign == 1

    def test_mixed_int_operands(self):
        assert BigInt(10) + 5 == 15
        assert 5 + BigInt(10) == 15
        assert BigInt(10) - 15 == -5
        assert 15 - BigInt(10) == 5

    def test_augmented_assignment_rebinds(self):
        a = BigInt(1)
        alias = a
        a += 1
        assert a == 2
        assert alias == 1

    def test_increment_decrement(self):
        assert BigInt(-1).increment() == 0
        assert BigInt(0).decrement() == -1
        assert BigInt("999").increment() == BigInt("1000")


# =============================================================================
# ТЕСТЫ: Умножение
# =============================================================================


class TestMultiply:
    """Тесты *."""

    def test_concrete_product(self, huge):
        assert str(huge * BigInt("2")) == "1999999999999999999999999999998"

    def test_signs(self):
        assert BigInt(-4) * BigInt(3) == -12
        assert BigInt(-4) * BigInt(-3) == 12

    def test_multiply_by_zero_is_positive_zero(self):
        result = BigInt(-4) * BigInt(0)
        assert result.sign == 1
        assert str(result) == "0"

    def test_square_of_huge(self, huge):
        expected = "9" * 29 + "8" + "0" * 29 + "1"
        assert str(huge * huge) == expected

    def test_mixed_int_operands(self):
        assert 3 * BigInt(-7) == -21
        assert BigInt(-7) * 3 == -21


# =============================================================================
# ТЕСТЫ: Floor division и modulo
# =============================================================================


class TestFloorDivision:
    """Тесты //."""

    def test_positive(self):
        assert str(BigInt("1000") // BigInt("3")) == "333"

    def test_negative_dividend(self):
        assert str(BigInt("-1000") // BigInt("3")) == "-334"

    @pytest.mark.parametrize(
        "a, b",
        [
            (7, 2), (-7, 2), (7, -2), (-7, -2),
            (1, 3), (-1, 3), (1, -3), (-1, -3),
            (6, 3), (-6, 3), (6, -3), (-6, -3),
            (3, 3), (-3, 3), (0, 5), (0, -5),
        ],
    )
    def test_matches_python(self, a, b):
        assert BigInt(a) // BigInt(b) == a // b

    def test_zero_dividend_unchanged(self):
        result = BigInt(0) // BigInt(-5)
        assert result.sign == 1
        assert str(result) == "0"

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZeroError, match="division by zero"):
            BigInt(5) // BigInt(0)

    def test_division_by_zero_is_zero_division_error(self):
        with pytest.raises(ZeroDivisionError):
            BigInt(0) // 0

    def test_rfloordiv(self):
        assert 100 // BigInt(7) == 14


class TestModulo:
    """Тесты %."""

    def test_positive(self):
        assert str(BigInt("1000") % BigInt("3")) == "1"

    def test_negative_dividend(self):
        assert str(BigInt("-1000") % BigInt("3")) == "2"

    @pytest.mark.parametrize(
        "a, b",
        [
            (7, 2), (-7, 2), (7, -2), (-7, -2),
            (1, 3), (-1, 3), (1, -3), (-1, -3),
            (6, 3), (-6, 3), (6, -3), (-6, -3),
            (3, 3), (-3, 3), (0, 5), (0, -5),
            (1000, 7), (-1000, -7), (12345, -67),
        ],
    )
    def test_matches_python(self, a, b):
        assert BigInt(a) % BigInt(b) == a % b

    def test_exact_is_positive_zero(self):
        result = BigInt(-9) % BigInt(3)
        assert result.sign == 1

        result = BigInt(-3) % BigInt(3)
        assert result.sign == 1

    def test_modulo_by_zero(self):
        with pytest.raises(DivisionByZeroError, match="modulo by zero"):
            BigInt(5) % BigInt(0)

    def test_divmod(self):
        q, r = divmod(BigInt(-1000), BigInt(3))
        assert (q, r) == (BigInt(-334), BigInt(2))
        assert divmod(-1000, BigInt(3)) == (BigInt(-334), BigInt(2))

    def test_floor_identity_large(self):
        a = BigInt("-123456789012345678901234567890")
        b = BigInt("9876543210")
        assert (a // b) * b + (a % b) == a
        assert (a % b).sign == 1


# =============================================================================
# ТЕСТЫ: Унарные операции
# =============================================================================


class TestUnary:
    """Тесты -x, +x, abs(x), bool(x)."""

    def test_negation(self):
        assert -BigInt(5) == -5
        assert -BigInt(-5) == 5

    def test_negating_zero_stays_positive(self):
        assert (-BigInt(0)).sign == 1

    def test_abs(self):
        assert abs(BigInt(-17)) == 17

    def test_pos(self):
        value = BigInt(-3)
        assert +value is value

    def test_bool(self):
        assert not BigInt(0)
        assert BigInt(-1)


# =============================================================================
# ТЕСТЫ: Сравнение
# =============================================================================


class TestComparison:
    """Тесты compare/equals и операторов сравнения."""

    def test_sign_dominates(self):
        assert BigInt(-1000).compare(BigInt(1)) == -1
        assert BigInt(1).compare(BigInt(-1000)) == 1

    def test_negative_larger_magnitude_is_smaller(self):
        assert BigInt(-1000).compare(BigInt(-1)) == -1
        assert BigInt(-1).compare(BigInt(-1000)) == 1

    def test_equal(self):
        assert BigInt("007").compare(BigInt(7)) == 0
        assert BigInt("007").equals(BigInt(7))

    def test_operators(self):
        assert BigInt(1) < BigInt(2) <= BigInt(2) < BigInt(10)
        assert BigInt(-1) > BigInt(-2) >= BigInt(-2)
        assert BigInt(3) != BigInt(-3)

    def test_compare_with_int(self):
        assert BigInt(5) == 5
        assert 5 == BigInt(5)
        assert BigInt(5) < 6
        assert 4 < BigInt(5)

    def test_compare_with_unsupported_type(self):
        assert BigInt(5) != "5"
        with pytest.raises(TypeError):
            BigInt(5) < "6"
        with pytest.raises(TypeError):
            BigInt(5).compare("6")  # type: ignore[arg-type]

    def test_sorting(self):
        values = [BigInt(v) for v in ["10", "-3", "0", "-100", "7"]]
        assert [str(v) for v in sorted(values)] == ["-100", "-3", "0", "7", "10"]

    def test_hash_consistent_with_int(self):
        for value in [0, 1, -1, -2, 12345, -(2**100), 2**61 - 1, 2**61]:
            assert hash(BigInt(value)) == hash(value)

    def test_usable_as_dict_key(self):
        table = {BigInt("-0"): "zero", BigInt(10): "ten"}
        assert table[BigInt(0)] == "zero"
        assert table[10] == "ten"

    def test_equal_to_integral_float(self):
        assert BigInt(3) == 3.0
        assert 3.0 == BigInt(3)
        assert BigInt(-7) == -7.0
        assert BigInt(3) != 3.5
        assert BigInt(0) != float("nan")
        assert BigInt(0) != float("inf")

    def test_float_key_lookup(self):
        """Равные значения int, float и BigInt — один ключ dict."""
        assert {3.0: "x"}[BigInt(3)] == "x"
        assert {BigInt(3): "y"}[3.0] == "y"


# =============================================================================
# ТЕСТЫ: Сужение
# =============================================================================


class TestNarrowing:
    """Тесты narrow/to_int32/to_int64/to_float."""

    def test_to_int64_overflow(self):
        with pytest.raises(OutOfRangeError):
            BigInt("99999999999999999999999999").to_int64()

    def test_to_int64_limits(self):
        assert BigInt("9223372036854775807").to_int64() == 2**63 - 1
        assert BigInt("-9223372036854775808").to_int64() == -(2**63)

    def test_to_int32(self):
        assert BigInt(-2147483648).to_int32() == -2147483648
        with pytest.raises(OutOfRangeError):
            BigInt(2147483648).to_int32()

    def test_narrow_custom_width(self):
        assert BigInt(-128).narrow(INT8) == -128
        with pytest.raises(OutOfRangeError):
            BigInt(-1).narrow(UINT8)

    def test_builtin_conversions(self):
        assert int(BigInt("-42")) == -42
        assert float(BigInt("12345")) == 12345.0
        with pytest.raises(OverflowError):
            float(BigInt("1" + "0" * 30))


# =============================================================================
# ТЕСТЫ: Текст и потоки
# =============================================================================


class TestText:
    """Тесты str/repr/format и потокового ввода-вывода."""

    def test_repr(self):
        assert repr(BigInt(-5)) == "BigInt('-5')"

    def test_format_spec_padding(self):
        assert f"{BigInt(-42):>6}" == "   -42"
        assert f"{BigInt(7):<3}|" == "7  |"

    def test_read_bigint(self):
        stream = io.StringIO("12345 -67 x")
        first = read_bigint(stream)
        second = read_bigint(stream)
        third = read_bigint(stream)
        assert first.ok and first.value == BigInt(12345)
        assert second.ok and second.value == BigInt(-67)
        assert not third.ok
        assert third.value is None

    def test_read_bigint_result_types(self):
        result = read_bigint(io.StringIO("-42"))
        assert isinstance(result, BigIntReadResult)
        assert isinstance(result.value, BigInt)
        assert result.token == "-42"

    def test_read_bigint_leaves_rest_of_line(self):
        """После чтения числа остаток строки доступен через readline."""
        stream = io.StringIO("12\nrest")
        assert read_bigint(stream).value == BigInt(12)
        assert stream.read() == "\nrest"

    def test_read_then_readline(self):
        stream = io.StringIO("7 apples\nnext")
        assert read_bigint(stream).value == BigInt(7)
        assert stream.readline() == " apples\n"
        assert stream.readline() == "next"

    def test_write_bigint(self):
        stream = io.StringIO()
        write_bigint(stream, BigInt("-000"))
        stream.write(" ")
        write_bigint(stream, BigInt("-0012"))
        assert stream.getvalue() == "0 -12"


# =============================================================================
# ТЕСТЫ: Неизменяемость
# =============================================================================


class TestImmutability:
    """BigInt не имеет атрибутов кроме __slots__ и не меняется операциями."""

    def test_no_dynamic_attributes(self):
        with pytest.raises(AttributeError):
            BigInt(1).extra = 5  # type: ignore[attr-defined]

    def test_operands_unchanged(self):
        a = BigInt(-1000)
        b = BigInt(3)
        _ = a // b, a % b, a * b, a + b, a - b
        assert str(a) == "-1000"
        assert str(b) == "3"
