"""
Тесты для Exponentiation

Проверяет:
1. Перевод показателя в машинное целое и его границу
2. Порядок специальных случаев: основание 0/1 проверяется раньше показателя 0
3. Повторное умножение и переполнение результата
"""

import pytest

from src.core.math.big_decimal import (
    INTSIZE,
    BigDecimal,
    IntegerOverflowError,
    format_digits,
    parse,
)
from src.core.math.exponentiation import EXPONENT_MAX, exponent_to_int, power


def value(n: int) -> BigDecimal:
    return parse(str(n))


class TestExponentToInt:
    """Тесты для exponent_to_int"""

    def test_small(self) -> None:
        assert exponent_to_int(value(0)) == 0
        assert exponent_to_int(value(1234)) == 1234

    def test_leading_zeros(self) -> None:
        assert exponent_to_int(parse("0003")) == 3

    def test_full_length_zero(self) -> None:
        assert exponent_to_int(BigDecimal.zero()) == 0

    def test_machine_integer_limit(self) -> None:
        """Ровно EXPONENT_MAX допустим, EXPONENT_MAX + 1 — переполнение"""
        assert exponent_to_int(value(EXPONENT_MAX)) == EXPONENT_MAX
        with pytest.raises(IntegerOverflowError):
            exponent_to_int(value(EXPONENT_MAX + 1))

    def test_huge_exponent_raises(self) -> None:
        with pytest.raises(IntegerOverflowError):
            exponent_to_int(parse("9" * 50))


class TestPower:
    """Тесты для power"""

    @pytest.mark.parametrize(
        "base,exponent",
        [(2, 10), (3, 5), (10, 1), (7, 2), (12, 12), (99, 3)],
    )
    def test_matches_builtin(self, base: int, exponent: int) -> None:
        dest = value(base)
        power(dest, value(exponent))
        assert dest.to_int() == base**exponent

    def test_exponent_zero_gives_one(self) -> None:
        dest = value(12345)
        power(dest, value(0))
        assert dest.to_int() == 1

    def test_zero_to_zero_stays_zero(self) -> None:
        """Основание 0 проверяется раньше показателя 0: 0^0 == 0"""
        dest = value(0)
        power(dest, value(0))
        assert dest.to_int() == 0

    def test_zero_base(self) -> None:
        dest = value(0)
        power(dest, value(5))
        assert dest.to_int() == 0

    def test_one_base_ignores_huge_exponent(self) -> None:
        """1^n == 1 даже для показателя, не помещающегося в машинное целое"""
        dest = parse("0001")
        power(dest, parse("9" * 50))
        assert dest.to_int() == 1

    def test_huge_exponent_with_base_two_raises(self) -> None:
        dest = value(2)
        with pytest.raises(IntegerOverflowError):
            power(dest, parse("9" * 50))

    def test_aliasing(self) -> None:
        """power(x, x): показатель читается до изменения основания"""
        v = value(3)
        power(v, v)
        assert v.to_int() == 27

    def test_exponent_unchanged(self) -> None:
        exponent = value(4)
        power(value(5), exponent)
        assert exponent.to_int() == 4

    def test_fifty_nines_squared(self) -> None:
        n = int("9" * 50)
        dest = value(n)
        power(dest, value(2))
        assert dest.to_int() == n * n
        assert format_digits(dest) == f"{n * n:,}"

    def test_largest_power_of_two_fits(self) -> None:
        """2^1660 имеет 500 цифр, 2^1661 — 501"""
        dest = value(2)
        power(dest, value(1660))
        assert dest.to_int() == 2**1660
        assert len(str(2**1660)) == INTSIZE

    def test_result_overflow_raises(self) -> None:
        dest = value(2)
        with pytest.raises(IntegerOverflowError, match="Integer overflow"):
            power(dest, value(1661))

    @pytest.mark.parametrize("base", [0, 1, 7])
    def test_overflowed_exponent_raises(self, base: int) -> None:
        """Переполненный показатель фатален даже для основания 0 и 1"""
        dest = value(base)
        with pytest.raises(IntegerOverflowError):
            power(dest, parse("1" + "0" * INTSIZE))
