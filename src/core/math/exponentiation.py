"""
Exponentiation — возведение в степень повторным умножением

Показатель степени переводится из BigDecimal в машинное целое, после чего
основание умножается на свою копию exponent - 1 раз.

Порядок проверок (фиксирован):
0. Показатель с заполненным guard-разрядом → IntegerOverflowError
1. Основание 0 или 1 → значение не меняется, показатель не вычисляется.
   Следствие: 0^0 == 0, 1^n == 1 для любого n (даже не помещающегося
   в машинное целое).
2. Показатель > EXPONENT_MAX → IntegerOverflowError
3. Показатель == 0 → результат 1
4. Иначе exponent - 1 умножений, каждое с проверкой переполнения
"""

from typing import Final

from src.core.math.arithmetic import assign, multiply
from src.core.math.big_decimal import (
    RADIX,
    BigDecimal,
    IntegerOverflowError,
    check_overflow,
    normalize,
    significant_length,
)

# Максимальный показатель: знаковое 32-битное машинное целое
EXPONENT_MAX: Final[int] = 2**31 - 1


def exponent_to_int(exponent: BigDecimal) -> int:
    """
    Сумма digit[i] * 10^i по значимым цифрам показателя.

    Raises:
        IntegerOverflowError: Если показатель не помещается в машинное целое
    """
    power = 0
    scale = 1
    for i in range(significant_length(exponent)):
        power += exponent.digits[i] * scale
        scale *= RADIX
        if power > EXPONENT_MAX:
            raise IntegerOverflowError()
    return power


def power(dest: BigDecimal, exponent: BigDecimal) -> None:
    """
    dest = dest ** exponent.

    Args:
        dest: Основание, заменяется результатом
        exponent: Показатель (не изменяется; может совпадать с dest)

    Raises:
        IntegerOverflowError: Показатель или результат слишком велик
    """
    check_overflow(exponent)
    normalize(dest)
    if dest.length == 1 and dest.digits[0] <= 1:
        return

    count = exponent_to_int(exponent)

    if count == 0:
        dest.clear()
        dest.digits[0] = 1
        return

    base = BigDecimal.zero(dest.capacity)
    assign(base, dest)

    for _ in range(count - 1):
        multiply(dest, base)
