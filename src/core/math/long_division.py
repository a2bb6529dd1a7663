"""
Long Division — целочисленное деление "уголком"

Частное вычисляется по одной цифре, от старшего разряда к младшему,
с помощью сравнения (at_least) и вычитания (subtract).

ИНВАРИАНТЫ ЦИКЛА (cursor — индекс младшей цифры делимого внутри окна):
1. window == dividend // 10^cursor - divisor * (quotient // 10^cursor)
2. Перед подсчётом цифры частного: window < divisor * 10, поэтому цифра в [0, 9]
3. После подсчёта: window < divisor
4. Новая цифра делимого всегда опускается в window.digits[0], остальные
   цифры окна сдвигаются на один разряд вверх
5. Разряды частного, до которых цикл не дошёл, остаются 0
"""

from typing import Final

from src.core.math.arithmetic import assign, at_least, subtract
from src.core.math.big_decimal import (
    BigDecimal,
    FatalArithmeticError,
    check_overflow,
    is_zero,
    normalize,
)

ZERO_DIVISION_MESSAGE: Final[str] = "Zero division error, please try again"


class DivisionByZeroError(FatalArithmeticError):
    """Деление на нормализованный ноль: неустранимое состояние."""

    message = ZERO_DIVISION_MESSAGE


def _drop_digit(window: BigDecimal, digit: int) -> None:
    """Сдвиг окна на разряд вверх и запись digit в разряд единиц."""
    for j in range(window.length, 0, -1):
        window.digits[j] = window.digits[j - 1]
    window.digits[0] = digit
    window.length += 1
    normalize(window)


def divide(dest: BigDecimal, divisor: BigDecimal) -> None:
    """
    dest = dest // divisor (только модуль, усечение).

    Цифры делимого только читаются до финального assign, поэтому
    divide(x, x) корректен.

    Raises:
        DivisionByZeroError: Делитель равен нулю
        IntegerOverflowError: Делитель переполнен

    Examples:
        1001 / 99: окно "10" < 99 → цифра 0 в разряде 2 (не записывается),
        опускаем 0 → "100" → 1 вычитание → цифра 1 в разряде 1,
        опускаем 1 → "11" < 99 → цифра 0 в разряде 0. Частное = 10.
    """
    check_overflow(divisor)
    normalize(dest)
    normalize(divisor)

    if is_zero(divisor):
        raise DivisionByZeroError()

    if not at_least(dest, divisor):
        dest.clear()
        return

    quotient = BigDecimal.zero(dest.capacity)
    window = BigDecimal.zero(dest.capacity)

    # окно = старшие divisor.length цифр делимого
    cursor = dest.length - divisor.length
    for i in range(divisor.length):
        window.digits[i] = dest.digits[cursor + i]
    window.length = divisor.length
    normalize(window)

    while True:
        multiple = 0
        while at_least(window, divisor):
            subtract(window, divisor)
            normalize(window)
            multiple += 1
        quotient.digits[cursor] = multiple

        if cursor == 0:
            break
        cursor -= 1
        _drop_digit(window, dest.digits[cursor])

    assign(dest, quotient)
