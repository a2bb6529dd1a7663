"""
Arithmetic Engine — сложение, умножение, вычитание, сравнение

Все операции работают над BigDecimal на месте (destination мутируется).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Перенос (carry) и заём (borrow) каскадируются вверх по разрядам
2. Перенос никогда не выходит за guard slot: guard накапливает переполнение
3. Сразу после шага, который может увеличить значение, проверяется
   переполнение → IntegerOverflowError
4. Destination и operand могут быть одним и тем же объектом:
   цифры operand копируются до первой записи в destination
"""

from typing import List

from src.core.math.big_decimal import (
    RADIX,
    BigDecimal,
    check_overflow,
    significant_length,
)


# =============================================================================
# CARRY / BORROW
# =============================================================================


def carry_over(value: BigDecimal, position: int) -> None:
    """
    Каскадный перенос начиная с position.

    Пока цифра в текущей позиции >= 10, переносит value // 10 в следующий
    разряд и оставляет value % 10. Guard slot не переносит дальше:
    ненулевой guard означает переполнение.
    """
    while position < value.capacity and value.digits[position] >= RADIX:
        carry, value.digits[position] = divmod(value.digits[position], RADIX)
        position += 1
        value.digits[position] += carry


def _borrow(value: BigDecimal, position: int) -> None:
    # каскадный заём: отрицательная цифра занимает единицу у следующего разряда
    while position < value.capacity and value.digits[position] < 0:
        value.digits[position] += RADIX
        position += 1
        value.digits[position] -= 1


def _accumulate(value: BigDecimal, position: int, amount: int) -> None:
    """Добавление amount в разряд position с последующим переносом."""
    if amount == 0:
        return
    # частичные произведения за guard slot сворачиваются в guard
    position = min(position, value.capacity)
    value.digits[position] += amount
    carry_over(value, position)


# =============================================================================
# COMPARISON
# =============================================================================


def at_least(a: BigDecimal, b: BigDecimal) -> bool:
    """
    Сравнение по модулю: a >= b.

    Сначала сравниваются значимые длины, затем цифры от старшего разряда.
    Равные значения дают True. Операнды не изменяются.
    """
    a_len = significant_length(a)
    b_len = significant_length(b)

    if a_len != b_len:
        return a_len > b_len

    for i in range(a_len - 1, -1, -1):
        if a.digits[i] != b.digits[i]:
            return a.digits[i] > b.digits[i]
    return True


# =============================================================================
# ASSIGNMENT
# =============================================================================


def assign(dest: BigDecimal, src: BigDecimal) -> None:
    """
    Копирование src в dest.

    Сначала проверяется переполнение src (защита от испорченного операнда),
    затем dest обнуляется и в него копируются src.length цифр.

    Raises:
        IntegerOverflowError: Если src переполнен
        ValueError: Если ёмкости dest и src различаются
    """
    if dest.capacity != src.capacity:
        raise ValueError(
            f"capacity mismatch: dest={dest.capacity}, src={src.capacity}"
        )
    check_overflow(src)

    if dest is src:
        return

    dest.clear()
    for i in range(src.length):
        dest.digits[i] = src.digits[i]


# =============================================================================
# ADDITION / SUBTRACTION
# =============================================================================


def add(dest: BigDecimal, addend: BigDecimal) -> None:
    """
    dest = dest + addend.

    Поразрядное сложение по всему окну addend.length с каскадным переносом.
    Неиспользуемые старшие цифры обоих операндов равны нулю
    (гарантируется обнулением при создании).

    Raises:
        IntegerOverflowError: Если результат не помещается в capacity
    """
    check_overflow(addend)
    addend_digits: List[int] = addend.digits[: addend.length]

    for i, digit in enumerate(addend_digits):
        dest.digits[i] += digit
        carry_over(dest, i)

    check_overflow(dest)
    # перенос может выйти на один разряд за прежнюю длину
    dest.length = min(max(dest.length, len(addend_digits)) + 1, dest.capacity)


def subtract(minuend: BigDecimal, subtrahend: BigDecimal) -> None:
    """
    minuend = minuend - subtrahend (только модуль).

    Precondition: minuend >= subtrahend (проверяется вызывающим кодом через
    at_least). При нарушении результат не определён.
    """
    subtrahend_digits: List[int] = subtrahend.digits[: subtrahend.length]

    for i, digit in enumerate(subtrahend_digits):
        minuend.digits[i] -= digit
        _borrow(minuend, i)


# =============================================================================
# MULTIPLICATION
# =============================================================================


def multiply(dest: BigDecimal, other: BigDecimal) -> None:
    """
    dest = dest * other (умножение "в столбик").

    Вычисление идёт в отдельном аккумуляторе полной ёмкости, поэтому
    multiply(x, x) корректен. Для каждой цифры i множителя other и каждой цифры j
    dest произведение добавляется в позицию i + j с каскадным переносом
    (промежуточная сумма может достигать 81 + перенос). После каждой внешней
    итерации проверяется переполнение аккумулятора.

    Raises:
        IntegerOverflowError: Если произведение не помещается в capacity
    """
    check_overflow(other)
    result = BigDecimal.zero(dest.capacity)

    dest_len = significant_length(dest)
    other_len = significant_length(other)

    for i in range(other_len):
        multiplier = other.digits[i]
        for j in range(dest_len):
            _accumulate(result, i + j, dest.digits[j] * multiplier)
        check_overflow(result)

    assign(dest, result)
