"""
BigDecimal — Десятичное целое произвольной точности

Значение хранится как массив десятичных цифр фиксированной ёмкости,
младший разряд первым (индекс 0 = единицы), плюс логическая длина.

Модуль содержит:
- Тип значения BigDecimal и его создание (zero, parse)
- Normalizer: significant_length / normalize / is_overflowed
- Форматирование с разделителями разрядов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Массив цифр никогда не меняет размер: capacity + 1 слотов
2. Слот с индексом capacity (guard slot) используется только для детекции
   переполнения: guard != 0 ⇔ переполнение
3. Любая цифра, возвращаемая вызывающему коду, лежит в [0, 9]
4. length не обязан быть минимальным; significant length вычисляется по запросу
"""

from dataclasses import dataclass, field
from typing import Final, List

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Максимальное количество цифр в значении
INTSIZE: Final[int] = 500

# Основание системы счисления
RADIX: Final[int] = 10

# Интервал между запятыми при выводе
PUT_COMMAS: Final[int] = 3

CH_COMMA: Final[str] = ","

OVERFLOW_MESSAGE: Final[str] = "Integer overflow, program terminated"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FatalArithmeticError(Exception):
    """
    Неустранимое состояние арифметического движка.

    Движок не имеет представления для "слишком большого" или "неопределённого"
    значения, поэтому такие состояния не возвращаются как коды ошибок,
    а поднимаются до единственного top-level драйвера, который завершает процесс.
    """

    message: str = "Fatal arithmetic condition"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class IntegerOverflowError(FatalArithmeticError):
    """Значение не помещается в capacity цифр (guard slot ненулевой)."""

    message = OVERFLOW_MESSAGE


# =============================================================================
# BIG DECIMAL
# =============================================================================


@dataclass(eq=False)
class BigDecimal:
    """
    Неотрицательное целое в виде массива десятичных цифр.

    Attributes:
        digits: capacity + 1 цифр, младший разряд первым; последний слот — guard
        length: количество слотов, считающихся значимыми (1..capacity)
        capacity: максимальное количество цифр значения
    """

    digits: List[int] = field(default_factory=lambda: [0] * (INTSIZE + 1))
    length: int = INTSIZE
    capacity: int = INTSIZE

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError(f"capacity must be positive, got {self.capacity}")
        if len(self.digits) != self.capacity + 1:
            raise ValueError(
                f"digits must hold capacity + 1 = {self.capacity + 1} slots, "
                f"got {len(self.digits)}"
            )
        if not 1 <= self.length <= self.capacity:
            raise ValueError(f"length must be in [1, {self.capacity}], got {self.length}")

    @classmethod
    def zero(cls, capacity: int = INTSIZE) -> "BigDecimal":
        """Нулевое значение: все цифры 0, length = capacity."""
        return cls(digits=[0] * (capacity + 1), length=capacity, capacity=capacity)

    @property
    def guard(self) -> int:
        return self.digits[self.capacity]

    def clear(self) -> None:
        """Обнуление на месте (initialise)."""
        for i in range(self.capacity + 1):
            self.digits[i] = 0
        self.length = self.capacity

    def copy(self) -> "BigDecimal":
        return BigDecimal(digits=list(self.digits), length=self.length, capacity=self.capacity)

    def to_int(self) -> int:
        """
        Конверсия в int Python (значимые цифры, guard не учитывается).

        Используется для диагностики и в тестах для сверки с эталоном.
        """
        value = 0
        for i in range(significant_length(self) - 1, -1, -1):
            value = value * RADIX + self.digits[i]
        return value

    def __str__(self) -> str:
        return format_digits(self)

    def __repr__(self) -> str:
        return f"BigDecimal({format_digits(self)!r}, capacity={self.capacity})"


# =============================================================================
# PARSING
# =============================================================================


def parse(text: str, capacity: int = INTSIZE) -> BigDecimal:
    """
    Построение BigDecimal из строки цифр.

    Строка уже проверена вызывающим кодом (только '0'..'9', не пустая).
    Цифра с индексом i = символ с позиции len - 1 - i.

    Литерал из capacity + 1 значимых цифр кладёт старшую цифру в guard slot:
    переполнение будет обнаружено при следующей проверке (например, в assign).
    Лишние старшие нули длинного литерала отбрасываются.

    Args:
        text: Строка десятичных цифр
        capacity: Ёмкость результата

    Returns:
        BigDecimal с length = min(len(text), capacity)

    Raises:
        IntegerOverflowError: Ненулевая цифра за пределами guard slot

    Examples:
        >>> parse("1234").digits[:4]
        [4, 3, 2, 1]
    """
    excess = len(text) - (capacity + 1)
    if excess > 0:
        if text[:excess].strip("0"):
            raise IntegerOverflowError()
        text = text[excess:]

    value = BigDecimal.zero(capacity)
    count = len(text)
    for i in range(count):
        value.digits[i] = ord(text[count - 1 - i]) - ord("0")
    value.length = min(count, capacity)
    return value


# =============================================================================
# NORMALIZER
# =============================================================================


def significant_length(value: BigDecimal) -> int:
    """
    Длина значения без старших нулей.

    Начиная с value.length, уменьшает длину, пока старшая цифра равна 0
    и остаётся больше одной цифры. Нулевое значение имеет длину 1.

    Массив цифр и value.length не изменяются.
    """
    length = value.length
    while length > 1 and value.digits[length - 1] == 0:
        length -= 1
    return length


def normalize(value: BigDecimal) -> None:
    """Присваивает value.length значимую длину (цифры не трогаются)."""
    value.length = significant_length(value)


def is_overflowed(value: BigDecimal) -> bool:
    """True если guard slot ненулевой."""
    return value.digits[value.capacity] != 0


def check_overflow(value: BigDecimal) -> None:
    """
    Проверка переполнения после операции, которая может увеличить значение.

    Raises:
        IntegerOverflowError: Если guard slot ненулевой
    """
    if is_overflowed(value):
        raise IntegerOverflowError()


def is_zero(value: BigDecimal) -> bool:
    return significant_length(value) == 1 and value.digits[0] == 0


# =============================================================================
# FORMATTING
# =============================================================================


def format_digits(value: BigDecimal, group: int = PUT_COMMAS) -> str:
    """
    Значимые цифры, старший разряд первым, запятая каждые group цифр,
    считая от разряда единиц.

    Args:
        value: Форматируемое значение (не изменяется)
        group: Интервал между запятыми

    Returns:
        Строка вида "1,234,567"

    Examples:
        >>> format_digits(parse("1234567"))
        '1,234,567'
        >>> format_digits(parse("000"))
        '0'
    """
    if group < 1:
        raise ValueError(f"group must be positive, got {group}")

    parts: List[str] = []
    for i in range(significant_length(value) - 1, -1, -1):
        parts.append(str(value.digits[i]))
        if i > 0 and i % group == 0:
            parts.append(CH_COMMA)
    return "".join(parts)
