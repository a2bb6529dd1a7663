"""
Registers — 26 именованных регистров калькулятора

RegisterId — перечисление идентификаторов 'a'..'z' с валидирующим конструктором.
RegisterStore — фиксированное отображение RegisterId → BigDecimal.

Все регистры обнуляются при создании хранилища; значения мутируются на месте
операциями движка и живут до конца процесса.
"""

from enum import Enum
from typing import Dict, Final, Iterator, Optional

from src.core.math.big_decimal import INTSIZE, BigDecimal

# Количество регистров
NVARS: Final[int] = 26

# Первая буква регистра
CH_A: Final[str] = "a"


class RegisterId(str, Enum):
    """Идентификатор регистра."""

    A = "a"
    B = "b"
    C = "c"
    D = "d"
    E = "e"
    F = "f"
    G = "g"
    H = "h"
    I = "i"
    J = "j"
    K = "k"
    L = "l"
    M = "m"
    N = "n"
    O = "o"
    P = "p"
    Q = "q"
    R = "r"
    S = "s"
    T = "t"
    U = "u"
    V = "v"
    W = "w"
    X = "x"
    Y = "y"
    Z = "z"

    @classmethod
    def from_letter(cls, ch: str) -> Optional["RegisterId"]:
        """
        Идентификатор регистра по букве.

        Args:
            ch: Один символ

        Returns:
            RegisterId или None, если символ не является буквой 'a'..'z'

        Examples:
            >>> RegisterId.from_letter("c")
            <RegisterId.C: 'c'>
            >>> RegisterId.from_letter("A") is None
            True
        """
        try:
            return cls(ch)
        except ValueError:
            return None

    @property
    def index(self) -> int:
        """Порядковый номер регистра (0..25)."""
        return ord(self.value) - ord(CH_A)


class RegisterStore:
    """
    Хранилище 26 регистров.

    Владелец — Dispatcher. Значения передаются в движок по ссылке.
    """

    def __init__(self, capacity: int = INTSIZE):
        """
        Args:
            capacity: ёмкость (количество цифр) каждого регистра
        """
        self.capacity = capacity
        self._values: Dict[RegisterId, BigDecimal] = {}
        self.reset()

    def reset(self) -> None:
        """Обнуление всех регистров."""
        self._values = {reg: BigDecimal.zero(self.capacity) for reg in RegisterId}

    def __getitem__(self, reg: RegisterId) -> BigDecimal:
        return self._values[reg]

    def __iter__(self) -> Iterator[RegisterId]:
        return iter(RegisterId)

    def __len__(self) -> int:
        return len(self._values)

    def snapshot(self, reg: RegisterId) -> BigDecimal:
        """Независимая копия значения регистра (для использования как операнд)."""
        return self._values[reg].copy()
