"""
Dispatcher — исполнение команд над регистрами

Dispatcher владеет RegisterStore, превращает правый операнд команды
в BigDecimal и вызывает ровно одну операцию движка на целевом регистре.

Правый операнд-регистр копируется до начала операции, поэтому
операнд не меняется, даже если совпадает с целевым регистром.

Фатальные состояния движка (FatalArithmeticError) не перехватываются:
они поднимаются до консоли, которая завершает процесс.
"""

import logging
from typing import Callable, Dict, Final, Optional

from src.core.domain import Command, Operator, RegisterId, RegisterStore
from src.core.math import (
    INTSIZE,
    PUT_COMMAS,
    BigDecimal,
    add,
    assign,
    check_overflow,
    divide,
    format_digits,
    multiply,
    parse,
    power,
)

logger = logging.getLogger(__name__)

PRINT_FORMAT: Final[str] = "register {name}: {value}"

# Бинарные операции движка: (destination, operand) → None
_OPERATIONS: Dict[Operator, Callable[[BigDecimal, BigDecimal], None]] = {
    Operator.ASSIGN: assign,
    Operator.PLUS: add,
    Operator.MULT: multiply,
    Operator.POWER: power,
    Operator.DIVIDE: divide,
}


class Dispatcher:
    """
    Исполнитель команд калькулятора.

    Args:
        capacity: ёмкость регистров (количество цифр)
        comma_interval: интервал между запятыми при печати
    """

    def __init__(self, capacity: int = INTSIZE, comma_interval: int = PUT_COMMAS):
        self.registers = RegisterStore(capacity)
        self.comma_interval = comma_interval

    def operand(self, command: Command) -> BigDecimal:
        """
        Правый операнд команды как независимый BigDecimal.

        Raises:
            ValueError: Команда печати не имеет правого операнда
            IntegerOverflowError: Литерал длиннее ёмкости регистра
        """
        if command.literal is not None:
            value = parse(command.literal, self.registers.capacity)
        elif command.source is not None:
            value = self.registers.snapshot(command.source)
        else:
            raise ValueError(f"command {command.text!r} has no right-hand operand")
        check_overflow(value)
        return value

    def execute(self, command: Command) -> Optional[str]:
        """
        Исполнение одной команды.

        Returns:
            Строка для вывода (для '?') или None

        Raises:
            FatalArithmeticError: Переполнение или деление на ноль
        """
        logger.debug("Executing %s", command.text)

        if command.operator == Operator.PRINT:
            return self.render(command.target)

        second_value = self.operand(command)
        _OPERATIONS[command.operator](self.registers[command.target], second_value)
        return None

    def render(self, reg: RegisterId) -> str:
        """Строка печати регистра: 'register a: 1,234'."""
        value = format_digits(self.registers[reg], self.comma_interval)
        return PRINT_FORMAT.format(name=reg.value, value=value)

