"""
Command Parser — разбор компактной строки в Command

Строка уже не содержит пробельных символов. Формат:
    <регистр><оператор>[<литерал из цифр> | <регистр>]

Все ошибки разбора восстановимы: CommandError содержит сообщение для
пользователя, после чего консоль переходит к следующей строке.
"""

from typing import Final

from src.core.domain import ALLOPS, Command, Operator, RegisterId

ERR_INVALID_LHS: Final[str] = "invalid LHS variable"
ERR_NO_OPERATOR: Final[str] = "no operator supplied"
ERR_UNKNOWN_OPERATOR: Final[str] = "unknown operator"
ERR_NO_RHS: Final[str] = "no RHS supplied"
ERR_INVALID_RHS: Final[str] = "RHS argument is invalid"


class CommandError(ValueError):
    """Восстановимая ошибка разбора команды."""

    pass


def parse_command(line: str) -> Command:
    """
    Разбор компактной строки.

    Порядок проверок:
    1. Первый символ — регистр
    2. Есть второй символ
    3. Второй символ — известный оператор
    4. Для всех операторов кроме '?': есть правый операнд,
       и он либо целиком из цифр, либо ровно одна буква регистра

    Args:
        line: Строка без пробелов

    Returns:
        Command

    Raises:
        CommandError: С сообщением для пользователя

    Examples:
        >>> parse_command("a+12").literal
        '12'
        >>> parse_command("b=a").source
        <RegisterId.A: 'a'>
    """
    register = RegisterId.from_letter(line[:1])
    if register is None:
        raise CommandError(ERR_INVALID_LHS)

    if len(line) < 2:
        raise CommandError(ERR_NO_OPERATOR)

    optype = line[1]
    if optype not in ALLOPS:
        raise CommandError(ERR_UNKNOWN_OPERATOR)
    operator = Operator(optype)

    if operator == Operator.PRINT:
        # остаток строки после '?' игнорируется
        return Command(target=register, operator=operator)

    rhs = line[2:]
    if not rhs:
        raise CommandError(ERR_NO_RHS)

    if rhs[0].isdigit():
        if not all("0" <= ch <= "9" for ch in rhs):
            raise CommandError(ERR_INVALID_RHS)
        return Command(target=register, operator=operator, literal=rhs)

    source = RegisterId.from_letter(rhs)
    if source is None:
        raise CommandError(ERR_INVALID_RHS)
    return Command(target=register, operator=operator, source=source)
