"""Calculator — консоль, разбор команд и исполнение над регистрами.

- Console: построчный REPL (prompt / echo / error routing)
- Command parser: компактная строка → Command
- Dispatcher: Command → операция движка над RegisterStore
"""

from .command_parser import CommandError, parse_command
from .config import CalculatorConfig, ConfigError, load_config
from .console import Console, main, read_line
from .dispatcher import Dispatcher

__all__ = [
    "CalculatorConfig",
    "ConfigError",
    "load_config",
    "CommandError",
    "parse_command",
    "Dispatcher",
    "Console",
    "read_line",
    "main",
]
