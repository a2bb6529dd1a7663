"""
Console — построчный REPL калькулятора

Отвечает за всё, что связано с вводом-выводом:
- Чтение строки и удаление всех пробельных символов
- Приглашение (stderr, только если stdin — терминал)
- Эхо команды в stdout, если ввод или вывод перенаправлен (режим протокола)
- Маршрутизация сообщений об ошибках в stderr и/или stdout
- Финальная строка "ta daa!!!"
- Обработка фатальных состояний движка: сообщение + код возврата 1

Определение терминала внедряется через stdin_isatty / stdout_isatty,
что позволяет тестировать все режимы на io.StringIO.
"""

import argparse
import logging
import sys
from typing import Final, List, Optional, TextIO

from src.calculator.command_parser import CommandError, parse_command
from src.calculator.config import (
    LINELEN,
    CalculatorConfig,
    ConfigError,
    LogLevel,
    load_config,
)
from src.calculator.dispatcher import Dispatcher
from src.core.math import FatalArithmeticError

logger = logging.getLogger(__name__)

EXIT_SUCCESS: Final[int] = 0
EXIT_FAILURE: Final[int] = 1
EXIT_CONFIG_ERROR: Final[int] = 2


def read_line(stream: TextIO, max_length: int = LINELEN) -> Optional[str]:
    """
    Чтение одной строки без пробельных символов.

    Символы сверх max_length отбрасываются (строка при этом дочитывается
    до конца).

    Returns:
        Компактная строка (возможно пустая) или None, если ввод исчерпан.
        Последняя строка без перевода строки, состоящая только из пробелов,
        тоже считается концом ввода.

    Examples:
        >>> import io
        >>> read_line(io.StringIO(" a = 1 2\\n"))
        'a=12'
        >>> read_line(io.StringIO("")) is None
        True
    """
    raw = stream.readline()
    if raw == "":
        return None
    line = "".join(ch for ch in raw if not ch.isspace())[:max_length]
    if not line and not raw.endswith("\n"):
        return None
    return line


class Console:
    """
    REPL: читает команды из stdin, исполняет их, печатает результаты.

    Args:
        config: конфигурация консоли
        stdin / stdout / stderr: потоки (по умолчанию sys.*)
        stdin_isatty / stdout_isatty: переопределение детекции терминала
    """

    def __init__(
        self,
        config: Optional[CalculatorConfig] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        stdin_isatty: Optional[bool] = None,
        stdout_isatty: Optional[bool] = None,
    ):
        self.config = config or CalculatorConfig()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.stdin_isatty = self.stdin.isatty() if stdin_isatty is None else stdin_isatty
        self.stdout_isatty = (
            self.stdout.isatty() if stdout_isatty is None else stdout_isatty
        )
        self.dispatcher = Dispatcher(
            capacity=self.config.digit_capacity,
            comma_interval=self.config.comma_interval,
        )

    @property
    def transcript_mode(self) -> bool:
        """Ввод или вывод перенаправлен: команды дублируются в stdout."""
        return not self.stdin_isatty or not self.stdout_isatty

    # -------------------------------------------------------------------------
    # Вывод
    # -------------------------------------------------------------------------

    def print_prompt(self) -> None:
        if self.stdin_isatty:
            self.stderr.write(self.config.prompt)
            self.stderr.flush()

    def print_error(self, message: str) -> None:
        """Сообщение об ошибке: stderr при терминале, stdout при перенаправлении."""
        if self.stdin_isatty or self.stdout_isatty:
            self.stderr.write(f"{message}\n")
            self.stderr.flush()
        if not self.stdout_isatty:
            self.stdout.write(f"{message}\n")

    def print_farewell(self) -> None:
        if self.stdin_isatty and self.stdout_isatty:
            self.stdout.write("\n")
        self.stdout.write(f"{self.config.farewell}\n")
        if self.stdin_isatty and not self.stdout_isatty:
            self.stderr.write("\n")

    # -------------------------------------------------------------------------
    # Цикл
    # -------------------------------------------------------------------------

    def next_line(self) -> Optional[str]:
        """Чтение строки с эхом в режиме протокола."""
        line = read_line(self.stdin, self.config.max_line_length)
        if self.transcript_mode:
            self.stdout.write(f"{self.config.prompt}{line or ''}\n")
        return line

    def process_line(self, line: str) -> None:
        """
        Разбор и исполнение одной непустой строки.

        Raises:
            FatalArithmeticError: Переполнение или деление на ноль
        """
        try:
            command = parse_command(line)
        except CommandError as e:
            logger.debug("Rejected %r: %s", line, e)
            self.print_error(str(e))
            return

        output = self.dispatcher.execute(command)
        if output is not None:
            self.stdout.write(f"{output}\n")

    def run(self) -> int:
        """
        Основной цикл до конца ввода.

        Returns:
            Код возврата процесса: 0 или 1 (фатальное состояние)
        """
        self.print_prompt()
        try:
            while True:
                line = self.next_line()
                if line is None:
                    break
                if line:
                    self.process_line(line)
                self.print_prompt()
        except FatalArithmeticError as e:
            logger.debug("Fatal condition: %s", type(e).__name__)
            self.print_error(str(e))
            self.stdout.flush()
            return EXIT_FAILURE

        self.print_farewell()
        self.stdout.flush()
        return EXIT_SUCCESS


# =============================================================================
# ENTRY POINT
# =============================================================================


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="regcalc",
        description="Register calculator over arbitrary-precision decimal integers",
    )
    parser.add_argument("--config", type=str, help="path to a JSON config file")
    parser.add_argument(
        "--debug", action="store_true", help="trace executed commands to stderr"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        sys.stderr.write(f"regcalc: {e}\n")
        return EXIT_CONFIG_ERROR

    level = LogLevel.DEBUG if args.debug else config.log_level
    logging.basicConfig(
        level=level.value,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    return Console(config).run()
