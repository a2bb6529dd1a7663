"""
CalculatorConfig — Конфигурация консоли калькулятора

Immutable Pydantic модель с параметрами по умолчанию, совпадающими
с классическим поведением калькулятора (500 цифр, строка до 999 символов,
запятая каждые 3 цифры, приглашение "> ").

Конфигурация может быть загружена из JSON файла: файл сначала проверяется
JSON Schema контрактом calculator_config, затем загружается в модель.
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Final

from pydantic import BaseModel, Field, ValidationError

from src.core.contracts import calculator_config_violations
from src.core.math.big_decimal import INTSIZE, PUT_COMMAS

logger = logging.getLogger(__name__)

# Максимальная длина строки ввода
LINELEN: Final[int] = 999

# Приглашение для интерактивного ввода
PROMPT: Final[str] = "> "

FAREWELL: Final[str] = "ta daa!!!"


class ConfigError(Exception):
    """Невалидный или недоступный файл конфигурации."""

    pass


class LogLevel(str, Enum):
    """Уровень логирования"""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class CalculatorConfig(BaseModel):
    """Параметры консоли и движка."""

    schema_version: str = Field("1", description="Версия схемы конфигурации")
    digit_capacity: int = Field(INTSIZE, ge=1, description="Максимум цифр в регистре")
    max_line_length: int = Field(
        LINELEN, ge=3, description="Максимальная длина компактной строки"
    )
    comma_interval: int = Field(PUT_COMMAS, ge=1, description="Интервал между запятыми")
    prompt: str = Field(PROMPT, description="Приглашение (stderr, только терминал)")
    farewell: str = Field(FAREWELL, description="Строка при завершении ввода")
    log_level: LogLevel = Field(LogLevel.WARNING, description="Уровень логирования")

    model_config = {"frozen": True, "extra": "forbid"}


def load_config(path: Path | str | None = None) -> CalculatorConfig:
    """
    Загрузка конфигурации.

    Args:
        path: Путь к JSON файлу; None → конфигурация по умолчанию

    Returns:
        CalculatorConfig

    Raises:
        ConfigError: Файл не читается, не является JSON или нарушает контракт
    """
    if path is None:
        return CalculatorConfig()

    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"config {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"config {path} must contain a JSON object")

    violations = calculator_config_violations(data)
    if violations:
        raise ConfigError(f"config {path} violates contract: {'; '.join(violations)}")

    try:
        config = CalculatorConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"config {path} is invalid: {e}") from e

    logger.debug("Loaded config from %s: %s", path, config)
    return config
