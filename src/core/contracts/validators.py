"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- calculator_config.json (конфигурация консоли калькулятора)
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'calculator_config')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Все ошибки валидации, упорядоченные по пути внутри документа."""
        return iter(sorted(self.validator.iter_errors(data), key=lambda e: [str(part) for part in e.path]))

    def violations(self, data: Dict[str, Any]) -> List[str]:
        """
        Сообщения обо всех нарушениях контракта.

        Returns:
            Список строк вида "digit_capacity: 0 is less than the minimum of 1"
            (пустой, если данные валидны)
        """
        messages = []
        for error in self.iter_errors(data):
            location = ".".join(str(part) for part in error.path) or "<root>"
            messages.append(f"{location}: {error.message}")
        return messages


class CalculatorConfigValidator(ContractValidator):
    """Валидатор для calculator_config контракта."""

    def __init__(self):
        super().__init__("calculator_config")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def calculator_config_violations(data: Dict[str, Any]) -> List[str]:
    """Нарушения контракта calculator_config (пустой список, если их нет)."""
    return CalculatorConfigValidator().violations(data)
