"""
Tests for CalculatorConfig and JSON Schema contract

Покрывает:
- Значения по умолчанию
- Валидность самой схемы
- Загрузку файла и отклонение нарушений контракта
- Immutability модели
"""

import json

import pytest
from pydantic import ValidationError as PydanticValidationError

from src.calculator.config import (
    FAREWELL,
    LINELEN,
    PROMPT,
    CalculatorConfig,
    ConfigError,
    LogLevel,
    load_config,
)
from src.core.contracts import (
    CalculatorConfigValidator,
    SchemaLoader,
    calculator_config_violations,
)
from src.core.math import INTSIZE, PUT_COMMAS


@pytest.fixture
def write_config(tmp_path):
    def _write(payload) -> str:
        path = tmp_path / "config.json"
        if isinstance(payload, str):
            path.write_text(payload, encoding="utf-8")
        else:
            path.write_text(json.dumps(payload), encoding="utf-8")
        return str(path)

    return _write


# =============================================================================
# MODEL
# =============================================================================


class TestCalculatorConfig:
    """Тесты для CalculatorConfig"""

    def test_defaults(self) -> None:
        config = CalculatorConfig()
        assert config.digit_capacity == INTSIZE
        assert config.max_line_length == LINELEN
        assert config.comma_interval == PUT_COMMAS
        assert config.prompt == PROMPT
        assert config.farewell == FAREWELL
        assert config.log_level == LogLevel.WARNING

    def test_immutable(self) -> None:
        config = CalculatorConfig()
        with pytest.raises(PydanticValidationError):
            config.digit_capacity = 10

    def test_constraints(self) -> None:
        with pytest.raises(PydanticValidationError):
            CalculatorConfig(digit_capacity=0)
        with pytest.raises(PydanticValidationError):
            CalculatorConfig(comma_interval=0)

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(PydanticValidationError):
            CalculatorConfig(colour="red")


# =============================================================================
# CONTRACT
# =============================================================================


class TestConfigContract:
    """Тесты для JSON Schema контракта calculator_config"""

    def test_schema_is_valid(self) -> None:
        schema = SchemaLoader().load_schema("calculator_config")
        assert schema["title"] == "CalculatorConfig"

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("calculator_config") is loader.load_schema(
            "calculator_config"
        )

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_schema_dir(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nowhere")

    def test_model_dump_satisfies_contract(self) -> None:
        assert calculator_config_violations(CalculatorConfig().model_dump(mode="json")) == []

    def test_unknown_key_rejected(self) -> None:
        violations = calculator_config_violations({"colour": "red"})
        assert len(violations) == 1
        assert violations[0].startswith("<root>: ")
        assert "colour" in violations[0]

    def test_every_violation_reported(self) -> None:
        violations = CalculatorConfigValidator().violations(
            {"log_level": "LOUD", "digit_capacity": 0}
        )
        assert len(violations) == 2
        assert violations[0].startswith("digit_capacity: ")
        assert violations[1].startswith("log_level: ")


# =============================================================================
# LOADER
# =============================================================================


class TestLoadConfig:
    """Тесты для load_config"""

    def test_none_gives_defaults(self) -> None:
        assert load_config(None) == CalculatorConfig()

    def test_loads_file(self, write_config) -> None:
        path = write_config(
            {"digit_capacity": 40, "comma_interval": 4, "log_level": "DEBUG"}
        )
        config = load_config(path)
        assert config.digit_capacity == 40
        assert config.comma_interval == 4
        assert config.log_level == LogLevel.DEBUG

    @pytest.mark.parametrize(
        "payload",
        [
            {"digit_capacity": 0},
            {"max_line_length": 2},
            {"log_level": "LOUD"},
            {"prompt": 5},
            {"unexpected": True},
            {"schema_version": "2"},
        ],
    )
    def test_contract_violation(self, write_config, payload) -> None:
        with pytest.raises(ConfigError, match="violates contract"):
            load_config(write_config(payload))

    def test_all_violations_in_message(self, write_config) -> None:
        path = write_config({"digit_capacity": 0, "comma_interval": 0})
        with pytest.raises(ConfigError, match="comma_interval: .*; digit_capacity: "):
            load_config(path)

    def test_not_json(self, write_config) -> None:
        with pytest.raises(ConfigError, match="not valid JSON"):
            load_config(write_config("{digit_capacity: 5"))

    def test_not_an_object(self, write_config) -> None:
        with pytest.raises(ConfigError, match="JSON object"):
            load_config(write_config([1, 2, 3]))

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(ConfigError, match="cannot read config"):
            load_config(tmp_path / "absent.json")
