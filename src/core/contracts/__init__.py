"""
Contract Validation Module

Модуль для валидации JSON контрактов калькулятора.
"""

from .validators import (
    CalculatorConfigValidator,
    ContractValidator,
    SchemaLoader,
    calculator_config_violations,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CalculatorConfigValidator",
    # Functions
    "calculator_config_violations",
]
