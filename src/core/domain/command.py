"""
Command — Модель команды калькулятора

Immutable Pydantic модель, представляющая одну разобранную строку:
левый регистр, оператор и (кроме печати) правый операнд —
либо литерал из цифр, либо регистр.
"""

from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, model_validator

from .register import RegisterId

# Допустимые символы операторов
ALLOPS: Final[str] = "?=+*^/"


# =============================================================================
# ENUMS
# =============================================================================


class Operator(str, Enum):
    """Оператор команды"""

    PRINT = "?"
    ASSIGN = "="
    PLUS = "+"
    MULT = "*"
    POWER = "^"
    DIVIDE = "/"


# =============================================================================
# COMMAND MODEL
# =============================================================================


class Command(BaseModel):
    """
    Разобранная команда.

    Инварианты:
    - PRINT не имеет правого операнда
    - остальные операторы имеют ровно один из literal / source
    """

    target: RegisterId = Field(..., description="Левый (целевой) регистр")
    operator: Operator = Field(..., description="Оператор")
    literal: str | None = Field(
        None, min_length=1, pattern=r"^[0-9]+$", description="Правый операнд: цифры"
    )
    source: RegisterId | None = Field(None, description="Правый операнд: регистр")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_operand(self) -> "Command":
        """Проверка согласованности оператора и правого операнда"""
        has_literal = self.literal is not None
        has_source = self.source is not None

        if self.operator == Operator.PRINT:
            if has_literal or has_source:
                raise ValueError("print command takes no right-hand operand")
        elif has_literal == has_source:
            raise ValueError(
                f"operator {self.operator.value!r} requires exactly one of literal/source"
            )
        return self

    @property
    def text(self) -> str:
        """Команда в компактной записи, например 'a+12'."""
        rhs = self.literal if self.literal is not None else (
            self.source.value if self.source is not None else ""
        )
        return f"{self.target.value}{self.operator.value}{rhs}"
