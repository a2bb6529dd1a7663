"""
Domain models and value objects.

Contains the register identifiers, the register store, and the parsed command.
"""

from src.core.domain.command import ALLOPS, Command, Operator
from src.core.domain.register import CH_A, NVARS, RegisterId, RegisterStore

__all__ = [
    # Registers
    "NVARS",
    "CH_A",
    "RegisterId",
    "RegisterStore",
    # Command model
    "ALLOPS",
    "Operator",
    "Command",
]
