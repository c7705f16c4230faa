"""
cmdtree CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .accumulator import Accumulator, Coercion, Fixed, Transform, as_accumulator
from .command import Command
from .operand import Operand
from .option import Option
from .settings import CommandSettings, OperandSettings, OptionSettings

__all__ = [
    "Accumulator",
    "Coercion",
    "Command",
    "CommandSettings",
    "Fixed",
    "Operand",
    "OperandSettings",
    "Option",
    "OptionSettings",
    "Transform",
    "as_accumulator",
]
