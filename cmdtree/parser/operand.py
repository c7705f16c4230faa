# cmdtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Operand`, a positional argument slot of a `Command`.

An operand's arity says how many values it takes:
- `n` (int >= 0): exactly n values
- `"?"`: zero or one value
- `"*"`: zero or more values
- `"+"`: one or more values

Operand data is pre-seeded with a copy of its default sequence. Each
`update()` moves a write cursor (`index`) forward, overwriting a default slot
or appending past the end; `get_data()` only exposes what has been written.
"""
from __future__ import annotations

import math
from typing import Any, Callable

from prompt_toolkit.validation import Validator

from cmdtree.exceptions import InvalidArityError
from cmdtree.parser.settings import OperandSettings
from cmdtree.utils import noop
from cmdtree.validators import as_validator, run_validators

SYMBOLIC_ARITIES: dict[str, tuple[int, float]] = {
    "?": (0, 1),
    "*": (0, math.inf),
    "+": (1, math.inf),
}


def validate_arity(arity: Any) -> int | str:
    """Return `arity` if it is an int >= 0 or one of '?', '*', '+'."""
    if isinstance(arity, bool):
        raise InvalidArityError(f"arity must be an int or one of '?', '*', '+', got {arity!r}")
    if isinstance(arity, int):
        if arity < 0:
            raise InvalidArityError(f"arity must not be negative, got {arity}")
        return arity
    if isinstance(arity, str) and arity in SYMBOLIC_ARITIES:
        return arity
    raise InvalidArityError(
        f"either an integer >= 0 or one of the characters '?', '*' or '+' "
        f"is required as arity. Input was: {arity!r}"
    )


class Operand:
    """
    A positional argument slot.

    Attributes:
        name (str): Key of the operand in the parsed operands mapping.
        arity (int | str): Exact count or one of '?', '*', '+'.
        settings (OperandSettings): Validated settings (variable, default, help, type, action).
        data (list[Any]): Stored values, starting as a copy of the default.
        index (int): Number of values written so far.
    """

    def __init__(
        self, name: str, arity: int | str, settings: OperandSettings | None = None
    ) -> None:
        self.name: str = name
        self.arity: int | str = validate_arity(arity)
        self.settings: OperandSettings = settings or OperandSettings()
        self.validators: list[Validator] = []
        self.data: list[Any] = list(self.settings.default)
        self.index: int = 0

    @property
    def variable(self) -> str:
        return self.settings.variable or self.name

    @property
    def type(self) -> Any:
        return self.settings.type

    def get_name(self) -> str:
        return self.name

    def get_variable(self) -> str:
        return self.variable

    def get_help(self) -> str:
        return self.settings.help

    def set_help(self, text: str) -> Operand:
        self.settings.help = text
        return self

    def set_action(self, action: Callable[..., Any]) -> Operand:
        """Set the callback invoked with each accepted value."""
        if not callable(action):
            raise TypeError(f"{action!r} is not callable")
        self.settings.action = action
        return self

    def call_action(self, value: Any) -> None:
        (self.settings.action or noop)(value)

    def get_expected(self) -> tuple[int, float]:
        """Return the (min, max) number of values this operand takes."""
        if isinstance(self.arity, str):
            return SYMBOLIC_ARITIES[self.arity]
        return self.arity, self.arity

    def add_validator(
        self, validator: Validator | Callable[[str], bool], error_message: str = ""
    ) -> Operand:
        """Add a value validator."""
        self.validators.append(as_validator(validator, error_message))
        return self

    def is_valid(self, value: Any) -> tuple[bool, str]:
        """Validate a raw value; returns `(is_valid, error_message)`."""
        return run_validators(self.validators, value)

    def get_data(self) -> list[Any]:
        """Return stored data up to the current index."""
        return self.data[: self.index]

    def update(self, value: Any) -> None:
        self.index += 1
        if self.index > len(self.data):
            self.data.append(value)
        else:
            # overwrite default value
            self.data[self.index - 1] = value

    def __str__(self) -> str:
        return f"Operand(name={self.name!r}, arity={self.arity!r}, variable={self.variable!r})"

    def __repr__(self) -> str:
        return str(self)
