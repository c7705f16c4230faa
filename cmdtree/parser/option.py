# cmdtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Option`, a flag-driven switch of a `Command`.

An option is declared with a flag spec such as `"-o, --output <file>"`: the
short and long flags that select it, plus an optional `<variable>` placeholder
saying that it takes a value. Every match runs the option's accumulator
(`Fixed` or `Transform`) and stores the result in `data`, then calls the
option's action.

Flag spec grammar:
- tokens are separated by any run of `,`, `|` or whitespace
- `-x`: short flag (one letter or digit)
- `--name`: long flag (a letter followed by letters, digits or dashes)
- `<name>`: value placeholder (at most one)

Anything else raises `InvalidFlagSpecError`.
"""
from __future__ import annotations

import re
from typing import Any, Callable

from prompt_toolkit.validation import Validator

from cmdtree.exceptions import InvalidFlagSpecError
from cmdtree.parser.accumulator import Accumulator, as_accumulator
from cmdtree.parser.settings import OptionSettings
from cmdtree.utils import noop
from cmdtree.validators import as_validator, run_validators

SHORT_FLAG = re.compile(r"-[a-zA-Z0-9]")
LONG_FLAG = re.compile(r"--[a-zA-Z][a-zA-Z0-9-]+")
PLACEHOLDER = re.compile(r"<([^>]+)>")
SEPARATORS = re.compile(r"[,|\s]+")


def parse_flag_spec(spec: str) -> tuple[tuple[str, ...], str | None]:
    """
    Split a flag spec into its flags and its placeholder name.

    Returns:
        tuple: `(flags, variable)`, where `variable` is None when the spec has
        no `<variable>` placeholder.

    Raises:
        InvalidFlagSpecError: On any token that is not a flag or placeholder.
    """
    if not isinstance(spec, str):
        raise InvalidFlagSpecError(f"flag spec must be a string, got {type(spec).__name__}")
    flags: list[str] = []
    variable: str | None = None
    for part in SEPARATORS.split(spec.strip()):
        if not part:
            continue
        if SHORT_FLAG.fullmatch(part) or LONG_FLAG.fullmatch(part):
            if part in flags:
                raise InvalidFlagSpecError(f'duplicate flag "{part}" in "{spec}"')
            flags.append(part)
        elif match := PLACEHOLDER.fullmatch(part):
            if variable is not None:
                raise InvalidFlagSpecError(f'more than one placeholder in "{spec}"')
            variable = match.group(1)
        else:
            raise InvalidFlagSpecError(f'unexpected string "{part}" in "{spec}"')
    return tuple(flags), variable


class Option:
    """
    A flag-driven switch.

    Attributes:
        name (str): Key of the option in the parsed options mapping.
        flags (tuple[str, ...]): Flags selecting the option, in spec order.
        variable (str | None): Display name of the value, if the option takes one.
        accumulator (Accumulator): Strategy producing new data on each match.
        settings (OptionSettings): Validated settings (default, help, required, action).
        data (Any): Accumulated value; None until the first `update()`.
    """

    def __init__(
        self,
        name: str,
        flags: str,
        coercion: Any = True,
        settings: OptionSettings | None = None,
    ) -> None:
        self.name: str = name
        self.settings: OptionSettings = settings or OptionSettings()
        self.flags, variable = parse_flag_spec(flags)
        if variable is not None and self.settings.variable is not None:
            variable = self.settings.variable
        self.variable: str | None = variable
        self.accumulator: Accumulator = as_accumulator(coercion)
        self.validators: list[Validator] = []
        self.data: Any = None

    @property
    def takes_value(self) -> bool:
        """True if the flag spec declared a `<variable>` placeholder."""
        return self.variable is not None

    @property
    def required(self) -> bool:
        return self.settings.required

    @property
    def default(self) -> Any:
        return self.settings.default

    def get_name(self) -> str:
        return self.name

    def get_flags(self) -> tuple[str, ...]:
        return self.flags

    def get_variable(self) -> str | None:
        return self.variable

    def get_help(self) -> str:
        return self.settings.help

    def set_help(self, text: str) -> Option:
        self.settings.help = text
        return self

    def is_required(self) -> bool:
        return self.required

    def is_flag(self, flag: str) -> bool:
        """Test if `flag` is one of the flags selecting this option."""
        return flag in self.flags

    def set_action(self, action: Callable[..., Any]) -> Option:
        """Set the callback invoked each time the option is matched."""
        if not callable(action):
            raise TypeError(f"{action!r} is not callable")
        self.settings.action = action
        return self

    def call_action(self, *value: Any) -> None:
        """Call the action with the raw value, or with nothing for value-less options."""
        (self.settings.action or noop)(*value)

    def add_validator(
        self, validator: Validator | Callable[[str], bool], error_message: str = ""
    ) -> Option:
        """
        Add a value validator. This only has an effect for options taking a value.

        Args:
            validator: A Prompt Toolkit `Validator` or a predicate over the raw value.
            error_message: Message reported when a predicate returns False.
        """
        self.validators.append(as_validator(validator, error_message))
        return self

    def is_valid(self, value: Any) -> tuple[bool, str]:
        """Validate a raw value; returns `(is_valid, error_message)`."""
        return run_validators(self.validators, value)

    def get_data(self) -> Any:
        return self.data

    def update(self, *value: Any) -> None:
        """
        Update the option data from one match.

        `Fixed` accumulators store their value; `Transform` accumulators are
        called with `(value, data, default)`, where `value` is None for
        options that take no value.
        """
        raw = value[0] if value else None
        self.data = self.accumulator.apply(raw, self.data, self.default)

    def __str__(self) -> str:
        return (
            f"Option(name={self.name!r}, flags={self.flags}, variable={self.variable!r}, "
            f"required={self.required}, accumulator={self.accumulator})"
        )

    def __repr__(self) -> str:
        return str(self)
