# cmdtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Settings models for options, operands and commands.

`Command.add_option()`, `add_operand()` and `add_command()` accept an optional
`config` mapping plus keyword overrides. Both are merged and validated here so
that typos (`requried=True`) and wrong types fail while the tree is being
declared rather than while a user is typing arguments.
"""
from __future__ import annotations

from typing import Any, Callable, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from cmdtree.exceptions import InvalidSettingsError

SettingsT = TypeVar("SettingsT", bound=BaseModel)


class OptionSettings(BaseModel):
    """
    Settings of an `Option`.

    Attributes:
        variable (str | None): Display name of the value; overrides the `<name>`
            placeholder of the flag spec.
        default (Any): Passed to `Transform` coercions as their default.
        help (str): Help text.
        required (bool): Whether the option must appear.
        action (Callable | None): Called with the raw value on every match.
    """

    variable: str | None = None
    default: Any = None
    help: str = ""
    required: bool = False
    action: Callable[..., Any] | None = None

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)


class OperandSettings(BaseModel):
    """
    Settings of an `Operand`.

    Attributes:
        variable (str | None): Display name; defaults to the operand name.
        default (list[Any]): Values pre-seeding the operand data.
        help (str): Help text.
        type (Any): Target type each value is coerced to (see `coerce_value`).
        action (Callable | None): Called with every accepted value.
    """

    variable: str | None = None
    default: list[Any] = Field(default_factory=list)
    help: str = ""
    type: Any = str
    action: Callable[..., Any] | None = None

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    @field_validator("default", mode="before")
    @classmethod
    def validate_default(cls, value: Any) -> list[Any]:
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return list(value)
        raise ValueError("default must be a list or tuple of values.")


class CommandSettings(BaseModel):
    """
    Settings of a `Command`.

    Attributes:
        help (str): One-line help shown in command listings.
        description (str): Longer description shown in the command's own help.
        example (str): Usage example shown at the end of the help.
        action (Callable | None): Called with `(options, operands)` after parsing.
    """

    help: str = ""
    description: str = ""
    example: str = ""
    action: Callable[..., Any] | None = None

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)


def load_settings(
    model: type[SettingsT],
    config: Mapping[str, Any] | BaseModel | None = None,
    **overrides: Any,
) -> SettingsT:
    """
    Merge `config` and `overrides` and validate them against `model`.

    Raises:
        InvalidSettingsError: If a key is unknown or a value has the wrong type.
    """
    if isinstance(config, BaseModel):
        config = config.model_dump()
    elif config is not None and not isinstance(config, Mapping):
        raise InvalidSettingsError(
            f"config must be a mapping, got {type(config).__name__}"
        )
    try:
        return model.model_validate({**(config or {}), **overrides})
    except ValidationError as error:
        raise InvalidSettingsError(
            f"Invalid {model.__name__}: {error.error_count()} error(s)\n{error}"
        ) from error
