# cmdtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Command`, a node of a declarative command tree, and the
recursive matcher that parses a token list against it.

A command owns an ordered list of `Option`s, an ordered list of `Operand`s and
a name-keyed mapping of child commands. The tree is built once with
`add_option()`, `add_operand()` and `add_command()`, then `parse()` walks it.

Parsing one level:
- `--` switches to literal mode: every following token is an operand.
- `-x`, `-xyz`, `-xVALUE`, `-x=VALUE`, `--name` and `--name=VALUE` select options.
  Combined short flags of value-less options are expanded one at a time.
- Other tokens are operands while the command still accepts operands.
- A token naming a child command stops this level; the child parses the rest.
- Anything else stops this level and is handed back to the caller.

Once this level's tokens are consumed, required options are checked, operand
tokens are distributed over the declared operands (reserving the minimum that
later operands still need), and the command's action is called with
`(options, operands)`. Subcommands are then parsed depth-first; after a child
returns, the next leftover token may name a sibling of that child.

`parse()` returns the tokens no level consumed. Failures raise a
`CommandArgumentError` subclass immediately; nothing is printed and the
process is never terminated here.

Note: option and operand data live on the tree, so parsing the same tree
twice accumulates. Build a fresh tree for each independent parse.

Example Usage:
    root = Command("tool")
    root.add_option("verbose", "-v, --verbose", Coercion.COUNT)
    build = root.add_command("build", action=on_build)
    build.add_operand("target", 1)

    leftover = root.parse(["-vv", "build", "x"])
    # on_build({}, {"target": ["x"]}); leftover == []
"""
from __future__ import annotations

import math
import re
import weakref
from typing import Any, Callable, Mapping, Sequence

from pydantic import BaseModel

from cmdtree.exceptions import (
    CommandAlreadyExistsError,
    InvalidOperandValueError,
    InvalidOptionValueError,
    InvalidSettingsError,
    MissingOptionValueError,
    MissingRequiredOptionError,
    TooFewOperandsError,
    TooManyOperandsError,
    UnexpectedOptionValueError,
    UnknownCommandError,
    UnknownOptionError,
)
from cmdtree.logger import logger
from cmdtree.parser.coercion import coerce_value
from cmdtree.parser.operand import Operand
from cmdtree.parser.option import Option
from cmdtree.parser.settings import (
    CommandSettings,
    OperandSettings,
    OptionSettings,
    load_settings,
)

LITERAL_SEPARATOR = "--"
SHORT_OPTION = re.compile(r"(-[a-zA-Z0-9])([a-zA-Z0-9]*)(=.*)?", re.DOTALL)
LONG_OPTION = re.compile(r"(--[a-zA-Z][a-zA-Z0-9-]*)(=.*)?", re.DOTALL)


class Command:
    """
    A named node of the command tree.

    Attributes:
        name (str): Name of the command; children are selected by it.
        settings (CommandSettings): Help texts and the action callback.
    """

    def __init__(
        self,
        name: str,
        parent: Command | None = None,
        settings: CommandSettings | None = None,
    ) -> None:
        self.name: str = name
        self.settings: CommandSettings = settings or CommandSettings()
        self._parent: weakref.ref[Command] | None = (
            weakref.ref(parent) if parent is not None else None
        )
        self._options: list[Option] = []
        self._operands: list[Operand] = []
        self._commands: dict[str, Command] = {}

    @property
    def parent(self) -> Command | None:
        return self._parent() if self._parent is not None else None

    def get_parent(self) -> Command | None:
        """Return the parent command, or None for the root."""
        return self.parent

    def get_name(self) -> str:
        return self.name

    def get_help(self) -> str:
        return self.settings.help

    def set_help(self, text: str) -> Command:
        self.settings.help = text
        return self

    def get_description(self) -> str:
        return self.settings.description

    def get_example(self) -> str:
        return self.settings.example

    def set_action(self, action: Callable[[dict[str, Any], dict[str, list[Any]]], Any]) -> Command:
        """Set the callback invoked with `(options, operands)` after this level is parsed."""
        if not callable(action):
            raise TypeError(f"{action!r} is not callable")
        self.settings.action = action
        return self

    def get_path(self) -> list[str]:
        """Return the command names from the root down to this command."""
        path = []
        command: Command | None = self
        while command is not None:
            path.insert(0, command.name)
            command = command.parent
        return path

    def add_command(
        self,
        name: str,
        config: Mapping[str, Any] | BaseModel | None = None,
        **settings: Any,
    ) -> Command:
        """
        Define a new subcommand.

        Args:
            name (str): Name selecting the subcommand.
            config (Mapping | CommandSettings | None): help, description, example, action.
            **settings: Overrides merged into `config`.

        Raises:
            CommandAlreadyExistsError: If a subcommand with this name exists.
            InvalidSettingsError: If the name or settings are invalid.
        """
        if not isinstance(name, str) or not name or name.startswith("-"):
            raise InvalidSettingsError(
                f"Command name must be a non-empty string not starting with '-', got {name!r}"
            )
        if name in self._commands:
            raise CommandAlreadyExistsError(
                f"Command '{name}' already exists in '{' '.join(self.get_path())}'"
            )
        command = Command(name, self, load_settings(CommandSettings, config, **settings))
        self._commands[name] = command
        logger.debug("[Command:%s] Added subcommand '%s'", self.name, name)
        return command

    def add_option(
        self,
        name: str,
        flags: str,
        coercion: Any = True,
        config: Mapping[str, Any] | BaseModel | None = None,
        **settings: Any,
    ) -> Option:
        """
        Create a new option for the command.

        Args:
            name (str): Key of the option in the parsed options mapping.
            flags (str): Flag spec, e.g. "-o, --output <file>".
            coercion (Any): An `Accumulator`, a `Coercion` member, a type, a
                `(value, current, default)` callable, or a fixed value.
            config (Mapping | OptionSettings | None): variable, default, help, required, action.
            **settings: Overrides merged into `config`.

        Returns:
            Option: The created option, for chaining `add_validator()` etc.
        """
        option = Option(name, flags, coercion, load_settings(OptionSettings, config, **settings))
        self._options.append(option)
        return option

    def add_operand(
        self,
        name: str,
        arity: int | str,
        config: Mapping[str, Any] | BaseModel | None = None,
        **settings: Any,
    ) -> Operand:
        """
        Create a new operand (positional argument).

        Args:
            name (str): Key of the operand in the parsed operands mapping.
            arity (int | str): Exact count, or one of '?', '*', '+'.
            config (Mapping | OperandSettings | None): variable, default, help, type, action.
            **settings: Overrides merged into `config`.

        Returns:
            Operand: The created operand.
        """
        operand = Operand(name, arity, load_settings(OperandSettings, config, **settings))
        self._operands.append(operand)
        return operand

    def has_commands(self) -> bool:
        return len(self._commands) > 0

    def has_command(self, name: str) -> bool:
        return name in self._commands

    def get_commands(self) -> list[Command]:
        return list(self._commands.values())

    def get_command(self, name: str) -> Command | None:
        """Lookup a direct subcommand by name."""
        return self._commands.get(name)

    def find_command(self, names: Sequence[str]) -> Command:
        """
        Descend through subcommands by name.

        Raises:
            UnknownCommandError: If a name is not a subcommand of the command before it.
        """
        command = self
        for name in names:
            child = command.get_command(name)
            if child is None:
                raise UnknownCommandError(name)
            command = child
        return command

    def has_options(self) -> bool:
        return len(self._options) > 0

    def get_options(self) -> list[Option]:
        return list(self._options)

    def get_option(self, flag: str) -> Option | None:
        """Lookup the first option declaring `flag`."""
        return next((option for option in self._options if option.is_flag(flag)), None)

    def has_operands(self) -> bool:
        return len(self._operands) > 0

    def get_operands(self) -> list[Operand]:
        return list(self._operands)

    def get_min_max_operands(self) -> tuple[int, float]:
        """Return the (min, max) number of operand tokens this command accepts."""
        minimum, maximum = 0, 0
        for operand in self._operands:
            low, high = operand.get_expected()
            minimum += low
            if maximum != math.inf:
                maximum = math.inf if high == math.inf else maximum + high
        return minimum, maximum

    def get_min_remaining(self, start: int) -> int:
        """Return the minimum number of tokens operands from index `start` on require."""
        return sum(operand.get_expected()[0] for operand in self._operands[start:])

    def process_operands(self, tokens: Sequence[str]) -> dict[str, list[Any]]:
        """
        Distribute operand tokens over the declared operands.

        Each operand takes tokens until its maximum is reached. Past its own
        minimum it only keeps taking while more tokens remain than the
        operands after it still require.

        Returns:
            dict[str, list[Any]]: Operand name to its data, for every operand
            that received at least one value.

        Raises:
            TooFewOperandsError: If fewer tokens than the combined minimum are given.
            TooManyOperandsError: If more tokens than the combined maximum are given.
            InvalidOperandValueError: If a validator or the operand type rejects a token.
        """
        remaining = list(tokens)
        minimum, maximum = self.get_min_max_operands()
        if len(remaining) < minimum:
            raise TooFewOperandsError(
                f"not enough arguments -- available {len(remaining)}, expected {minimum}"
            )
        if len(remaining) > maximum:
            raise TooManyOperandsError(
                f"too many arguments -- available {len(remaining)}, expected {maximum}"
            )

        result: dict[str, list[Any]] = {}
        for position, operand in enumerate(self._operands):
            if not remaining:
                break
            low, high = operand.get_expected()
            reserved = self.get_min_remaining(position + 1)
            taken = 0
            while remaining and taken < high and (taken < low or len(remaining) > reserved):
                value = self._coerce_operand(operand, remaining.pop(0))
                operand.update(value)
                operand.call_action(value)
                taken += 1
                result[operand.name] = operand.get_data()
            logger.debug(
                "[Command:%s] Operand '%s' took %d value(s)", self.name, operand.name, taken
            )
        return result

    def _coerce_operand(self, operand: Operand, token: str) -> Any:
        valid, message = operand.is_valid(token)
        if not valid:
            raise InvalidOperandValueError(
                message or f'invalid value "{token}" for operand "{operand.name}"'
            )
        try:
            return coerce_value(token, operand.type)
        except (ValueError, TypeError) as error:
            raise InvalidOperandValueError(
                f'invalid value "{token}" for operand "{operand.name}": {error}'
            ) from error

    def _match_option(
        self,
        flag: str,
        trailing: str,
        attached: str | None,
        remaining: list[str],
        resolved: dict[str, Any],
    ) -> None:
        option = self.get_option(flag)
        if option is None:
            raise UnknownOptionError(flag)

        if option.takes_value:
            if trailing:
                value = trailing + (attached or "")
            elif attached is not None:
                value = attached[1:]
                if not value:
                    raise MissingOptionValueError(flag)
            elif remaining:
                value = remaining.pop(0)
            else:
                raise MissingOptionValueError(flag)

            valid, message = option.is_valid(value)
            if not valid:
                raise InvalidOptionValueError(
                    message or f'invalid value "{value}" for argument "{flag}"'
                )
            try:
                option.update(value)
            except (ValueError, TypeError) as error:
                raise InvalidOptionValueError(
                    f'invalid value "{value}" for argument "{flag}": {error}'
                ) from error
            option.call_action(value)
        else:
            if attached is not None and not trailing:
                raise UnexpectedOptionValueError(flag)
            option.update()
            option.call_action()
            if trailing:
                # push back combined short flags
                remaining.insert(0, f"-{trailing}{attached or ''}")

        resolved[option.name] = option.get_data()
        logger.debug(
            "[Command:%s] Matched '%s' -> %s=%r", self.name, flag, option.name, option.get_data()
        )

    def parse(self, tokens: Sequence[str] | None = None) -> list[str]:
        """
        Parse tokens for this command and its subcommands.

        Args:
            tokens (Sequence[str] | None): The CLI-style argument list.

        Returns:
            list[str]: Tokens that no command of the tree consumed.

        Raises:
            CommandArgumentError: On the first token or constraint that does not match.
        """
        remaining = list(tokens or [])
        pending: list[str] = []
        resolved: dict[str, Any] = {
            option.name: option.get_data()
            for option in self._options
            if option.get_data() is not None
        }
        literal = False
        subcommand: Command | None = None
        _, maximum = self.get_min_max_operands()

        logger.debug("[Command:%s] Parsing %s", self.name, remaining)
        while remaining:
            token = remaining.pop(0)
            if literal:
                pending.append(token)
                continue

            if token == LITERAL_SEPARATOR:
                # only operands following
                literal = True
                continue

            if match := SHORT_OPTION.fullmatch(token):
                flag, trailing, attached = match.groups()
                self._match_option(flag, trailing, attached, remaining, resolved)
            elif match := LONG_OPTION.fullmatch(token):
                flag, attached = match.groups()
                self._match_option(flag, "", attached, remaining, resolved)
            elif len(pending) < maximum:
                pending.append(token)
            elif token in self._commands:
                subcommand = self._commands[token]
                break
            else:
                # no further arguments belong to this command
                remaining.insert(0, token)
                break

        for option in self._options:
            if option.required and option.name not in resolved:
                raise MissingRequiredOptionError(option.flags)

        operands = self.process_operands(pending)
        options = {
            option.name: resolved[option.name]
            for option in self._options
            if option.name in resolved
        }

        if self.settings.action is not None:
            logger.debug("[Command:%s] Calling action", self.name)
            self.settings.action(options, operands)

        while subcommand is not None:
            logger.debug("[Command:%s] Dispatching to '%s'", self.name, subcommand.name)
            remaining = subcommand.parse(remaining)
            if not remaining:
                break
            subcommand = self._commands.get(remaining[0])
            if subcommand is not None:
                remaining.pop(0)

        return remaining

    def __str__(self) -> str:
        return (
            f"Command(name={self.name!r}, options={len(self._options)}, "
            f"operands={len(self._operands)}, commands={len(self._commands)})"
        )

    def __repr__(self) -> str:
        return str(self)
