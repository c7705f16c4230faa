# cmdtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Built-in coercion functions for option and operand values.

Accumulating coercions share the signature `(value, current, default)` used
by `Transform` accumulators: `value` is the raw string from the command line
(or `None` for options that take no value), `current` is the data accumulated
so far (`None` before the first match) and `default` is the option's default.

Functions:
- collect: Append each value to a list.
- count: Increase a counter (by one per occurrence, or by the given number).
- kv: Build a dict from `key=value` pairs.
- listing: Split a comma separated value into a list.
- numeric_range: Expand `low..high` into an inclusive list of integers.
- value: Store the value unchanged.
- typed: Build a coercion converting values to a target type.

Type conversion:
- coerce_bool: Convert a string to a boolean.
- coerce_enum: Convert a string or raw value to an Enum instance.
- coerce_value: General-purpose coercion to a target type (including unions,
  literals, enums and datetimes).
"""
import re
import types
from datetime import datetime
from enum import EnumMeta
from typing import Any, Callable, Literal, Union, get_args, get_origin

from dateutil import parser as date_parser


def collect(value: Any, current: list | None = None, default: Any = None) -> list:
    """Build a collection (list) of values."""
    if current is None:
        current = list(default) if default is not None else []
    return [*current, value]


def count(value: Any = None, current: int | None = None, default: Any = None) -> int:
    """Increase a counter."""
    if current is None:
        current = default if default is not None else 0
    return current + (1 if value is None else int(value))


def kv(value: str, current: dict | None = None, default: Any = None) -> dict:
    """Build a key/value mapping from `key=value` pairs."""
    if current is None:
        current = dict(default) if default is not None else {}
    key, separator, item = value.partition("=")
    if not separator:
        raise ValueError(f"'{value}' is not a key=value pair")
    return {**current, key: item}


def listing(value: str, current: Any = None, default: Any = None) -> list[str]:
    """Split a value by ','."""
    return re.split(r"\s*,\s*", value.strip())


def numeric_range(value: str, current: Any = None, default: Any = None) -> list[int]:
    """Build an inclusive range of numbers from `low..high`."""
    low, separator, high = value.partition("..")
    if not separator:
        raise ValueError(f"'{value}' is not a range like 1..5")
    start, stop = int(low), int(high)
    step = 1 if start <= stop else -1
    return list(range(start, stop + step, step))


def value(value: Any, current: Any = None, default: Any = None) -> Any:
    """Just store the value."""
    return value


def typed(target_type: Any) -> Callable[[Any, Any, Any], Any]:
    """
    Return a coercion storing each value converted to `target_type`.

    Args:
        target_type (Any): Any type accepted by `coerce_value`.

    Returns:
        Callable: A `(value, current, default)` coercion.
    """

    def coerce(raw: Any, current: Any = None, default: Any = None) -> Any:
        return coerce_value(raw, target_type)

    coerce.__name__ = f"typed_{getattr(target_type, '__name__', 'value')}"
    return coerce


TRUE_WORDS = frozenset({"true", "t", "1", "yes", "y", "on"})
FALSE_WORDS = frozenset({"false", "f", "0", "no", "n", "off"})


def coerce_bool(value: str | bool) -> bool:
    """
    Convert a command-line word to a boolean.

    Known words (`yes`/`no`, `on`/`off`, `1`/`0`, `true`/`false`, ...) are
    matched case-insensitively; any other non-empty text is True.
    """
    if isinstance(value, bool):
        return value
    word = value.strip().lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    return bool(word)


def coerce_enum(value: Any, enum_type: EnumMeta) -> Any:
    """
    Resolve `value` to a member of `enum_type`, by member name first and by
    value (converted to the type of the member values) second.

    Raises:
        ValueError: If no member matches.
    """
    if isinstance(value, enum_type):
        return value
    if isinstance(value, str) and value in enum_type.__members__:
        return enum_type[value]

    value_type = type(next(iter(enum_type)).value)
    try:
        return enum_type(value_type(value))
    except (ValueError, TypeError):
        choices = ", ".join(str(member.value) for member in enum_type)
        raise ValueError(f"'{value}' should be one of {{{choices}}}") from None


def coerce_value(value: str, target_type: Any) -> Any:
    """
    Convert a raw command-line value to `target_type`.

    Supported targets:
        - `Literal[...]`: the value must be one of the literals
        - unions (`int | str`, `Union[...]`): first member type that accepts the value
        - Enum classes: see `coerce_enum`
        - `bool`: see `coerce_bool`
        - `datetime`: any format `dateutil` understands
        - anything else: called with the value (`int`, `float`, `Path`, ...)

    Raises:
        ValueError: If the value cannot be converted.
    """
    origin = get_origin(target_type)

    if origin is Literal:
        if value not in get_args(target_type):
            raise ValueError(f"Value '{value}' is not a valid literal for type {target_type}")
        return value

    if origin is Union or isinstance(target_type, types.UnionType):
        members = get_args(target_type)
        for member in members:
            try:
                return coerce_value(value, member)
            except (ValueError, TypeError):
                continue
        raise ValueError(f"Value '{value}' could not be coerced to any of {members}")

    if isinstance(target_type, EnumMeta):
        return coerce_enum(value, target_type)
    if target_type is bool:
        return coerce_bool(value)
    if target_type is datetime:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as error:
            raise ValueError(f"Value '{value}' could not be parsed as a datetime") from error
    return target_type(value)
