# cmdtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines how an option turns each occurrence into accumulated data.

An option's coercion is one of two accumulator variants:
- `Fixed(value)`: every match stores the same value (switches such as
  `--version` or `--force`).
- `Transform(function)`: every match calls `function(raw, current, default)`
  and stores its result (counters, collectors, key/value maps, typed values).

`Coercion` names the built-in transforms so they can be declared without
importing the functions, and `as_accumulator()` normalizes whatever was passed
to `Command.add_option()`.

Example:
    as_accumulator(True)              → Fixed(value=True)
    as_accumulator(Coercion.COUNT)    → Transform(function=count)
    as_accumulator(int)               → Transform(function=typed_int)
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from cmdtree.parser import coercion


class Accumulator(ABC):
    """Strategy producing an option's new data from one raw value."""

    @abstractmethod
    def apply(self, raw: Any, current: Any, default: Any) -> Any: ...


@dataclass(frozen=True)
class Fixed(Accumulator):
    """Stores `value` unconditionally, ignoring raw input."""

    value: Any

    def apply(self, raw: Any, current: Any, default: Any) -> Any:
        return self.value


@dataclass(frozen=True)
class Transform(Accumulator):
    """Stores the result of `function(raw, current, default)`."""

    function: Callable[[Any, Any, Any], Any]

    def apply(self, raw: Any, current: Any, default: Any) -> Any:
        return self.function(raw, current, default)

    def __str__(self) -> str:
        name = getattr(self.function, "__name__", repr(self.function))
        return f"Transform(function={name})"


class Coercion(Enum):
    """
    Built-in accumulating coercions.

    Members:
        COLLECT: Append every value to a list.
        COUNT: Count occurrences (or add numeric values).
        KV: Build a dict from `key=value` values.
        LISTING: Split a comma separated value into a list.
        RANGE: Expand `low..high` into a list of integers.
        VALUE: Store the last value as given.

    Aliases:
        - "append" → "collect"
        - "counter" → "count"
        - "map" → "kv"
        - "list" → "listing"
        - "store" → "value"
    """

    COLLECT = "collect"
    COUNT = "count"
    KV = "kv"
    LISTING = "listing"
    RANGE = "range"
    VALUE = "value"

    @property
    def function(self) -> Callable[[Any, Any, Any], Any]:
        return {
            Coercion.COLLECT: coercion.collect,
            Coercion.COUNT: coercion.count,
            Coercion.KV: coercion.kv,
            Coercion.LISTING: coercion.listing,
            Coercion.RANGE: coercion.numeric_range,
            Coercion.VALUE: coercion.value,
        }[self]

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "append": "collect",
            "counter": "count",
            "map": "kv",
            "list": "listing",
            "store": "value",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> Coercion:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        alias = cls._get_alias(value.strip().lower())
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


def as_accumulator(value: Any) -> Accumulator:
    """
    Normalize a coercion declaration into an `Accumulator`.

    Accumulators pass through, `Coercion` members and callables become
    `Transform`s, types become `typed()` transforms, anything else becomes a
    `Fixed` value.
    """
    if isinstance(value, Accumulator):
        return value
    if isinstance(value, Coercion):
        return Transform(value.function)
    if isinstance(value, type):
        return Transform(coercion.typed(value))
    if callable(value):
        return Transform(value)
    return Fixed(value)
