from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Literal, Union

import pytest

from cmdtree.parser.coercion import coerce_bool, coerce_enum, coerce_value


class Level(Enum):
    LOW = "low"
    HIGH = "high"


class Priority(Enum):
    MINOR = 1
    MAJOR = 2


@pytest.mark.parametrize(
    "value, target_type, expected",
    [
        ("42", int, 42),
        ("2.5", float, 2.5),
        ("text", str, "text"),
        ("", str, ""),
        ("7", int | str, 7),
        ("seven", int | str, "seven"),
        ("1.5", int | float, 1.5),
        ("8", Union[int, str], 8),
        ("no", bool | str, False),
    ],
)
def test_coerce_value_basic(value, target_type, expected):
    assert coerce_value(value, target_type) == expected


def test_coerce_value_union_failure():
    with pytest.raises(ValueError) as excinfo:
        coerce_value("abc", int | float)
    assert "could not be coerced" in str(excinfo.value)


def test_coerce_value_literal():
    assert coerce_value("fast", Literal["fast", "slow"]) == "fast"
    with pytest.raises(ValueError):
        coerce_value("medium", Literal["fast", "slow"])


def test_coerce_value_enum_by_value_and_name():
    assert coerce_value("low", Level) is Level.LOW
    assert coerce_value("HIGH", Level) is Level.HIGH
    with pytest.raises(ValueError) as excinfo:
        coerce_value("middle", Level)
    assert "low, high" in str(excinfo.value)


def test_coerce_enum_int_values():
    assert coerce_enum("2", Priority) is Priority.MAJOR
    assert coerce_enum("MINOR", Priority) is Priority.MINOR
    assert coerce_enum(Priority.MAJOR, Priority) is Priority.MAJOR
    with pytest.raises(ValueError):
        coerce_enum("3", Priority)


def test_coerce_value_path():
    result = coerce_value("/var/log/app.log", Path)
    assert result == Path("/var/log/app.log")


def test_coerce_value_datetime():
    assert coerce_value("2025-03-04 05:06", datetime) == datetime(2025, 3, 4, 5, 6)
    with pytest.raises(ValueError):
        coerce_value("not-a-date", datetime)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("true", True),
        ("T", True),
        ("1", True),
        ("on", True),
        ("Yes", True),
        ("false", False),
        ("0", False),
        ("off", False),
        ("", False),
        (True, True),
    ],
)
def test_coerce_bool(value, expected):
    assert coerce_bool(value) is expected
