import pytest

from cmdtree.parser import coercion


def test_collect():
    current = coercion.collect("a")
    current = coercion.collect("b", current)
    assert current == ["a", "b"]


def test_collect_starts_from_default():
    assert coercion.collect("c", None, ["a", "b"]) == ["a", "b", "c"]


def test_collect_does_not_mutate_current():
    current = ["a"]
    coercion.collect("b", current)
    assert current == ["a"]


@pytest.mark.parametrize(
    "value, current, default, expected",
    [
        (None, None, None, 1),
        (None, 1, None, 2),
        ("5", None, None, 5),
        ("2", 3, None, 5),
        (None, None, 10, 11),
    ],
)
def test_count(value, current, default, expected):
    assert coercion.count(value, current, default) == expected


def test_count_rejects_non_numeric_value():
    with pytest.raises(ValueError):
        coercion.count("many")


def test_kv():
    current = coercion.kv("name=app")
    current = coercion.kv("path=/a=b", current)
    current = coercion.kv("empty=", current)
    assert current == {"name": "app", "path": "/a=b", "empty": ""}


def test_kv_later_keys_win():
    assert coercion.kv("a=2", {"a": "1"}) == {"a": "2"}


def test_kv_requires_separator():
    with pytest.raises(ValueError):
        coercion.kv("novalue")


@pytest.mark.parametrize(
    "value, expected",
    [
        ("a,b,c", ["a", "b", "c"]),
        (" a , b ,c ", ["a", "b", "c"]),
        ("single", ["single"]),
    ],
)
def test_listing(value, expected):
    assert coercion.listing(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1..4", [1, 2, 3, 4]),
        ("3..3", [3]),
        ("5..2", [5, 4, 3, 2]),
        ("-2..1", [-2, -1, 0, 1]),
    ],
)
def test_numeric_range(value, expected):
    assert coercion.numeric_range(value) == expected


@pytest.mark.parametrize("value", ["1-4", "a..b", "1..", "..3"])
def test_numeric_range_invalid(value):
    with pytest.raises(ValueError):
        coercion.numeric_range(value)


def test_value_stores_last():
    assert coercion.value("x", "old", "default") == "x"


def test_typed():
    to_int = coercion.typed(int)
    assert to_int.__name__ == "typed_int"
    assert to_int("12", None, None) == 12
    with pytest.raises(ValueError):
        to_int("twelve", None, None)
