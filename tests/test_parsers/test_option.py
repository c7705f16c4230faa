import pytest

from cmdtree.exceptions import InvalidFlagSpecError
from cmdtree.parser import Coercion, Fixed, Option, OptionSettings, Transform
from cmdtree.parser.option import parse_flag_spec


@pytest.mark.parametrize(
    "spec, flags, variable",
    [
        ("-v", ("-v",), None),
        ("-v, --verbose", ("-v", "--verbose"), None),
        ("-o | --output <file>", ("-o", "--output"), "file"),
        ("--dry-run", ("--dry-run",), None),
        ("  -x   --extra,  <value> ", ("-x", "--extra"), "value"),
        ("-1", ("-1",), None),
    ],
)
def test_parse_flag_spec(spec, flags, variable):
    assert parse_flag_spec(spec) == (flags, variable)


@pytest.mark.parametrize(
    "spec",
    [
        "verbose",
        "-vv",
        "--v",
        "---verbose",
        "--1st",
        "-o <file> <other>",
        "-v, -v",
        "-o <file",
    ],
)
def test_parse_flag_spec_rejects_invalid(spec):
    with pytest.raises(InvalidFlagSpecError):
        parse_flag_spec(spec)


def test_parse_flag_spec_rejects_non_string():
    with pytest.raises(InvalidFlagSpecError):
        parse_flag_spec(["-v"])


def test_option_defaults():
    option = Option("verbose", "-v, --verbose")
    assert option.get_flags() == ("-v", "--verbose")
    assert option.takes_value is False
    assert option.get_variable() is None
    assert option.is_required() is False
    assert option.get_data() is None
    assert isinstance(option.accumulator, Fixed)


def test_option_variable_setting_overrides_placeholder():
    option = Option("output", "-o <file>", Coercion.VALUE, OptionSettings(variable="path"))
    assert option.takes_value is True
    assert option.get_variable() == "path"


def test_option_variable_setting_without_placeholder_takes_no_value():
    option = Option("force", "-f", True, OptionSettings(variable="path"))
    assert option.takes_value is False


def test_option_is_flag():
    option = Option("verbose", "-v, --verbose")
    assert option.is_flag("-v")
    assert option.is_flag("--verbose")
    assert not option.is_flag("--verb")
    assert not option.is_flag("-V")


def test_option_update_fixed_is_idempotent():
    option = Option("force", "-f", True)
    option.update()
    option.update()
    assert option.get_data() is True


def test_option_update_transform_receives_current_and_default():
    calls = []

    def remember(value, current, default):
        calls.append((value, current, default))
        return (current or 0) + 1

    option = Option("n", "-n <n>", remember, OptionSettings(default=10))
    assert isinstance(option.accumulator, Transform)
    option.update("a")
    option.update("b")
    assert option.get_data() == 2
    assert calls == [("a", None, 10), ("b", 1, 10)]


def test_option_update_count_without_value():
    option = Option("verbose", "-v", Coercion.COUNT)
    for _ in range(3):
        option.update()
    assert option.get_data() == 3


def test_option_validators_short_circuit_in_order():
    option = Option("level", "--level <n>", int)
    option.add_validator(lambda text: text.isdigit(), "not a number").add_validator(
        lambda text: int(text) < 10, "too big"
    )
    assert option.is_valid("5") == (True, "")
    assert option.is_valid("x") == (False, "not a number")
    assert option.is_valid("50") == (False, "too big")


def test_option_set_action_and_call_action():
    seen = []
    option = Option("output", "-o <file>", Coercion.VALUE)
    assert option.set_action(seen.append) is option
    option.call_action("out.txt")
    assert seen == ["out.txt"]


def test_option_call_action_without_action_is_noop():
    Option("force", "-f").call_action()


def test_option_set_action_rejects_non_callable():
    with pytest.raises(TypeError):
        Option("force", "-f").set_action("nope")


def test_option_set_help_is_chainable():
    option = Option("force", "-f")
    assert option.set_help("Force it.") is option
    assert option.get_help() == "Force it."
