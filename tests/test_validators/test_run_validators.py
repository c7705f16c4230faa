import pytest
from prompt_toolkit.validation import Validator

from cmdtree.validators import as_validator, int_range_validator, run_validators


def test_as_validator_keeps_validator_instances():
    validator = int_range_validator(0, 1)
    assert as_validator(validator) is validator


def test_as_validator_wraps_predicates():
    validator = as_validator(str.isupper, "must be upper case")
    assert isinstance(validator, Validator)
    assert run_validators([validator], "abc") == (False, "must be upper case")


def test_as_validator_rejects_non_callables():
    with pytest.raises(TypeError):
        as_validator("nope")


def test_run_validators_reports_first_failure():
    validators = [
        as_validator(lambda text: len(text) < 5, "too long"),
        as_validator(str.isdigit, "not a number"),
    ]
    assert run_validators(validators, "123") == (True, "")
    assert run_validators(validators, "123456x") == (False, "too long")
    assert run_validators(validators, "abc") == (False, "not a number")


def test_run_validators_without_validators():
    assert run_validators([], "anything") == (True, "")


def test_run_validators_stringifies_values():
    assert run_validators([as_validator(str.isdigit)], 42) == (True, "")
