import pytest
from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError

from cmdtree.validators import int_range_validator


@pytest.mark.parametrize("valid", ["1", "5", "10"])
def test_int_range_validator_accepts_bounds_and_inside(valid):
    int_range_validator(1, 10).validate(Document(valid))


@pytest.mark.parametrize("invalid", ["0", "11", "2.5", "ten", "-1", ""])
def test_int_range_validator_rejects_invalid(invalid):
    with pytest.raises(ValidationError) as excinfo:
        int_range_validator(1, 10).validate(Document(invalid))
    assert excinfo.value.message == "Invalid input. Enter a number between 1 and 10."
