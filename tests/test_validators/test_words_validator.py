import pytest
from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError

from cmdtree.validators import words_validator


@pytest.mark.parametrize("valid", ["json", "YAML", "Text"])
def test_words_validator_accepts_case_insensitive(valid):
    words_validator(["json", "yaml", "text"]).validate(Document(valid))


@pytest.mark.parametrize("invalid", ["xml", "", "js"])
def test_words_validator_rejects_invalid(invalid):
    with pytest.raises(ValidationError) as excinfo:
        words_validator(["json", "yaml"]).validate(Document(invalid))
    assert excinfo.value.message == "Invalid input. Choices: {json, yaml}."


def test_words_validator_custom_message():
    with pytest.raises(ValidationError) as excinfo:
        words_validator(["json"], "pick json").validate(Document("xml"))
    assert excinfo.value.message == "pick json"
