# cmdtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value validators for options and operands.

Validators are Prompt Toolkit `Validator` objects, so the same instances can
guard both parsed command-line values and interactive prompts. A raw value is
wrapped in a `Document` and passed to `Validator.validate()`; a
`ValidationError` marks it invalid and carries the message shown to the user.

Included Validators:
- int_range_validator: Enforces numeric input within a range.
- words_validator: Accepts specific words (case-insensitive).
- pattern_validator: Requires a full regular expression match.
- ListValidator: Validates a separated list of words (e.g. "a,b,c").

Helpers:
- as_validator: Turns a plain predicate into a `Validator`.
- run_validators: Runs validators in order and reports the first failure.
"""
import re
from typing import Any, Callable, KeysView, Sequence

from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError, Validator


def as_validator(
    validator: Validator | Callable[[str], bool], error_message: str = ""
) -> Validator:
    """Return `validator` unchanged, or wrap a predicate with `error_message`."""
    if isinstance(validator, Validator):
        return validator
    if not callable(validator):
        raise TypeError(f"{validator!r} is neither a Validator nor callable")
    return Validator.from_callable(validator, error_message=error_message)


def run_validators(validators: Sequence[Validator], value: Any) -> tuple[bool, str]:
    """
    Validate `value` against `validators` in declaration order.

    Returns:
        tuple[bool, str]: `(True, "")` when every validator accepts the value,
        otherwise `(False, message)` for the first one that rejects it.
    """
    document = Document(value if isinstance(value, str) else str(value))
    for validator in validators:
        try:
            validator.validate(document)
        except ValidationError as error:
            return False, error.message
    return True, ""


def int_range_validator(minimum: int, maximum: int) -> Validator:
    """Validator accepting integers from `minimum` to `maximum` inclusive."""

    def in_range(text: str) -> bool:
        try:
            return minimum <= int(text) <= maximum
        except ValueError:
            return False

    return Validator.from_callable(
        in_range,
        error_message=f"Invalid input. Enter a number between {minimum} and {maximum}.",
    )


def words_validator(
    keys: Sequence[str] | KeysView[str], error_message: str | None = None
) -> Validator:
    """Validator accepting one of `keys`, ignoring case."""
    accepted = {key.upper() for key in keys}

    if error_message is None:
        error_message = f"Invalid input. Choices: {{{', '.join(keys)}}}."

    return Validator.from_callable(
        lambda text: text.upper() in accepted, error_message=error_message
    )


def pattern_validator(pattern: str | re.Pattern, error_message: str | None = None) -> Validator:
    """Validator requiring the whole input to match a regular expression."""
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern

    if error_message is None:
        error_message = f"Invalid input. Expected a value matching '{compiled.pattern}'."

    return Validator.from_callable(
        lambda text: compiled.fullmatch(text) is not None, error_message=error_message
    )


class ListValidator(Validator):
    """
    Validates a separated list of words, such as values for `Coercion.LISTING`.

    Items are compared case-insensitively; an empty list is rejected.
    """

    def __init__(
        self,
        keys: Sequence[str] | KeysView[str],
        separator: str = ",",
        allow_duplicates: bool = True,
    ) -> None:
        self.keys = {key.upper() for key in keys}
        self.separator = separator
        self.allow_duplicates = allow_duplicates
        super().__init__()

    def validate(self, document: Document) -> None:
        items = [item.strip() for item in document.text.strip().split(self.separator)]
        if items == [""]:
            raise ValidationError(message="Select at least 1 item.")
        seen: set[str] = set()
        for item in items:
            if item.upper() not in self.keys:
                raise ValidationError(message=f"Invalid selection: {item}")
            if not self.allow_duplicates and item in seen:
                raise ValidationError(message=f"Duplicate selection: {item}")
            seen.add(item)
