# cmdtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by cmdtree.

Declaration errors are raised while a command tree is being built (malformed
flag specs, bad arity values, invalid settings, duplicate subcommands).
Argument errors are raised by `Command.parse()` when the token list does not
match the declared tree. Both are fail-fast: the first problem found is the
one reported.

All exceptions inherit from `CmdTreeError`, the base exception for the package.

Exception Hierarchy:
- CmdTreeError
    ├── DeclarationError
    │   ├── InvalidFlagSpecError
    │   ├── InvalidArityError
    │   ├── InvalidSettingsError
    │   └── CommandAlreadyExistsError
    └── CommandArgumentError
        ├── UnknownOptionError
        ├── MissingOptionValueError
        ├── UnexpectedOptionValueError
        ├── InvalidOptionValueError
        ├── InvalidOperandValueError
        ├── MissingRequiredOptionError
        ├── TooFewOperandsError
        ├── TooManyOperandsError
        ├── UnexpectedExtraArgumentError
        └── UnknownCommandError

`CommandArgumentError` subclasses are user-facing; `App.run()` turns them
into a one-line diagnostic and a non-zero exit status.
"""


class CmdTreeError(Exception):
    """Base exception for cmdtree."""


class DeclarationError(CmdTreeError):
    """Exception raised when a command tree is declared incorrectly."""


class InvalidFlagSpecError(DeclarationError):
    """Exception raised when an option flag spec cannot be parsed."""


class InvalidArityError(DeclarationError):
    """Exception raised when an operand arity is not an int >= 0 or one of '?', '*', '+'."""


class InvalidSettingsError(DeclarationError):
    """Exception raised when the settings of an option, operand or command are invalid."""


class CommandAlreadyExistsError(DeclarationError):
    """Exception raised when a subcommand with the same name already exists."""


class CommandArgumentError(CmdTreeError):
    """Exception raised when the arguments do not match the command tree."""


class UnknownOptionError(CommandArgumentError):
    """Exception raised when a token looks like a flag but no option declares it."""

    def __init__(self, flag: str):
        super().__init__(f'unknown argument "{flag}"')
        self.flag = flag


class MissingOptionValueError(CommandArgumentError):
    """Exception raised when a value-taking option has no value available."""

    def __init__(self, flag: str):
        super().__init__(f'value missing for argument "{flag}"')
        self.flag = flag


class UnexpectedOptionValueError(CommandArgumentError):
    """Exception raised when a value is attached to an option that takes none."""

    def __init__(self, flag: str):
        super().__init__(f'argument "{flag}" does not take a value')
        self.flag = flag


class InvalidOptionValueError(CommandArgumentError):
    """Exception raised when a validator or coercion rejects an option value."""


class InvalidOperandValueError(CommandArgumentError):
    """Exception raised when a validator or coercion rejects an operand value."""


class MissingRequiredOptionError(CommandArgumentError):
    """Exception raised when a required option is absent."""

    def __init__(self, flags: tuple[str, ...]):
        super().__init__(f'required argument is missing "{" | ".join(flags)}"')
        self.flags = flags


class TooFewOperandsError(CommandArgumentError):
    """Exception raised when fewer operands are given than the command requires."""


class TooManyOperandsError(CommandArgumentError):
    """Exception raised when more operands are given than the command accepts."""


class UnexpectedExtraArgumentError(CommandArgumentError):
    """Exception raised when tokens are left over after the whole tree was parsed."""

    def __init__(self, token: str):
        super().__init__(f'too many arguments for "{token}"')
        self.token = token


class UnknownCommandError(CommandArgumentError):
    """Exception raised when a lookup names an undeclared subcommand."""

    def __init__(self, name: str):
        super().__init__(f'unknown command "{name}"')
        self.name = name
