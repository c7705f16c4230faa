# cmdtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `App`, the root command of a command-line application.

`App` is a `Command` that adds what a real program needs around the matcher:

- a `--version` option printing the templated version string
- `-h | --help` on the root, printing the root help page
- an implicit `help [command ...]` subcommand, added together with the first
  subcommand, printing the help page of any command in the tree
- `parse()` defaulting to `sys.argv[1:]` and rejecting leftover tokens
- `run()`, which turns argument errors into a one-line diagnostic on stderr
  and exit status 1, and help/version output into exit status 0

Example:
    app = App("backup", version="1.2.0")
    app.add_option("verbose", "-v, --verbose", Coercion.COUNT, help="More output.")
    create = app.add_command("create", help="Create a backup.", action=on_create)
    create.add_operand("source", "+", help="Paths to back up.")

    if __name__ == "__main__":
        app.run()
"""
from __future__ import annotations

import re
import sys
from typing import Any, Mapping, Sequence

from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape

from cmdtree.console import console as default_console
from cmdtree.console import error_console as default_error_console
from cmdtree.exceptions import CommandArgumentError, UnexpectedExtraArgumentError
from cmdtree.help import render_help
from cmdtree.logger import logger
from cmdtree.parser.command import Command
from cmdtree.parser.settings import CommandSettings, load_settings
from cmdtree.signals import FlowSignal, HelpSignal, VersionSignal
from cmdtree.themes import OneColors
from cmdtree.utils import get_program_invocation

TEMPLATE_KEY = re.compile(r"\$\{(.+?)\}")


class App(Command):
    """
    Root command of an application.

    Args:
        name (str | None): Program name; defaults to how the program was invoked.
        version (str): Version reported by `--version`.
        version_string (str): Template for the version output. `${name}` and
            `${version}` are replaced; unknown keys are kept as they are.
        config (Mapping | CommandSettings | None): help, description, example, action.
        console (Console | None): Console for help and version output.
        error_console (Console | None): Console for diagnostics.
        **settings: Overrides merged into `config`.
    """

    def __init__(
        self,
        name: str | None = None,
        version: str = "0.0.0",
        version_string: str = "${name} ${version}",
        config: Mapping[str, Any] | BaseModel | None = None,
        console: Console | None = None,
        error_console: Console | None = None,
        **settings: Any,
    ) -> None:
        super().__init__(
            name or get_program_invocation(),
            settings=load_settings(CommandSettings, config, **settings),
        )
        self.version: str = version
        self.version_string: str = version_string
        self.console: Console = console or default_console
        self.error_console: Console = error_console or default_error_console

        self.add_option("version", "--version", True, help="Print version info.").set_action(
            self._version_action
        )
        self.add_option("help", "-h, --help", True, help="Show this help message.").set_action(
            self._help_option_action
        )

    def get_version(self) -> str:
        return self.version

    def set_version(self, version: str) -> App:
        self.version = version
        return self

    def get_version_string(self) -> str:
        """Return the version template with its known `${key}` placeholders filled in."""
        values = {"name": self.name, "version": self.version}

        def replace(match: re.Match) -> str:
            return values.get(match.group(1), match.group(0))

        return TEMPLATE_KEY.sub(replace, self.version_string)

    def print_version(self) -> None:
        self.console.print(escape(self.get_version_string()), style="version", highlight=False)

    def print_help(self, command: Command | None = None) -> None:
        render_help(command or self, self.console)

    def _version_action(self) -> None:
        self.print_version()
        raise VersionSignal()

    def _help_option_action(self) -> None:
        self.print_help()
        raise HelpSignal()

    def _help_command_action(
        self, options: dict[str, Any], operands: dict[str, list[Any]]
    ) -> None:
        self.print_help(self.find_command(operands.get("command", [])))
        raise HelpSignal()

    def add_command(
        self,
        name: str,
        config: Mapping[str, Any] | BaseModel | None = None,
        **settings: Any,
    ) -> Command:
        """
        Define a new subcommand.

        The first subcommand also adds the implicit `help` command, unless the
        subcommand being added is itself called `help`.
        """
        if name != "help" and not self.has_command("help"):
            help_command = super().add_command(
                "help", help="Show help for a command.", action=self._help_command_action
            )
            help_command.add_operand("command", "*", help="Command to get help for.")
        return super().add_command(name, config, **settings)

    def parse(self, tokens: Sequence[str] | None = None) -> list[str]:
        """
        Parse the command line; uses `sys.argv[1:]` if no tokens are given.

        Raises:
            UnexpectedExtraArgumentError: If tokens remain after the whole tree was parsed.
            CommandArgumentError: On any other argument error.
            HelpSignal: After help was printed.
            VersionSignal: After the version was printed.
        """
        if tokens is None:
            tokens = sys.argv[1:]
        leftover = super().parse(tokens)
        if leftover:
            raise UnexpectedExtraArgumentError(leftover[0])
        return leftover

    def run(self, tokens: Sequence[str] | None = None) -> None:
        """
        Parse the command line and exit the process on failure.

        Exit codes:
            0: help or version output was requested
            1: the arguments did not match the command tree
            130: interrupted with Ctrl+C
        """
        try:
            self.parse(tokens)
        except CommandArgumentError as error:
            logger.debug("[%s] Argument error: %s", self.name, error)
            self.error_console.print(f"[{OneColors.DARK_RED}]❌ {escape(str(error))}[/]")
            sys.exit(1)
        except FlowSignal as signal:
            logger.debug("[%s] %s", self.name, signal)
            sys.exit(0)
        except KeyboardInterrupt:
            logger.info("[%s] Interrupted by user.", self.name)
            sys.exit(130)
