# cmdtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Help text generation for command trees.

The help page of a command lists, in order:
- Command: name and one-line help
- Usage: the path from the root command followed by option, operand and
  subcommand usage, wrapped at 78 columns
- Description, Options, Operands, Commands and Example sections, each only
  when there is something to show

Usage notation:
- `[-v | --verbose]`: optional option, `(-o | --output <file>)`: required option
- `<name>`: required operand value, `[name]`: optional value,
  `[name ...]`: any number of further values
- `<command> [ARGUMENTS]`: the command has subcommands

`format_help()` returns the page as plain text, `render_help()` prints it
through a Rich console using the `help.*` theme styles.
"""
from __future__ import annotations

import math
import textwrap

from rich.console import Console
from rich.markup import escape

from cmdtree.console import console as default_console
from cmdtree.parser.command import Command
from cmdtree.parser.operand import Operand
from cmdtree.parser.option import Option

WIDTH = 78
INDENT = " " * 4
ITEM_INDENT = " " * 10

HelpLine = tuple[str, str]


def _wrap(text: str, indent: str = INDENT) -> list[str]:
    """Wrap every paragraph of `text` on its own."""
    lines: list[str] = []
    for paragraph in text.splitlines():
        wrapped = textwrap.wrap(
            paragraph, WIDTH, initial_indent=indent, subsequent_indent=indent
        )
        lines.extend(wrapped or [""])
    return lines


def _sort_key(option: Option) -> str:
    return option.flags[0].lstrip("-").lower() if option.flags else ""


def get_option_usage(option: Option) -> str:
    """Return the usage notation of an option, e.g. `[-o | --output <file>]`."""
    usage = " | ".join(option.flags)
    if option.takes_value:
        usage = f"{usage} <{option.variable}>"
    if option.required:
        return f"({usage})" if option.flags else usage
    return f"[{usage}]"


def get_operand_usage(operand: Operand) -> str:
    """Return the usage notation of an operand, e.g. `<file> [file ...]`."""
    usage = []
    minimum, maximum = operand.get_expected()
    if minimum > 0:
        usage.append(" ".join([f"<{operand.variable}>"] * minimum))
    if maximum == math.inf:
        usage.append(f"[{operand.variable} ...]")
    elif minimum == 0:
        usage.append(f"[{operand.variable}]")
    return " ".join(usage)


def get_usage(command: Command) -> list[str]:
    """Return the usage items of a command: options, operands, subcommand marker."""
    usage = [get_option_usage(option) for option in sorted(command.get_options(), key=_sort_key)]
    usage.extend(get_operand_usage(operand) for operand in command.get_operands())
    if command.has_commands():
        usage.append("<command> [ARGUMENTS]")
    return usage


def _usage_lines(command: Command) -> list[str]:
    path = command.get_path()
    prefix = f"{INDENT}{path[0]} {' [ARGUMENTS] '.join(path[1:])}".rstrip() + " "
    lines: list[str] = []
    buffer = prefix
    for item in get_usage(command):
        if len(buffer) + len(item) <= WIDTH or buffer == prefix:
            buffer += item + " "
        else:
            lines.append(buffer.rstrip())
            buffer = " " * len(prefix) + item + " "
    lines.append(buffer.rstrip())
    return lines


def _help_sections(command: Command) -> list[tuple[str, list[HelpLine]]]:
    """Build the help page as `(heading, [(line, style), ...])` sections."""
    title = command.name
    if command.get_help():
        title = f"{title} -- {command.get_help()}"
    sections: list[tuple[str, list[HelpLine]]] = [
        ("Command:", [(line, "help.command") for line in _wrap(title)]),
        ("Usage:", [(line, "help.text") for line in _usage_lines(command)]),
    ]

    if command.get_description():
        sections.append(
            ("Description:", [(line, "help.text") for line in _wrap(command.get_description())])
        )

    if command.has_options():
        lines: list[HelpLine] = []
        for option in sorted(command.get_options(), key=_sort_key):
            lines.append((f"{INDENT}{' | '.join(option.flags)}", "help.flag"))
            if option.get_help():
                lines.extend((line, "help.text") for line in _wrap(option.get_help(), ITEM_INDENT))
        sections.append(("Options:", lines))

    if command.has_operands():
        lines = []
        for operand in command.get_operands():
            lines.append((f"{INDENT}{operand.name}", "help.operand"))
            if operand.get_help():
                lines.extend((line, "help.text") for line in _wrap(operand.get_help(), ITEM_INDENT))
        sections.append(("Operands:", lines))

    if command.has_commands():
        commands = sorted(command.get_commands(), key=lambda child: child.name)
        size = max(len(child.name) for child in commands)
        sections.append(
            (
                "Commands:",
                [
                    (f"{INDENT}{child.name:<{size}}{INDENT}{child.get_help()}".rstrip(), "help.command")
                    for child in commands
                ],
            )
        )

    if command.get_example():
        sections.append(
            ("Example:", [(line, "help.text") for line in _wrap(command.get_example())])
        )
    return sections


def format_help(command: Command) -> str:
    """Return the help page of `command` as plain text."""
    blocks = []
    for heading, lines in _help_sections(command):
        blocks.append("\n".join([heading, *(line for line, _ in lines)]))
    return "\n\n".join(blocks) + "\n"


def render_help(command: Command, console: Console | None = None) -> None:
    """Print the help page of `command` using Rich styles."""
    console = console or default_console
    for index, (heading, lines) in enumerate(_help_sections(command)):
        if index:
            console.print()
        console.print(f"[help.heading]{heading}[/]")
        for line, style in lines:
            console.print(escape(line), style=style, highlight=False, soft_wrap=True)
