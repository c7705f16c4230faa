import sys
from io import StringIO

import pytest
from rich.console import Console

from cmdtree import App, Coercion
from cmdtree.exceptions import UnexpectedExtraArgumentError, UnknownCommandError
from cmdtree.signals import HelpSignal, VersionSignal
from cmdtree.themes import get_nord_theme


def record_console() -> Console:
    return Console(file=StringIO(), width=100, color_system=None, theme=get_nord_theme())


def make_app(**kwargs) -> App:
    return App(
        "tool",
        version="1.2.3",
        console=record_console(),
        error_console=record_console(),
        **kwargs,
    )


def output(console: Console) -> str:
    return console.file.getvalue()


def test_version_string_template():
    app = make_app()
    assert app.get_version() == "1.2.3"
    assert app.get_version_string() == "tool 1.2.3"


def test_version_string_keeps_unknown_keys():
    app = make_app(version_string="${name} v${version} (${build})")
    assert app.get_version_string() == "tool v1.2.3 (${build})"


def test_set_version():
    app = make_app()
    assert app.set_version("2.0.0") is app
    assert app.get_version_string() == "tool 2.0.0"


def test_version_option_prints_and_signals():
    app = make_app()
    with pytest.raises(VersionSignal):
        app.parse(["--version"])
    assert output(app.console).strip() == "tool 1.2.3"


def test_help_option_prints_root_help():
    app = make_app(help="Does things.")
    with pytest.raises(HelpSignal):
        app.parse(["-h"])
    text = output(app.console)
    assert "tool -- Does things." in text
    assert "Usage:" in text


def test_default_name_is_program_invocation(monkeypatch):
    monkeypatch.setattr("cmdtree.app.get_program_invocation", lambda: "prog")
    assert App(console=record_console()).get_name() == "prog"


def test_implicit_help_command_added_once():
    app = make_app()
    assert not app.has_command("help")
    app.add_command("build")
    app.add_command("clean")
    assert [command.name for command in app.get_commands()] == ["help", "build", "clean"]
    help_command = app.get_command("help")
    assert [operand.name for operand in help_command.get_operands()] == ["command"]
    assert help_command.get_operands()[0].get_expected()[0] == 0


def test_user_defined_help_command_replaces_implicit():
    app = make_app()
    custom = app.add_command("help", help="My help.")
    app.add_command("build")
    assert app.get_command("help") is custom
    assert not custom.has_operands()


def test_help_command_renders_nested_command():
    app = make_app()
    remote = app.add_command("remote", help="Manage remotes.")
    remote.add_command("add", help="Add a remote.").add_operand("url", 1)
    with pytest.raises(HelpSignal):
        app.parse(["help", "remote", "add"])
    text = output(app.console)
    assert "add -- Add a remote." in text
    assert "tool remote [ARGUMENTS] add <url>" in text


def test_help_command_without_names_renders_root():
    app = make_app()
    app.add_command("build", help="Build it.")
    with pytest.raises(HelpSignal):
        app.parse(["help"])
    assert "build    Build it." in output(app.console)


def test_help_command_unknown_name():
    app = make_app()
    app.add_command("build")
    with pytest.raises(UnknownCommandError):
        app.parse(["help", "deploy"])


def test_parse_rejects_leftover_tokens():
    app = make_app()
    with pytest.raises(UnexpectedExtraArgumentError) as excinfo:
        app.parse(["extra", "more"])
    assert str(excinfo.value) == 'too many arguments for "extra"'
    assert excinfo.value.token == "extra"


def test_parse_uses_sys_argv(monkeypatch):
    calls = []
    app = make_app()
    app.add_option("verbose", "-v", Coercion.COUNT)
    app.set_action(lambda options, operands: calls.append(options))
    monkeypatch.setattr(sys, "argv", ["tool", "-vv"])
    assert app.parse() == []
    assert calls == [{"verbose": 2}]


def test_run_success_returns():
    calls = []
    app = make_app()
    app.add_command("build", action=lambda options, operands: calls.append("build"))
    app.run(["build"])
    assert calls == ["build"]


def test_run_argument_error_exits_1():
    app = make_app()
    with pytest.raises(SystemExit) as excinfo:
        app.run(["--nope"])
    assert excinfo.value.code == 1
    assert output(app.error_console).strip() == '❌ unknown argument "--nope"'
    assert output(app.console) == ""


def test_run_help_exits_0():
    app = make_app()
    with pytest.raises(SystemExit) as excinfo:
        app.run(["--help"])
    assert excinfo.value.code == 0
    assert "Options:" in output(app.console)


def test_run_version_exits_0():
    app = make_app()
    with pytest.raises(SystemExit) as excinfo:
        app.run(["--version"])
    assert excinfo.value.code == 0


def test_run_keyboard_interrupt_exits_130():
    def interrupt(options, operands):
        raise KeyboardInterrupt

    app = make_app(action=interrupt)
    with pytest.raises(SystemExit) as excinfo:
        app.run([])
    assert excinfo.value.code == 130
