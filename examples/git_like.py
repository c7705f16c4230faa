from enum import Enum
from pathlib import Path

from cmdtree import App, Coercion
from cmdtree.console import console
from cmdtree.utils import setup_logging
from cmdtree.validators import int_range_validator, pattern_validator

setup_logging(log_filename=None)


class Strategy(Enum):
    MERGE = "merge"
    REBASE = "rebase"


def on_root(options, operands):
    if options.get("verbose"):
        console.print(f"[dim]verbosity: {options['verbose']}[/]")


def on_clone(options, operands):
    depth = options.get("depth")
    console.print(
        f"Cloning {operands['url'][0]} into {operands.get('directory', ['.'])[0]}"
        + (f" (depth {depth})" if depth else "")
    )


def on_commit(options, operands):
    message = "\n\n".join(options["message"])
    console.print(f"Committing {operands.get('paths', ['all changes'])}: {message!r}")


def on_pull(options, operands):
    console.print(f"Pulling with strategy {options.get('strategy', Strategy.MERGE).value}")


def on_remote_add(options, operands):
    console.print(f"Adding remote {operands['name'][0]} -> {operands['url'][0]}")


app = App(
    "gitlike",
    version="0.1.0",
    version_string="${name} version ${version}",
    help="A tiny git-like tool.",
    description="Demonstrates nested subcommands, options and operands.",
    example="gitlike -vv clone https://example.org/repo.git work",
    action=on_root,
)
app.add_option("verbose", "-v, --verbose", Coercion.COUNT, help="Increase verbosity.")
app.add_option("config", "-c <key=value>", Coercion.KV, help="Override a config value.")

clone = app.add_command("clone", help="Clone a repository.", action=on_clone)
clone.add_option("depth", "--depth <n>", int, help="Shallow clone depth.").add_validator(
    int_range_validator(1, 1000)
)
clone.add_operand("url", 1, help="Repository URL.").add_validator(
    pattern_validator(r"(https?|ssh)://\S+", "URL must start with http(s):// or ssh://")
)
clone.add_operand("directory", "?", type=Path, help="Target directory.")

commit = app.add_command("commit", help="Record changes.", action=on_commit)
commit.add_option(
    "message", "-m, --message <msg>", Coercion.COLLECT, required=True, help="Commit message."
)
commit.add_operand("paths", "*", help="Files to commit.")

pull = app.add_command("pull", help="Fetch and integrate.", action=on_pull)
pull.add_option("strategy", "-s, --strategy <name>", Strategy, help="merge or rebase.")

remote = app.add_command("remote", help="Manage remotes.")
remote_add = remote.add_command("add", help="Add a remote.", action=on_remote_add)
remote_add.add_operand("name", 1, help="Remote name.")
remote_add.add_operand("url", 1, help="Remote URL.")

if __name__ == "__main__":
    app.run()
