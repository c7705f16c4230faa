import logging

import pytest
from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

from cmdtree.utils import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers = handlers
    root.setLevel(level)


def test_setup_logging_cli_mode(restore_root_logger, tmp_path):
    log_file = tmp_path / "cmdtree.log"
    setup_logging(mode="cli", log_filename=str(log_file))
    handlers = restore_root_logger.handlers
    assert isinstance(handlers[0], RichHandler)
    assert handlers[0].level == logging.WARNING
    assert isinstance(handlers[1], logging.FileHandler)
    logging.getLogger("cmdtree").debug("hello from test")
    handlers[1].flush()
    assert "[cmdtree] [DEBUG] hello from test" in log_file.read_text()


def test_setup_logging_json_mode_from_env(restore_root_logger, monkeypatch):
    monkeypatch.setenv("CMDTREE_LOG_MODE", "json")
    setup_logging(log_filename=None)
    handlers = restore_root_logger.handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0].formatter, JsonFormatter)


def test_setup_logging_json_file(restore_root_logger, tmp_path):
    setup_logging(mode="cli", log_filename=str(tmp_path / "x.log"), json_log_to_file=True)
    assert isinstance(restore_root_logger.handlers[1].formatter, JsonFormatter)


def test_setup_logging_invalid_mode(restore_root_logger):
    with pytest.raises(ValueError):
        setup_logging(mode="xml", log_filename=None)


def test_parse_emits_debug_traces(caplog):
    from cmdtree.parser import Command

    command = Command("tool")
    command.add_option("verbose", "-v")
    with caplog.at_level(logging.DEBUG, logger="cmdtree"):
        command.parse(["-v"])
    assert "[Command:tool] Matched '-v'" in caplog.text
