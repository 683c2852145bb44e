"""
Tests for the dmc console logging and the --debug flag.
"""

import logging

import pytest
from click.testing import CliRunner

from dmcommon.cli.debug import add_debug_option
from dmcommon.cli.main import cli
from dmcommon.cli.utils.logging import (
    CONSOLE_HANDLER_NAME,
    ConsoleHandler,
    configure_logging,
    logger,
)


def console_handlers():
    return [h for h in logger.handlers if h.get_name() == CONSOLE_HANDLER_NAME]


@pytest.fixture(autouse=True)
def reset_logger():
    level = logger.level
    yield
    for handler in console_handlers():
        logger.removeHandler(handler)
    logger.setLevel(level)


@pytest.mark.short
class TestConfigureLogging:
    def test_single_console_handler(self):
        configure_logging(False)
        configure_logging(True)
        configure_logging(False)

        handlers = console_handlers()
        assert len(handlers) == 1
        assert isinstance(handlers[0], ConsoleHandler)

    def test_level_follows_debug_flag(self):
        assert configure_logging(True).level == logging.DEBUG
        assert configure_logging(False).level == logging.INFO

    def test_errors_go_to_stderr(self, capsys):
        configure_logging(True)

        logger.debug("debug line")
        logger.info("info line")
        logger.warning("warning line")
        logger.error("error line")

        captured = capsys.readouterr()
        assert "debug line" in captured.out
        assert "info line" in captured.out
        assert "warning line" not in captured.out
        assert "error line" not in captured.out
        assert "warning line" in captured.err
        assert "error line" in captured.err

    def test_debug_records_hidden_by_default(self, capsys):
        configure_logging(False)

        logger.debug("debug line")

        assert "debug line" not in capsys.readouterr().out


@pytest.mark.short
class TestDebugOption:
    def test_every_command_has_the_flag(self):
        assert any(p.name == "debug" for p in cli.params)
        for group in cli.commands.values():
            assert any(p.name == "debug" for p in group.params)
            for command in group.commands.values():
                assert any(p.name == "debug" for p in command.params)

    def test_added_once(self):
        add_debug_option(cli)
        assert sum(p.name == "debug" for p in cli.params) == 1

    @pytest.mark.parametrize(
        "args, level",
        [
            (["version", "parse", "10.3"], logging.INFO),
            (["--debug", "version", "parse", "10.3"], logging.DEBUG),
            (["version", "--debug", "parse", "10.3"], logging.DEBUG),
            (["version", "parse", "--debug", "10.3"], logging.DEBUG),
            (["--debug", "version", "parse", "--no-debug", "10.3"], logging.DEBUG),
            (["--no-debug", "version", "parse", "10.3"], logging.INFO),
        ],
    )
    def test_debug_on_any_level(self, args, level):
        result = CliRunner().invoke(cli, args)

        assert result.exit_code == 0
        assert logger.level == level
        assert len(console_handlers()) == 1
