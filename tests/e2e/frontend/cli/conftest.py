"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits structured log
messages, plus fixtures to register that command, obtain a CliRunner, and
run tests within an isolated filesystem.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from purse.entrypoints.cli.main import purse

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages for console and log-file tests."""
    logger = logging.getLogger("purse.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and its internal sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command for the duration of a test."""
    purse.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(purse, "log-demo")


@pytest.fixture
def runner():
    """Return a CliRunner that ignores PURSE_* settings from the outer shell."""
    return CliRunner(
        env={"PURSE_LOG_FILE": None, "PURSE_LOGGER_LEVELS": None, "PURSE_RAND_SEED": None}
    )


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated filesystem so log files stay local."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def invoke(runner, fs):  # pylint: disable=unused-argument
    """Invoke `purse` with optional stdin text."""

    def _invoke(args: list[str], input: str | None = None, env=None):  # pylint: disable=redefined-builtin
        return runner.invoke(purse, args, input=input, env=env)

    return _invoke
