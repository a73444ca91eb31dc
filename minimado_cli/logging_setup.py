"""
Logging configuration for the CLI.

Log records go to stderr through Rich so they do not mix with command
output on stdout. Only the package logger is configured; the root logger
is left alone so libraries (and pytest's caplog) behave normally.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "minimado_cli"


class CliLogHandler(RichHandler):
    """The stderr handler installed by setup_logging."""


def setup_logging(level: int = logging.WARNING) -> None:
    """
    Attach a stderr RichHandler to the package logger.

    Safe to call more than once: a handler added by an earlier call is
    replaced rather than duplicated.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if isinstance(handler, CliLogHandler):
            logger.removeHandler(handler)

    handler = CliLogHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=level <= logging.DEBUG,
        markup=False,
    )
    handler.setLevel(level)
    logger.addHandler(handler)
