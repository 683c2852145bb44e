"""Console logging for the dmc command line."""

import logging
import sys

logger = logging.getLogger("dmcommon")

CONSOLE_HANDLER_NAME = "dmc-console"


class ConsoleHandler(logging.StreamHandler):
    """
    Write warnings and errors to stderr and all other records to stdout.

    The target stream is looked up per record, so output follows sys.stdout
    and sys.stderr when they are replaced after the handler was installed.
    """

    def __init__(self):
        super().__init__(sys.stdout)
        self.set_name(CONSOLE_HANDLER_NAME)
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        self.stream = sys.stderr if record.levelno >= logging.WARNING else sys.stdout
        super().emit(record)


def configure_logging(debug: bool) -> logging.Logger:
    """
    Set the dmcommon log level and make sure the console handler is installed.

    Called once per command level, so the handler is only added the first time.
    """
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if not any(h.get_name() == CONSOLE_HANDLER_NAME for h in logger.handlers):
        logger.addHandler(ConsoleHandler())
    return logger
