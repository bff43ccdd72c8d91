from __future__ import annotations

import sys

from loguru import logger

CONSOLE_FORMAT = "<level>{level: <8}</level> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def configure_logging(quiet: bool = False, log_file: str = "") -> None:
    """Reset loguru sinks for one command-line invocation.

    Quiet mode adds no console sink at all, so nothing reaches the terminal.
    A file sink is only added when ``log_file`` is set.
    """

    logger.remove()

    if not quiet:
        logger.add(sys.stderr, level="INFO", format=CONSOLE_FORMAT)

    if log_file:
        # rotation/retention/compression as in the desktop app's daily log
        logger.add(
            log_file,
            level="DEBUG",
            format=FILE_FORMAT,
            rotation="10 MB",
            retention="7 days",
            compression="zip",
            encoding="utf-8",
            backtrace=True,
            diagnose=False,
        )

    sys.excepthook = handle_exception


# Log uncaught exceptions instead of losing them
def handle_exception(exc_type, exc_value, exc_traceback):
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return
    logger.opt(exception=(exc_type, exc_value, exc_traceback)).critical("Uncaught exception")
