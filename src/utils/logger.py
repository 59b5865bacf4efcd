import logging
import os

from rich.logging import RichHandler

DEFAULT_LOGGER_NAME = "ProductManager"


class CenteredFormatter(logging.Formatter):
    """Centers logger names in a column as wide as the longest name seen."""

    longest_name_length = 14

    def __init__(self, fmt=None, datefmt=None, style="%", initial_width=14):
        super().__init__(fmt, datefmt, style)
        CenteredFormatter.longest_name_length = initial_width

    def format(self, record):
        width = max(CenteredFormatter.longest_name_length, len(record.name))
        CenteredFormatter.longest_name_length = width
        record.name = record.name.center(width)
        return super().format(record)


def _log_level() -> int:
    return logging.DEBUG if os.getenv("DEBUG") else logging.INFO


def get_logger(name=None) -> logging.Logger:
    """
    Return a logger printing through RichHandler.

    Set the DEBUG environment variable to see registry and form events.
    """
    logger = logging.getLogger(name or DEFAULT_LOGGER_NAME)
    level = _log_level()
    logger.setLevel(level)

    if not logger.handlers:
        handler = RichHandler(
            show_time=True,
            show_level=True,
            show_path=False,
            rich_tracebacks=True,
            log_time_format="[%X]",
        )
        handler.setFormatter(CenteredFormatter("[%(name)s]  %(message)s"))
        handler.setLevel(level)
        logger.addHandler(handler)

        # keep records away from the root logger, textual owns the terminal
        logger.propagate = False
        logger.debug(f"Logger for '{logger.name}' initialized.")

    return logger
