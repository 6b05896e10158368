"""Centralized logging configuration."""
import logging
import sys

HANDLER_NAME = "word-game-console"

# Third-party loggers that only matter when something goes wrong
QUIET_LOGGERS = ("uvicorn.access", "aiosqlite", "sqlalchemy.engine")


def setup_logging(level: int | str = logging.INFO) -> None:
    """
    Configure logging for the application.

    `level` may be a number or a name such as "debug". Calling this again
    replaces the console handler instead of adding a second one.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.set_name(HANDLER_NAME)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given module name."""
    return logging.getLogger(name)
