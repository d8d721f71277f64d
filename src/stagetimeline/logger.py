# SPDX-License-Identifier: MIT

import logging

from rich.logging import RichHandler

LOGGER_NAME = "stagetimeline"


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return a logger under the application namespace."""
    if name != LOGGER_NAME and not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """
    Attach a rich handler to the application logger.

    Safe to call more than once; the handler is only added the first time and
    the level is updated on every call.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(name)s | %(message)s"))
        logger.addHandler(handler)

    if isinstance(level, str):
        level = logging.getLevelNamesMapping().get(level.upper(), logging.WARNING)
    logger.setLevel(level)
    return logger
