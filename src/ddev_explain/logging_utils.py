"""Logging setup for the command line."""

import logging

DEFAULT_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """Send ddev_explain log records to stderr at the given level."""
    logger = logging.getLogger("ddev_explain")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=DEFAULT_LOG_FORMAT))
    handler.setLevel(level)
    logger.addHandler(handler)
    return logger
