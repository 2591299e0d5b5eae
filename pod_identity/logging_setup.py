"""Stdout logging configuration for the service loggers."""

import logging
import sys

ROOT_LOGGER_NAME = "pod_identity"


def logging_configure(log_level: str = "INFO") -> logging.Logger:
    """Attach a single stdout handler to the `pod_identity` logger tree.

    Request lines already carry their own timestamp, so records are written
    as the bare message. Repeated calls only update the level.

    Args:
        log_level: Logging level name.

    Returns:
        logging.Logger: Configured package root logger.

    Raises:
        ValueError: Raised when log_level is not a known level name.
    """

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(log_level.upper())
    logger.propagate = False
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
