"""Logging configuration for Mustalah.

All modules obtain loggers through :func:`get_logger` so that records land
under the ``mustalah`` namespace and can be tuned from the CLI flags.
"""

import logging
import sys

ROOT_LOGGER_NAME = "mustalah"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"

_HANDLER_TAG = "_mustalah_handler"


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the ``mustalah`` namespace.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        Logger instance
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the ``mustalah`` logger for CLI use.

    Log records go to stderr so that report output on stdout stays clean.
    Calling this repeatedly replaces the level without stacking handlers.

    Args:
        verbose: Emit DEBUG records
        quiet: Only emit ERROR records (ignored when verbose is set)
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    handler = next(
        (h for h in logger.handlers if getattr(h, _HANDLER_TAG, False)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        setattr(handler, _HANDLER_TAG, True)
        logger.addHandler(handler)
    else:
        handler.setStream(sys.stderr)
    handler.setLevel(level)
