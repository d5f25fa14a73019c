"""Logging configuration for the CLI process.

Library modules only create ``logging.getLogger(__name__)`` loggers;
handlers are attached here, once, by the entry point.  Log records go
to stderr so they never mix with operation results on stdout.
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER: str = "userdb"

DEFAULT_LEVEL: int = logging.WARNING
VERBOSE_LEVEL: int = logging.DEBUG


def _build_handler() -> logging.Handler:
    """Return a Rich handler on stderr, or a plain stream handler without Rich."""
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(levelname)s %(name)s: %(message)s"),
        )
        return handler

    from userdb.cli.console import get_rich_console

    handler = RichHandler(
        console=get_rich_console(),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling this repeatedly replaces the previous handler instead of
    stacking duplicates.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(_build_handler())
    logger.setLevel(VERBOSE_LEVEL if verbose else DEFAULT_LEVEL)
    logger.propagate = False
    return logger
