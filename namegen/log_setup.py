"""Logging configuration for the command-line interface."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "namegen"


def configure_logging(verbose: bool = False, no_color: bool = False) -> logging.Logger:
    """Attach a Rich handler to the package logger.

    Library modules only create loggers; handlers are installed here, once,
    by the CLI. Diagnostics go to stderr so generated names stay clean on stdout.

    Args:
        verbose: If True, log at DEBUG instead of WARNING
        no_color: If True, disable colors in log output

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # replace the handler from an earlier call
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True, no_color=no_color),
        show_path=verbose,
        rich_tracebacks=verbose,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
