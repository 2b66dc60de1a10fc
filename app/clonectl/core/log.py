"""Logging setup for the clonectl CLI.

Library modules only create loggers; handlers are installed here, once,
by the CLI entry point.
"""

import logging

from rich.logging import RichHandler

from clonectl.utils.formatting import err_console

LOGGER_NAME = "clonectl"


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Attach a Rich handler to the clonectl logger.

    Args:
        verbose: Log DEBUG and above.
        quiet: Log ERROR and above. Ignored when verbose is set.

    Returns:
        The configured "clonectl" logger.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=err_console, show_time=False, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger


def get_removal_sink() -> logging.Logger:
    """Logger handed to the removal core as its diagnostics sink."""
    return logging.getLogger(f"{LOGGER_NAME}.removal")
