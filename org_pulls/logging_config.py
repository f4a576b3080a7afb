"""Logging setup for command line runs."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Attach a rich stderr handler to the package logger.

    Progress messages ("Getting <org> repositories, page #N") go to stderr so
    stdout carries only the report.

    Args:
        verbose: Log at DEBUG instead of INFO

    Returns:
        The configured ``org_pulls`` logger
    """
    logger = logging.getLogger("org_pulls")
    if not logger.handlers:
        handler = RichHandler(
            console=Console(stderr=True), show_path=False, markup=False
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
