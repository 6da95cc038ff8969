"""Logging setup for the command-line tools."""

import logging
import sys

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr.

    Args:
        verbose: Emit DEBUG records (skipped diff lines, input sizes) when
            True, otherwise only warnings and errors
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
