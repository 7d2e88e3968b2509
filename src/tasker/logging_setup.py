"""Process-wide logging configuration."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "tasker"


def configure_logging(*, verbose: bool = False) -> None:
    """Send package log records to stderr; WARNING and above unless verbose.

    Call once per invocation. Handlers from a previous call are replaced, so
    repeated in-process invocations do not duplicate output.
    """

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        log_time_format="[%X]",
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
