"""Console logging configuration for the CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"
LOG_TIME_FORMAT = "[%X]"


def configure_logging(debug: bool = False) -> None:
    """Send log records to stderr through rich.

    Args:
        debug: Log at DEBUG instead of INFO
    """
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        log_time_format=LOG_TIME_FORMAT,
    )
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
        handlers=[handler],
        force=True,
    )
    # urllib3 connection chatter drowns out the inventory diagnostics
    logging.getLogger("urllib3").setLevel(logging.WARNING)
