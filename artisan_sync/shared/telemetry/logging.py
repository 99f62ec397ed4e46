"""Logging configuration for the tool."""

import logging
import sys

from artisan_sync.core.config import get_settings


def setup_logging(debug: bool | None = None) -> None:
    """Configure process-wide logging.

    Level is DEBUG when debug (or settings.debug) is True, otherwise INFO.
    Output goes to stdout. httpx request lines are only shown at DEBUG.

    Args:
        debug: Override for settings.debug; None reads settings.
    """
    if debug is None:
        debug = get_settings().debug
    log_level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("httpx").setLevel(logging.DEBUG if debug else logging.WARNING)

