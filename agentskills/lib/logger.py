"""
Logging setup for agentskills.
"""

import logging
import sys
from typing import Optional

from agentskills.config import get_settings

PACKAGE_LOGGER = "agentskills"


def setup_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
) -> None:
    """Set up logging for the agentskills package.

    Logs go to stderr so that command output on stdout stays machine-readable.
    """
    settings = get_settings()

    log_level = getattr(logging, (level or settings.log_level).upper())
    log_format = format_string or settings.log_format

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)

    # Replace handlers so repeated calls don't duplicate output
    package_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(log_format))
    package_logger.addHandler(console_handler)
