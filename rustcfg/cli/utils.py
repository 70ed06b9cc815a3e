"""
Shared utilities for CLI commands.
"""

import logging
import sys
from typing import Optional

from rustcfg.core.settings import RustcSettings, load_settings

logger = logging.getLogger(__name__)


def settings_from_args(args) -> RustcSettings:
    """
    Resolve toolchain settings from parsed CLI arguments.

    ``--rustc`` wins over ``RUSTC``, which wins over the settings file.

    Args:
        args: Parsed arguments with optional ``config`` and ``rustc`` fields

    Returns:
        Resolved RustcSettings

    Raises:
        ConfigurationError: If the settings file is invalid
    """
    settings = load_settings(getattr(args, "config", None))

    rustc = getattr(args, "rustc", None)
    if rustc:
        logger.debug(f"Using rustc from command line: {rustc}")
        settings.rustc = rustc

    return settings


def print_error(message: str, details: Optional[str] = None):
    """
    Print error message to stderr in consistent format.

    Args:
        message: Main error message
        details: Optional additional details
    """
    print(f"ERROR: {message}", file=sys.stderr)
    if details:
        for line in details.rstrip().splitlines():
            print(f"  {line}", file=sys.stderr)
