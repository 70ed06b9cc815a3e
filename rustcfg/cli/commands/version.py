"""
Version command implementation.

Reports which rustc would be queried and its version.
"""

import logging

from rustcfg.cli.utils import print_error, settings_from_args
from rustcfg.core.exceptions import CfgError, VersionParseError
from rustcfg.toolchain.invoker import RustcInvoker

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the version command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    invoker = RustcInvoker(settings_from_args(args))
    executable = invoker.resolve_executable()

    try:
        rustc_version = invoker.version()
    except (CfgError, VersionParseError) as e:
        print_error(f"Could not query {executable}", str(e))
        return 1

    print(f"rustc:   {executable}")
    print(f"release: {rustc_version.release}")
    print(f"channel: {rustc_version.channel}")
    return 0
