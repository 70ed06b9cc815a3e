"""
Targets command implementation.

Lists the targets rustc knows about and, with ``--check``, parses the cfg of
each one.
"""

import logging

from rustcfg.cfg.query import cfg_of
from rustcfg.cli.utils import print_error, settings_from_args
from rustcfg.core.exceptions import CfgError
from rustcfg.toolchain.invoker import RustcInvoker

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the targets command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 if listing or any check failed)
    """
    logger.debug(f"Arguments: {args}")

    invoker = RustcInvoker(settings_from_args(args))

    try:
        targets = invoker.print_target_list()
    except CfgError as e:
        print_error("Could not list targets", str(e))
        return 1

    if not args.check:
        for target in targets:
            print(target)
        return 0

    failed = []
    for target in targets:
        try:
            cfg = cfg_of(target, invoker=invoker)
        except CfgError as e:
            failed.append(target)
            print(f"{target}: FAILED ({e.kind.value}) {e}")
            continue
        print(f"{target}: {cfg.target_arch} {cfg.target_os} {cfg.target_pointer_width}")

    logger.info(f"Checked {len(targets)} targets, {len(failed)} failed")
    return 1 if failed else 0
