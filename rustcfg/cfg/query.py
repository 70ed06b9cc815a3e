"""
Query the cfg of a target triple.

Usage:
    from rustcfg.cfg.query import cfg_of

    cfg = cfg_of("x86_64-unknown-linux-gnu")
    print(cfg.target_arch)  # 'x86_64'
    print(cfg.target_family)  # 'unix'
"""

import logging
from typing import Optional

from rustcfg.cfg.model import Cfg, parse_cfg_output
from rustcfg.core.settings import RustcSettings
from rustcfg.toolchain.invoker import RustcInvoker

logger = logging.getLogger(__name__)


def cfg_of(
    target: str,
    settings: Optional[RustcSettings] = None,
    invoker: Optional[RustcInvoker] = None,
) -> Cfg:
    """
    Run ``rustc --target <target> --print cfg`` and parse the output.

    Args:
        target: Target triple (e.g., 'x86_64-unknown-linux-gnu')
        settings: Toolchain settings; read from the environment if omitted
        invoker: Invoker to use; built from settings if omitted

    Returns:
        Parsed Cfg

    Raises:
        SpawnError: If rustc could not be started
        RustcError: If rustc exited non-zero
        EncodingError: If rustc output is not valid UTF-8
        MissingFieldError: If a required key is absent from the output
    """
    if invoker is None:
        invoker = RustcInvoker(settings or RustcSettings.from_env())

    text = invoker.check(invoker.print_cfg(target))
    cfg = parse_cfg_output(text)
    logger.debug(
        f"{target}: {cfg.target_arch}/{cfg.target_os} "
        f"({len(cfg.target_feature)} features)"
    )
    return cfg
