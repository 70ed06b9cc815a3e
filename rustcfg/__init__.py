"""
rustcfg - runs ``rustc --print cfg`` and parses the output.

Usage:
    from rustcfg import cfg_of

    cfg = cfg_of("x86_64-unknown-linux-gnu")
    assert cfg.target_arch == "x86_64"
    assert cfg.target_family == "unix"

Inside a Cargo build script prefer the ``CARGO_CFG_*`` environment variables
Cargo already sets.
"""

from rustcfg.cfg import Cfg, cfg_of, parse_cfg, parse_cfg_output
from rustcfg.core.exceptions import (
    CfgError,
    CfgErrorKind,
    ConfigurationError,
    EncodingError,
    MissingFieldError,
    VersionParseError,
    RustcError,
    RustcfgError,
    SpawnError,
)
from rustcfg.core.settings import RustcSettings, load_settings
from rustcfg.toolchain.invoker import RustcInvoker

__all__ = [
    "Cfg",
    "cfg_of",
    "parse_cfg",
    "parse_cfg_output",
    "CfgError",
    "CfgErrorKind",
    "ConfigurationError",
    "EncodingError",
    "MissingFieldError",
    "VersionParseError",
    "RustcError",
    "RustcfgError",
    "SpawnError",
    "RustcSettings",
    "load_settings",
    "RustcInvoker",
]
