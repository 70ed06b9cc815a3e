"""
Parsing and querying of ``rustc --print cfg`` output.
"""

from rustcfg.cfg.parser import parse_cfg, strip_quotes
from rustcfg.cfg.model import (
    Cfg,
    parse_cfg_output,
    REQUIRED_KEYS,
    OPTIONAL_KEYS,
    MULTI_VALUED_KEYS,
)
from rustcfg.cfg.query import cfg_of

__all__ = [
    "parse_cfg",
    "strip_quotes",
    "Cfg",
    "parse_cfg_output",
    "REQUIRED_KEYS",
    "OPTIONAL_KEYS",
    "MULTI_VALUED_KEYS",
    "cfg_of",
]
