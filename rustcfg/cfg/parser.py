"""
Line grammar of ``rustc --print cfg`` output.

Each line is either a bare predicate (``unix``, ``debug_assertions``) or a
``key="value"`` pair. This module only turns text into an ordered multimap of
key to values; deciding which keys matter is left to :mod:`rustcfg.cfg.model`.
"""

from typing import Dict, List


def strip_quotes(value: str) -> str:
    """
    Remove one outermost pair of double quotes, if present.

    Inner quotes and escapes are left untouched.

    Example:
        >>> strip_quotes('"x86_64"')
        'x86_64'
        >>> strip_quotes('""')
        ''
    """
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


def parse_cfg(text: str) -> Dict[str, List[str]]:
    """
    Parse cfg output into an ordered multimap.

    Entries are separated by ``\\n`` or ``\\r\\n`` only; other line-break
    characters stay inside values. Lines are split at the first ``=`` only.
    Lines without ``=`` are bare predicates and carry no value, so they are
    skipped. Keys keep their first-seen order and values keep emission order.

    Args:
        text: Decoded standard output of ``rustc --print cfg``

    Returns:
        Dictionary mapping each key to every value emitted for it

    Example:
        >>> parse_cfg('target_os="linux"\\nunix\\ntarget_feature="sse"\\n')
        {'target_os': ['linux'], 'target_feature': ['sse']}
    """
    entries: Dict[str, List[str]] = {}

    for line in text.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        if not line:
            continue

        key, sep, raw_value = line.partition("=")
        if not sep:
            continue

        entries.setdefault(key, []).append(strip_quotes(raw_value))

    return entries
