"""
Typed result of ``rustc --print cfg``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from rustcfg.core.exceptions import MissingFieldError
from rustcfg.cfg.parser import parse_cfg

# Checked in this order; the first absent key is reported.
REQUIRED_KEYS = (
    "target_os",
    "target_arch",
    "target_endian",
    "target_pointer_width",
    "target_env",
)
OPTIONAL_KEYS = ("target_family", "target_vendor")
MULTI_VALUED_KEYS = ("target_has_atomic", "target_feature")


@dataclass(frozen=True)
class Cfg:
    """
    Configuration predicates rustc exposes for one target.

    Attributes:
        target_os: ``cfg(target_os = "..")``, e.g. 'linux'
        target_family: ``cfg(unix)`` / ``cfg(windows)``; None on targets
            without a family (bare metal)
        target_arch: ``cfg(target_arch = "..")``, e.g. 'x86_64'
        target_endian: 'little' or 'big'
        target_pointer_width: Pointer width in bits as a string, e.g. '64'
        target_env: ``cfg(target_env = "..")``; may be the empty string
        target_vendor: ``cfg(target_vendor = "..")``; None if not emitted
        target_has_atomic: Supported atomic widths in emission order
        target_feature: Enabled CPU features in emission order
    """

    target_os: str
    target_arch: str
    target_endian: str
    target_pointer_width: str
    target_env: str
    target_family: Optional[str] = None
    target_vendor: Optional[str] = None
    target_has_atomic: Tuple[str, ...] = field(default_factory=tuple)
    target_feature: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_multimap(cls, entries: Mapping[str, List[str]]) -> "Cfg":
        """
        Assemble a Cfg from parsed key/value entries.

        Single-valued keys take their last value. Unknown keys are ignored.

        Args:
            entries: Output of :func:`rustcfg.cfg.parser.parse_cfg`

        Returns:
            Cfg instance

        Raises:
            MissingFieldError: If a required key has no value
        """
        required = {}
        for key in REQUIRED_KEYS:
            values = entries.get(key)
            if not values:
                raise MissingFieldError(key)
            required[key] = values[-1]

        optional = {}
        for key in OPTIONAL_KEYS:
            values = entries.get(key)
            optional[key] = values[-1] if values else None

        multi = {key: tuple(entries.get(key, ())) for key in MULTI_VALUED_KEYS}

        return cls(**required, **optional, **multi)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a plain dictionary for serialization.

        Returns:
            Dictionary with lists in place of tuples
        """
        return {
            "target_os": self.target_os,
            "target_family": self.target_family,
            "target_arch": self.target_arch,
            "target_endian": self.target_endian,
            "target_pointer_width": self.target_pointer_width,
            "target_env": self.target_env,
            "target_vendor": self.target_vendor,
            "target_has_atomic": list(self.target_has_atomic),
            "target_feature": list(self.target_feature),
        }


def parse_cfg_output(text: str) -> Cfg:
    """
    Parse ``rustc --print cfg`` text into a Cfg.

    Args:
        text: Decoded standard output

    Returns:
        Cfg instance

    Raises:
        MissingFieldError: If a required key is absent
    """
    return Cfg.from_multimap(parse_cfg(text))
