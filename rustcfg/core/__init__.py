"""
Core functionality for rustcfg.

This package contains the error hierarchy and settings that the other
components depend on.
"""

from .exceptions import (
    RustcfgError,
    ConfigurationError,
    CfgErrorKind,
    CfgError,
    SpawnError,
    RustcError,
    EncodingError,
    MissingFieldError,
    VersionParseError,
)

from .settings import (
    RustcSettings,
    load_settings,
    DEFAULT_RUSTC,
    RUSTC_ENV_VAR,
)

__all__ = [
    "RustcfgError",
    "ConfigurationError",
    "CfgErrorKind",
    "CfgError",
    "SpawnError",
    "RustcError",
    "EncodingError",
    "MissingFieldError",
    "VersionParseError",
    "RustcSettings",
    "load_settings",
    "DEFAULT_RUSTC",
    "RUSTC_ENV_VAR",
]
