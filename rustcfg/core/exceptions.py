"""
Centralized exception hierarchy for rustcfg.

Every failure of a ``rustc --print cfg`` query is raised as a subclass of
:class:`CfgError`. Each subclass carries a :class:`CfgErrorKind` tag and the
diagnostic payload for its kind, so callers can either catch the base class
and branch on ``error.kind`` or catch the specific subclass.
"""

from enum import Enum
from typing import Optional


# ============================================================================
# Base Exceptions
# ============================================================================


class RustcfgError(Exception):
    """Base exception for all rustcfg errors."""

    pass


class ConfigurationError(RustcfgError):
    """Raised when a settings file is unreadable or has invalid values."""

    pass


# ============================================================================
# Cfg Query Exceptions
# ============================================================================


class CfgErrorKind(Enum):
    """Kinds of failure when querying the target configuration."""

    SPAWN = "spawn"  # rustc could not be started
    RUSTC = "rustc"  # rustc started but exited non-zero
    ENCODING = "encoding"  # output was not valid UTF-8
    MISSING_FIELD = "missing_field"  # required key absent from output


class CfgError(RustcfgError):
    """Base exception for errors produced by a cfg query."""

    kind: CfgErrorKind


class SpawnError(CfgError):
    """Raised when the rustc process could not be started at all."""

    kind = CfgErrorKind.SPAWN

    def __init__(self, executable: str, reason: Optional[Exception] = None):
        self.executable = executable
        self.reason = reason
        msg = f"Failed to execute {executable}"
        if reason is not None:
            msg += f": {reason}"
        super().__init__(msg)


class RustcError(CfgError):
    """
    Raised when rustc exited with a non-zero status.

    ``stderr`` holds the captured standard error verbatim. It is not
    classified further; callers match on it to detect e.g. toolchains too old
    to support a print request.
    """

    kind = CfgErrorKind.RUSTC

    def __init__(self, stderr: str, returncode: Optional[int] = None):
        self.stderr = stderr
        self.returncode = returncode
        super().__init__(f"Error when executing rustc: {stderr.strip()}")


class EncodingError(CfgError):
    """Raised when captured output is not valid UTF-8."""

    kind = CfgErrorKind.ENCODING

    def __init__(self, stream: str, reason: Optional[UnicodeDecodeError] = None):
        self.stream = stream
        self.reason = reason
        msg = f"rustc {stream} is not valid UTF-8"
        if reason is not None:
            msg += f": {reason}"
        super().__init__(msg)


class MissingFieldError(CfgError):
    """Raised when a required key never appeared in the cfg output."""

    kind = CfgErrorKind.MISSING_FIELD

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Field {field} is missing from config")


# ============================================================================
# Version Exceptions
# ============================================================================


class VersionParseError(RustcfgError):
    """Raised when ``rustc --version`` succeeded but its output is unreadable."""

    def __init__(self, output: str):
        self.output = output
        super().__init__(f"Unrecognized rustc version output: {output}")
