"""
rustcfg/toolchain/invoker.py

Runs rustc print requests and captures their raw output.
"""

import logging
import os
import re
import shutil
import subprocess
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from packaging import version

from ..core.exceptions import (
    EncodingError,
    RustcError,
    SpawnError,
    VersionParseError,
)
from ..core.settings import RustcSettings

logger = logging.getLogger(__name__)


@dataclass
class RustcOutput:
    """
    Raw result of one rustc process.

    Attributes:
        returncode: Process exit status
        stdout: Captured standard output bytes
        stderr: Captured standard error bytes
    """

    returncode: int
    stdout: bytes
    stderr: bytes

    @property
    def success(self) -> bool:
        """Whether rustc exited with status 0."""
        return self.returncode == 0


@dataclass
class RustcVersion:
    """
    Parsed ``rustc --version`` output.

    Attributes:
        release: Release number (e.g., 1.75.0)
        channel: 'stable', 'beta', 'nightly' or 'dev'
        raw: First line of the version output
    """

    release: version.Version
    channel: str
    raw: str

    def __str__(self) -> str:
        return self.raw


def decode_output(data: bytes, stream: str) -> str:
    """
    Decode captured process output as UTF-8.

    Args:
        data: Raw bytes from the process
        stream: Stream name used in the error ('stdout' or 'stderr')

    Returns:
        Decoded text

    Raises:
        EncodingError: If the bytes are not valid UTF-8
    """
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise EncodingError(stream, e) from e


class RustcInvoker:
    """
    Execute rustc with a fixed print request.

    The executable comes from the injected settings, so the invoker never
    consults the process environment for the override itself.

    Example:
        >>> invoker = RustcInvoker(RustcSettings(rustc="/opt/rust/bin/rustc"))
        >>> text = invoker.check(invoker.print_cfg("x86_64-unknown-linux-gnu"))
    """

    def __init__(self, settings: Optional[RustcSettings] = None):
        """
        Initialize invoker.

        Args:
            settings: Toolchain settings (defaults to plain ``rustc``)
        """
        self.settings = settings or RustcSettings()

    def resolve_executable(self) -> str:
        """
        Resolve the rustc executable against PATH.

        Returns:
            Absolute path if found, otherwise the configured name unchanged
        """
        name = self.settings.executable
        found = shutil.which(name)
        if found:
            return found
        logger.debug(f"{name} not found on PATH, passing through unchanged")
        return name

    def _subprocess_env(self) -> Optional[Dict[str, str]]:
        if not self.settings.env:
            return None
        env = dict(os.environ)
        env.update(self.settings.env)
        return env

    def run(self, args: Sequence[str]) -> RustcOutput:
        """
        Run rustc with the given arguments and capture its output.

        Blocks until the process exits. There is no timeout and no retry.

        Args:
            args: Arguments appended after the executable

        Returns:
            RustcOutput with exit status and raw streams

        Raises:
            SpawnError: If the process could not be started, including
                arguments the OS rejects (e.g. embedded NUL bytes)
        """
        executable = self.resolve_executable()
        command = [executable, *args]
        logger.debug(f"Running: {' '.join(command)}")

        try:
            result = subprocess.run(
                command,
                capture_output=True,
                env=self._subprocess_env(),
                check=False,
            )
        except (OSError, ValueError) as e:
            raise SpawnError(executable, e) from e

        logger.debug(f"{executable} exited with {result.returncode}")
        return RustcOutput(
            returncode=result.returncode, stdout=result.stdout, stderr=result.stderr
        )

    def check(self, output: RustcOutput) -> str:
        """
        Validate a rustc result and return its standard output as text.

        Args:
            output: Result from run()

        Returns:
            Decoded standard output

        Raises:
            RustcError: If rustc exited non-zero (payload is stderr verbatim)
            EncodingError: If either stream is not valid UTF-8
        """
        if not output.success:
            stderr = decode_output(output.stderr, "stderr")
            raise RustcError(stderr, output.returncode)
        return decode_output(output.stdout, "stdout")

    def print_cfg(self, target: str) -> RustcOutput:
        """
        Run ``rustc --target <target> --print cfg``.

        Args:
            target: Target triple (e.g., 'x86_64-unknown-linux-gnu')

        Returns:
            Raw RustcOutput
        """
        return self.run(["--target", target, "--print", "cfg"])

    def print_target_list(self) -> List[str]:
        """
        List every target triple known to rustc.

        Returns:
            Target triples in the order rustc prints them

        Raises:
            CfgError: On spawn, exit status or encoding failure
        """
        text = self.check(self.run(["--print", "target-list"]))
        return [line.strip() for line in text.splitlines() if line.strip()]

    def version(self) -> RustcVersion:
        """
        Query and parse ``rustc --version``.

        Output looks like ``rustc 1.75.0 (82e1608df 2023-12-21)`` or
        ``rustc 1.77.0-nightly (...)``.

        Returns:
            Parsed RustcVersion

        Raises:
            CfgError: On spawn, exit status or encoding failure
            VersionParseError: If the output has no recognizable release number
        """
        text = self.check(self.run(["--version"]))
        first_line = text.strip().split("\n")[0]

        match = re.search(r"\b(\d+\.\d+\.\d+)(?:-(beta|nightly|dev)[.\d]*)?", first_line)
        if not match:
            raise VersionParseError(first_line)

        channel = match.group(2) or "stable"
        return RustcVersion(
            release=version.Version(match.group(1)), channel=channel, raw=first_line
        )
