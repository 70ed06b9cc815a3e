"""
Toolchain settings for rustcfg.

Settings decide which rustc executable is run and which extra environment
variables it sees. They are resolved once, up front, and injected into the
invoker, so nothing below this module reads the process environment.

Resolution order for the executable:

1. ``RUSTC`` environment variable (set by Cargo for build scripts)
2. ``rustc`` key of the YAML settings file (``rustcfg.yaml``)
3. plain ``rustc`` looked up on ``PATH``

Example settings file::

    rustc: /opt/rust/bin/rustc
    env:
      RUSTC_BOOTSTRAP: "1"
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from rustcfg.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_RUSTC = "rustc"
RUSTC_ENV_VAR = "RUSTC"
DEFAULT_CONFIG_FILE = "rustcfg.yaml"


@dataclass
class RustcSettings:
    """
    Settings used to invoke rustc.

    Attributes:
        rustc: Executable path or name, or None for the default ``rustc``
        env: Extra environment variables for the rustc subprocess
    """

    rustc: Optional[str] = None
    env: Dict[str, str] = field(default_factory=dict)

    @property
    def executable(self) -> str:
        """Executable to run, falling back to the default name."""
        return self.rustc or DEFAULT_RUSTC

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RustcSettings":
        """
        Build settings from environment variables.

        Args:
            environ: Environment mapping (defaults to ``os.environ``)

        Returns:
            RustcSettings honoring the ``RUSTC`` override
        """
        if environ is None:
            environ = os.environ

        rustc = environ.get(RUSTC_ENV_VAR) or None
        if rustc:
            logger.debug(f"Using rustc from {RUSTC_ENV_VAR}: {rustc}")
        return cls(rustc=rustc)


def _read_yaml(config_file: Path) -> Dict[str, Any]:
    """Read a YAML mapping, raising ConfigurationError on bad content."""
    logger.debug(f"Loading settings from {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_file}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read {config_file}: {e}") from e

    data = data or {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Settings file {config_file} must contain a mapping, "
            f"got {type(data).__name__}"
        )
    return data


def load_settings(
    config_file: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> RustcSettings:
    """
    Load settings from the environment and an optional YAML file.

    ``RUSTC`` takes precedence over the file's ``rustc`` key so a build
    pipeline can always redirect the toolchain.

    Args:
        config_file: Path to a YAML settings file. A missing file is an error
            only when passed explicitly; None means "use ./rustcfg.yaml if it
            exists".
        environ: Environment mapping (defaults to ``os.environ``)

    Returns:
        Resolved RustcSettings

    Raises:
        ConfigurationError: If the file is missing, unparsable or has
            values of the wrong type
    """
    settings = RustcSettings.from_env(environ)

    if config_file is None:
        default = Path.cwd() / DEFAULT_CONFIG_FILE
        if not default.exists():
            return settings
        config_file = default
    elif not config_file.exists():
        raise ConfigurationError(f"Settings file not found: {config_file}")

    data = _read_yaml(config_file)

    rustc = data.get("rustc")
    if rustc is not None:
        if not isinstance(rustc, str) or not rustc:
            raise ConfigurationError(
                f"'rustc' in {config_file} must be a non-empty string"
            )
        if settings.rustc:
            logger.info(
                f"Ignoring rustc={rustc} from {config_file}: "
                f"{RUSTC_ENV_VAR} is set to {settings.rustc}"
            )
        else:
            settings.rustc = rustc

    env = data.get("env")
    if env is not None:
        if not isinstance(env, dict):
            raise ConfigurationError(f"'env' in {config_file} must be a mapping")
        settings.env = {str(k): str(v) for k, v in env.items()}

    return settings
