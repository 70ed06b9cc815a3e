"""
Cfg command implementation.

Prints the configuration predicates rustc reports for a target.
"""

import json
import logging

import yaml

from rustcfg.cfg.model import Cfg
from rustcfg.cfg.query import cfg_of
from rustcfg.cli.utils import print_error, settings_from_args
from rustcfg.core.exceptions import CfgError, RustcError

logger = logging.getLogger(__name__)


def format_text(cfg: Cfg) -> str:
    """
    Render a Cfg the way rustc prints it, one predicate per line.

    Optional fields that are absent are omitted.
    """
    lines = []
    for key, value in cfg.to_dict().items():
        if value is None:
            continue
        if isinstance(value, list):
            lines.extend(f'{key}="{item}"' for item in value)
        else:
            lines.append(f'{key}="{value}"')
    return "\n".join(lines)


def format_cfg(cfg: Cfg, output_format: str) -> str:
    """
    Render a Cfg in the requested format.

    Args:
        cfg: Parsed configuration
        output_format: 'text', 'yaml' or 'json'

    Returns:
        Rendered string
    """
    if output_format == "json":
        return json.dumps(cfg.to_dict(), indent=2)
    if output_format == "yaml":
        return yaml.safe_dump(cfg.to_dict(), sort_keys=False).rstrip()
    return format_text(cfg)


def run(args) -> int:
    """
    Run the cfg command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 on failure)
    """
    logger.debug(f"Arguments: {args}")

    try:
        settings = settings_from_args(args)
        cfg = cfg_of(args.target, settings)
    except RustcError as e:
        print_error(f"rustc failed for target {args.target}", e.stderr)
        return 1
    except CfgError as e:
        print_error(str(e))
        return 1

    print(format_cfg(cfg, args.format))
    return 0
