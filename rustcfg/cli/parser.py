"""
rustcfg CLI argument parser.

This module implements the command-line interface for rustcfg using argparse.
"""

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("rustcfg")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)


class CLI:
    """rustcfg command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="rustcfg",
            description="rustcfg - Query rustc target configuration",
            epilog='Use "rustcfg COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"rustcfg {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to settings file (default: ./rustcfg.yaml)",
        )
        parser.add_argument(
            "--rustc",
            metavar="PATH",
            help="rustc executable to run (default: $RUSTC or rustc on PATH)",
        )

        # Subcommands
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_cfg_command(subparsers)
        self._add_targets_command(subparsers)
        self._add_version_command(subparsers)

        return parser

    def _add_cfg_command(self, subparsers):
        """Add 'cfg' subcommand."""
        parser = subparsers.add_parser(
            "cfg",
            help="Print the cfg of a target",
            description="Run 'rustc --print cfg' for a target and print the result",
        )
        parser.add_argument(
            "target",
            metavar="TARGET",
            help="Target triple (e.g., x86_64-unknown-linux-gnu)",
        )
        parser.add_argument(
            "--format",
            choices=["text", "yaml", "json"],
            default="text",
            help="Output format (default: text)",
        )

    def _add_targets_command(self, subparsers):
        """Add 'targets' subcommand."""
        parser = subparsers.add_parser(
            "targets",
            help="List targets known to rustc",
            description="List targets from 'rustc --print target-list'",
        )
        parser.add_argument(
            "--check",
            action="store_true",
            help="Parse the cfg of every target and report failures",
        )

    def _add_version_command(self, subparsers):
        """Add 'version' subcommand."""
        subparsers.add_parser(
            "version",
            help="Show the rustc that will be queried",
            description="Show the resolved rustc executable and its version",
        )

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except Exception as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        command_map = {
            "cfg": "rustcfg.cli.commands.cfg",
            "targets": "rustcfg.cli.commands.targets",
            "version": "rustcfg.cli.commands.version",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
