"""
Tests for CLI argument parser.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from rustcfg.cli.parser import CLI


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_creation(self):
        """Test CLI can be created."""
        cli = CLI()
        assert cli is not None
        assert cli.parser is not None

    def test_no_command_shows_help(self, capsys):
        """Test that running without command shows help."""
        cli = CLI()
        result = cli.run([])

        assert result == 1
        captured = capsys.readouterr()
        assert "usage:" in captured.out.lower() or "usage:" in captured.err.lower()

    def test_version_flag(self, capsys):
        """Test --version flag."""
        cli = CLI()

        with pytest.raises(SystemExit) as exc_info:
            cli.run(["--version"])

        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert "rustcfg" in captured.out

    def test_global_options(self):
        cli = CLI()
        args = cli.parse_args(
            ["--rustc", "/opt/rustc", "--config", "x.yaml", "-v", "version"]
        )

        assert args.rustc == "/opt/rustc"
        assert args.config == Path("x.yaml")
        assert args.verbose is True
        assert args.command == "version"


class TestCfgCommandParsing:
    """Test cfg command parsing."""

    def test_cfg_basic(self):
        args = CLI().parse_args(["cfg", "x86_64-unknown-linux-gnu"])

        assert args.command == "cfg"
        assert args.target == "x86_64-unknown-linux-gnu"
        assert args.format == "text"

    def test_cfg_format(self):
        args = CLI().parse_args(["cfg", "--format", "json", "wasm32-unknown-unknown"])

        assert args.format == "json"

    def test_cfg_requires_target(self):
        with pytest.raises(SystemExit):
            CLI().parse_args(["cfg"])

    def test_cfg_invalid_format(self):
        with pytest.raises(SystemExit):
            CLI().parse_args(["cfg", "--format", "xml", "x86_64-unknown-linux-gnu"])


class TestTargetsCommandParsing:
    """Test targets command parsing."""

    def test_targets_basic(self):
        args = CLI().parse_args(["targets"])

        assert args.command == "targets"
        assert args.check is False

    def test_targets_check(self):
        assert CLI().parse_args(["targets", "--check"]).check is True


class TestDispatch:
    """Test command dispatch."""

    def test_dispatches_to_command_module(self):
        with patch("rustcfg.cli.commands.cfg.run", return_value=0) as mock_run:
            result = CLI().run(["cfg", "x86_64-unknown-linux-gnu"])

        assert result == 0
        assert mock_run.call_args[0][0].target == "x86_64-unknown-linux-gnu"

    def test_command_exception_returns_one(self):
        with patch(
            "rustcfg.cli.commands.version.run", side_effect=RuntimeError("boom")
        ):
            result = CLI().run(["version"])

        assert result == 1

    def test_keyboard_interrupt(self):
        with patch(
            "rustcfg.cli.commands.targets.run", side_effect=KeyboardInterrupt()
        ):
            assert CLI().run(["targets"]) == 130
