"""
Tests for CLI argument parser.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from nativekit.cli.parser import CLI


@pytest.mark.unit
class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_creation(self):
        cli = CLI()
        assert cli.parser is not None

    def test_no_command_shows_help(self, capsys):
        """Test that running without command shows help."""
        result = CLI().run([])

        assert result == 1
        captured = capsys.readouterr()
        assert "usage:" in captured.out.lower()

    def test_version_flag(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            CLI().run(["--version"])

        assert exc_info.value.code == 0
        assert "NativeKit" in capsys.readouterr().out


@pytest.mark.unit
class TestCommandParsing:
    """Test check/locate argument parsing."""

    def test_check_defaults(self):
        args = CLI().parse_args(["check"])

        assert args.command == "check"
        assert args.names == []
        assert args.path is None
        assert args.cpp_compiler is None
        assert args.config is None

    def test_check_with_options(self):
        args = CLI().parse_args(
            [
                "--config",
                "custom.yaml",
                "check",
                "gcc",
                "gcc-13",
                "--path",
                "/opt/a",
                "--path",
                "/opt/b",
                "--cpp-compiler",
                "g++-13",
                "--static-lib-archiver",
                "gcc-ar",
            ]
        )

        assert args.config == Path("custom.yaml")
        assert args.names == ["gcc", "gcc-13"]
        assert args.path == ["/opt/a", "/opt/b"]
        assert args.cpp_compiler == "g++-13"
        assert args.static_lib_archiver == "gcc-ar"

    def test_locate(self):
        args = CLI().parse_args(["locate", "--linker", "ld.gold"])

        assert args.command == "locate"
        assert args.linker == "ld.gold"


@pytest.mark.unit
class TestDispatch:
    """Test command dispatch and error handling."""

    def test_dispatches_to_command_module(self):
        with patch("nativekit.cli.commands.check.run", return_value=0) as mock_run:
            assert CLI().run(["check"]) == 0
        mock_run.assert_called_once()

    def test_nativekit_error_returns_1(self, tmp_path):
        """Test a missing config file is reported, not raised."""
        result = CLI().run(["--config", str(tmp_path / "missing.yaml"), "check"])
        assert result == 1

    def test_keyboard_interrupt(self):
        with patch("nativekit.cli.commands.check.run", side_effect=KeyboardInterrupt):
            assert CLI().run(["check"]) == 130

    def test_verbose_configures_debug_logging(self):
        import logging

        with patch("nativekit.cli.commands.check.run", return_value=0):
            CLI().run(["-v", "check"])
        assert logging.getLogger().level == logging.DEBUG
