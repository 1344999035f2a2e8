"""
Tests for nativekit.toolchain.version module.
"""

import subprocess
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from nativekit.core.exceptions import ToolchainConfigurationError
from nativekit.toolchain.version import (
    GccVersionDeterminer,
    VersionProbe,
    derive_command_file_support,
)


@pytest.mark.unit
class TestDeriveCommandFileSupport:
    """Tests for derive_command_file_support."""

    @pytest.mark.parametrize(
        "version,expected",
        [
            ("4.8.2", True),
            ("3.4.6", False),
            ("9", True),
            ("4", True),
            ("13.2.0", True),
            ("2.95.3", False),
        ],
    )
    def test_major_version_threshold(self, version, expected):
        assert derive_command_file_support(version) is expected

    @pytest.mark.parametrize("version", ["abc.1", "", "unknown", "x4.8"])
    def test_unparsable_major_version(self, version):
        """Test an unparsable major version is a configuration error."""
        with pytest.raises(ToolchainConfigurationError) as exc_info:
            derive_command_file_support(version)

        assert exc_info.value.version == version
        assert f"version number {version}." in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ValueError)


@pytest.fixture
def compiler_path():
    return Path("/usr/bin/g++")


def _completed(stdout="", stderr="", returncode=0):
    return Mock(returncode=returncode, stdout=stdout, stderr=stderr)


@pytest.mark.unit
class TestGccVersionDeterminer:
    """Tests for GccVersionDeterminer."""

    def test_is_version_probe(self):
        assert isinstance(GccVersionDeterminer(), VersionProbe)

    @patch("subprocess.run")
    def test_dumpversion(self, mock_run, compiler_path):
        """Test version taken from -dumpversion output."""
        mock_run.return_value = _completed(stdout="4.8.2\n")

        assert GccVersionDeterminer().probe(compiler_path) == "4.8.2"
        mock_run.assert_called_once()
        assert mock_run.call_args[0][0] == ["/usr/bin/g++", "-dumpversion"]

    @patch("subprocess.run")
    def test_dumpversion_major_only(self, mock_run, compiler_path):
        """Test newer GCC printing only the major version."""
        mock_run.return_value = _completed(stdout="13\n")

        assert GccVersionDeterminer().probe(compiler_path) == "13"

    @patch("subprocess.run")
    def test_falls_back_to_version_output(self, mock_run, compiler_path):
        """Test --version is parsed when -dumpversion is not usable."""
        mock_run.side_effect = [
            _completed(stdout="", stderr="unrecognized option", returncode=1),
            _completed(
                stdout="g++ (Ubuntu 11.4.0-1ubuntu1~22.04) 11.4.0\n"
                "Copyright (C) 2021 Free Software Foundation, Inc.\n"
            ),
        ]

        assert GccVersionDeterminer().probe(compiler_path) == "11.4.0"
        assert mock_run.call_args[0][0] == ["/usr/bin/g++", "--version"]

    @patch("subprocess.run")
    def test_version_output_major_minor(self, mock_run, compiler_path):
        """Test --version output with only major.minor."""
        mock_run.side_effect = [
            _completed(stdout="not a version\n"),
            _completed(stdout="gcc version 3.4\n"),
        ]

        assert GccVersionDeterminer().probe(compiler_path) == "3.4"

    @patch("subprocess.run")
    def test_unparsable_output(self, mock_run, compiler_path):
        """Test None when no version appears in the output."""
        mock_run.return_value = _completed(stdout="some tool\n")

        assert GccVersionDeterminer().probe(compiler_path) is None

    @patch("subprocess.run", side_effect=FileNotFoundError())
    def test_missing_executable(self, mock_run, compiler_path):
        """Test a missing file yields None instead of raising."""
        assert GccVersionDeterminer().probe(compiler_path) is None

    @patch("subprocess.run", side_effect=PermissionError())
    def test_not_executable(self, mock_run, compiler_path):
        """Test a non-executable file yields None instead of raising."""
        assert GccVersionDeterminer().probe(compiler_path) is None

    @patch("subprocess.run")
    def test_timeout(self, mock_run, compiler_path):
        """Test a hanging compiler yields None."""
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="g++", timeout=5)

        assert GccVersionDeterminer(timeout=5).probe(compiler_path) is None

    @patch("subprocess.run")
    def test_timeout_passed_to_subprocess(self, mock_run, compiler_path):
        mock_run.return_value = _completed(stdout="9.4.0\n")

        GccVersionDeterminer(timeout=2).probe(compiler_path)
        assert mock_run.call_args[1]["timeout"] == 2

    @patch("subprocess.run")
    def test_callable(self, mock_run, compiler_path):
        """Test probes can be called directly."""
        mock_run.return_value = _completed(stdout="4.9.0\n")

        assert GccVersionDeterminer()(compiler_path) == "4.9.0"
