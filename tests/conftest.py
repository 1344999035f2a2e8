"""
Pytest configuration and shared fixtures for NativeKit tests.
"""

import stat
from pathlib import Path
from typing import Callable, Optional

import pytest

from nativekit.core.platform import OperatingSystem, PlatformInfo
from nativekit.toolchain.gcc import GccToolChain
from nativekit.toolchain.tools import ToolRole
from nativekit.toolchain.version import VersionProbe


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


# ============================================================================
# Fake Collaborators
# ============================================================================


class FakeOperatingSystem(OperatingSystem):
    """OperatingSystem whose default PATH lookup never touches the host."""

    def __init__(self, os_name: str = "linux", default_path: Optional[dict] = None):
        super().__init__(PlatformInfo(os_name, "x64", "test"))
        self.default_path = default_path or {}
        self.lookups = []

    def find_in_default_path(self, name: str) -> Optional[Path]:
        self.lookups.append(name)
        return self.default_path.get(name)


class FakeVersionProbe(VersionProbe):
    """Version probe returning a fixed version and counting calls."""

    def __init__(self, version: Optional[str] = "4.9.0"):
        self.version = version
        self.calls = []

    def probe(self, executable: Path) -> Optional[str]:
        self.calls.append(executable)
        return self.version


def make_executable(directory: Path, name: str) -> Path:
    """Create an empty executable file."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text("#!/bin/sh\n")
    path.chmod(path.stat().st_mode | stat.S_IXUSR)
    return path


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def linux_os() -> FakeOperatingSystem:
    """Linux-like host with an empty default PATH."""
    return FakeOperatingSystem("linux")


@pytest.fixture
def windows_os() -> FakeOperatingSystem:
    """Windows-like (Cygwin) host with an empty default PATH."""
    return FakeOperatingSystem("windows")


@pytest.fixture
def gcc_bin(tmp_path: Path) -> Path:
    """Directory containing every default GCC tool."""
    bin_dir = tmp_path / "gcc" / "bin"
    for name in {role.default_executable for role in ToolRole}:
        make_executable(bin_dir, name)
    return bin_dir


@pytest.fixture
def version_probe() -> FakeVersionProbe:
    return FakeVersionProbe("4.9.0")


@pytest.fixture
def make_toolchain(linux_os, version_probe) -> Callable[..., GccToolChain]:
    """Factory for toolchains isolated from the host PATH."""

    def _make(*path_entries: Path, **kwargs) -> GccToolChain:
        kwargs.setdefault("operating_system", linux_os)
        kwargs.setdefault("version_probe", version_probe)
        toolchain = GccToolChain("gcc", **kwargs)
        for entry in path_entries:
            toolchain.add_path(entry)
        return toolchain

    return _make


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch) -> Path:
    """Run the test from an empty working directory."""
    workdir = tmp_path / "workdir"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def empty_path(monkeypatch, tmp_path: Path):
    """Point PATH at an empty directory so host tools are never found."""
    empty = tmp_path / "empty-path"
    empty.mkdir()
    monkeypatch.setenv("PATH", str(empty))
    return empty


@pytest.fixture
def make_exe() -> Callable[[Path, str], Path]:
    """Factory creating empty executable files."""
    return make_executable
