"""
Platform detection and executable lookup for NativeKit.

This module detects the current platform (OS and architecture) and wraps
it in an OperatingSystem object that knows how executables are named on
that platform and how to find them on the default PATH.

Usage:
    from nativekit.core.platform import current_operating_system

    os_ = current_operating_system()
    print(os_.format_executable_name("gcc"))  # 'gcc' or 'gcc.exe'
    print(os_.find_in_default_path("gcc"))    # Path('/usr/bin/gcc') or None
"""

import functools
import platform
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class PlatformInfo:
    """
    Basic platform information.

    Attributes:
        os: Operating system ('windows', 'linux', 'macos')
        arch: CPU architecture ('x64', 'arm64', 'x86', 'arm')
        os_version: OS version string (e.g., '10.0.19041', '5.15.0', '14.1')
    """

    os: str
    arch: str
    os_version: str

    def platform_string(self) -> str:
        """
        Get canonical platform string (e.g., 'linux-x64', 'macos-arm64').

        Example:
            >>> info = PlatformInfo('linux', 'x64', '5.15')
            >>> info.platform_string()
            'linux-x64'
        """
        return f"{self.os}-{self.arch}"

    def __str__(self) -> str:
        return f"{self.os}-{self.arch} v{self.os_version}"


@functools.lru_cache(maxsize=1)
def detect_platform() -> PlatformInfo:
    """
    Detect current platform information.

    This function is cached - it only runs detection once per process.

    Returns:
        PlatformInfo instance with detected platform information
    """
    return PlatformInfo(
        os=_detect_os(), arch=_detect_architecture(), os_version=platform.release()
    )


def _detect_os() -> str:
    """
    Detect operating system.

    Cygwin and MSYS report themselves as e.g. 'CYGWIN_NT-10.0'; they are
    normalized to 'windows' since executables there carry the '.exe' suffix.

    Returns:
        Normalized OS name: 'windows', 'linux', 'macos'

    Raises:
        RuntimeError: If OS is not supported
    """
    system = platform.system().lower()

    if system == "windows" or system.startswith(("cygwin", "msys", "mingw")):
        return "windows"
    elif system == "linux":
        return "linux"
    elif system == "darwin":
        return "macos"
    elif system.endswith("bsd") or system == "sunos":
        return system
    else:
        raise RuntimeError(f"Unsupported operating system: {system}")


def _detect_architecture() -> str:
    """
    Detect CPU architecture.

    Returns:
        Normalized architecture: 'x64', 'arm64', 'x86', 'arm'
    """
    machine = platform.machine().lower()

    if machine in ("x86_64", "amd64", "x64"):
        return "x64"
    elif machine in ("aarch64", "arm64"):
        return "arm64"
    elif machine in ("i386", "i686", "x86"):
        return "x86"
    elif machine.startswith("arm"):
        return "arm"
    else:
        return machine


class OperatingSystem:
    """
    Executable naming and lookup rules for a platform.

    Toolchains use this to turn a base executable name such as 'g++' into
    the file name used on disk and to fall back to the host PATH.
    """

    def __init__(self, info: PlatformInfo):
        self.info = info

    def is_windows_like(self) -> bool:
        """Whether executables need the '.exe' suffix (Windows, Cygwin, MSYS)."""
        return self.info.os == "windows"

    def format_executable_name(self, base: str) -> str:
        """
        Get the platform-specific file name for an executable.

        Args:
            base: Base executable name (e.g., 'gcc')

        Returns:
            'gcc.exe' on Windows-like hosts, 'gcc' elsewhere
        """
        if self.is_windows_like() and not base.lower().endswith(".exe"):
            return base + ".exe"
        return base

    def find_in_default_path(self, name: str) -> Optional[Path]:
        """
        Find executable in the PATH environment variable.

        Args:
            name: Executable base name to search for

        Returns:
            Absolute path to the executable or None if not found
        """
        path_str = shutil.which(self.format_executable_name(name))
        return Path(path_str).absolute() if path_str else None

    def __repr__(self) -> str:
        return f"OperatingSystem({self.info.platform_string()!r})"


def current_operating_system() -> OperatingSystem:
    """Get an OperatingSystem for the host this process runs on."""
    return OperatingSystem(detect_platform())


def clear_platform_cache():
    """
    Clear the platform detection cache.

    This forces the next call to detect_platform() to re-detect.
    Useful for testing.
    """
    detect_platform.cache_clear()


__all__ = [
    "PlatformInfo",
    "OperatingSystem",
    "detect_platform",
    "current_operating_system",
    "clear_platform_cache",
]
