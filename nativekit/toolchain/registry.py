"""
nativekit/toolchain/registry.py

Maps tool roles to executable names and resolves them to files on disk.
"""

from pathlib import Path
from typing import Dict, List, Optional, Union

from ..core.platform import OperatingSystem
from .tools import ToolRole

# Cygwin installs g++/gcc as a symlink to g++-3 or g++-4, which cannot be run directly
WINDOWS_VERSION_SUFFIXES = ("-4", "-3")


class ToolRegistry:
    """
    Locate the executables implementing each tool role.

    Executable names are configurable per role. Lookups search the explicit
    search path in insertion order and then the host's default PATH.
    Results, including misses, are cached by executable name until a new
    search path entry is added.

    Example:
        >>> registry = ToolRegistry(current_operating_system())
        >>> registry.add_search_path_entry(Path("/opt/gcc-13/bin"))
        >>> registry.locate(ToolRole.CPP_COMPILER)
        PosixPath('/opt/gcc-13/bin/g++')
    """

    def __init__(self, operating_system: OperatingSystem):
        """
        Initialize registry with default executable names.

        Args:
            operating_system: Platform rules for naming and default PATH lookup
        """
        self.operating_system = operating_system
        self._executable_names: Dict[ToolRole, str] = {
            role: role.default_executable for role in ToolRole
        }
        self._executables: Dict[str, Optional[Path]] = {}
        self._search_path: List[Path] = []

    def get_search_path(self) -> List[Path]:
        """Get a copy of the search path entries, in lookup order."""
        return list(self._search_path)

    def add_search_path_entry(self, directory: Union[str, Path]) -> None:
        """
        Append a directory to the search path.

        Clears every cached resolution, since the new directory may satisfy
        a name that previously could not be found.
        """
        self._search_path.append(Path(directory))
        self._executables.clear()

    def clear_cache(self) -> None:
        """Forget every cached resolution without changing the search path."""
        self._executables.clear()

    def get_executable_name(self, role: ToolRole) -> str:
        return self._executable_names[role]

    def set_executable_name(self, role: ToolRole, name: str) -> None:
        self._executable_names[role] = name

    def locate(self, role: ToolRole) -> Optional[Path]:
        """
        Resolve the executable configured for a role.

        Args:
            role: Tool role to resolve

        Returns:
            Path to the executable, or None if it cannot be found
        """
        name = self._executable_names[role]
        if name in self._executables:
            return self._executables[name]

        executable = self._find_executable(name)
        self._executables[name] = executable
        return executable

    def candidate_names(self, name: str) -> List[str]:
        """
        Get the names tried for an executable, most preferred first.

        Args:
            name: Configured executable base name

        Returns:
            ['gcc-4', 'gcc-3', 'gcc'] on Windows-like hosts, ['gcc'] elsewhere
        """
        if self.operating_system.is_windows_like():
            return [name + suffix for suffix in WINDOWS_VERSION_SUFFIXES] + [name]
        return [name]

    def _find_executable(self, name: str) -> Optional[Path]:
        for candidate in self.candidate_names(name):
            executable = self._find_in_path(candidate)
            if executable is not None:
                return executable
        return None

    def _find_in_path(self, name: str) -> Optional[Path]:
        exe_name = self.operating_system.format_executable_name(name)
        for directory in self._search_path:
            candidate = directory / exe_name
            if candidate.is_file():
                return candidate.absolute()
        return self.operating_system.find_in_default_path(name)
