"""
nativekit/toolchain/version.py

Compiler version determination and version-derived capabilities.
"""

import logging
import re
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from ..core.exceptions import ToolchainConfigurationError

logger = logging.getLogger(__name__)

# First major version of g++ that accepts @file command files
COMMAND_FILE_MIN_MAJOR_VERSION = 4

_DUMPVERSION_PATTERN = re.compile(r"^\d+(\.\d+)*$")


class VersionProbe(ABC):
    """
    Determines the version of a compiler executable.

    Implementations must not raise for missing or broken executables;
    they return None instead.
    """

    @abstractmethod
    def probe(self, executable: Path) -> Optional[str]:
        """
        Determine the version of an executable.

        Args:
            executable: Path to compiler executable

        Returns:
            Version string (e.g., "13.2.0") or None if it cannot be determined
        """
        pass

    def __call__(self, executable: Path) -> Optional[str]:
        return self.probe(executable)


class GccVersionDeterminer(VersionProbe):
    """
    Determine the version of g++/gcc.

    Runs 'compiler -dumpversion' and falls back to parsing the output of
    'compiler --version' for patterns like:
    - "g++ (GCC) 13.2.0"
    - "gcc (Ubuntu 11.4.0-1ubuntu1~22.04) 11.4.0"
    """

    def __init__(self, timeout: float = 5):
        self.timeout = timeout

    def probe(self, executable: Path) -> Optional[str]:
        output = self._run(executable, "-dumpversion")
        lines = output.strip().splitlines() if output else []
        if lines and _DUMPVERSION_PATTERN.match(lines[0].strip()):
            version = lines[0].strip()
            logger.debug(f"Extracted version {version} from {executable}")
            return version

        output = self._run(executable, "--version")
        if output is None:
            return None

        version = self._parse_version_output(output)
        if version:
            logger.debug(f"Extracted version {version} from {executable}")
        else:
            logger.debug(f"Could not parse version from output: {output[:200]}")
        return version

    def _run(self, executable: Path, flag: str) -> Optional[str]:
        try:
            result = subprocess.run(
                [str(executable), flag],
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            logger.debug(f"Timeout running {executable} {flag}")
            return None
        except OSError as e:
            logger.debug(f"Failed to run {executable} {flag}: {e}")
            return None

        if result.returncode != 0:
            logger.debug(f"{executable} {flag} returned {result.returncode}")
            return None

        return result.stdout + result.stderr

    @staticmethod
    def _parse_version_output(output: str) -> Optional[str]:
        # Match patterns like "13.2.0", "4.8.2"
        match = re.search(r"\b(\d+\.\d+\.\d+)\b", output)
        if match:
            return match.group(1)

        # Some builds only report major.minor
        match = re.search(r"\b(\d+\.\d+)\b", output)
        if match:
            return match.group(1)

        return None


def derive_command_file_support(version: str) -> bool:
    """
    Determine whether a g++ version accepts arguments from a command file.

    Args:
        version: Version string (e.g., "4.8.2")

    Returns:
        True if the major version is 4 or newer

    Raises:
        ToolchainConfigurationError: If the major version is not an integer

    Example:
        >>> derive_command_file_support("4.8.2")
        True
        >>> derive_command_file_support("3.4.6")
        False
    """
    components = version.split(".")
    try:
        major_version = int(components[0])
    except ValueError as e:
        raise ToolchainConfigurationError(
            f"Unable to determine major g++ version from version number {version}.",
            version=version,
        ) from e
    return major_version >= COMMAND_FILE_MIN_MAJOR_VERSION
