"""
Availability verdict for a toolchain.
"""

from pathlib import Path
from typing import List, Optional


class ToolChainAvailability:
    """
    Collects the reasons a toolchain cannot be used.

    A toolchain is available only when no reason has been recorded.

    Example:
        >>> availability = ToolChainAvailability()
        >>> availability.must_exist("C++ compiler", "g++", None)
        >>> availability.is_available
        False
        >>> availability.reasons
        ["Could not find C++ compiler 'g++'."]
    """

    def __init__(self):
        self._reasons: List[str] = []

    @property
    def is_available(self) -> bool:
        return not self._reasons

    @property
    def reasons(self) -> List[str]:
        """Reasons for unavailability, in the order they were recorded."""
        return list(self._reasons)

    def must_exist(
        self, display_name: str, executable_name: str, location: Optional[Path]
    ) -> None:
        """
        Record a reason if a tool could not be located.

        Args:
            display_name: Human-readable tool name (e.g., 'C++ compiler')
            executable_name: Configured executable base name that was searched
            location: Resolved file, or None if not found
        """
        if location is None:
            self.unavailable(f"Could not find {display_name} '{executable_name}'.")

    def unavailable(self, reason: str) -> None:
        self._reasons.append(reason)

    @property
    def unavailable_message(self) -> Optional[str]:
        """All reasons joined into one line, or None when available."""
        if self.is_available:
            return None
        return ", ".join(self._reasons)

    def __bool__(self) -> bool:
        return self.is_available

    def __repr__(self) -> str:
        if self.is_available:
            return "ToolChainAvailability(available)"
        return f"ToolChainAvailability(unavailable: {self._reasons!r})"
