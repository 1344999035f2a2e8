"""
Tool roles that a native toolchain must fulfill.
"""

from enum import Enum


class ToolRole(Enum):
    """
    Fixed set of tools a GCC-style toolchain provides.

    Each member carries the key used in configuration files, a human-readable
    display name, and the default executable base name.
    """

    CPP_COMPILER = ("cpp_compiler", "C++ compiler", "g++")
    C_COMPILER = ("c_compiler", "C compiler", "gcc")
    ASSEMBLER = ("assembler", "Assembler", "as")
    LINKER = ("linker", "Linker", "g++")
    STATIC_LIB_ARCHIVER = ("static_lib_archiver", "Static library archiver", "ar")

    def __init__(self, config_key: str, display_name: str, default_executable: str):
        self.config_key = config_key
        self.display_name = display_name
        self.default_executable = default_executable

    @classmethod
    def from_config_key(cls, key: str) -> "ToolRole":
        """
        Look up a role by its configuration key (e.g., 'cpp_compiler').

        Raises:
            ValueError: If no role uses the key
        """
        for role in cls:
            if role.config_key == key:
                return role
        raise ValueError(f"Unknown tool: {key}")

    def __str__(self) -> str:
        return self.config_key
