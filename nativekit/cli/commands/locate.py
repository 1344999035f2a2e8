"""
Locate command implementation.

Shows where each tool of a toolchain resolves to.
"""

import logging

from nativekit.cli.utils import resolve_toolchains, safe_print
from nativekit.toolchain.tools import ToolRole

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the locate command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 if every tool was found, 1 otherwise)
    """
    toolchains = resolve_toolchains(args)
    all_found = True

    for toolchain in toolchains:
        safe_print(f"{toolchain.display_name}")
        if toolchain.path:
            safe_print(f"  search path: {', '.join(str(p) for p in toolchain.path)}")

        width = max(len(role.display_name) for role in ToolRole)
        for role in ToolRole:
            location = toolchain.executables.locate(role)
            if location is None:
                all_found = False
            safe_print(
                f"  {role.display_name:<{width}}  "
                f"{toolchain.get_executable_name(role):<8}  "
                f"{location if location is not None else 'not found'}"
            )

    return 0 if all_found else 1
