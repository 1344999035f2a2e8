"""
Check command implementation.

Reports whether each requested toolchain is usable.
"""

import logging

from nativekit.cli.utils import resolve_toolchains, safe_print

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the check command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 if every toolchain is available, 1 otherwise)
    """
    logger.debug(f"Arguments: {args}")

    toolchains = resolve_toolchains(args)
    all_available = True

    for toolchain in toolchains:
        availability = toolchain.check_availability()
        if availability.is_available:
            safe_print(f"✓ {toolchain.display_name}: available (version {toolchain.version})")
            continue

        all_available = False
        safe_print(f"✗ {toolchain.display_name}: not available")
        for reason in availability.reasons:
            safe_print(f"    - {reason}")

    if not all_available:
        logger.info("Use --path to add directories containing the missing tools")

    return 0 if all_available else 1
