"""
Tool adapters handed out by a toolchain, one kind per tool role.

Compilers and the linker can pass their arguments through a command file
(g++ '@file' syntax) when the toolchain version supports it. The assembler
and the archiver always pass arguments on the command line.
"""

import re
import subprocess
import tempfile
from pathlib import Path
from typing import List, Optional, Sequence

from .command_line import CommandLineTool

OPTIONS_FILE_NAME = "options.txt"

_NEEDS_QUOTING = re.compile(r"\s")


def format_command_file_argument(arg: str) -> str:
    """
    Escape one argument for a g++ command file.

    Backslashes and quotes are escaped; arguments containing whitespace
    are wrapped in double quotes.
    """
    escaped = arg.replace("\\", "\\\\").replace('"', '\\"')
    if _NEEDS_QUOTING.search(arg):
        return f'"{escaped}"'
    return escaped


def write_command_file(args: Sequence[str], directory: Path) -> Path:
    """
    Write arguments to an options file, one per line.

    Args:
        args: Arguments to write
        directory: Directory to create the options file in

    Returns:
        Path to the written options file
    """
    directory.mkdir(parents=True, exist_ok=True)
    options_file = directory / OPTIONS_FILE_NAME
    options_file.write_text(
        "".join(format_command_file_argument(arg) + "\n" for arg in args),
        encoding="utf-8",
    )
    return options_file


class ToolAdapter:
    """Runs one tool with arguments passed directly on the command line."""

    def __init__(self, command_line_tool: CommandLineTool):
        self.command_line_tool = command_line_tool

    @property
    def executable(self) -> Path:
        return self.command_line_tool.executable

    def execute(
        self, args: Sequence[str], work_dir: Optional[Path] = None
    ) -> subprocess.CompletedProcess:
        return self.command_line_tool.execute(list(args), cwd=work_dir)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.command_line_tool!r})"


class CommandFileToolAdapter(ToolAdapter):
    """
    Runs a tool that may receive its arguments through a command file.

    Attributes:
        use_command_file: Pass arguments as '@options.txt' instead of inline
    """

    def __init__(self, command_line_tool: CommandLineTool, use_command_file: bool):
        super().__init__(command_line_tool)
        self.use_command_file = use_command_file

    def command_line(self, args: Sequence[str], work_dir: Path) -> List[str]:
        """
        Build the arguments actually passed to the executable.

        Writes the options file into work_dir when command files are used.
        """
        if not self.use_command_file:
            return list(args)
        options_file = write_command_file(args, work_dir)
        return [f"@{options_file}"]

    def execute(
        self, args: Sequence[str], work_dir: Optional[Path] = None
    ) -> subprocess.CompletedProcess:
        if not self.use_command_file:
            return super().execute(args, work_dir)

        if work_dir is not None:
            # The options file path must stay valid once the tool runs in work_dir
            work_dir = Path(work_dir).absolute()
            return self.command_line_tool.execute(
                self.command_line(args, work_dir), cwd=work_dir
            )

        with tempfile.TemporaryDirectory(prefix="nativekit-") as temp_dir:
            return self.command_line_tool.execute(
                self.command_line(args, Path(temp_dir))
            )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.command_line_tool!r}, "
            f"use_command_file={self.use_command_file})"
        )


class CppCompiler(CommandFileToolAdapter):
    """g++ compiling C++ sources."""


class CCompiler(CommandFileToolAdapter):
    """gcc compiling C sources."""


class GppLinker(CommandFileToolAdapter):
    """g++ driving the link step."""


class Assembler(ToolAdapter):
    """GNU as."""


class ArStaticLibraryArchiver(ToolAdapter):
    """ar creating static libraries."""
