"""
Thin wrapper around an external tool executable.
"""

import os
import subprocess
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Union

from ..core.exceptions import ToolExecutionError

ExecFactory = Callable[..., subprocess.CompletedProcess]


def default_exec_factory(
    command: List[str], env: Dict[str, str], cwd: Optional[Path] = None
) -> subprocess.CompletedProcess:
    """Run a command, capturing its output as text."""
    return subprocess.run(
        command, env=env, cwd=cwd, capture_output=True, text=True, check=False
    )


class CommandLineTool:
    """
    A located tool executable plus the environment it runs in.

    Attributes:
        tool_name: Human-readable tool name (e.g., 'C++ compiler')
        executable: Resolved path to the executable
        search_path: Directories prepended to PATH when the tool runs
    """

    def __init__(
        self,
        tool_name: str,
        executable: Path,
        exec_factory: ExecFactory = default_exec_factory,
    ):
        self.tool_name = tool_name
        self.executable = Path(executable)
        self.exec_factory = exec_factory
        self.search_path: List[Path] = []

    def with_search_path(
        self, directories: Sequence[Union[str, Path]]
    ) -> "CommandLineTool":
        """Set the directories prepended to PATH. Returns self for chaining."""
        self.search_path = [Path(d) for d in directories]
        return self

    def environment(self) -> Dict[str, str]:
        """Build the environment the tool runs with."""
        env = dict(os.environ)
        if self.search_path:
            entries = [str(d) for d in self.search_path]
            if env.get("PATH"):
                entries.append(env["PATH"])
            env["PATH"] = os.pathsep.join(entries)
        return env

    def execute(
        self, args: Sequence[str], cwd: Optional[Path] = None
    ) -> subprocess.CompletedProcess:
        """
        Run the tool.

        Args:
            args: Command-line arguments (without the executable)
            cwd: Working directory, or None for the current one

        Returns:
            Completed process with captured output

        Raises:
            ToolExecutionError: If the tool exits with a non-zero status
        """
        command = [str(self.executable), *args]
        result = self.exec_factory(command, env=self.environment(), cwd=cwd)
        if result.returncode != 0:
            output = (result.stdout or "") + (result.stderr or "")
            raise ToolExecutionError(self.tool_name, result.returncode, output.strip())
        return result

    def __repr__(self) -> str:
        return f"CommandLineTool({self.tool_name!r}, {str(self.executable)!r})"
