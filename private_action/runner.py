"""Execution of nested action entry points."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Dict, Optional

from private_action import display
from private_action.errors import EntryPointExecutionError, EntryPointNotFoundError


class EntryPointRunner:
    """Runs an entry point script as a child process.

    The child inherits stdout and stderr so that its output, including any
    workflow commands it prints, goes straight to the CI log.

    Attributes:
        interpreter: Program the script is passed to (e.g. "node")
        timeout: Seconds before the child is killed, or None to wait forever
    """

    def __init__(self, interpreter: str = "node", timeout: Optional[float] = None) -> None:
        self.interpreter = interpreter
        self.timeout = timeout

    def run(self, script: Path, env: Dict[str, str]) -> None:
        """Run script with exactly env as its environment.

        Args:
            script: Entry point script
            env: Complete environment for the child process

        Raises:
            EntryPointNotFoundError: If script does not exist
            EntryPointExecutionError: If the child cannot start, times out
                or exits non-zero
        """
        if not script.is_file():
            raise EntryPointNotFoundError(str(script))

        command = [self.interpreter, str(script)]
        display.print_command(command)

        try:
            process = subprocess.run(command, env=env, timeout=self.timeout)
        except subprocess.TimeoutExpired:
            raise EntryPointExecutionError(
                str(script), None, f"timed out after {self.timeout} seconds"
            ) from None
        except OSError as e:
            raise EntryPointExecutionError(
                str(script), None, f"could not start {self.interpreter}: {e}"
            ) from None

        if process.returncode != 0:
            raise EntryPointExecutionError(str(script), process.returncode)
