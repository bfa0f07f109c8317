"""Thin wrapper around the git command line."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List, Optional, Union

from private_action import display
from private_action.errors import GitCommandError

PathLike = Union[str, Path]


class GitClient:
    """Runs the handful of git commands the loader needs.

    Every command line and every captured output is redacted before it is
    printed or attached to an error, since clone URLs carry the token.
    """

    def __init__(self, executable: str = "git") -> None:
        self.executable = executable

    def clone(self, url: str, directory: PathLike) -> None:
        """Clone url into directory (parent directories are created)."""
        Path(directory).parent.mkdir(parents=True, exist_ok=True)
        self._run(["clone", url, str(directory)])

    def set_remote_url(self, directory: PathLike, url: str, remote: str = "origin") -> None:
        """Point remote at url inside an existing checkout."""
        self._run(["remote", "set-url", remote, url], cwd=directory)

    def checkout(self, directory: PathLike, ref: str) -> None:
        """Check out ref (branch, tag or SHA) inside an existing checkout."""
        self._run(["checkout", ref], cwd=directory)

    def _run(self, args: List[str], cwd: Optional[PathLike] = None) -> str:
        """Execute git with args and return its stdout.

        Raises:
            GitCommandError: If git cannot be started or exits non-zero
        """
        command = [self.executable, *args]
        display.print_command(command)
        redacted_command = [display.redact(part) for part in command]

        try:
            process = subprocess.run(
                command,
                cwd=str(cwd) if cwd is not None else None,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            raise GitCommandError(redacted_command, None, display.redact(str(e))) from None

        if process.stdout:
            display.print_output(process.stdout)
        if process.stderr:
            # git writes progress and informational messages to stderr
            display.print_output(process.stderr)

        if process.returncode != 0:
            raise GitCommandError(
                redacted_command,
                process.returncode,
                display.redact(process.stderr or ""),
            )

        return process.stdout or ""
