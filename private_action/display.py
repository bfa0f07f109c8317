"""CI-style terminal output for the private action loader.

All loader output goes through this module. Messages are redacted against the
registered secrets before they reach the console. When running under GitHub
Actions, groups, warnings and errors are emitted as workflow commands so the
runner can fold and annotate them; elsewhere they are rendered with icons and
indentation.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Generator, List

from rich.console import Console
from rich.text import Text

# Shared console instance
console = Console(highlight=False, soft_wrap=True)

REDACTED = "***"


@dataclass
class StatusIcons:
    """Status icons for local (non-CI) display."""

    INFO = Text("•", style="bold cyan")
    SUCCESS = Text("✓", style="bold green")
    FAILED = Text("✗", style="bold red")
    WARNING = Text("!", style="bold yellow")
    GROUP = Text("▶", style="white")


@dataclass
class DisplayState:
    """Tracks secrets and group nesting."""

    secrets: List[str] = field(default_factory=list)
    indent_level: int = 0


# Global display state
_state = DisplayState()


def reset() -> None:
    """Forget registered secrets and group nesting (useful for testing)."""
    global _state
    _state = DisplayState()


def in_github_actions() -> bool:
    """Whether workflow commands should be emitted."""
    return os.environ.get("GITHUB_ACTIONS") == "true"


def _get_indent() -> str:
    return "  " * _state.indent_level


def _emit(text: Text | str) -> None:
    console.print(text, markup=False, emoji=False)


# =============================================================================
# Secrets
# =============================================================================


def add_secret(secret: str) -> None:
    """Register a value to be redacted from all further output.

    Under GitHub Actions the value is also handed to the runner with
    ::add-mask:: so that output of child processes is masked too.
    """
    if not secret or secret in _state.secrets:
        return

    _state.secrets.append(secret)
    # Longest first so a secret containing another is replaced whole
    _state.secrets.sort(key=len, reverse=True)

    if in_github_actions():
        _emit(f"::add-mask::{secret}")


def redact(message: str) -> str:
    """Replace every registered secret in message with ***."""
    for secret in _state.secrets:
        message = message.replace(secret, REDACTED)
    return message


# =============================================================================
# Messages
# =============================================================================


def info(message: str) -> None:
    """Print an informational line."""
    message = redact(message)
    if in_github_actions():
        _emit(message)
    else:
        _emit(Text.assemble(_get_indent(), StatusIcons.INFO, " ", message))


def debug(message: str) -> None:
    """Print a dimmed line (a ::debug:: command under GitHub Actions)."""
    message = redact(message)
    if in_github_actions():
        _emit(f"::debug::{message}")
    else:
        _emit(Text(f"{_get_indent()}  {message}", style="dim"))


def warning(message: str) -> None:
    """Print a warning."""
    message = redact(message)
    if in_github_actions():
        _emit(f"::warning::{message}")
    else:
        _emit(Text.assemble(_get_indent(), StatusIcons.WARNING, " ", Text(message, style="yellow")))


def error(message: str) -> None:
    """Print an error without failing the run."""
    message = redact(message)
    if in_github_actions():
        _emit(f"::error::{message}")
    else:
        _emit(Text.assemble(_get_indent(), StatusIcons.FAILED, " ", Text(message, style="red")))


def print_command(command: List[str]) -> None:
    """Echo a command line about to be executed."""
    line = redact(" ".join(command))
    if in_github_actions():
        _emit(f"[command]{line}")
    else:
        _emit(Text(f"{_get_indent()}$ {line}", style="dim"))


def print_output(output: str) -> None:
    """Echo captured process output, line by line."""
    for line in output.splitlines():
        if line.strip():
            debug(line)


# =============================================================================
# Groups
# =============================================================================


@contextmanager
def group(name: str) -> Generator[None, None, None]:
    """Fold everything printed inside the block under a named group.

    GitHub Actions does not support nested groups, so only the outermost
    group emits workflow commands.
    """
    name = redact(name)
    outermost = _state.indent_level == 0

    if in_github_actions():
        if outermost:
            _emit(f"::group::{name}")
    else:
        _emit(Text.assemble(_get_indent(), StatusIcons.GROUP, " ", Text(name, style="bold")))

    _state.indent_level += 1
    try:
        yield
    finally:
        _state.indent_level -= 1
        if in_github_actions() and outermost:
            _emit("::endgroup::")


# =============================================================================
# Run outcome
# =============================================================================


def print_phase_complete(phase: str) -> None:
    """Print the success line for a lifecycle phase."""
    message = f"Action {phase} completed successfully"
    if in_github_actions():
        _emit(message)
    else:
        _emit(Text.assemble(StatusIcons.SUCCESS, " ", Text(message, style="green")))


def set_failed(message: str) -> None:
    """Report the run as failed.

    Under GitHub Actions this is an ::error:: annotation; the caller is
    responsible for the non-zero exit status.
    """
    message = redact(message)
    if in_github_actions():
        _emit(f"::error::{message}")
    else:
        _emit(Text.assemble(StatusIcons.FAILED, " ", Text(f"Error: {message}", style="bold red")))
